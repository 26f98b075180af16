from __future__ import annotations

import pytest

from plumbkit.naming import file_stem, is_r_source, validate_project_name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("entrypoint.R", "entrypoint"),
        ("api/plumber.R", "plumber"),
        ("api.test.R", "api.test"),
        ("Makefile", "Makefile"),
    ],
)
def test_file_stem(value, expected):
    assert file_stem(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("plumber.R", True), ("plumber.r", True), ("plumber.Rmd", False), ("R", False)],
)
def test_is_r_source(value, expected):
    assert is_r_source(value) is expected


def test_validate_project_name_strips_whitespace():
    assert validate_project_name("  myapi ") == "myapi"


@pytest.mark.parametrize("value", ["", "   ", ".", "..", "a/b", "a\\b", "/abs"])
def test_validate_project_name_rejects_invalid_names(value):
    with pytest.raises(ValueError):
        validate_project_name(value)
