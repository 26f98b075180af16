from __future__ import annotations

from pathlib import Path

from plumbkit.aliasing import HomePathAliaser


def test_paths_inside_home_are_abbreviated(tmp_path: Path):
    aliaser = HomePathAliaser(home=tmp_path)
    assert aliaser.create_aliased_path(tmp_path / "apis" / "plumber.R") == "~/apis/plumber.R"
    assert aliaser.create_aliased_path(tmp_path) == "~"


def test_paths_outside_home_are_absolute(tmp_path: Path):
    aliaser = HomePathAliaser(home=tmp_path / "home")
    other = tmp_path / "elsewhere" / "plumber.R"
    assert aliaser.create_aliased_path(other) == other.as_posix()


def test_resolve_expands_tilde(tmp_path: Path):
    aliaser = HomePathAliaser(home=tmp_path)
    assert aliaser.resolve_aliased_path("~") == tmp_path
    assert aliaser.resolve_aliased_path("~/apis") == tmp_path / "apis"
    assert aliaser.resolve_aliased_path("/srv/apis") == Path("/srv/apis")
