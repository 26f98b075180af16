"""File and project name helpers used throughout the project."""

from __future__ import annotations

import re
from pathlib import Path, PurePath

__all__ = ["file_stem", "is_r_source", "validate_project_name"]


_R_SUFFIXES = frozenset({".R", ".r"})
_SEPARATORS = re.compile(r"[/\\]")


def file_stem(path: str | PurePath) -> str:
    """Return the base name of ``path`` with its final extension removed.

    ``entrypoint.R`` becomes ``entrypoint`` and ``api.test.R`` becomes
    ``api.test``. Leading dots are kept, so ``.Rprofile`` is its own stem.
    """

    return PurePath(path).stem


def is_r_source(path: str | PurePath) -> bool:
    """Return ``True`` when ``path`` carries an R source file extension."""

    return PurePath(path).suffix in _R_SUFFIXES


def validate_project_name(name: str) -> str:
    """Return ``name`` stripped of surrounding whitespace.

    The project directory is always created as a single leaf below its
    parent, so names that would escape or nest are rejected with
    :class:`ValueError`.
    """

    candidate = name.strip()
    if not candidate:
        raise ValueError("project name must not be empty")
    if candidate in {".", ".."}:
        raise ValueError(f"'{candidate}' is not a valid project name")
    if _SEPARATORS.search(candidate) or Path(candidate).name != candidate:
        raise ValueError(f"project name '{candidate}' must not contain path separators")
    if "\x00" in candidate:
        raise ValueError("project name must not contain NUL characters")
    return candidate
