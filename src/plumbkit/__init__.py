"""Tooling for plumber API projects.

The package classifies R sources by the plumber annotations they carry (and
recognises the reserved ``entrypoint`` file), and ships a scaffolder that
creates a new API project from a bundled template without ever overwriting
existing files.
"""

from __future__ import annotations

from .aliasing import HomePathAliaser, PathAliaser
from .classify import FileRole, classify, classify_path, detect_extended_type, role_from_extended_type
from .config import ScaffoldSettings
from .errors import ScaffoldConflictError, ScaffoldError, ScaffoldIOError
from .scaffold import ProjectScaffolder
from .schema import (
    ConflictKind,
    FailureKind,
    ProjectConflict,
    ProjectCreated,
    ProjectFailed,
    ScaffoldRequest,
    ScaffoldResult,
)

__all__ = [
    "ConflictKind",
    "FailureKind",
    "FileRole",
    "HomePathAliaser",
    "PathAliaser",
    "ProjectConflict",
    "ProjectCreated",
    "ProjectFailed",
    "ProjectScaffolder",
    "ScaffoldConflictError",
    "ScaffoldError",
    "ScaffoldIOError",
    "ScaffoldRequest",
    "ScaffoldResult",
    "ScaffoldSettings",
    "classify",
    "classify_path",
    "detect_extended_type",
    "role_from_extended_type",
]

__version__ = "0.1.0"
