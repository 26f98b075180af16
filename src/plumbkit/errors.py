"""Custom exception types raised by the project scaffolder."""

from __future__ import annotations

from pathlib import Path

from .schema import ConflictKind


class ScaffoldError(RuntimeError):
    """Raised when a project scaffold cannot be created."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ScaffoldConflictError(ScaffoldError):
    """Raised when existing state on disk makes scaffolding unsafe."""

    def __init__(self, kind: ConflictKind, message: str, path: Path) -> None:
        super().__init__(message, path)
        self.kind = kind


class ScaffoldIOError(ScaffoldError):
    """Raised when the filesystem refuses a directory creation or copy."""


__all__ = ["ScaffoldConflictError", "ScaffoldError", "ScaffoldIOError"]
