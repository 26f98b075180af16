"""Conversion between absolute paths and their user facing aliases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

__all__ = ["HomePathAliaser", "PathAliaser"]


class PathAliaser(ABC):
    """Render paths for display and resolve displayed paths back."""

    @abstractmethod
    def create_aliased_path(self, path: Path) -> str:
        """Return the display form of ``path``."""

    @abstractmethod
    def resolve_aliased_path(self, aliased: str) -> Path:
        """Return the absolute path that ``aliased`` refers to."""


class HomePathAliaser(PathAliaser):
    """Abbreviate paths inside the home directory with ``~``."""

    def __init__(self, home: Path | str | None = None):
        self._home = Path(home) if home is not None else Path.home()

    @property
    def home(self) -> Path:
        return self._home

    def create_aliased_path(self, path: Path) -> str:
        path = Path(path)
        try:
            relative = path.relative_to(self._home)
        except ValueError:
            return path.as_posix()
        if relative == Path("."):
            return "~"
        return f"~/{relative.as_posix()}"

    def resolve_aliased_path(self, aliased: str) -> Path:
        if aliased == "~":
            return self._home
        if aliased.startswith("~/"):
            return self._home / aliased[2:]
        return Path(aliased)
