"""Configuration for locating the templates the scaffolder copies."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

__all__ = ["RESOURCES_ENV_VAR", "ScaffoldSettings", "default_resources_path"]


RESOURCES_ENV_VAR = "PLUMBKIT_RESOURCES_PATH"


def default_resources_path() -> Path:
    """Return the resource root bundled with the package."""

    return Path(__file__).resolve().parent / "resources"


@dataclass(frozen=True, slots=True)
class ScaffoldSettings:
    """Read-only location of the scaffold templates.

    Attributes
    ----------
    resources_path:
        The resource root shared by the whole process. It is never written to.
    template_subdir:
        Directory below :attr:`resources_path` holding the API templates.
    template_name:
        The single template copied into every new project. The copy keeps this
        file name.
    """

    resources_path: Path
    template_subdir: str = "templates/plumber"
    template_name: str = "plumber.R"

    @classmethod
    def default(cls) -> "ScaffoldSettings":
        return cls(resources_path=default_resources_path())

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> "ScaffoldSettings":
        """Build settings honouring the ``PLUMBKIT_RESOURCES_PATH`` override."""

        env = os.environ if environ is None else environ
        override = env.get(RESOURCES_ENV_VAR, "").strip()
        if not override:
            return cls.default()
        return cls(resources_path=Path(override).expanduser())

    def template_path(self, name: str | None = None) -> Path:
        """Return the path of template ``name`` (defaults to :attr:`template_name`)."""

        return self.resources_path / self.template_subdir / (name or self.template_name)
