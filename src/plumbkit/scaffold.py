"""Create new plumber API projects from the bundled template."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from .aliasing import HomePathAliaser, PathAliaser
from .config import ScaffoldSettings
from .errors import ScaffoldConflictError, ScaffoldError, ScaffoldIOError
from .schema import (
    ConflictKind,
    FailureKind,
    ProjectConflict,
    ProjectCreated,
    ProjectFailed,
    ScaffoldRequest,
    ScaffoldResult,
)

__all__ = ["PermissionsChangedCallback", "ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)

PermissionsChangedCallback = Callable[[Path], None]


def _copy_preserving_mode(source: Path, target: Path) -> None:
    # Stage next to the target; the hard link refuses to replace an existing file.
    fd, staging_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    os.close(fd)
    staging = Path(staging_name)
    try:
        shutil.copyfile(source, staging)
        shutil.copymode(source, staging)
        os.link(staging, target)
    finally:
        with suppress(FileNotFoundError):
            staging.unlink()


class ProjectScaffolder:
    """Materialise a new API project directory containing ``plumber.R``."""

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        *,
        aliaser: PathAliaser | None = None,
        on_permissions_changed: PermissionsChangedCallback | None = None,
    ) -> None:
        self.settings = settings or ScaffoldSettings.default()
        self.aliaser = aliaser or HomePathAliaser()
        self._on_permissions_changed = on_permissions_changed

    def _display(self, path: Path) -> str:
        return self.aliaser.create_aliased_path(path)

    def _conflict(self, kind: ConflictKind, message: str, path: Path) -> ScaffoldConflictError:
        LOGGER.info("scaffold conflict (%s): %s", kind.value, message)
        return ScaffoldConflictError(kind, message, path)

    def _inspection_failed(self, path: Path, exc: OSError) -> ScaffoldIOError:
        LOGGER.error("could not inspect %s", path, exc_info=exc)
        return ScaffoldIOError(f"Failed to inspect '{self._display(path)}'", path)

    def _file_exists(self, target_file: Path) -> ScaffoldConflictError:
        return self._conflict(
            ConflictKind.FILE_ALREADY_EXISTS,
            f"The file '{self._display(target_file)}' already exists",
            target_file,
        )

    def _check_existing_directory(self, target_dir: Path) -> None:
        shown = self._display(target_dir)
        if not target_dir.is_dir():
            raise self._conflict(
                ConflictKind.TARGET_NOT_A_DIRECTORY,
                f"The directory '{shown}' already exists and is not a directory",
                target_dir,
            )

        try:
            has_children = any(target_dir.iterdir())
        except OSError:
            # An unreadable directory cannot be proven empty.
            LOGGER.error("could not list %s", target_dir, exc_info=True)
            has_children = True

        if has_children:
            raise self._conflict(
                ConflictKind.DIRECTORY_NOT_EMPTY,
                f"The directory '{shown}' already exists and is not empty",
                target_dir,
            )

    def create(self, request: ScaffoldRequest) -> Path:
        """Create the project described by ``request`` and return the new file.

        Conflicts with existing state are checked first, then the template is
        located, and only then is anything written. Raises
        :class:`~plumbkit.errors.ScaffoldConflictError` when existing state
        blocks creation and :class:`~plumbkit.errors.ScaffoldIOError` when the
        filesystem fails or the template is missing. A failing
        permissions-changed callback is logged; the created file is still
        returned.
        """

        target_dir = request.target_dir
        try:
            target_dir_exists = target_dir.exists()
            if target_dir_exists:
                self._check_existing_directory(target_dir)
        except OSError as exc:
            raise self._inspection_failed(target_dir, exc) from exc

        template = self.settings.template_path()
        if not template.is_file():
            raise ScaffoldIOError(
                f"Template '{template}' is not available",
                template,
            ) from FileNotFoundError(template)

        if not target_dir_exists:
            try:
                target_dir.mkdir()
            except OSError as exc:
                LOGGER.exception("failed to create %s", target_dir)
                raise ScaffoldIOError(
                    f"Failed to create directory '{self._display(target_dir)}'",
                    target_dir,
                ) from exc

        target_file = target_dir / self.settings.template_name
        try:
            target_file_exists = target_file.exists()
        except OSError as exc:
            raise self._inspection_failed(target_file, exc) from exc
        if target_file_exists:
            raise self._file_exists(target_file)

        try:
            _copy_preserving_mode(template, target_file)
        except FileExistsError as exc:
            raise self._file_exists(target_file) from exc
        except OSError as exc:
            LOGGER.exception("failed to copy %s to %s", template, target_file)
            raise ScaffoldIOError(
                f"Failed to write '{self._display(target_file)}'",
                target_file,
            ) from exc

        if self._on_permissions_changed is not None:
            try:
                self._on_permissions_changed(target_file)
            except Exception:
                LOGGER.exception("permissions-changed callback failed for %s", target_file)

        LOGGER.info("created %s from %s", target_file, template)
        return target_file

    def create_project(self, project_name: str, parent_dir: str | Path) -> ScaffoldResult:
        """Create a project and report the outcome as a :data:`ScaffoldResult`.

        ``parent_dir`` may be given in its aliased form (``~/apis``). Invalid
        input, conflicts and filesystem failures are all returned, never raised.
        """

        parent = self.aliaser.resolve_aliased_path(str(parent_dir))
        try:
            request = ScaffoldRequest(project_name=project_name, parent_dir=parent)
        except ValidationError as exc:
            message = "; ".join(error["msg"] for error in exc.errors())
            LOGGER.info("rejected scaffold request for %r in %s: %s", project_name, parent, message)
            return ProjectFailed(kind=FailureKind.INVALID_REQUEST, message=message)

        try:
            created = self.create(request)
        except ScaffoldConflictError as exc:
            return ProjectConflict(kind=exc.kind, path=self._display(exc.path), message=str(exc))
        except ScaffoldError as exc:
            cause = exc.__cause__
            return ProjectFailed(
                kind=FailureKind.IO_ERROR,
                message=str(exc),
                path=self._display(exc.path),
                cause=str(cause) if cause is not None else None,
            )

        return ProjectCreated(path=self._display(created))
