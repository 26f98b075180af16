"""Request and result schemas for project scaffolding."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .naming import validate_project_name


class ConflictKind(str, Enum):
    """Pre-existing filesystem state that blocks scaffold creation."""

    TARGET_NOT_A_DIRECTORY = "target_not_a_directory"
    DIRECTORY_NOT_EMPTY = "directory_not_empty"
    FILE_ALREADY_EXISTS = "file_already_exists"


class FailureKind(str, Enum):
    """Failures that are not conflicts with existing state."""

    INVALID_REQUEST = "invalid_request"
    IO_ERROR = "io_error"


class ScaffoldRequest(BaseModel):
    """A validated request to create a new API project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Name of the directory to create.")
    parent_dir: Path = Field(..., description="Existing, writable directory that will hold the project.")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("parent_dir")
    @classmethod
    def _check_parent_dir(cls, value: Path) -> Path:
        value = value.expanduser()
        try:
            exists = value.exists()
            is_dir = exists and value.is_dir()
        except OSError as exc:
            raise ValueError(f"parent directory '{value}' cannot be inspected: {exc.strerror or exc}") from exc
        if not exists:
            raise ValueError(f"parent directory '{value}' does not exist")
        if not is_dir:
            raise ValueError(f"parent directory '{value}' is not a directory")
        if not os.access(value, os.W_OK | os.X_OK):
            raise ValueError(f"parent directory '{value}' is not writable")
        return value

    @property
    def target_dir(self) -> Path:
        return self.parent_dir / self.project_name


class ProjectCreated(BaseModel):
    """The template was copied into a new project directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["created"] = "created"
    path: str = Field(..., description="Display path of the created file.")

    @property
    def ok(self) -> bool:
        return True


class ProjectConflict(BaseModel):
    """Scaffolding stopped because of existing state on disk."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["conflict"] = "conflict"
    kind: ConflictKind
    path: str = Field(..., description="Display path of the offending entry.")
    message: str

    @property
    def ok(self) -> bool:
        return False


class ProjectFailed(BaseModel):
    """Scaffolding was rejected or the filesystem reported an error."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["failed"] = "failed"
    kind: FailureKind
    message: str
    path: str | None = Field(None, description="Display path involved in the failure, if any.")
    cause: str | None = Field(None, description="Underlying error reported by the system.")

    @property
    def ok(self) -> bool:
        return False


ScaffoldResult = Annotated[
    Union[ProjectCreated, ProjectConflict, ProjectFailed],
    Field(discriminator="status"),
]

SCAFFOLD_RESULT_ADAPTER: TypeAdapter[ScaffoldResult] = TypeAdapter(ScaffoldResult)


__all__ = [
    "ConflictKind",
    "FailureKind",
    "ProjectConflict",
    "ProjectCreated",
    "ProjectFailed",
    "SCAFFOLD_RESULT_ADAPTER",
    "ScaffoldRequest",
    "ScaffoldResult",
]
