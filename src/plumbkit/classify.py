"""Detect plumber API sources from their file name and contents."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePath

from .naming import file_stem, is_r_source

__all__ = [
    "ENTRYPOINT_STEM",
    "EXTENDED_TYPE_ENTRYPOINT",
    "EXTENDED_TYPE_FILE",
    "FileRole",
    "classify",
    "classify_path",
    "detect_extended_type",
    "role_from_extended_type",
]


ENTRYPOINT_STEM = "entrypoint"

EXTENDED_TYPE_FILE = "plumber-file"
EXTENDED_TYPE_ENTRYPOINT = "plumber-entrypoint"

ANNOTATION_VERBS = (
    "get",
    "put",
    "post",
    "filter",
    "assets",
    "use",
    "delete",
    "head",
    "options",
    "patch",
)

# A roxygen style comment (#' or #*) tagging a route, filter or asset mount.
_ANNOTATION_PATTERN = re.compile(
    rf"^#['*]\s*@({'|'.join(ANNOTATION_VERBS)})\s",
    re.MULTILINE,
)


class FileRole(str, Enum):
    """Semantic role of a source file within a plumber project."""

    NONE = "none"
    ANNOTATED_FILE = "annotated"
    ENTRYPOINT = "entrypoint"


def classify(base_name: str, content: str) -> FileRole:
    """Return the :class:`FileRole` for a file.

    Parameters
    ----------
    base_name:
        The file name with its extension already removed. ``entrypoint`` is
        reserved and wins regardless of ``content``.
    content:
        The full text of the file. Any line starting with an annotation such
        as ``#* @get /echo`` marks the file as an annotated API source.
    """

    if base_name == ENTRYPOINT_STEM:
        return FileRole.ENTRYPOINT

    if _ANNOTATION_PATTERN.search(content):
        return FileRole.ANNOTATED_FILE

    return FileRole.NONE


def classify_path(path: str | PurePath, content: str) -> FileRole:
    """Classify ``content`` using the stem of ``path`` as the base name."""

    return classify(file_stem(path), content)


_EXTENDED_TYPES = {
    FileRole.NONE: "",
    FileRole.ANNOTATED_FILE: EXTENDED_TYPE_FILE,
    FileRole.ENTRYPOINT: EXTENDED_TYPE_ENTRYPOINT,
}


def detect_extended_type(path: str | PurePath | None, content: str) -> str:
    """Return the extended source type an editor attaches to a document.

    Only R sources with a known path are considered; anything else yields an
    empty string.
    """

    if not path or not is_r_source(path):
        return ""
    return _EXTENDED_TYPES[classify_path(path, content)]


def role_from_extended_type(extended_type: str) -> FileRole:
    """Map an extended source type back to its :class:`FileRole`."""

    if extended_type == EXTENDED_TYPE_FILE:
        return FileRole.ANNOTATED_FILE
    if extended_type == EXTENDED_TYPE_ENTRYPOINT:
        return FileRole.ENTRYPOINT
    return FileRole.NONE
