"""Command line interface for the plumbkit utilities."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .classify import classify_path
from .config import ScaffoldSettings
from .scaffold import ProjectScaffolder
from .schema import ProjectConflict

EXIT_OK = 0
EXIT_CONFLICT = 1
EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plumbkit", description="Detect and scaffold plumber API projects"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress information"
    )
    parser.add_argument("--debug", action="store_true", help="Log debugging details")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser(
        "classify", help="report the plumber role of one or more source files"
    )
    classify_parser.add_argument("files", nargs="+", type=Path, help="Files to inspect")
    classify_parser.add_argument(
        "--json", action="store_true", help="Print the roles as a JSON list"
    )

    new_parser = subparsers.add_parser("new", help="create a new plumber API project")
    new_parser.add_argument("name", help="Name of the project directory")
    new_parser.add_argument(
        "-d",
        "--directory",
        default=str(Path.cwd()),
        help="Existing directory in which the project is created",
    )
    new_parser.add_argument(
        "--resources",
        type=Path,
        help="Resource root holding templates/plumber (defaults to the bundled one)",
    )
    new_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _handle_classify(args: argparse.Namespace) -> int:
    entries: list[dict[str, str]] = []
    for path in args.files:
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            sys.stderr.write(f"cannot read {path}: {exc.strerror or exc}\n")
            return EXIT_FAILURE
        entries.append({"path": str(path), "role": classify_path(path, content).value})

    if args.json:
        sys.stdout.write(json.dumps(entries, indent=2) + "\n")
    else:
        for entry in entries:
            sys.stdout.write(f"{entry['path']}\t{entry['role']}\n")
    return EXIT_OK


def _handle_new(args: argparse.Namespace) -> int:
    if args.resources is not None:
        settings = ScaffoldSettings(resources_path=args.resources)
    else:
        settings = ScaffoldSettings.from_environment()
    scaffolder = ProjectScaffolder(settings)
    result = scaffolder.create_project(args.name, args.directory)

    if args.json:
        sys.stdout.write(result.model_dump_json() + "\n")
    elif result.ok:
        print(f"Project created at {result.path}")
    else:
        sys.stderr.write(result.message + "\n")

    if result.ok:
        return EXIT_OK
    if isinstance(result, ProjectConflict):
        return EXIT_CONFLICT
    return EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    if args.command == "classify":
        return _handle_classify(args)
    if args.command == "new":
        return _handle_new(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
