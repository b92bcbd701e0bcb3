#!/usr/bin/env python3
"""Interactive generator for LICENSE files from bundled SPDX templates."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .context import Context
from .errors import GenerateLicenseError
from .generated.choices import CHOICES
from .tasks import Session, TaskTable, register_tasks

logger = logging.getLogger(__name__)


def display_license_list(table: TaskTable) -> None:
    width = max(len(choice["id"]) for choice in CHOICES)
    for choice in CHOICES:
        deps = ", ".join(table[choice["id"]].deps)
        dep_text = f" (deps: {deps})" if deps else ""
        print(f"{choice['id'].ljust(width)} - {choice['name']}{dep_text}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="generate-license",
        description="Generate a LICENSE file from bundled SPDX license templates.",
    )
    parser.add_argument(
        "task",
        nargs="?",
        default="default",
        help="Task to run: default, choose, create, create-tasks, create-choices or a license id (e.g. mit)",
    )
    parser.add_argument("--dest", help="Directory the LICENSE file is written to (default: working directory)")
    parser.add_argument("--cwd", help="Working directory for generated support modules")
    parser.add_argument("--templates", help="Directory scanned by the create-* tasks")
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite LICENSE if it exists")
    parser.add_argument("--list", action="store_true", help="List supported licenses and exit")
    parser.add_argument("--filter", dest="query", help="Only offer licenses whose name or id match this pattern")
    parser.add_argument(
        "--defaults",
        action="store_true",
        help="Skip prompts by using default values wherever possible",
    )
    parser.add_argument("--year", help="Override the copyright year")
    parser.add_argument("--author", help="Override the author/copyright holder")
    parser.add_argument("--email", help="Override contact email")
    parser.add_argument(
        "--set",
        action="append",
        metavar="KEY=VALUE",
        default=[],
        help="Set an arbitrary template value (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser.parse_args(argv)


def build_cli_overrides(args: argparse.Namespace) -> Context:
    overrides: Context = {}

    def push(value: Optional[str], key: str) -> None:
        if value is None:
            return
        trimmed = value.strip()
        if trimmed:
            overrides[key] = trimmed

    push(args.year, "year")
    push(args.author, "author")
    push(args.email, "email")

    for assignment in getattr(args, "set", []) or []:
        if "=" not in assignment:
            raise ValueError(f"Invalid --set value '{assignment}'. Expected KEY=VALUE.")
        key, value = assignment.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError("Override key cannot be empty.")
        overrides[key] = value.strip()

    return overrides


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    table = register_tasks()
    if args.list:
        display_license_list(table)
        return 0
    try:
        overrides = build_cli_overrides(args)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    session = Session(
        cwd=Path(args.cwd).expanduser() if args.cwd else Path.cwd(),
        dest=Path(args.dest).expanduser() if args.dest else None,
        force=args.force,
        skip_prompts=bool(args.defaults or not sys.stdin.isatty()),
        overrides=overrides,
        query=args.query,
    )
    if args.templates:
        session.templates_dir = Path(args.templates).expanduser()
    try:
        table.run(args.task, session)
    except GenerateLicenseError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        logger.debug("I/O failure", exc_info=True)
        print(f"Failed to generate: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
