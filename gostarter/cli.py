"""gostarter command line entry point.

Runs the interactive wizard, then scaffolds the Go project.

Usage::

    gostarter
    gostarter --user alice --name demo1 --framework gin --database sqlite --yes
    python -m gostarter.cli -o ~/src
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from gostarter.collector import ConfigCollector
from gostarter.config import Config
from gostarter.scaffolder import Database, Framework, MaterializeError, ProjectMaterializer
from gostarter.utils import (
    console,
    print_error,
    print_next_steps,
    print_project_summary,
    print_success,
    print_warning,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gostarter",
        description="gostarter -- scaffold a Go web service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Any option left out is asked interactively.\n\n"
            "Examples:\n"
            "  gostarter\n"
            "  gostarter --user alice --name demo1 --framework gin --database sqlite\n"
            "  gostarter --framework echo --logging -o ./services\n"
        ),
    )
    parser.add_argument("--user", dest="github_user_id", help="GitHub user id")
    parser.add_argument("--name", dest="project_name", help="Project name")
    parser.add_argument(
        "--framework",
        choices=[f.value for f in Framework],
        help="Go HTTP framework",
    )
    parser.add_argument(
        "--database",
        choices=[d.value for d in Database],
        help="Database adapter",
    )
    parser.add_argument(
        "--logging",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable the request logging middleware (Echo only)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Create the project without the final confirmation",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory in which the project folder is created (default: current directory)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for ``gostarter``."""
    args = build_parser().parse_args(argv)
    collector = ConfigCollector(console)

    console.print("[bold magenta]gostarter[/bold magenta] -- new Go project\n")

    try:
        settings = Config.from_env()
    except ValueError as exc:
        print_error(f"Error: invalid GOSTARTER_* environment: {exc}")
        return EXIT_USAGE

    try:
        config = collector.collect(
            github_user_id=args.github_user_id,
            project_name=args.project_name,
            framework=args.framework,
            database=args.database,
            logging=args.logging,
        )
        if not args.yes and not collector.confirm_creation(config):
            print_warning("Aborted, nothing was created.")
            return EXIT_OK
    except ValueError as exc:
        print_error(f"Error: {exc}")
        return EXIT_USAGE
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_warning("Aborted, nothing was created.")
        return EXIT_INTERRUPTED

    output_dir = Path(args.output) if args.output else None
    materializer = ProjectMaterializer(config, settings)

    try:
        result = asyncio.run(materializer.materialize(output_dir))
    except MaterializeError as exc:
        print_error(f"Error: {exc}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        console.print()
        print_warning("Interrupted; files already written were left in place.")
        return EXIT_INTERRUPTED

    console.print()
    if args.yes:
        # Without --yes the panel was already shown before the confirmation.
        print_project_summary(config)
    print_success(f"Project created at {result.project_root}")
    print_next_steps(result.project_root)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
