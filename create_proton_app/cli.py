"""Command-line entry point for ``create-proton-app``.

Usage::

    create-proton-app my-app
    create-proton-app my-app --verbose
    python -m create_proton_app my-app --package-manager yarn
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from . import PACKAGE_NAME, __version__
from .config import PACKAGE_MANAGERS, Config
from .errors import ScaffoldError
from .runtime import ensure_supported_python
from .pipeline import ScaffoldPipeline
from .reporter import print_error_message, print_success_message


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        usage="%(prog)s <project-name> [options]",
        description="Create a new Proton Native app.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Example:\n"
            "\n"
            f"  $ {PACKAGE_NAME} my-app\n"
        ),
    )
    parser.add_argument(
        "project_name",
        metavar="project-name",
        nargs="?",
        default=None,
        help="Directory to create the app in (relative or absolute)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print additional logs",
    )
    parser.add_argument(
        "--package-manager",
        choices=PACKAGE_MANAGERS,
        default=None,
        help="Package manager used to install dependencies (default: npm)",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"{PACKAGE_NAME} {__version__}",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse *argv* (default ``sys.argv[1:]``) and return the namespace."""
    return build_parser().parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    ensure_supported_python()

    args = parse_args(argv)

    if args.project_name is None:
        print_error_message("No directory specified ...")
        return 1

    try:
        config = Config.from_env(package_manager=args.package_manager)
    except ValueError as exc:
        print_error_message(f"Invalid configuration: {exc}")
        return 1

    try:
        pipeline = ScaffoldPipeline(config, verbose=args.verbose)
        result = asyncio.run(pipeline.run(args.project_name))
    except ScaffoldError as exc:
        print_error_message(exc.message)
        return 1

    print_success_message(result.project_root, result.project_name, config.package_manager)
    return 0


def run() -> None:
    """Console-script entry point."""
    raise SystemExit(main())


if __name__ == "__main__":
    run()
