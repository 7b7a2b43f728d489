"""CLI entrypoint for gitmoji-release commands."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from rich.console import Console

from gitmoji_release import __version__
from gitmoji_release.cli.commands.artifact import run_resolve_artifact
from gitmoji_release.cli.commands.bump import run_bump
from gitmoji_release.cli.commands.notes import run_notes
from gitmoji_release.cli.commands.prepare import run_prepare
from gitmoji_release.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitmoji-release",
        description="Decide the next release from gitmoji commits and prepare its artifact.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Path to the project (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("bump", help="Show the bump type and next version.")

    notes_parser = subparsers.add_parser("notes", help="Print release notes since the last tag.")
    notes_parser.add_argument(
        "--release-version",
        dest="release_version",
        default=None,
        help="Version for the notes heading (defaults to the computed next version).",
    )

    artifact_parser = subparsers.add_parser(
        "resolve-artifact",
        help="Rename the built artifact to its canonical release name.",
    )
    artifact_parser.add_argument(
        "--release-version",
        dest="release_version",
        required=True,
        help="Release version embedded in the artifact name.",
    )
    artifact_parser.add_argument(
        "--output-dir",
        default=None,
        help="Build output directory (defaults to the configured one).",
    )

    prepare_parser = subparsers.add_parser(
        "prepare",
        help="Compute the release, update the changelog and resolve the artifact.",
    )
    prepare_parser.add_argument(
        "--execute",
        action="store_true",
        help="Apply changes instead of previewing them.",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)
    configure_logging(verbose=args.verbose, console=err_console)

    try:
        if args.command == "bump":
            run_bump(args.path, console, err_console)
        elif args.command == "notes":
            run_notes(args.path, args.release_version, console, err_console)
        elif args.command == "resolve-artifact":
            run_resolve_artifact(
                args.path, args.release_version, args.output_dir, console, err_console
            )
        elif args.command == "prepare":
            run_prepare(args.path, args.execute, console, err_console)
        else:  # pragma: no cover - argparse rejects unknown commands
            parser.error(f"Unknown command: {args.command}")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
