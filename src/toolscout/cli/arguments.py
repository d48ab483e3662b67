"""Argument parsing for the toolscout CLI."""

from __future__ import annotations

import argparse
from pathlib import Path

from toolscout.core.models import HookSystem, PackageManager

PLAN_CHOICES = ["bootstrap", "verify", "all"]


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show toolscout version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging output to errors only.",
    )


def _add_project_options(parser: argparse.ArgumentParser) -> None:
    """Options shared by every subcommand that works on a project."""
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root (default: current directory).",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .toolscout.yml in project root).",
    )


def _add_override_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--package-manager",
        choices=[pm.value for pm in PackageManager],
        default=None,
        help="Use this package manager instead of detecting it.",
    )
    parser.add_argument(
        "--hook-system",
        choices=[hs.value for hs in HookSystem],
        default=None,
        help="Use this hook system instead of detecting it.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the toolscout argument parser."""
    parser = argparse.ArgumentParser(
        prog="toolscout",
        description="toolscout - detect a project's package manager and git hook system.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    # detect
    detect = subparsers.add_parser(
        "detect",
        help="Detect the package manager and hook system of a project.",
    )
    _add_project_options(detect)
    _add_override_options(detect)
    detect.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )

    # plan
    plan = subparsers.add_parser(
        "plan",
        help="Print the command lines for bootstrapping or verifying a checkout.",
    )
    _add_project_options(plan)
    _add_override_options(plan)
    plan.add_argument(
        "--only",
        choices=PLAN_CHOICES,
        default="all",
        help="Which plan to print (default: all).",
    )

    # changeset
    changeset = subparsers.add_parser(
        "changeset",
        help="Create or list changeset entries.",
    )
    changeset_sub = changeset.add_subparsers(dest="changeset_action", metavar="<action>")

    changeset_add = changeset_sub.add_parser("add", help="Write a new changeset file.")
    _add_project_options(changeset_add)
    changeset_add.add_argument(
        "--package",
        action="append",
        dest="packages",
        metavar="NAME:BUMP",
        help="Package and bump level, e.g. my-lib:minor (can be repeated).",
    )
    changeset_add.add_argument(
        "--summary",
        default=None,
        help="Changeset summary text.",
    )
    changeset_add.add_argument(
        "--name",
        default=None,
        help="File name without extension (default: generated).",
    )
    changeset_add.add_argument(
        "--non-interactive",
        action="store_true",
        help="Never prompt; fail if required values are missing.",
    )

    changeset_list = changeset_sub.add_parser("list", help="List pending changesets.")
    _add_project_options(changeset_list)

    # sync
    sync = subparsers.add_parser(
        "sync",
        help="Mirror command documents into assistant command directories.",
    )
    _add_project_options(sync)
    sync.add_argument(
        "--source",
        default=None,
        help="Directory of command documents (default: commands/ in project root).",
    )
    sync.add_argument(
        "--target",
        action="append",
        dest="targets",
        metavar="DIR",
        help="Target directory (can be repeated; default: all assistant directories).",
    )
    sync.add_argument(
        "--exclude",
        action="append",
        metavar="PATTERN",
        help="Gitignore-style pattern of files to skip (can be repeated).",
    )
    sync.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would change without writing anything.",
    )

    return parser
