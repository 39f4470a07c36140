"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_project_dir_flag(parser: argparse.ArgumentParser) -> None:
    """Add --project-dir flag (directory containing composer.json)."""
    parser.add_argument(
        "--project-dir",
        type=str,
        help="Composer project directory (default: current directory)",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug output",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json, --project-dir and --verbose."""
    add_json_flag(parser)
    add_project_dir_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_project_dir_flag",
    "add_verbose_flag",
    "add_standard_flags",
]
