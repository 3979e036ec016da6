"""Flags shared by several envpick commands.

Every command that reads configurations accepts ``--namespace``; the root
parser also owns ``--verbose`` and ``--config-dir``.
"""
from __future__ import annotations

import argparse

from envpick.cli._utils import complete_config_names


def add_namespace_flag(parser: argparse.ArgumentParser, *, is_global: bool = False) -> None:
    """Add --namespace/-n flag.

    The root parser owns the default (``""``). Per-command copies use
    ``argparse.SUPPRESS`` so they only set the value when given and never
    reset a namespace passed before the command name.

    Args:
        parser: ArgumentParser to add the flag to
        is_global: True for the root parser
    """
    parser.add_argument(
        "--namespace",
        "-n",
        dest="namespace",
        metavar="NS",
        default="" if is_global else argparse.SUPPRESS,
        help="filter configurations by namespace (e.g., 'db' for db.local, db.prod)",
    )


def add_config_dir_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config-dir flag for configuration directory override.

    Args:
        parser: ArgumentParser to add the flag to
    """
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Override the envpick configuration directory (default: ~/.envpick)",
    )


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json so results print as a JSON document."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    """Add --verbose/-v (debug logs on stderr)."""
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )


def add_config_name_arg(
    parser: argparse.ArgumentParser,
    help_text: str = "Configuration name within the namespace",
) -> None:
    """Add optional configuration name positional argument.

    Commands prompt interactively when the name is omitted. Shell completion
    offers the configurations of the selected namespace.

    Args:
        parser: ArgumentParser to add the argument to
        help_text: Help text for the argument
    """
    action = parser.add_argument("name", nargs="?", help=help_text)
    action.completer = complete_config_names  # type: ignore[attr-defined]


__all__ = [
    "add_namespace_flag",
    "add_config_dir_flag",
    "add_json_flag",
    "add_verbose_flag",
    "add_config_name_arg",
]
