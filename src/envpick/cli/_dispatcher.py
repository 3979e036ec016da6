# PYTHON_ARGCOMPLETE_OK
"""
Auto-discovery CLI dispatcher for envpick.

Scans the cli package for commands and automatically registers them:
- cli/commands/<name>.py          => `envpick <name>`
- cli/<group>/__init__.py         => `envpick <group>` (when it defines main)
- cli/<group>/<name>.py           => `envpick <group> <name>`

Adding new commands = just add a .py file to the appropriate place. Each
command module exposes SUMMARY, register_args(parser) and main(args) -> int.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

import argcomplete

from envpick.cli._args import add_config_dir_flag, add_namespace_flag, add_verbose_flag
from envpick.cli._output import OutputFormatter
from envpick.core.exceptions import EnvpickError, SelectionCancelledError
from envpick.core.stdlib_logging import configure_stderr_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def _command_info(module: Any, default_summary: str) -> dict[str, Any]:
    return {
        "module": module,
        "summary": getattr(module, "SUMMARY", default_summary),
        "register_args": getattr(module, "register_args", None),
        "main": getattr(module, "main", None),
    }


@lru_cache(maxsize=1)
def discover_root_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands (no group prefix)."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    if not commands_dir.exists():
        return commands

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        module = importlib.import_module(f"envpick.cli.commands.{cmd_name}")
        commands[cmd_name] = _command_info(module, cmd_name)

    return commands


@lru_cache(maxsize=1)
def discover_groups() -> dict[str, dict[str, Any]]:
    """Discover command groups (packages under cli/ other than commands/).

    Returns:
        Dict mapping group name -> dict with:
          - summary: group help text (SUMMARY or first docstring line)
          - register_args / main: optional handler for the bare group command
          - commands: subcommand mapping (same shape as discover_root_commands())
    """
    cli_dir = Path(__file__).parent
    groups: dict[str, dict[str, Any]] = {}

    for subdir in sorted(cli_dir.iterdir()):
        if not subdir.is_dir() or subdir.name.startswith("_") or subdir.name == "commands":
            continue
        if not (subdir / "__init__.py").exists():
            continue

        pkg = importlib.import_module(f"envpick.cli.{subdir.name}")
        doc = (getattr(pkg, "__doc__", "") or "").strip()
        summary = getattr(pkg, "SUMMARY", doc.splitlines()[0] if doc else f"{subdir.name} commands")

        subcommands: dict[str, dict[str, Any]] = {}
        for item in sorted(subdir.glob("*.py")):
            if item.name.startswith("_"):
                continue
            module = importlib.import_module(f"envpick.cli.{subdir.name}.{item.stem}")
            subcommands[item.stem] = _command_info(module, f"{subdir.name} {item.stem}")

        group = _command_info(pkg, summary)
        group["commands"] = subcommands
        groups[subdir.name] = group

    return groups


def _register_command(
    subparsers: argparse._SubParsersAction,
    cmd_name: str,
    cmd_info: dict[str, Any],
) -> argparse.ArgumentParser:
    primary_name = cmd_name.replace("_", "-")
    aliases = [cmd_name] if primary_name != cmd_name else []
    cmd_parser = subparsers.add_parser(
        primary_name,
        aliases=aliases,
        help=cmd_info["summary"],
        description=cmd_info["summary"],
    )
    # Let module register its own arguments
    if cmd_info["register_args"]:
        cmd_info["register_args"](cmd_parser)
    # Set the main function as default handler
    if cmd_info["main"]:
        cmd_parser.set_defaults(_func=cmd_info["main"])
    return cmd_parser


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered commands and groups.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="envpick",
        description=(
            "Manage multiple environment variable configurations through a "
            "simple config file and interactive commands."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    add_verbose_flag(parser)
    add_config_dir_flag(parser)
    add_namespace_flag(parser, is_global=True)

    subparsers = parser.add_subparsers(
        dest="domain",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_root_commands().items()):
        _register_command(subparsers, cmd_name, cmd_info)

    for group_name, group_info in sorted(discover_groups().items()):
        group_parser = _register_command(subparsers, group_name, group_info)
        group_subparsers = group_parser.add_subparsers(
            dest="command",
            title="subcommands",
            metavar="<subcommand>",
        )
        for subcmd_name, subcmd_info in sorted(group_info["commands"].items()):
            _register_command(group_subparsers, subcmd_name, subcmd_info)

    return parser


def _get_version() -> str:
    """Get envpick version string."""
    from envpick import __version__

    return __version__


def _find_subparser(parser: argparse.ArgumentParser, name: str) -> argparse.ArgumentParser | None:
    for action in parser._actions:
        if isinstance(action, argparse._SubParsersAction):
            return action.choices.get(name)
    return None


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for envpick CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    # Exits early when invoked by the shell completion hook
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        configure_stderr_logging("DEBUG")

    # If no command specified, show help
    if not args.domain:
        parser.print_help()
        return EXIT_OK

    # Group invoked without a subcommand and without its own handler
    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        group_parser = _find_subparser(parser, args.domain)
        (group_parser or parser).print_help()
        return EXIT_OK

    formatter = OutputFormatter(json_mode=bool(getattr(args, "json", False)))
    try:
        return func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except SelectionCancelledError as e:
        formatter.error(e)
        return EXIT_INTERRUPTED
    except EnvpickError as e:
        logger.debug("Command %r failed", args.domain, exc_info=True)
        formatter.error(e)
        return EXIT_ERROR
    except Exception as e:
        logger.debug("Command %r crashed", args.domain, exc_info=True)
        formatter.error(e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
