"""
envpick env select command.

SUMMARY: Select a configuration and output its export statements

Outputs exports for a configuration without persisting the choice.
Prompts interactively if the name is omitted:

    eval "$(envpick env select myconfig)"
    eval "$(envpick env select)"
"""

from __future__ import annotations

import argparse

from envpick.cli import (
    OutputFormatter,
    add_config_name_arg,
    add_namespace_flag,
    choose_config,
    load_engine,
)

SUMMARY = "Select a configuration and output its export statements"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_config_name_arg(parser, "Configuration to export (prompts with fzf when omitted)")
    add_namespace_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Print export statements for the chosen configuration (state untouched)."""
    formatter = OutputFormatter()
    engine = load_engine(args)

    selected = args.name or choose_config(engine)
    formatter.lines(engine.exports(engine.resolve(selected)))
    return 0
