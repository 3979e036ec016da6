"""
envpick use command.

SUMMARY: Switch configuration persistently

Selects a configuration (interactively unless a name is given) and records
it as the active one for the namespace, so new shells pick it up through
`envpick env`.
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

SUMMARY = "Switch configuration persistently"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_config_name_arg(parser, "Configuration to activate (prompts with fzf when omitted)")
    add_namespace_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Persist the selected configuration for the namespace."""
    formatter = OutputFormatter()
    engine = load_engine(args)

    selected = args.name or choose_config(engine)
    engine.set_current(selected)

    if engine.namespace:
        formatter.text(f"Switched to configuration: {selected} (namespace: {engine.namespace})")
    else:
        formatter.text(f"Switched to configuration: {selected}")
    return 0

