"""
envpick env command group.

SUMMARY: Output current config as exports

Prints the active configuration's variables as shell export statements.
Usage in shell profile (.zshrc, .bashrc):

    eval "$(envpick env)"
"""

from __future__ import annotations

import argparse

from envpick.cli import OutputFormatter, add_namespace_flag, load_engine
from envpick.core.exceptions import NoCurrentConfigError

SUMMARY = "Output current config as exports"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_namespace_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Print export statements for the active configuration."""
    formatter = OutputFormatter()
    engine = load_engine(args)

    full_name = engine.current_full()
    if not full_name:
        raise NoCurrentConfigError(engine.namespace)

    formatter.lines(engine.exports(full_name))
    return 0
