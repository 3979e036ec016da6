"""
envpick edit command.

SUMMARY: Edit the configuration file

Opens the configuration file in $EDITOR (default: vi), creating the
configuration directory first if needed.
"""

from __future__ import annotations

import argparse

from envpick.cli import get_paths
from envpick.core.launch import open_in_editor
from envpick.core.utils.io import ensure_directory

SUMMARY = "Edit the configuration file"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments (none)."""


def main(args: argparse.Namespace) -> int:
    """Open the configuration file in the editor."""
    paths = get_paths(args)
    ensure_directory(paths.config_dir)
    open_in_editor(paths.config_file)
    return 0
