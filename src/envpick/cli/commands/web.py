"""
envpick web command.

SUMMARY: Open config web URL

Selects a configuration and opens the URL stored in its `_web_url`
metadata key in the default browser.
"""

from __future__ import annotations

import argparse

from envpick.cli import OutputFormatter, add_config_name_arg, add_namespace_flag, choose_config, load_engine
from envpick.core.launch import open_browser

SUMMARY = "Open config web URL"
SELECT_WEB_URL_PROMPT = "Select configuration to open web URL:"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_config_name_arg(parser, "Configuration whose URL to open (prompts with fzf when omitted)")
    add_namespace_flag(parser)


def main(args: argparse.Namespace) -> int:
    """Open the selected configuration's web URL."""
    formatter = OutputFormatter()
    engine = load_engine(args)

    selected = args.name or choose_config(
        engine,
        SELECT_WEB_URL_PROMPT,
        empty_message="no configurations found",
    )
    url = engine.web_url(engine.resolve(selected))
    open_browser(url)

    formatter.text(f"Opened: {url}")
    return 0
