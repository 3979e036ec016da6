"""
envpick init zsh command.

SUMMARY: Generate zsh configuration

Add to ~/.zshrc:

    eval "$(envpick init zsh)"

Sets up auto-loading and the 'ep' helper:
    ep use [flags] [name]  - Persistent selection
    ep tmp [flags] [name]  - Temporary selection
    ep <other>             - Pass through to envpick
"""

from __future__ import annotations

import argparse
import sys

from envpick.core.shell import render_integration

SUMMARY = "Generate zsh configuration"


def main(args: argparse.Namespace) -> int:
    sys.stdout.write(render_integration("zsh"))
    return 0
