"""
envpick init bash command.

SUMMARY: Generate bash configuration

Add to ~/.bashrc:

    eval "$(envpick init bash)"
"""

from __future__ import annotations

import argparse
import sys

from envpick.core.shell import render_integration

SUMMARY = "Generate bash configuration"


def main(args: argparse.Namespace) -> int:
    sys.stdout.write(render_integration("bash"))
    return 0
