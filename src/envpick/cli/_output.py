"""Output helpers for envpick commands.

Text or JSON results go to stdout, which the shell often evaluates.
Failure messages go to stderr.
"""
from __future__ import annotations

import json
import sys
from typing import Any

from envpick.core.exceptions import EnvpickError

ERROR_PREFIX = "envpick"


class OutputFormatter:
    """Writes command results to stdout and failures to stderr."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def error(self, error: Exception) -> None:
        """Output error result on stderr.

        Args:
            error: The exception that occurred
        """
        msg = str(error)
        if self.json_mode:
            if isinstance(error, EnvpickError):
                payload = error.to_json_error()
            else:
                payload = {"message": msg, "code": error.__class__.__name__, "context": {}}
            print(json.dumps({"error": payload}, indent=self.indent, default=str), file=sys.stderr)
        else:
            print_error(msg)

    def json_output(self, data: Any) -> None:
        """Output raw JSON data."""
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        """Output plain text message."""
        print(message)

    def lines(self, lines: list[str]) -> None:
        """Output lines of text; nothing at all for an empty list."""
        if lines:
            print("\n".join(lines))


def print_error(message: str) -> None:
    """Print ``envpick: <message>`` on stderr."""
    print(f"{ERROR_PREFIX}: {message}", file=sys.stderr)


__all__ = [
    "OutputFormatter",
    "print_error",
]
