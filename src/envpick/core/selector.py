"""Interactive selection through fzf.

fzf draws its UI on the terminal (stderr) and prints the chosen line on
stdout. Exit code 130 means the user aborted.
"""
from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Sequence

from envpick.core.engine import Option
from envpick.core.exceptions import (
    NoOptionsAvailableError,
    NoSelectionMadeError,
    SelectionCancelledError,
    SelectorError,
    SelectorNotFoundError,
)

logger = logging.getLogger(__name__)

FZF_BINARY = "fzf"
FZF_CANCELLED_EXIT_CODE = 130
ACTIVE_INDICATOR = " [*]"
PROMPT_SUFFIX = " "


def format_option(option: Option) -> str:
    """Render an option as a picker line."""
    if option.active:
        return f"{option.name}{ACTIVE_INDICATOR}"
    return option.name


def extract_name(line: str) -> str:
    """Recover the option name from a picker line."""
    parts = line.split()
    if parts:
        return parts[0]
    return line


def run_fzf(input_text: str, prompt: str) -> str:
    """Run fzf over ``input_text`` and return the selected line.

    Raises:
        SelectorNotFoundError: If fzf is not installed
        SelectionCancelledError: If the user aborts
        SelectorError: If fzf fails
        NoSelectionMadeError: If fzf returns nothing
    """
    binary = shutil.which(FZF_BINARY)
    if binary is None:
        raise SelectorNotFoundError("fzf not found: install fzf for interactive selection")

    cmd = [
        binary,
        "--prompt",
        f"{prompt}{PROMPT_SUFFIX}",
        "--no-multi",
        "--height=40%",
        "--reverse",
    ]
    logger.debug("Running %s", cmd)
    try:
        proc = subprocess.run(
            cmd,
            input=input_text,
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise SelectorError(f"fzf failed: {exc}") from exc

    if proc.returncode == FZF_CANCELLED_EXIT_CODE:
        raise SelectionCancelledError("selection cancelled")
    if proc.returncode != 0:
        raise SelectorError(
            f"fzf failed: exit status {proc.returncode}",
            context={"returncode": proc.returncode},
        )

    selected = (proc.stdout or "").strip()
    if not selected:
        raise NoSelectionMadeError("no selection made")
    return selected


def select(options: Sequence[Option], prompt: str) -> str:
    """Let the user pick one of ``options`` and return its name.

    Raises:
        NoOptionsAvailableError: If ``options`` is empty
    """
    if not options:
        raise NoOptionsAvailableError("no options available")

    lines = "\n".join(format_option(opt) for opt in options)
    return extract_name(run_fzf(lines, prompt))


__all__ = [
    "ACTIVE_INDICATOR",
    "format_option",
    "extract_name",
    "run_fzf",
    "select",
]
