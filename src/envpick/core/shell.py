"""Shell integration scripts for ``envpick init <shell>``."""
from __future__ import annotations

from typing import Tuple

from envpick.core.utils.text import render_template_text
from envpick.data import read_data_text

PROG_NAME = "envpick"
HELPER_NAME = "ep"
SUPPORTED_SHELLS: Tuple[str, ...] = ("bash", "zsh")
_TEMPLATE = "integration.sh.j2"


def render_integration(shell: str) -> str:
    """Return the integration script for ``shell``.

    The script loads the persisted environment on startup and defines the
    ``ep`` helper (``ep use``, ``ep tmp``, pass-through).

    Raises:
        ValueError: If ``shell`` is not supported
    """
    if shell not in SUPPORTED_SHELLS:
        raise ValueError(f"unsupported shell: {shell}")
    template = read_data_text("shell", _TEMPLATE)
    return render_template_text(
        template,
        {"prog": PROG_NAME, "helper": HELPER_NAME, "shell": shell},
    )


__all__ = ["PROG_NAME", "HELPER_NAME", "SUPPORTED_SHELLS", "render_integration"]
