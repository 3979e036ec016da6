"""Launch the user's editor and web browser."""
from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from envpick.core.exceptions import BrowserOpenError, EditorError, UnsupportedPlatformError

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "vi"


def editor_command(path: Path, environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Build the command that opens ``path`` in ``$EDITOR`` (default: vi)."""
    env = os.environ if environ is None else environ
    editor = (env.get("EDITOR") or "").strip() or DEFAULT_EDITOR
    return [*shlex.split(editor), str(path)]


def open_in_editor(path: Path) -> None:
    """Open ``path`` in the editor and wait for it to exit.

    Raises:
        EditorError: If the editor cannot be started or exits non-zero
    """
    cmd = editor_command(path)
    logger.debug("Running editor: %s", cmd)
    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as exc:
        raise EditorError(f"failed to start editor {cmd[0]!r}: {exc}") from exc
    if proc.returncode != 0:
        raise EditorError(
            f"editor {cmd[0]!r} exited with status {proc.returncode}",
            context={"returncode": proc.returncode},
        )


def browser_command(url: str, platform: Optional[str] = None) -> List[str]:
    """Build the command that opens ``url`` on ``platform`` (default: this one).

    Raises:
        UnsupportedPlatformError: If there is no known opener for the platform
    """
    plat = sys.platform if platform is None else platform
    if plat == "darwin":
        return ["open", url]
    if plat.startswith("linux"):
        return ["xdg-open", url]
    if plat == "win32":
        return ["rundll32", "url.dll,FileProtocolHandler", url]
    raise UnsupportedPlatformError(plat)


def open_browser(url: str) -> subprocess.Popen:
    """Start the platform's URL opener in its own session and return it.

    The opener is not waited for; it outlives envpick.

    Raises:
        UnsupportedPlatformError: If there is no known opener for the platform
        BrowserOpenError: If the opener cannot be started
    """
    cmd = browser_command(url)
    logger.debug("Opening browser: %s", cmd)
    try:
        return subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise BrowserOpenError(f"failed to open browser: {exc}") from exc


__all__ = [
    "DEFAULT_EDITOR",
    "editor_command",
    "open_in_editor",
    "browser_command",
    "open_browser",
]
