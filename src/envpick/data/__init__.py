"""
envpick data resource helpers.

Provides access to bundled data files (shell integration templates) using
importlib.resources.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a data file or directory.

    Args:
        subpackage: Name of the data subpackage (e.g., "shell")
        filename: Optional filename within the subpackage

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("shell", "integration.sh.j2")
        PosixPath('/path/to/envpick/data/shell/integration.sh.j2')
    """
    pkg = resources.files("envpick.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


def read_data_text(subpackage: str, filename: str) -> str:
    """Read a bundled text file."""
    return get_data_path(subpackage, filename).read_text(encoding="utf-8")


__all__ = ["get_data_path", "read_data_text"]
