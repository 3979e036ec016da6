"""TOML I/O utilities: tomllib (tomli before 3.11) to read, tomli-w to write."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Mapping

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .core import read_text

TOMLDecodeError = tomllib.TOMLDecodeError


def parse_toml_string(text: str) -> Dict[str, Any]:
    """Parse a TOML document.

    Raises:
        TOMLDecodeError: If ``text`` is not valid TOML
    """
    return tomllib.loads(text)


def read_toml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read a TOML file.

    Returns ``default`` when the file is missing, unreadable, not UTF-8 or not
    valid TOML, unless ``raise_on_error`` is True.

    Raises:
        FileNotFoundError: If ``raise_on_error`` and the file is missing
        OSError: If ``raise_on_error`` and the file cannot be read
        UnicodeDecodeError: If ``raise_on_error`` and the file is not UTF-8
        TOMLDecodeError: If ``raise_on_error`` and the content is not TOML
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"file not found: {path}")
        return default

    try:
        return parse_toml_string(read_text(path))
    except (OSError, UnicodeDecodeError, TOMLDecodeError):
        if raise_on_error:
            raise
        return default


def dump_toml_string(data: Mapping[str, Any]) -> str:
    """Serialize ``data`` as TOML.

    Raises:
        TypeError: If ``data`` holds values TOML cannot represent
    """
    return tomli_w.dumps(dict(data))


__all__ = [
    "TOMLDecodeError",
    "parse_toml_string",
    "read_toml",
    "dump_toml_string",
]
