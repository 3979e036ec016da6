"""I/O utilities for envpick.

This package provides safe file operations:
- Core: atomic writes, directory management, text I/O
- TOML: read with tomllib (tomli on 3.10), write with tomli-w
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_directory,
    ensure_parent_dir,
    read_text,
    write_text,
)
from .toml import (
    TOMLDecodeError,
    dump_toml_string,
    parse_toml_string,
    read_toml,
)

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "atomic_write",
    "read_text",
    "write_text",
    # toml
    "TOMLDecodeError",
    "parse_toml_string",
    "read_toml",
    "dump_toml_string",
]
