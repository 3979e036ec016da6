"""File primitives used by the config and state stores.

The state file is only ever replaced as a whole: content goes to a sibling
temp file which is flushed, fsync'd and renamed over the target, so a
concurrent ``envpick env`` sees the old state or the new one.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

PathLike = Union[str, Path]


def ensure_parent_dir(path: PathLike) -> None:
    """Create the directory that will hold ``path``."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def ensure_directory(path: PathLike, create: bool = True) -> Path:
    """Return ``path`` as an existing directory, creating it unless ``create`` is False.

    Raises:
        FileNotFoundError: The directory is missing and ``create`` is False
        NotADirectoryError: Something other than a directory sits at ``path``
    """
    directory = Path(path)
    if directory.is_dir():
        return directory
    if directory.exists():
        raise NotADirectoryError(f"not a directory: {directory}")
    if not create:
        raise FileNotFoundError(f"directory does not exist: {directory}")
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def atomic_write(
    path: PathLike,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
) -> None:
    """Replace ``path`` with whatever ``write_fn`` writes, all or nothing.

    On any failure the previous file is left as it was and the temp file is
    removed before the error propagates.
    """
    target = Path(path)
    ensure_parent_dir(target)

    tmp_name: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            write_fn(handle)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, target)
        tmp_name = None
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass


def read_text(path: PathLike) -> str:
    """Return the UTF-8 content of ``path``.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"file not found: {source}")
    return source.read_text(encoding="utf-8")


def write_text(path: PathLike, content: str) -> None:
    """Atomically replace ``path`` with ``content``."""
    atomic_write(path, lambda handle: handle.write(content))


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "atomic_write",
    "read_text",
    "write_text",
]
