"""Configuration name helpers.

A *full* configuration name is ``<namespace>.<short>`` or just ``<short>``
for the default namespace (``""``). Only the first dot separates the
namespace, so ``db.prod.primary`` is namespace ``db`` with short name
``prod.primary``.
"""
from __future__ import annotations

from typing import Tuple

DEFAULT_NAMESPACE = ""
NAMESPACE_SEPARATOR = "."


def parse_config_name(full_name: str) -> Tuple[str, str]:
    """Split a full configuration name into ``(namespace, short_name)``.

    Examples:
        >>> parse_config_name("dev")
        ('', 'dev')
        >>> parse_config_name("db.prod.primary")
        ('db', 'prod.primary')
    """
    namespace, sep, short = full_name.partition(NAMESPACE_SEPARATOR)
    if not sep:
        return DEFAULT_NAMESPACE, full_name
    return namespace, short


def build_config_name(namespace: str, short_name: str) -> str:
    """Join a namespace and a short name into a full configuration name."""
    if not namespace:
        return short_name
    return f"{namespace}{NAMESPACE_SEPARATOR}{short_name}"


__all__ = [
    "DEFAULT_NAMESPACE",
    "NAMESPACE_SEPARATOR",
    "parse_config_name",
    "build_config_name",
]
