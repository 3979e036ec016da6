"""Path utilities for envpick.

This package provides centralized path resolution:
- User: configuration directory detection and the fixed file names within it
"""
from __future__ import annotations

from .user import (
    CONFIG_DIR_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_USER_CONFIG_PRIMARY,
    STATE_FILENAME,
    EnvpickPaths,
    get_user_config_dir,
    resolve_paths,
)

__all__ = [
    # user
    "CONFIG_DIR_ENV_VAR",
    "CONFIG_FILENAME",
    "DEFAULT_USER_CONFIG_PRIMARY",
    "STATE_FILENAME",
    "EnvpickPaths",
    "get_user_config_dir",
    "resolve_paths",
]
