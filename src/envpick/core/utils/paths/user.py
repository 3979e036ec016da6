"""User configuration path resolution.

This module centralizes detection of the envpick configuration directory
(default: ``~/.envpick``) and the fixed file names inside it.

Precedence (highest to lowest):
1. Environment variable: ENVPICK_CONFIG_DIR
2. Hardcoded fallback: ".envpick"

The directory name is resolved relative to the user's home directory unless an
absolute path is provided.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

CONFIG_DIR_ENV_VAR = "ENVPICK_CONFIG_DIR"
DEFAULT_USER_CONFIG_PRIMARY = ".envpick"
CONFIG_FILENAME = "config.toml"
STATE_FILENAME = "state.toml"


@dataclass(frozen=True)
class EnvpickPaths:
    """Locations of the files envpick reads and writes."""

    config_dir: Path

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @property
    def state_file(self) -> Path:
        return self.config_dir / STATE_FILENAME


def _resolve_user_dir_from_env(environ: Mapping[str, str]) -> str:
    env_override = environ.get(CONFIG_DIR_ENV_VAR)
    if isinstance(env_override, str) and env_override.strip():
        return env_override.strip()
    return DEFAULT_USER_CONFIG_PRIMARY


def get_user_config_dir(
    *,
    create: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Return the user config directory resolved via env.

    The resolved path is absolute. Relative values are treated as relative to
    the user's home directory (not CWD).
    """
    from envpick.core.utils.io import ensure_directory

    raw = _resolve_user_dir_from_env(os.environ if environ is None else environ)
    p = Path(raw).expanduser()
    if not p.is_absolute():
        p = Path.home() / p

    resolved = p.resolve()
    if create:
        ensure_directory(resolved)
    return resolved


def resolve_paths(config_dir: Optional[Path] = None) -> EnvpickPaths:
    """Build :class:`EnvpickPaths` for ``config_dir`` or the resolved user dir."""
    if config_dir is not None:
        return EnvpickPaths(config_dir=Path(config_dir).expanduser().resolve())
    return EnvpickPaths(config_dir=get_user_config_dir())


__all__ = [
    "CONFIG_DIR_ENV_VAR",
    "DEFAULT_USER_CONFIG_PRIMARY",
    "CONFIG_FILENAME",
    "STATE_FILENAME",
    "EnvpickPaths",
    "get_user_config_dir",
    "resolve_paths",
]
