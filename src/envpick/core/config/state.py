"""
Persisted selection state.

The state file records the active config of every namespace by short name:

    [current]
    "" = "prod"
    db = "local"

Older versions stored a single full config name instead
(``current_config = "db.local"``). That field is still read and migrated
into ``current`` on load.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from envpick.core.exceptions import (
    StateEncodeError,
    StateParseError,
    StateReadError,
    StateWriteError,
)
from envpick.core.naming import parse_config_name
from envpick.core.utils.io import TOMLDecodeError, dump_toml_string, read_toml, write_text

logger = logging.getLogger(__name__)

CURRENT_KEY = "current"
LEGACY_CURRENT_KEY = "current_config"


@dataclass
class State:
    """Active config per namespace (namespace -> short name)."""

    current: Dict[str, str] = field(default_factory=dict)
    # Deprecated single full name; only kept for reading old state files.
    current_config: str = ""

    def get_current(self, namespace: str) -> str:
        """Return the active short name for ``namespace`` or ``""``."""
        return self.current.get(namespace, "")

    def set_current(self, namespace: str, short_name: str) -> None:
        """Set the active short name for ``namespace`` (in memory only)."""
        self.current[namespace] = short_name

    def migrate_legacy(self) -> bool:
        """Move a legacy ``current_config`` into ``current``.

        Only applies when ``current`` is empty; otherwise the legacy value is
        left untouched.

        Returns:
            True if a migration happened
        """
        if not self.current_config:
            return False
        if self.current:
            logger.debug(
                "Ignoring legacy %s=%r: per-namespace state already present",
                LEGACY_CURRENT_KEY,
                self.current_config,
            )
            return False

        namespace, short_name = parse_config_name(self.current_config)
        logger.debug(
            "Migrating legacy %s=%r to namespace %r",
            LEGACY_CURRENT_KEY,
            self.current_config,
            namespace,
        )
        self.current[namespace] = short_name
        self.current_config = ""
        return True

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {CURRENT_KEY: dict(self.current)}
        if self.current_config:
            data[LEGACY_CURRENT_KEY] = self.current_config
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "State":
        """Build a state from a parsed document.

        Raises:
            StateParseError: If ``current`` is not a table of strings
        """
        raw_current = data.get(CURRENT_KEY, {})
        if not isinstance(raw_current, dict):
            raise StateParseError(
                f"failed to parse state file: '{CURRENT_KEY}' must be a table",
                context={"type": type(raw_current).__name__},
            )

        current: Dict[str, str] = {}
        for namespace, short_name in raw_current.items():
            if not isinstance(short_name, str):
                raise StateParseError(
                    f"failed to parse state file: '{CURRENT_KEY}.{namespace}' must be a string",
                    context={"namespace": namespace, "type": type(short_name).__name__},
                )
            current[namespace] = short_name

        legacy = data.get(LEGACY_CURRENT_KEY, "")
        if not isinstance(legacy, str):
            raise StateParseError(
                f"failed to parse state file: '{LEGACY_CURRENT_KEY}' must be a string",
                context={"type": type(legacy).__name__},
            )
        return cls(current=current, current_config=legacy)


class StateStore:
    """Loads and saves :class:`State` at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> State:
        """Load the state file, migrating the legacy format in memory.

        A missing file is not an error and yields an empty state.

        Raises:
            StateReadError: If the file cannot be read
            StateParseError: If the file is not UTF-8 TOML or not a valid state document
        """
        if not self.path.exists():
            return State()

        try:
            raw = read_toml(self.path, raise_on_error=True)
        except (TOMLDecodeError, UnicodeDecodeError) as exc:
            raise StateParseError(
                f"failed to parse state file: {exc}", context={"path": str(self.path)}
            ) from exc
        except OSError as exc:
            raise StateReadError(
                f"failed to read state file: {exc}", context={"path": str(self.path)}
            ) from exc

        state = State.from_dict(raw)
        state.migrate_legacy()
        return state

    def save(self, state: State) -> None:
        """Overwrite the state file with ``state`` as a whole.

        Raises:
            StateEncodeError: If the state cannot be serialized
            StateWriteError: If the file cannot be written
        """
        try:
            content = dump_toml_string(state.to_dict())
        except (TypeError, ValueError) as exc:
            raise StateEncodeError(f"failed to encode state: {exc}") from exc

        try:
            write_text(self.path, content)
        except OSError as exc:
            raise StateWriteError(
                f"failed to write state file: {exc}", context={"path": str(self.path)}
            ) from exc
        logger.debug("Saved state to %s", self.path)

    def create_default(self, full_name: str) -> bool:
        """Seed the state file with ``full_name`` unless it already exists.

        Returns:
            True if a new state file was written
        """
        if self.exists():
            return False

        state = State()
        namespace, short_name = parse_config_name(full_name)
        state.set_current(namespace, short_name)
        self.save(state)
        return True


__all__ = [
    "CURRENT_KEY",
    "LEGACY_CURRENT_KEY",
    "State",
    "StateStore",
]
