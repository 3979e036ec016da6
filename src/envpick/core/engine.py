"""Namespace-scoped view over the configuration and the selection state."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from envpick.core.config import ConfigStore, EnvConfig, State, StateStore
from envpick.core.exceptions import ConfigNotFoundError
from envpick.core.naming import DEFAULT_NAMESPACE, build_config_name
from envpick.core.utils.paths import EnvpickPaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Option:
    """A selectable configuration in the engine's namespace."""

    name: str
    active: bool = False


class Engine:
    """Answers "what is active", "switch", and "what can I pick" for one namespace.

    The namespace is fixed at construction time.
    """

    def __init__(
        self,
        config: EnvConfig,
        state: State,
        state_store: StateStore,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        self._config = config
        self._state = state
        self._state_store = state_store
        self._namespace = namespace

    @classmethod
    def load(cls, paths: EnvpickPaths, namespace: str = DEFAULT_NAMESPACE) -> "Engine":
        """Load the config and state files described by ``paths``."""
        config = ConfigStore(paths.config_file).load()
        state_store = StateStore(paths.state_file)
        state = state_store.load()
        return cls(config, state, state_store, namespace=namespace)

    def for_namespace(self, namespace: str) -> "Engine":
        """Return an engine over the same documents scoped to ``namespace``."""
        return Engine(self._config, self._state, self._state_store, namespace=namespace)

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def config(self) -> EnvConfig:
        return self._config

    def current(self) -> str:
        """Short name of the active config, or ``""``."""
        return self._state.get_current(self._namespace)

    def current_full(self) -> str:
        """Full name of the active config, or ``""``."""
        short_name = self.current()
        if not short_name:
            return ""
        return build_config_name(self._namespace, short_name)

    def resolve(self, short_name: str) -> str:
        """Return the full name for ``short_name`` in this namespace.

        Raises:
            ConfigNotFoundError: If no such config exists
        """
        full_name = build_config_name(self._namespace, short_name)
        if not self._config.has_config(full_name):
            raise ConfigNotFoundError(short_name, context={"namespace": self._namespace})
        return full_name

    def set_current(self, short_name: str) -> None:
        """Make ``short_name`` the active config and save the state file.

        The state is left unchanged when the config does not exist or the
        save fails.

        Raises:
            ConfigNotFoundError: If no such config exists
            StateError: If the state file cannot be written
        """
        self.resolve(short_name)

        had_previous = self._namespace in self._state.current
        previous = self._state.get_current(self._namespace)
        self._state.set_current(self._namespace, short_name)
        try:
            self._state_store.save(self._state)
        except Exception:
            if had_previous:
                self._state.set_current(self._namespace, previous)
            else:
                self._state.current.pop(self._namespace, None)
            raise
        logger.debug("Active config for namespace %r is now %r", self._namespace, short_name)

    def options(self) -> List[Option]:
        """List the configs of this namespace, marking the active one.

        Order follows the configuration document; sort for display.
        """
        current = self.current()
        return [
            Option(name=name, active=(name == current))
            for name in self._config.get_namespace_configs(self._namespace)
        ]

    def exports(self, full_name: str) -> List[str]:
        return self._config.get_export_statements(full_name)

    def web_url(self, full_name: str) -> str:
        return self._config.get_web_url(full_name)


__all__ = ["Engine", "Option"]
