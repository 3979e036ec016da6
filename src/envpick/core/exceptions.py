from __future__ import annotations

from typing import Any, Dict, Mapping


class EnvpickError(Exception):
    """Base exception for envpick."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


# ---------------------------------------------------------------------------
# Configuration document
# ---------------------------------------------------------------------------


class ConfigError(EnvpickError):
    """Raised for errors loading or querying the configuration document."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Raised when the configuration file does not exist."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ConfigError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ConfigReadError(ConfigError):
    """Raised when the configuration file cannot be read."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not a valid document."""


class ConfigNotFoundError(ConfigError, LookupError):
    """Raised when a named configuration is absent from the document."""

    def __init__(self, name: str, *, context: Mapping[str, Any] | None = None) -> None:
        ctx = dict(context or {})
        ctx["name"] = name
        super().__init__(f'configuration "{name}" not found', context=ctx)
        self.name = name


class NoWebURLError(ConfigError):
    """Raised when a configuration carries no ``_web_url`` metadata."""

    def __init__(self, name: str) -> None:
        super().__init__(f'configuration "{name}" has no web URL', context={"name": name})
        self.name = name


class NoConfigurationsError(ConfigError):
    """Raised when a namespace has no selectable configurations."""


class NoCurrentConfigError(ConfigError):
    """Raised when no configuration is active in a namespace."""

    def __init__(self, namespace: str) -> None:
        where = f" in namespace \"{namespace}\"" if namespace else ""
        super().__init__(
            f"no configuration selected{where}; run 'envpick use' first",
            context={"namespace": namespace},
        )
        self.namespace = namespace


# ---------------------------------------------------------------------------
# State document
# ---------------------------------------------------------------------------


class StateError(EnvpickError):
    """Raised for errors loading or saving the state document."""


class StateReadError(StateError):
    """Raised when the state file cannot be read."""


class StateParseError(StateError):
    """Raised when the state file is not a valid document."""


class StateEncodeError(StateError):
    """Raised when the state cannot be serialized."""


class StateWriteError(StateError):
    """Raised when the state file cannot be written."""


# ---------------------------------------------------------------------------
# Interactive selection
# ---------------------------------------------------------------------------


class SelectionError(EnvpickError):
    """Raised when the interactive picker does not produce a choice."""


class NoOptionsAvailableError(SelectionError):
    """Raised when the picker is given nothing to choose from."""


class SelectionCancelledError(SelectionError):
    """Raised when the user aborts the picker."""


class NoSelectionMadeError(SelectionError):
    """Raised when the picker exits without output."""


class SelectorNotFoundError(SelectionError):
    """Raised when the picker binary is not installed."""


class SelectorError(SelectionError):
    """Raised when the picker fails for any other reason."""


# ---------------------------------------------------------------------------
# External programs
# ---------------------------------------------------------------------------


class LaunchError(EnvpickError):
    """Raised when an external program cannot be launched."""


class EditorError(LaunchError):
    """Raised when the editor cannot be started or exits with an error."""


class BrowserOpenError(LaunchError):
    """Raised when the browser cannot be opened."""


class UnsupportedPlatformError(LaunchError):
    """Raised when there is no known way to open a browser on this platform."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"unsupported platform: {platform}", context={"platform": platform})
        self.platform = platform


__all__ = [
    "EnvpickError",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigReadError",
    "ConfigParseError",
    "ConfigNotFoundError",
    "NoWebURLError",
    "NoConfigurationsError",
    "NoCurrentConfigError",
    "StateError",
    "StateReadError",
    "StateParseError",
    "StateEncodeError",
    "StateWriteError",
    "SelectionError",
    "NoOptionsAvailableError",
    "SelectionCancelledError",
    "NoSelectionMadeError",
    "SelectorNotFoundError",
    "SelectorError",
    "LaunchError",
    "EditorError",
    "BrowserOpenError",
    "UnsupportedPlatformError",
]
