"""
Configuration document loading and querying.

The configuration file groups environment variables into named configs.
A config is either a top-level table (default namespace) or a table one
level below a namespace table:

    [dev]
    API_URL = "http://localhost:3000"
    _web_url = "http://localhost:3000/admin"

    [db.local]
    DB_HOST = "localhost"

yields the configs ``dev`` and ``db.local``. Keys starting with ``_`` are
metadata and are never exported. Every variable value must be a TOML
string so it is exported exactly as written.

Loading runs in two passes: :func:`decode_tree` turns the parsed TOML document
into a tree of :class:`Scalar` and :class:`Table` nodes, then
:func:`flatten_tree` classifies that tree into the flat
``full name -> variables`` mapping held by :class:`EnvConfig`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Set, Union

from envpick.core.exceptions import (
    ConfigFileNotFoundError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    NoWebURLError,
)
from envpick.core.naming import build_config_name, parse_config_name
from envpick.core.utils.io import TOMLDecodeError, read_toml

logger = logging.getLogger(__name__)

METADATA_PREFIX = "_"
WEB_URL_KEY = "_web_url"

CONFIG_FILE_GUIDANCE = """config file not found: {path}

Create it with your configurations:

  [personal]
  ANTHROPIC_API_KEY = "sk-ant-xxxxx"
  ANTHROPIC_MODEL = "claude-sonnet-4-5"

  [work]
  ANTHROPIC_AUTH_TOKEN = "sk-work-xxxxx"
  _web_url = "https://dashboard.company.com"

Variables with _ prefix are metadata.
Run 'envpick edit' to create the file."""

Variables = Dict[str, str]


# ---------------------------------------------------------------------------
# Pass 1: raw document -> node tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Scalar:
    """A leaf value, already rendered as the string that will be exported."""

    value: str


@dataclass(frozen=True)
class Table:
    """A mapping of keys to child nodes, in document order."""

    children: Dict[str, "Node"] = field(default_factory=dict)

    def is_leaf_table(self) -> bool:
        """True when every child is a scalar (an empty table counts)."""
        return all(isinstance(child, Scalar) for child in self.children.values())


Node = Union[Scalar, Table]


def _decode_scalar(value: Any, path: str) -> Scalar:
    if not isinstance(value, str):
        raise ConfigParseError(
            f"failed to parse config file: value at '{path}' must be a string, "
            f"got {type(value).__name__} (quote it)",
            context={"key": path, "type": type(value).__name__},
        )
    return Scalar(value)


def _decode_node(value: Any, path: str) -> Node:
    if isinstance(value, dict):
        children: Dict[str, Node] = {}
        for key, child in value.items():
            child_path = f"{path}.{key}" if path else key
            children[key] = _decode_node(child, child_path)
        return Table(children=children)
    if isinstance(value, (list, tuple, set)):
        raise ConfigParseError(
            f"failed to parse config file: unsupported array value at '{path}'",
            context={"key": path},
        )
    return _decode_scalar(value, path)


def decode_tree(raw: Any) -> Table:
    """Convert a parsed TOML document into a :class:`Table` tree.

    ``None`` decodes to an empty table.

    Raises:
        ConfigParseError: If the root is not a mapping, or an array or a
            non-string value is found
    """
    if raw is None:
        return Table()
    if not isinstance(raw, dict):
        raise ConfigParseError(
            "failed to parse config file: top level must be a mapping of configurations",
            context={"type": type(raw).__name__},
        )
    root = _decode_node(raw, "")
    assert isinstance(root, Table)
    return root


# ---------------------------------------------------------------------------
# Pass 2: node tree -> flat configs
# ---------------------------------------------------------------------------


def _leaf_variables(table: Table) -> Variables:
    return {key: node.value for key, node in table.children.items() if isinstance(node, Scalar)}


def flatten_tree(root: Table) -> Dict[str, Variables]:
    """Classify the top-level tables of ``root`` into named configs.

    A table whose children are all scalars is a config named by its key.
    Any other table is a namespace: each of its leaf tables becomes
    ``<namespace>.<key>``. Nothing deeper than that is flattened.
    """
    configs: Dict[str, Variables] = {}

    def register(full_name: str, table: Table) -> None:
        if full_name in configs:
            logger.debug("Config %r defined more than once; last definition wins", full_name)
        configs[full_name] = _leaf_variables(table)

    for key, node in root.children.items():
        if isinstance(node, Scalar):
            logger.debug("Skipping top-level scalar %r (not a configuration)", key)
            continue

        if node.is_leaf_table():
            register(key, node)
            continue

        for inner_key, inner in node.children.items():
            full_name = build_config_name(key, inner_key)
            if isinstance(inner, Scalar):
                logger.debug("Skipping scalar %r directly under namespace %r", inner_key, key)
                continue
            if not inner.is_leaf_table():
                logger.warning(
                    "Skipping %r: nesting deeper than namespace.config is not supported",
                    full_name,
                )
                continue
            register(full_name, inner)

    return configs


# ---------------------------------------------------------------------------
# Loaded configuration
# ---------------------------------------------------------------------------


def is_metadata_key(name: str) -> bool:
    """True for variable names that carry metadata instead of a value to export."""
    return name.startswith(METADATA_PREFIX)


def quote_shell_value(value: str) -> str:
    """Double-quote ``value`` so a POSIX shell assigns it literally."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("`", "\\`")
    )
    return f'"{escaped}"'


def format_export_statement(name: str, value: str) -> str:
    return f"export {name}={quote_shell_value(value)}"


@dataclass
class EnvConfig:
    """Flattened configuration document: full config name -> variables."""

    configs: Dict[str, Variables] = field(default_factory=dict)

    def has_config(self, full_name: str) -> bool:
        return full_name in self.configs

    def get_variables(self, full_name: str) -> Variables:
        try:
            return self.configs[full_name]
        except KeyError:
            raise ConfigNotFoundError(full_name) from None

    def get_namespace_configs(self, namespace: str) -> Dict[str, Variables]:
        """Return the configs of ``namespace`` keyed by short name."""
        result: Dict[str, Variables] = {}
        for full_name, variables in self.configs.items():
            ns, short = parse_config_name(full_name)
            if ns == namespace:
                result[short] = variables
        return result

    def get_namespaces(self) -> Set[str]:
        """Return every namespace that holds at least one config."""
        return {parse_config_name(full_name)[0] for full_name in self.configs}

    def get_export_statements(self, full_name: str) -> List[str]:
        """Return ``export NAME="VALUE"`` lines for a config, sorted by name.

        Metadata keys (``_`` prefix) are left out.

        Raises:
            ConfigNotFoundError: If ``full_name`` is not a known config
        """
        variables = self.get_variables(full_name)
        return [
            format_export_statement(name, variables[name])
            for name in sorted(variables)
            if not is_metadata_key(name)
        ]

    def get_web_url(self, full_name: str) -> str:
        """Return the ``_web_url`` metadata of a config.

        Raises:
            ConfigNotFoundError: If ``full_name`` is not a known config
            NoWebURLError: If the config has no ``_web_url``
        """
        variables = self.get_variables(full_name)
        url = variables.get(WEB_URL_KEY)
        if not url:
            raise NoWebURLError(full_name)
        return url


class ConfigStore:
    """Reads the configuration file into an :class:`EnvConfig`."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> EnvConfig:
        """Load and flatten the configuration file.

        Raises:
            ConfigFileNotFoundError: If the file does not exist
            ConfigReadError: If the file cannot be read
            ConfigParseError: If the file is not UTF-8 TOML or has an unsupported shape
        """
        if not self.path.exists():
            raise ConfigFileNotFoundError(
                CONFIG_FILE_GUIDANCE.format(path=self.path),
                context={"path": str(self.path)},
            )

        try:
            raw = read_toml(self.path, raise_on_error=True)
        except (TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ConfigParseError(
                f"failed to parse config file: {exc}", context={"path": str(self.path)}
            ) from exc
        except OSError as exc:
            raise ConfigReadError(
                f"failed to read config file: {exc}", context={"path": str(self.path)}
            ) from exc

        configs = flatten_tree(decode_tree(raw))
        logger.debug("Loaded %d configuration(s) from %s", len(configs), self.path)
        return EnvConfig(configs=configs)


__all__ = [
    "METADATA_PREFIX",
    "WEB_URL_KEY",
    "CONFIG_FILE_GUIDANCE",
    "Scalar",
    "Table",
    "decode_tree",
    "flatten_tree",
    "is_metadata_key",
    "quote_shell_value",
    "format_export_statement",
    "EnvConfig",
    "ConfigStore",
]
