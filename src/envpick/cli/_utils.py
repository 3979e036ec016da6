"""Shared CLI utility functions.

This module provides common utilities used across CLI commands to reduce
duplication and ensure consistent behavior.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from envpick.core import selector
from envpick.core.engine import Engine
from envpick.core.exceptions import EnvpickError, NoConfigurationsError
from envpick.core.utils.paths import EnvpickPaths, resolve_paths

SELECT_CONFIGURATION_PROMPT = "Select configuration:"


def get_paths(args: argparse.Namespace) -> EnvpickPaths:
    """Get file locations from args or the environment.

    Args:
        args: Parsed arguments with optional config_dir attribute

    Returns:
        EnvpickPaths: Resolved configuration and state file locations
    """
    config_dir = getattr(args, "config_dir", None)
    if config_dir:
        return resolve_paths(Path(config_dir))
    return resolve_paths()


def get_namespace(args: argparse.Namespace) -> str:
    """Return the namespace selected with --namespace (``""`` for the default)."""
    return str(getattr(args, "namespace", "") or "").strip()


def load_engine(args: argparse.Namespace) -> Engine:
    """Load config and state and scope an engine to the requested namespace."""
    return Engine.load(get_paths(args), namespace=get_namespace(args))


def choose_config(
    engine: Engine,
    prompt: str = SELECT_CONFIGURATION_PROMPT,
    *,
    empty_message: str = "no available configurations",
) -> str:
    """Let the user pick a configuration of the engine's namespace.

    Options are shown sorted by name with the active one marked.

    Returns:
        str: The selected short name

    Raises:
        NoConfigurationsError: If the namespace has no configurations
        SelectionError: If the picker produces no choice
    """
    options = sorted(engine.options(), key=lambda opt: opt.name)
    if not options:
        raise NoConfigurationsError(empty_message, context={"namespace": engine.namespace})
    return selector.select(options, prompt)


def complete_config_names(prefix: str, parsed_args: argparse.Namespace, **kwargs) -> List[str]:
    """argcomplete completer: short names in the namespace given so far."""
    try:
        engine = load_engine(parsed_args)
    except EnvpickError:
        return []
    return sorted(opt.name for opt in engine.options() if opt.name.startswith(prefix))


__all__ = [
    "SELECT_CONFIGURATION_PROMPT",
    "get_paths",
    "get_namespace",
    "load_engine",
    "choose_config",
    "complete_config_names",
]
