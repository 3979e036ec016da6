"""Configuration and state documents.

- store: the configuration file (named groups of environment variables)
- state: the persisted active selection per namespace
"""
from __future__ import annotations

from .state import State, StateStore
from .store import ConfigStore, EnvConfig

__all__ = [
    "ConfigStore",
    "EnvConfig",
    "State",
    "StateStore",
]
