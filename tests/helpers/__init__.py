"""Test helper modules for the envpick test suite.

- env: EnvpickTestEnv for isolated config/state files
- fixtures: TOML documents shared by tests
- fakes: stand-ins for fzf and the browser launcher
"""
from __future__ import annotations
