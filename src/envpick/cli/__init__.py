"""
envpick CLI package.

Provides the command-line interface with auto-discovery of commands
from cli/commands/ (top-level commands) and command group packages
(env/, init/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, print_error
from ._args import (
    add_config_dir_flag,
    add_config_name_arg,
    add_json_flag,
    add_namespace_flag,
    add_verbose_flag,
)
from ._utils import (
    SELECT_CONFIGURATION_PROMPT,
    choose_config,
    get_namespace,
    get_paths,
    load_engine,
)

__all__ = [
    # Output formatting
    "OutputFormatter",
    "print_error",
    # Argument helpers
    "add_config_dir_flag",
    "add_config_name_arg",
    "add_json_flag",
    "add_namespace_flag",
    "add_verbose_flag",
    # Utilities
    "SELECT_CONFIGURATION_PROMPT",
    "choose_config",
    "get_namespace",
    "get_paths",
    "load_engine",
]
