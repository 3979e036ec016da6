"""
envpick list command.

SUMMARY: List configurations

Lists the configurations of a namespace (or of every namespace with --all),
sorted by name, marking the active one with [*].
"""

from __future__ import annotations

import argparse
from typing import Any

from envpick.cli import OutputFormatter, add_json_flag, add_namespace_flag, load_engine
from envpick.core.engine import Engine, Option
from envpick.core.selector import format_option

SUMMARY = "List configurations"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--all",
        "-a",
        action="store_true",
        help="List configurations of every namespace",
    )
    add_namespace_flag(parser)
    add_json_flag(parser)


def _sorted_options(engine: Engine) -> list[Option]:
    return sorted(engine.options(), key=lambda opt: opt.name)


def _as_dict(engine: Engine) -> dict[str, Any]:
    return {
        "namespace": engine.namespace,
        "current": engine.current(),
        "configs": [{"name": opt.name, "active": opt.active} for opt in _sorted_options(engine)],
    }


def main(args: argparse.Namespace) -> int:
    """List configurations."""
    formatter = OutputFormatter(json_mode=args.json)
    engine = load_engine(args)

    if args.all:
        engines = [engine.for_namespace(ns) for ns in sorted(engine.config.get_namespaces())]
    else:
        engines = [engine]

    if formatter.json_mode:
        if args.all:
            formatter.json_output({"namespaces": [_as_dict(e) for e in engines]})
        else:
            formatter.json_output(_as_dict(engine))
        return 0

    for scoped in engines:
        if args.all:
            formatter.text(f"[{scoped.namespace or 'default'}]")
        for opt in _sorted_options(scoped):
            formatter.text(format_option(opt))
    return 0
