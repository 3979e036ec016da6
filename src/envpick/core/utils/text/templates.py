"""Text template rendering with Jinja2.

Used for the shell integration scripts printed by ``envpick init``.
"""

from __future__ import annotations

from typing import Any, Dict

from jinja2 import Environment, StrictUndefined

# Templates use control blocks on their own lines. Without trimming, those
# tag-only lines become empty lines.
_ENV = Environment(
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
    autoescape=False,
)


def render_template_text(text: str, context: Dict[str, Any]) -> str:
    """Render ``text`` with ``context``; unknown variables raise an error."""
    return _ENV.from_string(text).render(**context)


__all__ = ["render_template_text"]
