"""
Jinja2 environment shared by letter-body templates and letter generators.
"""

from __future__ import annotations

from typing import Any

from jinja2 import BaseLoader, Environment

_jinja_env = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)


def render(template_str: str, **context: Any) -> str:
    """Render a template string. Undefined variables render empty and are falsy."""
    return _jinja_env.from_string(template_str).render(**context)
