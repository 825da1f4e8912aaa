"""
Brizzle Render - Jinja2 environment for the TypeScript templates

All generated TypeScript and TSX comes from the ``.j2`` files under
``brizzle/templates``. Names arrive precomputed on the ``ModelContext``; only
``pascal_case``, ``ts_string`` and the form helpers are exposed as filters.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from brizzle.forms import display_value, form_data_value, input_kind, input_step
from brizzle.strings import escape_string, pascal_case

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def create_jinja_env(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Create Jinja2 environment with custom filters."""

    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )

    # String transformation filters
    env.filters["pascal_case"] = pascal_case
    env.filters["ts_string"] = escape_string

    # Form filters
    env.filters["input_kind"] = input_kind
    env.filters["input_step"] = input_step
    env.filters["form_data_value"] = form_data_value
    env.filters["display_value"] = display_value

    return env


@lru_cache(maxsize=None)
def _default_env() -> Environment:
    return create_jinja_env()


def render_template(template_path: str, **context: Any) -> str:
    """Render one of the package templates."""
    return _default_env().get_template(template_path).render(**context)
