"""
Brizzle Actions Generator - Next.js server actions for a model
"""

from __future__ import annotations

from pathlib import Path

from brizzle.config import ProjectConfig
from brizzle.fields import validate_model_name
from brizzle.files import write_file
from brizzle.generators.render import render_template
from brizzle.options import GeneratorOptions
from brizzle.strings import ModelContext, create_model_context


def id_type(options: GeneratorOptions) -> str:
    return "string" if options.uuid else "number"


def omitted_columns(options: GeneratorOptions) -> str:
    """Union of the columns the database fills in itself."""
    columns = ["id"] if options.no_timestamps else ["id", "createdAt", "updatedAt"]
    return " | ".join(f'"{column}"' for column in columns)


def render_actions(ctx: ModelContext, config: ProjectConfig, options: GeneratorOptions) -> str:
    return render_template(
        "actions.ts.j2",
        config=config,
        ctx=ctx,
        options=options,
        id_type=id_type(options),
        omitted=omitted_columns(options),
    )


def actions_path(ctx: ModelContext, config: ProjectConfig) -> Path:
    return config.app_dir / ctx.kebab_plural / "actions.ts"


def generate_actions(
    name: str,
    config: ProjectConfig,
    options: GeneratorOptions | None = None,
) -> bool:
    """Write ``app/<models>/actions.ts`` with list, get, create, update and delete."""
    options = options or GeneratorOptions()
    validate_model_name(name)
    ctx = create_model_context(name)

    return write_file(actions_path(ctx, config), render_actions(ctx, config, options), options)
