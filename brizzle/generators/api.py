"""
Brizzle API Generator - REST route handlers for a model
"""

from __future__ import annotations

from typing import Sequence

from brizzle import log
from brizzle.config import ProjectConfig
from brizzle.fields import validate_model_name
from brizzle.files import write_file
from brizzle.generators.model import generate_model
from brizzle.generators.render import render_template
from brizzle.options import GeneratorOptions
from brizzle.strings import create_model_context


def generate_api(
    name: str,
    field_args: Sequence[str],
    config: ProjectConfig,
    options: GeneratorOptions | None = None,
) -> None:
    """
    Generate the model plus ``app/api/<models>/route.ts`` (GET list, POST)
    and ``app/api/<models>/[id]/route.ts`` (GET, PATCH, DELETE).
    """
    options = options or GeneratorOptions()
    validate_model_name(name)
    ctx = create_model_context(name)
    prefix = "[dry-run] " if options.dry_run else ""

    log.info(f"\n{prefix}Generating API {ctx.pascal_name}...\n")

    generate_model(ctx.singular_name, field_args, config, options)

    context = {
        "config": config,
        "ctx": ctx,
        "options": options,
        "order_column": "id" if options.no_timestamps else "createdAt",
        "id_expr": "id" if options.uuid else "parseInt(id)",
    }
    base_path = config.app_dir / "api" / ctx.kebab_plural
    write_file(
        base_path / "route.ts",
        render_template("api/collection_route.ts.j2", **context),
        options,
    )
    write_file(
        base_path / "[id]" / "route.ts",
        render_template("api/member_route.ts.j2", **context),
        options,
    )

    log.info("\nNext steps:")
    log.info("  1. Run 'pnpm db:push' to update the database")
    log.info(f"  2. API available at /api/{ctx.kebab_plural}")
