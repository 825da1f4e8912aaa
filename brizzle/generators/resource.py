"""
Brizzle Resource Generator - Model plus server actions, without pages
"""

from __future__ import annotations

from typing import Sequence

from brizzle import log
from brizzle.config import ProjectConfig
from brizzle.fields import validate_model_name
from brizzle.generators.actions import generate_actions
from brizzle.generators.model import generate_model
from brizzle.options import GeneratorOptions
from brizzle.strings import create_model_context


def generate_resource(
    name: str,
    field_args: Sequence[str],
    config: ProjectConfig,
    options: GeneratorOptions | None = None,
) -> None:
    options = options or GeneratorOptions()
    validate_model_name(name)
    ctx = create_model_context(name)
    prefix = "[dry-run] " if options.dry_run else ""

    log.info(f"\n{prefix}Generating resource {ctx.pascal_name}...\n")

    generate_model(ctx.singular_name, field_args, config, options)
    generate_actions(ctx.singular_name, config, options)

    log.info("\nNext steps:")
    log.info("  1. Run 'pnpm db:push' to update the database")
    log.info(f"  2. Import actions from '{config.alias}/app/{ctx.kebab_plural}/actions'")
