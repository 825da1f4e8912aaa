"""
Brizzle Scaffold Generator - Model, server actions and CRUD pages

Pages are written under ``app/<models>/``::

    page.tsx            list with edit and delete links
    new/page.tsx        create form
    [id]/page.tsx       detail view
    [id]/edit/page.tsx  update form
"""

from __future__ import annotations

from typing import Sequence

from brizzle import log
from brizzle.config import ProjectConfig
from brizzle.fields import Field, parse_fields, validate_model_name
from brizzle.files import write_file
from brizzle.generators.actions import generate_actions
from brizzle.generators.model import generate_model
from brizzle.generators.render import render_template
from brizzle.options import GeneratorOptions
from brizzle.strings import ModelContext, create_model_context

PAGES = (
    ("pages/index.tsx.j2", ("page.tsx",)),
    ("pages/new.tsx.j2", ("new", "page.tsx")),
    ("pages/show.tsx.j2", ("[id]", "page.tsx")),
    ("pages/edit.tsx.j2", ("[id]", "edit", "page.tsx")),
)


def display_field(fields: Sequence[Field]) -> str:
    """Column shown as the link text on the index page."""
    return fields[0].name if fields else "id"


def generate_pages(
    ctx: ModelContext,
    fields: Sequence[Field],
    config: ProjectConfig,
    options: GeneratorOptions,
) -> None:
    base_path = config.app_dir / ctx.kebab_plural
    context = {
        "ctx": ctx,
        "fields": list(fields),
        "options": options,
        "display_field": display_field(fields),
    }
    for template_path, parts in PAGES:
        write_file(base_path.joinpath(*parts), render_template(template_path, **context), options)


def generate_scaffold(
    name: str,
    field_args: Sequence[str],
    config: ProjectConfig,
    options: GeneratorOptions | None = None,
) -> None:
    options = options or GeneratorOptions()
    validate_model_name(name)
    fields = parse_fields(list(field_args))
    ctx = create_model_context(name)
    prefix = "[dry-run] " if options.dry_run else ""

    log.info(f"\n{prefix}Scaffolding {ctx.pascal_name}...\n")

    generate_model(ctx.singular_name, field_args, config, options)
    generate_actions(ctx.singular_name, config, options)
    generate_pages(ctx, fields, config, options)

    log.info("\nNext steps:")
    log.info("  1. Run 'pnpm db:push' to update the database")
    log.info("  2. Run 'pnpm dev' to start the development server")
    log.info(f"  3. Visit http://localhost:3000/{ctx.kebab_plural}")
