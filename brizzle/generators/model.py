"""
Brizzle Model Generator - Adds a table definition to db/schema.ts
"""

from __future__ import annotations

from typing import Sequence

from brizzle import log
from brizzle.config import ProjectConfig
from brizzle.fields import parse_fields, validate_model_name
from brizzle.files import file_exists, read_file, write_file
from brizzle.options import GeneratorOptions
from brizzle.schema import SchemaOutcome, SchemaUpdate, apply_model, missing_references
from brizzle.strings import create_model_context, table_name_for


def generate_model(
    name: str,
    field_args: Sequence[str],
    config: ProjectConfig,
    options: GeneratorOptions | None = None,
) -> SchemaUpdate:
    """
    Generate (or with ``force``, regenerate) the schema block for a model.

    Every field token is validated before the schema file is touched. When
    the table is already present and ``force`` is off the file is left
    byte-identical and a ``skip`` is reported. A table whose braces do not
    balance is never replaced, even with ``force``.

    Args:
        name: Model name, singular or plural
        field_args: Raw ``name:type[:modifiers]`` tokens
        config: Detected project configuration
        options: Generator flags

    Returns:
        The computed schema update
    """
    options = options or GeneratorOptions()
    validate_model_name(name)
    fields = parse_fields(list(field_args))
    ctx = create_model_context(name)

    schema_path = config.schema_path
    content = read_file(schema_path) if file_exists(schema_path) else ""

    for field in missing_references(fields, content, own_table=ctx.table_name):
        log.warn(
            f'"{field.name}" references "{field.reference_to}", but table '
            f'"{table_name_for(field.reference_to)}" is not in the schema yet. '
            f"Generate it before pushing the schema."
        )

    update = apply_model(content, ctx, fields, config.dialect, options)
    if update.outcome == SchemaOutcome.UNBALANCED:
        log.warn(
            f'The braces of table "{ctx.table_name}" do not balance; '
            f"it was left untouched. Fix the schema and run again."
        )
        log.skip(schema_path)
        return update
    if update.outcome == SchemaOutcome.SKIPPED:
        log.skip(schema_path)
        return update

    # skipping is decided per table above, never per file
    write_file(schema_path, update.content, options.model_copy(update={"force": True}))
    return update
