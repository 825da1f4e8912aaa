"""
Brizzle Destroy - Removes what scaffold, resource and api generated

The generated directory is deleted first, then the table block (and any
enum declarations generated with it) is cut out of ``db/schema.ts``. Hand
written content in the schema file is left as it was.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from brizzle import log
from brizzle.config import ProjectConfig
from brizzle.errors import UnknownDestroyTypeError
from brizzle.fields import validate_model_name
from brizzle.files import delete_directory, file_exists, read_file, write_file
from brizzle.options import GeneratorOptions
from brizzle.schema import SchemaOutcome, remove_model
from brizzle.strings import ModelContext, create_model_context

ConfirmCallback = Callable[[str], bool]


class DestroyType(str, Enum):
    SCAFFOLD = "scaffold"
    RESOURCE = "resource"
    API = "api"


LABELS = {
    DestroyType.SCAFFOLD: "scaffold",
    DestroyType.RESOURCE: "resource",
    DestroyType.API: "API",
}


@dataclass
class DestroyOutcome:
    """What a destroy run did."""

    aborted: bool = False
    directory_removed: bool = False
    table_found: bool = False


def parse_destroy_type(value: str) -> DestroyType:
    try:
        return DestroyType(value)
    except ValueError:
        raise UnknownDestroyTypeError(
            f'Unknown type "{value}". Use: scaffold, resource, or api'
        ) from None


def target_directory(kind: DestroyType, ctx: ModelContext, config: ProjectConfig) -> Path:
    if kind == DestroyType.API:
        return config.app_dir / "api" / ctx.kebab_plural
    return config.app_dir / ctx.kebab_plural


def remove_from_schema(table_name: str, config: ProjectConfig, options: GeneratorOptions) -> bool:
    """Cut the table out of the schema file. Returns whether it was there."""
    schema_path = config.schema_path
    if not file_exists(schema_path):
        return False

    update = remove_model(read_file(schema_path), table_name)
    if update.outcome == SchemaOutcome.NOT_FOUND:
        return False

    write_file(schema_path, update.content, options.model_copy(update={"force": True}))
    return True


def destroy(
    kind: DestroyType | str,
    name: str,
    config: ProjectConfig,
    options: GeneratorOptions | None = None,
    confirm: ConfirmCallback | None = None,
) -> DestroyOutcome:
    """
    Destroy a generated scaffold, resource or API.

    Args:
        kind: ``scaffold``, ``resource`` or ``api``
        name: Model name
        config: Detected project configuration
        options: ``force`` skips the confirmation, ``dry_run`` only reports
        confirm: Asked before deleting an existing directory

    Returns:
        DestroyOutcome describing what was removed
    """
    kind = parse_destroy_type(kind) if not isinstance(kind, DestroyType) else kind
    options = options or GeneratorOptions()
    validate_model_name(name)
    ctx = create_model_context(name)
    prefix = "[dry-run] " if options.dry_run else ""

    log.info(f"\n{prefix}Destroying {LABELS[kind]} {ctx.pascal_name}...\n")

    directory = target_directory(kind, ctx, config)
    if confirm and not options.dry_run and not options.force and file_exists(directory):
        if not confirm(f"Delete {directory}?"):
            log.info("Aborted.")
            return DestroyOutcome(aborted=True)

    outcome = DestroyOutcome()
    outcome.directory_removed = delete_directory(directory, options)
    outcome.table_found = remove_from_schema(ctx.table_name, config, options)
    return outcome
