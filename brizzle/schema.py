"""
Brizzle Schema - Table block synthesis and schema file surgery

The Drizzle ``schema.ts`` file is shared with the developer: it may hold
hand-written tables, comments and exports next to generated ones. Blocks are
located purely structurally, by matching the ``export const x = <fn>("table"``
header and counting braces until they balance again::

    SEARCHING --header--> IN_BLOCK --braces balance--> FOUND
        |                     |
        +------- EOF ---------+--> NOT_FOUND

Nothing here raises on odd input. Unbalanced braces or a missing header just
mean the block is not found, and the content is returned untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from brizzle.dialects import (
    TABLE_FUNCTIONS,
    Dialect,
    id_column,
    resolve_column,
    table_function,
    timestamp_columns,
)
from brizzle.fields import Field, ReferenceField
from brizzle.imports import ordered_symbols, required_symbols, update_schema_imports
from brizzle.options import GeneratorOptions
from brizzle.strings import ModelContext, table_name_for

TABLE_FUNCTION_PATTERN = "(?:" + "|".join(TABLE_FUNCTIONS.values()) + ")"


def _header_pattern(table_name: str, flags: int = 0) -> re.Pattern[str]:
    return re.compile(
        rf"""^export\s+const\s+\w+\s*=\s*{TABLE_FUNCTION_PATTERN}\s*\(\s*["']{re.escape(table_name)}["']""",
        flags,
    )


def _enum_declaration_pattern(table_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"""^export\s+const\s+\w+\s*=\s*pgEnum\s*\(\s*["']{re.escape(table_name)}_\w+["']"""
    )


# ═══════════════════════════════════════════════════════════════════════════
# BLOCK SCANNER
# ═══════════════════════════════════════════════════════════════════════════


class ScanState(str, Enum):
    SEARCHING = "searching"
    IN_BLOCK = "in_block"
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class BlockSpan:
    """Inclusive line range of a table block."""

    start: int
    end: int


class BlockScanner:
    """Finds the lines of one table block by brace-depth scanning."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        self.header = _header_pattern(table_name)
        self.state = ScanState.SEARCHING

    def scan(self, lines: Sequence[str]) -> BlockSpan | None:
        self.state = ScanState.SEARCHING
        start = -1
        depth = 0
        saw_open_brace = False

        for index, line in enumerate(lines):
            if self.state == ScanState.SEARCHING:
                if not self.header.match(line):
                    continue
                self.state = ScanState.IN_BLOCK
                start = index
                depth = 0
                saw_open_brace = False

            for char in line:
                if char == "{":
                    depth += 1
                    saw_open_brace = True
                elif char == "}":
                    depth -= 1

            if saw_open_brace and depth == 0:
                self.state = ScanState.FOUND
                return BlockSpan(start, index)

        self.state = ScanState.NOT_FOUND
        return None


def has_table(table_name: str, content: str) -> bool:
    """Whether any line opens a table block for ``table_name``."""
    return _header_pattern(table_name, re.MULTILINE).search(content) is not None


def find_block(table_name: str, content: str) -> BlockSpan | None:
    return BlockScanner(table_name).scan(content.split("\n"))


def collapse_blank_lines(content: str) -> str:
    """Squash runs of blank lines down to a single blank line."""
    return re.sub(r"\n{3,}", "\n\n", content)


def _normalize_tail(content: str) -> str:
    content = content.rstrip("\n")
    return content + "\n" if content else ""


def remove_block(table_name: str, content: str) -> str:
    """
    Remove a table block, and the enum declarations generated right above it.

    Returns ``content`` unchanged when the block cannot be found.
    """
    lines = content.split("\n")
    span = BlockScanner(table_name).scan(lines)
    if span is None:
        return content

    start = span.start
    enum_declaration = _enum_declaration_pattern(table_name)
    while start > 0 and enum_declaration.match(lines[start - 1]):
        start -= 1

    del lines[start : span.end + 1]
    return _normalize_tail(collapse_blank_lines("\n".join(lines)))


def insert_block(table_name: str, content: str, block: str) -> str:
    """Append a block after one blank line, unless the table already exists."""
    if has_table(table_name, content):
        return content

    block = block.strip("\n")
    base = content.rstrip("\n")
    if not base:
        return block + "\n"
    return f"{base}\n\n{block}\n"


def replace_block(table_name: str, content: str, block: str) -> str:
    """Overwrite an existing block: remove it, then append the new one."""
    return insert_block(table_name, remove_block(table_name, content), block)


# ═══════════════════════════════════════════════════════════════════════════
# BLOCK SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def render_block(
    ctx: ModelContext,
    fields: Sequence[Field],
    dialect: Dialect,
    options: GeneratorOptions | None = None,
) -> str:
    """Render the enum declarations and table definition for one model."""
    options = options or GeneratorOptions()

    declarations: list[str] = []
    columns = [id_column(dialect, options.uuid)]
    for field in fields:
        spec = resolve_column(field, dialect, uuid=options.uuid, model=ctx)
        if spec.declaration and spec.declaration not in declarations:
            declarations.append(spec.declaration)
        columns.append(spec.render(field))
    columns.extend(timestamp_columns(dialect, options.no_timestamps) or [])

    body = "\n".join(f"  {column}," for column in columns)
    table = (
        f'export const {ctx.camel_plural} = {table_function(dialect)}("{ctx.table_name}", {{\n'
        f"{body}\n"
        "});"
    )
    return "\n".join([*declarations, table])


# ═══════════════════════════════════════════════════════════════════════════
# SCHEMA UPDATES
# ═══════════════════════════════════════════════════════════════════════════


class SchemaOutcome(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"
    REPLACED = "replaced"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    UNBALANCED = "unbalanced"


@dataclass(frozen=True)
class SchemaUpdate:
    """New schema content and what happened to the table."""

    content: str
    outcome: SchemaOutcome

    @property
    def changed(self) -> bool:
        return self.outcome not in (
            SchemaOutcome.SKIPPED,
            SchemaOutcome.NOT_FOUND,
            SchemaOutcome.UNBALANCED,
        )


def apply_model(
    content: str,
    ctx: ModelContext,
    fields: Sequence[Field],
    dialect: Dialect,
    options: GeneratorOptions | None = None,
) -> SchemaUpdate:
    """
    Compute the schema content after generating a model.

    An existing table is left alone unless ``options.force`` is set, in which
    case it is replaced. A header whose braces never balance cannot be
    replaced; the content is returned untouched with outcome ``UNBALANCED``.
    """
    options = options or GeneratorOptions()
    exists = has_table(ctx.table_name, content)
    if exists and not options.force:
        return SchemaUpdate(content, SchemaOutcome.SKIPPED)

    if exists:
        if find_block(ctx.table_name, content) is None:
            return SchemaUpdate(content, SchemaOutcome.UNBALANCED)
        content = remove_block(ctx.table_name, content)

    symbols = ordered_symbols(required_symbols(fields, dialect, options), dialect)
    content = update_schema_imports(content, symbols, dialect)
    content = insert_block(ctx.table_name, content, render_block(ctx, fields, dialect, options))

    return SchemaUpdate(content, SchemaOutcome.REPLACED if exists else SchemaOutcome.CREATED)


def remove_model(content: str, table_name: str) -> SchemaUpdate:
    """Compute the schema content after destroying a model."""
    if find_block(table_name, content) is None:
        return SchemaUpdate(content, SchemaOutcome.NOT_FOUND)
    return SchemaUpdate(remove_block(table_name, content), SchemaOutcome.REMOVED)


def missing_references(
    fields: Iterable[Field],
    content: str,
    own_table: str | None = None,
) -> list[ReferenceField]:
    """Reference fields whose target table is not in the schema yet."""
    missing = []
    for field in fields:
        if not isinstance(field, ReferenceField):
            continue
        table_name = table_name_for(field.reference_to)
        if table_name != own_table and not has_table(table_name, content):
            missing.append(field)
    return missing
