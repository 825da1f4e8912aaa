"""
Brizzle Imports - Drizzle import list resolution and merging

The shared schema file keeps a single ``import { ... } from "drizzle-orm/..."``
line. Generating a model computes the symbols its block needs and merges them
into that line, keeping whatever the developer already imports.
"""

from __future__ import annotations

import re
from typing import Iterable

from brizzle.dialects import (
    ENUM_SYMBOLS,
    Dialect,
    drizzle_import,
    id_symbol,
    resolve_column,
    table_function,
    timestamp_symbol,
)
from brizzle.fields import EnumField, Field
from brizzle.options import GeneratorOptions

DRIZZLE_IMPORT_RE = re.compile(r"""import\s*\{([^}]+)\}\s*from\s*["']drizzle-orm/[^"']+["'];?""")


def required_symbols(
    fields: Iterable[Field],
    dialect: Dialect,
    options: GeneratorOptions | None = None,
) -> set[str]:
    """
    Symbols a generated table block needs from the dialect's Drizzle module.

    Order carries no meaning here; use ordered_symbols before emitting.
    """
    options = options or GeneratorOptions()
    fields = list(fields)
    symbols = {table_function(dialect), id_symbol(dialect, options.uuid)}

    if not options.no_timestamps:
        symbols.add(timestamp_symbol(dialect))

    has_enums = any(isinstance(f, EnumField) for f in fields)
    if has_enums:
        # sqlite enums are text columns with an allowed-values list
        symbols.add(ENUM_SYMBOLS[dialect])

    for field in fields:
        if isinstance(field, EnumField):
            continue
        symbols.add(resolve_column(field, dialect, uuid=options.uuid).import_symbol)

    return symbols


def ordered_symbols(symbols: Iterable[str], dialect: Dialect) -> list[str]:
    """Table function first, then column builders alphabetically."""
    table_fn = table_function(dialect)
    rest = sorted(s for s in set(symbols) if s != table_fn)
    return [table_fn, *rest] if table_fn in symbols else rest


def extract_imports(content: str) -> list[str]:
    """Symbols of the first Drizzle import line, in their written order."""
    match = DRIZZLE_IMPORT_RE.search(content)
    if not match:
        return []
    return [s.strip() for s in match.group(1).split(",") if s.strip()]


def merge_imports(existing: Iterable[str], required: Iterable[str]) -> list[str]:
    """Existing symbols in their order, followed by new ones in discovery order."""
    merged = list(dict.fromkeys(existing))
    for symbol in required:
        if symbol not in merged:
            merged.append(symbol)
    return merged


def import_line(symbols: Iterable[str], dialect: Dialect) -> str:
    return f'import {{ {", ".join(symbols)} }} from "{drizzle_import(dialect)}";'


def update_schema_imports(content: str, required: Iterable[str], dialect: Dialect) -> str:
    """
    Merge required symbols into the schema's Drizzle import.

    Only the first matching import line is rewritten. When the file has none,
    a new import line is prepended.
    """
    merged = merge_imports(extract_imports(content), required)
    line = import_line(merged, dialect)

    if DRIZZLE_IMPORT_RE.search(content):
        return DRIZZLE_IMPORT_RE.sub(lambda _: line, content, count=1)
    if not content.strip():
        return line + "\n"
    return line + "\n\n" + content
