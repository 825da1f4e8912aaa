"""
Brizzle Dialects - Drizzle column types for sqlite, postgresql and mysql

One logical Field maps onto three different Drizzle column systems. The
lookups here are pure; the dialect itself is detected once per invocation by
brizzle.config and passed in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from brizzle.fields import EnumField, Field, FieldType, ReferenceField
from brizzle.strings import (
    ModelContext,
    camel_case,
    create_model_context,
    escape_string,
    pascal_case,
    snake_case,
)


class Dialect(str, Enum):
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"


TABLE_FUNCTIONS: dict[Dialect, str] = {
    Dialect.SQLITE: "sqliteTable",
    Dialect.POSTGRESQL: "pgTable",
    Dialect.MYSQL: "mysqlTable",
}

DRIZZLE_IMPORTS: dict[Dialect, str] = {
    Dialect.SQLITE: "drizzle-orm/sqlite-core",
    Dialect.POSTGRESQL: "drizzle-orm/pg-core",
    Dialect.MYSQL: "drizzle-orm/mysql-core",
}

ENUM_SYMBOLS: dict[Dialect, str] = {
    Dialect.SQLITE: "text",
    Dialect.POSTGRESQL: "pgEnum",
    Dialect.MYSQL: "mysqlEnum",
}

BOOLEAN_MODE = '{ mode: "boolean" }'
TIMESTAMP_MODE = '{ mode: "timestamp" }'
VARCHAR_LENGTH = "{ length: 255 }"
UUID_LENGTH = "{ length: 36 }"
DECIMAL_PRECISION = "{ precision: 10, scale: 2 }"


# ═══════════════════════════════════════════════════════════════════════════
# TYPE MAPS
# ═══════════════════════════════════════════════════════════════════════════

# FieldType -> (builder symbol, inline options)
SQLITE_TYPE_MAP: dict[FieldType, tuple[str, str | None]] = {
    FieldType.STRING: ("text", None),
    FieldType.TEXT: ("text", None),
    FieldType.INTEGER: ("integer", None),
    FieldType.INT: ("integer", None),
    FieldType.BIGINT: ("integer", None),  # sqlite doesn't distinguish
    FieldType.BOOLEAN: ("integer", BOOLEAN_MODE),
    FieldType.BOOL: ("integer", BOOLEAN_MODE),
    FieldType.DATETIME: ("integer", TIMESTAMP_MODE),
    FieldType.TIMESTAMP: ("integer", TIMESTAMP_MODE),
    FieldType.DATE: ("integer", TIMESTAMP_MODE),
    FieldType.FLOAT: ("real", None),
    FieldType.DECIMAL: ("text", None),  # no native fixed-point type, keep the digits
    FieldType.JSON: ("text", None),
    FieldType.UUID: ("text", None),
}

POSTGRESQL_TYPE_MAP: dict[FieldType, tuple[str, str | None]] = {
    FieldType.STRING: ("text", None),
    FieldType.TEXT: ("text", None),
    FieldType.INTEGER: ("integer", None),
    FieldType.INT: ("integer", None),
    FieldType.BIGINT: ("bigint", '{ mode: "number" }'),
    FieldType.BOOLEAN: ("boolean", None),
    FieldType.BOOL: ("boolean", None),
    FieldType.DATETIME: ("timestamp", None),
    FieldType.TIMESTAMP: ("timestamp", None),
    FieldType.DATE: ("date", None),
    FieldType.FLOAT: ("doublePrecision", None),
    FieldType.DECIMAL: ("numeric", DECIMAL_PRECISION),
    FieldType.JSON: ("jsonb", None),
    FieldType.UUID: ("uuid", None),
}

MYSQL_TYPE_MAP: dict[FieldType, tuple[str, str | None]] = {
    FieldType.STRING: ("varchar", VARCHAR_LENGTH),
    FieldType.TEXT: ("text", None),
    FieldType.INTEGER: ("int", None),
    FieldType.INT: ("int", None),
    FieldType.BIGINT: ("bigint", '{ mode: "number" }'),
    FieldType.BOOLEAN: ("boolean", None),
    FieldType.BOOL: ("boolean", None),
    FieldType.DATETIME: ("datetime", None),
    FieldType.TIMESTAMP: ("timestamp", None),
    FieldType.DATE: ("date", None),
    FieldType.FLOAT: ("double", None),
    FieldType.DECIMAL: ("decimal", DECIMAL_PRECISION),
    FieldType.JSON: ("json", None),
    FieldType.UUID: ("varchar", UUID_LENGTH),
}

TYPE_MAPS: dict[Dialect, dict[FieldType, tuple[str, str | None]]] = {
    Dialect.SQLITE: SQLITE_TYPE_MAP,
    Dialect.POSTGRESQL: POSTGRESQL_TYPE_MAP,
    Dialect.MYSQL: MYSQL_TYPE_MAP,
}

# Storage used by a uuid primary key, and by references to it
UUID_ID_TYPES: dict[Dialect, tuple[str, str | None]] = {
    Dialect.SQLITE: ("text", None),
    Dialect.POSTGRESQL: ("uuid", None),
    Dialect.MYSQL: ("varchar", UUID_LENGTH),
}


def table_function(dialect: Dialect) -> str:
    """Drizzle table function name (sqliteTable, pgTable, mysqlTable)."""
    return TABLE_FUNCTIONS[dialect]


def drizzle_import(dialect: Dialect) -> str:
    """npm module the dialect's column builders are imported from."""
    return DRIZZLE_IMPORTS[dialect]


def _storage_type(field: Field) -> FieldType:
    if isinstance(field, ReferenceField):
        return field.storage_type
    if isinstance(field, EnumField):
        return FieldType.STRING
    return field.type


def drizzle_type(field: Field, dialect: Dialect = Dialect.SQLITE) -> str:
    """
    Drizzle builder for a field, with inline options when the type needs them.

    A sqlite boolean maps to ``integer({ mode: "boolean" })``.
    """
    symbol, options = TYPE_MAPS[dialect][_storage_type(field)]
    if options:
        return f"{symbol}({options})"
    return symbol


# ═══════════════════════════════════════════════════════════════════════════
# COLUMN SPECS
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ColumnSpec:
    """A resolved Drizzle column: builder, options, and foreign key target."""

    symbol: str
    import_symbol: str
    options: str | None = None
    args: tuple[str, ...] = ()
    declaration: str | None = None  # top-level statement the column depends on
    references: str | None = None  # schema variable of the referenced table

    def render(self, field: Field, column_name: str | None = None) -> str:
        """Render the ``name: builder(...)...`` column line, without trailing comma."""
        column_name = column_name or snake_case(field.name)
        call_args = [f'"{column_name}"', *self.args]
        if self.options:
            call_args.append(self.options)

        column = f"{field.name}: {self.symbol}({', '.join(call_args)})"
        if not field.nullable:
            column += ".notNull()"
        if field.unique:
            column += ".unique()"
        if self.references:
            column += f".references(() => {self.references}.id)"
        return column


def _enum_array(values: tuple[str, ...]) -> str:
    return "[" + ", ".join(f'"{escape_string(v)}"' for v in values) + "]"


def enum_type_name(field: EnumField, model: ModelContext | None) -> tuple[str, str]:
    """Schema variable and database type name of a postgresql enum."""
    if model is None:
        return f"{field.name}Enum", snake_case(field.name)
    return (
        f"{model.camel_name}{pascal_case(field.name)}Enum",
        f"{model.table_name}_{snake_case(field.name)}",
    )


def _resolve_enum(field: EnumField, dialect: Dialect, model: ModelContext | None) -> ColumnSpec:
    """
    postgresql enums are top-level ``pgEnum`` types declared above the table.

    Drizzle's ``mysqlEnum`` is a column builder, not a top-level declaration,
    so mysql enums are emitted inline in the column. sqlite has no enum type
    and stores the values as ``text`` with an ``enum`` option.
    """
    values = _enum_array(field.enum_values)

    if dialect == Dialect.POSTGRESQL:
        variable, type_name = enum_type_name(field, model)
        return ColumnSpec(
            symbol=variable,
            import_symbol=ENUM_SYMBOLS[dialect],
            declaration=f'export const {variable} = pgEnum("{type_name}", {values});',
        )
    if dialect == Dialect.MYSQL:
        return ColumnSpec(
            symbol="mysqlEnum",
            import_symbol=ENUM_SYMBOLS[dialect],
            args=(values,),
        )
    return ColumnSpec(
        symbol="text",
        import_symbol=ENUM_SYMBOLS[dialect],
        options=f"{{ enum: {values} }}",
    )


def resolve_column(
    field: Field,
    dialect: Dialect,
    uuid: bool = False,
    model: ModelContext | None = None,
) -> ColumnSpec:
    """
    Resolve a field to its Drizzle column for one dialect.

    Args:
        field: Parsed field
        dialect: Target dialect
        uuid: Whether ids (and so foreign keys) are uuids
        model: Owning model, used to name postgresql enum types
    """
    if isinstance(field, EnumField):
        return _resolve_enum(field, dialect, model)

    if isinstance(field, ReferenceField):
        if uuid:
            symbol, options = UUID_ID_TYPES[dialect]
        else:
            symbol, options = TYPE_MAPS[dialect][field.storage_type]
        target = create_model_context(field.reference_to)
        return ColumnSpec(
            symbol=symbol,
            import_symbol=symbol,
            options=options,
            references=camel_case(target.plural_name),
        )

    symbol, options = TYPE_MAPS[dialect][field.type]
    return ColumnSpec(symbol=symbol, import_symbol=symbol, options=options)


# ═══════════════════════════════════════════════════════════════════════════
# ID AND TIMESTAMP COLUMNS
# ═══════════════════════════════════════════════════════════════════════════


def id_symbol(dialect: Dialect, uuid: bool = False) -> str:
    """Column builder the id column is declared with."""
    if uuid:
        return UUID_ID_TYPES[dialect][0]
    return {
        Dialect.SQLITE: "integer",
        Dialect.POSTGRESQL: "serial",
        Dialect.MYSQL: "int",
    }[dialect]


def id_column(dialect: Dialect, uuid: bool = False) -> str:
    """Primary key column line."""
    if uuid:
        return {
            Dialect.POSTGRESQL: 'id: uuid("id").primaryKey().defaultRandom()',
            Dialect.MYSQL: 'id: varchar("id", { length: 36 }).primaryKey().$defaultFn(() => crypto.randomUUID())',
            Dialect.SQLITE: 'id: text("id").primaryKey().$defaultFn(() => crypto.randomUUID())',
        }[dialect]

    return {
        Dialect.POSTGRESQL: 'id: serial("id").primaryKey()',
        Dialect.MYSQL: 'id: int("id").primaryKey().autoincrement()',
        Dialect.SQLITE: 'id: integer("id").primaryKey({ autoIncrement: true })',
    }[dialect]


def timestamp_symbol(dialect: Dialect) -> str:
    """Column builder the createdAt/updatedAt pair is declared with."""
    return {
        Dialect.SQLITE: "integer",
        Dialect.POSTGRESQL: "timestamp",
        Dialect.MYSQL: "datetime",
    }[dialect]


def timestamp_columns(dialect: Dialect, no_timestamps: bool = False) -> list[str] | None:
    """createdAt/updatedAt column lines, or None when timestamps are disabled."""
    if no_timestamps:
        return None

    def column(name: str, column_name: str) -> str:
        if dialect == Dialect.POSTGRESQL:
            return f'{name}: timestamp("{column_name}")\n    .notNull()\n    .defaultNow()'
        if dialect == Dialect.MYSQL:
            return (
                f'{name}: datetime("{column_name}")\n    .notNull()\n'
                "    .$defaultFn(() => new Date())"
            )
        return (
            f'{name}: integer("{column_name}", {TIMESTAMP_MODE})\n    .notNull()\n'
            "    .$defaultFn(() => new Date())"
        )

    return [column("createdAt", "created_at"), column("updatedAt", "updated_at")]
