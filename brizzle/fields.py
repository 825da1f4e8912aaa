"""
Brizzle Fields - Parser and validator for the field definition shorthand

A field token looks like ``name[?][:type[?][:payload]][:unique]``::

    title                       -> string
    body:text?                  -> nullable text
    email:string:unique         -> unique string
    status:enum:draft,published -> enum with two values
    authorId:references:user    -> foreign key to the users table

Tokens are validated in full before any Field is built, so a bad token never
leaves a half-parsed field list behind.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, field_validator

from brizzle.errors import ErrorKind, ValidationError


# ═══════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════


class FieldType(str, Enum):
    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    INT = "int"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    BOOL = "bool"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    DATE = "date"
    FLOAT = "float"
    DECIMAL = "decimal"
    JSON = "json"
    UUID = "uuid"
    ENUM = "enum"
    REFERENCE = "reference"


PRIMITIVE_TYPES: tuple[FieldType, ...] = tuple(
    t for t in FieldType if t not in (FieldType.ENUM, FieldType.REFERENCE)
)

REFERENCE_KEYWORDS = ("references", "reference")


class Modifier(str, Enum):
    """Flags collected from a token while it is split."""

    NULLABLE = "nullable"
    UNIQUE = "unique"


# SQL keywords and column type names that make poor column names
SQL_RESERVED_WORDS = frozenset(
    [
        "select", "from", "where", "insert", "update", "delete", "drop",
        "create", "alter", "index", "table", "column", "database", "schema",
        "and", "or", "not", "null", "true", "false", "order", "by", "group",
        "having", "limit", "offset", "join", "left", "right", "inner", "outer",
        "on", "as", "in", "between", "like", "is", "case", "when", "then",
        "else", "end", "exists", "distinct", "all", "any", "union",
        "intersect", "except", "primary", "foreign", "key", "references",
        "unique", "default", "check", "constraint",
        "int", "integer", "float", "double", "decimal", "numeric", "boolean",
        "bool", "text", "varchar", "char", "date", "time", "timestamp",
        "datetime",
    ]
)

RESERVED_MODEL_NAMES = frozenset(["model", "schema", "db", "database", "table"])

MODEL_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")
FIELD_NAME_RE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
ENUM_VALUE_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*$")


# ═══════════════════════════════════════════════════════════════════════════
# FIELD MODELS
# ═══════════════════════════════════════════════════════════════════════════


class _BaseField(BaseModel):
    name: str
    nullable: bool = False
    unique: bool = False

    model_config = {"frozen": True}


class PrimitiveField(_BaseField):
    """A column of one of the primitive types."""

    kind: Literal["primitive"] = "primitive"
    type: FieldType

    @field_validator("type")
    @classmethod
    def validate_primitive(cls, v: FieldType) -> FieldType:
        if v not in PRIMITIVE_TYPES:
            raise ValueError(f"{v.value} is not a primitive field type")
        return v


class EnumField(_BaseField):
    """A column restricted to a fixed list of values."""

    kind: Literal["enum"] = "enum"
    type: Literal[FieldType.ENUM] = FieldType.ENUM
    enum_values: tuple[str, ...]


class ReferenceField(_BaseField):
    """A foreign key column pointing at another model's id."""

    kind: Literal["reference"] = "reference"
    type: Literal[FieldType.REFERENCE] = FieldType.REFERENCE
    reference_to: str

    @property
    def storage_type(self) -> FieldType:
        # Swapped for the uuid storage type by the type map in uuid mode
        return FieldType.INTEGER


Field = Union[PrimitiveField, EnumField, ReferenceField]


# ═══════════════════════════════════════════════════════════════════════════
# TOKENS
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class _Token:
    raw: str
    name: str
    type_name: str
    payload: str | None = None
    modifiers: frozenset[Modifier] = frozenset()


def _split_token(raw: str) -> _Token:
    """Split a raw token into name, type, payload and modifiers."""
    parts = raw.split(":")
    name = parts[0]
    type_name = parts[1] if len(parts) > 1 and parts[1] else FieldType.STRING.value
    payload = parts[2] if len(parts) > 2 else None

    modifiers: set[Modifier] = set()
    if name.endswith("?"):
        name = name[:-1]
        modifiers.add(Modifier.NULLABLE)
    if type_name.endswith("?"):
        type_name = type_name[:-1]
        modifiers.add(Modifier.NULLABLE)
    if Modifier.UNIQUE.value in parts[1:]:
        modifiers.add(Modifier.UNIQUE)
    if type_name == Modifier.UNIQUE.value:
        # "email:unique" keeps the default type
        type_name = FieldType.STRING.value
    if payload == Modifier.UNIQUE.value:
        payload = None

    return _Token(
        raw=raw,
        name=name,
        type_name=type_name,
        payload=payload,
        modifiers=frozenset(modifiers),
    )


# ═══════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════════


def validate_model_name(name: str) -> None:
    """
    Validate a model name.

    Raises:
        ValidationError: InvalidModelName or ReservedModelName
    """
    if not name:
        raise ValidationError(ErrorKind.INVALID_MODEL_NAME, name, "Model name is required")
    if not MODEL_NAME_RE.match(name):
        raise ValidationError(
            ErrorKind.INVALID_MODEL_NAME,
            name,
            f'Invalid model name "{name}". Must start with a letter and contain only letters and numbers.',
        )
    if name.lower() in RESERVED_MODEL_NAMES:
        raise ValidationError(
            ErrorKind.RESERVED_MODEL_NAME,
            name,
            f'"{name}" is a reserved word and cannot be used as a model name.',
        )


def _enum_values(token: _Token) -> list[str]:
    name = token.name
    if not token.payload:
        raise ValidationError(
            ErrorKind.MISSING_ENUM_VALUES,
            token.raw,
            f'Enum field "{name}" requires values. Example: {name}:enum:draft,published,archived',
        )

    values = token.payload.split(",")
    for value in values:
        if not value:
            raise ValidationError(
                ErrorKind.EMPTY_ENUM,
                token.raw,
                f'Enum field "{name}" has an empty value. Values must not be empty.',
            )
        if not ENUM_VALUE_RE.match(value):
            raise ValidationError(
                ErrorKind.INVALID_ENUM_VALUE,
                token.raw,
                f'Invalid enum value "{value}" for field "{name}". Values must start with a letter '
                "and contain only letters, numbers, underscores, or hyphens.",
            )

    if len(set(values)) != len(values):
        raise ValidationError(
            ErrorKind.DUPLICATE_ENUM_VALUE,
            token.raw,
            f'Enum field "{name}" has duplicate values.',
        )
    return values


def _check_token(token: _Token) -> None:
    name = token.name
    if not name:
        raise ValidationError(
            ErrorKind.INVALID_FIELD_NAME,
            token.raw,
            f'Invalid field definition "{token.raw}". Field name is required.',
        )
    if not FIELD_NAME_RE.match(name):
        raise ValidationError(
            ErrorKind.INVALID_FIELD_NAME,
            token.raw,
            f'Invalid field name "{name}". Must be camelCase (start with lowercase letter).',
        )
    if name.lower() in SQL_RESERVED_WORDS:
        raise ValidationError(
            ErrorKind.RESERVED_FIELD_NAME,
            token.raw,
            f'Field name "{name}" is a SQL reserved word. '
            f'Consider renaming to "{name}Value" or "{name}Field".',
        )

    if token.type_name in REFERENCE_KEYWORDS:
        if not token.payload:
            raise ValidationError(
                ErrorKind.MISSING_REFERENCE_TARGET,
                token.raw,
                f'Reference field "{name}" requires a target model. Example: {name}:references:user',
            )
        return

    if token.type_name == FieldType.ENUM.value:
        _enum_values(token)
        return

    if token.type_name not in {t.value for t in PRIMITIVE_TYPES}:
        valid = ", ".join(t.value for t in PRIMITIVE_TYPES)
        raise ValidationError(
            ErrorKind.INVALID_FIELD_TYPE,
            token.raw,
            f'Invalid field type "{token.type_name}". Valid types: {valid}, enum, references',
        )


def validate_field_definition(raw: str) -> None:
    """Raise ValidationError if the token breaks any naming or type rule."""
    _check_token(_split_token(raw))


# ═══════════════════════════════════════════════════════════════════════════
# PARSING
# ═══════════════════════════════════════════════════════════════════════════


def _build_field(token: _Token) -> Field:
    common = {
        "name": token.name,
        "nullable": Modifier.NULLABLE in token.modifiers,
        "unique": Modifier.UNIQUE in token.modifiers,
    }

    if token.type_name in REFERENCE_KEYWORDS:
        return ReferenceField(reference_to=token.payload, **common)
    if token.type_name == FieldType.ENUM.value:
        return EnumField(enum_values=tuple(_enum_values(token)), **common)
    return PrimitiveField(type=FieldType(token.type_name), **common)


def parse_field(raw: str) -> Field:
    """Parse a single field token."""
    token = _split_token(raw)
    _check_token(token)
    return _build_field(token)


def parse_fields(raws: list[str]) -> list[Field]:
    """
    Parse field tokens into Field models, preserving their order.

    Every token is validated before the first Field is built.

    Raises:
        ValidationError: on the first invalid token
    """
    tokens = [_split_token(raw) for raw in raws]
    for token in tokens:
        _check_token(token)
    return [_build_field(token) for token in tokens]
