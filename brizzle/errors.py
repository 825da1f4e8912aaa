"""
Brizzle Errors - Exception hierarchy shared by the parser and generators
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_MODEL_NAME = "InvalidModelName"
    RESERVED_MODEL_NAME = "ReservedModelName"
    INVALID_FIELD_NAME = "InvalidFieldName"
    RESERVED_FIELD_NAME = "ReservedFieldName"
    INVALID_FIELD_TYPE = "InvalidFieldType"
    MISSING_ENUM_VALUES = "MissingEnumValues"
    EMPTY_ENUM = "EmptyEnum"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    DUPLICATE_ENUM_VALUE = "DuplicateEnumValue"
    MISSING_REFERENCE_TARGET = "MissingReferenceTarget"


class BrizzleError(Exception):
    """Base class for errors reported to the user."""


class ValidationError(BrizzleError):
    """A model name or field token broke one of the naming or type rules."""

    def __init__(self, kind: ErrorKind, token: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.token = token
        self.message = message

    def __repr__(self) -> str:
        return f"ValidationError({self.kind.value}, {self.token!r})"


class UnknownDestroyTypeError(BrizzleError):
    """destroy was asked to remove something other than scaffold, resource or api."""
