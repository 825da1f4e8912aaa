"""
Brizzle Forms - Field helpers for the scaffold page templates

Decides which input each field gets and how its FormData value is converted
back into the column's type.
"""

from __future__ import annotations

from brizzle.fields import EnumField, Field, FieldType, ReferenceField

INTEGER_TYPES = (FieldType.INTEGER, FieldType.INT, FieldType.BIGINT)
BOOLEAN_TYPES = (FieldType.BOOLEAN, FieldType.BOOL)
DATETIME_TYPES = (FieldType.DATETIME, FieldType.TIMESTAMP)


def _value_type(field: Field, uuid: bool = False) -> FieldType:
    if isinstance(field, ReferenceField):
        return FieldType.UUID if uuid else field.storage_type
    if isinstance(field, EnumField):
        return FieldType.STRING
    return field.type


def input_kind(field: Field, uuid: bool = False) -> str:
    """Name of the form control used for a field."""
    if isinstance(field, EnumField):
        return "select"

    value_type = _value_type(field, uuid)
    if value_type in (FieldType.TEXT, FieldType.JSON):
        return "textarea"
    if value_type in BOOLEAN_TYPES:
        return "checkbox"
    if value_type in INTEGER_TYPES or value_type in (FieldType.FLOAT, FieldType.DECIMAL):
        return "number"
    if value_type == FieldType.DATE:
        return "date"
    if value_type in DATETIME_TYPES:
        return "datetime"
    return "text"


def input_step(field: Field) -> str | None:
    if isinstance(field, (EnumField, ReferenceField)):
        return None
    return {FieldType.FLOAT: "any", FieldType.DECIMAL: "0.01"}.get(field.type)


def form_data_value(field: Field, uuid: bool = False) -> str:
    """TypeScript expression reading a field back out of ``formData``."""
    get_value = f'formData.get("{field.name}")'
    as_string = f"{get_value} as string"
    value_type = _value_type(field, uuid)

    if value_type in BOOLEAN_TYPES:
        expression = f'{get_value} === "on"'
        return f"{expression} ? true : null" if field.nullable else expression

    if value_type in INTEGER_TYPES:
        expression = f"parseInt({as_string})"
    elif value_type == FieldType.FLOAT:
        expression = f"parseFloat({as_string})"
    elif value_type in DATETIME_TYPES or value_type == FieldType.DATE:
        expression = f"new Date({as_string})"
    elif value_type == FieldType.JSON:
        expression = f"JSON.parse({as_string})"
    else:
        # decimals stay strings to keep their precision
        expression = as_string

    if field.nullable:
        return f"{get_value} ? {expression} : null"
    return expression


def display_value(field: Field, camel_name: str) -> str:
    """JSX expression showing a field on the show page."""
    accessor = f"{camel_name}.{field.name}"
    value_type = _value_type(field)

    if value_type in BOOLEAN_TYPES:
        return f'{{{accessor} ? "Yes" : "No"}}'
    if value_type in DATETIME_TYPES or value_type == FieldType.DATE:
        return f"{{{accessor}?.toLocaleString()}}"
    if value_type == FieldType.JSON:
        return f"{{JSON.stringify({accessor})}}"
    return f"{{{accessor}}}"
