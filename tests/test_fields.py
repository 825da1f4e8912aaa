"""Tests for the field definition parser and validator."""

import pytest

from brizzle.errors import BrizzleError, ErrorKind, ValidationError
from brizzle.fields import (
    EnumField,
    FieldType,
    PrimitiveField,
    ReferenceField,
    parse_field,
    parse_fields,
    validate_field_definition,
    validate_model_name,
)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseField:
    def test_bare_name_defaults_to_string(self):
        field = parse_field("title")

        assert isinstance(field, PrimitiveField)
        assert field.name == "title"
        assert field.type == FieldType.STRING

    def test_primitive_type(self):
        field = parse_field("published:boolean")

        assert isinstance(field, PrimitiveField)
        assert field.type == FieldType.BOOLEAN
        assert field.kind == "primitive"
        assert not field.nullable
        assert not field.unique

    def test_nullable_on_type(self):
        field = parse_field("body:text?")

        assert field.type == FieldType.TEXT
        assert field.nullable

    def test_nullable_on_name(self):
        field = parse_field("body?:text")

        assert field.name == "body"
        assert field.nullable

    def test_unique_modifier(self):
        field = parse_field("email:string:unique")

        assert field.type == FieldType.STRING
        assert field.unique

    def test_unique_in_type_position_keeps_default_type(self):
        field = parse_field("email:unique")

        assert field.type == FieldType.STRING
        assert field.unique

    def test_enum(self):
        field = parse_field("status:enum:draft,published,archived")

        assert isinstance(field, EnumField)
        assert field.kind == "enum"
        assert field.enum_values == ("draft", "published", "archived")

    def test_enum_with_unique(self):
        field = parse_field("status:enum:draft,published:unique")

        assert field.enum_values == ("draft", "published")
        assert field.unique

    @pytest.mark.parametrize("keyword", ["references", "reference"])
    def test_reference(self, keyword):
        field = parse_field(f"authorId:{keyword}:user")

        assert isinstance(field, ReferenceField)
        assert field.kind == "reference"
        assert field.reference_to == "user"
        assert field.storage_type == FieldType.INTEGER

    def test_nullable_reference(self):
        field = parse_field("parentId?:references:category")

        assert field.nullable
        assert field.reference_to == "category"

    def test_fields_are_frozen(self):
        field = parse_field("title")
        with pytest.raises(Exception):
            field.name = "other"

    @pytest.mark.parametrize("type_name", [t.value for t in FieldType if t not in (FieldType.ENUM, FieldType.REFERENCE)])
    def test_every_primitive_type_parses(self, type_name):
        assert parse_field(f"value:{type_name}").type == FieldType(type_name)


def test_parse_fields_preserves_order():
    fields = parse_fields(["title", "body:text?", "authorId:references:user"])

    assert [f.name for f in fields] == ["title", "body", "authorId"]


def test_parse_fields_validates_every_token_first():
    with pytest.raises(ValidationError) as exc_info:
        parse_fields(["title", "count:nope"])

    assert exc_info.value.kind == ErrorKind.INVALID_FIELD_TYPE


def test_parse_fields_empty():
    assert parse_fields([]) == []


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "token, kind",
    [
        (":string", ErrorKind.INVALID_FIELD_NAME),
        ("Title:string", ErrorKind.INVALID_FIELD_NAME),
        ("first_name:string", ErrorKind.INVALID_FIELD_NAME),
        ("1st:string", ErrorKind.INVALID_FIELD_NAME),
        ("order:string", ErrorKind.RESERVED_FIELD_NAME),
        ("select:text", ErrorKind.RESERVED_FIELD_NAME),
        ("count:foo", ErrorKind.INVALID_FIELD_TYPE),
        ("status:enum", ErrorKind.MISSING_ENUM_VALUES),
        ("status:enum:draft,,published", ErrorKind.EMPTY_ENUM),
        ("status:enum:1draft", ErrorKind.INVALID_ENUM_VALUE),
        ("status:enum:draft,draft", ErrorKind.DUPLICATE_ENUM_VALUE),
        ("authorId:references", ErrorKind.MISSING_REFERENCE_TARGET),
    ],
)
def test_invalid_tokens(token, kind):
    with pytest.raises(ValidationError) as exc_info:
        validate_field_definition(token)

    assert exc_info.value.kind == kind
    assert exc_info.value.token == token


def test_invalid_type_message_lists_valid_types():
    with pytest.raises(ValidationError, match='Invalid field type "foo"') as exc_info:
        parse_field("count:foo")

    assert "enum, references" in exc_info.value.message


def test_missing_enum_values_message_has_example():
    with pytest.raises(ValidationError, match="status:enum:draft,published,archived"):
        parse_field("status:enum")


def test_reserved_field_name_suggests_rename():
    with pytest.raises(ValidationError, match='"orderValue"'):
        parse_field("order:string")


def test_validation_error_is_brizzle_error():
    with pytest.raises(BrizzleError):
        parse_field("Bad")


# ---------------------------------------------------------------------------
# Model names
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name", ["post", "Post", "blogPost", "user2"])
def test_valid_model_names(name):
    validate_model_name(name)


@pytest.mark.parametrize("name", ["", "123post", "blog_post", "blog-post", "my post"])
def test_invalid_model_names(name):
    with pytest.raises(ValidationError) as exc_info:
        validate_model_name(name)

    assert exc_info.value.kind == ErrorKind.INVALID_MODEL_NAME


@pytest.mark.parametrize("name", ["model", "schema", "DB", "Database", "table"])
def test_reserved_model_names(name):
    with pytest.raises(ValidationError, match="reserved word") as exc_info:
        validate_model_name(name)

    assert exc_info.value.kind == ErrorKind.RESERVED_MODEL_NAME
