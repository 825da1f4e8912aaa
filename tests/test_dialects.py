"""Tests for the per-dialect Drizzle column mapping."""

import pytest

from brizzle.dialects import (
    TYPE_MAPS,
    Dialect,
    drizzle_import,
    drizzle_type,
    enum_type_name,
    id_column,
    id_symbol,
    resolve_column,
    table_function,
    timestamp_columns,
)
from brizzle.fields import PRIMITIVE_TYPES, parse_field
from brizzle.strings import create_model_context


@pytest.mark.parametrize("dialect", list(Dialect))
def test_every_primitive_is_mapped(dialect):
    for field_type in PRIMITIVE_TYPES:
        assert field_type in TYPE_MAPS[dialect]


def test_table_functions_and_modules():
    assert table_function(Dialect.SQLITE) == "sqliteTable"
    assert table_function(Dialect.POSTGRESQL) == "pgTable"
    assert table_function(Dialect.MYSQL) == "mysqlTable"
    assert drizzle_import(Dialect.POSTGRESQL) == "drizzle-orm/pg-core"


@pytest.mark.parametrize(
    "token, dialect, expected",
    [
        ("published:boolean", Dialect.SQLITE, 'integer({ mode: "boolean" })'),
        ("publishedAt:datetime", Dialect.SQLITE, 'integer({ mode: "timestamp" })'),
        ("price:decimal", Dialect.SQLITE, "text"),
        ("ratio:float", Dialect.SQLITE, "real"),
        ("published:boolean", Dialect.POSTGRESQL, "boolean"),
        ("price:decimal", Dialect.POSTGRESQL, "numeric({ precision: 10, scale: 2 })"),
        ("meta:json", Dialect.POSTGRESQL, "jsonb"),
        ("views:bigint", Dialect.POSTGRESQL, 'bigint({ mode: "number" })'),
        ("title:string", Dialect.MYSQL, "varchar({ length: 255 })"),
        ("token:uuid", Dialect.MYSQL, "varchar({ length: 36 })"),
        ("published:boolean", Dialect.MYSQL, "boolean"),
        ("count:integer", Dialect.MYSQL, "int"),
        ("ratio:float", Dialect.MYSQL, "double"),
    ],
)
def test_drizzle_type(token, dialect, expected):
    assert drizzle_type(parse_field(token), dialect) == expected


# ---------------------------------------------------------------------------
# Column rendering
# ---------------------------------------------------------------------------


def render(token, dialect, uuid=False, model="post"):
    field = parse_field(token)
    return resolve_column(field, dialect, uuid=uuid, model=create_model_context(model)).render(field)


class TestColumnRendering:
    def test_required_column(self):
        assert render("title", Dialect.SQLITE) == 'title: text("title").notNull()'

    def test_nullable_column_has_no_not_null(self):
        assert render("body:text?", Dialect.POSTGRESQL) == 'body: text("body")'

    def test_column_name_is_snake_case(self):
        assert render("publishedAt:datetime", Dialect.POSTGRESQL) == (
            'publishedAt: timestamp("published_at").notNull()'
        )

    def test_options_follow_column_name(self):
        assert render("published:boolean", Dialect.SQLITE) == (
            'published: integer("published", { mode: "boolean" }).notNull()'
        )

    def test_boolean_without_options(self):
        assert render("published:boolean", Dialect.POSTGRESQL) == (
            'published: boolean("published").notNull()'
        )
        assert render("published:boolean", Dialect.MYSQL) == (
            'published: boolean("published").notNull()'
        )

    def test_unique_nullable(self):
        assert render("email?:string:unique", Dialect.MYSQL) == (
            'email: varchar("email", { length: 255 }).unique()'
        )

    def test_reference(self):
        assert render("authorId:references:user", Dialect.SQLITE) == (
            'authorId: integer("author_id").notNull().references(() => users.id)'
        )

    def test_reference_in_uuid_mode_uses_uuid_storage(self):
        assert render("authorId:references:user", Dialect.POSTGRESQL, uuid=True) == (
            'authorId: uuid("author_id").notNull().references(() => users.id)'
        )
        assert render("authorId:references:user", Dialect.MYSQL, uuid=True) == (
            'authorId: varchar("author_id", { length: 36 }).notNull().references(() => users.id)'
        )

    def test_reference_to_camel_case_model(self):
        assert render("postId:references:blogPost", Dialect.POSTGRESQL) == (
            'postId: integer("post_id").notNull().references(() => blogPosts.id)'
        )


class TestEnums:
    def test_sqlite_enum_is_text_with_values(self):
        assert render("status:enum:draft,published", Dialect.SQLITE) == (
            'status: text("status", { enum: ["draft", "published"] }).notNull()'
        )

    def test_mysql_enum_is_inline(self):
        assert render("status:enum:draft,published", Dialect.MYSQL) == (
            'status: mysqlEnum("status", ["draft", "published"]).notNull()'
        )

    def test_postgresql_enum_needs_declaration(self):
        field = parse_field("status:enum:draft,published")
        spec = resolve_column(field, Dialect.POSTGRESQL, model=create_model_context("post"))

        assert spec.import_symbol == "pgEnum"
        assert spec.declaration == 'export const postStatusEnum = pgEnum("posts_status", ["draft", "published"]);'
        assert spec.render(field) == 'status: postStatusEnum("status").notNull()'

    def test_enum_type_name(self):
        field = parse_field("paymentStatus:enum:paid,open")

        assert enum_type_name(field, create_model_context("blogPost")) == (
            "blogPostPaymentStatusEnum",
            "blog_posts_payment_status",
        )


# ---------------------------------------------------------------------------
# Id and timestamps
# ---------------------------------------------------------------------------


def test_id_columns():
    assert id_column(Dialect.SQLITE) == 'id: integer("id").primaryKey({ autoIncrement: true })'
    assert id_column(Dialect.POSTGRESQL) == 'id: serial("id").primaryKey()'
    assert id_column(Dialect.MYSQL) == 'id: int("id").primaryKey().autoincrement()'
    assert id_column(Dialect.POSTGRESQL, uuid=True) == 'id: uuid("id").primaryKey().defaultRandom()'
    assert id_column(Dialect.SQLITE, uuid=True).startswith('id: text("id").primaryKey()')


def test_id_symbols():
    assert id_symbol(Dialect.POSTGRESQL) == "serial"
    assert id_symbol(Dialect.MYSQL, uuid=True) == "varchar"


def test_timestamp_columns():
    created, updated = timestamp_columns(Dialect.POSTGRESQL)

    assert created == 'createdAt: timestamp("created_at")\n    .notNull()\n    .defaultNow()'
    assert updated.startswith('updatedAt: timestamp("updated_at")')


def test_sqlite_timestamps_use_timestamp_mode():
    created, _ = timestamp_columns(Dialect.SQLITE)

    assert created.startswith('createdAt: integer("created_at", { mode: "timestamp" })')
    assert created.endswith(".$defaultFn(() => new Date())")


def test_timestamps_disabled():
    assert timestamp_columns(Dialect.MYSQL, no_timestamps=True) is None
