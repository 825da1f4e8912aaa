"""Tests for project layout and dialect detection."""

import pytest

from brizzle.config import ProjectConfig, detect_alias, detect_dialect, detect_project_config
from brizzle.dialects import Dialect
from brizzle.options import GeneratorOptions


@pytest.mark.parametrize(
    "value, expected",
    [
        ("postgresql", Dialect.POSTGRESQL),
        ("postgres", Dialect.POSTGRESQL),
        ("mysql", Dialect.MYSQL),
        ("sqlite", Dialect.SQLITE),
        ("turso", Dialect.SQLITE),
    ],
)
def test_detect_dialect(tmp_path, value, expected):
    (tmp_path / "drizzle.config.ts").write_text(f"export default {{ dialect: '{value}' }};\n")

    assert detect_dialect(tmp_path) == expected


def test_detect_dialect_without_config(tmp_path):
    assert detect_dialect(tmp_path) == Dialect.SQLITE


class TestDetectAlias:
    def test_default_without_tsconfig(self, tmp_path):
        assert detect_alias(tmp_path) == "@"

    def test_tilde_alias_with_comments_and_trailing_commas(self, tmp_path):
        (tmp_path / "tsconfig.json").write_text(
            "{\n"
            '  "$schema": "https://json.schemastore.org/tsconfig",\n'
            "  // path aliases\n"
            '  "compilerOptions": {\n'
            '    /* resolved by next */\n'
            '    "paths": { "~/*": ["./*"] },\n'
            "  },\n"
            '  "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx"],\n'
            "}\n"
        )

        assert detect_alias(tmp_path) == "~"

    def test_invalid_json_falls_back(self, tmp_path):
        (tmp_path / "tsconfig.json").write_text("{ not json")

        assert detect_alias(tmp_path) == "@"


def test_root_layout(tmp_path, new_project):
    config = detect_project_config(new_project(dialect="mysql"))

    assert not config.use_src
    assert config.app_dir == tmp_path.resolve() / "app"
    assert config.schema_path == tmp_path.resolve() / "db" / "schema.ts"
    assert config.dialect == Dialect.MYSQL
    assert config.db_import == "@/db"
    assert config.schema_import == "@/db/schema"


def test_src_layout(new_project):
    config = detect_project_config(new_project(use_src=True))

    assert config.use_src
    assert config.app_path == "src/app"
    assert config.db_path == "src/db"
    assert config.db_import == "@/db"


def test_lib_db_directory(tmp_path):
    (tmp_path / "app").mkdir()
    (tmp_path / "lib" / "db").mkdir(parents=True)

    config = detect_project_config(tmp_path)

    assert config.db_path == "lib/db"
    assert config.schema_import == "@/lib/db/schema"


def test_config_is_frozen(project):
    with pytest.raises(Exception):
        project.alias = "~"


def test_project_config_defaults(tmp_path):
    config = ProjectConfig(root=tmp_path)

    assert config.dialect == Dialect.SQLITE
    assert config.schema_path == tmp_path / "db" / "schema.ts"


def test_generator_options_accept_camel_case_aliases():
    options = GeneratorOptions(dryRun=True, noTimestamps=True)

    assert options.dry_run
    assert options.no_timestamps
    assert not options.force
