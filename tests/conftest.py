"""
tests/conftest.py
Shared fixtures for the brizzle test suite.

Projects are real directory trees under pytest's tmp_path; nothing is mocked.
"""

from __future__ import annotations

import json
import pathlib

import pytest

from brizzle.config import ProjectConfig, detect_project_config


def make_project(root: pathlib.Path, dialect: str = "sqlite", use_src: bool = False) -> pathlib.Path:
    """Lay out a minimal Next.js + Drizzle project."""
    base = root / "src" if use_src else root
    (base / "app").mkdir(parents=True)
    (base / "db").mkdir(parents=True)
    (root / "drizzle.config.ts").write_text(
        'import { defineConfig } from "drizzle-kit";\n\n'
        "export default defineConfig({\n"
        f'  dialect: "{dialect}",\n'
        '  schema: "./db/schema.ts",\n'
        "});\n",
        encoding="utf-8",
    )
    paths_target = "./src/*" if use_src else "./*"
    (root / "tsconfig.json").write_text(
        json.dumps({"compilerOptions": {"paths": {"@/*": [paths_target]}}}, indent=2),
        encoding="utf-8",
    )
    return root


@pytest.fixture()
def project_root(tmp_path: pathlib.Path) -> pathlib.Path:
    return make_project(tmp_path)


@pytest.fixture()
def project(project_root: pathlib.Path) -> ProjectConfig:
    """Detected configuration of a sqlite project."""
    return detect_project_config(project_root)


@pytest.fixture()
def pg_project(tmp_path: pathlib.Path) -> ProjectConfig:
    return detect_project_config(make_project(tmp_path, dialect="postgresql"))


@pytest.fixture()
def in_project(project_root: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """Run the test from inside the project directory, as the CLI expects."""
    monkeypatch.chdir(project_root)
    return project_root


@pytest.fixture()
def new_project(tmp_path: pathlib.Path):
    """Factory for projects with a non-default dialect or layout."""

    def factory(dialect: str = "sqlite", use_src: bool = False) -> pathlib.Path:
        return make_project(tmp_path, dialect=dialect, use_src=use_src)

    return factory
