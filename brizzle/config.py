"""
Brizzle Config - Project layout and dialect detection

The configuration is detected once per command from the project directory and
then passed to every generator. It is immutable; detect again to pick up
changes on disk.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from pydantic import BaseModel

from brizzle.dialects import Dialect

DEFAULT_ALIAS = "@"
DIALECT_RE = re.compile(r"""dialect:\s*["'](\w+)["']""")
ALIAS_RE = re.compile(r"^(@\w*|~)/")
JSONC_NOISE_RE = re.compile(r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*[\s\S]*?\*/')
TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")


class ProjectConfig(BaseModel):
    """Detected Next.js + Drizzle project layout."""

    root: Path
    use_src: bool = False
    alias: str = DEFAULT_ALIAS
    db_path: str = "db"
    app_path: str = "app"
    dialect: Dialect = Dialect.SQLITE

    model_config = {"frozen": True}

    @property
    def db_dir(self) -> Path:
        return self.root / self.db_path

    @property
    def app_dir(self) -> Path:
        return self.root / self.app_path

    @property
    def schema_path(self) -> Path:
        return self.db_dir / "schema.ts"

    @property
    def db_import(self) -> str:
        """Import path of the db client, e.g. ``@/db``."""
        return f"{self.alias}/{re.sub(r'^src/', '', self.db_path)}"

    @property
    def schema_import(self) -> str:
        return f"{self.db_import}/schema"


# ═══════════════════════════════════════════════════════════════════════════
# DETECTION
# ═══════════════════════════════════════════════════════════════════════════


def detect_dialect(root: Path) -> Dialect:
    """Read the dialect from drizzle.config.ts. Defaults to sqlite."""
    config_path = root / "drizzle.config.ts"
    if not config_path.exists():
        return Dialect.SQLITE

    match = DIALECT_RE.search(config_path.read_text(encoding="utf-8"))
    if match:
        value = match.group(1)
        if value in ("postgresql", "postgres", "pg"):
            return Dialect.POSTGRESQL
        if value in ("mysql", "mysql2"):
            return Dialect.MYSQL

    # turso, libsql and better-sqlite3 are all sqlite
    return Dialect.SQLITE


def _strip_json_comments(content: str) -> str:
    """tsconfig.json is JSONC: drop comments and trailing commas, leave strings alone."""
    content = JSONC_NOISE_RE.sub(lambda m: m.group(1) or "", content)
    return TRAILING_COMMA_RE.sub(r"\1", content)


def detect_alias(root: Path) -> str:
    """Path alias from tsconfig.json ``compilerOptions.paths`` (``@``, ``~``, ``@src``)."""
    tsconfig_path = root / "tsconfig.json"
    if not tsconfig_path.exists():
        return DEFAULT_ALIAS

    try:
        tsconfig = json.loads(_strip_json_comments(tsconfig_path.read_text(encoding="utf-8")))
    except ValueError:
        return DEFAULT_ALIAS

    paths = (tsconfig.get("compilerOptions") or {}).get("paths") or {}
    for key in paths:
        match = ALIAS_RE.match(key)
        if match:
            return match.group(1)
    return DEFAULT_ALIAS


def detect_db_path(root: Path, use_src: bool) -> str:
    candidates = ["db", "lib/db", "server/db"]
    if use_src:
        candidates = [f"src/{c}" for c in candidates]

    for candidate in candidates:
        if (root / candidate).exists():
            return candidate
    return candidates[0]


def detect_project_config(root: Path | None = None) -> ProjectConfig:
    """Inspect a project directory (default: cwd) and build its configuration."""
    root = (root or Path.cwd()).resolve()
    use_src = (root / "src" / "app").exists()

    return ProjectConfig(
        root=root,
        use_src=use_src,
        alias=detect_alias(root),
        db_path=detect_db_path(root, use_src),
        app_path="src/app" if use_src else "app",
        dialect=detect_dialect(root),
    )
