"""
Brizzle Files - Writing and removing generated files

Every write goes through write_file so that --force and --dry-run behave the
same for pages, routes and the shared schema file.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from brizzle import log
from brizzle.options import GeneratorOptions


def file_exists(path: Path) -> bool:
    return path.exists()


def read_file(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_file(path: Path, content: str, options: GeneratorOptions | None = None) -> bool:
    """
    Write a generated file.

    Existing files are skipped unless ``options.force`` is set. In dry-run
    mode nothing is written, only reported.

    Returns:
        True if the file was (or would have been) written
    """
    options = options or GeneratorOptions()
    exists = path.exists()

    if exists and not options.force:
        log.skip(path)
        return False

    if options.dry_run:
        if exists:
            log.would_force(path)
        else:
            log.would_create(path)
        return True

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")

    if exists:
        log.force(path)
    else:
        log.create(path)
    return True


def delete_directory(path: Path, options: GeneratorOptions | None = None) -> bool:
    """Remove a generated directory tree. Returns False when it does not exist."""
    options = options or GeneratorOptions()

    if not path.exists():
        log.not_found(path)
        return False

    if options.dry_run:
        log.would_remove(path)
        return True

    shutil.rmtree(path)
    log.remove(path)
    return True
