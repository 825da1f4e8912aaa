"""
Brizzle Log - Console output for file operations

Status verbs are right-aligned so that paths line up::

          create  app/posts/actions.ts
            skip  db/schema.ts
    would remove  app/posts
"""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

STATUS_WIDTH = 12


def _relative(path: Path | str) -> str:
    try:
        return os.path.relpath(path, Path.cwd())
    except ValueError:
        # different drive on windows
        return str(path)


def _status(verb: str, style: str, path: Path | str) -> None:
    padding = " " * (STATUS_WIDTH - len(verb))
    console.print(f"{padding}[{style}]{verb}[/{style}]  {escape(_relative(path))}")


def create(path: Path | str) -> None:
    _status("create", "green", path)


def force(path: Path | str) -> None:
    _status("force", "yellow", path)


def skip(path: Path | str) -> None:
    _status("skip", "yellow", path)


def remove(path: Path | str) -> None:
    _status("remove", "red", path)


def not_found(path: Path | str) -> None:
    _status("not found", "yellow", path)


def would_create(path: Path | str) -> None:
    _status("would create", "cyan", path)


def would_force(path: Path | str) -> None:
    _status("would force", "cyan", path)


def would_remove(path: Path | str) -> None:
    _status("would remove", "cyan", path)


def error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def warn(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def info(message: str = "") -> None:
    console.print(escape(message))
