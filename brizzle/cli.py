"""
Brizzle CLI - Rails-like generators for Next.js + Drizzle

Usage:
    brizzle model <name> [fields...]
    brizzle actions <name>
    brizzle resource <name> [fields...]
    brizzle scaffold <name> [fields...]
    brizzle api <name> [fields...]
    brizzle destroy <scaffold|resource|api> <name>
    brizzle config
"""

from __future__ import annotations

from typing import List, Optional

import typer
from rich import print as rprint
from rich.table import Table

from brizzle import log
from brizzle.config import detect_project_config
from brizzle.errors import BrizzleError
from brizzle.generators import (
    destroy as destroy_generated,
    generate_actions,
    generate_api,
    generate_model,
    generate_resource,
    generate_scaffold,
)
from brizzle.options import GeneratorOptions

app = typer.Typer(
    name="brizzle",
    help="Rails-like generators for Next.js + Drizzle",
    add_completion=False,
    no_args_is_help=True,
)

FIELDS_ARGUMENT = typer.Argument(None, help="Fields as name:type[:modifiers], e.g. title:string email:string:unique")
FORCE_OPTION = typer.Option(False, "--force", "-f", help="Overwrite existing files")
DRY_RUN_OPTION = typer.Option(False, "--dry-run", "-n", help="Preview changes without writing files")
UUID_OPTION = typer.Option(False, "--uuid", "-u", help="Use UUID for primary key instead of auto-increment")
NO_TIMESTAMPS_OPTION = typer.Option(False, "--no-timestamps", help="Skip createdAt/updatedAt fields")


def _options(force: bool, dry_run: bool, uuid: bool = False, no_timestamps: bool = False) -> GeneratorOptions:
    return GeneratorOptions(force=force, dry_run=dry_run, uuid=uuid, no_timestamps=no_timestamps)


def _fail(error: BrizzleError) -> None:
    log.error(str(error))
    raise typer.Exit(1)


# ═══════════════════════════════════════════════════════════════════════════
# GENERATE COMMANDS
# ═══════════════════════════════════════════════════════════════════════════


@app.command()
def model(
    name: str = typer.Argument(..., help="Model name, e.g. post"),
    fields: Optional[List[str]] = FIELDS_ARGUMENT,
    force: bool = FORCE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    uuid: bool = UUID_OPTION,
    no_timestamps: bool = NO_TIMESTAMPS_OPTION,
) -> None:
    """
    Generate a Drizzle schema model.

    Examples:

        brizzle model user name:string email:string:unique

        brizzle model order total:decimal status:enum:pending,paid,shipped

        brizzle model token value:uuid --uuid --no-timestamps
    """
    try:
        generate_model(name, fields or [], detect_project_config(), _options(force, dry_run, uuid, no_timestamps))
    except BrizzleError as e:
        _fail(e)


@app.command()
def actions(
    name: str = typer.Argument(..., help="Model name, e.g. post"),
    force: bool = FORCE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    uuid: bool = UUID_OPTION,
    no_timestamps: bool = NO_TIMESTAMPS_OPTION,
) -> None:
    """Generate server actions for an existing model."""
    try:
        generate_actions(name, detect_project_config(), _options(force, dry_run, uuid, no_timestamps))
    except BrizzleError as e:
        _fail(e)


@app.command()
def resource(
    name: str = typer.Argument(..., help="Model name, e.g. post"),
    fields: Optional[List[str]] = FIELDS_ARGUMENT,
    force: bool = FORCE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    uuid: bool = UUID_OPTION,
    no_timestamps: bool = NO_TIMESTAMPS_OPTION,
) -> None:
    """Generate model and actions (no views)."""
    try:
        generate_resource(name, fields or [], detect_project_config(), _options(force, dry_run, uuid, no_timestamps))
    except BrizzleError as e:
        _fail(e)


@app.command()
def scaffold(
    name: str = typer.Argument(..., help="Model name, e.g. post"),
    fields: Optional[List[str]] = FIELDS_ARGUMENT,
    force: bool = FORCE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    uuid: bool = UUID_OPTION,
    no_timestamps: bool = NO_TIMESTAMPS_OPTION,
) -> None:
    """Generate model, actions, and pages (full CRUD)."""
    try:
        generate_scaffold(name, fields or [], detect_project_config(), _options(force, dry_run, uuid, no_timestamps))
    except BrizzleError as e:
        _fail(e)


@app.command()
def api(
    name: str = typer.Argument(..., help="Model name, e.g. product"),
    fields: Optional[List[str]] = FIELDS_ARGUMENT,
    force: bool = FORCE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    uuid: bool = UUID_OPTION,
    no_timestamps: bool = NO_TIMESTAMPS_OPTION,
) -> None:
    """Generate model and API route handlers (REST)."""
    try:
        generate_api(name, fields or [], detect_project_config(), _options(force, dry_run, uuid, no_timestamps))
    except BrizzleError as e:
        _fail(e)


# ═══════════════════════════════════════════════════════════════════════════
# DESTROY
# ═══════════════════════════════════════════════════════════════════════════


def destroy(
    kind: str = typer.Argument(..., metavar="TYPE", help="scaffold, resource or api"),
    name: str = typer.Argument(..., help="Model name"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Preview changes without deleting files"),
) -> None:
    """
    Remove generated files (scaffold, resource, api).

    Examples:

        brizzle destroy scaffold post

        brizzle d api product --dry-run
    """
    try:
        destroy_generated(kind, name, detect_project_config(), _options(force, dry_run), confirm=typer.confirm)
    except BrizzleError as e:
        _fail(e)


app.command("destroy")(destroy)
app.command("d", hidden=True)(destroy)


# ═══════════════════════════════════════════════════════════════════════════
# INFO
# ═══════════════════════════════════════════════════════════════════════════


@app.command()
def config() -> None:
    """Show detected project configuration."""
    project = detect_project_config()

    table = Table(title="Detected project configuration")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Project structure", "src/ (e.g., src/app/, src/db/)" if project.use_src else "root (e.g., app/, db/)")
    table.add_row("Path alias", f"{project.alias}/")
    table.add_row("App directory", f"{project.app_path}/")
    table.add_row("DB directory", f"{project.db_path}/")
    table.add_row("Database dialect", project.dialect.value)
    table.add_row("DB import", project.db_import)
    table.add_row("Schema import", project.schema_import)

    rprint(table)


@app.command()
def version() -> None:
    """Show version."""
    from brizzle import __version__
    rprint(f"brizzle {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
