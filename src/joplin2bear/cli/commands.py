"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from joplin2bear.config import Settings, load_config
from joplin2bear.core.errors import MigrationError
from joplin2bear.core.pipeline import run_check, run_migrate


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


def _require(value: Optional[str], name: str) -> Path:
    if not value:
        _fail(f"No {name} given (pass it as an argument or set JB_{name.upper()})")
    return Path(value)


def migrate_cmd(
    source: Annotated[Optional[str], typer.Argument(help="Joplin export directory")] = None,
    target: Annotated[Optional[str], typer.Argument(help="Directory to write Bear-ready notes to")] = None,
    resources: Annotated[Optional[str], typer.Option("--resources-dir", help="Attachment directory name")] = None,
    skip_resources: Annotated[bool, typer.Option("--skip-resources", help="Do not copy the attachment directory")] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Convert every note under SOURCE and write it under TARGET."""
    settings = _settings(overrides={
        "source_dir": source, "target_dir": target,
        "resources_dir": resources, "log_level": log_level,
        "copy_resources": False if skip_resources else None,
    })
    source_dir = _require(settings.source_dir, "source_dir")
    target_dir = _require(settings.target_dir, "target_dir")

    try:
        result = run_migrate(source_dir, target_dir, settings.resources_dir, settings.copy_resources)
    except MigrationError as e:
        _fail("Migration failed", e)

    for doc, path in zip(result.documents, result.written):
        typer.echo(f"  {doc.relative_path} -> {path}")
    if result.resources is not None:
        typer.echo(f"Copied resources to {result.resources}")
    typer.echo(f"Migrated {len(result.written)} note(s) to {target_dir}/")


def check_cmd(
    source: Annotated[Optional[str], typer.Argument(help="Joplin export directory")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Parse every note under SOURCE without writing anything."""
    settings = _settings(overrides={"source_dir": source, "log_level": log_level})
    source_dir = _require(settings.source_dir, "source_dir")

    try:
        documents = run_check(source_dir)
    except MigrationError as e:
        _fail("Check failed", e)

    for doc in documents:
        typer.echo(f"  {doc.relative_path} -> {doc.tags}")
    typer.echo(f"Checked {len(documents)} note(s) in {source_dir}/")
