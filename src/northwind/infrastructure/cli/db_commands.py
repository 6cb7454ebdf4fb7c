"""CLI commands for database housekeeping."""

from __future__ import annotations

import click
from sqlalchemy.exc import SQLAlchemyError

from northwind.infrastructure.bootstrap import engine
from northwind.infrastructure.persistence.database import create_schema


@click.command("init")
def db_init() -> None:
    """Create any missing tables."""
    try:
        create_schema(engine())
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Could not create schema: {exc}")

    url = engine().url.render_as_string(hide_password=True)
    click.echo(f"Schema ready at {url}")
