import logging

import click

from northwind.infrastructure.cli.db_commands import db_init
from northwind.infrastructure.cli.order_commands import (
    order_add,
    order_list,
    order_remove,
    order_show,
    order_update,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """Northwind sales order back-office."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def db() -> None:
    """Manage the database."""


# Register subcommands
order.add_command(order_add)
order.add_command(order_list)
order.add_command(order_remove)
order.add_command(order_show)
order.add_command(order_update)
db.add_command(db_init)
