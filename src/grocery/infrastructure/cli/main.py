from __future__ import annotations

from pathlib import Path

import click

from grocery.infrastructure import config
from grocery.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
    product_show,
)
from grocery.infrastructure.logger import setup_logger


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the inventory file (overrides GROCERY_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """GroceryStore: grocery inventory management."""
    setup_logger("grocery", config.LOG_LEVEL, config.LOG_FILE)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir


@cli.command()
def home() -> None:
    """Show the welcome screen."""
    click.echo("Welcome to Grocery Inventory Management")
    click.echo("Use the 'product' commands to manage your grocery inventory.")


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_show)
