"""CLI commands for managing product records."""

from __future__ import annotations

import click

from grocery.application.delete_product import DeleteProductHandler
from grocery.application.form_controller import FormController
from grocery.application.show_inventory import ShowInventoryHandler, ShowProductHandler
from grocery.domain.exceptions import DomainException
from grocery.domain.model.value_objects import Category
from grocery.infrastructure.bootstrap import inventory_store


def _store(ctx: click.Context):
    return inventory_store(ctx.obj.get("data_dir") if ctx.obj else None)


def _fill_form(form: FormController, fields: dict[str, str | None]) -> None:
    """Copy the options the user actually passed into the form draft."""
    for name, value in fields.items():
        if value is not None:
            form.set_field(name, value)


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products in the inventory."""
    lines = ShowInventoryHandler(_store(ctx)).handle()

    if not lines:
        click.echo("No products in inventory. Add some products to get started.")
        return

    click.echo(f"{'ID':<8} {'Product Name':<20} {'Category':<12} {'Quantity':>8} {'Selling Price':>14}")
    click.echo("-" * 66)
    for line in lines:
        click.echo(
            f"{line.product_id:<8} {line.product_name:<20} {line.category:<12} "
            f"{line.quantity:>8} {line.selling_price:>14}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_context
def product_show(ctx: click.Context, product_id: str) -> None:
    """Show every field of one product."""
    handler = ShowProductHandler(_store(ctx))

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product ID:    {dto.product_id}")
    click.echo(f"Category:      {dto.category}")
    click.echo(f"Product Name:  {dto.product_name}")
    click.echo(f"Quantity:      {dto.quantity}")
    click.echo(f"MRP:           {dto.mrp}")
    click.echo(f"Selling Price: {dto.selling_price}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID (must be unique).")
@click.option(
    "--category",
    type=click.Choice(Category.values()),
    default=Category.default().value,
    show_default=True,
    help="Product category.",
)
@click.option("--name", "product_name", required=True, help="Product name.")
@click.option("--quantity", required=True, help="Quantity in stock.")
@click.option("--mrp", required=True, help="Maximum retail price (e.g. 2.00).")
@click.option("--selling-price", "selling_price", required=True, help="Selling price (e.g. 1.50).")
@click.pass_context
def product_add(
    ctx: click.Context,
    product_id: str,
    category: str,
    product_name: str,
    quantity: str,
    mrp: str,
    selling_price: str,
) -> None:
    """Add a new product to the inventory."""
    form = FormController(_store(ctx))

    try:
        _fill_form(
            form,
            {
                "product_id": product_id,
                "category": category,
                "product_name": product_name,
                "quantity": quantity,
                "mrp": mrp,
                "selling_price": selling_price,
            },
        )
        record = form.submit()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {record.product_id} '{record.product_name}' added")


@click.command("edit")
@click.option("--id", "product_id", required=True, help="ID of the product to edit.")
@click.option("--category", type=click.Choice(Category.values()), default=None, help="New category.")
@click.option("--name", "product_name", default=None, help="New product name.")
@click.option("--quantity", default=None, help="New quantity.")
@click.option("--mrp", default=None, help="New maximum retail price.")
@click.option("--selling-price", "selling_price", default=None, help="New selling price.")
@click.pass_context
def product_edit(
    ctx: click.Context,
    product_id: str,
    category: str | None,
    product_name: str | None,
    quantity: str | None,
    mrp: str | None,
    selling_price: str | None,
) -> None:
    """Edit an existing product. Fields not given keep their value."""
    form = FormController(_store(ctx))

    try:
        form.begin_edit(product_id)
        _fill_form(
            form,
            {
                "category": category,
                "product_name": product_name,
                "quantity": quantity,
                "mrp": mrp,
                "selling_price": selling_price,
            },
        )
        record = form.submit()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {record.product_id} updated")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="ID of the product to delete.")
@click.option("--yes", "assume_yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: str, assume_yes: bool) -> None:
    """Delete a product (asks for confirmation)."""
    handler = DeleteProductHandler(_store(ctx))

    def confirm() -> bool:
        return assume_yes or click.confirm("Are you sure you want to delete this item?")

    try:
        deleted = handler.handle(product_id, confirm=confirm)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if deleted:
        click.echo(f"Product {product_id} deleted")
    else:
        click.echo("Nothing deleted.")
