"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import IO

import click

from northwind.application.add_order import AddOrderHandler
from northwind.application.dto import BriefOrderDetailDTO, BriefOrderDTO, FullOrderDTO
from northwind.application.list_orders import ListOrdersHandler
from northwind.application.remove_order import RemoveOrderHandler
from northwind.application.show_order import ShowOrderHandler
from northwind.application.update_order import UpdateOrderHandler
from northwind.domain.exceptions import DomainException, PersistenceError
from northwind.infrastructure.bootstrap import order_repository


class StoreError(click.ClickException):
    """The store failed; distinct exit code from caller mistakes."""

    exit_code = 3


def _to_click_error(exc: DomainException) -> click.ClickException:
    if isinstance(exc, PersistenceError):
        cause = exc.__cause__
        detail = f" ({type(cause).__name__})" if cause is not None else ""
        return StoreError(f"{exc}{detail}")
    return click.ClickException(str(exc))


def _parse_datetime(raw: dict, key: str, required: bool = True) -> datetime | None:
    value = raw.get(key)
    if value is None:
        if required:
            raise click.BadParameter(f"Missing required field '{key}'.")
        return None
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError):
        raise click.BadParameter(f"Invalid date '{value}' for '{key}'.")


def _parse_decimal(value, key: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise click.BadParameter(f"Invalid amount '{value}' for '{key}'.")
    if not amount.is_finite():
        raise click.BadParameter(f"Invalid amount '{value}' for '{key}'.")
    return amount


def _parse_int(value, key: str) -> int:
    # Whole JSON numbers only.
    if isinstance(value, bool) or not isinstance(value, int):
        raise click.BadParameter(f"Expected a whole number for '{key}', got {value!r}.")
    return value


def _parse_brief_order(raw: dict) -> BriefOrderDTO:
    """Parse a JSON object into a BriefOrderDTO.

    Keys are the BriefOrderDTO field names; ``id`` is ignored.
    """
    try:
        details = [
            BriefOrderDetailDTO(
                product_id=_parse_int(line["product_id"], "product_id"),
                unit_price=_parse_decimal(line["unit_price"], "unit_price"),
                quantity=_parse_int(line["quantity"], "quantity"),
                discount=float(line.get("discount", 0.0)),
            )
            for line in raw.get("order_details", [])
        ]
        return BriefOrderDTO(
            customer_id=str(raw["customer_id"]),
            employee_id=_parse_int(raw["employee_id"], "employee_id"),
            shipper_id=_parse_int(raw["shipper_id"], "shipper_id"),
            order_date=_parse_datetime(raw, "order_date"),
            required_date=_parse_datetime(raw, "required_date"),
            shipped_date=_parse_datetime(raw, "shipped_date", required=False),
            freight=_parse_decimal(raw.get("freight", 0), "freight"),
            ship_name=raw["ship_name"],
            ship_address=raw["ship_address"],
            ship_city=raw["ship_city"],
            ship_region=raw.get("ship_region"),
            ship_postal_code=raw["ship_postal_code"],
            ship_country=raw["ship_country"],
            order_details=details,
        )
    except KeyError as exc:
        raise click.BadParameter(f"Missing required field {exc}.")
    except (TypeError, ValueError) as exc:
        raise click.BadParameter(f"Invalid order: {exc}")


def _load_brief_order(file: IO[str]) -> BriefOrderDTO:
    try:
        raw = json.load(file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Not valid JSON: {exc}")
    if not isinstance(raw, dict):
        raise click.BadParameter("Expected a JSON object describing one order.")
    return _parse_brief_order(raw)


def _format_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else "-"


def _display_order(dto: FullOrderDTO) -> None:
    """Shared formatting for displaying an order."""
    address = dto.shipping_address
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.customer.company_name} ({dto.customer.code})")
    click.echo(f"Employee: {dto.employee.full_name} (#{dto.employee.id})")
    click.echo(f"Shipper:  {dto.shipper.company_name} (#{dto.shipper.id})")
    click.echo(
        f"Ordered:  {_format_date(dto.order_date)}  "
        f"Required: {_format_date(dto.required_date)}  "
        f"Shipped: {_format_date(dto.shipped_date)}"
    )
    region = f" {address.region}" if address.region else ""
    click.echo(f"Ship to:  {dto.ship_name}, {address.address}, {address.city}{region} "
               f"{address.postal_code}, {address.country}")
    click.echo()

    click.echo(
        f"  {'Product':<32} {'Price':>10} {'Qty':>5} {'Disc':>6} {'Total':>10}"
    )
    click.echo(f"  {'-'*67}")
    for item in dto.order_details:
        click.echo(
            f"  {item.product_name:<32} {item.unit_price:>10.2f} {item.quantity:>5} "
            f"{item.discount:>6.0%} {item.line_total:>10.2f}"
        )
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Subtotal':<56} {dto.subtotal:>10.2f}")
    click.echo(f"  {'Freight':<56} {dto.freight:>10.2f}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show an order with all of its line items."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise _to_click_error(exc)

    _display_order(dto)


@click.command("list")
@click.option("--skip", default=0, show_default=True, type=int, help="Orders to skip.")
@click.option("--count", default=10, show_default=True, type=int, help="Orders to return.")
def order_list(skip: int, count: int) -> None:
    """List orders by ascending id, without line items."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(skip=skip, count=count)
    except DomainException as exc:
        raise _to_click_error(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(
        f"{'ID':<8} {'Customer':<10} {'Employee':>8} {'Ordered':<10} "
        f"{'Shipped':<10} {'Freight':>10}  Ship to"
    )
    click.echo("-" * 80)
    for o in orders:
        click.echo(
            f"{o.id:<8} {o.customer_id:<10} {o.employee_id:>8} "
            f"{_format_date(o.order_date):<10} {_format_date(o.shipped_date):<10} "
            f"{o.freight:>10.2f}  {o.ship_city}, {o.ship_country}"
        )


@click.command("add")
@click.option(
    "--file", "order_file", required=True, type=click.File("r"),
    help="JSON file describing the order ('-' for stdin).",
)
def order_add(order_file: IO[str]) -> None:
    """Add a new order with its line items."""
    dto = _load_brief_order(order_file)
    handler = AddOrderHandler(order_repo=order_repository())

    try:
        order_id = handler.handle(dto)
    except DomainException as exc:
        raise _to_click_error(exc)

    click.echo(f"Order #{order_id} created with {len(dto.order_details)} line item(s).")


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--file", "order_file", required=True, type=click.File("r"),
    help="JSON file describing the order ('-' for stdin).",
)
def order_update(order_id: int, order_file: IO[str]) -> None:
    """Overwrite an order. Its line items are replaced, not merged."""
    dto = _load_brief_order(order_file)
    handler = UpdateOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id, dto)
    except DomainException as exc:
        raise _to_click_error(exc)

    click.echo(f"Order #{order_id} updated.")


@click.command("remove")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to remove.")
def order_remove(order_id: int) -> None:
    """Delete an order and all of its line items."""
    handler = RemoveOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise _to_click_error(exc)

    click.echo(f"Order #{order_id} removed.")
