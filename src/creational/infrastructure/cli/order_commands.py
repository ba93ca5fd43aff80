"""CLI commands for orders."""

from __future__ import annotations

import click

from creational.application.dto import OrderDTO
from creational.application.duplicate_order import DuplicateOrderHandler
from creational.application.show_order import ShowOrderHandler
from creational.domain.exceptions import DomainException
from creational.domain.model.order import DiscountEntry, LineItem, OrderRecord


def sample_order() -> OrderRecord:
    """The demo basket: a laptop, two mice and a student discount."""
    order = OrderRecord(delivery_cost=1500.0, payment_method="Card")
    order.add_item(LineItem(name="Laptop", unit_price=500000.0, quantity=1))
    order.add_item(LineItem(name="Mouse", unit_price=10000.0, quantity=2))
    order.add_discount(DiscountEntry(name="Student", percent=10.0))
    return order


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Payment method: {dto.payment_method}")
    click.echo(f"Delivery:       {dto.delivery_cost}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Price':>12} {'Qty':>5}")
    click.echo(f"  {'-'*39}")
    for item in dto.items:
        click.echo(f"  {item.name:<20} {item.unit_price:>12} {item.quantity:>5}")
    click.echo()
    click.echo("  Discounts:")
    if not dto.discounts:
        click.echo("  (none)")
    for d in dto.discounts:
        click.echo(f"  {d.name} - {d.percent}")
    click.echo("-" * 20)


@click.command("demo")
@click.option(
    "--payment-method",
    default="Cash",
    show_default=True,
    help="Payment method to set on the copy.",
)
def order_demo(payment_method: str) -> None:
    """Copy the sample order and change the copy's payment method."""
    original = sample_order()

    try:
        copy = DuplicateOrderHandler().handle(original, payment_method=payment_method)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    show = ShowOrderHandler()
    click.echo("Original order:")
    display_order(show.handle(original))
    click.echo("Copied order:")
    display_order(show.handle(copy))
