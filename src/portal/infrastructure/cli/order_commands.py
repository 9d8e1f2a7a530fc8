"""CLI commands for distributor orders."""

from __future__ import annotations

import click

from portal.application.create_order import CreateOrderHandler
from portal.application.dto import OrderDTO
from portal.application.list_orders import ListOrdersHandler
from portal.application.seed_orders import SeedSampleOrdersHandler
from portal.application.show_order import ShowOrderHandler
from portal.domain.exceptions import DomainException, MalformedItemsError
from portal.domain.model.order import OrderDraft, parse_items
from portal.infrastructure.bootstrap import Portal


@click.command("list")
@click.pass_obj
def order_list(portal: Portal) -> None:
    """List all orders."""
    try:
        cards = ListOrdersHandler(portal.order_repo).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not cards:
        click.echo("No orders yet. Run 'portal order seed' to add sample orders.")
        return

    click.echo(f"Orders ({len(cards)})")
    click.echo(f"  {'Order':<14} {'Status':<10} {'Distributor':<28} {'Date':<13} {'Total':>12}")
    click.echo(f"  {'-'*81}")
    for card in cards:
        click.echo(
            f"  {card.order_number:<14} {card.status:<10} {card.distributor_name:<28} "
            f"{card.order_date:<13} {card.total_amount:>12}"
        )


def _display_order(dto: OrderDTO) -> None:
    """Detail view: general information and item table."""
    click.echo(f"Order {dto.order_number}  (status={dto.status})")
    click.echo()
    click.echo("General Information")
    click.echo(f"  {'Order Number:':<15} {dto.order_number}")
    click.echo(f"  {'Distributor:':<15} {dto.distributor_name}")
    click.echo(f"  {'Order Date:':<15} {dto.order_date}")
    click.echo(f"  {'Delivery Date:':<15} {dto.delivery_date}")
    click.echo(f"  {'Total Amount:':<15} {dto.total_amount}")
    click.echo()
    click.echo("Order Items")
    click.echo(f"  {'Product':<24} {'Quantity':>8} {'Unit':<10} {'Price':>10} {'Subtotal':>12}")
    click.echo(f"  {'-'*68}")
    for item in dto.items:
        click.echo(
            f"  {item.product:<24} {item.quantity:>8} {item.unit:<10} "
            f"{item.price:>10} {item.subtotal:>12}"
        )


@click.command("show")
@click.argument("order_number")
@click.pass_obj
def order_show(portal: Portal, order_number: str) -> None:
    """Show details of an order."""
    try:
        dto = ShowOrderHandler(portal.order_repo).handle(order_number)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("seed")
@click.pass_obj
def order_seed(portal: Portal) -> None:
    """Add the four sample orders."""
    try:
        created = SeedSampleOrdersHandler(portal.order_repo).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for card in created:
        click.echo(f"Created {card.order_number}  ({card.distributor_name}, {card.status})")


def _validate_items(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        parse_items(value)
    except MalformedItemsError as exc:
        raise click.BadParameter(str(exc))
    return value


@click.command("create")
@click.option("--number", "order_number", required=True, help="Order number, e.g. ORD-2024-005.")
@click.option("--distributor", required=True, help="Distributor name.")
@click.option("--order-date", required=True, help="Order date (YYYY-MM-DD).")
@click.option("--delivery-date", required=True, help="Delivery date (YYYY-MM-DD).")
@click.option("--status", default="Pending", show_default=True, help="Order status.")
@click.option("--total", type=float, required=True, help="Total amount in USD.")
@click.option(
    "--items",
    default="[]",
    callback=_validate_items,
    help='Items as JSON, e.g. \'[{"product": "Milk", "quantity": 10, "unit": "gallons", "price": 4.25}]\'.',
)
@click.pass_obj
def order_create(
    portal: Portal,
    order_number: str,
    distributor: str,
    order_date: str,
    delivery_date: str,
    status: str,
    total: float,
    items: str,
) -> None:
    """Create a new order."""
    try:
        draft = OrderDraft(
            order_number=order_number,
            distributor_name=distributor,
            order_date=order_date,
            delivery_date=delivery_date,
            status=status,
            total_amount=total,
            items=items,
        )
        card = CreateOrderHandler(portal.order_repo).handle(draft)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {card.order_number} created  (id={card.id}, status={card.status})")


@click.command("export")
@click.argument("order_number")
@click.option(
    "--date",
    "generated_on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Generation date printed in the footer (default: today).",
)
@click.pass_obj
def order_export(portal: Portal, order_number: str, generated_on) -> None:
    """Export an order as a PDF document."""
    try:
        filename = portal.exporter().handle(
            order_number,
            generated_on.date() if generated_on else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Saved {portal.sink.directory / filename}")
