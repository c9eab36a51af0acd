"""CLI commands for the orders screen."""

from __future__ import annotations

from datetime import datetime

import click

from orderdesk.application.dto import OrdersView
from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.value_objects import SortDirection
from orderdesk.domain.service.date_ranges import QuickPreset
from orderdesk.infrastructure.bootstrap import orders_screen

_DAY = click.DateTime(formats=["%Y-%m-%d"])


def _day(value: datetime | None):
    return value.date() if value else None


def _items_summary(order: Order) -> str:
    return ", ".join(f"{item.name} x {item.quantity} {item.size}".rstrip() for item in order.items)


def _status_label(order: Order) -> str:
    # a status string outside OrderStatus
    return order.status if order.status_enum else f"{order.status} (?)"


def _display_orders(view: OrdersView) -> None:
    """Status cards, then one row per order."""
    cards = "  ".join(f"{s.status}: {s.count} ({s.percentage}%)" for s in view.status_summary)
    click.echo(cards)
    click.echo()

    if not view.orders:
        click.echo("No orders match the selected filters")
        return

    direction = "newest first" if view.sort.descending else "oldest first"
    click.echo(f"Showing {len(view.orders)} of {view.total_orders} orders ({direction})")
    click.echo(f"{'ID':<26} {'Date':<17} {'Customer':<20} {'Amount':>10} {'Payment':<12} {'Status':<17}")
    click.echo("-" * 106)
    for order in view.orders:
        payment = f"{order.payment_method or '-'}/{'Done' if order.payment_confirmed else 'Pending'}"
        click.echo(
            f"{order.id:<26} {order.date:%Y-%m-%d %H:%M} {order.customer_name[:20]:<20} "
            f"{order.amount:>10.2f} {payment:<12} {_status_label(order):<17}"
        )
        if order.items:
            click.echo(f"{'':<26} {order.item_count} pcs: {_items_summary(order)}")
        address = order.address.one_line()
        if address:
            click.echo(f"{'':<26} {address}")


@click.command("list")
@click.option("--from", "start", type=_DAY, default=None, help="First day (YYYY-MM-DD).")
@click.option("--to", "end", type=_DAY, default=None, help="Last day (YYYY-MM-DD).")
@click.option("--status", default=None, help="Only orders in this status.")
@click.option(
    "--preset",
    type=click.Choice([p.value for p in QuickPreset]),
    default=None,
    help="Quick day range; overrides --from/--to.",
)
@click.option("--asc", is_flag=True, default=False, help="Oldest first.")
@click.pass_obj
def order_list(settings, start, end, status, preset, asc) -> None:
    """List orders, newest first."""
    screen = orders_screen(settings)
    if not screen.load():
        raise click.ClickException("Could not load orders.")

    try:
        screen.apply_filters(_day(start), _day(end), status)
        if preset:
            screen.quick_filter(preset)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if asc:
        screen.set_sort_direction(SortDirection.ASCENDING)
    _display_orders(screen.view)


@click.command("set-status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status",
    required=True,
    help="New status: " + ", ".join(f"'{s.value}'" for s in OrderStatus) + ".",
)
@click.pass_obj
def order_set_status(settings, order_id: str, status: str) -> None:
    """Change an order's status."""
    screen = orders_screen(settings)
    try:
        changed = screen.change_status(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not changed:
        raise click.ClickException(f"Order #{order_id} was not updated.")
    click.echo(f"Order #{order_id} set to '{OrderStatus.parse(status).value}'.")
