"""CLI command for the dashboard screen."""

from __future__ import annotations

import json

import click

from orderdesk.application.dto import DashboardView
from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.service.aggregation import COUNT_SERIES, INCOME_SERIES
from orderdesk.domain.service.date_ranges import RelativeRange
from orderdesk.infrastructure.bootstrap import dashboard_screen

_DAY = click.DateTime(formats=["%Y-%m-%d"])


def _display_dashboard(view: DashboardView) -> None:
    stats = view.stats
    click.echo(f"Range: {view.range_name} ({view.date_range})")
    click.echo()
    click.echo(f"  {'Total orders':<20} {stats.total_orders:>12}")
    click.echo(f"  {'Total income':<20} {stats.total_income:>12.2f}")
    click.echo(f"  {'Avg order value':<20} {stats.avg_order_value:>12.2f}")
    click.echo(f"  {'Pending orders':<20} {stats.pending_orders:>12}")
    click.echo(f"  {'Delivered orders':<20} {stats.delivered_orders:>12}")
    click.echo()

    click.echo(f"  {'Period':<12} {'Orders':>8} {'Income':>12}")
    click.echo(f"  {'-'*34}")
    if not view.chart.labels:
        click.echo("  No orders in this range")
    for label, count, income in zip(
        view.chart.labels,
        view.chart.series[COUNT_SERIES],
        view.chart.series[INCOME_SERIES],
    ):
        click.echo(f"  {label:<12} {count:>8} {income:>12.2f}")
    click.echo()

    click.echo(f"  {'Status':<20} {'Orders':>8}")
    click.echo(f"  {'-'*29}")
    for label, count in view.status_chart.points(COUNT_SERIES):
        click.echo(f"  {label:<20} {count:>8}")


def _dashboard_json(view: DashboardView) -> str:
    stats = view.stats
    payload = {
        "range": view.range_name,
        "stats": {
            "totalOrders": stats.total_orders,
            "totalIncome": str(stats.total_income),
            "avgOrderValue": str(stats.avg_order_value),
            "pendingOrders": stats.pending_orders,
            "deliveredOrders": stats.delivered_orders,
        },
        "chart": view.chart.as_dict(),
        "statusChart": view.status_chart.as_dict(),
    }
    # income values are Decimals
    return json.dumps(payload, indent=2, default=str)


@click.command("dashboard")
@click.option(
    "--range",
    "range_name",
    type=click.Choice([r.value for r in RelativeRange]),
    default=RelativeRange.MONTH.value,
    show_default=True,
    help="Date window.",
)
@click.option("--from", "start", type=_DAY, default=None, help="Custom first day.")
@click.option("--to", "end", type=_DAY, default=None, help="Custom last day.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the view as JSON.")
@click.pass_obj
def dashboard_show(settings, range_name: str, start, end, as_json: bool) -> None:
    """Order statistics and charts for a date window."""
    screen = dashboard_screen(settings)
    if not screen.load():
        raise click.ClickException("Could not load orders.")

    try:
        if start or end:
            screen.set_custom_dates(start.date() if start else None, end.date() if end else None)
        else:
            screen.set_range(range_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(_dashboard_json(screen.view))
    else:
        _display_dashboard(screen.view)
