import click

from orderdesk.domain.exceptions import DomainException
from orderdesk.infrastructure.cli.dashboard_commands import dashboard_show
from orderdesk.infrastructure.cli.order_commands import order_list, order_set_status
from orderdesk.infrastructure.cli.review_commands import review_delete, review_list
from orderdesk.infrastructure.config import load_settings
from orderdesk.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override ORDERDESK_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """orderdesk: order and review admin dashboard"""
    try:
        settings = load_settings()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging((log_level or settings.log_level).upper())
    ctx.obj = settings


@cli.group()
def orders() -> None:
    """Browse orders and change their status."""


@cli.group()
def reviews() -> None:
    """Browse and moderate product reviews."""


# orders and reviews nest under groups; the dashboard is top-level
orders.add_command(order_list)
orders.add_command(order_set_status)
reviews.add_command(review_list)
reviews.add_command(review_delete)
cli.add_command(dashboard_show)
