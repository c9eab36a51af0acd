"""CLI commands for the reviews screen."""

from __future__ import annotations

import click

from orderdesk.application.dto import ReviewsView
from orderdesk.domain.exceptions import DomainException
from orderdesk.domain.model.value_objects import SortDirection, SortKey, SortSpec
from orderdesk.infrastructure.bootstrap import reviews_screen


def _display_reviews(view: ReviewsView) -> None:
    if not view.reviews:
        click.echo("No reviews found")
        return

    click.echo(f"{'ID':<26} {'User':<20} {'Product':<20} {'Rating':>6}  {'Date':<12} Comment")
    click.echo("-" * 110)
    for review in view.reviews:
        click.echo(
            f"{review.id:<26} {(review.user_name or 'Unknown User')[:20]:<20} "
            f"{(review.product_name or 'Unknown Product')[:20]:<20} "
            f"{review.rating:>4}/5  {review.date:%b %d, %Y} {review.comment}"
        )
        if review.image:
            click.echo(f"{'':<26} image: {review.secure_image}")
            if review.plain_image != review.image:
                click.echo(f"{'':<26} full size: {review.plain_image}")


@click.command("list")
@click.option("--search", default=None, help="Match user, product or comment.")
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice([k.value for k in SortKey]),
    default=SortKey.DATE.value,
    show_default=True,
)
@click.option("--asc/--desc", default=False, help="Sort direction (default: descending).")
@click.pass_obj
def review_list(settings, search, sort_key: str, asc: bool) -> None:
    """List reviews."""
    screen = reviews_screen(settings)
    if not screen.load():
        raise click.ClickException("Could not load reviews.")

    direction = SortDirection.ASCENDING if asc else SortDirection.DESCENDING
    screen.set_sort(SortSpec(SortKey.parse(sort_key), direction))
    _display_reviews(screen.search(search))


@click.command("delete")
@click.option("--id", "review_id", required=True, help="Review ID.")
@click.pass_obj
def review_delete(settings, review_id: str) -> None:
    """Delete a review."""
    screen = reviews_screen(settings)
    try:
        deleted = screen.delete(review_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not deleted:
        raise click.ClickException(f"Review '{review_id}' was not deleted.")
