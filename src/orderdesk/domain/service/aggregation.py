"""Domain service: Aggregation Engine.

Turns an order collection into the numbers the dashboard shows:

* scalar statistics (totals, average order value, pending/delivered);
* per-status counts with percentages;
* time-bucketed chart series (order count and income per bucket).

All functions are total: an empty collection yields zeros, never a
division error.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.value_objects import (
    ChartSeries,
    SortDirection,
    SortKey,
    SortSpec,
)
from orderdesk.domain.service.date_ranges import RelativeRange
from orderdesk.domain.service.sort_engine import sort_records

COUNT_SERIES = "count"
INCOME_SERIES = "income"

_CENTS = Decimal("0.01")

# en-US abbreviations; chart labels must not depend on the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class Granularity(Enum):
    WEEKDAY = "weekday"  # "Mon"
    DAY = "day"  # "Jan 5"
    MONTH = "month"  # "Jan 2024"

    @staticmethod
    def for_range(relative: RelativeRange) -> Granularity:
        if relative is RelativeRange.WEEK:
            return Granularity.WEEKDAY
        if relative is RelativeRange.MONTH:
            return Granularity.DAY
        return Granularity.MONTH

    def label(self, order: Order) -> str:
        moment = order.date
        if self is Granularity.WEEKDAY:
            return _WEEKDAYS[moment.weekday()]
        if self is Granularity.DAY:
            return f"{_MONTHS[moment.month - 1]} {moment.day}"
        return f"{_MONTHS[moment.month - 1]} {moment.year}"


@dataclass(frozen=True)
class StatusCount:
    status: str
    count: int
    percentage: int


@dataclass(frozen=True)
class OrderStats:
    total_orders: int
    total_income: Decimal
    avg_order_value: Decimal
    pending_orders: int
    delivered_orders: int


def order_stats(orders: Iterable[Order]) -> OrderStats:
    """Summarise *orders* (normally the date-filtered subset)."""
    total_orders = 0
    total_income = Decimal("0")
    delivered = 0

    for order in orders:
        total_orders += 1
        total_income += order.amount
        if order.is_delivered:
            delivered += 1

    if total_orders:
        avg = (total_income / total_orders).quantize(_CENTS, rounding=ROUND_HALF_UP)
    else:
        avg = Decimal("0")

    return OrderStats(
        total_orders=total_orders,
        total_income=total_income,
        avg_order_value=avg,
        pending_orders=total_orders - delivered,
        delivered_orders=delivered,
    )


def status_summary(
    orders: Sequence[Order],
    statuses: Iterable[OrderStatus] = OrderStatus,
) -> list[StatusCount]:
    """Count orders per status, in enumeration order.

    Percentages are relative to *all* orders passed in, including any
    whose status is not in *statuses*.
    """
    total = len(orders)
    counts = _count_by_status(orders)
    return [
        StatusCount(
            status=status.value,
            count=counts.get(status.value, 0),
            percentage=percentage(counts.get(status.value, 0), total),
        )
        for status in statuses
    ]


def status_breakdown(orders: Sequence[Order]) -> ChartSeries:
    """Bar-chart data: one label per status, zero-filled."""
    counts = _count_by_status(orders)
    labels = [status.value for status in OrderStatus]
    return ChartSeries(
        labels=labels,
        series={COUNT_SERIES: [counts.get(label, 0) for label in labels]},
    )


def bucket_series(orders: Sequence[Order], granularity: Granularity) -> ChartSeries:
    """Group *orders* into time buckets.

    Buckets appear in chronological (first-seen) order; the ``orders`` and
    ``income`` series always have one value per label.
    """
    chronological = sort_records(orders, SortSpec(SortKey.DATE, SortDirection.ASCENDING))

    buckets: dict[str, list] = {}
    for order in chronological:
        bucket = buckets.setdefault(granularity.label(order), [0, Decimal("0")])
        bucket[0] += 1
        bucket[1] += order.amount

    labels = list(buckets)
    return ChartSeries(
        labels=labels,
        series={
            COUNT_SERIES: [buckets[label][0] for label in labels],
            INCOME_SERIES: [buckets[label][1] for label in labels],
        },
    )


def percentage(count: int, total: int) -> int:
    """``round(count / total * 100)`` with halves rounded up; 0 if total is 0."""
    if not total:
        return 0
    value = Decimal(count) * 100 / Decimal(total)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# --- Internal helpers -----------------------------------------------------


def _count_by_status(orders: Iterable[Order]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for order in orders:
        counts[order.status] = counts.get(order.status, 0) + 1
    return counts
