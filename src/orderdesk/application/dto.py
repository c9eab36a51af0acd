"""Data Transfer Objects: the published views of each screen.

A view is an immutable snapshot recomputed from the Record Store and the
screen's current criteria.  The presentation layer only ever reads these.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from orderdesk.domain.model.order import Order
from orderdesk.domain.model.review import Review
from orderdesk.domain.model.value_objects import (
    ChartSeries,
    DateRange,
    FilterCriteria,
    SortSpec,
)
from orderdesk.domain.service.aggregation import OrderStats, StatusCount


class ScreenState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class OrdersView:
    """Orders screen: filtered, sorted list plus per-status cards."""

    state: ScreenState
    orders: tuple[Order, ...]
    status_summary: tuple[StatusCount, ...]
    criteria: FilterCriteria
    sort: SortSpec
    total_orders: int

    @property
    def is_loading(self) -> bool:
        return self.state is ScreenState.LOADING


@dataclass(frozen=True)
class DashboardView:
    """Dashboard: statistics and charts over the selected date window."""

    state: ScreenState
    range_name: str
    date_range: DateRange
    stats: OrderStats
    chart: ChartSeries
    status_chart: ChartSeries
    status_summary: tuple[StatusCount, ...]


@dataclass(frozen=True)
class ReviewsView:
    state: ScreenState
    reviews: tuple[Review, ...]
    search_text: str
    sort: SortSpec
    total_reviews: int
