"""Application service: Dashboard screen.

Summarises the orders inside the selected window (last week / month /
year, an explicit pair of days, or all time) as scalar statistics, an
orders-and-income time series and an orders-by-status breakdown.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime

from orderdesk.application.dto import DashboardView
from orderdesk.application.notifier import Notifier
from orderdesk.application.screen import Screen
from orderdesk.domain.model.order import Order
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.service.aggregation import (
    Granularity,
    bucket_series,
    order_stats,
    status_breakdown,
    status_summary,
)
from orderdesk.domain.service.date_ranges import (
    Clock,
    RelativeRange,
    default_custom_window,
    resolve_range,
)
from orderdesk.domain.service.filter_engine import by_date_range

logger = logging.getLogger(__name__)


class DashboardScreen(Screen[Order, DashboardView]):

    def __init__(
        self,
        order_repo: OrderRepository,
        notifier: Notifier,
        clock: Clock = datetime.now,
        relative: RelativeRange = RelativeRange.MONTH,
    ) -> None:
        super().__init__(notifier)
        self._order_repo = order_repo
        self._clock = clock
        self._relative = relative
        self._custom_start: date | None = None
        self._custom_end: date | None = None

    @property
    def relative(self) -> RelativeRange:
        return self._relative

    @property
    def custom_days(self) -> tuple[date | None, date | None]:
        return self._custom_start, self._custom_end

    def set_range(self, relative: str | RelativeRange) -> DashboardView:
        """Switch to a preset window, or to ``custom``.

        Switching to a preset clears the custom days; switching to
        ``custom`` with no days chosen pre-fills the last 30 days.
        """
        self._relative = RelativeRange.parse(relative)
        if self._relative is RelativeRange.CUSTOM:
            if self._custom_start is None or self._custom_end is None:
                self._custom_start, self._custom_end = default_custom_window(self._clock())
        else:
            self._custom_start = self._custom_end = None
        return self._refresh()

    def set_custom_dates(self, start_day: date | None, end_day: date | None) -> DashboardView:
        """Use an explicit pair of days.

        With a bound missing the operator is warned and every order is
        counted, as if no window were selected.
        """
        self._relative = RelativeRange.CUSTOM
        self._custom_start, self._custom_end = start_day, end_day
        if start_day is None or end_day is None:
            self._notifier.warning("Please select both start and end dates")
        return self._refresh()

    # --- Screen hooks ---------------------------------------------------------

    def _fetch(self) -> Sequence[Order]:
        return self._order_repo.list_all()

    def _project(self) -> DashboardView:
        date_range = resolve_range(
            self._relative, self._clock(), self._custom_start, self._custom_end
        )
        in_range = by_date_range(self._records, date_range)
        logger.debug("%d of %d orders inside %s", len(in_range), len(self._records), date_range)

        return DashboardView(
            state=self._state,
            range_name=self._relative.value,
            date_range=date_range,
            stats=order_stats(in_range),
            chart=bucket_series(in_range, Granularity.for_range(self._relative)),
            status_chart=status_breakdown(in_range),
            status_summary=tuple(status_summary(self._records)),
        )
