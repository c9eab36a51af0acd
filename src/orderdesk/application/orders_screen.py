"""Application service: Orders screen.

Lists every order, filtered by a day range and/or status and sorted by
date.  Changing an order's status is delegated to the order service and
followed by a full refetch instead of patching the local copy, so any
server-side derived state shows up too.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import date, datetime

from orderdesk.application.dto import OrdersView, ScreenState
from orderdesk.application.notifier import Notifier
from orderdesk.application.screen import Screen
from orderdesk.domain.exceptions import MutationFailure
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.value_objects import (
    DateRange,
    FilterCriteria,
    SortDirection,
    SortKey,
    SortSpec,
)
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.service.aggregation import status_summary
from orderdesk.domain.service.date_ranges import Clock, QuickPreset, resolve_preset
from orderdesk.domain.service.filter_engine import filter_records
from orderdesk.domain.service.sort_engine import sort_records

logger = logging.getLogger(__name__)


class OrdersScreen(Screen[Order, OrdersView]):

    def __init__(
        self,
        order_repo: OrderRepository,
        notifier: Notifier,
        clock: Clock = datetime.now,
    ) -> None:
        super().__init__(notifier)
        self._order_repo = order_repo
        self._clock = clock
        self._criteria = FilterCriteria()
        self._sort = SortSpec(SortKey.DATE, SortDirection.DESCENDING)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    # --- Filters --------------------------------------------------------------

    def apply_filters(
        self,
        start_day: date | None = None,
        end_day: date | None = None,
        status: str | OrderStatus | None = None,
    ) -> OrdersView:
        """Filter by whole days and status.

        The day range only applies when both days are given.
        """
        self._criteria = FilterCriteria(
            date_range=DateRange.for_days(start_day, end_day),
            status=OrderStatus.parse(status).value if status else None,
        )
        return self._refresh()

    def filter_status(self, status: str | OrderStatus | None) -> OrdersView:
        """Change only the status axis, keeping the day range."""
        value = OrderStatus.parse(status).value if status else None
        self._criteria = replace(self._criteria, status=value)
        return self._refresh()

    def quick_filter(self, preset: str | QuickPreset) -> OrdersView:
        """Apply a relative day preset computed from the current time."""
        date_range = resolve_preset(QuickPreset.parse(preset), self._clock())
        self._criteria = replace(self._criteria, date_range=date_range)
        return self._refresh()

    def reset_filters(self) -> OrdersView:
        self._criteria = FilterCriteria()
        return self._refresh()

    # --- Sorting --------------------------------------------------------------

    def toggle_sort(self) -> OrdersView:
        self._sort = self._sort.toggled()
        return self._refresh()

    def set_sort_direction(self, direction: SortDirection) -> OrdersView:
        self._sort = SortSpec(SortKey.DATE, direction)
        return self._refresh()

    # --- Mutations ------------------------------------------------------------

    def change_status(self, order_id: str, status: str | OrderStatus) -> bool:
        """Ask the order service to change a status, then refetch.

        Returns False when the service rejected the change or the refetch
        failed; the operator has been notified in both cases.
        """
        new_status = OrderStatus.parse(status)
        try:
            self._order_repo.update_status(order_id, new_status)
        except MutationFailure as exc:
            logger.warning("Status update for order %s failed: %s", order_id, exc)
            self._notifier.error(str(exc))
            return False

        logger.info("Order %s set to %s", order_id, new_status.value)
        return self.load()

    # --- Screen hooks ---------------------------------------------------------

    def _fetch(self) -> Sequence[Order]:
        return self._order_repo.list_all()

    def _project(self) -> OrdersView:
        if self._state is ScreenState.LOADING:
            orders: tuple[Order, ...] = ()
        else:
            orders = tuple(sort_records(filter_records(self._records, self._criteria), self._sort))
        return OrdersView(
            state=self._state,
            orders=orders,
            status_summary=tuple(status_summary(self._records)),
            criteria=self._criteria,
            sort=self._sort,
            total_orders=len(self._records),
        )
