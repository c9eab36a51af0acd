"""Application service: View Projector base.

A screen owns one Record Store (the last collection its collaborator
returned) plus the operator's current criteria.  Every change recomputes
the view from the Record Store, never from a previously filtered view,
and publishes it synchronously to subscribers.

Lifecycle::

    UNINITIALIZED -> LOADING -> READY
    READY -> LOADING            (explicit refetch)
    LOADING -> ERROR            (fetch failed; last records stay available)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

from orderdesk.application.dto import ScreenState
from orderdesk.application.notifier import Notifier
from orderdesk.domain.exceptions import FetchFailure

logger = logging.getLogger(__name__)

V = TypeVar("V")
T = TypeVar("T")

Subscriber = Callable[[V], None]


class Screen(ABC, Generic[T, V]):

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier
        self._records: list[T] = []
        self._state = ScreenState.UNINITIALIZED
        self._subscribers: list[Subscriber] = []
        self._view: V | None = None

    # --- Public API -----------------------------------------------------------

    @property
    def state(self) -> ScreenState:
        return self._state

    @property
    def records(self) -> tuple[T, ...]:
        return tuple(self._records)

    @property
    def view(self) -> V:
        if self._view is None:
            self._view = self._project()
        return self._view

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call *callback* with every newly published view.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def load(self) -> bool:
        """Fetch the full collection and replace the Record Store.

        Returns False (after notifying the operator) when the fetch fails;
        the previous records stay in place.
        """
        self._state = ScreenState.LOADING
        self._refresh()

        try:
            records = self._fetch()
        except FetchFailure as exc:
            logger.warning("%s fetch failed: %s", type(self).__name__, exc, exc_info=True)
            self._state = ScreenState.ERROR
            self._notifier.error(str(exc))
            self._refresh()
            return False

        self.replace_records(records)
        return True

    def replace_records(self, records: Sequence[T]) -> V:
        """Swap in a freshly fetched collection and recompute.

        Whichever response arrives last wins; there is no ordering between
        overlapping fetches.
        """
        self._records = list(records)
        self._state = ScreenState.READY
        logger.info("%s loaded %d records", type(self).__name__, len(self._records))
        return self._refresh()

    # --- Subclass hooks -------------------------------------------------------

    @abstractmethod
    def _fetch(self) -> Sequence[T]:
        """Ask the collaborator for the full collection."""

    @abstractmethod
    def _project(self) -> V:
        """Build the view from the Record Store and current criteria."""

    # --- Internal helpers -----------------------------------------------------

    def _refresh(self) -> V:
        self._view = self._project()
        for callback in list(self._subscribers):
            callback(self._view)
        return self._view
