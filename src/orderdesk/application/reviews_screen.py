"""Application service: Reviews screen.

Free-text search over reviewer, product and comment, sortable by any
column.  Deleting a review drops it from the local Record Store directly:
a delete has no server-side side effects worth refetching for.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from orderdesk.application.dto import ReviewsView
from orderdesk.application.notifier import Notifier
from orderdesk.application.screen import Screen
from orderdesk.domain.exceptions import MutationFailure
from orderdesk.domain.model.review import Review
from orderdesk.domain.model.value_objects import (
    FilterCriteria,
    SortDirection,
    SortKey,
    SortSpec,
)
from orderdesk.domain.repository.review_repository import ReviewRepository
from orderdesk.domain.service.filter_engine import filter_records
from orderdesk.domain.service.sort_engine import sort_records

logger = logging.getLogger(__name__)


class ReviewsScreen(Screen[Review, ReviewsView]):

    def __init__(self, review_repo: ReviewRepository, notifier: Notifier) -> None:
        super().__init__(notifier)
        self._review_repo = review_repo
        self._search_text = ""
        self._sort = SortSpec(SortKey.DATE, SortDirection.DESCENDING)

    def search(self, text: str | None) -> ReviewsView:
        self._search_text = text or ""
        return self._refresh()

    def sort_by(self, key: str | SortKey) -> ReviewsView:
        """Sort by *key*; picking the current key again flips the direction.

        A newly picked key always starts ascending.
        """
        key = SortKey.parse(key)
        if key is self._sort.key:
            self._sort = self._sort.toggled()
        else:
            self._sort = SortSpec(key, SortDirection.ASCENDING)
        return self._refresh()

    def set_sort(self, spec: SortSpec) -> ReviewsView:
        self._sort = spec
        return self._refresh()

    def delete(self, review_id: str) -> bool:
        try:
            self._review_repo.delete(review_id)
        except MutationFailure as exc:
            logger.warning("Deleting review %s failed: %s", review_id, exc)
            self._notifier.error(str(exc))
            return False

        self._records = [review for review in self._records if review.id != review_id]
        self._notifier.success("Review deleted successfully")
        self._refresh()
        return True

    # --- Screen hooks ---------------------------------------------------------

    def _fetch(self) -> Sequence[Review]:
        return self._review_repo.list_all()

    def _project(self) -> ReviewsView:
        matching = filter_records(self._records, FilterCriteria(search_text=self._search_text))
        return ReviewsView(
            state=self._state,
            reviews=tuple(sort_records(matching, self._sort)),
            search_text=self._search_text,
            sort=self._sort,
            total_reviews=len(self._records),
        )
