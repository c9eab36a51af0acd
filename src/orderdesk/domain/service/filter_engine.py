"""Domain service: Filter Engine.

Applies a :class:`FilterCriteria` to a record collection.  Each axis
(date window, status, free-text search) is an independent predicate and
the axes are combined with AND, so applying them one after another in any
order gives the same result as applying them together.

The functions here are pure: they never mutate the input and they keep
the relative order of the records they retain.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar, Union

from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.review import Review
from orderdesk.domain.model.value_objects import DateRange, FilterCriteria

Record = Union[Order, Review]
R = TypeVar("R", Order, Review)


def filter_records(records: Sequence[R], criteria: FilterCriteria) -> list[R]:
    """Return the records matching every active axis of *criteria*."""
    needle = _normalize(criteria.search_text) if criteria.has_search else ""
    status = _status_text(criteria.status) if criteria.has_status else ""

    result: list[R] = []
    for record in records:
        if criteria.has_date and not criteria.date_range.contains(record.date):  # type: ignore[union-attr]
            continue
        if status and getattr(record, "status", None) != status:
            continue
        if needle and not _matches(record, needle):
            continue
        result.append(record)
    return result


def by_date_range(records: Sequence[R], date_range: DateRange | None) -> list[R]:
    return filter_records(records, FilterCriteria(date_range=date_range))


def by_status(records: Sequence[R], status: str | OrderStatus | None) -> list[R]:
    return filter_records(records, FilterCriteria(status=_status_text(status)))


def by_search(records: Sequence[R], text: str | None) -> list[R]:
    return filter_records(records, FilterCriteria(search_text=text))


# --- Internal helpers -----------------------------------------------------


def _status_text(status: str | OrderStatus | None) -> str:
    if isinstance(status, OrderStatus):
        return status.value
    return status or ""


def _normalize(text: str | None) -> str:
    return (text or "").casefold()


def _matches(record: Record, needle: str) -> bool:
    return any(needle in _normalize(candidate) for candidate in search_candidates(record))


def search_candidates(record: Record) -> Iterable[str]:
    """Text fields a free-text search looks at.

    Reviews: user name, product name, comment.  Orders: customer name and
    item names.  Missing fields come back as empty strings.
    """
    if isinstance(record, Review):
        return (record.user_name, record.product_name or "", record.comment or "")
    return (record.customer_name, *(item.name for item in record.items))
