"""Domain service: Sort Engine.

Orders a record collection by a :class:`SortSpec`.  Sorting is stable in
both directions: ``sorted(..., reverse=True)`` keeps equal-key records in
their original relative order, which the date bucketing and the tables
both rely on.
"""

from __future__ import annotations

import locale
import unicodedata
from collections.abc import Callable, Sequence
from typing import Any

from orderdesk.domain.model.review import Review
from orderdesk.domain.model.value_objects import SortKey, SortSpec
from orderdesk.domain.service.filter_engine import R


def sort_records(records: Sequence[R], spec: SortSpec) -> list[R]:
    """Return a new list of *records* ordered by *spec*."""
    return sorted(records, key=_KEY_EXTRACTORS[spec.key], reverse=spec.descending)


def name_key(name: str | None) -> tuple[str, str]:
    """Case- and accent-insensitive collation key; ``None`` sorts as ''.

    The base letters decide first, so "Émile" sorts with the e's whatever
    the process locale is; ``strxfrm`` only breaks ties between names
    that differ in accents or case.
    """
    folded = (name or "").casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, locale.strxfrm(folded)


def _date_key(record: Any) -> Any:
    return record.date


def _rating_key(record: Any) -> int:
    return getattr(record, "rating", 0)


def _product_name_key(record: Any) -> tuple[str, str]:
    if isinstance(record, Review):
        return name_key(record.product_name)
    # Orders have no single product; use the first item's name.
    items = getattr(record, "items", None) or []
    return name_key(items[0].name if items else "")


def _user_name_key(record: Any) -> tuple[str, str]:
    if isinstance(record, Review):
        return name_key(record.user_name)
    return name_key(getattr(record, "customer_name", ""))


_KEY_EXTRACTORS: dict[SortKey, Callable[[Any], Any]] = {
    SortKey.DATE: _date_key,
    SortKey.RATING: _rating_key,
    SortKey.PRODUCT_NAME: _product_name_key,
    SortKey.USER_NAME: _user_name_key,
}
