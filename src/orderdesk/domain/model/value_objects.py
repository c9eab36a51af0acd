"""Immutable values used by the screens and services.

They describe *how* a record collection should be projected (date window,
filter criteria, sort order) and the shape of what comes out (chart data).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum

from orderdesk.domain.exceptions import ValidationError

# Last representable millisecond of a calendar day.
END_OF_DAY = time(23, 59, 59, 999000)


@dataclass(frozen=True)
class DateRange:
    """Inclusive ``[start, end]`` window over record dates.

    Either bound may be missing; a range is only *complete* (and therefore
    only constrains anything) when both are present.
    """

    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def contains(self, instant: datetime) -> bool:
        """True if *instant* falls inside the window, bounds included.

        An incomplete range contains everything.
        """
        if not self.is_complete:
            return True
        return self.start <= instant <= self.end  # type: ignore[operator]

    @staticmethod
    def for_days(start_day: date | None, end_day: date | None) -> DateRange:
        """Build a range covering whole calendar days.

        ``start_day`` is floored to 00:00:00.000 and ``end_day`` ceiled to
        23:59:59.999.  A missing day leaves that bound unset.
        """
        start = datetime.combine(_as_date(start_day), time.min) if start_day else None
        end = datetime.combine(_as_date(end_day), END_OF_DAY) if end_day else None
        return DateRange(start, end)

    def __str__(self) -> str:
        if not self.is_complete:
            return "all time"
        return f"{self.start:%Y-%m-%d %H:%M} .. {self.end:%Y-%m-%d %H:%M}"


def _as_date(value: date) -> date:
    # datetime is a subclass of date; drop the time part explicitly
    return value.date() if isinstance(value, datetime) else value


@dataclass(frozen=True)
class FilterCriteria:
    """Conjunctive filter over a record collection.

    Every axis is optional; ``None`` or an empty string means "no
    constraint on this axis".
    """

    date_range: DateRange | None = None
    status: str | None = None
    search_text: str | None = None

    @property
    def has_date(self) -> bool:
        return self.date_range is not None and self.date_range.is_complete

    @property
    def has_status(self) -> bool:
        return bool(self.status)

    @property
    def has_search(self) -> bool:
        return bool(self.search_text)

    def date_axis(self) -> FilterCriteria:
        return FilterCriteria(date_range=self.date_range)

    def status_axis(self) -> FilterCriteria:
        return FilterCriteria(status=self.status)

    def search_axis(self) -> FilterCriteria:
        return FilterCriteria(search_text=self.search_text)


class SortKey(Enum):
    DATE = "date"
    RATING = "rating"
    PRODUCT_NAME = "productName"
    USER_NAME = "userName"

    @staticmethod
    def parse(raw: str | SortKey) -> SortKey:
        """Accept a wire value (``productName``) or member name (``product_name``)."""
        if isinstance(raw, SortKey):
            return raw
        for key in SortKey:
            if raw == key.value or raw.lower() == key.name.lower():
                return key
        raise ValidationError(
            f"Unknown sort key '{raw}'. Expected one of: "
            + ", ".join(k.value for k in SortKey)
        )


class SortDirection(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def toggled(self) -> SortDirection:
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING


@dataclass(frozen=True)
class SortSpec:
    key: SortKey = SortKey.DATE
    direction: SortDirection = SortDirection.DESCENDING

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESCENDING

    def toggled(self) -> SortSpec:
        return SortSpec(self.key, self.direction.toggled())


@dataclass(frozen=True)
class ChartSeries:
    """Chart-ready data: labels plus named series aligned by position."""

    labels: tuple[str, ...] = ()
    series: Mapping[str, tuple[float, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        labels = tuple(self.labels)
        series = {name: tuple(values) for name, values in self.series.items()}
        for name, values in series.items():
            if len(values) != len(labels):
                raise ValueError(
                    f"Series '{name}' has {len(values)} values for {len(labels)} labels"
                )
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "series", series)

    def __len__(self) -> int:
        return len(self.labels)

    def points(self, name: str) -> list[tuple[str, float]]:
        """Return ``(label, value)`` pairs for one series."""
        return list(zip(self.labels, self.series[name]))

    def as_dict(self) -> dict[str, object]:
        return {
            "labels": list(self.labels),
            "series": {name: list(values) for name, values in self.series.items()},
        }
