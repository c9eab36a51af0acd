"""Domain service: resolve symbolic date windows to concrete ranges.

Two families exist:

* Relative ranges used by the dashboard (``week``, ``month``, ``year``
  ending *now*, or an explicit ``custom`` pair of days).
* Quick presets used by the orders screen (``today``, ``last7`` ...),
  always covering whole calendar days.

Everything is computed from the ``now`` passed in at call time; nothing
is cached.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta
from enum import Enum

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.value_objects import DateRange

Clock = Callable[[], datetime]

CUSTOM_WINDOW_DAYS = 30


class RelativeRange(Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"
    ALL = "all"

    @staticmethod
    def parse(raw: str | RelativeRange) -> RelativeRange:
        if isinstance(raw, RelativeRange):
            return raw
        try:
            return RelativeRange(raw.strip().lower())
        except ValueError:
            raise ValidationError(
                f"Unknown date range '{raw}'. Expected one of: "
                + ", ".join(r.value for r in RelativeRange)
            ) from None


_LOOKBACK = {
    RelativeRange.WEEK: timedelta(days=7),
    RelativeRange.MONTH: timedelta(days=30),
    RelativeRange.YEAR: timedelta(days=365),
}


class QuickPreset(Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST_7 = "last7"
    LAST_30 = "last30"
    THIS_MONTH = "thisMonth"

    @staticmethod
    def parse(raw: str | QuickPreset) -> QuickPreset:
        if isinstance(raw, QuickPreset):
            return raw
        for preset in QuickPreset:
            if raw in (preset.value, preset.name.lower()):
                return preset
        raise ValidationError(
            f"Unknown quick filter '{raw}'. Expected one of: "
            + ", ".join(p.value for p in QuickPreset)
        )


def resolve_range(
    relative: RelativeRange,
    now: datetime,
    custom_start: date | None = None,
    custom_end: date | None = None,
) -> DateRange:
    """Turn a dashboard range selection into a :class:`DateRange`.

    A ``custom`` selection with a missing bound, and ``all``, yield an
    incomplete range: the date constraint is simply not applied.
    """
    if relative in _LOOKBACK:
        return DateRange(now - _LOOKBACK[relative], now)
    if relative is RelativeRange.CUSTOM:
        if custom_start is None or custom_end is None:
            return DateRange()
        return DateRange.for_days(custom_start, custom_end)
    return DateRange()


def resolve_preset(preset: QuickPreset, now: datetime) -> DateRange:
    """Turn an orders-screen quick filter into whole-day bounds."""
    today = now.date()
    start, end = today, today

    if preset is QuickPreset.YESTERDAY:
        start = end = today - timedelta(days=1)
    elif preset is QuickPreset.LAST_7:
        start = today - timedelta(days=6)
    elif preset is QuickPreset.LAST_30:
        start = today - timedelta(days=29)
    elif preset is QuickPreset.THIS_MONTH:
        start = today.replace(day=1)

    return DateRange.for_days(start, end)


def default_custom_window(now: datetime) -> tuple[date, date]:
    """Days pre-filled when the operator switches to a custom range."""
    today = now.date()
    return today - timedelta(days=CUSTOM_WINDOW_DAYS), today
