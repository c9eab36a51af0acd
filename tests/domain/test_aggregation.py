"""Unit tests for the Aggregation Engine."""

from datetime import datetime
from decimal import Decimal

import pytest

from orderdesk.domain.model.order import OrderStatus
from orderdesk.domain.service.aggregation import (
    COUNT_SERIES,
    INCOME_SERIES,
    Granularity,
    bucket_series,
    order_stats,
    percentage,
    status_breakdown,
    status_summary,
)
from orderdesk.domain.service.date_ranges import RelativeRange
from tests.builders import make_order


def _scenario_orders():
    return [
        make_order("o1", datetime(2024, 1, 1), "100", "Delivered"),
        make_order("o2", datetime(2024, 1, 3), "50", "Packing"),
    ]


class TestOrderStats:

    def test_scenario(self):
        stats = order_stats(_scenario_orders())
        assert stats.total_orders == 2
        assert stats.total_income == 150
        assert stats.avg_order_value == Decimal("75.00")
        assert stats.pending_orders == 1
        assert stats.delivered_orders == 1

    def test_empty_collection_is_all_zero(self):
        stats = order_stats([])
        assert stats.total_orders == 0
        assert stats.total_income == 0
        assert stats.avg_order_value == 0
        assert stats.pending_orders == 0
        assert stats.delivered_orders == 0

    def test_average_rounded_to_cents(self):
        orders = [
            make_order("a", amount="10"),
            make_order("b", amount="10"),
            make_order("c", amount="10.01"),
        ]
        # 30.01 / 3 = 10.00333...
        assert order_stats(orders).avg_order_value == Decimal("10.00")

    def test_average_rounds_half_up(self):
        orders = [make_order("a", amount="0.01"), make_order("b", amount="0.04")]
        # 0.05 / 2 = 0.025
        assert order_stats(orders).avg_order_value == Decimal("0.03")

    def test_unknown_status_counts_as_pending(self):
        stats = order_stats([make_order(status="Returned")])
        assert stats.pending_orders == 1
        assert stats.delivered_orders == 0


class TestStatusSummary:

    def test_counts_in_enumeration_order(self):
        orders = [
            make_order("1", status="Packing"),
            make_order("2", status="Delivered"),
            make_order("3", status="Packing"),
            make_order("4", status="Shipped"),
        ]
        summary = status_summary(orders)
        assert [s.status for s in summary] == [s.value for s in OrderStatus]
        assert [s.count for s in summary] == [0, 2, 1, 0, 1]
        assert [s.percentage for s in summary] == [0, 50, 25, 0, 25]

    def test_percentages_rounded(self):
        orders = [
            make_order("1", status="Packing"),
            make_order("2", status="Packing"),
            make_order("3", status="Shipped"),
        ]
        by_status = {s.status: s.percentage for s in status_summary(orders)}
        assert by_status["Packing"] == 67
        assert by_status["Shipped"] == 33

    def test_empty_store_gives_zero_percentages(self):
        summary = status_summary([])
        assert all(s.count == 0 and s.percentage == 0 for s in summary)

    def test_unknown_status_counts_toward_total_only(self):
        orders = [make_order("1", status="Packing"), make_order("2", status="Returned")]
        by_status = {s.status: s.percentage for s in status_summary(orders)}
        assert by_status["Packing"] == 50

    def test_custom_status_subset(self):
        summary = status_summary(_scenario_orders(), [OrderStatus.DELIVERED])
        assert [(s.status, s.count) for s in summary] == [("Delivered", 1)]

    @pytest.mark.parametrize(
        "count,total,expected",
        [(0, 0, 0), (1, 8, 13), (1, 3, 33), (1, 2, 50), (5, 5, 100)],
    )
    def test_percentage(self, count, total, expected):
        assert percentage(count, total) == expected


class TestStatusBreakdown:

    def test_every_status_present_and_zero_filled(self):
        chart = status_breakdown(_scenario_orders())
        assert chart.labels == tuple(s.value for s in OrderStatus)
        assert chart.series[COUNT_SERIES] == (0, 1, 0, 0, 1)


class TestBucketSeries:

    def test_day_buckets_in_chronological_order(self):
        orders = [
            make_order("c", datetime(2024, 1, 15, 9), "30"),
            make_order("a", datetime(2024, 1, 5, 9), "10"),
            make_order("b", datetime(2024, 1, 5, 20), "15"),
        ]
        chart = bucket_series(orders, Granularity.DAY)
        assert chart.labels == ("Jan 5", "Jan 15")
        assert chart.series[COUNT_SERIES] == (2, 1)
        assert chart.series[INCOME_SERIES] == (Decimal("25"), Decimal("30"))

    def test_series_names(self):
        chart = bucket_series([make_order()], Granularity.DAY)
        assert set(chart.series) == {"count", "income"}

    def test_month_labels_are_not_sorted_lexicographically(self):
        orders = [
            make_order("feb", datetime(2024, 2, 10), "5"),
            make_order("dec", datetime(2023, 12, 1), "5"),
            make_order("jan", datetime(2024, 1, 20), "5"),
        ]
        chart = bucket_series(orders, Granularity.MONTH)
        assert chart.labels == ("Dec 2023", "Jan 2024", "Feb 2024")

    def test_weekday_labels(self):
        # 2024-03-04 is a Monday
        orders = [make_order(str(d), datetime(2024, 3, d), "1") for d in range(4, 11)]
        chart = bucket_series(orders, Granularity.WEEKDAY)
        assert chart.labels == ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

    def test_series_aligned_with_labels(self):
        orders = [make_order(str(i), datetime(2024, 1 + i % 12, 1 + i % 28), "3") for i in range(40)]
        chart = bucket_series(orders, Granularity.DAY)
        assert len(chart.labels) == len(chart.series[COUNT_SERIES]) == len(chart.series[INCOME_SERIES])
        assert sum(chart.series[COUNT_SERIES]) == 40

    def test_empty_collection(self):
        chart = bucket_series([], Granularity.MONTH)
        assert chart.labels == ()
        assert chart.series[COUNT_SERIES] == ()
        assert chart.series[INCOME_SERIES] == ()

    def test_input_order_untouched(self):
        orders = [make_order("b", datetime(2024, 1, 2)), make_order("a", datetime(2024, 1, 1))]
        bucket_series(orders, Granularity.DAY)
        assert [o.id for o in orders] == ["b", "a"]


class TestGranularity:

    @pytest.mark.parametrize(
        "relative,expected",
        [
            (RelativeRange.WEEK, Granularity.WEEKDAY),
            (RelativeRange.MONTH, Granularity.DAY),
            (RelativeRange.YEAR, Granularity.MONTH),
            (RelativeRange.CUSTOM, Granularity.MONTH),
            (RelativeRange.ALL, Granularity.MONTH),
        ],
    )
    def test_for_range(self, relative, expected):
        assert Granularity.for_range(relative) is expected
