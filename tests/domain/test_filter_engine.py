"""Unit tests for the Filter Engine."""

from datetime import date, datetime, timedelta

from orderdesk.domain.model.order import OrderStatus
from orderdesk.domain.model.value_objects import DateRange, FilterCriteria
from orderdesk.domain.service.filter_engine import (
    by_date_range,
    by_search,
    by_status,
    filter_records,
)
from tests.builders import make_order, make_review


def _orders():
    return [
        make_order("o1", datetime(2024, 1, 1, 9), "100", "Delivered", "Alice Smith"),
        make_order("o2", datetime(2024, 1, 3, 18), "50", "Packing", "Bob Jones"),
        make_order("o3", datetime(2024, 1, 5, 7), "20", "Delivered", "Carol King"),
        make_order("o4", datetime(2024, 1, 2, 23), "75", "Shipped", "Dan Brown"),
    ]


def _ids(records):
    return [r.id for r in records]


class TestStatusAxis:

    def test_scenario_delivered_only(self):
        orders = _orders()[:2]
        result = filter_records(orders, FilterCriteria(status="Delivered"))
        assert _ids(result) == ["o1"]

    def test_exact_string_equality(self):
        result = filter_records(_orders(), FilterCriteria(status="delivered"))
        assert result == []

    def test_enum_status_accepted(self):
        assert _ids(by_status(_orders(), OrderStatus.SHIPPED)) == ["o4"]

    def test_empty_status_imposes_nothing(self):
        assert _ids(by_status(_orders(), "")) == ["o1", "o2", "o3", "o4"]
        assert _ids(by_status(_orders(), None)) == ["o1", "o2", "o3", "o4"]


class TestDateAxis:

    def test_inclusive_whole_days(self):
        rng = DateRange.for_days(date(2024, 1, 2), date(2024, 1, 3))
        assert _ids(by_date_range(_orders(), rng)) == ["o2", "o4"]

    def test_record_at_end_instant_included(self):
        end = datetime(2024, 1, 3, 23, 59, 59, 999000)
        order = make_order("edge", end)
        rng = DateRange.for_days(date(2024, 1, 1), date(2024, 1, 3))
        assert _ids(by_date_range([order], rng)) == ["edge"]

    def test_record_one_ms_after_end_excluded(self):
        after = datetime(2024, 1, 3, 23, 59, 59, 999000) + timedelta(milliseconds=1)
        order = make_order("late", after)
        rng = DateRange.for_days(date(2024, 1, 1), date(2024, 1, 3))
        assert by_date_range([order], rng) == []

    def test_single_bound_is_ignored(self):
        only_start = DateRange.for_days(date(2024, 1, 4), None)
        only_end = DateRange.for_days(None, date(2024, 1, 1))
        assert len(by_date_range(_orders(), only_start)) == 4
        assert len(by_date_range(_orders(), only_end)) == 4

    def test_no_range_imposes_nothing(self):
        assert len(by_date_range(_orders(), None)) == 4


class TestSearchAxis:

    def _reviews(self):
        return [
            make_review("r1", comment="Lovely fabric", user="Alice", product="Linen Shirt"),
            make_review("r2", comment="Too small", user="Bob", product="Denim Jacket"),
            make_review("r3", comment="ok", user=None, product=None),
        ]

    def test_matches_user_name_case_insensitively(self):
        assert _ids(by_search(self._reviews(), "aLiCe")) == ["r1"]

    def test_matches_product_name(self):
        assert _ids(by_search(self._reviews(), "denim")) == ["r2"]

    def test_matches_comment(self):
        assert _ids(by_search(self._reviews(), "FABRIC")) == ["r1"]

    def test_missing_fields_never_match_and_never_error(self):
        assert _ids(by_search(self._reviews(), "shirt")) == ["r1"]
        assert _ids(by_search(self._reviews(), "OK")) == ["r3"]

    def test_orders_are_searched_by_customer_and_items(self):
        orders = [
            make_order("a", customer="Ada Lovelace", items=[("Notebook", 1)]),
            make_order("b", customer="Grace Hopper", items=[("Pen Set", 2)]),
        ]
        assert _ids(by_search(orders, "lovelace")) == ["a"]
        assert _ids(by_search(orders, "pen")) == ["b"]

    def test_empty_text_imposes_nothing(self):
        assert len(by_search(self._reviews(), "")) == 3


class TestConjunction:

    def test_axes_compose_independently(self):
        orders = _orders()
        criteria = FilterCriteria(
            date_range=DateRange.for_days(date(2024, 1, 1), date(2024, 1, 4)),
            status="Delivered",
            search_text="alice",
        )
        combined = filter_records(orders, criteria)
        stepwise = filter_records(
            filter_records(
                filter_records(orders, criteria.date_axis()),
                criteria.status_axis(),
            ),
            criteria.search_axis(),
        )
        assert combined == stepwise
        assert _ids(combined) == ["o1"]

    def test_axis_order_does_not_matter(self):
        orders = _orders()
        criteria = FilterCriteria(
            date_range=DateRange.for_days(date(2024, 1, 1), date(2024, 1, 5)),
            status="Delivered",
        )
        date_first = filter_records(filter_records(orders, criteria.date_axis()), criteria.status_axis())
        status_first = filter_records(filter_records(orders, criteria.status_axis()), criteria.date_axis())
        assert date_first == status_first == filter_records(orders, criteria)


class TestPurity:

    def test_empty_input_gives_empty_output(self):
        assert filter_records([], FilterCriteria(status="Packing", search_text="x")) == []

    def test_relative_order_preserved(self):
        result = filter_records(_orders(), FilterCriteria(status="Delivered"))
        assert _ids(result) == ["o1", "o3"]

    def test_input_not_mutated_and_deterministic(self):
        orders = _orders()
        snapshot = list(orders)
        criteria = FilterCriteria(status="Delivered")
        first = filter_records(orders, criteria)
        second = filter_records(orders, criteria)
        assert orders == snapshot
        assert first == second
        assert first is not orders
