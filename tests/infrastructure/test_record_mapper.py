"""Tests for backend document mapping."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from orderdesk.domain.exceptions import ValidationError
from orderdesk.infrastructure.record_mapper import (
    order_from_raw,
    order_to_raw,
    parse_timestamp,
    review_from_raw,
)

ORDER_DOC = {
    "_id": "65a1",
    "userId": "u1",
    "items": [{"name": "Linen Shirt", "quantity": 2, "size": "L", "price": 40}],
    "amount": 90,
    "address": {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "street": "1 Analytical Way",
        "city": "London",
        "state": "LDN",
        "zipcode": "N1",
        "country": "UK",
        "phone": "123",
    },
    "status": "Packing",
    "paymentMethod": "Stripe",
    "payment": True,
    "date": 1704067200000,
}


class TestParseTimestamp:

    def test_epoch_milliseconds(self):
        assert parse_timestamp(1704067200000) == datetime.fromtimestamp(1704067200)

    def test_numeric_string(self):
        assert parse_timestamp("1704067200000") == datetime.fromtimestamp(1704067200)

    def test_iso_with_z_converted_to_local(self):
        expected = datetime(2024, 1, 1, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
        assert parse_timestamp("2024-01-01T00:00:00.000Z") == expected

    def test_naive_iso_kept(self):
        assert parse_timestamp("2024-01-01T08:30:00") == datetime(2024, 1, 1, 8, 30)

    @pytest.mark.parametrize("value", [None, "", "yesterday", True])
    def test_garbage_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid date"):
            parse_timestamp(value)


class TestOrderMapping:

    def test_full_document(self):
        order = order_from_raw(ORDER_DOC)
        assert order.id == "65a1"
        assert order.amount == Decimal("90")
        assert order.status == "Packing"
        assert order.items[0].name == "Linen Shirt"
        assert order.items[0].quantity == 2
        assert order.items[0].size == "L"
        assert order.customer_name == "Ada Lovelace"
        assert order.payment_method == "Stripe"
        assert order.payment_confirmed is True

    def test_missing_optional_fields(self):
        order = order_from_raw({"_id": "x", "date": 0, "amount": "5"})
        assert order.items == []
        assert order.customer_name == ""
        assert order.status == "Order Placed"
        assert order.payment_confirmed is False

    def test_missing_amount_rejected(self):
        with pytest.raises(ValidationError, match="missing 'amount'"):
            order_from_raw({"_id": "x", "date": 0})

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"items": ["Shirt"]}, "Order item must be an object"),
            ({"items": {"name": "Shirt"}}, "Order items must be a list"),
            ({"address": "1 Analytical Way"}, "Order address must be an object"),
            ({"items": [{"name": "Shirt", "quantity": "two"}]}, "Invalid item quantity"),
        ],
    )
    def test_malformed_nested_fields_rejected(self, overrides, message):
        with pytest.raises(ValidationError, match=message):
            order_from_raw({**ORDER_DOC, **overrides})

    def test_non_object_document_rejected(self):
        with pytest.raises(ValidationError, match="Order document must be an object"):
            order_from_raw(["65a1"])

    def test_round_trip_keeps_fields(self):
        order = order_from_raw(ORDER_DOC)
        again = order_from_raw(order_to_raw(order))
        assert again == order


class TestReviewMapping:

    def test_populated_references(self):
        review = review_from_raw({
            "_id": "r1",
            "user": {"name": "Ada", "email": "ada@example.com"},
            "product": {"name": "Linen Shirt"},
            "rating": 4,
            "comment": "Nice",
            "image": "http://img/upload/x.jpg",
            "date": 1704067200000,
        })
        assert review.user_name == "Ada"
        assert review.user_email == "ada@example.com"
        assert review.product_name == "Linen Shirt"
        assert review.image == "http://img/upload/x.jpg"

    def test_unpopulated_references_and_created_at(self):
        review = review_from_raw({
            "_id": "r2",
            "user": "64f0",
            "product": "64f1",
            "rating": "3",
            "createdAt": "2024-01-01T08:00:00",
        })
        assert review.user is None
        assert review.product_name is None
        assert review.comment == ""
        assert review.rating == 3
        assert review.date == datetime(2024, 1, 1, 8)

    def test_non_object_document_rejected(self):
        with pytest.raises(ValidationError, match="Review document must be an object"):
            review_from_raw("r1")

    def test_bad_rating_rejected(self):
        with pytest.raises(ValidationError, match="Invalid rating"):
            review_from_raw({"_id": "r", "rating": "five", "date": 0})
