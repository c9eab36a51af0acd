"""Translate backend documents to domain records and back.

Both the JSON file store and the HTTP backend speak the same document
shape (``_id``, camelCase keys, dates as epoch milliseconds), so the
mapping lives here once.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.order import Address, Order, OrderItem
from orderdesk.domain.model.review import Review, ReviewAuthor


def parse_timestamp(value: Any) -> datetime:
    """Parse epoch milliseconds or an ISO-8601 string into naive local time."""
    if isinstance(value, datetime):
        return _naive_local(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000)
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.lstrip("-").isdigit():
            return datetime.fromtimestamp(int(text) / 1000)
        try:
            return _naive_local(datetime.fromisoformat(text.replace("Z", "+00:00")))
        except ValueError as exc:
            raise ValidationError(f"Invalid date: {value!r}") from exc
    raise ValidationError(f"Invalid date: {value!r}")


def format_timestamp(moment: datetime) -> int:
    """Inverse of :func:`parse_timestamp` for storage: epoch milliseconds."""
    return int(round(moment.timestamp() * 1000))


def _naive_local(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f"{what} must be an object, got {type(value).__name__}")
    return value


# --- Orders ---------------------------------------------------------------


def order_from_raw(raw: Mapping[str, Any]) -> Order:
    raw = _mapping(raw, "Order document")
    try:
        order_id = raw.get("_id") or raw["id"]
        date = parse_timestamp(raw["date"])
        amount = raw["amount"]
    except KeyError as exc:
        raise ValidationError(f"Order document is missing {exc.args[0]!r}") from exc

    address = _mapping(raw.get("address") or {}, "Order address")
    items = raw.get("items") or []
    if not isinstance(items, list):
        raise ValidationError(f"Order items must be a list, got {type(items).__name__}")
    return Order(
        id=str(order_id),
        date=date,
        amount=amount,
        status=str(raw.get("status") or "Order Placed"),
        items=[_item_from_raw(_mapping(item, "Order item")) for item in items],
        address=Address(
            first_name=str(address.get("firstName") or ""),
            last_name=str(address.get("lastName") or ""),
            street=str(address.get("street") or ""),
            city=str(address.get("city") or ""),
            state=str(address.get("state") or ""),
            zipcode=str(address.get("zipcode") or ""),
            country=str(address.get("country") or ""),
            phone=str(address.get("phone") or ""),
        ),
        payment_method=str(raw.get("paymentMethod") or ""),
        payment_confirmed=bool(raw.get("payment")),
    )


def _item_from_raw(item: Mapping[str, Any]) -> OrderItem:
    try:
        quantity = int(item.get("quantity") or 0)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid item quantity: {item.get('quantity')!r}") from exc
    return OrderItem(
        name=str(item.get("name") or ""),
        quantity=quantity,
        size=str(item.get("size") or ""),
    )


def order_to_raw(order: Order) -> dict[str, Any]:
    return {
        "_id": order.id,
        "date": format_timestamp(order.date),
        "amount": str(order.amount),
        "status": order.status,
        "items": [
            {"name": item.name, "quantity": item.quantity, "size": item.size}
            for item in order.items
        ],
        "address": {
            "firstName": order.address.first_name,
            "lastName": order.address.last_name,
            "street": order.address.street,
            "city": order.address.city,
            "state": order.address.state,
            "zipcode": order.address.zipcode,
            "country": order.address.country,
            "phone": order.address.phone,
        },
        "paymentMethod": order.payment_method,
        "payment": order.payment_confirmed,
    }


# --- Reviews --------------------------------------------------------------


def review_from_raw(raw: Mapping[str, Any]) -> Review:
    raw = _mapping(raw, "Review document")
    try:
        review_id = raw.get("_id") or raw["id"]
        date = parse_timestamp(raw["date"] if "date" in raw else raw["createdAt"])
        rating = int(raw["rating"])
    except KeyError as exc:
        raise ValidationError(f"Review document is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid rating: {raw.get('rating')!r}") from exc

    return Review(
        id=str(review_id),
        date=date,
        rating=rating,
        comment=str(raw.get("comment") or ""),
        user=_author_from_raw(raw.get("user")),
        product_name=_product_name_from_raw(raw.get("product")),
        image=raw.get("image") or None,
    )


def _author_from_raw(user: Any) -> ReviewAuthor | None:
    # populated references are objects; an unpopulated one is a bare id
    if not isinstance(user, Mapping):
        return None
    return ReviewAuthor(name=str(user.get("name") or ""), email=str(user.get("email") or ""))


def _product_name_from_raw(product: Any) -> str | None:
    if not isinstance(product, Mapping) or not product.get("name"):
        return None
    return str(product["name"])


def review_to_raw(review: Review) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "_id": review.id,
        "date": format_timestamp(review.date),
        "rating": review.rating,
        "comment": review.comment,
    }
    if review.user is not None:
        raw["user"] = {"name": review.user.name, "email": review.user.email}
    if review.product_name is not None:
        raw["product"] = {"name": review.product_name}
    if review.image:
        raw["image"] = review.image
    return raw
