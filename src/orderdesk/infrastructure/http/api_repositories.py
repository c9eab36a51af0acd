"""HTTP implementations of the order and review collaborators.

The backend answers every call with ``{"success": bool, "message": str,
...}``; a ``success: false`` body is treated exactly like a transport
error.  No retries: the caller decides what to do with a failure.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from orderdesk.domain.exceptions import (
    CollaboratorError,
    DomainException,
    FetchFailure,
    MutationFailure,
)
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.model.review import Review
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.review_repository import ReviewRepository
from orderdesk.infrastructure.record_mapper import order_from_raw, review_from_raw

logger = logging.getLogger(__name__)

ORDER_LIST_PATH = "/api/order/list"
ORDER_STATUS_PATH = "/api/order/status"
REVIEW_LIST_PATH = "/api/review/all"
REVIEW_DELETE_PATH = "/api/review/delete/{review_id}"


class ApiClient:
    """Thin wrapper over a :class:`requests.Session` bound to one backend."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        if token:
            self._session.headers.update({"token": token})

    def call(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        failure: type[CollaboratorError] = FetchFailure,
    ) -> dict[str, Any]:
        """Send one request and return the decoded body.

        Raises *failure* on transport errors, non-2xx responses,
        undecodable bodies and ``success: false`` answers.
        """
        url = self._base_url + path
        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, json=payload, timeout=self._timeout)
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as exc:
            raise failure(f"{method} {path} failed: {exc}") from exc
        except ValueError as exc:
            raise failure(f"{method} {path} returned invalid JSON") from exc

        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("message") if isinstance(body, dict) else None
            raise failure(message or f"{method} {path} was rejected")
        return body


class ApiOrderRepository(OrderRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_all(self) -> list[Order]:
        body = self._client.call("POST", ORDER_LIST_PATH, {})
        try:
            orders = [order_from_raw(raw) for raw in body.get("orders") or []]
        except (DomainException, TypeError, ValueError) as exc:
            raise FetchFailure(f"Unreadable order from backend: {exc}") from exc
        # The backend lists oldest first.
        orders.reverse()
        logger.info("Fetched %d orders", len(orders))
        return orders

    def update_status(self, order_id: str, status: OrderStatus) -> None:
        self._client.call(
            "POST",
            ORDER_STATUS_PATH,
            {"orderId": order_id, "status": status.value},
            failure=MutationFailure,
        )


class ApiReviewRepository(ReviewRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def list_all(self) -> list[Review]:
        body = self._client.call("GET", REVIEW_LIST_PATH)
        try:
            reviews = [review_from_raw(raw) for raw in body.get("reviews") or []]
        except (DomainException, TypeError, ValueError) as exc:
            raise FetchFailure(f"Unreadable review from backend: {exc}") from exc
        logger.info("Fetched %d reviews", len(reviews))
        return reviews

    def delete(self, review_id: str) -> None:
        self._client.call(
            "DELETE",
            REVIEW_DELETE_PATH.format(review_id=review_id),
            {"isAdmin": True},
            failure=MutationFailure,
        )
