"""Abstract collaborator for the order service.

The orders screen reads and updates orders only through this
interface; the JSON file store and the HTTP backend both implement it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return the full current set of orders, newest first.

        Raises FetchFailure when the collection cannot be read.
        """

    @abstractmethod
    def update_status(self, order_id: str, status: OrderStatus) -> None:
        """Change an order's status.

        Raises MutationFailure when the update is rejected.
        """
