"""Order collaborator backed by a local ``orders.json``.

Documents are kept oldest first, the way the order service stores them;
``list_all`` hands them out newest first.
"""

from __future__ import annotations

import logging
from pathlib import Path

from orderdesk.domain.exceptions import DomainException, FetchFailure, MutationFailure
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.infrastructure.persistence.json_file import JsonDocumentFile
from orderdesk.infrastructure.record_mapper import order_from_raw, order_to_raw

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path)

    def list_all(self) -> list[Order]:
        try:
            orders = [order_from_raw(raw) for raw in self._file.read()]
        except (OSError, ValueError, DomainException) as exc:
            raise FetchFailure(f"Failed to read orders from {self._file.path}: {exc}") from exc
        orders.reverse()
        logger.info("Read %d orders from %s", len(orders), self._file.path)
        return orders

    def update_status(self, order_id: str, status: OrderStatus) -> None:
        try:
            documents = self._file.read()
        except (OSError, ValueError) as exc:
            raise MutationFailure(f"Failed to read orders from {self._file.path}: {exc}") from exc

        target = next((raw for raw in documents if str(raw.get("_id")) == order_id), None)
        if target is None:
            raise MutationFailure(f"Order #{order_id} not found")

        target["status"] = status.value
        self._file.write(documents)
        logger.debug("Order %s status stored as %s", order_id, status.value)

    def add(self, order: Order) -> None:
        """Append an order document (used to seed a data directory)."""
        self._file.append(order_to_raw(order))
