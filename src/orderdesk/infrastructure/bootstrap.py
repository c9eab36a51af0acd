"""Composition root: wires concrete collaborators to the screens.

The backend setting picks JSON files or the HTTP API for both
repositories; each CLI command asks for the one screen it drives.
"""

from __future__ import annotations

from orderdesk.application.dashboard_screen import DashboardScreen
from orderdesk.application.notifier import Notifier
from orderdesk.application.orders_screen import OrdersScreen
from orderdesk.application.reviews_screen import ReviewsScreen
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.domain.repository.review_repository import ReviewRepository
from orderdesk.infrastructure.config import Settings, load_settings
from orderdesk.infrastructure.http.api_repositories import (
    ApiClient,
    ApiOrderRepository,
    ApiReviewRepository,
)
from orderdesk.infrastructure.notifier import ClickNotifier
from orderdesk.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderdesk.infrastructure.persistence.json_review_repository import (
    JsonReviewRepository,
)


def _api_client(settings: Settings) -> ApiClient:
    return ApiClient(settings.backend_url or "", settings.token, settings.timeout)


def order_repository(settings: Settings | None = None) -> OrderRepository:
    settings = settings or load_settings()
    if settings.backend == "api":
        return ApiOrderRepository(_api_client(settings))
    return JsonOrderRepository(settings.data_dir / "orders.json")


def review_repository(settings: Settings | None = None) -> ReviewRepository:
    settings = settings or load_settings()
    if settings.backend == "api":
        return ApiReviewRepository(_api_client(settings))
    return JsonReviewRepository(settings.data_dir / "reviews.json")


def notifier() -> Notifier:
    return ClickNotifier()


def orders_screen(settings: Settings | None = None) -> OrdersScreen:
    return OrdersScreen(order_repository(settings), notifier())


def dashboard_screen(settings: Settings | None = None) -> DashboardScreen:
    return DashboardScreen(order_repository(settings), notifier())


def reviews_screen(settings: Settings | None = None) -> ReviewsScreen:
    return ReviewsScreen(review_repository(settings), notifier())
