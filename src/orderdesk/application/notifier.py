"""Port for user-visible notifications (toasts, CLI messages)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def info(self, message: str) -> None: ...

    @abstractmethod
    def success(self, message: str) -> None: ...

    @abstractmethod
    def warning(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...
