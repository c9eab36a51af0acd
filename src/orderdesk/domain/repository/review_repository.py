"""Abstract collaborator for the review service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderdesk.domain.model.review import Review


class ReviewRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Review]:
        """Return every review. Raises FetchFailure on error."""

    @abstractmethod
    def delete(self, review_id: str) -> None:
        """Delete a review by ID. Raises MutationFailure when rejected."""
