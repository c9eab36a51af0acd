"""Review collaborator backed by a local ``reviews.json``."""

from __future__ import annotations

from pathlib import Path

from orderdesk.domain.exceptions import DomainException, FetchFailure, MutationFailure
from orderdesk.domain.model.review import Review
from orderdesk.domain.repository.review_repository import ReviewRepository
from orderdesk.infrastructure.persistence.json_file import JsonDocumentFile
from orderdesk.infrastructure.record_mapper import review_from_raw, review_to_raw


class JsonReviewRepository(ReviewRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path)

    def list_all(self) -> list[Review]:
        try:
            return [review_from_raw(raw) for raw in self._file.read()]
        except (OSError, ValueError, DomainException) as exc:
            raise FetchFailure(f"Failed to read reviews from {self._file.path}: {exc}") from exc

    def delete(self, review_id: str) -> None:
        try:
            documents = self._file.read()
        except (OSError, ValueError) as exc:
            raise MutationFailure(f"Failed to read reviews from {self._file.path}: {exc}") from exc

        remaining = [raw for raw in documents if str(raw.get("_id")) != review_id]
        if len(remaining) == len(documents):
            raise MutationFailure(f"Review '{review_id}' not found")
        self._file.write(remaining)

    def add(self, review: Review) -> None:
        self._file.append(review_to_raw(review))
