"""Product review submitted by a customer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from orderdesk.domain.exceptions import ValidationError

MIN_RATING = 1
MAX_RATING = 5

_UPLOAD_MARKER = "/upload/"


@dataclass(frozen=True)
class ReviewAuthor:
    name: str = ""
    email: str = ""


@dataclass
class Review:
    id: str
    date: datetime
    rating: int
    comment: str = ""
    user: ReviewAuthor | None = None
    product_name: str | None = None
    image: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.rating, int) or not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}, "
                f"got {self.rating!r}"
            )

    @property
    def user_name(self) -> str:
        return self.user.name if self.user else ""

    @property
    def user_email(self) -> str:
        return self.user.email if self.user else ""

    @property
    def secure_image(self) -> str | None:
        """Image URL forced onto https."""
        if not self.image:
            return None
        if self.image.startswith("http:"):
            return "https:" + self.image[len("http:"):]
        return self.image

    @property
    def plain_image(self) -> str | None:
        """Image URL with any upload transformation segments stripped.

        ``.../upload/w_300,c_limit/v1/pic.jpg`` becomes ``.../upload/pic.jpg``;
        URLs without an upload segment are returned unchanged.
        """
        if not self.image or _UPLOAD_MARKER not in self.image:
            return self.image
        base, rest = self.image.split(_UPLOAD_MARKER, 1)
        return f"{base}{_UPLOAD_MARKER}{rest.split('/')[-1]}"
