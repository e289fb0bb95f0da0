"""Plain data carried from the review service into the repository."""

from dataclasses import dataclass, field, fields
from typing import Optional


@dataclass(frozen=True)
class RatingDetails:
    """Optional per-aspect scores, each 1-5 when present."""

    taste: Optional[int] = None
    atmosphere: Optional[int] = None
    service: Optional[int] = None
    speed: Optional[int] = None
    cleanliness: Optional[int] = None

    def items(self):
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def as_model_fields(self) -> dict:
        return {f'rating_{name}': value for name, value in self.items()}


@dataclass
class CreateReviewData:
    store_id: str
    user_id: str
    rating: int
    content: Optional[str] = None
    rating_details: Optional[RatingDetails] = None
    menu_ids: list[str] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
