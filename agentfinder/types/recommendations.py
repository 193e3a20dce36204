"""Recommender request model."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class RecommendRequest:
    """Filters for the agent recommender. Unset filters are not sent."""

    locations: list[str] | None = None
    property_types: list[str] | None = None
    price_min: float | None = None
    price_max: float | None = None
    top_k: int | None = None
    min_rating: float | None = None
    min_reviews: int | None = None
    require_phone: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecommendRequest":
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
