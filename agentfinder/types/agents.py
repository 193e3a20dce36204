"""Agent search request model."""

from dataclasses import dataclass, field
from typing import Any

from agentfinder.exceptions import ValidationError

USER_TYPES = ("buyer", "seller")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class AgentSearchRequest:
    """Criteria for searching agents in a city."""

    user_type: str
    state: str
    city: str
    min_price: float | None = None
    max_price: float | None = None
    property_type: str | None = None
    is_urgent: bool = False
    language: str = "English"
    sub_score_preferences: dict[str, float] = field(default_factory=dict)
    skill_preferences: dict[str, float] = field(default_factory=dict)
    additional_specializations: list[str] = field(default_factory=list)
    max_results: int = 20

    def validate(self) -> None:
        """
        Check the request before it is sent.

        Raises:
            ValidationError: If a required field is empty, the user type is
                unknown, a numeric field holds a non-number, or the price
                bounds are inverted
        """
        missing = [name for name in ("user_type", "state", "city") if not getattr(self, name)]
        if missing:
            raise ValidationError(
                "MISSING_FIELDS",
                f"Missing required fields: {', '.join(missing)}",
                400,
            )

        if self.user_type not in USER_TYPES:
            raise ValidationError(
                "INVALID_USER_TYPE",
                f"user_type must be one of {', '.join(USER_TYPES)}, got {self.user_type!r}",
                400,
            )

        for name in ("min_price", "max_price"):
            value = getattr(self, name)
            if value is not None and not _is_number(value):
                raise ValidationError(
                    "INVALID_FIELD_TYPE", f"{name} must be a number, got {value!r}", 400
                )

        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValidationError(
                "INVALID_PRICE_RANGE",
                "min_price must not exceed max_price",
                400,
            )

        if (
            not isinstance(self.max_results, int)
            or isinstance(self.max_results, bool)
            or self.max_results <= 0
        ):
            raise ValidationError(
                "INVALID_MAX_RESULTS", "max_results must be a positive integer", 400
            )

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body expected by the search endpoint."""
        return {
            "user_type": self.user_type,
            "state": self.state,
            "city": self.city,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "property_type": self.property_type,
            "is_urgent": self.is_urgent,
            "language": self.language or "English",
            "sub_score_preferences": dict(self.sub_score_preferences),
            "skill_preferences": dict(self.skill_preferences),
            "additional_specializations": list(self.additional_specializations),
            "max_results": self.max_results or 20,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AgentSearchRequest":
        """Build a request from an inbound JSON body, ignoring unknown keys."""
        return cls(
            user_type=data.get("user_type") or "",
            state=data.get("state") or "",
            city=data.get("city") or "",
            min_price=data.get("min_price"),
            max_price=data.get("max_price"),
            property_type=data.get("property_type"),
            is_urgent=bool(data.get("is_urgent", False)),
            language=data.get("language") or "English",
            sub_score_preferences=data.get("sub_score_preferences") or {},
            skill_preferences=data.get("skill_preferences") or {},
            additional_specializations=data.get("additional_specializations") or [],
            max_results=data.get("max_results") or 20,
        )
