"""
Response normalization for upstream agent data.

The recommender, search and sentiment services emit placeholder tokens
("nan"), missing fields and metrics on mixed scales. Every function here is
total: it accepts any JSON-representable value and returns a value of the
expected shape, substituting "", 0 or a clamped metric for anything it
cannot use.

Only the fields enumerated per record type are touched. Anything else is
shallow-copied through so identifiers and categories the upstream adds
later are never coerced into the wrong type.
"""

import math
from collections.abc import Callable
from typing import Any

from agentfinder.logging import get_logger

_logger = get_logger("normalize")

Record = dict[str, Any]
Cleaner = Callable[[Any], Any]

_NAN_TOKEN = "nan"

METRIC_FIELDS = frozenset(
    {
        "responsiveness",
        "negotiation",
        "professionalism",
        "market_expertise",
        "q_prior",
        "confidence_score",
        "wilson_lower_bound",
        "recency_score",
        "utility_score",
        "availability_fit",
    }
)

SENTIMENT_LABELS = ("good", "bad", "neutral")
REVIEWER_ROLES = ("BUYER", "SELLER")


# ============================================================================
# Primitive cleaners
# ============================================================================


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value.strip().lower() == _NAN_TOKEN


def clean_string(value: Any) -> str:
    """
    Convert any value to a trimmed string.

    Args:
        value: Raw upstream value

    Returns:
        "" for None, NaN or the "nan" placeholder; the trimmed string form otherwise
    """
    if _is_missing(value):
        return ""
    try:
        return str(value).strip()
    except ValueError:
        # int too large to render under the interpreter's digit limit
        return ""


def clean_number(value: Any) -> int | float:
    """
    Convert any value to a finite number.

    Integral strings become ints ("42" -> 42), other numeric strings become
    floats. Anything that cannot be parsed, or parses to NaN or infinity,
    becomes 0.

    Args:
        value: Raw upstream value

    Returns:
        A finite int or float
    """
    if _is_missing(value):
        return 0

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return value if math.isfinite(value) else 0

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return 0
        return number if math.isfinite(number) else 0

    return 0


def normalize_metric(value: Any) -> float:
    """
    Convert any value to a metric in the closed interval [0, 1].

    Values above 1 are taken to be percentages and divided by 100 before
    clamping, so 85 and 0.85 both normalize to 0.85.

    Args:
        value: Raw upstream value

    Returns:
        A float between 0.0 and 1.0 inclusive
    """
    number = clean_number(value)

    if number > 1:
        # ints beyond float range never reach the division
        rescaled = 1.0 if number >= 100 else number / 100
        _logger.debug("Rescaled percentage metric %r to %s", value, rescaled)
        return float(rescaled)

    return float(min(max(number, 0), 1))


def optional(cleaner: Cleaner) -> Cleaner:
    """
    Wrap a cleaner so missing values stay None instead of taking a default.

    Used for fields the consumer renders as "N/A" when absent.
    """

    def clean(value: Any) -> Any:
        if _is_missing(value):
            return None
        return cleaner(value)

    return clean


def one_of(choices: tuple[str, ...], default: str) -> Cleaner:
    """Build a cleaner that restricts a field to an enumerated set of labels."""

    def clean(value: Any) -> str:
        text = clean_string(value)
        return text if text in choices else default

    return clean


def string_list(value: Any) -> list[str]:
    """Clean a list of strings, dropping blank entries."""
    if not isinstance(value, list):
        return []
    return [text for text in (clean_string(item) for item in value) if text]


def each(sanitizer: Callable[[Any], Record]) -> Callable[[Any], list[Record]]:
    """Lift a record sanitizer to an array field; non-arrays become []."""

    def clean(value: Any) -> list[Record]:
        if not isinstance(value, list):
            return []
        return [sanitizer(item) for item in value]

    return clean


def _apply(raw: Any, fields: dict[str, Cleaner]) -> Record:
    source = raw if isinstance(raw, dict) else {}
    result = dict(source)
    for name, cleaner in fields.items():
        result[name] = cleaner(source.get(name))
    return result


# ============================================================================
# Record sanitizers
# ============================================================================

_PROFILE_FIELDS: dict[str, Cleaner] = {
    "state": clean_string,
    "city": clean_string,
    "rating": clean_number,
    "review_count": clean_number,
    "experience_years": clean_number,
    "specializations": clean_string,
    "languages": clean_string,
    "agent_type": clean_string,
    "office_name": clean_string,
    "phone": clean_string,
    "website": clean_string,
    "bio": clean_string,
}

_METRICS_FIELDS: dict[str, Cleaner] = {
    "responsiveness": normalize_metric,
    "negotiation": normalize_metric,
    "professionalism": normalize_metric,
    "market_expertise": normalize_metric,
    "q_prior": normalize_metric,
    "wilson_lower_bound": normalize_metric,
    "recency_score": normalize_metric,
}

_REVIEW_FIELDS: dict[str, Cleaner] = {
    "review_id": clean_string,
    "advertiser_id": clean_number,
    "review_rating": clean_number,
    "review_comment": clean_string,
    "review_created_date": clean_string,
    "transaction_date": clean_string,
    "reviewer_role": clean_string,
    "reviewer_location": clean_string,
    "sentiment": clean_string,
    "sentiment_confidence": normalize_metric,
}

_REVIEW_COUNT_FIELDS: dict[str, Cleaner] = {
    "total_review_count": clean_number,
    "positive_review_count": clean_number,
    "negative_review_count": clean_number,
    "neutral_review_count": clean_number,
}

_SUB_SCORE_FIELDS: dict[str, Cleaner] = {
    "responsiveness": normalize_metric,
    "negotiation": normalize_metric,
    "professionalism": normalize_metric,
    "market_expertise": normalize_metric,
}

_SENTIMENT_COUNT_FIELDS: dict[str, Cleaner] = {
    "good": clean_number,
    "bad": clean_number,
    "neutral": clean_number,
}

_PREFERENCE_MATCH_FIELDS: dict[str, Cleaner] = {
    "aspect": clean_string,
    "match_quality": clean_string,
    "agent_performance": clean_string,
}

_THEME_STRENGTH_FIELDS: dict[str, Cleaner] = {
    "theme_name": clean_string,
    "strength_score": normalize_metric,
    "examples": string_list,
}

_CONFIDENCE_FIELDS: dict[str, Cleaner] = {
    "confidence_level": clean_string,
    "review_count": clean_number,
    "wilson_lower_bound": normalize_metric,
}


def sanitize_profile(raw: Any) -> Record:
    """Sanitize an agent profile block."""
    return _apply(raw, _PROFILE_FIELDS)


def sanitize_metrics(raw: Any) -> Record:
    """Sanitize an agent metrics block; every field lands in [0, 1]."""
    return _apply(raw, _METRICS_FIELDS)


def sanitize_review(raw: Any) -> Record:
    """Sanitize a single review entry."""
    return _apply(raw, _REVIEW_FIELDS)


def sanitize_review_counts(raw: Any) -> Record:
    """Sanitize the review tally block."""
    return _apply(raw, _REVIEW_COUNT_FIELDS)


def sanitize_review_summary(raw: Any) -> Record:
    """Sanitize a reviews block: counts plus the most recent reviews."""
    return _apply(
        raw,
        {
            "review_counts": sanitize_review_counts,
            "recent_reviews": each(sanitize_review),
        },
    )


def sanitize_recommendation(raw: Any) -> Record:
    """Sanitize a ranked recommendation entry."""
    return _apply(
        raw,
        {
            "agent_id": clean_number,
            "name": clean_string,
            "rank": clean_number,
            "utility_score": normalize_metric,
            "availability_fit": normalize_metric,
            "confidence_score": normalize_metric,
            "profile": sanitize_profile,
            "metrics": sanitize_metrics,
        },
    )


def sanitize_explanation(raw: Any) -> Record:
    """Sanitize the explanation attached to a recommendation."""
    return _apply(
        raw,
        {
            "agent_id": clean_number,
            "agent_name": clean_string,
            "rank": clean_number,
            "preference_matches": each(lambda item: _apply(item, _PREFERENCE_MATCH_FIELDS)),
            "theme_strengths": each(lambda item: _apply(item, _THEME_STRENGTH_FIELDS)),
            "confidence_metrics": lambda item: _apply(item, _CONFIDENCE_FIELDS),
            "why_recommended": clean_string,
        },
    )


def sanitize_classified_review(raw: Any) -> Record:
    """Sanitize a review as labelled by the sentiment service."""
    return _apply(
        raw,
        {
            "review_id": clean_string,
            "review_text": clean_string,
            "review_rating": clean_number,
            "sentiment": one_of(SENTIMENT_LABELS, "neutral"),
            "sentiment_score": normalize_metric,
            "review_date": clean_string,
            "reviewer_role": one_of(REVIEWER_ROLES, "BUYER"),
            "sub_scores": lambda item: _apply(item, _SUB_SCORE_FIELDS),
        },
    )


def sanitize_agent_record(raw: Any) -> Record:
    """
    Sanitize a full agent record as returned by the agent detail endpoint.

    ``profile``, ``metrics`` and ``reviews`` are always present in the
    output, as empty-shaped blocks when the upstream omitted them.
    ``recent_reviews`` is only sanitized when the upstream sent it.
    """
    result = _apply(
        raw,
        {
            "agent_id": clean_number,
            "name": clean_string,
            "utility_score": normalize_metric,
            "availability_fit": normalize_metric,
            "confidence_score": normalize_metric,
            "profile": sanitize_profile,
            "metrics": sanitize_metrics,
            "reviews": sanitize_review_summary,
        },
    )
    if "recent_reviews" in result:
        result["recent_reviews"] = each(sanitize_review)(result["recent_reviews"])
    return result


_SEARCH_RESULT_FIELDS: dict[str, Cleaner] = {
    "advertiser_id": clean_number,
    "full_name": clean_string,
    "state": clean_string,
    "agent_base_city": clean_string,
    "agent_base_zipcode": optional(clean_string),
    "phone_primary": optional(clean_string),
    "office_phone": optional(clean_string),
    "agent_website": optional(clean_string),
    "office_name": optional(clean_string),
    "agent_photo_url": optional(clean_string),
    "experience_years": optional(clean_number),
    "matching_score": clean_number,
    "proximity_score": normalize_metric,
    "distance_km": optional(clean_number),
    "review_count": clean_number,
    "agent_rating": clean_number,
    "positive_review_count": clean_number,
    "negative_review_count": clean_number,
    "recently_sold_count": clean_number,
    "active_listings_count": clean_number,
    "days_since_last_sale": optional(clean_number),
    "property_types": string_list,
    "additional_specializations": string_list,
    "avg_responsiveness": optional(normalize_metric),
    "avg_negotiation": optional(normalize_metric),
    "avg_professionalism": optional(normalize_metric),
    "avg_market_expertise": optional(normalize_metric),
    "buyer_seller_fit": clean_string,
}


def sanitize_search_result(raw: Any) -> Record:
    """Sanitize one row of an agent search response."""
    return _apply(raw, _SEARCH_RESULT_FIELDS)


RECORD_SANITIZERS: dict[str, Callable[[Any], Record]] = {
    "agent": sanitize_agent_record,
    "profile": sanitize_profile,
    "metrics": sanitize_metrics,
    "review": sanitize_review,
    "recommendation": sanitize_recommendation,
    "explanation": sanitize_explanation,
    "classified_review": sanitize_classified_review,
    "search_result": sanitize_search_result,
}


def sanitize_record(raw: Any, kind: str = "agent") -> Record:
    """
    Sanitize a record of the given kind.

    Args:
        raw: Raw upstream record (any JSON value)
        kind: One of the keys of ``RECORD_SANITIZERS``

    Returns:
        Normalized record

    Raises:
        KeyError: If ``kind`` is not a known record type
    """
    return RECORD_SANITIZERS[kind](raw)


# ============================================================================
# Response sanitizers
# ============================================================================


def sanitize_agent_detail(raw: Any) -> Record:
    """
    Sanitize an agent detail response.

    The detail endpoint wraps the record as ``{"agent": {...}}``; a bare
    record is accepted as well and sanitized in place.
    """
    if isinstance(raw, dict) and "agent" in raw:
        return _apply(raw, {"agent": sanitize_agent_record})
    return sanitize_agent_record(raw)


def sanitize_reviews_response(raw: Any) -> Record:
    """Sanitize the response of the agent reviews endpoint."""
    result = sanitize_review_summary(raw)
    result["agent_id"] = clean_number(result.get("agent_id"))
    result["agent_name"] = clean_string(result.get("agent_name"))
    return result


def sanitize_recommend_response(raw: Any) -> Record:
    """Sanitize a recommender response with its explanations."""
    return _apply(
        raw,
        {
            "recommendations": each(sanitize_recommendation),
            "explanations": each(sanitize_explanation),
        },
    )


def sanitize_search_response(raw: Any) -> Record:
    """Sanitize an agent search response."""
    return _apply(
        raw,
        {
            "message": clean_string,
            "total_results": clean_number,
            "recommendations": each(sanitize_search_result),
        },
    )


def sanitize_sentiment_response(raw: Any, agent_id: int | None = None) -> Record:
    """
    Sanitize a sentiment analysis response.

    Args:
        raw: Raw upstream payload
        agent_id: The requested agent id, used when the payload lacks one

    Returns:
        Normalized sentiment analysis
    """
    result = _apply(
        raw,
        {
            "agent_id": clean_number,
            "agent_name": clean_string,
            "total_reviews": clean_number,
            "recent_reviews_count": clean_number,
            "sentiment_summary": lambda item: _apply(item, _SENTIMENT_COUNT_FIELDS),
            "sentiment_distribution": lambda item: _apply(item, _SENTIMENT_COUNT_FIELDS),
            "classified_reviews": each(sanitize_classified_review),
        },
    )
    if not result["agent_id"] and agent_id is not None:
        result["agent_id"] = agent_id
    if not result["agent_name"]:
        result["agent_name"] = "Unknown Agent"
    return result


__all__ = [
    "METRIC_FIELDS",
    "RECORD_SANITIZERS",
    "clean_string",
    "clean_number",
    "normalize_metric",
    "optional",
    "one_of",
    "string_list",
    "each",
    "sanitize_profile",
    "sanitize_metrics",
    "sanitize_review",
    "sanitize_review_counts",
    "sanitize_review_summary",
    "sanitize_recommendation",
    "sanitize_explanation",
    "sanitize_classified_review",
    "sanitize_agent_record",
    "sanitize_search_result",
    "sanitize_record",
    "sanitize_agent_detail",
    "sanitize_reviews_response",
    "sanitize_recommend_response",
    "sanitize_search_response",
    "sanitize_sentiment_response",
]
