import re
from dataclasses import dataclass

from pydantic import ValidationError

from wave_scanner.recommendations.schemas import RecommendationSet

_CODE_FENCE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)


@dataclass(frozen=True)
class ParsedRecommendations:
    recommendation_set: RecommendationSet


@dataclass(frozen=True)
class RejectedRecommendations:
    reason: str


ValidationResult = ParsedRecommendations | RejectedRecommendations


def _strip_code_fence(text: str) -> str:
    """Return the body of a markdown code block if the text is wrapped in one."""
    cleaned = text.strip()
    match = _CODE_FENCE.fullmatch(cleaned)
    if match:
        cleaned = match.group(1).strip()
    return cleaned


def validate_recommendations(raw: str | None) -> ValidationResult:
    """Decode provider output into a RecommendationSet.

    Malformed JSON and well-formed JSON of the wrong shape are both rejected.
    Values are not coerced: a quoted number or a boolean price is a type error.
    Text around a code fence is not stripped, so prose-wrapped output fails.
    The whole set is accepted or none of it is.
    """
    if not raw or not raw.strip():
        return RejectedRecommendations(reason="empty content")

    try:
        recommendation_set = RecommendationSet.model_validate_json(
            _strip_code_fence(raw), strict=True
        )
    except ValidationError as exc:
        return RejectedRecommendations(reason=_summarize(exc))

    return ParsedRecommendations(recommendation_set=recommendation_set)


def _summarize(exc: ValidationError) -> str:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid content")
    suffix = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{location}: {message}{suffix}" if location else f"{message}{suffix}"
