from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MAX_RECOMMENDATIONS = 10
MIN_CONFIDENCE = 70
MAX_CONFIDENCE = 95


class Timeframe(StrEnum):
    M15 = "15m"
    H1 = "1h"
    H4 = "4h"
    D1 = "1d"
    W1 = "1wk"


class WaveType(StrEnum):
    WAVE_3 = "Wave3"
    WAVE_C = "WaveC"
    WAVE_B = "WaveB"


class Priority(StrEnum):
    HIGH = "ALTA"
    MEDIUM = "MEDIA"
    LOW = "BAJA"


class RecommendationSource(StrEnum):
    MODEL = "model"
    FALLBACK = "fallback"


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    moment = moment or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Recommendation(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    symbol: str
    exchange: str
    wave_type: WaveType
    priority: Priority
    entry_price: float
    target_price: float
    stop_loss: float
    confidence: float = Field(ge=MIN_CONFIDENCE, le=MAX_CONFIDENCE)
    timeframe: str | None  # echoed from the model, not checked against the request
    last_update: str
    reasoning: str

    @field_validator("last_update")
    @classmethod
    def _check_iso_timestamp(cls, value: str) -> str:
        # Only checked; the original string is what goes back on the wire.
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return value


class RecommendationSet(BaseModel):
    recommendations: list[Recommendation] = Field(max_length=MAX_RECOMMENDATIONS)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class RecommendationRequest(BaseModel):
    timeframe: str | None = None
    criteria: Any = None

    @classmethod
    def from_payload(cls, payload: dict) -> "RecommendationRequest":
        """Pick the known keys out of an inbound body, leaving absent ones as None."""
        timeframe = payload.get("timeframe")
        return cls(
            timeframe=None if timeframe is None else str(timeframe),
            criteria=payload.get("criteria"),
        )


@dataclass(frozen=True)
class RecommendationOutcome:
    recommendation_set: RecommendationSet
    source: RecommendationSource
