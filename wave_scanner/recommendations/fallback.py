from datetime import datetime

from wave_scanner.recommendations.schemas import (
    Priority,
    Recommendation,
    RecommendationSet,
    WaveType,
    iso_timestamp,
)


def fallback_recommendations(
    timeframe: str | None, now: datetime | None = None
) -> RecommendationSet:
    """Fixed single-entry set served when the model output cannot be used."""
    return RecommendationSet(
        recommendations=[
            Recommendation(
                symbol="TSLA",
                exchange="NASDAQ",
                wave_type=WaveType.WAVE_3,
                priority=Priority.HIGH,
                entry_price=185.50,
                target_price=245.00,
                stop_loss=165.00,
                confidence=85,
                timeframe=timeframe,
                last_update=iso_timestamp(now),
                reasoning="Rompimiento confirmado de onda 2, impulso alcista iniciando",
            )
        ]
    )
