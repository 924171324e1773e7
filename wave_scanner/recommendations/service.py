from datetime import UTC, datetime

import structlog

from wave_scanner.exceptions import AppError, RequestError
from wave_scanner.recommendations.client import CompletionClient
from wave_scanner.recommendations.fallback import fallback_recommendations
from wave_scanner.recommendations.prompts import build_prompt
from wave_scanner.recommendations.schemas import (
    RecommendationOutcome,
    RecommendationRequest,
    RecommendationSource,
)
from wave_scanner.recommendations.validator import (
    ParsedRecommendations,
    RejectedRecommendations,
    validate_recommendations,
)

logger = structlog.get_logger()


class RecommendationService:
    def __init__(self, client: CompletionClient) -> None:
        self._client = client

    async def generate(self, request: RecommendationRequest) -> RecommendationOutcome:
        logger.info(
            "recommendations_generate",
            timeframe=request.timeframe,
            has_criteria=request.criteria is not None,
        )
        prompt = build_prompt(request.timeframe, request.criteria, datetime.now(UTC))

        try:
            raw = await self._client.complete(prompt)
            result = validate_recommendations(raw)
        except AppError:
            raise
        except Exception as exc:
            logger.exception("recommendations_unexpected_error", timeframe=request.timeframe)
            raise RequestError(f"Failed to generate recommendations: {exc}") from exc

        match result:
            case ParsedRecommendations(recommendation_set=recommendation_set):
                logger.info(
                    "recommendations_generated",
                    timeframe=request.timeframe,
                    count=len(recommendation_set.recommendations),
                )
                return RecommendationOutcome(recommendation_set, RecommendationSource.MODEL)
            case RejectedRecommendations(reason=reason):
                logger.warning(
                    "recommendations_parse_error",
                    timeframe=request.timeframe,
                    reason=reason,
                )
                return RecommendationOutcome(
                    fallback_recommendations(request.timeframe),
                    RecommendationSource.FALLBACK,
                )
