"""Recommendation endpoints: preflight, generation and the instrument universe."""

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from wave_scanner.config import settings
from wave_scanner.cors import cors_headers
from wave_scanner.dependencies import RecommendationServiceDep
from wave_scanner.exceptions import BadRequestError, RequestError
from wave_scanner.recommendations.prompts import INSTRUMENT_UNIVERSE
from wave_scanner.recommendations.schemas import RecommendationRequest, Timeframe

router = APIRouter()

SOURCE_HEADER = "X-Recommendation-Source"


async def _read_payload(request: Request) -> dict:
    try:
        payload = await request.json()
    except (ValueError, RecursionError) as exc:
        raise RequestError(f"Malformed request body: {exc}") from exc
    if not isinstance(payload, dict):
        raise RequestError(f"Request body must be a JSON object, got {type(payload).__name__}")
    return payload


def _check_timeframe(timeframe: str | None) -> None:
    allowed = [t.value for t in Timeframe]
    if timeframe not in allowed:
        raise BadRequestError(
            f"Invalid timeframe: {timeframe!r}. Must be one of {', '.join(allowed)}"
        )


@router.options("")
async def recommendations_preflight() -> Response:
    return Response(status_code=200, headers=cors_headers())


@router.post("")
async def generate_recommendations(
    request: Request,
    service: RecommendationServiceDep,
) -> JSONResponse:
    """Generate wave-based trade recommendations for the requested timeframe."""
    payload = await _read_payload(request)
    recommendation_request = RecommendationRequest.from_payload(payload)
    if settings.strict_requests:
        _check_timeframe(recommendation_request.timeframe)

    outcome = await service.generate(recommendation_request)

    headers = cors_headers()
    if settings.expose_source_header:
        headers[SOURCE_HEADER] = outcome.source.value
    return JSONResponse(content=outcome.recommendation_set.to_wire(), headers=headers)


@router.get("/universe")
async def get_universe() -> dict:
    return {
        "timeframes": [t.value for t in Timeframe],
        "markets": INSTRUMENT_UNIVERSE,
    }
