from typing import Annotated

from fastapi import Depends, Request

from wave_scanner.exceptions import AppError
from wave_scanner.recommendations.client import CompletionClient
from wave_scanner.recommendations.service import RecommendationService


def get_completion_client(request: Request) -> CompletionClient:
    client = getattr(request.app.state, "completion_client", None)
    if client is None:
        raise AppError("Completion client is not configured", code="LLM_CONFIG_ERROR")
    return client


CompletionClientDep = Annotated[CompletionClient, Depends(get_completion_client)]


def get_recommendation_service(client: CompletionClientDep) -> RecommendationService:
    return RecommendationService(client)


RecommendationServiceDep = Annotated[RecommendationService, Depends(get_recommendation_service)]
