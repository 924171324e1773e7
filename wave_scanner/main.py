from contextlib import asynccontextmanager

from fastapi import FastAPI

from wave_scanner.config import settings
from wave_scanner.exception_handlers import register_exception_handlers
from wave_scanner.logging_config import setup_logging
from wave_scanner.recommendations.client import CompletionClient
from wave_scanner.recommendations.router import router as recommendations_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # A missing provider credential fails startup instead of the first request.
    app.state.completion_client = CompletionClient.from_settings(settings)
    yield


app = FastAPI(
    title="Wave Scanner",
    description="Elliott Wave trade recommendations generated by a language model",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(
    recommendations_router, prefix="/api/v1/recommendations", tags=["recommendations"]
)


@app.get("/api/v1/health")
async def health():
    return {
        "status": "healthy",
        "llm_provider": settings.llm_provider,
        "llm_model": settings.llm_model,
    }
