"""
Shared pytest fixtures for the Wave Scanner test suite.

Provides:
  - ``StubChatModel``: stands in for a langchain chat model; returns canned
    content or raises a canned error, recording every call.
  - ``recommendation_entry``: factory for a well-formed wire-format entry.
  - ``as_payload``: wraps entries into provider response text.
  - ``api_client``: a ``TestClient`` whose completion client is backed by a
    ``StubChatModel`` configured per test.
"""

from __future__ import annotations

import json
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from wave_scanner.dependencies import get_completion_client
from wave_scanner.main import app
from wave_scanner.recommendations.client import CompletionClient


class ProviderStatusError(Exception):
    """Mimics provider SDK errors that expose an HTTP status code."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class StubChatModel:
    def __init__(self, content: str = "", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[list] = []

    async def ainvoke(self, messages: list) -> AIMessage:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.content)


@pytest.fixture
def recommendation_entry() -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        entry = {
            "symbol": "NVDA",
            "exchange": "NASDAQ",
            "waveType": "Wave3",
            "priority": "ALTA",
            "entryPrice": 120.5,
            "targetPrice": 150.0,
            "stopLoss": 110.25,
            "confidence": 82,
            "timeframe": "1h",
            "lastUpdate": "2026-10-18T14:30:00.000Z",
            "reasoning": "Ruptura confirmada del máximo de la onda 1",
        }
        entry.update(overrides)
        return entry

    return _make


@pytest.fixture
def stub_llm() -> StubChatModel:
    return StubChatModel()


@pytest.fixture
def api_client(stub_llm: StubChatModel) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_completion_client] = lambda: CompletionClient(stub_llm)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def provider_error() -> Callable[[int], ProviderStatusError]:
    def _make(status_code: int = 503) -> ProviderStatusError:
        return ProviderStatusError(f"provider returned {status_code}", status_code)

    return _make


@pytest.fixture
def as_payload() -> Callable[..., str]:
    """Serialise entries into the provider's expected response text."""

    def _dump(*entries: dict) -> str:
        return json.dumps({"recommendations": list(entries)})

    return _dump
