"""Chat model construction for the supported completion providers."""

from enum import StrEnum

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from wave_scanner.config import Settings, settings
from wave_scanner.exceptions import AppError


class LLMProvider(StrEnum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


def _request_options(config: Settings) -> dict[str, object]:
    """Output ceiling and transport options shared by every provider.

    Provider SDK retries are switched off: a request gets exactly one attempt.
    """
    options: dict[str, object] = {
        "max_tokens": config.llm_max_tokens,
        "max_retries": 0,
    }
    if config.llm_timeout is not None:
        options["timeout"] = config.llm_timeout
    return options


class LLMFactory:
    @staticmethod
    def create(
        provider: str | None = None,
        model: str | None = None,
        api_key: str | None = None,
        config: Settings | None = None,
        **kwargs: object,
    ) -> BaseChatModel:
        config = config or settings
        provider = provider or config.llm_provider
        model = model or config.llm_model
        options = {**_request_options(config), **kwargs}

        match provider:
            case LLMProvider.OPENAI:
                api_key = api_key or config.openai_api_key
                if not api_key:
                    raise AppError("OpenAI API key is not configured", code="LLM_CONFIG_ERROR")
                return ChatOpenAI(model=model, api_key=api_key, **options)  # type: ignore[arg-type]

            case LLMProvider.ANTHROPIC:
                api_key = api_key or config.anthropic_api_key
                if not api_key:
                    raise AppError("Anthropic API key is not configured", code="LLM_CONFIG_ERROR")
                return ChatAnthropic(model=model, api_key=api_key, **options)  # type: ignore[arg-type]

            case _:
                raise AppError(f"Unknown LLM provider: '{provider}'", code="LLM_CONFIG_ERROR")
