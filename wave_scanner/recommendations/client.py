import structlog
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from wave_scanner.config import Settings
from wave_scanner.exceptions import TransportError
from wave_scanner.llm.factory import LLMFactory, LLMProvider
from wave_scanner.recommendations.prompts import SYSTEM_PROMPT

logger = structlog.get_logger()


class CompletionClient:
    """Single-shot access to the completion provider.

    Failures are reported as ``TransportError`` and never retried; choosing a
    substitute answer is left to the caller.
    """

    def __init__(self, llm: BaseChatModel, system_prompt: str = SYSTEM_PROMPT) -> None:
        self._llm = llm
        self._system_prompt = system_prompt

    @classmethod
    def from_settings(cls, config: Settings) -> "CompletionClient":
        if config.llm_provider == LLMProvider.ANTHROPIC:
            api_key = config.anthropic_api_key
        else:
            api_key = config.openai_api_key
        return cls(LLMFactory.create(api_key=api_key, config=config))

    async def complete(self, prompt: str) -> str:
        messages = [
            SystemMessage(content=self._system_prompt),
            HumanMessage(content=prompt),
        ]
        try:
            response = await self._llm.ainvoke(messages)
        except Exception as exc:
            status_code = getattr(exc, "status_code", None)
            logger.error(
                "completion_provider_error",
                status_code=status_code,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise TransportError(
                f"Completion provider request failed: {exc}", status_code=status_code
            ) from exc

        content = response.content if isinstance(response.content, str) else str(response.content)
        logger.info("completion_received", length=len(content))
        return content
