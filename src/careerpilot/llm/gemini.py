"""Google Gemini LLM provider.

Implements the LLMProvider interface on top of langchain-google-genai,
using Gemini's native JSON mode with a response schema.
"""

from typing import Any

from langchain_google_genai import ChatGoogleGenerativeAI

from ..config import settings
from ..utils.llm import parse_llm_response
from ..utils.logging import get_logger
from .base import LLMConnectionError, LLMError, LLMProvider, LLMResponse

logger = get_logger(__name__)

# Transport-level failures, classified separately from provider errors
_CONNECTION_ERRORS: tuple[type[BaseException], ...] = (ConnectionError, TimeoutError)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider.

    New models can be added to MODELS dict without code changes.
    The chat client is created on first use so a missing API key only
    surfaces when a generation is attempted.
    """

    # Short aliases accepted in LLM_MODEL
    MODELS: dict[str, str] = {
        "gemini-flash": "gemini-2.5-flash",
        "gemini-pro": "gemini-2.5-pro",
        "gemini-flash-lite": "gemini-2.5-flash-lite",
    }

    DEFAULT_MODEL = "gemini-flash"

    def __init__(
        self,
        model: str | None = None,
        temperature: float = 0.7,
        api_key: str | None = None,
        thinking_budget: int | None = None,
    ) -> None:
        """Initialize Gemini provider.

        Args:
            model: Model name (short key or full name). Defaults to config or DEFAULT_MODEL
            temperature: Sampling temperature (0-1)
            api_key: API key. Defaults to config
            thinking_budget: Thinking token budget. Defaults to config (0 = disabled)
        """
        self._model_key = model or settings.llm_model or self.DEFAULT_MODEL
        self._model_name = self.MODELS.get(self._model_key, self._model_key)
        self._temperature = temperature
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._thinking_budget = (
            thinking_budget if thinking_budget is not None else settings.thinking_budget
        )

    @property
    def model_name(self) -> str:
        """Return the model identifier."""
        return self._model_name

    def _create_client(self, schema: dict[str, Any]) -> ChatGoogleGenerativeAI:
        if not self._api_key:
            raise LLMError("Gemini API key is not configured (set GEMINI_API_KEY)")

        try:
            return ChatGoogleGenerativeAI(
                model=self._model_name,
                google_api_key=self._api_key,
                temperature=self._temperature,
                response_mime_type="application/json",
                response_schema=schema,
                thinking_budget=self._thinking_budget,
                max_retries=0,  # single attempt, retries are the caller's decision
            )
        except Exception as e:
            raise LLMError(f"Gemini client setup failed: {e}") from e

    async def agenerate(self, prompt: str, schema: dict[str, Any]) -> LLMResponse:
        """Send prompt to Gemini with the response constrained to schema.

        Args:
            prompt: The instruction text
            schema: JSON response schema

        Returns:
            LLMResponse with the raw JSON text

        Raises:
            LLMConnectionError: If the transport fails
            LLMError: If the provider rejects the call (auth, quota, bad request)
        """
        client = self._create_client(schema)
        logger.debug("Invoking %s (%d prompt chars)", self._model_name, len(prompt))

        try:
            response = await client.ainvoke(prompt)
        except _CONNECTION_ERRORS as e:
            raise LLMConnectionError(f"Gemini connection failed: {e}") from e
        except Exception as e:
            raise LLMError(f"Gemini invocation failed: {e}") from e

        usage = getattr(response, "usage_metadata", None) or {}
        return LLMResponse(
            content=parse_llm_response(response.content),
            raw_response=response,
            model=self._model_name,
            usage={k: v for k, v in usage.items() if isinstance(v, int)},
        )
