"""Base LLM provider interface.

Defines the abstract interface that all LLM providers must implement,
so the generation client never depends on a concrete SDK.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class LLMResponse:
    """Standardized LLM response.

    Provides a consistent interface regardless of the underlying LLM provider.
    """

    content: str
    raw_response: Any = None
    model: str = ""
    usage: dict[str, int] = field(default_factory=dict)


class LLMError(Exception):
    """Base exception for LLM errors."""

    pass


class LLMConnectionError(LLMError):
    """Raised when connection to LLM fails."""

    pass


class LLMProvider(ABC):
    """Abstract base class for structured-output LLM providers.

    To add a new provider:
    1. Create a new class that extends LLMProvider
    2. Implement agenerate() and model_name property
    3. Register in LLMFactory.PROVIDERS
    """

    @abstractmethod
    def __init__(
        self,
        model: str | None = None,
        temperature: float = 0.7,
        api_key: str | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            model: Model name or identifier
            temperature: Sampling temperature (0-1)
            api_key: API key for the provider
        """
        ...

    @abstractmethod
    async def agenerate(self, prompt: str, schema: dict[str, Any]) -> LLMResponse:
        """Send a single prompt and get a JSON response constrained to schema.

        Args:
            prompt: The instruction text
            schema: Output contract the provider must enforce

        Returns:
            LLMResponse whose content is the raw JSON text

        Raises:
            LLMError: If invocation fails
        """
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model identifier."""
        pass
