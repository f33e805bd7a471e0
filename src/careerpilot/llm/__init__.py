"""LLM provider abstraction layer.

Provides a unified interface for structured generation, so the plan
client depends on LLMProvider rather than a specific SDK.
"""

from .base import LLMConnectionError, LLMError, LLMProvider, LLMResponse
from .factory import LLMFactory, get_llm
from .gemini import GeminiProvider

__all__ = [
    "GeminiProvider",
    "LLMConnectionError",
    "LLMError",
    "LLMFactory",
    "LLMProvider",
    "LLMResponse",
    "get_llm",
]
