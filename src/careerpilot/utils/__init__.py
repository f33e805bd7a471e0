"""Utility functions."""

from .console import console
from .llm import parse_llm_response
from .logging import get_logger, setup_logging

__all__ = [
    "console",
    "get_logger",
    "parse_llm_response",
    "setup_logging",
]
