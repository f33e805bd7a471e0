"""Shared LLM utilities."""

from typing import Any


def parse_llm_response(content: Any) -> str:
    """Parse LLM response content, handling Gemini's structured format.

    Args:
        content: Raw response content from LLM

    Returns:
        Parsed string content
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # Newer Gemini models return [{'type': 'text', 'text': '...'}]
        text_parts = []
        for item in content:
            if isinstance(item, dict) and "text" in item:
                text_parts.append(item["text"])
            elif isinstance(item, str):
                text_parts.append(item)
        return "".join(text_parts)
    return "" if content is None else str(content)
