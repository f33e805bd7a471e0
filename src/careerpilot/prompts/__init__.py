"""Prompt and schema construction for career-plan generation."""

from .builders import PlanRequest, PlanRequestBuilder, get_request_builder
from .loader import load_prompt, render_prompt
from .schema import CAREER_PLAN_SCHEMA, SCHEMA_VERSION

__all__ = [
    "CAREER_PLAN_SCHEMA",
    "SCHEMA_VERSION",
    "PlanRequest",
    "PlanRequestBuilder",
    "get_request_builder",
    "load_prompt",
    "render_prompt",
]
