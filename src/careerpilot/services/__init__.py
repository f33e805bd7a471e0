"""Service layer for CareerPilot business logic."""

from .exceptions import (
    GenerationFailedError,
    InvalidResponseError,
    ServiceError,
    SessionBusyError,
)
from .plan_service import PlanGenerationClient, classify_failure

__all__ = [
    "GenerationFailedError",
    "InvalidResponseError",
    "PlanGenerationClient",
    "ServiceError",
    "SessionBusyError",
    "classify_failure",
]
