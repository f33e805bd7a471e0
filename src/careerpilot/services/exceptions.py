"""Service layer exceptions.

Centralized exception hierarchy for the service and session layers.
"""

from typing import Literal

FailureKind = Literal["auth", "quota", "network", "provider"]


class ServiceError(Exception):
    """Base exception for service errors."""

    pass


class GenerationFailedError(ServiceError):
    """Raised when the provider call itself fails (transport, auth, quota)."""

    def __init__(self, message: str, kind: FailureKind = "provider") -> None:
        super().__init__(message)
        self.kind = kind


class InvalidResponseError(ServiceError):
    """Raised when the provider answers with text that breaks the plan contract."""

    def __init__(self, message: str, raw_content: str = "") -> None:
        super().__init__(message)
        self.raw_content = raw_content


class SessionBusyError(ServiceError):
    """Raised when a submit arrives while a generation is still in flight."""

    pass
