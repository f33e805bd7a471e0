"""Plan generation client.

Single responsibility: turn one CareerProfile into one CareerPlan through a
single structured-output call, classifying whatever goes wrong.
"""

from pydantic import ValidationError

from ..llm import LLMConnectionError, LLMError, LLMProvider, get_llm
from ..models.plan import CareerPlan
from ..models.profile import CareerProfile
from ..prompts.builders import PlanRequestBuilder, get_request_builder
from ..utils.logging import get_logger
from .exceptions import FailureKind, GenerationFailedError, InvalidResponseError

logger = get_logger(__name__)

# Error text indicators, checked in order
_FAILURE_INDICATORS: list[tuple[FailureKind, tuple[str, ...]]] = [
    (
        "auth",
        (
            "401",
            "403",
            "api key",
            "api_key",
            "permission_denied",
            "unauthenticated",
            "not configured",
        ),
    ),
    (
        "quota",
        ("429", "quota", "rate limit", "rate_limit", "resource_exhausted", "too many requests"),
    ),
    (
        "network",
        ("connection", "timed out", "timeout", "unreachable", "name resolution", "503"),
    ),
]


def classify_failure(error: BaseException) -> FailureKind:
    """Classify a provider error for diagnostics.

    Args:
        error: Exception raised by the provider layer

    Returns:
        One of "auth", "quota", "network" or "provider"
    """
    if isinstance(error, LLMConnectionError):
        return "network"
    error_str = str(error).lower()
    for kind, indicators in _FAILURE_INDICATORS:
        if any(indicator in error_str for indicator in indicators):
            return kind
    return "provider"


class PlanGenerationClient:
    """Generates career plans with a schema-constrained model call.

    Every call performs a fresh generation; nothing is cached and nothing
    is retried.
    """

    def __init__(
        self,
        provider: LLMProvider | None = None,
        builder: PlanRequestBuilder | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            provider: LLM provider. Defaults to the configured provider.
            builder: Request builder. Defaults to the shared builder.
        """
        self._provider = provider
        self._builder = builder or get_request_builder()

    @property
    def provider(self) -> LLMProvider:
        """The LLM provider, created from configuration on first use."""
        if self._provider is None:
            self._provider = get_llm()
        return self._provider

    async def generate(self, profile: CareerProfile) -> CareerPlan:
        """Generate a career plan for a profile.

        Args:
            profile: Validated career profile

        Returns:
            Parsed and validated CareerPlan

        Raises:
            GenerationFailedError: If the provider call fails
            InvalidResponseError: If the response is empty, not JSON, or
                does not satisfy the plan contract
        """
        request = self._builder.build(profile)

        try:
            response = await self.provider.agenerate(request.instruction, request.schema)
        except LLMError as e:
            kind = classify_failure(e)
            logger.error("Plan generation failed (%s): %s", kind, e)
            raise GenerationFailedError(f"Plan generation failed: {e}", kind=kind) from e

        content = response.content.strip()
        if not content:
            logger.error("Plan generation returned no content (model=%s)", response.model)
            raise InvalidResponseError("No content generated")

        try:
            plan = CareerPlan.from_json(content)
        except ValidationError as e:
            logger.error(
                "Invalid plan response from %s: %d error(s), first: %s",
                response.model,
                e.error_count(),
                e.errors()[0]["msg"] if e.errors() else "unknown",
            )
            raise InvalidResponseError(
                f"Invalid plan response: {e.error_count()} validation error(s)",
                raw_content=content,
            ) from e

        logger.info(
            "Generated plan for '%s' with schema v%s (clarity score %d)",
            profile.target_role,
            request.schema_version,
            plan.clarity_score,
        )
        return plan
