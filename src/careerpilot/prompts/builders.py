"""Plan request construction.

Turns a CareerProfile into the instruction text and output schema sent to
the model. Building a request has no side effects.
"""

from dataclasses import dataclass
from typing import Any

from ..models.profile import REQUIRED_FIELDS, CareerProfile
from .loader import render_prompt
from .schema import CAREER_PLAN_SCHEMA, SCHEMA_VERSION

# Substituted for absent optional fields
CURRENT_ROLE_PLACEHOLDER = "N/A"
AREA_FOCUS_PLACEHOLDER = "General"
EXPERIENCE_LEVEL_PLACEHOLDER = "Entry"


@dataclass(frozen=True)
class PlanRequest:
    """Instruction text plus the formal output contract for one generation."""

    instruction: str
    schema: dict[str, Any]
    schema_version: str = SCHEMA_VERSION


class PlanRequestBuilder:
    """Builds generation requests from career profiles."""

    TEMPLATE = "career_plan"

    def build_instruction(self, profile: CareerProfile) -> str:
        """Render the instruction text for a profile.

        Args:
            profile: Validated career profile

        Returns:
            Prompt embedding every profile value verbatim

        Raises:
            ValueError: If a required field is blank
        """
        for name in REQUIRED_FIELDS:
            value = getattr(profile, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Profile field '{name}' is required")

        return render_prompt(
            self.TEMPLATE,
            education=profile.education,
            current_skills=profile.current_skills,
            target_role=profile.target_role,
            hours_per_day=profile.hours_per_day,
            current_role=profile.current_role or CURRENT_ROLE_PLACEHOLDER,
            area_focus=profile.area_focus or AREA_FOCUS_PLACEHOLDER,
            experience_level=profile.experience_level or EXPERIENCE_LEVEL_PLACEHOLDER,
        )

    def build(self, profile: CareerProfile) -> PlanRequest:
        """Build the full generation request for a profile.

        The schema is the same object for every call and is never derived
        from the profile.
        """
        return PlanRequest(
            instruction=self.build_instruction(profile),
            schema=CAREER_PLAN_SCHEMA,
        )


# Module-level singleton for convenience
_builder: PlanRequestBuilder | None = None


def get_request_builder() -> PlanRequestBuilder:
    """Get the plan request builder singleton."""
    global _builder
    if _builder is None:
        _builder = PlanRequestBuilder()
    return _builder
