"""Career profile submitted by the user.

The profile is the only input of a generation. Its JSON form (camelCase keys,
absent fields omitted) is shared by the persisted session slot and the share
link payload.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ExperienceLevel = Literal["Entry Level", "Junior", "Mid-Level", "Senior"]

EXPERIENCE_LEVELS: tuple[str, ...] = ("Entry Level", "Junior", "Mid-Level", "Senior")

REQUIRED_FIELDS: tuple[str, ...] = ("education", "current_skills", "target_role", "hours_per_day")


class CareerProfile(BaseModel):
    """Validated career-background input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    education: str = Field(description="Highest education or degree")
    current_skills: str = Field(description="Free-text list of current skills")
    target_role: str = Field(description="Role the user is aiming for")
    hours_per_day: str = Field(description="Free-text daily time budget")
    current_role: str | None = Field(default=None, description="Current job title")
    area_focus: str | None = Field(default=None, description="Specialisation of interest")
    experience_level: ExperienceLevel | None = Field(default=None)

    @field_validator("education", "current_skills", "target_role", "hours_per_day")
    @classmethod
    def validate_required(cls, v: str) -> str:
        """Reject blank required fields, keeping the value verbatim otherwise."""
        if not v.strip():
            raise ValueError("This field is required")
        return v

    @field_validator("current_role", "area_focus", "experience_level", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        """Treat empty optional fields as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_json(self) -> str:
        """Serialize to the compact JSON shape used for storage and sharing."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "CareerProfile":
        """Parse a profile from its JSON form.

        Raises:
            pydantic.ValidationError: If the JSON is malformed or fails validation
        """
        return cls.model_validate_json(data)


# Sample profile used by `careerpilot plan --example`
EXAMPLE_PROFILE = CareerProfile(
    target_role="Senior Frontend Engineer",
    hours_per_day="2 hours",
    current_skills="HTML, CSS, JavaScript, React basics, Git, Tailwind CSS",
    education="B.S. Computer Science",
    current_role="Junior Web Developer",
    area_focus="Performance & Architecture",
    experience_level="Junior",
)
