"""Career plan produced by a successful generation.

Field names are snake_case in Python and camelCase on the wire, matching
the response schema sent to the model.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _PlanModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SkillGap(_PlanModel):
    skill: str
    status: Literal["Have", "Missing"]
    priority: Literal["High", "Medium", "Low"]


class CareerPath(_PlanModel):
    title: str
    type: Literal["Fast-track", "Balanced Learning", "Advanced Specialization"]
    description: str
    duration: str


class RoadmapMonth(_PlanModel):
    month_title: str
    concepts: list[str]
    tools: list[str]
    exercises: list[str]
    project_title: str


class StudyPlanDay(_PlanModel):
    day: str
    activity: str
    duration: str


class PortfolioProject(_PlanModel):
    title: str
    problem_solved: str
    tools_used: list[str]
    expected_output: str
    difficulty: Literal["Beginner", "Intermediate", "Advanced"]


class InterviewQA(_PlanModel):
    question: str
    answer: str  # STAR method


class Resource(_PlanModel):
    title: str
    type: Literal["Course", "Documentation", "Practice"]
    url: str


class CareerPlan(_PlanModel):
    """Structured roadmap returned by the model.

    Every field is required; array fields may be empty. ``clarity_score``
    accepts JSON numbers with an integral value (``72`` or ``72.0``)
    within 0-100; strings and booleans are rejected.
    """

    clarity_score: int = Field(ge=0, le=100)
    clarity_reasoning: str
    skill_gap_analysis: list[SkillGap]
    suggested_paths: list[CareerPath]
    monthly_roadmap: list[RoadmapMonth]
    weekly_schedule: list[StudyPlanDay]
    portfolio_projects: list[PortfolioProject]
    resume_bullets: list[str]
    interview_prep: list[InterviewQA]
    resources: list[Resource]
    mistakes_to_avoid: list[str]
    next_steps: list[str]
    closing_motivation: str

    @field_validator("clarity_score", mode="before")
    @classmethod
    def score_must_be_number(cls, v: object) -> object:
        # bool is an int subclass, and lax mode would coerce "72"
        if isinstance(v, (bool, str)):
            raise ValueError("clarityScore must be a number")
        return v

    def to_json(self) -> str:
        """Serialize to the camelCase JSON shape used for storage."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "CareerPlan":
        """Parse a plan from JSON text.

        Raises:
            pydantic.ValidationError: If the JSON is malformed or violates the contract
        """
        return cls.model_validate_json(data)

    @property
    def missing_skills(self) -> list[SkillGap]:
        """Skill gaps the user still has to close, highest priority first."""
        order = {"High": 0, "Medium": 1, "Low": 2}
        gaps = [gap for gap in self.skill_gap_analysis if gap.status == "Missing"]
        return sorted(gaps, key=lambda gap: order[gap.priority])
