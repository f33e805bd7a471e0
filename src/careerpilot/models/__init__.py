"""Data models for profiles and generated plans."""

from .plan import (
    CareerPath,
    CareerPlan,
    InterviewQA,
    PortfolioProject,
    Resource,
    RoadmapMonth,
    SkillGap,
    StudyPlanDay,
)
from .profile import EXAMPLE_PROFILE, EXPERIENCE_LEVELS, REQUIRED_FIELDS, CareerProfile

__all__ = [
    "EXAMPLE_PROFILE",
    "EXPERIENCE_LEVELS",
    "REQUIRED_FIELDS",
    "CareerPath",
    "CareerPlan",
    "CareerProfile",
    "InterviewQA",
    "PortfolioProject",
    "Resource",
    "RoadmapMonth",
    "SkillGap",
    "StudyPlanDay",
]
