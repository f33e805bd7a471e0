"""Response schema constraining the career-plan generation.

The schema is a fixed contract in the OpenAPI subset accepted by Gemini's
``response_schema``. It never depends on the profile being submitted.
Bump SCHEMA_VERSION whenever a field is added, removed or renamed.
"""

from typing import Any

SCHEMA_VERSION = "1.0"

SKILL_STATUSES = ["Have", "Missing"]
PRIORITIES = ["High", "Medium", "Low"]
PATH_TYPES = ["Fast-track", "Balanced Learning", "Advanced Specialization"]
DIFFICULTIES = ["Beginner", "Intermediate", "Advanced"]
RESOURCE_TYPES = ["Course", "Documentation", "Practice"]


def _string(description: str | None = None, enum: list[str] | None = None) -> dict[str, Any]:
    prop: dict[str, Any] = {"type": "string"}
    if description:
        prop["description"] = description
    if enum:
        prop["enum"] = list(enum)
    return prop


def _string_list() -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}}


def _object_list(properties: dict[str, Any], description: str | None = None) -> dict[str, Any]:
    prop: dict[str, Any] = {
        "type": "array",
        "items": {
            "type": "object",
            "properties": properties,
            "required": list(properties),
        },
    }
    if description:
        prop["description"] = description
    return prop


CAREER_PLAN_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "clarityScore": {
            "type": "number",
            "description": "Score from 0 to 100 indicating alignment.",
        },
        "clarityReasoning": _string("Short explanation of the score."),
        "skillGapAnalysis": _object_list(
            {
                "skill": _string(),
                "status": _string(enum=SKILL_STATUSES),
                "priority": _string(enum=PRIORITIES),
            }
        ),
        "suggestedPaths": _object_list(
            {
                "title": _string(),
                "type": _string(enum=PATH_TYPES),
                "description": _string(),
                "duration": _string(),
            }
        ),
        "monthlyRoadmap": _object_list(
            {
                "monthTitle": _string(),
                "concepts": _string_list(),
                "tools": _string_list(),
                "exercises": _string_list(),
                "projectTitle": _string(),
            }
        ),
        "weeklySchedule": _object_list(
            {
                "day": _string(),
                "activity": _string(),
                "duration": _string(),
            },
            description="A typical weekly schedule based on user's available hours.",
        ),
        "portfolioProjects": _object_list(
            {
                "title": _string(),
                "problemSolved": _string(),
                "toolsUsed": _string_list(),
                "expectedOutput": _string(),
                "difficulty": _string(enum=DIFFICULTIES),
            }
        ),
        "resumeBullets": _string_list(),
        "interviewPrep": _object_list(
            {
                "question": _string(),
                "answer": _string("STAR method answer"),
            }
        ),
        "resources": _object_list(
            {
                "title": _string(),
                "type": _string(enum=RESOURCE_TYPES),
                "url": _string("A valid HTTP URL to the resource."),
            }
        ),
        "mistakesToAvoid": _string_list(),
        "nextSteps": _string_list(),
        "closingMotivation": _string(),
    },
    "required": [
        "clarityScore",
        "clarityReasoning",
        "skillGapAnalysis",
        "suggestedPaths",
        "monthlyRoadmap",
        "weeklySchedule",
        "portfolioProjects",
        "resumeBullets",
        "interviewPrep",
        "resources",
        "mistakesToAvoid",
        "nextSteps",
        "closingMotivation",
    ],
}
