"""Shared test fixtures for CareerPilot."""

import json
import logging
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from careerpilot.llm import LLMResponse
from careerpilot.models import CareerProfile
from careerpilot.services import PlanGenerationClient
from careerpilot.session import MemoryStorage, SessionController


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI attaches to streams that close after each run."""
    yield
    logging.getLogger("careerpilot").handlers.clear()


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Keep the data directory out of the real home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def sample_profile() -> CareerProfile:
    """Profile with only the required fields."""
    return CareerProfile(
        education="B.S. CS",
        current_skills="HTML,CSS,JS",
        target_role="Frontend Engineer",
        hours_per_day="2 hours",
    )


@pytest.fixture
def full_profile() -> CareerProfile:
    """Profile with every optional field set."""
    return CareerProfile(
        education="M.Sc. Data Science",
        current_skills="Python, SQL, pandas",
        target_role="ML Engineer",
        hours_per_day="3 hours",
        current_role="Data Analyst",
        area_focus="MLOps",
        experience_level="Mid-Level",
    )


@pytest.fixture(
    params=[
        CareerProfile(
            education="Ingeniería en Informática – UBA",
            current_skills="C++, C#, F#, 100% & <html> \"quoted\" 'single'",
            target_role="Staff Engineer / Tech Lead?",
            hours_per_day="1½ h = 90 min + weekends",
        ),
        CareerProfile(
            education="自学",
            current_skills="Python\nSQL\ttabs",
            target_role="数据工程师 🚀",
            hours_per_day="{2} hours #focus",
            current_role="a=b&c=d",
            area_focus="%20 encoded?",
            experience_level="Senior",
        ),
    ],
    ids=["symbols", "unicode"],
)
def special_profile(request: pytest.FixtureRequest) -> CareerProfile:
    """Profiles full of characters that break naive encodings."""
    return request.param


@pytest.fixture
def plan_payload() -> dict[str, Any]:
    """A response payload that satisfies the plan contract."""
    return {
        "clarityScore": 72,
        "clarityReasoning": "Solid fundamentals, framework depth missing.",
        "skillGapAnalysis": [
            {"skill": "HTML", "status": "Have", "priority": "Low"},
            {"skill": "React", "status": "Missing", "priority": "High"},
            {"skill": "Testing", "status": "Missing", "priority": "Medium"},
        ],
        "suggestedPaths": [
            {
                "title": "React Sprint",
                "type": "Fast-track",
                "description": "Focus on React and ship two apps.",
                "duration": "3 months",
            }
        ],
        "monthlyRoadmap": [
            {
                "monthTitle": "Month 1: Modern JavaScript",
                "concepts": ["ES modules", "async/await"],
                "tools": ["Vite"],
                "exercises": ["Rebuild a todo app"],
                "projectTitle": "Weather widget",
            }
        ],
        "weeklySchedule": [
            {"day": "Monday", "activity": "React docs", "duration": "2 hours"},
            {"day": "Saturday", "activity": "Project work", "duration": "1.5 hours"},
        ],
        "portfolioProjects": [
            {
                "title": "Job board",
                "problemSolved": "Filtering listings quickly",
                "toolsUsed": ["React", "TypeScript"],
                "expectedOutput": "Deployed SPA",
                "difficulty": "Intermediate",
            }
        ],
        "resumeBullets": ["Built a React job board used by 200 people"],
        "interviewPrep": [
            {"question": "What is the virtual DOM?", "answer": "Situation... Result."}
        ],
        "resources": [
            {"title": "React docs", "type": "Documentation", "url": "https://react.dev"}
        ],
        "mistakesToAvoid": ["Tutorial hell"],
        "nextSteps": ["Install Node", "Start Month 1"],
        "closingMotivation": "You are closer than you think.",
    }


@pytest.fixture
def plan_json(plan_payload: dict[str, Any]) -> str:
    return json.dumps(plan_payload)


@pytest.fixture
def mock_provider(plan_json: str) -> MagicMock:
    """Mock LLM provider answering with a conforming plan."""
    provider = MagicMock()
    provider.model_name = "gemini-2.5-flash"
    provider.agenerate = AsyncMock(
        return_value=LLMResponse(content=plan_json, model="gemini-2.5-flash")
    )
    return provider


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def session(mock_provider: MagicMock, memory_storage: MemoryStorage) -> SessionController:
    """Session wired to the mock provider and in-memory storage."""
    return SessionController(
        client=PlanGenerationClient(provider=mock_provider),
        storage=memory_storage,
        location="https://careerpilot.example/app",
    )
