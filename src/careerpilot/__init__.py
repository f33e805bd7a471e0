"""CareerPilot - personalised career roadmaps generated with Gemini."""

__version__ = "0.1.0"
