"""Cached loader for the .md prompt templates shipped with the package."""

from functools import lru_cache
from pathlib import Path

_MD_DIR = Path(__file__).parent / "md"


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Load a prompt template from the md/ directory.

    Args:
        name: Template file stem (e.g. "career_plan").

    Raises:
        ValueError: If name escapes the template directory.
        FileNotFoundError: If the template does not exist.
    """
    path = (_MD_DIR / f"{name}.md").resolve()
    if not path.is_relative_to(_MD_DIR.resolve()):
        raise ValueError(f"Invalid prompt name: {name}")
    return path.read_text(encoding="utf-8")


def render_prompt(name: str, **values: str) -> str:
    """Load a template and substitute its {placeholders}.

    Values are inserted verbatim; braces inside them are not interpreted.
    """
    return load_prompt(name).format(**values).strip()
