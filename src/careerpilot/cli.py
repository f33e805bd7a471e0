"""CareerPilot CLI - personalised career roadmaps."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import settings
from .models.profile import EXAMPLE_PROFILE, EXPERIENCE_LEVELS, CareerProfile
from .render import plan_to_markdown, render_plan
from .services.exceptions import SessionBusyError
from .session import SessionController, SessionState
from .utils.console import console
from .utils.logging import setup_logging

# Prompt labels, in the order the form asks for them
_FIELD_LABELS: dict[str, str] = {
    "education": "Education",
    "current_skills": "Current skills",
    "target_role": "Target role",
    "hours_per_day": "Time available per day",
    "current_role": "Current role (optional)",
    "area_focus": "Area of focus (optional)",
    "experience_level": f"Experience level (optional: {', '.join(EXPERIENCE_LEVELS)})",
}


def _print_panel(message: str, style: str = "blue") -> None:
    """Print a styled panel message."""
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


def _build_profile(**fields: str | None) -> CareerProfile:
    """Validate form fields into a profile, exit on validation error.

    Raises:
        typer.Exit: If validation fails (exits with code 1)
    """
    try:
        return CareerProfile(**fields)  # type: ignore[arg-type]
    except PydanticValidationError as e:
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "profile"
            label = _FIELD_LABELS.get(field, field)
            console.print(f"[red]Validation error: {label}: {error['msg']}[/red]")
        raise typer.Exit(code=1)


def _create_session(location: str | None = None) -> SessionController:
    """Create and initialize the session for this invocation."""
    session = SessionController()
    session.initialize(location)
    return session


def _print_profile(profile: CareerProfile) -> None:
    table = Table(show_header=False, box=None)
    table.add_column(style="bold cyan")
    table.add_column()
    for name, label in _FIELD_LABELS.items():
        value = getattr(profile, name)
        table.add_row(label.split(" (")[0], escape(value) if value else "[dim]-[/dim]")
    console.print(table)


def _generate(session: SessionController, profile: CareerProfile) -> None:
    """Submit a profile and render the outcome."""
    try:
        with console.status("[bold blue]Structuring your roadmap...[/bold blue]"):
            asyncio.run(session.submit(profile))
    except SessionBusyError as e:
        console.print(f"[yellow]{e}[/yellow]")
        raise typer.Exit(code=1)

    if session.state is SessionState.FAILED or session.plan is None:
        console.print(f"[red]{session.error}[/red]")
        raise typer.Exit(code=1)

    render_plan(session.plan, console)


app = typer.Typer(
    name="careerpilot",
    help="Career roadmap generator - stop guessing, start growing",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]CareerPilot[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Write debug logs to the data directory"),
    ] = False,
) -> None:
    """CareerPilot - AI-generated career roadmaps."""
    settings.ensure_directories()
    setup_logging(
        level="DEBUG" if debug else "INFO",
        log_file=settings.log_path if debug else None,
    )


@app.command("plan")
def plan_command(
    education: Annotated[str | None, typer.Option("--education", help="Education")] = None,
    skills: Annotated[str | None, typer.Option("--skills", help="Current skills")] = None,
    target_role: Annotated[str | None, typer.Option("--target-role", help="Target role")] = None,
    hours: Annotated[str | None, typer.Option("--hours", help="Time available per day")] = None,
    current_role: Annotated[str | None, typer.Option("--current-role")] = None,
    focus: Annotated[str | None, typer.Option("--focus", help="Area of focus")] = None,
    level: Annotated[
        str | None,
        typer.Option("--level", help=f"Experience level: {', '.join(EXPERIENCE_LEVELS)}"),
    ] = None,
    example: Annotated[
        bool,
        typer.Option("--example", help="Use a sample profile"),
    ] = False,
) -> None:
    """Generate a career roadmap from your profile.

    Missing fields are asked for interactively, pre-filled with the last
    submitted profile.
    """
    session = _create_session()

    if example:
        profile = EXAMPLE_PROFILE
    else:
        previous = session.profile
        given = {
            "education": education,
            "current_skills": skills,
            "target_role": target_role,
            "hours_per_day": hours,
            "current_role": current_role,
            "area_focus": focus,
            "experience_level": level,
        }
        fields: dict[str, str | None] = {}
        for name, value in given.items():
            if value is None:
                default = getattr(previous, name, None) if previous else None
                value = typer.prompt(
                    _FIELD_LABELS[name], default=default or "", show_default=bool(default)
                )
            fields[name] = value
        profile = _build_profile(**fields)

    _print_panel(f"Building your roadmap to {escape(profile.target_role)}")
    _generate(session, profile)


@app.command("show")
def show_command() -> None:
    """Show the last generated roadmap."""
    session = _create_session()
    if session.plan is None:
        console.print("[yellow]No roadmap yet. Run 'careerpilot plan' first.[/yellow]")
        raise typer.Exit(code=1)
    if session.profile:
        _print_panel(f"Roadmap to {escape(session.profile.target_role)}")
    render_plan(session.plan, console)


@app.command("reset")
def reset_command() -> None:
    """Discard the roadmap, keeping your profile for editing."""
    session = _create_session()
    state = session.reset()
    if state is SessionState.EDITING:
        console.print("[green]Roadmap cleared. Your profile was kept.[/green]")
    else:
        console.print("[green]Roadmap cleared.[/green]")


@app.command("share")
def share_command() -> None:
    """Print a link that pre-fills your profile for someone else."""
    session = _create_session()
    link = session.build_share_link()
    if link is None:
        console.print("[yellow]Nothing to share yet. Submit a profile first.[/yellow]")
        raise typer.Exit(code=1)
    console.print(link, soft_wrap=True)


@app.command("open")
def open_command(
    url: Annotated[str, typer.Argument(help="Share link to load")],
    generate: Annotated[
        bool,
        typer.Option("--generate", help="Generate a roadmap for the shared profile"),
    ] = False,
) -> None:
    """Load a profile from a share link."""
    session = _create_session(url)
    if session.location == url or session.profile is None:
        console.print("[red]The link does not contain a valid shared profile.[/red]")
        raise typer.Exit(code=1)

    _print_panel("Shared profile loaded")
    _print_profile(session.profile)

    if generate:
        _generate(session, session.profile)
    else:
        console.print("\nRun with [bold]--generate[/bold] to build a roadmap for this profile.")


@app.command("export")
def export_command(
    output: Annotated[Path, typer.Argument(help="Markdown file to write")],
) -> None:
    """Export the last roadmap as Markdown."""
    session = _create_session()
    if session.plan is None:
        console.print("[yellow]No roadmap to export. Run 'careerpilot plan' first.[/yellow]")
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(plan_to_markdown(session.plan, session.profile), encoding="utf-8")
    console.print(f"[green]✓ Saved:[/green] {output}")


if __name__ == "__main__":
    app()
