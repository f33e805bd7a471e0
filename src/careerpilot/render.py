"""Terminal and Markdown rendering of career plans."""

import re

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models.plan import CareerPlan
from .models.profile import CareerProfile

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")

_BAND_STYLES = {"strong": "green", "fair": "yellow", "low": "red"}


def clarity_band(score: int) -> str:
    """Bucket a clarity score: strong (80+), fair (50+) or low."""
    if score >= 80:
        return "strong"
    if score >= 50:
        return "fair"
    return "low"


def parse_hours(duration: str) -> float:
    """Extract the first number of a free-text duration ("1.5 hours" -> 1.5).

    Durations without any number count as one hour.
    """
    match = _NUMBER_PATTERN.search(duration)
    return float(match.group()) if match else 1.0


def weekly_hours(plan: CareerPlan) -> float:
    """Total study hours per week according to the schedule."""
    return sum(parse_hours(day.duration) for day in plan.weekly_schedule)


def _bullets(items: list[str]) -> list[str]:
    return [f"- {item}" for item in items] or ["- (none)"]


def plan_to_markdown(plan: CareerPlan, profile: CareerProfile | None = None) -> str:
    """Render a plan as a standalone Markdown document."""
    title = f"Career Roadmap: {profile.target_role}" if profile else "Career Roadmap"
    lines = [f"# {title}", ""]

    lines += [
        f"**Clarity score:** {plan.clarity_score}/100 ({clarity_band(plan.clarity_score)})",
        "",
        plan.clarity_reasoning,
        "",
        "## Skill Gap Analysis",
        "",
        "| Skill | Status | Priority |",
        "|---|---|---|",
    ]
    lines += [f"| {g.skill} | {g.status} | {g.priority} |" for g in plan.skill_gap_analysis]

    lines += ["", "## Suggested Paths", ""]
    for path in plan.suggested_paths:
        lines += [f"### {path.title} ({path.type}, {path.duration})", "", path.description, ""]

    lines += ["## Monthly Roadmap", ""]
    for month in plan.monthly_roadmap:
        lines += [
            f"### {month.month_title}",
            "",
            f"- **Concepts:** {', '.join(month.concepts)}",
            f"- **Tools:** {', '.join(month.tools)}",
            f"- **Exercises:** {', '.join(month.exercises)}",
            f"- **Project:** {month.project_title}",
            "",
        ]

    lines += [f"## Weekly Schedule ({weekly_hours(plan):g} h/week)", ""]
    lines += [f"- **{d.day}:** {d.activity} ({d.duration})" for d in plan.weekly_schedule]

    lines += ["", "## Portfolio Projects", ""]
    for project in plan.portfolio_projects:
        lines += [
            f"### {project.title} [{project.difficulty}]",
            "",
            f"- **Problem:** {project.problem_solved}",
            f"- **Tools:** {', '.join(project.tools_used)}",
            f"- **Expected output:** {project.expected_output}",
            "",
        ]

    lines += ["## Resume Bullets", "", *_bullets(plan.resume_bullets), ""]

    lines += ["## Interview Prep", ""]
    for qa in plan.interview_prep:
        lines += [f"**Q: {qa.question}**", "", qa.answer, ""]

    lines += ["## Resources", ""]
    lines += [f"- [{r.title}]({r.url}) ({r.type})" for r in plan.resources]

    lines += ["", "## Mistakes to Avoid", "", *_bullets(plan.mistakes_to_avoid)]
    lines += ["", "## Next Steps", "", *_bullets(plan.next_steps)]
    lines += ["", f"> {plan.closing_motivation}", ""]
    return "\n".join(lines)


def _numbered(items: list[str]) -> Group:
    return Group(*(f"{i}. {escape(item)}" for i, item in enumerate(items, 1)))


def render_plan(plan: CareerPlan, console: Console) -> None:
    """Print the plan as a dashboard of panels and tables."""
    band = clarity_band(plan.clarity_score)
    style = _BAND_STYLES[band]
    console.print(
        Panel(
            f"[bold {style}]{plan.clarity_score}/100[/bold {style}]  "
            f"{escape(plan.clarity_reasoning)}",
            title="Clarity Score",
            border_style=style,
        )
    )

    gaps = Table(title="Skill Gaps", show_lines=False)
    gaps.add_column("Skill")
    gaps.add_column("Status")
    gaps.add_column("Priority")
    for gap in plan.skill_gap_analysis:
        status_style = "green" if gap.status == "Have" else "red"
        status = f"[{status_style}]{gap.status}[/{status_style}]"
        gaps.add_row(escape(gap.skill), status, gap.priority)
    console.print(gaps)

    if plan.missing_skills:
        focus = ", ".join(f"{escape(g.skill)} ({g.priority})" for g in plan.missing_skills)
        console.print(f"[bold]Learn next:[/bold] {focus}")

    paths = Table(title="Suggested Paths")
    paths.add_column("Path", style="bold")
    paths.add_column("Type")
    paths.add_column("Duration")
    paths.add_column("Description")
    for path in plan.suggested_paths:
        paths.add_row(
            escape(path.title), path.type, escape(path.duration), escape(path.description)
        )
    console.print(paths)

    roadmap = Table(title="Monthly Roadmap")
    roadmap.add_column("Month", style="bold cyan")
    roadmap.add_column("Concepts")
    roadmap.add_column("Tools")
    roadmap.add_column("Project")
    for month in plan.monthly_roadmap:
        roadmap.add_row(
            escape(month.month_title),
            escape(", ".join(month.concepts)),
            escape(", ".join(month.tools)),
            escape(month.project_title),
        )
    console.print(roadmap)

    schedule = Table(title=f"Weekly Schedule ({weekly_hours(plan):g} h)")
    schedule.add_column("Day", style="bold")
    schedule.add_column("Activity")
    schedule.add_column("Duration", justify="right")
    for day in plan.weekly_schedule:
        schedule.add_row(escape(day.day), escape(day.activity), escape(day.duration))
    console.print(schedule)

    projects = Table(title="Portfolio Projects")
    projects.add_column("Project", style="bold")
    projects.add_column("Level")
    projects.add_column("Problem")
    projects.add_column("Tools")
    for project in plan.portfolio_projects:
        projects.add_row(
            escape(project.title),
            project.difficulty,
            escape(project.problem_solved),
            escape(", ".join(project.tools_used)),
        )
    console.print(projects)

    if plan.resume_bullets:
        bullets = Group(*(f"• {escape(b)}" for b in plan.resume_bullets))
        console.print(Panel(bullets, title="Resume Bullets", border_style="cyan"))

    for qa in plan.interview_prep:
        console.print(
            Panel(escape(qa.answer), title=f"Q: {escape(qa.question)}", border_style="magenta")
        )

    resources = Table(title="Resources")
    resources.add_column("Resource", style="bold")
    resources.add_column("Type")
    resources.add_column("Link")
    for resource in plan.resources:
        resources.add_row(escape(resource.title), resource.type, escape(resource.url))
    console.print(resources)

    if plan.mistakes_to_avoid:
        console.print(
            Panel(_numbered(plan.mistakes_to_avoid), title="Mistakes to Avoid", border_style="red")
        )
    console.print(Panel(_numbered(plan.next_steps), title="Next Steps", border_style="blue"))
    console.print(f"\n[italic]{escape(plan.closing_motivation)}[/italic]")
