#!/usr/bin/env python3
"""
Timeline Layout CLI

Lays out a resume document as a timeline and prints the placements or renders
the timeline page to HTML.

Commands:
    layout - Print column placement and pixel geometry for every visible entry
    html   - Render the timeline page (or condensed resume) to an HTML file

Examples:\n

    render_timeline.py layout data/resume.json                          # Default scale

    render_timeline.py layout data/resume.json --scale 8 --reversed     # Compact, newest first

    render_timeline.py layout data/resume.json --zone 2024:2025:2       # Zoom 2024-2025 at 2x

    render_timeline.py html data/resume.json -o outs/timeline.html -c employment -c project
"""

import os
from datetime import date
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.document import Category, FileDocumentSource, InvalidResumeDataError, ResumeData
from vitae.contexts.document.exceptions import DocumentSourceError
from vitae.contexts.rendering import render_timeline_html
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.timeline import TimelineSession
from vitae.contexts.timeline.dates import parse_year_month
from vitae.contexts.timeline.logger import setup_timeline_logger
from vitae.utils.timestamp import now as timestamp_now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Lay out a resume as a visual timeline and render it",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_resume(resume_path: Path) -> ResumeData:
    try:
        return ResumeData.from_dict(FileDocumentSource(resume_path).fetch())
    except (DocumentSourceError, InvalidResumeDataError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _parse_now(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    parsed = parse_year_month(value)
    if parsed is None:
        typer.secho(f"Error: --now must be YYYY-MM, got {value!r}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return parsed


def _build_session(
    scale: Optional[float],
    zones: List[str],
    categories: List[str],
    reversed_axis: bool,
    condensed: bool = False,
) -> TimelineSession:
    try:
        session = TimelineSession(categories=[Category(c) for c in categories] or None)
    except ValueError:
        allowed = ", ".join(c.value for c in Category)
        typer.secho(f"Error: unknown category in {categories} (expected: {allowed})\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if scale is not None:
        session.set_scale(scale)

    for zone in zones:
        try:
            start, end, multiplier = zone.split(":")
            added = session.add_zoom_zone(int(start), int(end), float(multiplier))
        except ValueError:
            added = False
        if not added:
            typer.secho(
                f"Error: invalid zoom zone {zone!r} (expected START:END:MULT with START <= END)\n",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)

    if reversed_axis:
        session.toggle_reversed()
    if condensed:
        session.toggle_condensed()
    return session


ResumeArg = Annotated[Path, typer.Argument(help="Path to resume JSON document")]
ScaleOpt = Annotated[
    Optional[float],
    typer.Option("--scale", "-s", help="Pixels per month (clamped to the configured bounds)"),
]
ZoneOpt = Annotated[
    Optional[List[str]],
    typer.Option("--zone", "-z", help="Zoom zone as START:END:MULT (repeatable, first match wins)"),
]
CategoryOpt = Annotated[
    Optional[List[str]],
    typer.Option("--category", "-c", help="Category to show (repeatable, default: all)"),
]
ReversedOpt = Annotated[bool, typer.Option("--reversed", "-r", help="Newest entries at the top")]
NowOpt = Annotated[
    Optional[str],
    typer.Option("--now", help="Evaluation month for 'present'/'future' as YYYY-MM (default: today)"),
]


@app.command("layout")
def layout_command(
    resume_path: ResumeArg,
    scale: ScaleOpt = None,
    zones: ZoneOpt = None,
    categories: CategoryOpt = None,
    reversed_axis: ReversedOpt = False,
    now: NowOpt = None,
):
    """
    Print the layout of every visible entry.

    Examples:\n

        $ render_timeline.py layout data/resume.json

        $ render_timeline.py layout data/resume.json --now 2025-06 -z 2020:2021:3
    """
    resume = _load_resume(resume_path)
    session = _build_session(scale, zones or [], categories or [], reversed_axis)
    setup_timeline_logger(LOGS_PATH / f"layout_{timestamp_now()}", session.pixels_per_month)
    layout = session.layout(resume.items, now=_parse_now(now))

    typer.secho(f"\nTimeline: {resume_path}", fg=typer.colors.BLUE, bold=True)
    if layout.is_empty:
        typer.echo("  No visible entries (zero-height timeline)\n")
        raise typer.Exit(code=0)

    typer.echo(f"  Span:    {layout.min_date:%Y-%m} to {layout.max_date:%Y-%m} ({layout.total_months} months)")
    typer.echo(f"  Height:  {layout.total_height:.1f}px at {session.pixels_per_month:g}px/mo")
    typer.echo(f"  Columns: {layout.column_count}")
    typer.echo("")

    typer.echo(f"  {'id':<24} {'col':>3} {'local':>7} {'top':>9} {'height':>8} {'left%':>7} {'width%':>7}")
    for entry in session.visible_entries(resume.items):
        item_layout = layout.layouts[entry.id]
        geometry = layout.geometry[entry.id]
        local = f"{item_layout.local_column_offset + 1}/{item_layout.local_column_count}"
        line = (
            f"  {entry.id:<24} {item_layout.column:>3} {local:>7} {geometry.top:>9.1f} "
            f"{geometry.height:>8.1f} {geometry.left:>7.2f} {geometry.width:>7.2f}"
        )
        if geometry.is_projected:
            typer.secho(line + "  (projected)", fg=typer.colors.YELLOW)
        else:
            typer.echo(line)
    typer.echo("")


@app.command("html")
def html_command(
    resume_path: ResumeArg,
    output: Annotated[Path, typer.Option("--output", "-o", help="Where to write the HTML page")],
    scale: ScaleOpt = None,
    zones: ZoneOpt = None,
    categories: CategoryOpt = None,
    reversed_axis: ReversedOpt = False,
    condensed: Annotated[
        bool, typer.Option("--condensed", help="Render the condensed resume instead of the timeline")
    ] = False,
    now: NowOpt = None,
):
    """
    Render the timeline page to HTML.

    Examples:\n

        $ render_timeline.py html data/resume.json -o outs/timeline.html

        $ render_timeline.py html data/resume.json -o outs/condensed.html --condensed
    """
    resume = _load_resume(resume_path)
    session = _build_session(scale, zones or [], categories or [], reversed_axis, condensed)
    setup_rendering_logger(LOGS_PATH / f"render_{timestamp_now()}", "timeline")

    render_timeline_html(resume, session, now=_parse_now(now), output_path=output)
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, bold=True)


if __name__ == "__main__":
    app()
