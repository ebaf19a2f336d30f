#!/usr/bin/env python3
"""
Resume Document CLI

Edits the resume document kept in the JSON-file store. When the store holds no
copy yet, the document is loaded from VITAE_DOCUMENT_SOURCE (a path or URL).

Commands:
    show         - Summarize the stored resume
    validate     - Report data-entry problems (malformed dates, duplicate ids)
    set-profile  - Set one profile field
    add-skill    - Append a skill
    remove-skill - Remove a skill
    delete-item  - Delete a timeline item by id
    import       - Replace the stored resume with a JSON file
    export       - Write the stored resume to a JSON file
    print        - Render the printable resume to HTML

Examples:\n

    manage_resume.py show

    manage_resume.py add-skill "Distributed Systems"

    manage_resume.py import data/resume.json

    manage_resume.py print -o outs/resume.html
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.document import (
    CATEGORY_ORDER,
    InvalidResumeDataError,
    JsonFileStore,
    ResumeEditor,
    document_source_from_location,
    get_category_descriptor,
    validate_resume,
)
from vitae.contexts.document.logger import log_validation_result, setup_document_logger
from vitae.contexts.rendering import format_date_range, render_print_html
from vitae.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Edit, validate, import/export and print the stored resume document",
    add_completion=False,
    invoke_without_command=True,
)

StoreOpt = Annotated[
    Optional[Path],
    typer.Option("--store", help="Store directory (default: VITAE_STORE_PATH)"),
]
SourceOpt = Annotated[
    Optional[str],
    typer.Option("--source", help="Fallback document path or URL (default: VITAE_DOCUMENT_SOURCE)"),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _open_editor(store_path: Optional[Path], source: Optional[str]) -> ResumeEditor:
    store = JsonFileStore(store_path)
    setup_document_logger(LOGS_PATH / f"document_{now()}", store.root)
    try:
        return ResumeEditor.open(store, document_source_from_location(source))
    except InvalidResumeDataError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("show")
def show_command(store: StoreOpt = None, source: SourceOpt = None):
    """Summarize the stored resume: profile, items per category, skills."""
    resume = _open_editor(store, source).resume

    typer.secho(f"\n{resume.profile.name or '(no name)'}", fg=typer.colors.BLUE, bold=True)
    if resume.profile.title:
        typer.echo(f"  {resume.profile.title}")
    typer.echo("")

    for category in CATEGORY_ORDER:
        items = resume.items_in_category(category)
        if not items:
            continue
        typer.secho(f"{get_category_descriptor(category).label} ({len(items)})", bold=True)
        for item in items:
            typer.echo(f"  {item.id:<24} {item.title} ({format_date_range(item.start_date, item.end_date)})")

    typer.echo(f"\nSkills: {', '.join(resume.skills) if resume.skills else '(none)'}\n")


@app.command("validate")
def validate_command(store: StoreOpt = None, source: SourceOpt = None):
    """Report data-entry problems the timeline would silently clamp."""
    report = validate_resume(_open_editor(store, source).resume)
    log_validation_result(report)

    if report.is_valid:
        typer.secho("\n✓ Resume is valid\n", fg=typer.colors.GREEN, bold=True)
        raise typer.Exit(code=0)

    typer.secho(f"\n✗ {len(report.issues)} issue(s)", fg=typer.colors.RED, bold=True)
    for issue in report.issues:
        typer.secho(f"  - {issue}", fg=typer.colors.RED)
    typer.echo("")
    raise typer.Exit(code=1)


@app.command("set-profile")
def set_profile_command(
    field_name: Annotated[str, typer.Argument(help="Profile field (e.g., name, title, email)")],
    value: Annotated[str, typer.Argument(help="New value")],
    store: StoreOpt = None,
    source: SourceOpt = None,
):
    """Set one profile field."""
    editor = _open_editor(store, source)
    try:
        editor.update_profile(field_name, value)
    except InvalidResumeDataError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ profile.{field_name} updated", fg=typer.colors.GREEN)


@app.command("add-skill")
def add_skill_command(
    skill: Annotated[str, typer.Argument(help="Skill to add")],
    store: StoreOpt = None,
    source: SourceOpt = None,
):
    """Append a skill (surrounding whitespace is trimmed)."""
    if not _open_editor(store, source).add_skill(skill):
        typer.secho("Error: skill is blank\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ Added skill '{skill.strip()}'", fg=typer.colors.GREEN)


@app.command("remove-skill")
def remove_skill_command(
    skill: Annotated[str, typer.Argument(help="Skill to remove")],
    store: StoreOpt = None,
    source: SourceOpt = None,
):
    """Remove every occurrence of a skill."""
    if not _open_editor(store, source).remove_skill(skill):
        typer.secho(f"Error: skill '{skill}' not found\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"✓ Removed skill '{skill}'", fg=typer.colors.GREEN)


@app.command("delete-item")
def delete_item_command(
    item_id: Annotated[str, typer.Argument(help="Id of the item to delete")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")] = False,
    store: StoreOpt = None,
    source: SourceOpt = None,
):
    """Delete a timeline item (asks for confirmation unless --yes)."""
    editor = _open_editor(store, source)
    if editor.resume.get_item(item_id) is None:
        typer.secho(f"Error: item '{item_id}' not found\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not yes and not typer.confirm(f"Are you sure you want to delete '{item_id}'?"):
        typer.echo("Aborted.")
        raise typer.Exit(code=0)

    editor.delete_item(item_id)
    typer.secho(f"✓ Deleted item '{item_id}'", fg=typer.colors.GREEN)


@app.command("import")
def import_command(
    json_path: Annotated[Path, typer.Argument(help="Resume JSON file to import")],
    store: StoreOpt = None,
    source: SourceOpt = None,
):
    """Replace the stored resume with the contents of a JSON file."""
    editor = _open_editor(store, source)
    try:
        resume = editor.import_json(json_path.read_text(encoding="utf-8"))
    except OSError as e:
        typer.secho(f"Error: cannot read {json_path}: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    except InvalidResumeDataError as e:
        typer.secho(f"Invalid JSON file: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Imported {len(resume.items)} items from {json_path}", fg=typer.colors.GREEN)


@app.command("export")
def export_command(
    output: Annotated[Path, typer.Option("--output", "-o", help="Destination JSON file")] = Path("resume.json"),
    store: StoreOpt = None,
    source: SourceOpt = None,
):
    """Write the stored resume to a JSON file (2-space indent)."""
    text = _open_editor(store, source).export_json()
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    typer.secho(f"✓ Exported to {output}", fg=typer.colors.GREEN)


@app.command("print")
def print_command(
    output: Annotated[Path, typer.Option("--output", "-o", help="Destination HTML file")] = Path("resume.html"),
    store: StoreOpt = None,
    source: SourceOpt = None,
):
    """Render the printable resume to HTML."""
    render_print_html(_open_editor(store, source).resume, output_path=output)
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
