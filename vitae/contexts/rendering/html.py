"""
HTML rendering of the timeline page and the printable resume.

Both pages are Jinja2 templates fed with precomputed view models, so the
templates only place values and never compute geometry themselves.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from vitae.contexts.document.categories import CATEGORY_ORDER, get_category_descriptor
from vitae.contexts.document.data_structures import Entry, ResumeData
from vitae.contexts.rendering.formatting import (
    CardVisibility,
    card_visibility,
    format_date_range,
    format_print_date,
    group_by_category,
)
from vitae.contexts.rendering.logger import log_render_result, log_render_start
from vitae.contexts.rendering.registries import TemplateRegistry
from vitae.contexts.timeline.layout_engine import ItemGeometry, TimelineLayout
from vitae.contexts.timeline.session import TimelineSession

TIMELINE_PAGE = "timeline"
PRINT_PAGE = "resume_print"


@dataclass(frozen=True)
class TimelineCard:
    """Everything the template needs to draw one timeline entry."""

    entry: Entry
    geometry: ItemGeometry
    label: str
    border_color: str
    color: str
    date_range: str
    visibility: CardVisibility

    @property
    def highlights(self) -> List[str]:
        return self.entry.highlights[: self.visibility.highlight_count]


def build_timeline_cards(
    entries: List[Entry], layout: TimelineLayout, now: Optional[date] = None
) -> List[TimelineCard]:
    """Pair each laid-out entry with its descriptor, date range and visible details."""
    cards = []
    for entry in entries:
        geometry = layout.geometry.get(entry.id)
        if geometry is None:
            continue
        descriptor = get_category_descriptor(entry.category)
        cards.append(
            TimelineCard(
                entry=entry,
                geometry=geometry,
                label=descriptor.label,
                border_color=descriptor.border_color,
                color=descriptor.color,
                date_range=format_date_range(entry.start_date, entry.end_date, now),
                visibility=card_visibility(geometry.height, len(entry.highlights)),
            )
        )
    return cards


def _filters(session: TimelineSession, resume: ResumeData) -> List[Dict[str, Any]]:
    present = {item.category for item in resume.items}
    return [
        {
            "category": category.value,
            "label": get_category_descriptor(category).label,
            "color": get_category_descriptor(category).color,
            "active": session.is_active(category),
        }
        for category in CATEGORY_ORDER
        if category in present
    ]


def render_timeline_html(
    resume: ResumeData,
    session: TimelineSession,
    now: Optional[date] = None,
    registry: Optional[TemplateRegistry] = None,
    output_path: Optional[Path] = None,
) -> str:
    """
    Render the timeline page (or the condensed resume when the session asks for it).

    Args:
        resume: Resume document
        session: View state (filters, scale, zoom zones, direction)
        now: Evaluation moment for open-ended dates (defaults to today)
        registry: Template registry (defaults to the bundled templates)
        output_path: If given, the HTML is also written there

    Returns:
        Rendered HTML
    """
    registry = registry or TemplateRegistry()
    visible = session.visible_entries(resume.items)
    log_render_start(TIMELINE_PAGE, len(visible), registry.get_template_path(TIMELINE_PAGE))

    layout = session.layout(resume.items, now=now)
    context = {
        "profile": resume.profile,
        "filters": _filters(session, resume),
        "pixels_per_month": session.pixels_per_month,
        "zoom_zones": session.zoom_zones,
        "zone_defaults": {
            "start_year": session.settings.default_zone_years[0],
            "end_year": session.settings.default_zone_years[1],
            "multiplier": session.settings.default_multiplier,
            "choices": session.settings.multiplier_choices,
        },
        "reversed": session.reversed,
        "condensed": session.condensed,
        "layout": layout,
        "cards": build_timeline_cards(visible, layout, now),
        "groups": [
            {
                "label": get_category_descriptor(category).label,
                "items": [
                    {"entry": item, "date_range": format_date_range(item.start_date, item.end_date, now)}
                    for item in items
                ],
            }
            for category, items in group_by_category(visible).items()
        ],
    }

    html = registry.get_template(TIMELINE_PAGE).render(context)
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    log_render_result(TIMELINE_PAGE, html, output_path)
    return html


def render_print_html(
    resume: ResumeData,
    registry: Optional[TemplateRegistry] = None,
    output_path: Optional[Path] = None,
) -> str:
    """
    Render the printable resume: profile header, one section per category, skills.

    Args:
        resume: Resume document
        registry: Template registry (defaults to the bundled templates)
        output_path: If given, the HTML is also written there

    Returns:
        Rendered HTML
    """
    registry = registry or TemplateRegistry()
    log_render_start(PRINT_PAGE, len(resume.items), registry.get_template_path(PRINT_PAGE))

    sections = [
        {
            "label": get_category_descriptor(category).label,
            "items": [
                {
                    "entry": item,
                    "dates": f"{format_print_date(item.start_date)} – {format_print_date(item.end_date)}",
                }
                for item in resume.items_in_category(category)
            ],
        }
        for category in CATEGORY_ORDER
    ]
    context = {
        "profile": resume.profile,
        "sections": [section for section in sections if section["items"]],
        "skills": resume.skills,
    }

    html = registry.get_template(PRINT_PAGE).render(context)
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    log_render_result(PRINT_PAGE, html, output_path)
    return html
