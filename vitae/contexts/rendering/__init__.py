"""
Rendering Context

Responsibilities:
- Formats date ranges for cards, the condensed resume and the printable resume
- Decides which card details fit at a given card height
- Renders the timeline page and the printable resume to HTML (Jinja2)

Owns: Presentation of laid-out timelines and resume documents
Never: Computes geometry or mutates the resume document
"""

from vitae.contexts.rendering.formatting import (
    card_visibility,
    format_date_range,
    format_month,
    format_print_date,
    group_by_category,
)
from vitae.contexts.rendering.html import render_print_html, render_timeline_html
from vitae.contexts.rendering.registries import TemplateRegistry

__all__ = [
    "format_month",
    "format_date_range",
    "format_print_date",
    "card_visibility",
    "group_by_category",
    "render_timeline_html",
    "render_print_html",
    "TemplateRegistry",
]
