"""
Integration tests for the rendering context - lays out and renders the sample resume.
"""

import re
from datetime import date
from pathlib import Path

import pytest
from loguru import logger

from vitae.contexts.document import Category, FileDocumentSource, ResumeData
from vitae.contexts.rendering import TemplateRegistry, render_print_html, render_timeline_html
from vitae.contexts.timeline import TimelineSession

SAMPLE_RESUME = Path(__file__).resolve().parents[2] / "data" / "resume.json"
NOW = date(2025, 1, 1)


@pytest.fixture
def resume():
    return ResumeData.from_dict(FileDocumentSource(SAMPLE_RESUME).fetch())


def _card_ids(html):
    return re.findall(r'data-id="([^"]+)"', html)


@pytest.mark.integration
def test_timeline_page_has_a_card_per_entry(resume, tmp_path):
    output = tmp_path / "out" / "timeline.html"
    html = render_timeline_html(resume, TimelineSession(), now=NOW, output_path=output)

    assert output.read_text(encoding="utf-8") == html
    assert sorted(_card_ids(html)) == sorted(item.id for item in resume.items)
    assert "Oldest First" in html
    assert "16px/mo" in html
    assert '<option value="2" selected>2x</option>' in html


@pytest.mark.integration
def test_projected_entries_are_marked(resume):
    html = render_timeline_html(resume, TimelineSession(), now=NOW)

    projected = re.findall(r'class="card [^"]* projected" data-id="([^"]+)"', html)
    assert sorted(projected) == ["edu-ms", "proj-planner"]


@pytest.mark.integration
def test_filtered_category_is_not_drawn(resume):
    session = TimelineSession()
    session.toggle_filter(Category.PROJECT)
    html = render_timeline_html(resume, session, now=NOW)

    assert "proj-planner" not in _card_ids(html)
    assert "job-platform" in _card_ids(html)


@pytest.mark.integration
def test_reversed_and_zoomed_header(resume):
    session = TimelineSession()
    session.toggle_reversed()
    session.add_zoom_zone(2024, 2025, 2)
    html = render_timeline_html(resume, session, now=NOW)

    assert "Newest First" in html
    assert "2024-2025 (2x)" in html
    assert 'class="year-marker zoomed"' in html


@pytest.mark.integration
def test_condensed_view_groups_by_category(resume):
    session = TimelineSession()
    session.toggle_condensed()
    html = render_timeline_html(resume, session, now=NOW)

    assert _card_ids(html) == []
    assert html.index("<h2>Employment</h2>") < html.index("<h2>Education</h2>") < html.index("<h2>Projects</h2>")
    assert "Jan 2022 - Present" in html
    assert "May 2023 - Ongoing" in html


@pytest.mark.integration
def test_print_page(resume, tmp_path):
    output = tmp_path / "resume.html"
    html = render_print_html(resume, registry=TemplateRegistry(), output_path=output)

    assert output.exists()
    assert "<h1>Jordan Reyes</h1>" in html
    assert "Jan 2022 – Present" in html
    assert "May 2023 – Present" in html
    assert "Python, Go, PostgreSQL" in html
    assert html.index("<h2>Employment</h2>") < html.index("<h2>Certifications</h2>")


@pytest.mark.integration
def test_empty_resume_renders(tmp_path):
    html = render_timeline_html(ResumeData.empty(), TimelineSession(), now=NOW)

    assert _card_ids(html) == []
    assert "height: 0.0px" in html


@pytest.mark.integration
def test_render_logs_the_template_path(resume):
    messages = []
    logger.add(messages.append, level="DEBUG", format="{message}")
    registry = TemplateRegistry()

    render_print_html(resume, registry=registry)

    assert any(str(registry.get_template_path("resume_print")) in str(m) for m in messages)
