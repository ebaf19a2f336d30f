"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from vitae.contexts.rendering.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("timeline")
    assert registry.is_cached("timeline")

    template2 = registry.get_template("timeline")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_page")


@pytest.mark.unit
def test_get_template_path():
    registry = TemplateRegistry()
    path = registry.get_template_path("resume_print")

    assert isinstance(path, Path)
    assert path.name == "resume_print.html.jinja"
    assert path.exists()


@pytest.mark.unit
def test_each_page_is_cached_separately():
    registry = TemplateRegistry()

    registry.get_template("timeline")
    registry.get_template("resume_print")
    assert len(registry._cache) == 2
    assert registry.get_template("timeline") is not registry.get_template("resume_print")


@pytest.mark.unit
def test_missing_template_message_names_the_expected_path(tmp_path):
    registry = TemplateRegistry(tmp_path)

    with pytest.raises(TemplateNotFound, match="absent.html.jinja"):
        registry.get_template("absent")


@pytest.mark.unit
def test_custom_templates_path_autoescapes(tmp_path):
    """Test loading from a custom directory, with HTML escaping on."""
    (tmp_path / "hello.html.jinja").write_text("<p>{{ name }}</p>")
    registry = TemplateRegistry(tmp_path)

    assert registry.get_template("hello").render(name="<b>Ada</b>") == "<p>&lt;b&gt;Ada&lt;/b&gt;</p>"


@pytest.mark.unit
def test_strict_undefined(tmp_path):
    """Test that missing template variables raise instead of rendering blank."""
    (tmp_path / "hello.html.jinja").write_text("<p>{{ name }}</p>")
    registry = TemplateRegistry(tmp_path)

    with pytest.raises(UndefinedError):
        registry.get_template("hello").render()
