"""Unit tests for category descriptors."""

import pytest

from vitae.contexts.document.categories import (
    CATEGORY_ORDER,
    Category,
    get_category_descriptor,
    load_category_descriptors,
)


@pytest.mark.unit
def test_every_category_has_a_descriptor():
    descriptors = load_category_descriptors()
    assert set(descriptors) == set(Category)


@pytest.mark.unit
def test_descriptor_lookup_accepts_strings():
    descriptor = get_category_descriptor("employment")
    assert descriptor.label == "Employment"
    assert descriptor.border_color.startswith("border-")
    assert get_category_descriptor(Category.EMPLOYMENT) is descriptor


@pytest.mark.unit
def test_category_order():
    assert [c.value for c in CATEGORY_ORDER] == ["employment", "education", "project", "certification"]


@pytest.mark.unit
def test_unknown_category_in_config(tmp_path):
    (tmp_path / "categories.yaml").write_text(
        "volunteering:\n  label: Volunteering\n  color: bg-red-500\n  border_color: border-red-500\n"
    )
    with pytest.raises(ValueError, match="Unknown category 'volunteering'"):
        load_category_descriptors(tmp_path)


@pytest.mark.unit
def test_missing_category_in_config(tmp_path):
    (tmp_path / "categories.yaml").write_text(
        "employment:\n  label: Jobs\n  color: bg-green-500\n  border_color: border-green-500\n"
    )
    with pytest.raises(ValueError, match="Missing category descriptors"):
        load_category_descriptors(tmp_path)
