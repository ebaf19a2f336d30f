"""
Entry categories and their display descriptors.

Categories are a closed set. Descriptors (label and color classes) come from
categories.yaml in the config directory and are loaded once per process.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Tuple

from vitae.utils.config import load_yaml_config


class Category(str, Enum):
    EMPLOYMENT = "employment"
    EDUCATION = "education"
    PROJECT = "project"
    CERTIFICATION = "certification"


# Section order for the condensed and printable resume views
CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.EMPLOYMENT,
    Category.EDUCATION,
    Category.PROJECT,
    Category.CERTIFICATION,
)


@dataclass(frozen=True)
class CategoryDescriptor:
    """
    How a category is shown.

    Attributes:
        label: Human-readable (plural) section label
        color: Fill color class for badges and active filters
        border_color: Border color class for timeline cards
    """

    label: str
    color: str
    border_color: str


def load_category_descriptors(config_path: Optional[Path] = None) -> Dict[Category, CategoryDescriptor]:
    """
    Load categories.yaml into a descriptor per category.

    Raises:
        FileNotFoundError: If categories.yaml doesn't exist
        ValueError: If the file names an unknown category or misses a known one
    """
    raw = load_yaml_config("categories.yaml", config_path)

    descriptors = {}
    for name, values in raw.items():
        try:
            category = Category(name)
        except ValueError:
            raise ValueError(f"Unknown category '{name}' in categories.yaml") from None
        descriptors[category] = CategoryDescriptor(
            label=values["label"],
            color=values["color"],
            border_color=values["border_color"],
        )

    missing = [c.value for c in Category if c not in descriptors]
    if missing:
        raise ValueError(f"Missing category descriptors in categories.yaml: {missing}")

    return descriptors


@lru_cache(maxsize=1)
def get_category_descriptors() -> Dict[Category, CategoryDescriptor]:
    return load_category_descriptors()


def get_category_descriptor(category: Category) -> CategoryDescriptor:
    return get_category_descriptors()[Category(category)]
