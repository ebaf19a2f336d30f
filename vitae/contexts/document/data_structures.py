"""
Resume Document Structure

Defines the structured representation of the resume document:

    {
        "profile": {"name": ..., "title": ..., "email": ..., ...},
        "items": [{"id": ..., "category": ..., "startDate": "2023-01", "endDate": "present", ...}],
        "skills": ["Python", ...]
    }

The timeline context only reads `id`, `start_date` and `end_date` from an
Entry; everything else is display text.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional

from vitae.contexts.document.categories import Category
from vitae.contexts.document.exceptions import InvalidResumeDataError


def _text(data: Dict[str, Any], key: str) -> str:
    # JSON null and missing fields both read as empty text
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass
class Profile:
    """
    Personal details shown in the header of every view.

    Attributes:
        name: Full name
        title: Professional title / headline
        email: Contact email
        location: City, region
        summary: Short professional summary
        phone, website, linkedin, github: Optional contact links
    """

    name: str = ""
    title: str = ""
    email: str = ""
    location: str = ""
    summary: str = ""
    phone: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        if not isinstance(data, dict):
            raise InvalidResumeDataError("Profile must be an object", field_path="profile")
        known = set(cls.field_names())
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        # Optional contact fields are omitted when unset
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass
class Entry:
    """
    One timeline record.

    Attributes:
        id: Unique, stable token
        category: Closed category set (employment, education, project, certification)
        start_date: "YYYY-MM"
        end_date: "YYYY-MM", "present" or "future"
        title, organization, location, description: Display text
        highlights: Bullet points
    """

    id: str
    category: Category
    start_date: str = ""
    end_date: str = ""
    title: str = ""
    organization: str = ""
    location: str = ""
    description: str = ""
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], field_path: str = "item") -> "Entry":
        """
        Build an Entry from its JSON shape.

        Raises:
            InvalidResumeDataError: If id is missing or the category is not a known one
        """
        if not isinstance(data, dict):
            raise InvalidResumeDataError("Item must be an object", field_path=field_path)
        if not data.get("id"):
            raise InvalidResumeDataError("Item is missing an id", field_path=field_path)

        try:
            category = Category(data.get("category"))
        except ValueError:
            allowed = ", ".join(c.value for c in Category)
            raise InvalidResumeDataError(
                f"Unknown category {data.get('category')!r} (expected one of: {allowed})",
                field_path=f"{field_path}.category",
            ) from None

        highlights = data.get("highlights") or []
        if not isinstance(highlights, list):
            raise InvalidResumeDataError(
                "Highlights must be a list", field_path=f"{field_path}.highlights"
            )

        return cls(
            id=str(data["id"]),
            category=category,
            start_date=_text(data, "startDate"),
            end_date=_text(data, "endDate"),
            title=_text(data, "title"),
            organization=_text(data, "organization"),
            location=_text(data, "location"),
            description=_text(data, "description"),
            highlights=[str(h) for h in highlights],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category.value,
            "title": self.title,
            "organization": self.organization,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "description": self.description,
            "highlights": list(self.highlights),
        }


@dataclass
class ResumeData:
    """The complete resume document: profile, timeline items and skills."""

    profile: Profile = field(default_factory=Profile)
    items: List[Entry] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ResumeData":
        """Blank document used when nothing is stored and the source is unreachable."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeData":
        """
        Build a ResumeData from its JSON shape.

        Raises:
            InvalidResumeDataError: If the structure doesn't match the document shape
        """
        if not isinstance(data, dict):
            raise InvalidResumeDataError("Resume document must be a JSON object")

        items = data.get("items", [])
        skills = data.get("skills", [])
        if not isinstance(items, list):
            raise InvalidResumeDataError("Items must be a list", field_path="items")
        if not isinstance(skills, list):
            raise InvalidResumeDataError("Skills must be a list", field_path="skills")

        return cls(
            profile=Profile.from_dict(data.get("profile", {})),
            items=[Entry.from_dict(item, field_path=f"items[{i}]") for i, item in enumerate(items)],
            skills=[str(skill) for skill in skills],
        )

    @classmethod
    def from_json(cls, text: str) -> "ResumeData":
        """
        Parse a JSON string into a ResumeData.

        Raises:
            InvalidResumeDataError: If the text is not valid JSON or has the wrong shape
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidResumeDataError(f"Invalid JSON: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile.to_dict(),
            "items": [item.to_dict() for item in self.items],
            "skills": list(self.skills),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def get_item(self, item_id: str) -> Optional[Entry]:
        return next((item for item in self.items if item.id == item_id), None)

    def items_in_category(self, category: Category) -> List[Entry]:
        return [item for item in self.items if item.category == category]
