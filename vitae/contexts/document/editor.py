"""
Resume editing operations.

Every mutating call persists the updated document to the store immediately.
"""

import dataclasses
from typing import Optional

from vitae.contexts.document.categories import Category
from vitae.contexts.document.data_structures import Entry, Profile, ResumeData
from vitae.contexts.document.exceptions import InvalidResumeDataError
from vitae.contexts.document.logger import _log_info
from vitae.contexts.document.store import DocumentSource, KeyValueStore, load_resume, save_resume
from vitae.utils.timestamp import epoch_millis


class ResumeEditor:
    """
    Edits a resume document held in a key-value store.

    Example:
        editor = ResumeEditor.open(JsonFileStore(), document_source_from_location())
        editor.add_skill("Python")
        item = editor.new_item()
        item.title = "Staff Engineer"
        editor.save_item(item)
    """

    def __init__(self, store: KeyValueStore, resume: ResumeData):
        self.store = store
        self.resume = resume

    @classmethod
    def open(cls, store: KeyValueStore, source: Optional[DocumentSource] = None) -> "ResumeEditor":
        return cls(store, load_resume(store, source))

    def _save(self, resume: ResumeData) -> ResumeData:
        save_resume(self.store, resume)
        self.resume = resume
        return resume

    # Profile

    def update_profile(self, field_name: str, value: str) -> ResumeData:
        """
        Set one profile field.

        Raises:
            InvalidResumeDataError: If the field is not a profile field
        """
        if field_name not in Profile.field_names():
            raise InvalidResumeDataError(
                f"Unknown profile field '{field_name}'", field_path=f"profile.{field_name}"
            )
        profile = dataclasses.replace(self.resume.profile, **{field_name: value})
        return self._save(dataclasses.replace(self.resume, profile=profile))

    # Items

    def new_item(self) -> Entry:
        """Blank employment entry with a fresh id; not saved until save_item()."""
        return Entry(id=f"item-{epoch_millis()}", category=Category.EMPLOYMENT)

    def save_item(self, item: Entry) -> bool:
        """
        Add an item, or replace the item with the same id in place.

        Returns:
            True if the item was added, False if an existing one was replaced
        """
        is_new = self.resume.get_item(item.id) is None
        if is_new:
            items = self.resume.items + [item]
            _log_info(f"Added item '{item.id}'")
        else:
            items = [item if existing.id == item.id else existing for existing in self.resume.items]
            _log_info(f"Updated item '{item.id}'")

        self._save(dataclasses.replace(self.resume, items=items))
        return is_new

    def delete_item(self, item_id: str) -> bool:
        """Remove the item with this id. Returns False if there was none."""
        if self.resume.get_item(item_id) is None:
            return False

        items = [item for item in self.resume.items if item.id != item_id]
        self._save(dataclasses.replace(self.resume, items=items))
        _log_info(f"Deleted item '{item_id}'")
        return True

    # Skills

    def add_skill(self, skill: str) -> bool:
        """Append a skill (trimmed). Blank input is ignored and returns False."""
        skill = skill.strip()
        if not skill:
            return False

        self._save(dataclasses.replace(self.resume, skills=self.resume.skills + [skill]))
        return True

    def remove_skill(self, skill: str) -> bool:
        """Remove every occurrence of a skill. Returns False if it wasn't present."""
        if skill not in self.resume.skills:
            return False

        skills = [s for s in self.resume.skills if s != skill]
        self._save(dataclasses.replace(self.resume, skills=skills))
        return True

    # Import / export

    def export_json(self) -> str:
        return self.resume.to_json(indent=2)

    def import_json(self, text: str) -> ResumeData:
        """
        Replace the whole document with imported JSON.

        Raises:
            InvalidResumeDataError: If the text is not a valid resume document;
                the stored document is left untouched
        """
        resume = ResumeData.from_json(text)
        _log_info(f"Imported resume with {len(resume.items)} items")
        return self._save(resume)
