"""
Document Context

Responsibilities:
- Resume document model (profile, timeline items, skills) and its JSON shape
- Category descriptors (labels, colors) loaded from configuration
- Validation of data-entry problems (malformed dates, duplicate ids)
- Persistence to a key-value store with a document-source fallback
- Editing operations (profile, items, skills, import/export)

Owns: The resume document and its storage
Never: Computes timeline geometry
"""

from vitae.contexts.document.categories import (
    CATEGORY_ORDER,
    Category,
    CategoryDescriptor,
    get_category_descriptor,
)
from vitae.contexts.document.data_structures import Entry, Profile, ResumeData
from vitae.contexts.document.editor import ResumeEditor
from vitae.contexts.document.exceptions import DocumentSourceError, InvalidResumeDataError
from vitae.contexts.document.store import (
    FileDocumentSource,
    HttpDocumentSource,
    JsonFileStore,
    MemoryStore,
    document_source_from_location,
    load_resume,
    save_resume,
)
from vitae.contexts.document.validation import ValidationReport, validate_resume

__all__ = [
    # Model
    "Category",
    "CategoryDescriptor",
    "CATEGORY_ORDER",
    "get_category_descriptor",
    "Entry",
    "Profile",
    "ResumeData",
    # Validation
    "validate_resume",
    "ValidationReport",
    # Persistence
    "JsonFileStore",
    "MemoryStore",
    "FileDocumentSource",
    "HttpDocumentSource",
    "document_source_from_location",
    "load_resume",
    "save_resume",
    # Editing
    "ResumeEditor",
    # Errors
    "InvalidResumeDataError",
    "DocumentSourceError",
]
