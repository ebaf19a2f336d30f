"""
Resume document persistence.

Two collaborators:

- KeyValueStore: get/set of string values by key. JsonFileStore keeps one JSON
  file per key in a directory; MemoryStore is process-local.
- DocumentSource: where the default resume document is fetched from when the
  store holds no copy. FileDocumentSource reads a path, HttpDocumentSource
  GETs a URL.

load_resume() prefers the stored copy, falls back to the source, and finally
to an empty document.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv

from vitae.contexts.document.data_structures import ResumeData
from vitae.contexts.document.exceptions import DocumentSourceError
from vitae.contexts.document.logger import (
    log_document_loaded,
    log_document_saved,
    log_source_unavailable,
)

load_dotenv()
STORE_PATH = Path(os.getenv("VITAE_STORE_PATH", "outs/store"))
DOCUMENT_SOURCE = os.getenv("VITAE_DOCUMENT_SOURCE", "data/resume.json")

RESUME_STORAGE_KEY = "resumeData"
HTTP_TIMEOUT_S = 10


class KeyValueStore(ABC):
    """String values by key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Directory-backed store: key "resumeData" lives at <root>/resumeData.json.

    Writes go through a temporary file in the same directory and are moved
    into place, so a crash mid-write never leaves a truncated value.
    """

    def __init__(self, root: Path = None):
        self.root = Path(root) if root is not None else STORE_PATH

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.root, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, self.path_for(key))
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


class DocumentSource(ABC):
    """Read-only origin of the default resume document."""

    location: str

    @abstractmethod
    def fetch(self) -> Dict[str, Any]:
        """
        Return the document as parsed JSON.

        Raises:
            DocumentSourceError: If the document cannot be read or parsed
        """


class FileDocumentSource(DocumentSource):
    def __init__(self, path: Path):
        self.path = Path(path)
        self.location = str(self.path)

    def fetch(self) -> Dict[str, Any]:
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentSourceError(
                "Failed to read resume document", location=self.location, original_error=e
            ) from e


class HttpDocumentSource(DocumentSource):
    def __init__(self, url: str, timeout: float = HTTP_TIMEOUT_S):
        self.url = url
        self.location = url
        self.timeout = timeout

    def fetch(self) -> Dict[str, Any]:
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise DocumentSourceError(
                "Failed to fetch resume document", location=self.location, original_error=e
            ) from e


def document_source_from_location(location: str = None) -> DocumentSource:
    """HttpDocumentSource for http(s) URLs, FileDocumentSource for anything else."""
    location = location or DOCUMENT_SOURCE
    if location.startswith(("http://", "https://")):
        return HttpDocumentSource(location)
    return FileDocumentSource(Path(location))


def load_resume(store: KeyValueStore, source: Optional[DocumentSource] = None) -> ResumeData:
    """
    Load the resume document.

    Order: stored copy, then the document source, then an empty document.
    A fetched document is not written back to the store until it is edited.

    Raises:
        InvalidResumeDataError: If the stored copy or fetched document is malformed
    """
    saved = store.get(RESUME_STORAGE_KEY)
    if saved is not None:
        resume = ResumeData.from_json(saved)
        log_document_loaded(f"store key '{RESUME_STORAGE_KEY}'", resume)
        return resume

    if source is not None:
        try:
            data = source.fetch()
        except DocumentSourceError as e:
            log_source_unavailable(source.location, e)
        else:
            resume = ResumeData.from_dict(data)
            log_document_loaded(source.location, resume)
            return resume

    return ResumeData.empty()


def save_resume(store: KeyValueStore, resume: ResumeData) -> None:
    store.set(RESUME_STORAGE_KEY, resume.to_json())
    log_document_saved(RESUME_STORAGE_KEY, resume)
