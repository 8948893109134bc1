"""
Repository Pattern - Read-only data access for the word collection.

The collection is loaded once at startup and never written back.
JSON and pipe-separated CSV sources are supported.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from ..config import Config
from ..models import WordEntry
from ..utils.parsing import TextParser

logger = logging.getLogger(__name__)


class VocabularyLoadError(ValueError):
    """Raised when the word collection cannot be read or is malformed."""


class BaseRepository(ABC):
    """
    Abstract base class for word collection sources.

    Subclasses only parse raw records; validation and WordEntry creation
    live here so every backend behaves the same.
    """

    def __init__(self, path: Optional[str] = None):
        """
        Initialize repository.

        Args:
            path: Path to the source file (defaults to Config.VOCAB_FILE)
        """
        self.path = Path(path or Config.VOCAB_FILE)
        self._entries: Optional[Tuple[WordEntry, ...]] = None

    @abstractmethod
    def _read_records(self) -> List[Dict[str, Any]]:
        """Parse the source file into raw dict records."""
        pass

    @property
    def is_loaded(self) -> bool:
        return self._entries is not None

    def load(self) -> Tuple[WordEntry, ...]:
        """
        Load and validate the collection (cached after the first call).

        Raises:
            VocabularyLoadError: Missing file, unreadable content, bad
                records or duplicate ids
        """
        if self._entries is not None:
            return self._entries

        if not self.path.exists():
            raise VocabularyLoadError(f"Vocabulary file not found: {self.path}")

        try:
            records = self._read_records()
        except VocabularyLoadError:
            raise
        except Exception as e:
            raise VocabularyLoadError(f"Could not read {self.path}: {e}") from e

        entries: List[WordEntry] = []
        seen_ids = set()
        for position, record in enumerate(records, start=1):
            try:
                entry = WordEntry.from_dict(record)
            except (KeyError, TypeError, ValueError) as e:
                raise VocabularyLoadError(f"Bad record #{position} in {self.path}: {e}") from e

            if entry.id in seen_ids:
                raise VocabularyLoadError(f"Duplicate id {entry.id} in {self.path}")
            seen_ids.add(entry.id)

            entries.append(WordEntry(
                id=entry.id,
                source_text=TextParser.normalize_unicode(entry.source_text),
                target_text=TextParser.normalize_unicode(entry.target_text),
            ))

        self._entries = tuple(entries)
        logger.info("Loaded %d words from %s", len(self._entries), self.path.name)
        return self._entries

    def get_all(self) -> Tuple[WordEntry, ...]:
        """Get every entry in collection order."""
        return self.load()

    def get_by_id(self, entry_id: int) -> Optional[WordEntry]:
        """Get an entry by its stable id."""
        for entry in self.load():
            if entry.id == entry_id:
                return entry
        return None

    def count(self) -> int:
        """Get total entry count."""
        return len(self.load())


class JSONRepository(BaseRepository):
    """
    JSON source: a list of objects, or {"words": [...]}.

    Each object needs an "id" plus "english"/"indonesian"
    (or "source"/"target") fields.
    """

    def _read_records(self) -> List[Dict[str, Any]]:
        with open(self.path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get("words")
        if not isinstance(data, list):
            raise VocabularyLoadError(f"{self.path} must contain a list of words")
        return data


class CSVRepository(BaseRepository):
    """
    Pipe-separated CSV source with an "id|source|target" style header.

    Uses pandas for parsing.
    """

    def __init__(self, path: Optional[str] = None, sep: str = "|"):
        super().__init__(path)
        self.sep = sep

    def _read_records(self) -> List[Dict[str, Any]]:
        df = pd.read_csv(
            self.path,
            sep=self.sep,
            encoding="utf-8-sig",
            dtype=str,
            keep_default_na=False,
        ).fillna("")
        df.columns = df.columns.str.strip().str.lower()
        return df.to_dict("records")


REPOSITORIES = {
    ".json": JSONRepository,
    ".csv": CSVRepository,
    ".txt": CSVRepository,
}


def create_repository(path: Optional[str] = None) -> BaseRepository:
    """
    Pick a repository implementation from the file suffix.

    Raises:
        VocabularyLoadError: If the suffix is not supported
    """
    file_path = Path(path or Config.VOCAB_FILE)
    repo_cls = REPOSITORIES.get(file_path.suffix.lower())
    if repo_cls is None:
        raise VocabularyLoadError(
            f"Unsupported vocabulary format: {file_path.suffix or '(none)'}. "
            f"Available: {list(REPOSITORIES.keys())}"
        )
    return repo_cls(str(file_path))
