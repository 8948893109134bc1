"""Data models for WordDeck."""

from dataclasses import dataclass
from typing import Any, Dict


# Accepted key spellings for each side of a word pair
SOURCE_KEYS = ("source", "source_text", "english")
TARGET_KEYS = ("target", "target_text", "indonesian")


@dataclass(frozen=True)
class WordEntry:
    """One source/target word pair with a stable identifier."""

    id: int
    source_text: str
    target_text: str

    @property
    def label(self) -> str:
        """Badge text shown on the card, e.g. "#0042"."""
        return f"#{self.id:04d}"

    def accent_index(self, palette_size: int) -> int:
        """Deterministic accent slot for this entry."""
        if palette_size <= 0:
            return 0
        return self.id % palette_size

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "source": self.source_text,
            "target": self.target_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WordEntry":
        """
        Create from a raw record.

        Accepts both the generic {"id", "source", "target"} layout and the
        shipped {"id", "english", "indonesian"} layout.

        Raises:
            KeyError: If the id or either side of the pair is missing
            ValueError: If the id is not an integer
        """
        source = _first_present(data, SOURCE_KEYS)
        target = _first_present(data, TARGET_KEYS)
        return cls(
            id=int(data["id"]),
            source_text=str(source).strip(),
            target_text=str(target).strip(),
        )


def _first_present(data: Dict[str, Any], keys: tuple) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    raise KeyError(f"missing one of {', '.join(keys)}")
