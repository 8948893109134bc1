"""Utility functions."""

from pathlib import Path


def ensure_dir(path: str) -> Path:
    """Ensure directory exists and return it as an absolute path."""
    directory = Path(path).resolve()
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def format_count(count: int, noun: str = "card") -> str:
    """Format a count with thousands separators, e.g. "1,204 cards"."""
    suffix = noun if count == 1 else f"{noun}s"
    return f"{count:,} {suffix}"
