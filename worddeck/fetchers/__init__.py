"""Fetchers module - media generation behind a common async interface."""

from .base import BaseFetcher
from .audio import AudioFetcher

__all__ = [
    'BaseFetcher',
    'AudioFetcher',
]
