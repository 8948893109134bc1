"""Data models."""

from .word import WordEntry

__all__ = ['WordEntry']
