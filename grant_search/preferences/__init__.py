"""Local preference persistence."""

from .store import PreferenceStore

__all__ = ["PreferenceStore"]
