"""Persists UI preferences to a local JSON file."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..models import SessionPreference

logger = logging.getLogger(__name__)


class PreferenceStore:
    """Holds the session's preferences and rewrites the file on every change.

    The file is read once; after that the in-memory value is authoritative,
    so a failed write never changes what the session sees.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._current: Optional[SessionPreference] = None

    @property
    def current(self) -> SessionPreference:
        if self._current is None:
            self._current = self.load()
        return self._current

    def load(self) -> SessionPreference:
        """Read saved preferences, or defaults if the file is absent or unreadable."""
        if not self.path.exists():
            self._current = SessionPreference()
            return self._current
        try:
            with open(self.path, encoding="utf-8") as f:
                self._current = SessionPreference(**json.load(f))
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as exc:
            logger.warning("Could not read preferences from %s: %s", self.path, exc)
            self._current = SessionPreference()
        return self._current

    def save(self, preference: SessionPreference) -> None:
        self._current = preference
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(preference.model_dump(), f)
        except OSError as exc:
            logger.warning("Could not write preferences to %s: %s", self.path, exc)

    def toggle_dark_mode(self) -> bool:
        """Flip and persist the dark-mode flag. Returns the new value."""
        preference = self.current
        updated = preference.model_copy(update={"dark_mode": not preference.dark_mode})
        self.save(updated)
        logger.debug("Dark mode set to %s", updated.dark_mode)
        return updated.dark_mode
