"""SessionPreference - UI preferences that survive across sessions."""

from pydantic import BaseModel


class SessionPreference(BaseModel):
    dark_mode: bool = False
