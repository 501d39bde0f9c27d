"""Textual user interface."""

from .app import GrantSearchApp

__all__ = ["GrantSearchApp"]
