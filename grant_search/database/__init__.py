"""Remote store access."""

from .client import GrantStore, SupabaseClient

__all__ = ["GrantStore", "SupabaseClient"]
