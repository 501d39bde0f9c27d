"""Search, filter, page through and export grant records stored in Supabase."""

__version__ = "0.1.0"
