"""Configuration management for the grant search interface."""

from pathlib import Path
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings


REQUIRED_VARS = [
    "SUPABASE_URL",
    "SUPABASE_KEY",
]


def _default_preferences_path() -> Path:
    return Path.home() / ".grant_search" / "preferences.json"


class Config(BaseSettings):
    """Application configuration from environment variables."""

    # Required
    supabase_url: str
    supabase_key: str

    # Remote store layout
    grants_table: str = "grants"
    emails_table: str = "emails"
    years_rpc: str = "get_distinct_years"
    programs_rpc: str = "get_distinct_programs"

    # Search and pagination
    result_limit: int = 1000
    page_size: int = 6
    loading_delay_ms: int = 300
    scroll_threshold: int = 200
    discard_stale_responses: bool = True
    suggested_queries: List[str] = Field(
        default_factory=lambda: ["bus", "rail", "ferry", "electric"]
    )

    # Export
    export_dir: Path = Path(".")
    export_prefix: str = "fta-grants"

    # Local state
    preferences_path: Path = Field(default_factory=_default_preferences_path)

    # Optional
    log_level: str = "INFO"
    log_file: Optional[str] = "grant_search.log"

    model_config = {"env_file": ".env", "case_sensitive": False}

    @property
    def loading_delay(self) -> float:
        """Display pacing delay in seconds."""
        return self.loading_delay_ms / 1000


def validate_config(**overrides) -> Config:
    """Load and validate configuration from environment.

    Raises ValueError with descriptive message listing ALL missing
    required variables (not just the first one).
    """
    try:
        return Config(**overrides)  # type: ignore[call-arg]
    except Exception as exc:
        missing = []
        err_str = str(exc)
        for var in REQUIRED_VARS:
            if var.lower() in err_str.lower():
                missing.append(var)
        if missing:
            names = ", ".join(missing)
            raise ValueError(
                f"Missing required environment variable(s): {names}. "
                "Please set them in your .env file or environment."
            ) from exc
        raise


def load_config(**overrides) -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config(**overrides)
