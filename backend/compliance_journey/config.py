"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the service runs out-of-the-box on the bundled catalog

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - JOURNEY_ env prefix keeps catalog knobs apart from generic host variables
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JOURNEY_", env_file=".env", case_sensitive=False,
    )

    # Catalog — None means the JSON bundled with the package
    catalog_path: str | None = None

    # ADR: unknown prerequisite ids fail catalog load by default.
    # false = tolerate them; affected tools stay permanently locked.
    strict_prerequisites: bool = True

    @field_validator("catalog_path", mode="before")
    @classmethod
    def blank_path_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Recommendations
    default_recommendation_limit: int = Field(3, ge=1, le=50)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
