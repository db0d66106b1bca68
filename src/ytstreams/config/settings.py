"""
Application settings and configuration management.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO")

    # HTTP
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
        )
    )
    accept_language: str = Field(default="en-US,en;q=0.9")

    # Streams tab
    initial_page_retries: int = Field(default=5, ge=0)
    # Live/upcoming filters stop at the first past stream. Relies on the
    # upstream listing being grouped as upcoming -> live -> past.
    assume_grouped_status_order: bool = Field(default=True)

    # InnerTube client context sent with continuation requests
    innertube_client_name: str = Field(default="WEB")
    innertube_client_version: str = Field(default="2.20210408.08.00")
    innertube_hl: str = Field(default="ko")
    innertube_gl: str = Field(default="KR")
    innertube_utc_offset_minutes: int = Field(default=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    def innertube_context(self) -> dict[str, Any]:
        """Build the static ``context`` block for InnerTube requests."""
        return {
            "client": {
                "clientName": self.innertube_client_name,
                "clientVersion": self.innertube_client_version,
                "hl": self.innertube_hl,
                "gl": self.innertube_gl,
                "utcOffsetMinutes": self.innertube_utc_offset_minutes,
            }
        }

    model_config = {
        "env_prefix": "YTSTREAMS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()


# Global settings instance
settings = get_settings()
