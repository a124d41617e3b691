"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use WEBINCLUDE_ prefix (e.g., WEBINCLUDE_STRICT_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use WEBINCLUDE_ prefix.

    Examples:
        WEBINCLUDE_MAX_DEPTH=5
        WEBINCLUDE_STRICT_MODE=true
        WEBINCLUDE_HEADERS='{"Authorization": "token abc"}'
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBINCLUDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Expansion configuration
    max_depth: int = Field(
        default=10,
        ge=0,
        description="Maximum number of times fetched content is itself re-expanded",
    )

    strict_mode: bool = Field(
        default=False,
        description="Strict mode: a malformed directive URL aborts the whole document",
    )

    # Transport configuration
    request_timeout: Optional[float] = Field(
        default=None,
        description="Seconds to wait on a remote fetch (None blocks until the server answers)",
    )

    headers: Dict[str, Any] = Field(
        default_factory=dict,
        description="Request headers attached to every fetch (non-string values are skipped)",
    )

    # Host configuration
    preprocessor_name: str = Field(
        default="webinclude",
        description="Table name under [preprocessor] in the book configuration",
    )

    config_file: str = Field(
        default="book.toml",
        description="Book configuration file looked up in the input directory",
    )


# Singleton instance - import this in your code
appsettings = AppSettings()
