"""12-factor configuration adapter using environment variables."""

import logging
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

REQUIRED_SETTINGS = ("bot_token", "spreadsheet_id", "google_creds_path", "target_channel_ids")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Discord configuration
    bot_token: str = Field(default="", description="Discord bot token")
    target_channel_ids: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Comma-separated IDs of the voice channels to track",
    )

    # Google Sheets configuration
    spreadsheet_id: str = Field(default="", description="ID of the spreadsheet holding the roster")
    sheet_name: str = Field(default="VC_Roster", description="Tab the roster is written to")
    google_creds_path: str = Field(
        default="", description="Path to the Google service account key file"
    )
    sheets_api_timeout: int = Field(
        default=10, description="Timeout for Google Sheets API requests in seconds"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("target_channel_ids", mode="before")
    @classmethod
    def split_channel_ids(cls, v: Any) -> list[str]:
        """Accept a comma-separated string as well as a list; trim and drop empties."""
        if v is None:
            return []
        items = v.split(",") if isinstance(v, str) else v
        return [str(item).strip() for item in items if str(item).strip()]

    @field_validator("sheet_name")
    @classmethod
    def validate_sheet_name(cls, v: str) -> str:
        """Validate sheet name is not blank."""
        if not v.strip():
            raise ValueError("sheet_name must not be empty")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def missing_required_settings(self) -> list[str]:
        """Return the environment variable names of required settings that are unset."""
        return [name.upper() for name in REQUIRED_SETTINGS if not getattr(self, name)]
