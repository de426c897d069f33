"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from train_ics.domain.models import LinkOptions

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Conversion configuration
    departure_tz_offset: int = Field(
        default=0,
        description="Minutes subtracted from leg start/end times to correct the upstream encoding",
    )
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone applied to calendar events (IANA timezone name, e.g., 'Europe/Berlin')",
    )
    calendar_product_id: str = Field(
        default="-//train-ics//Train-ICS-Converter//EN",
        description="PRODID written into generated calendars",
    )

    # Deep links appended to event descriptions
    include_traewelling_link: bool = Field(
        default=False, description="Append a Träwelling check-in link"
    )
    include_travelynx_link: bool = Field(default=False, description="Append a Travelynx link")
    include_marudor_link: bool = Field(
        default=False,
        description="Append a marudor.de link (long distance, regional and suburban trains only)",
    )

    log_level: str = Field(default="INFO", description="Log level for the CLI")

    # Optional TOML file with [links] and [calendar] tables
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding link and calendar settings",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA timezone name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the logging module's level names."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def load_config_file(self) -> dict[str, Any]:
        """Load the TOML file, updating link and calendar settings from it."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        links = toml_data.get("links", {})
        if not isinstance(links, dict):
            raise ValueError("TOML config 'links' must be a table")
        if "traewelling" in links:
            self.include_traewelling_link = links["traewelling"]
        if "travelynx" in links:
            self.include_travelynx_link = links["travelynx"]
        if "marudor" in links:
            self.include_marudor_link = links["marudor"]

        calendar = toml_data.get("calendar", {})
        if not isinstance(calendar, dict):
            raise ValueError("TOML config 'calendar' must be a table")
        if "timezone" in calendar:
            self.timezone = calendar["timezone"]
        if "departure_tz_offset" in calendar:
            self.departure_tz_offset = calendar["departure_tz_offset"]
        if "product_id" in calendar:
            self.calendar_product_id = calendar["product_id"]

        logger.debug(f"Loaded configuration from {config_path}")
        return toml_data

    def link_options(self) -> LinkOptions:
        """Return the deep link toggles as a LinkOptions value."""
        return LinkOptions(
            include_traewelling=self.include_traewelling_link,
            include_travelynx=self.include_travelynx_link,
            include_marudor=self.include_marudor_link,
        )
