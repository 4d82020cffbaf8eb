"""Feed configuration loaded from environment variables.

Every field can also be set in a .env file in the project root. CLI flags
override individual fields at runtime.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

MissingDayPolicy = Literal["empty", "synthetic"]


class FeedConfig(BaseSettings):
    """Feed configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Inputs
    input_dir: str = Field(
        default="data",
        description="Directory holding the four input documents",
    )
    day_config_file: str = Field(default="day_config.json")
    club_schedule_file: str = Field(default="club_schedule.json")
    pack_schedule_file: str = Field(default="pack_schedule.json")
    overrides_file: str = Field(default="overrides.json")

    # Outputs
    output_dir: str = Field(
        default="public",
        description="Directory served to the display widget",
    )
    today_file: str = Field(default="today.json")
    week_file: str = Field(default="week.json")
    weather_file: str = Field(default="weather.json")

    # Builder behaviour
    missing_day_policy: MissingDayPolicy = Field(
        default="empty",
        description="How to build a weekday missing from the recurring rules",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Weather (OpenWeather One Call 3.0)
    openweather_api_key: str = Field(
        default="",
        description="OpenWeather API key for fetch-weather",
    )
    weather_lat: float = Field(default=51.52000833497528)
    weather_lon: float = Field(default=-0.21052808674644183)
    weather_units: str = Field(default="metric")

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def day_config_path(self) -> Path:
        return Path(self.input_dir) / self.day_config_file

    @property
    def club_schedule_path(self) -> Path:
        return Path(self.input_dir) / self.club_schedule_file

    @property
    def pack_schedule_path(self) -> Path:
        return Path(self.input_dir) / self.pack_schedule_file

    @property
    def overrides_path(self) -> Path:
        return Path(self.input_dir) / self.overrides_file


# Singleton pattern
_config: FeedConfig | None = None


def get_config() -> FeedConfig:
    """Get the feed configuration singleton.

    Returns:
        FeedConfig: Feed configuration instance
    """
    global _config
    if _config is None:
        _config = FeedConfig()
    return _config
