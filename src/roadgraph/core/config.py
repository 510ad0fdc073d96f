"""
Configuration settings for the Roadgraph package.
"""

from datetime import time

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Routing settings with environment variable support.

    Attributes:
        log_level: Default log level used by setup_logging
        earth_radius_km: Radius used by the haversine distance
        morning_rush_start: Start of the morning rush-hour window
        morning_rush_end: End of the morning rush-hour window
        evening_rush_start: Start of the evening rush-hour window
        evening_rush_end: End of the evening rush-hour window
        rush_hour_multiplier: Residential cost factor inside rush hour
        off_peak_multiplier: Residential cost factor outside rush hour
        rush_hour_weekdays_only: Whether rush hour only applies Monday-Friday
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ROADGRAPH_",
    )

    # Logging
    log_level: str = "INFO"

    # Geography
    earth_radius_km: float = 6373.0

    # Rush-hour windows
    morning_rush_start: time = time(6, 0)
    morning_rush_end: time = time(9, 0)
    evening_rush_start: time = time(16, 0)
    evening_rush_end: time = time(19, 0)

    # Residential cost multipliers
    rush_hour_multiplier: float = 0.5
    off_peak_multiplier: float = 1.5
    rush_hour_weekdays_only: bool = True

    @property
    def rush_hour_windows(self) -> tuple[tuple[time, time], ...]:
        """Get the rush-hour windows as (start, end) pairs."""
        return (
            (self.morning_rush_start, self.morning_rush_end),
            (self.evening_rush_start, self.evening_rush_end),
        )


# Global settings instance
settings = Settings()
