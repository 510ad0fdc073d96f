"""
Tests for configuration module.
"""

from datetime import time

from roadgraph.core.config import Settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self) -> None:
        """Test that default values are set correctly."""
        settings = Settings()
        assert settings.earth_radius_km == 6373.0
        assert settings.rush_hour_multiplier == 0.5
        assert settings.off_peak_multiplier == 1.5
        assert settings.rush_hour_weekdays_only is True

    def test_rush_hour_windows(self) -> None:
        """Test rush_hour_windows property."""
        settings = Settings()
        assert settings.rush_hour_windows == (
            (time(6, 0), time(9, 0)),
            (time(16, 0), time(19, 0)),
        )

    def test_custom_values(self) -> None:
        """Test setting custom configuration values."""
        settings = Settings(
            morning_rush_start=time(7, 0),
            rush_hour_multiplier=0.75,
            rush_hour_weekdays_only=False,
        )

        assert settings.rush_hour_windows[0] == (time(7, 0), time(9, 0))
        assert settings.rush_hour_multiplier == 0.75
        assert settings.rush_hour_weekdays_only is False

    def test_environment_override(self, monkeypatch) -> None:
        """Test ROADGRAPH_ environment variables are read."""
        monkeypatch.setenv("ROADGRAPH_OFF_PEAK_MULTIPLIER", "2.0")
        monkeypatch.setenv("ROADGRAPH_EVENING_RUSH_END", "20:00")

        settings = Settings()

        assert settings.off_peak_multiplier == 2.0
        assert settings.evening_rush_end == time(20, 0)
