"""Shared test fixtures."""

from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from rainalert.config.schema import (
    ForecastSourceConfig,
    NotificationConfig,
    PolicyConfig,
    RainAlertConfig,
)

# Fixed "now" for window tests: 2026-03-02 12:00 UTC.
NOW = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)
NOW_TS = int(NOW.timestamp())
HOUR = 3600


def make_payload(probabilities: list[float], timezone: str = "UTC", start_ts: int = NOW_TS) -> dict:
    """Forecast payload with one hourly point per probability, starting at start_ts."""
    return {
        "latitude": 40.7,
        "longitude": -74.0,
        "timezone": timezone,
        "hourly": {
            "summary": "Rain later",
            "data": [
                {"time": start_ts + i * HOUR, "precipProbability": p}
                for i, p in enumerate(probabilities)
            ],
        },
    }


@pytest.fixture
def env() -> dict[str, str]:
    return {
        "API_URL": "https://forecast.example.com/forecast",
        "API_KEY": "key123",
        "LAT": "40.7",
        "LNG": "-74.0",
        "TOPIC_ARN": "arn:aws:sns:us-east-1:123456789012:rain",
        "EMAIL_TO": "me@example.com",
    }


@pytest.fixture
def config() -> RainAlertConfig:
    return RainAlertConfig(
        forecast=ForecastSourceConfig(
            api_url="https://forecast.example.com/forecast",
            api_key="key123",
            lat="40.7",
            lng="-74.0",
        ),
        notification=NotificationConfig(
            topic_arn="arn:aws:sns:us-east-1:123456789012:rain",
            email_to="me@example.com",
        ),
        policy=PolicyConfig(),
    )


@pytest.fixture
def policy_yaml_path(tmp_path: Path) -> Path:
    """Write a policy override YAML and return its path."""
    data = {"lookahead_offset_hours": 2, "window_hours": 4, "rain_threshold": 0.5}
    path = tmp_path / "policy.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
