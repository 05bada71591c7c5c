"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from rainalert.config.defaults import (
    DEFAULT_EMAIL_FROM,
    DEFAULT_EXCLUDE,
    DEFAULT_LOOKAHEAD_OFFSET_HOURS,
    DEFAULT_RAIN_THRESHOLD,
    DEFAULT_WINDOW_HOURS,
)


class ForecastSourceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_url: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    lat: str = Field(min_length=1)
    lng: str = Field(min_length=1)
    exclude: list[str] = list(DEFAULT_EXCLUDE)


class NotificationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    topic_arn: str = Field(min_length=1)
    email_to: str = Field(min_length=1)
    email_from: str = DEFAULT_EMAIL_FROM


class PolicyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    lookahead_offset_hours: float = Field(default=DEFAULT_LOOKAHEAD_OFFSET_HOURS, ge=0.0)
    window_hours: float = Field(default=DEFAULT_WINDOW_HOURS, gt=0.0)
    rain_threshold: float = Field(default=DEFAULT_RAIN_THRESHOLD, ge=0.0, le=1.0)


class RainAlertConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast: ForecastSourceConfig
    notification: NotificationConfig
    policy: PolicyConfig = PolicyConfig()

    def redacted(self) -> "RainAlertConfig":
        """Copy safe to print: the API key is masked."""
        return self.model_copy(
            update={"forecast": self.forecast.model_copy(update={"api_key": "***"})}
        )
