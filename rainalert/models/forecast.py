"""Hourly forecast data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HourlyDatum:
    time: int  # unix seconds
    precip_probability: float


@dataclass(frozen=True)
class ForecastResponse:
    timezone: str
    hourly: tuple[HourlyDatum, ...]
    raw: dict = field(default_factory=dict, compare=False, repr=False)
