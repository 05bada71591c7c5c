"""Forecast API client: one GET for hourly precipitation data."""

import json
import logging

import httpx

from rainalert.config.defaults import DEFAULT_EXCLUDE
from rainalert.config.schema import ForecastSourceConfig
from rainalert.models.forecast import ForecastResponse, HourlyDatum

logger = logging.getLogger(__name__)


class ForecastClientError(Exception):
    """Raised when the forecast request fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ForecastDecodeError(ForecastClientError):
    """Raised when the response body can't be decoded. Carries the raw body."""

    def __init__(self, message: str, body: str, status_code: int | None = None):
        super().__init__(message, status_code)
        self.body = body


class ForecastClient:
    """Fetches the hourly forecast for a single location.

    The request is sent once, with no retry and httpx's default timeout.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        lat: str,
        lng: str,
        exclude: tuple[str, ...] | list[str] = DEFAULT_EXCLUDE,
    ):
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.lat = lat
        self.lng = lng
        self.exclude = tuple(exclude)

    @classmethod
    def from_config(cls, config: ForecastSourceConfig) -> "ForecastClient":
        return cls(
            api_url=config.api_url,
            api_key=config.api_key,
            lat=config.lat,
            lng=config.lng,
            exclude=config.exclude,
        )

    @property
    def url(self) -> str:
        return f"{self.api_url}/{self.api_key}/{self.lat},{self.lng}"

    def fetch_forecast(self) -> ForecastResponse:
        params = {"exclude": ",".join(self.exclude)}
        try:
            resp = httpx.get(self.url, params=params)
        except httpx.RequestError as e:
            raise ForecastClientError(f"making request: {e}") from e

        body = resp.text
        logger.info("Forecast API returned %d (%d bytes)", resp.status_code, len(body))

        if resp.status_code >= 400:
            raise ForecastClientError(
                f"HTTP {resp.status_code}: {body}", resp.status_code
            )

        try:
            raw = json.loads(body)
        except ValueError as e:
            raise ForecastDecodeError(
                f"decoding response {body}: {e}", body, resp.status_code
            ) from e

        try:
            return _parse_forecast(raw)
        except (KeyError, TypeError, ValueError) as e:
            raise ForecastDecodeError(
                f"decoding response {body}: unexpected shape ({e!r})",
                body, resp.status_code,
            ) from e


def _parse_forecast(raw: dict) -> ForecastResponse:
    """Extract timezone and hourly precipitation points from the payload."""
    timezone = raw["timezone"]
    if not isinstance(timezone, str):
        raise TypeError(f"timezone must be a string, got {type(timezone).__name__}")

    hourly = tuple(
        HourlyDatum(
            time=int(d["time"]),
            # Dry hours may omit the probability.
            precip_probability=float(d.get("precipProbability", 0.0)),
        )
        for d in raw["hourly"]["data"]
    )
    return ForecastResponse(timezone=timezone, hourly=hourly, raw=raw)
