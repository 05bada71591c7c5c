"""Environment config loader with optional YAML policy overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from rainalert.config.defaults import DEFAULT_EMAIL_FROM, REQUIRED_ENV_VARS
from rainalert.config.schema import (
    ForecastSourceConfig,
    NotificationConfig,
    PolicyConfig,
    RainAlertConfig,
)

logger = logging.getLogger(__name__)

POLICY_PATH_ENV = "RAIN_ALERT_POLICY"


class ConfigError(Exception):
    """Raised when a required setting is missing or invalid. Fatal at startup."""

    def __init__(self, message: str, variable: str | None = None):
        super().__init__(message)
        self.variable = variable


def load_policy(path: str | Path) -> PolicyConfig:
    """Load policy overrides from a YAML file. An empty file yields defaults."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return PolicyConfig(**raw)


def load_config(
    environ: Mapping[str, str] | None = None,
    policy_path: str | Path | None = None,
) -> RainAlertConfig:
    """Build the config from environment variables.

    Raises ConfigError naming the first required variable that is unset or
    empty, or naming the policy variable when the policy file is unusable.
    """
    env = os.environ if environ is None else environ

    for name in REQUIRED_ENV_VARS:
        if not env.get(name):
            raise ConfigError(f"Expected {name} to be set.", variable=name)

    policy_path = policy_path or env.get(POLICY_PATH_ENV)
    try:
        policy = load_policy(policy_path) if policy_path else PolicyConfig()
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigError(
            f"Invalid policy file {policy_path}: {e}", variable=POLICY_PATH_ENV
        ) from e

    config = RainAlertConfig(
        forecast=ForecastSourceConfig(
            api_url=env["API_URL"],
            api_key=env["API_KEY"],
            lat=env["LAT"],
            lng=env["LNG"],
        ),
        notification=NotificationConfig(
            topic_arn=env["TOPIC_ARN"],
            email_to=env["EMAIL_TO"],
            email_from=env.get("EMAIL_FROM") or DEFAULT_EMAIL_FROM,
        ),
        policy=policy,
    )
    logger.info(
        "Initializing with API URL %s, latitude %s, longitude %s",
        config.forecast.api_url, config.forecast.lat, config.forecast.lng,
    )
    return config
