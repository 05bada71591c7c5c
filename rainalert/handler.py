"""Serverless entry point invoked by the scheduler.

Inside the Lambda runtime the pipeline is built when this module is
imported, so a missing or invalid setting stops the process before any
invocation is served. Elsewhere (tests, local runs) it is built on the
first call. Either way a config failure is logged and the process exits.
"""

import logging
import os

from rainalert.config.loader import ConfigError, load_config
from rainalert.pipeline.check_pipeline import RainCheckPipeline

logger = logging.getLogger(__name__)

LAMBDA_ENV_MARKER = "AWS_LAMBDA_FUNCTION_NAME"

_pipeline: RainCheckPipeline | None = None


def init() -> RainCheckPipeline:
    """Load config from the environment and build the pipeline."""
    global _pipeline
    try:
        config = load_config()
    except ConfigError as e:
        logger.critical("%s", e)
        raise SystemExit(2) from e
    _pipeline = RainCheckPipeline.from_config(config)
    return _pipeline


def _get_pipeline() -> RainCheckPipeline:
    if _pipeline is None:
        return init()
    return _pipeline


def lambda_handler(event, context) -> dict:
    logging.getLogger().setLevel(logging.INFO)
    pipeline = _get_pipeline()
    try:
        summary = pipeline.run()
    except Exception:
        logger.exception("Rain check failed")
        raise
    return summary.to_dict()


if os.environ.get(LAMBDA_ENV_MARKER):
    init()
