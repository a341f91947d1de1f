"""API server entry point."""

import json
import logging
import logging.config
import os
import sys
from pathlib import Path

import uvicorn
from pydantic import ValidationError

from rainharvest.api import app
from rainharvest.api.assessment_router import get_orchestrator
from rainharvest.config import ApiServerConfig
from rainharvest.errors import ConfigurationError


def is_production() -> bool:
    """Structured logging is used when RAINHARVEST_ENV=production."""
    return os.environ.get("RAINHARVEST_ENV", "").lower() == "production"


def configure_logging() -> None:
    """Configure logging based on environment.

    In production: Uses logging.json with structured records, trace ID
    injection, and health check filtering.

    Locally: Uses logging-dev.json with simple text format for readability.
    """
    config_file = "logging.json" if is_production() else "logging-dev.json"
    config_path = Path(__file__).parent.parent / config_file

    if config_path.exists():
        with open(config_path) as f:
            logging.config.dictConfig(json.load(f))
    else:
        # Fallback to basic config if file not found
        logging.basicConfig(
            level=logging.INFO,
            format=(
                '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
                '"logger": "%(name)s", "message": "%(message)s"}'
            ),
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


logger = logging.getLogger(__name__)


def main():
    """Start the HTTP API server."""
    configure_logging()

    try:
        server_config = ApiServerConfig()
        # Build the estimators up front so a bad configuration fails at startup
        get_orchestrator()
    except (ConfigurationError, ValidationError) as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info(f"Starting API server on {server_config.host}:{server_config.port}")
    uvicorn.run(app, host=server_config.host, port=server_config.port, log_config=None)


if __name__ == "__main__":
    main()
