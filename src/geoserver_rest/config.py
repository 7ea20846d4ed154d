"""
Connection settings for the GeoServer REST client.

Settings come from an optional YAML file, then environment variables (a
``.env`` file is honoured) override individual keys.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "geoserver.yml"

ENV_OVERRIDES = {
    "GEOSERVER_URL": "url",
    "GEOSERVER_USERNAME": "username",
    "GEOSERVER_PASSWORD": "password",
    "GEOSERVER_TIMEOUT_SECONDS": "timeout_seconds",
}


class GeoServerSettings(BaseModel):
    """Where the REST API lives and how to authenticate against it."""

    url: str
    username: str = ""
    password: str = Field(default="", repr=False)
    timeout_seconds: float = Field(default=30.0, gt=0)


def load_settings(config_path: Optional[Path] = None) -> GeoServerSettings:
    """
    Load and validate GeoServer settings

    Args:
        config_path: YAML file to read. Defaults to config/geoserver.yml,
            resolved against the current working directory rather than the
            installed package. A missing file is skipped.

    Returns:
        Validated GeoServerSettings object

    Raises:
        ValidationError: If the merged settings don't match the schema
    """
    load_dotenv()

    config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    data = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.debug("No GeoServer config file at %s", config_path)

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[key] = value

    try:
        settings = GeoServerSettings(**data)
        logger.info("Loaded GeoServer settings for %s", settings.url)
        return settings
    except ValidationError as e:
        logger.error("GeoServer settings validation failed: %s", e)
        raise
