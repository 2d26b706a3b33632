#!/usr/bin/env python3

"""Configuration for the path limits applied by the core."""

import os

from ...core.limits import MAX_COMPONENT_BYTES, MAX_PATH_BYTES, PATH_SEPARATOR, PathLimits
from ..logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "NXDT_"

# Default configuration values
DEFAULT_CONFIG = {
    "MAX_COMPONENT_BYTES": MAX_COMPONENT_BYTES,
    "MAX_PATH_BYTES": MAX_PATH_BYTES,
    "PATH_SEPARATOR": PATH_SEPARATOR,
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Every key can be overridden through ``NXDT_<KEY>``. Integer values
    accept any base understood by ``int(value, 0)`` (``769``, ``0x301``);
    values that fail to parse keep the default.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key, default in config.items():
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is None:
            continue

        if isinstance(default, int):
            try:
                config[key] = int(env_value, 0)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_PREFIX}{key} value: {env_value!r}")
        else:
            config[key] = env_value

    return config


def get_path_limits() -> PathLimits:
    """Build the path limits from the current configuration.

    Raises:
        ValueError: If an overridden limit is not usable
    """
    config = get_config()
    return PathLimits(
        max_component_bytes=config["MAX_COMPONENT_BYTES"],
        max_path_bytes=config["MAX_PATH_BYTES"],
        separator=config["PATH_SEPARATOR"],
    )
