"""Infrastructure configuration module."""

from .application_config import Config
from .path_config import get_config, get_path_limits

__all__ = ["Config", "get_config", "get_path_limits"]
