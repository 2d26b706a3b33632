"""nxdt-paths - filesystem-safe, length-bounded output paths for dumped content."""

from .core import (
    MAX_COMPONENT_BYTES,
    MAX_PATH_BYTES,
    PATH_SEPARATOR,
    Codepoint,
    DecodeError,
    ExtensionTooLongError,
    InvalidArgumentsError,
    PathError,
    PathLimits,
    PathTooLongError,
    decode_codepoint,
    formatted_size_string,
    hex_string_from_data,
    sanitize_filename,
    synthesize_path,
    trim,
    utf8_truncation_boundary,
)
from .infrastructure.config import Config, get_path_limits
from .main import main

__all__ = [
    "MAX_COMPONENT_BYTES",
    "MAX_PATH_BYTES",
    "PATH_SEPARATOR",
    "Codepoint",
    "Config",
    "DecodeError",
    "ExtensionTooLongError",
    "InvalidArgumentsError",
    "PathError",
    "PathLimits",
    "PathTooLongError",
    "decode_codepoint",
    "formatted_size_string",
    "get_path_limits",
    "hex_string_from_data",
    "main",
    "sanitize_filename",
    "synthesize_path",
    "trim",
    "utf8_truncation_boundary",
]
