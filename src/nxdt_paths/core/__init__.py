"""Core name sanitization and path generation."""

from .exceptions import (
    DecodeError,
    ExtensionTooLongError,
    InvalidArgumentsError,
    PathError,
    PathTooLongError,
)
from .filename_sanitizer import is_illegal_codepoint, sanitize_filename
from .limits import MAX_COMPONENT_BYTES, MAX_PATH_BYTES, PATH_SEPARATOR, PathLimits
from .path_synthesizer import synthesize_path
from .string_utils import formatted_size_string, hex_string_from_data, trim
from .truncation import utf8_byte_limit, utf8_truncation_boundary
from .utf8_decoder import Codepoint, decode_codepoint, iter_codepoints, validate_utf8

__all__ = [
    "MAX_COMPONENT_BYTES",
    "MAX_PATH_BYTES",
    "PATH_SEPARATOR",
    "Codepoint",
    "DecodeError",
    "ExtensionTooLongError",
    "InvalidArgumentsError",
    "PathError",
    "PathLimits",
    "PathTooLongError",
    "decode_codepoint",
    "formatted_size_string",
    "hex_string_from_data",
    "is_illegal_codepoint",
    "iter_codepoints",
    "sanitize_filename",
    "synthesize_path",
    "trim",
    "utf8_byte_limit",
    "utf8_truncation_boundary",
    "validate_utf8",
]
