#!/usr/bin/env python3

"""Replacement of characters that are not allowed in file names."""

from ..infrastructure.logging import get_logger
from .utf8_decoder import iter_codepoints, like_input, to_utf8_bytes

logger = get_logger(__name__)

ILLEGAL_FILESYSTEM_CHARS = frozenset(ord(c) for c in '\\/:*?"<>|')
REPLACEMENT_BYTE = ord("_")


def is_illegal_codepoint(value: int, ascii_only: bool = False) -> bool:
    """Check whether a codepoint must be replaced in a file name."""
    if value in ILLEGAL_FILESYSTEM_CHARS or value < 0x20:
        return True
    if ascii_only:
        return value >= 0x7F
    return value == 0x7F


def sanitize_filename(name: str | bytes, ascii_only: bool = False) -> str | bytes:
    """
    Replace illegal characters in a file name with underscores.

    Every illegal codepoint becomes a single ``_`` no matter how many bytes
    it was encoded with, so the result is never longer than the input.
    Decoding stops at the first malformed sequence and the name is cut
    there.

    Args:
        name: Raw name (text or UTF-8 bytes)
        ascii_only: Also replace everything outside 7-bit printable ASCII

    Returns:
        Sanitized name, same type as ``name``
    """
    data = to_utf8_bytes(name)
    out = bytearray()

    end = 0
    for pos, codepoint in iter_codepoints(data):
        if is_illegal_codepoint(codepoint.value, ascii_only):
            out.append(REPLACEMENT_BYTE)
        else:
            out += data[pos : pos + codepoint.size]
        end = pos + codepoint.size

    if end < len(data):
        logger.debug(f"Invalid UTF-8 sequence at offset {end}, truncating name")

    return like_input(name, bytes(out))
