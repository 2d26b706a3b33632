#!/usr/bin/env python3

"""Output path generation with per-element and total length limits.

A path is assembled from an optional prefix, a file name and an optional
extension. Every element between separators is then cut down to the
element byte limit on a codepoint boundary; cutting an inner element
shifts the rest of the path left, and cutting the last element keeps the
extension intact. Finally the whole path is checked against the platform
path limit.
"""

from ..infrastructure.logging import get_logger
from .exceptions import (
    DecodeError,
    ExtensionTooLongError,
    InvalidArgumentsError,
    PathTooLongError,
)
from .limits import PathLimits
from .truncation import utf8_byte_limit
from .utf8_decoder import decode_codepoint, like_input, to_utf8_bytes, validate_utf8

logger = get_logger(__name__)


def _element_boundary(element: bytes, element_size: int, byte_limit: int) -> int:
    if byte_limit >= element_size:
        return element_size

    boundary = utf8_byte_limit(element, element_size, byte_limit)

    # utf8_byte_limit() leaves out a codepoint ending exactly on the budget
    following = decode_codepoint(element, boundary, element_size)
    if following is not None and following.value and boundary + following.size == byte_limit:
        boundary = byte_limit

    return boundary


def synthesize_path(
    prefix: str | bytes | None,
    filename: str | bytes,
    extension: str | bytes | None = None,
    limits: PathLimits | None = None,
) -> str | bytes:
    """
    Build an output path that fits the filesystem limits.

    Args:
        prefix: Leading directory (a separator is appended if missing)
        filename: File name, must not be empty
        extension: Appended verbatim and preserved if the name is truncated
        limits: Byte limits to enforce (defaults to :class:`PathLimits`)

    Returns:
        Generated path, same type as ``filename``

    Raises:
        InvalidArgumentsError: Empty file name, NUL bytes or a separator in the extension
        DecodeError: Any input holds malformed UTF-8
        ExtensionTooLongError: The extension doesn't fit in the truncated last element
        PathTooLongError: The final path is still too long
    """
    if limits is None:
        limits = PathLimits()

    if not filename:
        logger.error("Invalid parameters: empty file name")
        raise InvalidArgumentsError("File name must not be empty")

    name_data = to_utf8_bytes(filename)
    prefix_data = to_utf8_bytes(prefix) if prefix else b""
    ext_data = to_utf8_bytes(extension) if extension else b""
    sep = limits.separator_byte

    if b"\x00" in prefix_data or b"\x00" in name_data or b"\x00" in ext_data:
        logger.error("Invalid parameters: embedded NUL byte")
        raise InvalidArgumentsError("Path inputs must not contain NUL bytes")

    if sep in ext_data:
        logger.error(f"Invalid parameters: extension contains {limits.separator!r}")
        raise InvalidArgumentsError(f"Extension must not contain {limits.separator!r}")

    path = bytearray(prefix_data)
    if prefix_data and prefix_data[-1] != sep:
        path.append(sep)
    path += name_data
    path += ext_data

    try:
        validate_utf8(bytes(path))
    except DecodeError as e:
        logger.error(f"Failed to generate path: {e}")
        raise

    start = 0
    while True:
        sep_pos = path.find(sep, start)
        is_last = sep_pos < 0
        end = len(path) if is_last else sep_pos
        element_size = end - start

        if element_size > limits.max_component_bytes:
            element = bytes(path[start:end])
            last_cp_pos = _element_boundary(element, element_size, limits.max_component_bytes)

            if not is_last:
                del path[start + last_cp_pos : end]
                end = start + last_cp_pos
            elif ext_data:
                ext_len = len(ext_data)
                if ext_len >= last_cp_pos:
                    logger.error(
                        f"File extension length is >= truncated filename length "
                        f"(0x{ext_len:X} >= 0x{last_cp_pos:X})"
                    )
                    raise ExtensionTooLongError(ext_len, last_cp_pos)

                # Cut the name itself, not the name+extension block, so the
                # extension never lands in the middle of a multi-byte sequence
                base_size = _element_boundary(
                    element, element_size - ext_len, last_cp_pos - ext_len
                )
                path[start + base_size :] = ext_data
                end = len(path)
            else:
                del path[start + last_cp_pos :]
                end = len(path)

            logger.debug(f"Truncated path element at offset {start}: {element_size} -> {end - start} bytes")

        if is_last:
            break
        start = end + 1

    path_len = len(path)
    if path_len >= limits.max_path_bytes:
        logger.error(f"Generated path length is >= maximum path length (0x{path_len:X})")
        raise PathTooLongError(path_len, limits.max_path_bytes)

    return like_input(filename, bytes(path))
