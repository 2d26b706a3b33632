#!/usr/bin/env python3

"""Single-codepoint UTF-8 decoding.

Everything that walks a name byte by byte goes through
:func:`decode_codepoint`, so a multi-byte sequence is always consumed
as a whole or rejected as a whole.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from .exceptions import DecodeError

MAX_CODEPOINT = 0x10FFFF
SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF


@dataclass(frozen=True)
class Codepoint:
    """A decoded Unicode scalar value and the number of bytes it used."""

    value: int
    size: int


def to_utf8_bytes(data: str | bytes | bytearray) -> bytes:
    """
    Get the raw UTF-8 bytes for a name.

    Lone surrogates in ``str`` input are kept as their 3-byte encodings,
    which :func:`decode_codepoint` rejects later on.

    Raises:
        TypeError: If ``data`` is neither text nor bytes
    """
    if isinstance(data, str):
        return data.encode("utf-8", "surrogatepass")
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    raise TypeError(f"Expected str or bytes, got {type(data).__name__}")


def like_input(original: str | bytes | bytearray, data: bytes) -> str | bytes:
    """Return validated ``data`` as the same type as ``original``."""
    if isinstance(original, str):
        return data.decode("utf-8")
    return data


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def decode_codepoint(data: bytes, pos: int = 0, end: int | None = None) -> Codepoint | None:
    """
    Decode the UTF-8 codepoint starting at ``data[pos]``.

    Args:
        data: Byte buffer to read from
        pos: Offset of the lead byte
        end: Exclusive read bound, clamped to ``len(data)``

    Returns:
        Decoded codepoint, or None for a malformed, overlong, surrogate,
        out-of-range or truncated sequence
    """
    end = len(data) if end is None else min(end, len(data))
    if pos < 0 or pos >= end:
        return None

    lead = data[pos]
    if lead < 0x80:
        return Codepoint(lead, 1)

    # 0x80-0xBF are continuation bytes, 0xC0/0xC1 only produce overlongs
    if lead < 0xC2:
        return None
    if lead < 0xE0:
        size, value = 2, lead & 0x1F
    elif lead < 0xF0:
        size, value = 3, lead & 0x0F
    elif lead < 0xF5:
        size, value = 4, lead & 0x07
    else:
        return None

    if pos + size > end:
        return None

    for byte in data[pos + 1 : pos + size]:
        if not _is_continuation(byte):
            return None
        value = (value << 6) | (byte & 0x3F)

    # Overlong 3/4-byte forms
    if (size == 3 and value < 0x800) or (size == 4 and value < 0x10000):
        return None
    if SURROGATE_FIRST <= value <= SURROGATE_LAST or value > MAX_CODEPOINT:
        return None

    return Codepoint(value, size)


def iter_codepoints(data: bytes, strict: bool = False) -> Iterator[tuple[int, Codepoint]]:
    """
    Walk ``data`` yielding ``(offset, codepoint)`` pairs.

    Iteration stops at the first malformed sequence. With ``strict`` set a
    :class:`DecodeError` is raised at that offset instead.
    """
    pos = 0
    size = len(data)
    while pos < size:
        codepoint = decode_codepoint(data, pos, size)
        if codepoint is None:
            if strict:
                raise DecodeError(pos)
            return
        yield pos, codepoint
        pos += codepoint.size


def validate_utf8(data: bytes) -> None:
    """Raise :class:`DecodeError` if ``data`` is not well-formed UTF-8."""
    for _ in iter_codepoints(data, strict=True):
        pass
