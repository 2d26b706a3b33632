#!/usr/bin/env python3

"""Small string helpers used when composing output names."""

# Same set as C isspace() in the "C" locale
WHITESPACE_CHARS = " \t\n\v\f\r"
WHITESPACE_BYTES = WHITESPACE_CHARS.encode("ascii")

SIZE_SUFFIXES = ("B", "KiB", "MiB", "GiB", "TiB")


def trim(s: str | bytes) -> str | bytes:
    """Strip leading and trailing ASCII whitespace, leaving everything else untouched."""
    if isinstance(s, str):
        return s.strip(WHITESPACE_CHARS)
    if isinstance(s, (bytes, bytearray)):
        return bytes(s).strip(WHITESPACE_BYTES)
    raise TypeError(f"Expected str or bytes, got {type(s).__name__}")


def hex_string_from_data(data: bytes, uppercase: bool = False) -> str:
    """
    Render binary data as a hex string, two digits per byte.

    Args:
        data: Bytes to render (title IDs, hashes, key areas...)
        uppercase: Use A-F instead of a-f

    Returns:
        Hex string, empty for empty input
    """
    hex_str = bytes(data).hex()
    return hex_str.upper() if uppercase else hex_str


def formatted_size_string(size: float) -> str:
    """
    Format a byte count using binary suffixes, e.g. ``1536`` -> ``"1.50 KiB"``.

    The largest suffix is TiB; bigger values are still expressed in TiB.
    """
    size = abs(size)

    for i, suffix in enumerate(SIZE_SUFFIXES[:-1]):
        if size < 1024.0 ** (i + 1):
            return f"{size / 1024.0 ** i:.2f} {suffix}"

    last = len(SIZE_SUFFIXES) - 1
    return f"{size / 1024.0 ** last:.2f} {SIZE_SUFFIXES[last]}"
