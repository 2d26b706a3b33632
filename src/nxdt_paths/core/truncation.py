#!/usr/bin/env python3

"""UTF-8 aware truncation boundaries."""

from .utf8_decoder import decode_codepoint, to_utf8_bytes


def utf8_byte_limit(data: bytes, str_size: int, byte_limit: int) -> int:
    """
    Find the last codepoint boundary inside a byte budget.

    The boundary only advances past a codepoint whose end is strictly below
    ``byte_limit``. Scanning stops on a malformed sequence, a NUL codepoint,
    or a sequence running past ``str_size``.

    Args:
        data: UTF-8 bytes
        str_size: Number of bytes of ``data`` to consider
        byte_limit: Byte budget

    Returns:
        Boundary offset, never inside a multi-byte sequence
    """
    if not data or str_size <= 0 or byte_limit <= 0:
        return 0

    if byte_limit >= str_size:
        return str_size

    cur_pos = 0
    last_cp_pos = 0

    while cur_pos < str_size and cur_pos < byte_limit:
        codepoint = decode_codepoint(data, cur_pos, str_size)
        if codepoint is None or codepoint.value == 0:
            break

        cur_pos += codepoint.size
        if cur_pos < byte_limit:
            last_cp_pos = cur_pos

    return last_cp_pos


def utf8_truncation_boundary(s: str | bytes, byte_budget: int) -> int:
    """Return the largest safe prefix length of ``s`` within ``byte_budget`` bytes."""
    data = to_utf8_bytes(s)
    return utf8_byte_limit(data, len(data), byte_budget)
