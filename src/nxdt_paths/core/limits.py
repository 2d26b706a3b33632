#!/usr/bin/env python3

"""Filesystem limits applied to generated paths."""

from dataclasses import dataclass

# Per-element limit used by NTFS/exFAT, expressed in bytes rather than codepoints
MAX_COMPONENT_BYTES = 255

# Horizon FS_MAX_PATH
MAX_PATH_BYTES = 0x301

PATH_SEPARATOR = "/"


@dataclass(frozen=True)
class PathLimits:
    """Byte limits and separator used when synthesizing a path."""

    max_component_bytes: int = MAX_COMPONENT_BYTES
    max_path_bytes: int = MAX_PATH_BYTES
    separator: str = PATH_SEPARATOR

    def __post_init__(self) -> None:
        if self.max_component_bytes <= 0:
            raise ValueError(f"max_component_bytes must be positive: {self.max_component_bytes}")
        if self.max_path_bytes <= 0:
            raise ValueError(f"max_path_bytes must be positive: {self.max_path_bytes}")
        if len(self.separator.encode("utf-8")) != 1:
            raise ValueError(f"Path separator must be a single byte: {self.separator!r}")

    @property
    def separator_byte(self) -> int:
        """Separator as a byte value."""
        return self.separator.encode("utf-8")[0]
