#!/usr/bin/env python3

"""Error types raised while building output paths."""


class PathError(ValueError):
    """Base class for every path generation failure."""


class DecodeError(PathError):
    """Malformed UTF-8 sequence found in an input string."""

    def __init__(self, offset: int, message: str | None = None):
        self.offset = offset
        super().__init__(message or f"Invalid UTF-8 sequence at byte offset {offset}")


class InvalidArgumentsError(PathError):
    """A required input is empty or otherwise unusable."""


class ExtensionTooLongError(PathError):
    """The file extension does not fit in the truncated filename."""

    def __init__(self, extension_length: int, boundary: int):
        self.extension_length = extension_length
        self.boundary = boundary
        super().__init__(
            f"File extension length is >= truncated filename length "
            f"(0x{extension_length:X} >= 0x{boundary:X})"
        )


class PathTooLongError(PathError):
    """The generated path still exceeds the platform path limit."""

    def __init__(self, path_length: int, limit: int):
        self.path_length = path_length
        self.limit = limit
        super().__init__(
            f"Generated path length is >= maximum path length "
            f"(0x{path_length:X} >= 0x{limit:X})"
        )
