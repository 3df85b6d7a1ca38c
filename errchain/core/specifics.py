"""What went wrong, independent of where the error sits in a chain.

Each variant carries only the data needed to render its message. Variants
compare by value so callers can assert which one occurred after walking a
chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "MAX_BUFFER_SIZE",
    "ContextInitError",
    "InvalidArgument",
    "IoctlError",
    "IoctlResultTooLarge",
    "MetadataIoError",
    "ErrorSpecifics",
]

# Largest ioctl result buffer, in bytes (u32::MAX)
MAX_BUFFER_SIZE = 2**32 - 1


@dataclass(frozen=True, slots=True)
class ContextInitError:
    """An operation was attempted against an uninitialized context."""

    def __str__(self) -> str:
        return "DM context not initialized"


@dataclass(frozen=True, slots=True)
class InvalidArgument:
    """A method received an argument it can not handle."""

    description: str

    def __str__(self) -> str:
        return f"invalid argument: {self.description}"


@dataclass(frozen=True, slots=True)
class IoctlError:
    # should eventually carry structured device info
    device_info: str

    def __str__(self) -> str:
        return f"ioctl error, device info: {self.device_info}"


@dataclass(frozen=True, slots=True)
class IoctlResultTooLarge:
    def __str__(self) -> str:
        return f"ioctl result too large for maximum buffer size {MAX_BUFFER_SIZE} bytes"


@dataclass(frozen=True, slots=True)
class MetadataIoError:
    """Failed to get metadata for a device path."""

    path: Path

    def __str__(self) -> str:
        return f"failed to stat metadata for device at {self.path}"


ErrorSpecifics = (
    ContextInitError | InvalidArgument | IoctlError | IoctlResultTooLarge | MetadataIoError
)
