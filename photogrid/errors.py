"""Exception hierarchy for photogrid."""

from enum import Enum

__all__ = [
    "PhotogridError",
    "DecodeError",
    "StoreError",
    "StoreErrorKind",
    "ImageProcessingError",
]


class PhotogridError(Exception):
    """Root exception for all photogrid errors."""


class DecodeError(PhotogridError):
    """Raised when bytes are not a valid encoding of a catalog document."""


class StoreErrorKind(str, Enum):
    CORRUPT = "corrupt"
    IO_FAILURE = "io_failure"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


class StoreError(PhotogridError):
    """Raised by a catalog store. ``kind`` tells the caller what went wrong."""

    def __init__(self, kind: StoreErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ImageProcessingError(PhotogridError):
    """Raised when an image cannot be decoded or re-encoded."""
