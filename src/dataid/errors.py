"""Error kinds raised by the identifier checks."""

from __future__ import annotations


class IdentificationError(ValueError):
    """Base class for every error raised by dataid."""


class InvalidArgumentError(IdentificationError):
    """The input is missing, empty or blank, or not of the required shape."""


class InvalidIdCardError(IdentificationError):
    """A non-empty ID card number failed format, date or checksum validation."""

    def __init__(self, message: str = "Invalid ID card number") -> None:
        super().__init__(message)
