"""Exception types raised by the receipt extraction engine."""

from __future__ import annotations


class ReceiptError(Exception):
    """Base class for receipt engine errors."""


class ImageEncodingError(ReceiptError):
    """The image could not be prepared; neither extraction path can run."""


class ExtractionError(ReceiptError):
    """AI extraction failed. The processor falls back to OCR on these."""


class AINotConfiguredError(ExtractionError):
    pass


class AITransportError(ExtractionError):
    pass


class AIResponseError(ExtractionError):
    """The AI service answered with a non-success status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class AIDecodeError(ExtractionError):
    """The model reply did not contain the expected JSON object."""
