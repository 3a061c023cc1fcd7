"""AI extraction client base class and factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import ReceiptConfig
    from ..images import ReceiptImage
    from ..models import ParsedReceipt


class AIExtractionClient(ABC):
    """Abstract base for extracting a receipt with a vision model."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the client has what it needs to make a call."""
        ...

    @abstractmethod
    async def extract(self, image: ReceiptImage) -> ParsedReceipt:
        """Extract brand, drink items and total from a prepared image.

        Raises:
            ExtractionError: On any failure; callers fall back to OCR.
        """
        ...


def create_client(config: ReceiptConfig) -> AIExtractionClient | None:
    """Create an AI client based on configuration, or None when disabled."""
    backend_name = config.vision.backend

    match backend_name:
        case "gemini":
            from .gemini import GeminiReceiptClient

            return GeminiReceiptClient(
                api_key=config.vision.gemini.api_key,
                model=config.vision.gemini.model,
            )
        case "claude":
            from .claude import ClaudeReceiptClient

            return ClaudeReceiptClient(
                api_key=config.vision.claude.api_key,
                model=config.vision.claude.model,
            )
        case "none" | "":
            return None
        case _:
            raise ValueError(
                f"Unknown vision backend: {backend_name!r} "
                "(choose gemini / claude / none)"
            )
