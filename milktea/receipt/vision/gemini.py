"""Gemini API receipt extraction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import (
    AINotConfiguredError,
    AIResponseError,
    AITransportError,
)
from . import AIExtractionClient
from .normalizer import normalize_response
from .prompt import EXTRACTION_PROMPT

if TYPE_CHECKING:
    from ..images import ReceiptImage
    from ..models import ParsedReceipt

logger = logging.getLogger(__name__)

_GENERATION_CONFIG = {
    "temperature": 0.1,
    "top_k": 1,
    "top_p": 1,
    "max_output_tokens": 1024,
}


class GeminiReceiptClient(AIExtractionClient):
    """Extract receipts using Google Gemini's vision capability."""

    def __init__(self, api_key: str = "", model: str = "gemini-2.5-flash-lite") -> None:
        self._api_key = api_key
        self._model = model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def extract(self, image: ReceiptImage) -> ParsedReceipt:
        if not self._api_key:
            raise AINotConfiguredError(
                "Gemini API key is not set. "
                "Check the config file or the GEMINI_API_KEY environment variable."
            )

        try:
            import google.generativeai as genai
        except ImportError:
            raise AINotConfiguredError(
                "google-generativeai SDK is required: pip install google-generativeai"
            ) from None

        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(
            self._model, generation_config=_GENERATION_CONFIG
        )
        parts = [
            EXTRACTION_PROMPT,
            {"mime_type": image.mime_type, "data": image.data},
        ]

        logger.info("Sending receipt to Gemini (%s, %d KB)", self._model, len(image.data) // 1024)
        try:
            response = await model.generate_content_async(parts)
        except Exception as e:
            status = getattr(e, "code", None)
            if isinstance(status, int):
                raise AIResponseError(f"Gemini API error: {e}", status=status) from e
            raise AITransportError(f"Gemini request failed: {e}") from e

        try:
            text = response.text
        except ValueError as e:
            # Raised when the candidate was blocked or has no text part
            raise AIResponseError(f"Gemini returned no text: {e}") from e

        logger.debug("Gemini raw reply: %s", text)
        return normalize_response(text)
