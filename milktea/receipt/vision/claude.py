"""Claude API receipt extraction."""

from __future__ import annotations

import base64
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


class ClaudeReceiptClient(AIExtractionClient):
    """Extract receipts using Claude's vision capability."""

    def __init__(self, api_key: str = "", model: str = "claude-sonnet-4-5-20250929") -> None:
        self._api_key = api_key
        self._model = model

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def extract(self, image: ReceiptImage) -> ParsedReceipt:
        if not self._api_key:
            raise AINotConfiguredError(
                "Anthropic API key is not set. "
                "Check the config file or the ANTHROPIC_API_KEY environment variable."
            )

        try:
            import anthropic
        except ImportError:
            raise AINotConfiguredError(
                "anthropic SDK is required: pip install anthropic"
            ) from None

        content: list[dict] = [
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": image.mime_type,
                    "data": base64.standard_b64encode(image.data).decode(),
                },
            },
            {"type": "text", "text": EXTRACTION_PROMPT},
        ]

        logger.info("Sending receipt to Claude (%s, %d KB)", self._model, len(image.data) // 1024)
        client = anthropic.AsyncAnthropic(api_key=self._api_key)
        try:
            response = await client.messages.create(
                model=self._model,
                max_tokens=1024,
                messages=[{"role": "user", "content": content}],
            )
        except Exception as e:
            status = getattr(e, "status_code", None)
            if isinstance(status, int):
                raise AIResponseError(f"Claude API error: {e}", status=status) from e
            raise AITransportError(f"Claude request failed: {e}") from e

        if not response.content:
            raise AIResponseError("Claude returned an empty reply")

        text = response.content[0].text
        logger.debug("Claude raw reply: %s", text)
        return normalize_response(text)
