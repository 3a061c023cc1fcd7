"""Receipt extraction orchestrator: AI first, OCR parser as fallback."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .catalog import BrandCatalog, StaticBrandCatalog, resolve_brand
from .errors import ExtractionError, ImageEncodingError
from .images import JPEG_QUALITY, MAX_DIMENSION, ReceiptImage, prepare_image
from .models import ParsedReceipt, ReceiptProcessingResult
from .ocr import OCRTextSource
from .parser import BrandMatcher, ReceiptParser
from .quota import UnlimitedUsage, UsageLimiter
from .vision import AIExtractionClient

logger = logging.getLogger(__name__)


class ReceiptProcessor:
    """Run one receipt scan through the AI path or the rule-based fallback.

    The AI path is tried only when a configured client is present and the
    usage limiter has quota left. One unit is reserved before the call so
    concurrent scans cannot overspend, and it is kept only on success. Any
    AI failure gives the unit back and falls back to OCR text and
    :class:`ReceiptParser`. Only an unreadable image fails the scan.
    """

    def __init__(
        self,
        ocr: OCRTextSource,
        ai_client: AIExtractionClient | None = None,
        usage: UsageLimiter | None = None,
        catalog: BrandCatalog | None = None,
        parser: ReceiptParser | None = None,
        max_dimension: int = MAX_DIMENSION,
        jpeg_quality: int = JPEG_QUALITY,
    ) -> None:
        self._ocr = ocr
        self._ai = ai_client
        self._usage = usage or UnlimitedUsage()
        self._catalog = catalog or StaticBrandCatalog()
        self._parser = parser or ReceiptParser(BrandMatcher(self._catalog.aliases()))
        self._max_dimension = max_dimension
        self._jpeg_quality = jpeg_quality

    async def process(
        self, image: ReceiptImage | str | Path | bytes
    ) -> ReceiptProcessingResult:
        try:
            prepared = await self._prepare(image)
        except ImageEncodingError as e:
            logger.error("Could not prepare receipt image: %s", e)
            return ReceiptProcessingResult(
                receipt=ParsedReceipt(), used_fallback=False, error=e
            )

        if await self._reserve_ai():
            try:
                receipt = await self._ai.extract(prepared)
            except asyncio.CancelledError:
                await self._usage.refund()
                raise
            except ExtractionError as e:
                await self._usage.refund()
                logger.warning("AI extraction failed, falling back to OCR: %s", e)
            except Exception:
                await self._usage.refund()
                logger.exception("Unexpected AI client error, falling back to OCR")
            else:
                self._resolve_brand(receipt)
                logger.info("Receipt extracted by AI: %d item(s)", len(receipt.items))
                return ReceiptProcessingResult(receipt=receipt, used_fallback=False)

        receipt = await self._fallback(prepared)
        return ReceiptProcessingResult(receipt=receipt, used_fallback=True)

    async def _prepare(self, image: ReceiptImage | str | Path | bytes) -> ReceiptImage:
        if isinstance(image, ReceiptImage):
            return image
        return await asyncio.to_thread(
            prepare_image, image, self._max_dimension, self._jpeg_quality
        )

    async def _reserve_ai(self) -> bool:
        """Check the client and take one usage unit for the coming call."""
        if self._ai is None:
            logger.info("No AI client; using OCR parser")
            return False
        if not self._ai.is_configured:
            logger.info("AI client not configured; using OCR parser")
            return False
        if not await self._usage.try_consume():
            logger.info("AI usage limit reached; using OCR parser")
            return False
        return True

    async def _fallback(self, image: ReceiptImage) -> ParsedReceipt:
        text = await self._ocr.extract_text(image)
        if not text.strip():
            logger.warning("OCR produced no text")
        receipt = self._parser.parse(text)
        self._resolve_brand(receipt)
        logger.info("Receipt extracted by OCR parser: %d item(s)", len(receipt.items))
        return receipt

    def _resolve_brand(self, receipt: ParsedReceipt) -> None:
        receipt.matched_brand_name = resolve_brand(
            receipt.raw_brand_name, self._catalog.brands()
        )
