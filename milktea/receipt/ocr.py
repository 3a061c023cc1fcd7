"""OCR text sources feeding the rule-based parser."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

from .images import ReceiptImage

logger = logging.getLogger(__name__)


class OCRTextSource(ABC):
    """Turns a receipt image into plain text.

    Implementations return lines top to bottom joined by newlines, and an
    empty string when recognition fails. They never raise.
    """

    @abstractmethod
    async def extract_text(self, image: ReceiptImage) -> str:
        ...


class StaticTextSource(OCRTextSource):
    """Returns fixed text regardless of the image."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    async def extract_text(self, image: ReceiptImage) -> str:
        return self._text


class TesseractTextSource(OCRTextSource):
    """Bilingual OCR with Tesseract (English, Simplified and Traditional Chinese)."""

    def __init__(
        self,
        languages: str = "eng+chi_sim+chi_tra",
        tesseract_config: str = "--oem 3 --psm 6",
    ) -> None:
        self._languages = languages
        self._config = tesseract_config

    async def extract_text(self, image: ReceiptImage) -> str:
        try:
            return await asyncio.to_thread(self._recognize, image.original)
        except Exception:
            logger.warning("OCR failed; continuing with empty text", exc_info=True)
            return ""

    def _recognize(self, raw: bytes) -> str:
        try:
            import cv2
            import numpy as np
            import pytesseract
        except ImportError:
            raise ImportError(
                "pytesseract and opencv-python are required: "
                "pip install pytesseract opencv-python"
            ) from None

        img = cv2.imdecode(np.frombuffer(raw, dtype=np.uint8), cv2.IMREAD_COLOR)
        if img is None:
            logger.warning("OCR could not decode image")
            return ""
        gray = cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)

        data = pytesseract.image_to_data(
            gray,
            lang=self._languages,
            config=self._config,
            output_type=pytesseract.Output.DICT,
        )
        text = join_ocr_lines(data)
        logger.info("OCR recognised %d line(s)", len(text.splitlines()))
        return text


def join_ocr_lines(data: dict[str, list[Any]]) -> str:
    """Rebuild text lines from Tesseract ``image_to_data`` output.

    Words are grouped by (block, paragraph, line), ordered left to right,
    and lines are emitted by their top coordinate.
    """
    lines: dict[tuple[int, int, int], list[tuple[int, int, str]]] = {}
    for i, word in enumerate(data.get("text", [])):
        word = (word or "").strip()
        if not word:
            continue
        try:
            if float(data["conf"][i]) < 0:
                continue
        except (KeyError, TypeError, ValueError):
            pass
        key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
        lines.setdefault(key, []).append(
            (int(data["top"][i]), int(data["left"][i]), word)
        )

    ordered = sorted(
        lines.values(),
        key=lambda words: (min(w[0] for w in words), min(w[1] for w in words)),
    )
    return "\n".join(
        " ".join(w[2] for w in sorted(words, key=lambda w: w[1]))
        for words in ordered
    )
