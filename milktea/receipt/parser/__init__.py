"""Rule-based receipt text parser (English / Chinese)."""

from __future__ import annotations

import logging

from ..models import ParsedReceipt
from .brands import BrandMatcher, has_drink_keyword
from .matchers import (
    match_ice,
    match_size,
    match_sugar,
    match_topping,
    read_line,
    sugar_for_percent,
)
from .prices import extract_price, extract_total
from .segmenter import clean_drink_name, segment_items

logger = logging.getLogger(__name__)


class ReceiptParser:
    """Parse OCR text of a drink receipt into a :class:`ParsedReceipt`.

    The parser never raises: text it cannot make sense of yields an empty
    item list. Brand aliases default to the built-in brand table.
    """

    def __init__(self, brand_matcher: BrandMatcher | None = None) -> None:
        self._brands = brand_matcher or BrandMatcher()

    def parse(self, text: str) -> ParsedReceipt:
        lines = [line for line in text.splitlines() if line.strip()]

        brand = self._brands.match(text)
        items = segment_items(lines, self.is_opening_line)
        total = extract_total(lines)

        logger.info(
            "Parsed receipt text: brand=%s, %d item(s), total=%s",
            brand, len(items), total,
        )
        return ParsedReceipt(
            raw_brand_name=brand,
            items=items,
            total_price=total,
            raw_text=text,
        )

    def is_opening_line(self, line: str) -> bool:
        """A line that starts a new drink item."""
        return has_drink_keyword(line) and not self._brands.is_brand_header(line)


def parse_receipt(text: str) -> ParsedReceipt:
    return ReceiptParser().parse(text)


__all__ = [
    "BrandMatcher",
    "ReceiptParser",
    "clean_drink_name",
    "extract_price",
    "extract_total",
    "match_ice",
    "match_size",
    "match_sugar",
    "match_topping",
    "parse_receipt",
    "read_line",
    "segment_items",
    "sugar_for_percent",
]
