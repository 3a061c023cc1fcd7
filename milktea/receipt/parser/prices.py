"""Price extraction for USD and CNY receipt notations."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Iterable

from .patterns import TOTAL_KEYWORDS_EN, TOTAL_KEYWORDS_ZH

_USD_PRICE = re.compile(r"\$\s*(\d{1,3}(?:\.\d{1,2})?)")
_CNY_PRICE = re.compile(r"[¥￥]\s*(\d{1,3}(?:\.\d{1,2})?)")
_YUAN_PRICE = re.compile(r"(\d{1,3}(?:\.\d{1,2})?)\s*元")
# Bare two-decimal number; also hits weights such as "12.30g".
_GENERIC_PRICE = re.compile(r"(\d{1,3}\.\d{2})")

# Order is precedence: a currency-marked amount beats any bare decimal.
PRICE_PATTERNS: tuple[re.Pattern[str], ...] = (
    _USD_PRICE,
    _CNY_PRICE,
    _YUAN_PRICE,
    _GENERIC_PRICE,
)


def extract_price(line: str) -> Decimal | None:
    """Return the first price found by the ordered pattern chain."""
    for pattern in PRICE_PATTERNS:
        m = pattern.search(line)
        if m is None:
            continue
        try:
            return Decimal(m.group(1))
        except InvalidOperation:
            continue
    return None


def price_positions(line: str) -> list[int]:
    return sorted({m.start() for p in PRICE_PATTERNS for m in p.finditer(line)})


def strip_prices(text: str) -> str:
    for pattern in PRICE_PATTERNS:
        text = pattern.sub(" ", text)
    return text


def is_total_line(line: str) -> bool:
    lowered = line.lower()
    return any(k in lowered for k in TOTAL_KEYWORDS_EN) or any(
        k in line for k in TOTAL_KEYWORDS_ZH
    )


def extract_total(lines: Iterable[str]) -> Decimal | None:
    """Price on the first total/subtotal line that has one."""
    for line in lines:
        if is_total_line(line):
            price = extract_price(line)
            if price is not None:
                return price
    return None
