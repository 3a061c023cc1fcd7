"""Split receipt lines into drink items.

The segmenter walks the lines with two states:

* **scanning**: no item in progress; lines are skipped until an opening
  line (one containing a drink keyword) shows up.
* **accumulating**: an item is in progress. Its opening line is read
  first, then up to ``LOOKAHEAD_LINES`` following lines fill whatever is
  still unset. The window ends early at an opening line past the first
  look-ahead line.

The next opening line (or the end of input) finalizes the item with the
defaults policy and, for an opening line, immediately starts the next one.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Sequence

from ..models import (
    UNKNOWN_DRINK_NAME,
    Ice,
    ParsedReceiptItem,
    Size,
    Sugar,
    Topping,
    make_item,
)
from .matchers import LineReading, modifier_positions, read_line
from .patterns import LOOKAHEAD_LINES, NAME_ARTIFACTS
from .prices import extract_total, price_positions, strip_prices

logger = logging.getLogger(__name__)

_PUNCTUATION = " \t\r\n.,;:!?-_*/\\|·•()[]{}<>\"'@#~`+=、，。：；！？（）【】"


@dataclass
class _Draft:
    name: str
    price: Decimal | None = None
    size: Size | None = None
    sugar: Sugar | None = None
    ice: Ice | None = None
    topping: Topping | None = None

    def absorb(self, reading: LineReading) -> None:
        if self.size is None:
            self.size = reading.size
        if self.sugar is None:
            self.sugar = reading.sugar
        if self.ice is None:
            self.ice = reading.ice
        if self.topping is None:
            self.topping = reading.topping
        if self.price is None:
            self.price = reading.price

    def finalize(self) -> ParsedReceiptItem:
        return make_item(
            self.name,
            price=self.price,
            size=self.size,
            sugar_level=self.sugar,
            ice_level=self.ice,
            topping_level=self.topping,
        )


def clean_drink_name(line: str) -> str:
    """Reduce an opening line to the drink's name.

    The line is cut at the first modifier or price that follows some name
    text, then prices and quantity markers are dropped.
    """
    cut = len(line)
    for pos in sorted(set(modifier_positions(line)) | set(price_positions(line))):
        if line[:pos].strip(_PUNCTUATION):
            cut = pos
            break
    name = strip_prices(line[:cut])
    for artifact in NAME_ARTIFACTS:
        name = re.sub(re.escape(artifact), " ", name, flags=re.IGNORECASE)
    name = re.sub(r"\s+", " ", name).strip(_PUNCTUATION)
    return name or line.strip()


def segment_items(
    lines: Sequence[str],
    is_opening: Callable[[str], bool],
) -> list[ParsedReceiptItem]:
    """Turn non-blank receipt *lines* into finalized drink items."""
    items: list[ParsedReceiptItem] = []
    current: _Draft | None = None

    for index, line in enumerate(lines):
        if not is_opening(line):
            continue

        if current is not None:
            items.append(current.finalize())

        current = _Draft(name=clean_drink_name(line))
        current.absorb(read_line(line))

        window = lines[index + 1 : index + 1 + LOOKAHEAD_LINES]
        for offset, next_line in enumerate(window):
            if offset > 0 and is_opening(next_line):
                break
            current.absorb(read_line(next_line))

    if current is not None:
        items.append(current.finalize())

    if not items:
        fallback = _whole_text_item(lines)
        if fallback is not None:
            items.append(fallback)
    return items


def _whole_text_item(lines: Sequence[str]) -> ParsedReceiptItem | None:
    """Single "Unknown Drink" from the whole text, if anything is readable."""
    reading = read_line("\n".join(lines))
    total = extract_total(lines)
    if not reading.has_attribute and total is None:
        return None
    logger.debug("No drink lines found; using whole-text attributes")
    return make_item(
        UNKNOWN_DRINK_NAME,
        price=total,
        size=reading.size,
        sugar_level=reading.sugar,
        ice_level=reading.ice,
        topping_level=reading.topping,
    )
