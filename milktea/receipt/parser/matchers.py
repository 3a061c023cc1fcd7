"""Phrase matching over receipt lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Sequence, TypeVar

from ..models import Ice, Size, Sugar, Topping
from .patterns import (
    ICE_PATTERNS,
    ICE_SUFFIX_GUARD,
    PERCENTAGE_PATTERN,
    SIZE_PATTERNS,
    SUGAR_PATTERNS,
    SUGAR_PERCENT_BUCKETS,
    TOPPING_PATTERNS,
)
from .prices import extract_price

E = TypeVar("E", bound=Enum)

Span = tuple[int, int]

_PERCENT_RE = re.compile(PERCENTAGE_PATTERN)

# Characters that glue a Latin phrase to its neighbour ("0%" inside "50%").
_TOKEN_CHARS = "a-z0-9'"


def contains_cjk(text: str) -> bool:
    """True if *text* has any CJK unified ideograph (base, ext. A or B)."""
    for ch in text:
        cp = ord(ch)
        if (
            0x4E00 <= cp <= 0x9FFF
            or 0x3400 <= cp <= 0x4DBF
            or 0x20000 <= cp <= 0x2A6DF
        ):
            return True
    return False


def fold(text: str) -> str:
    """Lower-case *text* without changing its length.

    Characters whose lower-case form is longer than one code point are left
    untouched so that spans found in the folded copy index the original.
    """
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


@lru_cache(maxsize=None)
def _phrase_regex(phrase: str) -> re.Pattern[str]:
    if contains_cjk(phrase):
        return re.compile(re.escape(phrase))
    phrase = phrase.lower()
    head = f"(?<![{_TOKEN_CHARS}])" if re.match(r"[a-z0-9]", phrase) else ""
    tail = f"(?![{_TOKEN_CHARS}])" if re.search(r"[a-z0-9]$", phrase) else ""
    if re.fullmatch(r"\d{1,3}\s*%", phrase):
        tail = ICE_SUFFIX_GUARD
    return re.compile(head + re.escape(phrase) + tail)


def find_phrase(phrase: str, text: str, folded: str | None = None) -> Span | None:
    """Locate *phrase* in *text*; CJK phrases use the original case."""
    if contains_cjk(phrase):
        m = _phrase_regex(phrase).search(text)
    else:
        m = _phrase_regex(phrase).search(folded if folded is not None else fold(text))
    return m.span() if m else None


def match_table(
    table: Sequence[tuple[E, Sequence[str]]],
    text: str,
    folded: str | None = None,
) -> tuple[E, Span] | None:
    """Return the first ``(value, span)`` whose phrase occurs in *text*."""
    if folded is None:
        folded = fold(text)
    for value, phrases in table:
        for phrase in phrases:
            span = find_phrase(phrase, text, folded)
            if span is not None:
                return value, span
    return None


def sugar_from_percentage(text: str) -> tuple[Sugar, Span] | None:
    m = _PERCENT_RE.search(text)
    if m is None:
        return None
    level = sugar_for_percent(int(m.group(1)))
    if level is None:
        return None
    return level, m.span()


def sugar_for_percent(percent: int) -> Sugar | None:
    if percent < 0:
        return None
    for upper, level in SUGAR_PERCENT_BUCKETS:
        if percent <= upper:
            return level
    return None


def match_size(text: str) -> Size | None:
    hit = match_table(SIZE_PATTERNS, text)
    return hit[0] if hit else None


def match_sugar(text: str) -> Sugar | None:
    hit = match_table(SUGAR_PATTERNS, text)
    if hit is None:
        hit = sugar_from_percentage(fold(text))
    return hit[0] if hit else None


def match_ice(text: str) -> Ice | None:
    hit = match_table(ICE_PATTERNS, text)
    return hit[0] if hit else None


def match_topping(text: str) -> Topping | None:
    hit = match_table(TOPPING_PATTERNS, text)
    return hit[0] if hit else None


@dataclass
class LineReading:
    """Everything recognised on one line (or one block) of receipt text."""

    size: Size | None = None
    sugar: Sugar | None = None
    ice: Ice | None = None
    topping: Topping | None = None
    price: Decimal | None = None
    spans: list[Span] = field(default_factory=list)

    @property
    def has_attribute(self) -> bool:
        return any(
            v is not None for v in (self.size, self.sugar, self.ice, self.topping)
        )


def _blank(text: str, span: Span) -> str:
    start, end = span
    return text[:start] + " " * (end - start) + text[end:]


def read_line(line: str) -> LineReading:
    """Read sugar, size, ice, topping and price from *line*.

    Attributes are read in that order and each matched phrase is blanked
    out before the next attribute is tried, so one word ("regular") can
    only ever count once.
    """
    reading = LineReading(price=extract_price(line))
    text = line
    folded = fold(line)

    def consume(hit):
        nonlocal text, folded
        if hit is None:
            return None
        value, span = hit
        reading.spans.append(span)
        text = _blank(text, span)
        folded = _blank(folded, span)
        return value

    reading.sugar = consume(match_table(SUGAR_PATTERNS, text, folded))
    if reading.sugar is None:
        reading.sugar = consume(sugar_from_percentage(folded))
    reading.size = consume(match_table(SIZE_PATTERNS, text, folded))
    reading.ice = consume(match_table(ICE_PATTERNS, text, folded))
    reading.topping = consume(match_table(TOPPING_PATTERNS, text, folded))
    return reading


def modifier_positions(line: str) -> list[int]:
    """Start offsets of every size, sugar, ice or percentage phrase in *line*.

    Topping phrases are left out: "Bubble", "Boba" and "Pearl" usually belong
    to the drink name itself.
    """
    folded = fold(line)
    starts: list[int] = []
    for table in (SIZE_PATTERNS, SUGAR_PATTERNS, ICE_PATTERNS):
        for _, phrases in table:
            for phrase in phrases:
                regex = _phrase_regex(phrase)
                haystack = line if contains_cjk(phrase) else folded
                starts.extend(m.start() for m in regex.finditer(haystack))
    starts.extend(m.start() for m in _PERCENT_RE.finditer(folded))
    return sorted(set(starts))
