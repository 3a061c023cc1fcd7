"""Brand detection from raw receipt text."""

from __future__ import annotations

from typing import Sequence

from ..catalog import DEFAULT_BRANDS
from .matchers import contains_cjk
from .patterns import DRINK_KEYWORDS_EN, DRINK_KEYWORDS_ZH

AliasTable = Sequence[tuple[Sequence[str], str]]


def _alias_in(alias: str, text: str, lowered: str) -> bool:
    if contains_cjk(alias):
        return alias in text
    return alias.lower() in lowered


def has_drink_keyword(text: str) -> bool:
    lowered = text.lower()
    return any(k in lowered for k in DRINK_KEYWORDS_EN) or any(
        k in text for k in DRINK_KEYWORDS_ZH
    )


class BrandMatcher:
    """First-alias-wins containment match against a brand alias table."""

    def __init__(self, aliases: AliasTable | None = None) -> None:
        if aliases is None:
            aliases = [(b.aliases, b.name) for b in DEFAULT_BRANDS]
        self._aliases = [(tuple(names), canonical) for names, canonical in aliases]

    def match(self, text: str) -> str | None:
        lowered = text.lower()
        for names, canonical in self._aliases:
            for alias in names:
                if _alias_in(alias, text, lowered):
                    return canonical
        return None

    def is_brand_header(self, line: str) -> bool:
        """True if *line* names a brand and nothing drink-like besides it.

        "CoCo Fresh Tea & Juice" is a header even though it contains "tea";
        "Gong Cha Milk Tea" is not.
        """
        brand = self.match(line)
        if brand is None:
            return False
        names = next(n for n, c in self._aliases if c == brand)
        rest = line.lower()
        for name in sorted({*names, brand}, key=len, reverse=True):
            rest = rest.replace(name.lower(), " ")
        return not has_drink_keyword(rest)
