"""Known drink brands and the aliases they appear under on receipts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Brand:
    name: str  # English display name, also the canonical name
    name_zh: str = ""
    aliases: tuple[str, ...] = field(default_factory=tuple)


DEFAULT_BRANDS: tuple[Brand, ...] = (
    Brand("CoCo Fresh Tea & Juice", "都可",
          ("coco", "cocofresh", "coco fresh", "都可", "coco tea")),
    Brand("Gong Cha", "贡茶", ("gong cha", "gongcha", "贡茶", "貢茶")),
    Brand("Tiger Sugar", "老虎堂",
          ("tiger sugar", "tigersugar", "老虎堂", "tiger")),
    Brand("Kung Fu Tea", "功夫茶",
          ("kung fu tea", "kungfu tea", "kung fu", "kungfu", "功夫茶")),
    Brand("It's Boba Time", "波霸时光",
          ("boba time", "it's boba time", "its boba time", "波霸时光", "波霸時光")),
    Brand("Nayuki", "奈雪的茶", ("nayuki", "奈雪", "奈雪的茶")),
    Brand("ShareTea", "歇脚亭", ("sharetea", "share tea", "歇脚亭")),
    Brand("Happy Lemon", "快乐柠檬",
          ("happy lemon", "happylemon", "快乐柠檬", "快樂檸檬")),
    Brand("The Alley", "鹿角巷", ("the alley", "alley", "鹿角巷")),
    Brand("Yi Fang", "一芳", ("yi fang", "yifang", "一芳")),
)


class BrandCatalog(ABC):
    """Read-only source of known brands."""

    @abstractmethod
    def brands(self) -> list[Brand]:
        ...

    def aliases(self) -> list[tuple[tuple[str, ...], str]]:
        """``(aliases, canonical name)`` pairs in matching order."""
        return [(b.aliases, b.name) for b in self.brands() if b.aliases]


class StaticBrandCatalog(BrandCatalog):
    def __init__(self, brands: list[Brand] | tuple[Brand, ...] | None = None) -> None:
        self._brands = list(brands if brands is not None else DEFAULT_BRANDS)

    def brands(self) -> list[Brand]:
        return list(self._brands)


def resolve_brand(raw_name: str | None, brands: list[Brand]) -> str | None:
    """Resolve a brand string to a catalog brand's canonical name.

    Exact (case-insensitive) match on a display name or alias first, then a
    display name contained in *raw_name*, then *raw_name* as the leading
    word(s) of a display name ("Gong" but not "Tea"). Unknown brands
    resolve to ``None`` and are left for the caller to treat as a custom
    brand.
    """
    if not raw_name or not raw_name.strip():
        return None
    wanted = raw_name.strip().casefold()

    for brand in brands:
        names = {brand.name.casefold(), brand.name_zh.casefold()}
        names.update(a.casefold() for a in brand.aliases)
        if wanted in names - {""}:
            return brand.name

    for brand in brands:
        for name in _display_names(brand):
            if name in wanted:
                return brand.name

    for brand in brands:
        for name in _display_names(brand):
            if _is_leading_words(wanted, name):
                return brand.name
    return None


def _display_names(brand: Brand) -> list[str]:
    return [n for n in (brand.name.casefold(), brand.name_zh.casefold()) if n]


def _is_leading_words(prefix: str, name: str) -> bool:
    if not name.startswith(prefix) or prefix == name:
        return False
    # CJK names have no word breaks; a Latin prefix must end on one.
    following = name[len(prefix)]
    return not (following.isascii() and following.isalnum())
