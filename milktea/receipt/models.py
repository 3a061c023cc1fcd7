"""Data types for receipt extraction results."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Sugar(str, Enum):
    NONE = "none"
    LIGHT = "light"  # 30%
    LESS = "less"  # 50%
    REGULAR = "regular"  # 70%
    EXTRA = "extra"  # 100%


class Ice(str, Enum):
    NONE = "none"
    LESS = "less"
    REGULAR = "regular"
    EXTRA = "extra"


class Topping(str, Enum):
    NONE = "none"
    REGULAR = "regular"
    EXTRA = "extra"


_SIZE_MULTIPLIERS: dict[Size, float] = {
    Size.SMALL: 0.8,
    Size.MEDIUM: 1.0,
    Size.LARGE: 1.3,
}

_SUGAR_MULTIPLIERS: dict[Sugar, float] = {
    Sugar.NONE: 0.0,
    Sugar.LIGHT: 0.3,
    Sugar.LESS: 0.5,
    Sugar.REGULAR: 0.7,
    Sugar.EXTRA: 1.0,
}

# kcal added on top of the scaled drink estimate
_TOPPING_CALORIES: dict[Topping, float] = {
    Topping.NONE: 0.0,
    Topping.REGULAR: 100.0,
    Topping.EXTRA: 150.0,
}


def size_multiplier(size: Size) -> float:
    return _SIZE_MULTIPLIERS[size]


def sugar_multiplier(sugar: Sugar) -> float:
    return _SUGAR_MULTIPLIERS[sugar]


def topping_calories(topping: Topping) -> float:
    return _TOPPING_CALORIES[topping]


# Defaults applied to any attribute neither path could determine.
DEFAULT_SIZE = Size.MEDIUM
DEFAULT_SUGAR = Sugar.LESS
DEFAULT_ICE = Ice.LESS
DEFAULT_TOPPING = Topping.NONE

UNKNOWN_DRINK_NAME = "Unknown Drink"


@dataclass
class ParsedReceiptItem:
    """A single drink line extracted from a receipt."""

    drink_name: str
    price: Decimal | None = None
    size: Size = DEFAULT_SIZE
    sugar_level: Sugar = DEFAULT_SUGAR
    ice_level: Ice = DEFAULT_ICE
    topping_level: Topping = DEFAULT_TOPPING

    def to_dict(self) -> dict:
        return {
            "drinkName": self.drink_name,
            "price": str(self.price) if self.price is not None else None,
            "size": self.size.value,
            "sugarLevel": self.sugar_level.value,
            "iceLevel": self.ice_level.value,
            "toppingLevel": self.topping_level.value,
        }


def make_item(
    drink_name: str,
    price: Decimal | None = None,
    size: Size | None = None,
    sugar_level: Sugar | None = None,
    ice_level: Ice | None = None,
    topping_level: Topping | None = None,
) -> ParsedReceiptItem:
    """Build an item, filling unset attributes from the defaults policy."""
    return ParsedReceiptItem(
        drink_name=drink_name,
        price=price,
        size=size if size is not None else DEFAULT_SIZE,
        sugar_level=sugar_level if sugar_level is not None else DEFAULT_SUGAR,
        ice_level=ice_level if ice_level is not None else DEFAULT_ICE,
        topping_level=(
            topping_level if topping_level is not None else DEFAULT_TOPPING
        ),
    )


@dataclass
class ParsedReceipt:
    raw_brand_name: str | None = None
    matched_brand_name: str | None = None
    items: list[ParsedReceiptItem] = field(default_factory=list)
    total_price: Decimal | None = None
    raw_text: str = ""

    @property
    def has_any_data(self) -> bool:
        return (
            self.raw_brand_name is not None
            or bool(self.items)
            or self.total_price is not None
        )

    def to_dict(self) -> dict:
        return {
            "brandName": self.raw_brand_name,
            "matchedBrandName": self.matched_brand_name,
            "items": [item.to_dict() for item in self.items],
            "totalPrice": (
                str(self.total_price) if self.total_price is not None else None
            ),
        }


@dataclass
class ReceiptProcessingResult:
    """Outcome of one scan, including which extraction path produced it."""

    receipt: ParsedReceipt
    used_fallback: bool
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None
