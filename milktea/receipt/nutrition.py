"""Rough calorie and sugar estimates for extracted drinks."""

from __future__ import annotations

from dataclasses import dataclass

from .models import (
    ParsedReceiptItem,
    size_multiplier,
    sugar_multiplier,
    topping_calories,
)

# Floor for the final estimate; 0% sugar would otherwise zero it out.
MIN_CALORIES = 150.0


@dataclass
class NutritionEstimate:
    calories: float
    sugar_g: float


def _has(name: str, *keywords: str) -> bool:
    return any(k in name for k in keywords)


def estimate_base(drink_name: str) -> tuple[float, float]:
    """Base ``(kcal, sugar g)`` for a drink, guessed from its name."""
    name = drink_name.lower()

    if _has(name, "brown sugar", "cheese", "taro", "chocolate"):
        return 450.0, 42.0
    if _has(name, "milk tea", "latte", "thai", "matcha"):
        return 320.0, 26.0
    if _has(name, "oolong", "jasmine", "honeydew"):
        return 280.0, 23.0
    if ("tea" in name and "milk" not in name) or _has(name, "green", "lemon", "fruit"):
        return 180.0, 18.0
    return 300.0, 25.0


def estimate_item(item: ParsedReceiptItem) -> NutritionEstimate:
    """Scale the base estimate by size and sugar, then add the topping."""
    base_kcal, base_sugar = estimate_base(item.drink_name)
    scale = size_multiplier(item.size) * sugar_multiplier(item.sugar_level)
    calories = base_kcal * scale + topping_calories(item.topping_level)
    return NutritionEstimate(
        calories=max(calories, MIN_CALORIES),
        sugar_g=base_sugar * scale,
    )
