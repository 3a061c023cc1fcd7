"""Turn an AI model's JSON reply into a :class:`ParsedReceipt`."""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, TypeVar

from ..errors import AIDecodeError
from ..models import (
    Ice,
    ParsedReceipt,
    ParsedReceiptItem,
    Size,
    Sugar,
    Topping,
    make_item,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_SIZE_ALIASES = {
    "s": Size.SMALL,
    "m": Size.MEDIUM,
    "l": Size.LARGE,
    "regular": Size.MEDIUM,
}


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence, if any."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json"):]
    elif cleaned.startswith("```"):
        cleaned = cleaned[len("```"):]
    if cleaned.endswith("```"):
        cleaned = cleaned[: -len("```")]
    return cleaned.strip()


def _lookup(enum_cls: type[E], value: Any, aliases: dict[str, E] | None = None) -> E | None:
    if not isinstance(value, str):
        return None
    key = value.strip().lower()
    for member in enum_cls:
        if member.value == key:
            return member
    if aliases:
        return aliases.get(key)
    return None


def _to_decimal(value: Any) -> Decimal | None:
    # bool is an int subclass; true/false are not prices
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip().lstrip("$¥￥"))
        except InvalidOperation:
            return None
    return None


def _item(raw: Any) -> ParsedReceiptItem | None:
    if not isinstance(raw, dict):
        return None
    name = raw.get("drinkName")
    if not isinstance(name, str) or not name.strip():
        return None
    topping = raw.get("bubbleLevel", raw.get("toppingLevel"))
    return make_item(
        name.strip(),
        price=_to_decimal(raw.get("price")),
        size=_lookup(Size, raw.get("size"), _SIZE_ALIASES),
        sugar_level=_lookup(Sugar, raw.get("sugarLevel")),
        ice_level=_lookup(Ice, raw.get("iceLevel")),
        topping_level=_lookup(Topping, topping),
    )


def normalize_response(text: str) -> ParsedReceipt:
    """Decode the model reply.

    Unknown or missing attribute values fall back to the defaults; items
    without a drink name are dropped.

    Raises:
        AIDecodeError: If the reply is not a JSON object of the expected shape.
    """
    try:
        data = json.loads(strip_code_fence(text))
    except (json.JSONDecodeError, TypeError, AttributeError) as e:
        raise AIDecodeError(f"Model reply is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise AIDecodeError(f"Expected a JSON object, got {type(data).__name__}")

    raw_items = data.get("items") or []
    if not isinstance(raw_items, list):
        raise AIDecodeError("'items' must be a list")

    items = [item for item in map(_item, raw_items) if item is not None]
    if len(items) != len(raw_items):
        logger.debug("Dropped %d item(s) without a drink name", len(raw_items) - len(items))

    brand = data.get("brandName")
    if not isinstance(brand, str) or not brand.strip():
        brand = None

    return ParsedReceipt(
        raw_brand_name=brand.strip() if brand else None,
        items=items,
        total_price=_to_decimal(data.get("totalPrice")),
        raw_text=text,
    )
