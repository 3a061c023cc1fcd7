"""Tests for decoding AI model replies."""

import json
from decimal import Decimal

import pytest

from milktea.receipt.errors import AIDecodeError, ExtractionError
from milktea.receipt.models import Ice, Size, Sugar, Topping
from milktea.receipt.vision.normalizer import normalize_response, strip_code_fence


class TestStripCodeFence:
    def test_json_fence(self):
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_code_fence('  ```\n{"a": 1}\n```  ') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fence(' {"a": 1} ') == '{"a": 1}'


class TestNormalizeResponse:
    def test_full_reply(self):
        reply = json.dumps({
            "brandName": "Gong Cha",
            "items": [
                {
                    "drinkName": "Pearl Milk Tea",
                    "price": 5.5,
                    "size": "large",
                    "sugarLevel": "regular",
                    "iceLevel": "none",
                    "bubbleLevel": "extra",
                },
            ],
            "totalPrice": "5.50",
        })
        receipt = normalize_response(reply)

        assert receipt.raw_brand_name == "Gong Cha"
        assert receipt.total_price == Decimal("5.50")
        assert receipt.raw_text == reply
        item = receipt.items[0]
        assert item.drink_name == "Pearl Milk Tea"
        assert item.price == Decimal("5.5")
        assert item.size == Size.LARGE
        assert item.sugar_level == Sugar.REGULAR
        assert item.ice_level == Ice.NONE
        assert item.topping_level == Topping.EXTRA

    def test_fenced_reply(self):
        reply = '```json\n{"brandName": "Nayuki", "items": []}\n```'
        receipt = normalize_response(reply)
        assert receipt.raw_brand_name == "Nayuki"
        assert receipt.items == []
        assert receipt.raw_text == reply

    def test_missing_values_take_defaults(self):
        receipt = normalize_response('{"items": [{"drinkName": "Thai Tea"}]}')
        item = receipt.items[0]
        assert item.size == Size.MEDIUM
        assert item.sugar_level == Sugar.LESS
        assert item.ice_level == Ice.LESS
        assert item.topping_level == Topping.NONE
        assert item.price is None

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("S", Size.SMALL),
            ("m", Size.MEDIUM),
            ("L", Size.LARGE),
            ("Regular", Size.MEDIUM),
            ("Medium", Size.MEDIUM),
            ("huge", Size.MEDIUM),
        ],
    )
    def test_size_lookup(self, value, expected):
        reply = json.dumps({"items": [{"drinkName": "Tea", "size": value}]})
        assert normalize_response(reply).items[0].size == expected

    def test_unknown_sugar_defaults(self):
        reply = json.dumps({"items": [{"drinkName": "Tea", "sugarLevel": "50%"}]})
        assert normalize_response(reply).items[0].sugar_level == Sugar.LESS

    def test_topping_level_key(self):
        reply = json.dumps({"items": [{"drinkName": "Tea", "toppingLevel": "regular"}]})
        assert normalize_response(reply).items[0].topping_level == Topping.REGULAR

    def test_items_without_name_skipped(self):
        reply = json.dumps({
            "items": [{"price": 3}, {"drinkName": "  "}, "junk", {"drinkName": "Tea"}]
        })
        receipt = normalize_response(reply)
        assert [i.drink_name for i in receipt.items] == ["Tea"]

    def test_bad_prices_ignored(self):
        reply = json.dumps({
            "items": [{"drinkName": "Tea", "price": True}],
            "totalPrice": "n/a",
        })
        receipt = normalize_response(reply)
        assert receipt.items[0].price is None
        assert receipt.total_price is None

    def test_blank_brand(self):
        assert normalize_response('{"brandName": " "}').raw_brand_name is None

    def test_invalid_json(self):
        with pytest.raises(AIDecodeError):
            normalize_response("Sorry, I can't read this receipt.")

    def test_not_an_object(self):
        with pytest.raises(AIDecodeError):
            normalize_response("[1, 2, 3]")

    def test_items_not_a_list(self):
        with pytest.raises(AIDecodeError):
            normalize_response('{"items": "Milk Tea"}')

    def test_decode_error_is_extraction_error(self):
        assert issubclass(AIDecodeError, ExtractionError)
