"""Tests for drink nutrition estimates."""

import pytest

from milktea.receipt.models import Size, Sugar, Topping, make_item
from milktea.receipt.nutrition import MIN_CALORIES, estimate_base, estimate_item


class TestEstimateBase:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Taro Milk Tea", (450.0, 42.0)),
            ("Brown Sugar Boba", (450.0, 42.0)),
            ("Classic Milk Tea", (320.0, 26.0)),
            ("Matcha Latte", (320.0, 26.0)),
            ("Jasmine Green Tea", (280.0, 23.0)),
            ("Lemon Black Tea", (180.0, 18.0)),
            ("Mango Slush", (300.0, 25.0)),
        ],
    )
    def test_buckets(self, name, expected):
        assert estimate_base(name) == expected


class TestEstimateItem:
    def test_scaled_with_topping(self):
        item = make_item(
            "Classic Milk Tea",
            size=Size.LARGE,
            sugar_level=Sugar.EXTRA,
            topping_level=Topping.REGULAR,
        )
        estimate = estimate_item(item)
        assert estimate.calories == pytest.approx(320 * 1.3 + 100)
        assert estimate.sugar_g == pytest.approx(26 * 1.3)

    def test_defaults(self):
        estimate = estimate_item(make_item("Classic Milk Tea"))
        assert estimate.calories == pytest.approx(160.0)
        assert estimate.sugar_g == pytest.approx(13.0)

    def test_floor(self):
        item = make_item("Jasmine Green Tea", sugar_level=Sugar.NONE)
        estimate = estimate_item(item)
        assert estimate.calories == MIN_CALORIES
        assert estimate.sugar_g == 0.0
