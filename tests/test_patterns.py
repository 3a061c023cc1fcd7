"""Tests for the bilingual attribute tables and matchers."""

import pytest

from milktea.receipt.models import Ice, Size, Sugar, Topping
from milktea.receipt.parser import (
    match_ice,
    match_size,
    match_sugar,
    match_topping,
    read_line,
    sugar_for_percent,
)
from milktea.receipt.parser.matchers import contains_cjk, find_phrase, match_table
from milktea.receipt.parser.patterns import (
    ICE_PATTERNS,
    SIZE_PATTERNS,
    SUGAR_PATTERNS,
    TOPPING_PATTERNS,
)


def _entries(table):
    return [(value, phrase) for value, phrases in table for phrase in phrases]


class TestTables:
    @pytest.mark.parametrize(
        "table",
        [SIZE_PATTERNS, SUGAR_PATTERNS, ICE_PATTERNS, TOPPING_PATTERNS],
        ids=["size", "sugar", "ice", "topping"],
    )
    def test_every_phrase_maps_to_its_own_value(self, table):
        for value, phrase in _entries(table):
            hit = match_table(table, phrase)
            assert hit is not None, phrase
            assert hit[0] == value, phrase

    def test_latin_phrases_match_case_insensitively(self):
        assert match_size("LARGE") == Size.LARGE
        assert match_ice("Less Ice") == Ice.LESS
        assert match_topping("EXTRA BOBA") == Topping.EXTRA


class TestPhraseBoundaries:
    def test_zero_percent_not_inside_fifty(self):
        assert match_sugar("50%") == Sugar.LESS

    def test_bare_m_only_as_token(self):
        assert match_size("Milk Tea") is None
        assert match_size("Milk Tea M") == Size.MEDIUM

    def test_bare_l_only_as_token(self):
        assert match_size("Oolong Tea") is None
        assert match_size("Oolong Tea L") == Size.LARGE

    def test_cjk_substring(self):
        assert find_phrase("少冰", "珍珠奶茶少冰") == (4, 6)

    def test_contains_cjk(self):
        assert contains_cjk("奶茶")
        assert not contains_cjk("milk tea")


class TestSugarPercentage:
    @pytest.mark.parametrize(
        "percent, expected",
        [
            (0, Sugar.NONE),
            (10, Sugar.NONE),
            (11, Sugar.LIGHT),
            (40, Sugar.LIGHT),
            (41, Sugar.LESS),
            (60, Sugar.LESS),
            (61, Sugar.REGULAR),
            (85, Sugar.REGULAR),
            (86, Sugar.EXTRA),
            (100, Sugar.EXTRA),
            (101, None),
        ],
    )
    def test_buckets(self, percent, expected):
        assert sugar_for_percent(percent) == expected

    def test_fallback_only_without_phrase(self):
        assert match_sugar("sugar 35%") == Sugar.LIGHT
        assert match_sugar("sweetness 120%") is None

    def test_phrase_wins_over_percentage(self):
        assert match_sugar("half sugar 90%") == Sugar.LESS


class TestReadLine:
    def test_word_counts_once(self):
        reading = read_line("Regular")
        assert reading.size == Size.MEDIUM
        assert reading.ice is None

    def test_mixed_line(self):
        reading = read_line("Large 50% no ice boba $6.50")
        assert reading.size == Size.LARGE
        assert reading.sugar == Sugar.LESS
        assert reading.ice == Ice.NONE
        assert reading.topping == Topping.REGULAR
        assert str(reading.price) == "6.50"

    def test_chinese_line(self):
        reading = read_line("大杯 半糖 少冰 珍珠")
        assert reading.size == Size.LARGE
        assert reading.sugar == Sugar.LESS
        assert reading.ice == Ice.LESS
        assert reading.topping == Topping.REGULAR

    def test_hot_means_no_ice(self):
        assert read_line("Hot").ice == Ice.NONE

    def test_nothing_found(self):
        reading = read_line("Thank you for visiting")
        assert reading.has_attribute is False
        assert reading.price is None

    @pytest.mark.parametrize(
        "line, ice",
        [
            ("Milk Tea 100% ice", Ice.REGULAR),
            ("Milk Tea 50% ice", Ice.LESS),
            ("0% ice", Ice.NONE),
            ("Milk Tea 0% ICE", Ice.NONE),
        ],
    )
    def test_ice_percentage_is_not_sugar(self, line, ice):
        reading = read_line(line)
        assert reading.ice == ice
        assert reading.sugar is None

    def test_sugar_and_ice_percentages_on_one_line(self):
        reading = read_line("Milk Tea 70% sugar 50% ice")
        assert reading.sugar == Sugar.REGULAR
        assert reading.ice == Ice.LESS

    def test_chinese_ice_percentage_is_not_sugar(self):
        assert read_line("50%冰").sugar is None

    def test_bare_percentage_still_sugar(self):
        assert read_line("Milk Tea 30%").sugar == Sugar.LIGHT

    @pytest.mark.parametrize(
        "line, sugar",
        [
            ("Regular Sugar", Sugar.REGULAR),
            ("Standard Sugar", Sugar.REGULAR),
            ("Medium Sugar", Sugar.LESS),
            ("Med Sugar", Sugar.LESS),
        ],
    )
    def test_sugar_phrase_not_read_as_size(self, line, sugar):
        reading = read_line(line)
        assert reading.sugar == sugar
        assert reading.size is None
