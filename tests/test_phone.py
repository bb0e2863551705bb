"""Unit tests for the phone input mask."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import re
import pytest
from app.utils.phone import format_phone, digits_only


class TestFormatPhone:
    def test_full_mobile_number(self):
        assert format_phone("11987654321") == "(11) 98765-4321"

    def test_landline_uses_four_digit_prefix(self):
        assert format_phone("1133334444") == "(11) 3333-4444"

    @pytest.mark.parametrize("raw,expected", [
        ("", ""),
        ("1", "(1"),
        ("11", "(11"),
        ("119", "(11) 9"),
        ("119876", "(11) 9876"),
        ("1198765", "(11) 9876-5"),
    ])
    def test_partial_input_gives_partial_mask(self, raw, expected):
        assert format_phone(raw) == expected

    def test_strips_non_digits_and_truncates(self):
        assert format_phone("(11) 98765-43219999") == "(11) 98765-4321"
        assert format_phone("abc 11-98765.4321 xyz") == "(11) 98765-4321"

    def test_reformatting_masked_value_is_stable(self):
        masked = format_phone("11987654321")
        assert format_phone(masked) == masked

    @pytest.mark.parametrize("digits", [
        "11987654321",
        "00000000000",
        "99999999999",
        "21345678901",
        "85912340000",
        "47300011122",
    ])
    def test_only_mask_literals_at_fixed_positions(self, digits):
        for n in range(len(digits) + 1):
            out = format_phone(digits[:n])
            assert re.fullmatch(r"(\(\d{0,2}(\) \d{1,5}(-\d{1,4})?)?)?", out), out
            assert digits_only(out) == digits[:n]


class TestDigitsOnly:
    def test_none_and_empty(self):
        assert digits_only(None) == ""
        assert digits_only("") == ""

    def test_strips_everything_else(self):
        assert digits_only("+55 (11) 98765-4321") == "5511987654321"


class TestMaskPositions:
    @pytest.mark.parametrize("digits", ["1", "12", "123", "123456", "1234567", "1234567890", "12345678901"])
    def test_literals_sit_at_fixed_indexes(self, digits):
        out = format_phone(digits)
        literals = {i: c for i, c in enumerate(out) if not c.isdigit()}
        expected = {0: "("}
        if len(digits) > 2:
            expected.update({3: ")", 4: " "})
        if 7 <= len(digits) <= 10:
            expected[9] = "-"
        if len(digits) == 11:
            expected[10] = "-"
        assert literals == expected
