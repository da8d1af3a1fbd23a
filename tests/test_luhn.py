#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""Tests for the Luhn calculator"""

from __future__ import annotations

import pytest

from pycheckdigits.algorithms import luhn
from pycheckdigits.exceptions import (
    InvalidAlphabetError,
    InvalidCheckDigitError,
    InvalidLengthError,
)


class TestLuhnCompute:
    """Published reference values"""

    @pytest.mark.parametrize(
        "data, expected",
        [
            ("7992739871", 3),
            ("US037833100", 5),   # Apple ISIN
            ("DE000716460", 0),   # SAP ISIN
            ("GB000237400", 6),
            ("03783310", 0),
            ("0", 0),
            ("1", 8),
        ],
    )
    def test_known_values(self, luhn_calc, data: str, expected: int) -> None:
        assert luhn_calc.compute(data) == expected

    def test_letters_expand_to_two_digits(self, luhn_calc) -> None:
        # "U" -> 30, "S" -> 28
        assert luhn_calc.compute("US037833100") == luhn_calc.compute("3028037833100")

    def test_undetected_transposition(self, luhn_calc) -> None:
        assert luhn_calc.compute("09") == luhn_calc.compute("90")


class TestLuhnValidate:
    def test_valid(self, luhn_calc) -> None:
        luhn_calc.validate("US0378331005")
        assert luhn_calc.is_valid("79927398713")

    def test_wrong_check_digit(self, luhn_calc) -> None:
        with pytest.raises(InvalidCheckDigitError) as info:
            luhn_calc.validate("US0378331009")
        assert info.value == InvalidCheckDigitError("5", "9")

    def test_create(self, luhn_calc) -> None:
        assert luhn_calc.create("US037833100") == "US0378331005"

    def test_empty_data(self, luhn_calc) -> None:
        with pytest.raises(InvalidLengthError) as info:
            luhn_calc.compute("")
        assert info.value == InvalidLengthError(1, None, 0)

    @pytest.mark.parametrize("data", ["us037833100", "US-37833100", "1234 5678"])
    def test_bad_alphabet(self, luhn_calc, data: str) -> None:
        with pytest.raises(InvalidAlphabetError) as info:
            luhn_calc.compute(data)
        assert info.value.alphabet == "ascii-alphanumeric-upper"

    def test_shared_instance(self) -> None:
        assert luhn.get_algorithm_instance() is luhn.get_algorithm_instance()

    def test_name(self, luhn_calc) -> None:
        assert luhn_calc.name == "Luhn Algorithm (ISO/IEC 7812, Part 1, Annex B)"
        assert luhn_calc.check_digit_width == 1
