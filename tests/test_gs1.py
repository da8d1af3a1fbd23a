#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""Tests for the GS1 mod-10 calculator"""

from __future__ import annotations

import pytest

from pycheckdigits.algorithms import gs1
from pycheckdigits.exceptions import (
    InvalidAlphabetError,
    InvalidCheckDigitError,
    InvalidLengthError,
)
from pycheckdigits.models.descriptors import CodeFormat


class TestCodeFormats:
    """Format table"""

    @pytest.mark.parametrize(
        "fmt, length",
        [
            (CodeFormat.GTIN_8, 8),
            (CodeFormat.GTIN_12, 12),
            (CodeFormat.GTIN_13, 13),
            (CodeFormat.GTIN_14, 14),
            (CodeFormat.GLN, 13),
            (CodeFormat.SSCC, 18),
            (CodeFormat.LEGACY_EAN_8, 8),
            (CodeFormat.LEGACY_EAN_13, 13),
            (CodeFormat.LEGACY_UPC_A, 12),
        ],
    )
    def test_length(self, fmt: CodeFormat, length: int) -> None:
        assert fmt.length == length
        assert gs1.get_algorithm_instance(fmt).length == length

    def test_names(self) -> None:
        assert gs1.get_algorithm_instance(CodeFormat.GLN).name == "GS1 GLN"
        assert gs1.get_algorithm_instance(CodeFormat.LEGACY_UPC_A).name == "GS1 UPC-A"

    def test_instances_are_shared(self) -> None:
        assert gs1.get_algorithm_instance(CodeFormat.SSCC) is gs1.get_algorithm_instance(
            CodeFormat.SSCC
        )


class TestGs1Compute:
    """Reference values"""

    @pytest.mark.parametrize(
        "fmt, data, expected",
        [
            (CodeFormat.GLN, "943646579210", 4),
            (CodeFormat.GLN, "123456789012", 8),
            (CodeFormat.GLN, "210987654321", 0),
            (CodeFormat.GTIN_13, "400638133393", 1),
            (CodeFormat.LEGACY_EAN_13, "400638133393", 1),
            (CodeFormat.GTIN_12, "03600029145", 2),
            (CodeFormat.LEGACY_UPC_A, "03600029145", 2),
            (CodeFormat.GTIN_8, "9638507", 4),
            (CodeFormat.SSCC, "10614141123456789", 7),
        ],
    )
    def test_known_values(self, fmt: CodeFormat, data: str, expected: int) -> None:
        assert gs1.get_algorithm_instance(fmt).compute(data) == expected

    def test_leading_zero_gtin_14(self) -> None:
        # Zero-padding a GTIN-13 to 14 digits keeps its check digit
        gtin14 = gs1.get_algorithm_instance(CodeFormat.GTIN_14)
        assert gtin14.compute("0400638133393") == 1

    def test_single_digit_substitution_detected(self, gln) -> None:
        base = "943646579210"
        for i in range(len(base)):
            for d in "0123456789":
                if d == base[i]:
                    continue
                changed = base[:i] + d + base[i + 1:]
                assert gln.compute(changed) != gln.compute(base)


class TestGs1Validate:
    def test_valid(self, gln) -> None:
        gln.validate("9436465792104")
        assert gln.is_valid("2109876543210")

    def test_create(self, gln) -> None:
        assert gln.create("123456789012") == "1234567890128"

    def test_wrong_check_digit(self, gln) -> None:
        with pytest.raises(InvalidCheckDigitError) as info:
            gln.validate("9436465792109")
        assert (info.value.expecting, info.value.got) == ("4", "9")

    @pytest.mark.parametrize("data, got", [("94364657921", 11), ("9436465792101", 13), ("", 0)])
    def test_wrong_length(self, gln, data: str, got: int) -> None:
        with pytest.raises(InvalidLengthError) as info:
            gln.compute(data)
        assert info.value == InvalidLengthError(12, 12, got)

    def test_validate_short_code(self, gln) -> None:
        with pytest.raises(InvalidLengthError) as info:
            gln.validate("943646579210")
        assert info.value.got == 11

    def test_non_numeric(self, gln) -> None:
        with pytest.raises(InvalidAlphabetError) as info:
            gln.compute("94364657921A")
        assert info.value.alphabet == "ascii-numeric"
