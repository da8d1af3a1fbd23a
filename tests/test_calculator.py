#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the shared Calculator behaviour

Runs the same properties against every registered calculator.
"""

from __future__ import annotations

import pytest

from pycheckdigits.algorithms import gs1, iso7064, luhn, sedol
from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.exceptions import (
    InvalidAlphabetError,
    InvalidCheckDigitError,
    InvalidLengthError,
)
from pycheckdigits.models.descriptors import CodeFormat, IsoVariant


class TestCalculatorProperties:
    """Properties every algorithm satisfies"""

    def test_deterministic(self, calculator_and_data) -> None:
        calc, data = calculator_and_data
        assert calc.compute(data) == calc.compute(data)

    def test_round_trip(self, calculator_and_data) -> None:
        calc, data = calculator_and_data
        code = calc.create(data)
        assert code.startswith(data)
        assert len(code) == len(data) + calc.check_digit_width
        calc.validate(code)
        assert calc.is_valid(code)

    def test_rendered_width(self, calculator_and_data) -> None:
        calc, data = calculator_and_data
        assert len(calc.format_check_value(calc.compute(data))) == calc.check_digit_width

    def test_altered_check_rejected(self, calculator_and_data) -> None:
        calc, data = calculator_and_data
        code = calc.create(data)
        check = code[len(data):]
        replacement = "0" * calc.check_digit_width if check != "0" * calc.check_digit_width else "1" * calc.check_digit_width
        with pytest.raises(InvalidCheckDigitError) as info:
            calc.validate(data + replacement)
        assert info.value.expecting == check
        assert info.value.got == replacement
        assert not calc.is_valid(data + replacement)

    def test_lowercase_rejected(self, calculator_and_data) -> None:
        calc, data = calculator_and_data
        with pytest.raises(InvalidAlphabetError):
            calc.compute(data[:-1] + "a")

    def test_symbol_rejected(self, calculator_and_data) -> None:
        calc, data = calculator_and_data
        with pytest.raises(InvalidAlphabetError):
            calc.compute(data[:-1] + "#")

    def test_empty_rejected(self, calculator_and_data) -> None:
        calc, _ = calculator_and_data
        with pytest.raises(InvalidLengthError) as info:
            calc.compute("")
        assert info.value.got == 0
        assert not calc.is_valid("")

    def test_is_calculator(self, calculator_and_data) -> None:
        calc, _ = calculator_and_data
        assert isinstance(calc, Calculator)
        assert calc.name


class TestFixedLengthBoundaries:
    """One character short or long"""

    @pytest.mark.parametrize("code_format", list(CodeFormat), ids=lambda f: f.value)
    def test_gs1_boundaries(self, code_format: CodeFormat) -> None:
        calc = gs1.get_algorithm_instance(code_format)
        n = code_format.length - 1
        data = "12345678901234567"[:n]
        calc.compute(data)
        for bad in (data[:-1], data + "0"):
            with pytest.raises(InvalidLengthError) as info:
                calc.compute(bad)
            assert (info.value.min, info.value.max, info.value.got) == (n, n, len(bad))

    def test_sedol_boundaries(self, sedol_calc) -> None:
        for bad in ("05405", "0540520"):
            with pytest.raises(InvalidLengthError) as info:
                sedol_calc.compute(bad)
            assert (info.value.min, info.value.max, info.value.got) == (6, 6, len(bad))


class TestLuhnSubstitution:
    """Every single-digit change moves the Luhn check digit"""

    def test_numeric_substitution(self, luhn_calc) -> None:
        base = "7992739871"
        expected = luhn_calc.compute(base)
        for i in range(len(base)):
            for d in "0123456789":
                if d != base[i]:
                    changed = base[:i] + d + base[i + 1:]
                    assert luhn_calc.compute(changed) != expected


class TestAbstractBase:
    """Calculator cannot be instantiated without name and compute"""

    def test_abstract(self) -> None:
        with pytest.raises(TypeError):
            Calculator()

    def test_minimal_subclass(self) -> None:
        class Constant(Calculator):
            @property
            def name(self) -> str:
                return "constant"

            def compute(self, data: str) -> int:
                return 7

        calc = Constant()
        assert calc.create("abc") == "abc7"
        assert calc.is_valid("xyz7")
        assert not calc.is_valid("xyz8")
        assert repr(calc) == "<Constant 'constant'>"


class TestRepr:
    """All calculators print as ``<CheckDigitAlgorithm 'name'>``"""

    @pytest.mark.parametrize(
        "calc, name",
        [
            (luhn.get_algorithm_instance(), "Luhn Algorithm (ISO/IEC 7812, Part 1, Annex B)"),
            (sedol.get_algorithm_instance(), "Stock Exchange Daily Official List (SEDOL)"),
            (gs1.get_algorithm_instance(CodeFormat.GLN), "GS1 GLN"),
            (iso7064.get_algorithm_instance(IsoVariant.MOD_97_10), "ISO 7064 - MOD 97-10"),
        ],
    )
    def test_uniform_repr(self, calc: Calculator, name: str) -> None:
        assert repr(calc) == f"<CheckDigitAlgorithm {name!r}>"
