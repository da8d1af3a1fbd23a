#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyCheckDigits tests

Provides the shared calculator instances and published reference codes
so that individual test modules do not rebuild them.
"""

from __future__ import annotations

import pytest

from pycheckdigits.algorithms import gs1, iso7064, luhn, sedol
from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.models.descriptors import CodeFormat, IsoVariant


@pytest.fixture
def gln() -> gs1.CheckDigitAlgorithm:
    """GS1 calculator bound to the GLN format (13 digits)"""
    return gs1.get_algorithm_instance(CodeFormat.GLN)


@pytest.fixture
def luhn_calc() -> luhn.CheckDigitAlgorithm:
    return luhn.get_algorithm_instance()


@pytest.fixture
def sedol_calc() -> sedol.CheckDigitAlgorithm:
    return sedol.get_algorithm_instance()


@pytest.fixture
def mod_97_10() -> iso7064.CheckDigitAlgorithm:
    return iso7064.get_algorithm_instance(IsoVariant.MOD_97_10)


@pytest.fixture(
    params=(
        [("luhn", luhn.get_algorithm_instance(), "US037833100")]
        + [("sedol", sedol.get_algorithm_instance(), "B0YBKJ")]
        + [
            (f"gs1-{fmt.value}", gs1.get_algorithm_instance(fmt), "12345678901234567"[: fmt.length - 1])
            for fmt in CodeFormat
        ]
        + [
            (f"iso-{variant.value}", iso7064.get_algorithm_instance(variant), data)
            for variant, data in (
                (IsoVariant.MOD_11_2, "0794"),
                (IsoVariant.MOD_11_10, "79462"),
                (IsoVariant.MOD_27_26, "ABCXYZ"),
                (IsoVariant.MOD_37_2, "G123489654321"),
                (IsoVariant.MOD_37_36, "A12425GABC1234002"),
                (IsoVariant.MOD_97_10, "54930084UKLVMY22DS"),
                (IsoVariant.MOD_661_26, "ISOSTANDARD"),
                (IsoVariant.MOD_1271_36, "ISO79"),
            )
        ]
    ),
    ids=lambda p: p[0],
)
def calculator_and_data(request) -> tuple[Calculator, str]:
    """Every shared calculator paired with a data string it accepts"""
    _, calc, data = request.param
    return calc, data
