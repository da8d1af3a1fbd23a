#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Luhn algorithm

Known as the "Luhn Formula", "The IBM Check" or "Mod 10", specified in
Annex B to ISO/IEC 7812-1 and ANSI X4.13.  It is the check scheme of
payment card numbers and of the ISIN.

Letters are accepted and expanded to their two-digit values before the
digits are processed (``A`` → ``1 0``, ``Z`` → ``3 5``), as the ISIN
standard requires.

Issues
------
It catches all single digit errors, but does not catch the transposition
``09`` ↔ ``90``.

Examples
--------
>>> calculator = get_algorithm_instance()
>>> calculator.compute("US037833100")
5
>>> calculator.is_valid("US0378331005")
True
"""

from __future__ import annotations

import logging

from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.utils.constants import LUHN_DOUBLED, LUHN_NAME
from pycheckdigits.utils.transforms import alphanum_value, to_digit_array, to_numeric_string
from pycheckdigits.utils.validation import is_ascii_alphanumeric_upper, length_in_range

logger = logging.getLogger(__name__)


class CheckDigitAlgorithm(Calculator):
    """Luhn check digit over upper-case alphanumeric data"""

    @property
    def name(self) -> str:
        return LUHN_NAME

    def compute(self, data: str) -> int:
        length_in_range(data, 1)
        is_ascii_alphanumeric_upper(data)

        # Rightmost data digit sits at an odd position of the full code.
        digits = to_digit_array(to_numeric_string(data, alphanum_value))[::-1]
        doubled = LUHN_DOUBLED[digits[0::2]]
        total = int(doubled.sum() + digits[1::2].sum())

        check = (10 - total % 10) % 10
        logger.debug("Luhn sum for %r is %d, check digit %d", data, total, check)
        return check


_SHARED_INSTANCE = CheckDigitAlgorithm()


def get_algorithm_instance() -> CheckDigitAlgorithm:
    """Return the shared, stateless Luhn calculator."""
    return _SHARED_INSTANCE

