#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
SEDOL check digit

The Stock Exchange Daily Official List number issued by the London Stock
Exchange is six characters followed by one check digit.  Letters take the
values ``A=10 … Z=35``; vowels are never issued.

Examples
--------
>>> calculator = get_algorithm_instance()
>>> calculator.compute("054052")
8
>>> calculator.is_valid("0540528")
True
"""

from __future__ import annotations

import logging

import numpy as np

from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.utils.constants import SEDOL_DATA_LENGTH, SEDOL_NAME, SEDOL_WEIGHTS
from pycheckdigits.utils.transforms import alphanum_value, to_digit_array
from pycheckdigits.utils.validation import (
    is_ascii_alphanumeric_upper_no_vowels,
    length_equals,
)

logger = logging.getLogger(__name__)


class CheckDigitAlgorithm(Calculator):
    """Weighted-sum check digit defined for SEDOL numbers"""

    @property
    def name(self) -> str:
        return SEDOL_NAME

    def compute(self, data: str) -> int:
        length_equals(data, SEDOL_DATA_LENGTH)
        is_ascii_alphanumeric_upper_no_vowels(data)

        total = int(np.dot(to_digit_array(data, alphanum_value), SEDOL_WEIGHTS))
        check = (10 - total % 10) % 10
        logger.debug("SEDOL sum for %r is %d, check digit %d", data, total, check)
        return check


_SHARED_INSTANCE = CheckDigitAlgorithm()


def get_algorithm_instance() -> CheckDigitAlgorithm:
    """Return the shared, stateless SEDOL calculator."""
    return _SHARED_INSTANCE
