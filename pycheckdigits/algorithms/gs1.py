#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
GS1 mod-10 weighted check digit

Shared by every GS1 identification key with a numeric check digit: GTIN
(8, 12, 13 and 14 digits), GLN, SSCC and the legacy EAN-8, EAN-13 and
UPC-A names.  The data length is fixed by the
:class:`~pycheckdigits.models.descriptors.CodeFormat`.

Algorithm
---------
1. Walk the data digits right to left.
2. Multiply the rightmost digit by 3, the next by 1, and so on.
3. The check digit brings the weighted sum up to the next multiple of 10.

Examples
--------
>>> calculator = get_algorithm_instance(CodeFormat.GLN)
>>> calculator.compute("943646579210")
4
>>> calculator.is_valid("9436465792104")
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.models.descriptors import CodeFormat
from pycheckdigits.utils.constants import GS1_WEIGHTS
from pycheckdigits.utils.transforms import to_digit_array
from pycheckdigits.utils.validation import is_ascii_numeric, length_equals

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class CheckDigitAlgorithm(Calculator):
    """GS1 check digit for one :class:`CodeFormat`

    Parameters
    ----------
    code_format : CodeFormat
        The GS1 key type; fixes the expected data length.
    """

    code_format: CodeFormat
    length: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", self.code_format.length)

    @property
    def name(self) -> str:
        return self.code_format.display_name

    def compute(self, data: str) -> int:
        length_equals(data, self.length - self.check_digit_width)
        is_ascii_numeric(data)

        digits = to_digit_array(data)[::-1]
        weights = np.resize(np.array(GS1_WEIGHTS, dtype=np.int64), digits.size)
        remainder = int(np.dot(digits, weights)) % 10

        check = 0 if remainder == 0 else 10 - remainder
        logger.debug("%s check digit for %r is %d", self.name, data, check)
        return check


_INSTANCES: dict[CodeFormat, CheckDigitAlgorithm] = {
    code_format: CheckDigitAlgorithm(code_format) for code_format in CodeFormat
}


def get_algorithm_instance(code_format: CodeFormat) -> CheckDigitAlgorithm:
    """Return the shared calculator for *code_format*."""
    return _INSTANCES[code_format]
