#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ISO/IEC 7064:2003 check character systems

Implements the eight systems of *Information technology — Security
techniques — Check character systems* [1]_, selected by
:class:`~pycheckdigits.models.descriptors.IsoVariant`.

Pure Systems (``Mod M-r``)
--------------------------
Mod 11-2, Mod 37-2, Mod 97-10, Mod 661-26 and Mod 1271-36.  With the data
values ``a_1 … a_n`` the recursive method is::

    p = 0
    for a in data:           p = ((p + a) * r) mod M
    for each extra check:    p = (p * r) mod M
    check = (M + 1 - p) mod M

A two-character check value *v* is written as ``v // r`` then ``v % r``.

Mod 97-10 is computed the way ISO 17442 (LEI) and ISO 13616 (IBAN) use
it: letters are first expanded to their two-digit values, ``"00"`` is
appended, and the check value is ``98 - (n mod 97)``.

Hybrid Systems (``Mod M+1,M``)
------------------------------
Mod 11,10, Mod 27,26 and Mod 37,36::

    p = M / 2
    for a in data:           p = ((p or M) * 2 mod (M + 1) + a) mod M
    check = (M + 1 - (p or M) * 2 mod (M + 1)) mod M

References
----------
.. [1] ISO/IEC 7064:2003, https://www.iso.org/standard/31531.html
.. [2] Code of Federal Regulations, Title 12, Appendix C to Part 1003 —
   Procedures for Generating a Check Digit and Validating a ULI.

Examples
--------
>>> lei = get_algorithm_instance(IsoVariant.MOD_97_10)
>>> lei.create("54930084UKLVMY22DS")
'54930084UKLVMY22DS16'
>>> get_algorithm_instance(IsoVariant.MOD_11_2).create("079")
'079X'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.models.descriptors import Alphabet, IsoVariant
from pycheckdigits.utils.transforms import (
    CharValue,
    alpha_value,
    alphanum_value,
    digit_value,
    modulus,
    to_numeric_string,
)
from pycheckdigits.utils.validation import check_alphabet, length_in_range

logger = logging.getLogger(__name__)

_VALUE_OF: dict[Alphabet, CharValue] = {
    Alphabet.ASCII_NUMERIC: digit_value,
    Alphabet.ASCII_ALPHA_UPPER: alpha_value,
    Alphabet.ASCII_ALPHANUMERIC_UPPER: alphanum_value,
}


@dataclass(frozen=True, repr=False)
class CheckDigitAlgorithm(Calculator):
    """Check characters of one ISO 7064 system

    Parameters
    ----------
    variant : IsoVariant
        The system to apply.
    """

    variant: IsoVariant

    @property
    def name(self) -> str:
        return self.variant.display_name

    @property
    def check_digit_width(self) -> int:
        return self.variant.check_digits

    def compute(self, data: str) -> int:
        variant = self.variant
        length_in_range(data, 1)
        check_alphabet(data, variant.alphabet)

        if variant is IsoVariant.MOD_97_10:
            check = _mod_97_10(data)
        else:
            values = [_VALUE_OF[variant.alphabet](c) for c in data]
            if variant.is_pure:
                check = _pure_system(values, variant.modulus, variant.radix, variant.check_digits)
            else:
                check = _hybrid_system(values, variant.modulus)

        logger.debug("%s check value for %r is %d", self.name, data, check)
        return check

    def format_check_value(self, value: int) -> str:
        """Render *value* with the variant's check characters

        Numeric two-digit systems are zero-padded; other systems index
        into the check character set, ``X`` standing for 10 in Mod 11-2
        and ``*`` for 36 in Mod 37-2.
        """
        variant = self.variant
        if variant is IsoVariant.MOD_97_10:
            return super().format_check_value(value)
        chars = variant.check_chars
        if variant.check_digits == 1:
            return chars[value]
        high, low = divmod(value, variant.radix)
        return f"{chars[high]}{chars[low]}"


# ---------------------------------------------------------------------------
# Recurrences
# ---------------------------------------------------------------------------

def _mod_97_10(data: str) -> int:
    return 98 - modulus(f"{to_numeric_string(data, alphanum_value)}00", 97)


def _pure_system(values: list[int], m: int, r: int, width: int) -> int:
    p = 0
    for a in values:
        p = ((p + a) * r) % m
    for _ in range(width - 1):
        p = (p * r) % m
    return (m + 1 - p) % m


def _hybrid_system(values: list[int], m: int) -> int:
    p = m // 2
    for a in values:
        p = (((p or m) * 2) % (m + 1) + a) % m
    return (m + 1 - ((p or m) * 2) % (m + 1)) % m


_INSTANCES: dict[IsoVariant, CheckDigitAlgorithm] = {
    variant: CheckDigitAlgorithm(variant) for variant in IsoVariant
}


def get_algorithm_instance(variant: IsoVariant) -> CheckDigitAlgorithm:
    """Return the shared calculator for *variant*."""
    return _INSTANCES[variant]
