#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Character-to-value maps and long-number modulus for PyCheckDigits

All low-level numeric conversion lives here so that none of the algorithm
modules duplicates character arithmetic.

Value Schemes
-------------
==============================  ================================
Function                        Mapping
==============================  ================================
:func:`digit_value`             ``0-9 → 0-9``
:func:`digit_or_x_value`        ``0-9 → 0-9``, ``X → 10``
:func:`alpha_value`             ``A-Z → 0-25``
:func:`alphanum_value`          ``0-9 → 0-9``, ``A-Z → 10-35``
:func:`alphanum_or_star_value`  as above, ``* → 36``
==============================  ================================

The maps assume the caller has already validated the alphabet with
:mod:`pycheckdigits.utils.validation`.  A character outside the scheme is
an internal bug and raises ``AssertionError``, never a
:class:`~pycheckdigits.exceptions.CheckDigitError`.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from pycheckdigits.exceptions import invalid_length
from pycheckdigits.utils.constants import MAX_STRING_LEN
from pycheckdigits.utils.validation import is_ascii_numeric

logger = logging.getLogger(__name__)

CharValue = Callable[[str], int]
"""Signature shared by the character-to-value maps."""


def _unreachable(c: str, scheme: str) -> AssertionError:
    return AssertionError(
        f"Character {c!r} is outside the {scheme} scheme; "
        "the input should have been rejected by alphabet validation"
    )


# ---------------------------------------------------------------------------
# Character transforms
# ---------------------------------------------------------------------------

def digit_value(c: str) -> int:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    raise _unreachable(c, "numeric")


def digit_or_x_value(c: str) -> int:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if c == "X":
        return 10
    raise _unreachable(c, "numeric-or-X")


def alpha_value(c: str) -> int:
    if "A" <= c <= "Z":
        return ord(c) - ord("A")
    raise _unreachable(c, "alpha")


def alphanum_value(c: str) -> int:
    """Map ``0-9`` to 0-9 and ``A-Z`` to 10-35

    Examples
    --------
    >>> alphanum_value("7"), alphanum_value("A"), alphanum_value("Z")
    (7, 10, 35)
    """
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + 10
    raise _unreachable(c, "alphanumeric")


def alphanum_or_star_value(c: str) -> int:
    if c == "*":
        return 36
    if "0" <= c <= "9" or "A" <= c <= "Z":
        return alphanum_value(c)
    raise _unreachable(c, "alphanumeric-or-star")


# ---------------------------------------------------------------------------
# String transforms
# ---------------------------------------------------------------------------

def to_numeric_string(s: str, f: CharValue) -> str:
    """Concatenate the decimal rendering of ``f(c)`` for every character

    Values 0-9 contribute one digit, values 10 and above two.

    Examples
    --------
    >>> to_numeric_string("9A8C", alphanum_value)
    '910812'
    """
    return "".join(str(f(c)) for c in s)


def to_digit_array(s: str, f: CharValue = digit_value) -> np.ndarray:
    """Return ``f(c)`` for every character of *s* as an ``int64`` array

    Examples
    --------
    >>> to_digit_array("0540").tolist()
    [0, 5, 4, 0]
    """
    return np.fromiter((f(c) for c in s), dtype=np.int64, count=len(s))


# ---------------------------------------------------------------------------
# Modulus
# ---------------------------------------------------------------------------

def modulus(digits: str, m: int, *, big_integer: bool = False) -> int:
    """Compute ``int(digits) % m`` for a decimal string of any length

    Strings of up to :data:`~pycheckdigits.utils.constants.MAX_STRING_LEN`
    digits are reduced directly.  Longer strings are folded: the leading
    ``MAX_STRING_LEN`` digits are reduced, the remainder is written in
    front of the unreduced tail, and the process repeats until the string
    is short enough.  Because ``(a * 10**k + b) % m == ((a % m) * 10**k + b) % m``
    the folded result equals the exact one.

    Parameters
    ----------
    digits : str
        Non-empty string of ASCII decimal digits.
    m : int
        Positive modulus, small enough that a remainder fits in three
        digits (``m <= 1000``).
    big_integer : bool, optional
        Reduce long strings with a single arbitrary-precision ``int``
        instead of folding.  Both paths give identical results.

    Returns
    -------
    int
        The remainder in ``range(m)``.

    Raises
    ------
    InvalidAlphabetError
        If *digits* contains anything other than ``0-9``.
    InvalidLengthError
        If *digits* is empty.
    ValueError
        If *m* is not in ``1..=1000``.

    Examples
    --------
    >>> modulus("6735", 97)
    42
    >>> modulus("2356482816436572726364746826735", 97)
    10
    """
    if not 1 <= m <= 1000:
        raise ValueError(f"Modulus must be in the range 1..=1000, not {m}")
    if not digits:
        raise invalid_length(1, None, 0)
    is_ascii_numeric(digits)

    if len(digits) <= MAX_STRING_LEN:
        return int(digits) % m

    if big_integer:
        # Python caps str -> int conversion length; fold anything beyond it.
        if len(digits) <= 4000:
            return int(digits) % m
        logger.debug("Input of %d digits exceeds int() limit, folding", len(digits))

    s = digits
    while len(s) > MAX_STRING_LEN:
        s = f"{int(s[:MAX_STRING_LEN]) % m}{s[MAX_STRING_LEN:]}"
    return int(s) % m
