#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Input guards for check-digit algorithms

Every guard raises a :class:`~pycheckdigits.exceptions.CheckDigitError`
subclass when a constraint is violated and returns ``None`` otherwise.
Algorithms call these functions before any arithmetic so that a bad
input is rejected without partial computation.

Checked Constraints
-------------------
* Exact input length (:func:`length_equals`).
* Input length within an inclusive range (:func:`length_in_range`).
* Every character belongs to a named :class:`~pycheckdigits.models.descriptors.Alphabet`
  (:func:`check_alphabet` and the ``is_ascii_*`` shorthands).
"""

from __future__ import annotations

import logging

from pycheckdigits.exceptions import invalid_alphabet, invalid_length
from pycheckdigits.models.descriptors import Alphabet

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Length guards
# ---------------------------------------------------------------------------

def length_equals(s: str, expected: int) -> None:
    """Verify that *s* has exactly *expected* characters

    Raises
    ------
    InvalidLengthError
        With ``min == max == expected`` and ``got == len(s)``.

    Examples
    --------
    >>> length_equals("054052", 6)
    >>> length_equals("05405", 6)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pycheckdigits.exceptions.InvalidLengthError: ...
    """
    if len(s) != expected:
        raise invalid_length(expected, expected, len(s))


def length_in_range(s: str, minimum: int, maximum: int | None = None) -> None:
    """Verify that ``minimum <= len(s) <= maximum``

    Parameters
    ----------
    s : str
        Input string.
    minimum : int
        Smallest accepted length.
    maximum : int | None, optional
        Largest accepted length; ``None`` (default) means unbounded.

    Raises
    ------
    InvalidLengthError
        If the length is outside the range.
    """
    n = len(s)
    if n < minimum or (maximum is not None and n > maximum):
        raise invalid_length(minimum, maximum, n)


# ---------------------------------------------------------------------------
# Alphabet guards
# ---------------------------------------------------------------------------

def check_alphabet(s: str, alphabet: Alphabet) -> None:
    """Verify that every character of *s* belongs to *alphabet*

    Raises
    ------
    InvalidAlphabetError
        Carrying the alphabet's class name.
    """
    if not alphabet.contains(s):
        raise invalid_alphabet(alphabet.value)
    logger.debug("Input of length %d is in alphabet %s", len(s), alphabet.value)


def is_ascii_numeric(s: str) -> None:
    check_alphabet(s, Alphabet.ASCII_NUMERIC)


def is_ascii_alpha_upper(s: str) -> None:
    check_alphabet(s, Alphabet.ASCII_ALPHA_UPPER)


def is_ascii_alphanumeric_upper(s: str) -> None:
    check_alphabet(s, Alphabet.ASCII_ALPHANUMERIC_UPPER)


def is_ascii_alphanumeric_upper_no_vowels(s: str) -> None:
    check_alphabet(s, Alphabet.ASCII_ALPHANUMERIC_UPPER_NO_VOWELS)
