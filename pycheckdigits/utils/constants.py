#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Character tables, weights and algorithm parameters used across PyCheckDigits

Alphabet membership sets are ``frozenset`` instances so that a look-up per
character is O(1).  The ISO 7064 parameters follow ISO/IEC 7064:2003 [1]_;
the GS1 lengths follow the GS1 General Specifications [2]_.

References
----------
.. [1] ISO/IEC 7064:2003, *Information technology — Security techniques —
   Check character systems*, https://www.iso.org/standard/31531.html
.. [2] GS1 General Specifications, §7.9 "Check digit calculation".
"""

from __future__ import annotations

import numpy as np

# ---------------------------------------------------------------------------
# Character sets
# ---------------------------------------------------------------------------

DIGITS: str = "0123456789"
"""ASCII decimal digits in value order."""

UPPER: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""ASCII upper-case letters in value order."""

ASCII_NUMERIC: frozenset[str] = frozenset(DIGITS)
"""Members of the ``ascii-numeric`` alphabet."""

ASCII_ALPHA_UPPER: frozenset[str] = frozenset(UPPER)
"""Members of the ``ascii-alpha-upper`` alphabet."""

ASCII_ALPHANUMERIC_UPPER: frozenset[str] = ASCII_NUMERIC | ASCII_ALPHA_UPPER
"""Members of the ``ascii-alphanumeric-upper`` alphabet."""

ASCII_ALPHANUMERIC_UPPER_NO_VOWELS: frozenset[str] = ASCII_NUMERIC | frozenset(
    "BCD" "FGH" "JKLMN" "PQRST" "VWXYZ"
)
"""Members of the ``ascii-alphanumeric-upper-no-vowels`` alphabet.

Built from the literal ranges ``B-D F-H J-N P-T V-Z``.
"""

# ---------------------------------------------------------------------------
# Modulus arithmetic
# ---------------------------------------------------------------------------

MAX_STRING_LEN: int = len(str(2**64 - 1)) - 3
"""Longest decimal string reduced directly by :func:`~pycheckdigits.utils.transforms.modulus`.

Three digits below the width of the largest unsigned 64-bit value, so that
a remainder prefix of up to three digits can be folded into the next chunk.
"""

# ---------------------------------------------------------------------------
# Luhn
# ---------------------------------------------------------------------------

LUHN_DOUBLED: np.ndarray = np.array([0, 2, 4, 6, 8, 1, 3, 5, 7, 9], dtype=np.int64)
"""Digit sum of ``2 * d`` indexed by *d*."""

LUHN_NAME: str = "Luhn Algorithm (ISO/IEC 7812, Part 1, Annex B)"

# ---------------------------------------------------------------------------
# GS1
# ---------------------------------------------------------------------------

GS1_WEIGHTS: tuple[int, int] = (3, 1)
"""Weights applied right-to-left, starting at the rightmost data digit."""

GS1_CODE_FORMATS: dict[str, dict[str, int | str]] = {
    "GTIN_8":      {"length": 8,  "name": "GS1 GTIN-8"},
    "GTIN_12":     {"length": 12, "name": "GS1 GTIN-12"},
    "GTIN_13":     {"length": 13, "name": "GS1 GTIN-13"},
    "GTIN_14":     {"length": 14, "name": "GS1 GTIN-14"},
    "GLN":         {"length": 13, "name": "GS1 GLN"},
    "SSCC":        {"length": 18, "name": "GS1 SSCC"},
    "LEGACY_EAN_8":  {"length": 8,  "name": "GS1 EAN-8"},
    "LEGACY_EAN_13": {"length": 13, "name": "GS1 EAN-13"},
    "LEGACY_UPC_A":  {"length": 12, "name": "GS1 UPC-A"},
}
"""Total length (data + check digit) and display name per GS1 code format."""

# ---------------------------------------------------------------------------
# SEDOL
# ---------------------------------------------------------------------------

SEDOL_WEIGHTS: np.ndarray = np.array([1, 3, 1, 7, 3, 9], dtype=np.int64)
"""Positional weights, left to right."""

SEDOL_DATA_LENGTH: int = 6

SEDOL_NAME: str = "Stock Exchange Daily Official List (SEDOL)"

# ---------------------------------------------------------------------------
# ISO/IEC 7064
# ---------------------------------------------------------------------------

ISO_7064_VARIANTS: dict[str, dict[str, object]] = {
    "MOD_11_2": {
        "name": "ISO 7064 - MOD 11-2",
        "system": "pure",
        "modulus": 11,
        "radix": 2,
        "width": 1,
        "alphabet": "ascii-numeric",
        "check_chars": DIGITS + "X",
    },
    "MOD_11_10": {
        "name": "ISO 7064 - MOD 11,10",
        "system": "hybrid",
        "modulus": 10,
        "radix": 2,
        "width": 1,
        "alphabet": "ascii-numeric",
        "check_chars": DIGITS,
    },
    "MOD_27_26": {
        "name": "ISO 7064 - MOD 27,26",
        "system": "hybrid",
        "modulus": 26,
        "radix": 2,
        "width": 1,
        "alphabet": "ascii-alpha-upper",
        "check_chars": UPPER,
    },
    "MOD_37_2": {
        "name": "ISO 7064 - MOD 37-2",
        "system": "pure",
        "modulus": 37,
        "radix": 2,
        "width": 1,
        "alphabet": "ascii-alphanumeric-upper",
        "check_chars": DIGITS + UPPER + "*",
    },
    "MOD_37_36": {
        "name": "ISO 7064 - MOD 37,36",
        "system": "hybrid",
        "modulus": 36,
        "radix": 2,
        "width": 1,
        "alphabet": "ascii-alphanumeric-upper",
        "check_chars": DIGITS + UPPER,
    },
    "MOD_97_10": {
        "name": "ISO 7064 - MOD 97-10",
        "system": "pure",
        "modulus": 97,
        "radix": 10,
        "width": 2,
        "alphabet": "ascii-alphanumeric-upper",
        "check_chars": DIGITS,
    },
    "MOD_661_26": {
        "name": "ISO 7064 - MOD 661-26",
        "system": "pure",
        "modulus": 661,
        "radix": 26,
        "width": 2,
        "alphabet": "ascii-alpha-upper",
        "check_chars": UPPER,
    },
    "MOD_1271_36": {
        "name": "ISO 7064 - MOD 1271-36",
        "system": "pure",
        "modulus": 1271,
        "radix": 36,
        "width": 2,
        "alphabet": "ascii-alphanumeric-upper",
        "check_chars": DIGITS + UPPER,
    },
}
"""Parameters per ISO 7064 variant.

``modulus`` is *M* (for hybrid systems the *M* of "Mod M+1,M"), ``radix``
is *r*, ``width`` the number of check characters, ``alphabet`` the data
alphabet and ``check_chars`` the check characters in value order.
"""
