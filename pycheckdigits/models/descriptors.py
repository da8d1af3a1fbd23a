#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Algorithm descriptors for the check-digit engine

Descriptors are ``Enum`` members: they are created once at import time,
never mutated, and shared by every calculator instance.

Hierarchy
---------
::

    Alphabet     — accepted character class of a data string
    CodeFormat   — GS1 code type, fixes the total code length
    IsoVariant   — ISO 7064 system, fixes modulus, radix and width
"""

from __future__ import annotations

from enum import Enum

from pycheckdigits.utils.constants import (
    ASCII_ALPHA_UPPER,
    ASCII_ALPHANUMERIC_UPPER,
    ASCII_ALPHANUMERIC_UPPER_NO_VOWELS,
    ASCII_NUMERIC,
    GS1_CODE_FORMATS,
    ISO_7064_VARIANTS,
)


class Alphabet(Enum):
    """Character classes accepted as check-digit input

    The member value is the class name reported by
    :class:`~pycheckdigits.exceptions.InvalidAlphabetError`.

    Examples
    --------
    >>> Alphabet.ASCII_NUMERIC.contains("0123")
    True
    >>> Alphabet.ASCII_ALPHANUMERIC_UPPER_NO_VOWELS.contains("B0A")
    False
    """

    ASCII_NUMERIC = "ascii-numeric"
    ASCII_ALPHA_UPPER = "ascii-alpha-upper"
    ASCII_ALPHANUMERIC_UPPER = "ascii-alphanumeric-upper"
    ASCII_ALPHANUMERIC_UPPER_NO_VOWELS = "ascii-alphanumeric-upper-no-vowels"

    @property
    def members(self) -> frozenset[str]:
        """The exact set of characters in this class."""
        return _ALPHABET_MEMBERS[self]

    def contains(self, s: str) -> bool:
        """Return ``True`` if *every* character of *s* is in this class."""
        members = self.members
        return all(c in members for c in s)

    def __str__(self) -> str:
        return self.value


_ALPHABET_MEMBERS: dict[Alphabet, frozenset[str]] = {
    Alphabet.ASCII_NUMERIC: ASCII_NUMERIC,
    Alphabet.ASCII_ALPHA_UPPER: ASCII_ALPHA_UPPER,
    Alphabet.ASCII_ALPHANUMERIC_UPPER: ASCII_ALPHANUMERIC_UPPER,
    Alphabet.ASCII_ALPHANUMERIC_UPPER_NO_VOWELS: ASCII_ALPHANUMERIC_UPPER_NO_VOWELS,
}


class CodeFormat(Enum):
    """The GS1 code types sharing the mod-10 weighted check digit"""

    GTIN_8 = "GTIN_8"
    GTIN_12 = "GTIN_12"
    GTIN_13 = "GTIN_13"
    GTIN_14 = "GTIN_14"
    GLN = "GLN"
    SSCC = "SSCC"
    LEGACY_EAN_8 = "LEGACY_EAN_8"
    LEGACY_EAN_13 = "LEGACY_EAN_13"
    LEGACY_UPC_A = "LEGACY_UPC_A"

    @property
    def length(self) -> int:
        """Total code length, check digit included."""
        return int(GS1_CODE_FORMATS[self.value]["length"])

    @property
    def display_name(self) -> str:
        return str(GS1_CODE_FORMATS[self.value]["name"])

    def __str__(self) -> str:
        return self.display_name


class IsoVariant(Enum):
    """The check character systems defined by ISO/IEC 7064:2003

    Pure systems (``Mod M-r``) use a single modulus *M* and radix *r*;
    hybrid systems (``Mod M+1,M``) alternate between two moduli.

    * ``MOD_11_2``   — numeric data; the check character may be ``X``.
    * ``MOD_11_10``  — numeric data, numeric check digit.
    * ``MOD_27_26``  — ``A``-``Z`` only.
    * ``MOD_37_2``   — alphanumeric data; check character may be ``*``.
    * ``MOD_37_36``  — alphanumeric data and check character.
    * ``MOD_97_10``  — two decimal check digits.  Letters are expanded to
      their two-digit values first, as the LEI and IBAN standards do.
    * ``MOD_661_26`` — ``A``-``Z`` only, two check letters.
    * ``MOD_1271_36`` — alphanumeric, two check characters.
    """

    MOD_11_2 = "MOD_11_2"
    MOD_11_10 = "MOD_11_10"
    MOD_27_26 = "MOD_27_26"
    MOD_37_2 = "MOD_37_2"
    MOD_37_36 = "MOD_37_36"
    MOD_97_10 = "MOD_97_10"
    MOD_661_26 = "MOD_661_26"
    MOD_1271_36 = "MOD_1271_36"

    @property
    def _params(self) -> dict[str, object]:
        return ISO_7064_VARIANTS[self.value]

    @property
    def display_name(self) -> str:
        return str(self._params["name"])

    @property
    def check_digits(self) -> int:
        """Number of check characters produced."""
        return int(self._params["width"])  # type: ignore[call-overload]

    @property
    def is_pure(self) -> bool:
        return self._params["system"] == "pure"

    @property
    def modulus(self) -> int:
        return int(self._params["modulus"])  # type: ignore[call-overload]

    @property
    def radix(self) -> int:
        return int(self._params["radix"])  # type: ignore[call-overload]

    @property
    def alphabet(self) -> Alphabet:
        """Alphabet accepted for the data portion."""
        return Alphabet(self._params["alphabet"])

    @property
    def check_chars(self) -> str:
        """Check characters in value order."""
        return str(self._params["check_chars"])

    def __str__(self) -> str:
        return self.display_name
