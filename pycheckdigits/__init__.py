#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyCheckDigits - check-digit algorithms for standardized identifiers

Compute and validate the trailing check characters of identifiers used in
finance and data interchange (GLN, GTIN, SSCC, LEI, ISIN, SEDOL, ...).
The engine is pure and stateless: a calculator validates the input
alphabet and length, reduces the data to a check value, and compares or
appends it.

Algorithms
----------
1. **Luhn** (ISO/IEC 7812-1 Annex B) — ISIN, payment cards
2. **GS1** mod-10 weighted — GTIN, GLN, SSCC, EAN, UPC
3. **ISO/IEC 7064** — Mod 11-2, 11,10, 27,26, 37-2, 37,36, 97-10,
   661-26, 1271-36
4. **SEDOL** weighted sum

Modules
-------
algorithms
    Calculator base class and the concrete algorithms.
models
    Immutable descriptors (alphabets, GS1 formats, ISO 7064 variants).
identifiers
    Identifier types protected by check characters.
utils
    Input validation and numeric transforms.

Examples
--------
>>> from pycheckdigits import CodeFormat, gs1
>>> calculator = gs1.get_algorithm_instance(CodeFormat.GLN)
>>> calculator.compute("943646579210")
4
>>> calculator.is_valid("9436465792104")
True
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pycheckdigits.algorithms import gs1, iso7064, luhn, sedol
from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.models.descriptors import Alphabet, CodeFormat, IsoVariant
from pycheckdigits.identifiers import (
    CheckedCode,
    GlobalLocationNumber,
    InternationalSecuritiesId,
    LegalEntityId,
    Sedol,
    UrnCheckedCode,
)
from pycheckdigits.utils.transforms import modulus
from pycheckdigits.exceptions import (
    PyCheckDigitsError,
    CheckDigitError,
    InvalidLengthError,
    InvalidAlphabetError,
    InvalidCheckDigitError,
    IdentifierError,
)

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "Calculator",
    "gs1",
    "iso7064",
    "luhn",
    "sedol",
    "modulus",
    # Descriptors
    "Alphabet",
    "CodeFormat",
    "IsoVariant",
    # Identifiers
    "CheckedCode",
    "GlobalLocationNumber",
    "InternationalSecuritiesId",
    "LegalEntityId",
    "Sedol",
    "UrnCheckedCode",
    # Exceptions
    "PyCheckDigitsError",
    "CheckDigitError",
    "InvalidLengthError",
    "InvalidAlphabetError",
    "InvalidCheckDigitError",
    "IdentifierError",
]
