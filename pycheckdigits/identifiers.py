#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Identifier types built on the check-digit engine

Each type is an immutable string value that can only be constructed from
a well-formed code with a correct check value.  Parse failures raise
:class:`~pycheckdigits.exceptions.IdentifierError`; when the failure came
from the engine the underlying
:class:`~pycheckdigits.exceptions.CheckDigitError` is chained as
``__cause__``.

Types
-----
==================================  ======  ==================
Type                                Length  Algorithm
==================================  ======  ==================
:class:`GlobalLocationNumber`       13      GS1 (GLN)
:class:`LegalEntityId`              20      ISO 7064 Mod 97-10
:class:`InternationalSecuritiesId`  12      Luhn
:class:`Sedol`                      7       SEDOL
==================================  ======  ==================

Examples
--------
>>> lei = LegalEntityId.parse("54930084UKLVMY22DS16")
>>> lei.local_operating_unit, lei.entity, lei.check_digits
('5493', '0084UKLVMY22DS', '16')
>>> GlobalLocationNumber.is_valid("9436465792109")
False
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pycheckdigits.algorithms import gs1, iso7064, luhn, sedol
from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.exceptions import CheckDigitError, IdentifierError
from pycheckdigits.models.descriptors import Alphabet, CodeFormat, IsoVariant

logger = logging.getLogger(__name__)


class CheckedCode(str):
    """Base for string identifiers protected by check characters

    Subclasses set :attr:`TYPE_NAME`, :attr:`LENGTH` and
    :attr:`CHECK_DIGIT_ALGORITHM`, and may extend :meth:`_check_format`
    with structural rules beyond what the algorithm enforces.
    """

    TYPE_NAME: ClassVar[str]
    LENGTH: ClassVar[int]
    CHECK_DIGIT_ALGORITHM: ClassVar[Calculator]

    __slots__ = ()

    def __new__(cls, value: str):
        return cls.parse(value)

    @classmethod
    def parse(cls, s: str):
        """Validate *s* and return it as an instance of this type

        Raises
        ------
        IdentifierError
            If the length, format or check value is wrong.
        """
        s = cls._normalize(s)
        if len(s) != cls.LENGTH:
            logger.warning(
                "%s must be %d characters long, not %d", cls.TYPE_NAME, cls.LENGTH, len(s)
            )
            raise IdentifierError(
                cls.TYPE_NAME, s, f"expecting {cls.LENGTH} characters, got {len(s)}"
            )
        cls._check_format(s)
        try:
            cls.CHECK_DIGIT_ALGORITHM.validate(s)
        except CheckDigitError as exc:
            raise IdentifierError(cls.TYPE_NAME, s, str(exc)) from exc
        return str.__new__(cls, s)

    @classmethod
    def is_valid(cls, s: str) -> bool:
        """Return ``True`` if :meth:`parse` accepts *s*."""
        try:
            cls.parse(s)
        except IdentifierError:
            return False
        return True

    @classmethod
    def _normalize(cls, s: str) -> str:
        return s

    @classmethod
    def _check_format(cls, s: str) -> None:
        pass

    @property
    def data_no_check_digit(self) -> str:
        """The code without its trailing check characters."""
        return str(self[: -self.CHECK_DIGIT_ALGORITHM.check_digit_width])

    @property
    def check_digit_as_str(self) -> str:
        """The trailing check characters."""
        return str(self[-self.CHECK_DIGIT_ALGORITHM.check_digit_width :])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class UrnCheckedCode(CheckedCode):
    """A :class:`CheckedCode` that also has a URN form, ``urn:<namespace>:<code>``

    The ``urn`` scheme and the namespace are matched case-insensitively
    when parsing.
    """

    URN_NAMESPACE: ClassVar[str]

    __slots__ = ()

    @classmethod
    def from_urn(cls, urn: str):
        """Parse a URN such as ``urn:lei:54930084UKLVMY22DS16``

        Raises
        ------
        IdentifierError
            If the scheme or namespace is wrong, or the embedded code is
            not valid.
        """
        parts = urn.split(":", 2)
        if (
            len(parts) != 3
            or parts[0].lower() != "urn"
            or parts[1].lower() != cls.URN_NAMESPACE
        ):
            logger.warning("%r is not a urn:%s: URN", urn, cls.URN_NAMESPACE)
            raise IdentifierError(
                cls.TYPE_NAME, urn, f"expecting a URN starting with urn:{cls.URN_NAMESPACE}:"
            )
        return cls.parse(parts[2])

    def to_urn(self) -> str:
        return f"urn:{self.URN_NAMESPACE}:{self._urn_body()}"

    def _urn_body(self) -> str:
        return str(self)


class GlobalLocationNumber(CheckedCode):
    """GS1 Global Location Number (GLN)

    Identifies parties and locations involved in supply-chain
    transactions.
    """

    TYPE_NAME = "GlobalLocationNumber"
    LENGTH = CodeFormat.GLN.length
    CHECK_DIGIT_ALGORITHM = gs1.get_algorithm_instance(CodeFormat.GLN)

    __slots__ = ()


class LegalEntityId(UrnCheckedCode):
    """ISO 17442 Legal Entity Identifier (LEI)

    Characters 1-4 identify the issuing Local Operating Unit, 5-18 the
    entity, and 19-20 are the two check digits.
    The URN form is ``urn:lei:<LEI>``.
    """

    TYPE_NAME = "LegalEntityId"
    LENGTH = 20
    CHECK_DIGIT_ALGORITHM = iso7064.get_algorithm_instance(IsoVariant.MOD_97_10)
    URN_NAMESPACE = "lei"

    __slots__ = ()

    @classmethod
    def _check_format(cls, s: str) -> None:
        if not Alphabet.ASCII_NUMERIC.contains(s[18:]):
            raise IdentifierError(cls.TYPE_NAME, s, "check digits must be numeric")

    @property
    def local_operating_unit(self) -> str:
        return str(self[0:4])

    @property
    def entity(self) -> str:
        return str(self[4:18])

    @property
    def check_digits(self) -> str:
        return str(self[18:])


class InternationalSecuritiesId(UrnCheckedCode):
    """ISO 6166 International Securities Identification Number (ISIN)

    A two-letter country code, the nine-character National Securities
    Identifying Number (NSIN) and a Luhn check digit.  Parsing also
    accepts the hyphenated display form ``CC-NNNNNNNNN-D``.
    The URN form ``urn:isin:CC-NNNNNNNNN-D`` uses the display form.

    Only the shape of the country code is checked.
    """

    TYPE_NAME = "InternationalSecuritiesId"
    LENGTH = 12
    CHECK_DIGIT_ALGORITHM = luhn.get_algorithm_instance()
    URN_NAMESPACE = "isin"

    __slots__ = ()

    @classmethod
    def _normalize(cls, s: str) -> str:
        if len(s) == 14 and s[2] == "-" and s[12] == "-":
            return s.replace("-", "")
        return s

    @classmethod
    def _check_format(cls, s: str) -> None:
        if not Alphabet.ASCII_ALPHA_UPPER.contains(s[:2]):
            raise IdentifierError(
                cls.TYPE_NAME, s, "must start with a two-letter country code"
            )
        if not Alphabet.ASCII_NUMERIC.contains(s[11:]):
            raise IdentifierError(cls.TYPE_NAME, s, "check digit must be numeric")

    @property
    def country_code(self) -> str:
        return str(self[:2])

    @property
    def nsin(self) -> str:
        return str(self[2:11])

    def formatted(self) -> str:
        """Return the hyphenated display form, e.g. ``US-037833100-5``."""
        return f"{self.country_code}-{self.nsin}-{self.check_digit_as_str}"

    def _urn_body(self) -> str:
        return self.formatted()


class Sedol(CheckedCode):
    """London Stock Exchange SEDOL, the NSIN of United Kingdom ISINs"""

    TYPE_NAME = "SEDOL"
    LENGTH = 7
    CHECK_DIGIT_ALGORITHM = sedol.get_algorithm_instance()

    __slots__ = ()
