#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for all check-digit algorithms

Every concrete algorithm (Luhn, GS1, ISO 7064, SEDOL) inherits from
:class:`Calculator` and implements :attr:`~Calculator.name` and
:meth:`~Calculator.compute`.  Creation and validation of complete codes
are shared here.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pycheckdigits.exceptions import (
    CheckDigitError,
    invalid_check_digit,
)

logger = logging.getLogger(__name__)


class Calculator(ABC):
    """Abstract base for check-digit algorithms

    Subclasses must override :attr:`name` and :meth:`compute`.  The
    check value is assumed to occupy the :attr:`check_digit_width`
    right-most characters of a complete code.

    Calculators hold no per-call state; a single instance may be shared
    by any number of callers.

    Notes
    -----
    The data flow of every operation is::

        validation ← transforms ← compute ← create / validate / is_valid
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the algorithm."""
        ...

    @property
    def check_digit_width(self) -> int:
        """Number of trailing characters that make up the check value."""
        return 1

    @abstractmethod
    def compute(self, data: str) -> int:
        """Compute the check value for *data*

        Parameters
        ----------
        data : str
            The code without its check characters.

        Returns
        -------
        int
            The check value; render it with :meth:`format_check_value`.

        Raises
        ------
        InvalidLengthError
            If *data* has the wrong length for this algorithm.
        InvalidAlphabetError
            If *data* contains a character outside the algorithm's alphabet.
        """
        ...

    def format_check_value(self, value: int) -> str:
        """Render *value* as check characters, left-zero-padded to the width."""
        return f"{value:0{self.check_digit_width}d}"

    def create(self, data: str) -> str:
        """Return *data* followed by its check characters."""
        return f"{data}{self.format_check_value(self.compute(data))}"

    def validate(self, code: str) -> None:
        """Verify that *code* ends with the correct check characters

        Raises
        ------
        InvalidLengthError
            If the data portion has the wrong length.
        InvalidAlphabetError
            If the data portion contains an invalid character.
        InvalidCheckDigitError
            If the supplied check characters differ from the computed
            ones (compared as zero-padded strings).
        """
        width = self.check_digit_width
        logger.debug(
            "Validating check digits for input %r (algorithm=%s, width=%d)",
            code,
            self.name,
            width,
        )
        data, supplied = code[:-width], code[-width:]
        expecting = self.format_check_value(self.compute(data))
        if supplied != expecting:
            raise invalid_check_digit(expecting, supplied)

    def is_valid(self, code: str) -> bool:
        """Return ``True`` if :meth:`validate` accepts *code*."""
        try:
            self.validate(code)
        except CheckDigitError:
            return False
        return True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
