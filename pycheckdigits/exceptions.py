#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyCheckDigits package

All exceptions raised for bad input inherit from :class:`PyCheckDigitsError`,
making it possible to catch every library-specific error with a single
``except`` clause while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyCheckDigitsError
    ├── CheckDigitError
    │   ├── InvalidLengthError      # Input too short or too long
    │   ├── InvalidAlphabetError    # Character outside the alphabet
    │   └── InvalidCheckDigitError  # Computed value != supplied value
    └── IdentifierError             # Identifier type rejected a value

The helper constructors :func:`invalid_length`, :func:`invalid_alphabet`
and :func:`invalid_check_digit` log a warning and return the exception so
the caller can ``raise`` it at the point of detection.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class PyCheckDigitsError(Exception):
    """Base exception for all PyCheckDigits errors

    Internal contract violations (an unvalidated character reaching a
    transform function) are reported as ``AssertionError`` instead and are
    therefore *not* caught by ``except PyCheckDigitsError``.
    """


class CheckDigitError(PyCheckDigitsError):
    """Base class of the three check-digit failure kinds

    Subclasses store their fields as read-only attributes and compare
    equal by value, so a test or a caller can match on the exact failure.
    They are rebuilt from those fields when copied or pickled.
    """

    _fields: tuple[str, ...] = ()

    def __setattr__(self, name, value):
        if name in self._fields and name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self._fields)

    def __hash__(self):
        return hash((type(self), *(getattr(self, f) for f in self._fields)))

    def __reduce__(self):
        return (type(self), tuple(getattr(self, f) for f in self._fields))

    def __repr__(self):
        args = ", ".join(f"{f}={getattr(self, f)!r}" for f in self._fields)
        return f"{type(self).__name__}({args})"


class InvalidLengthError(CheckDigitError):
    """Raised when the input length is outside the algorithm's requirement

    Parameters
    ----------
    min : int
        Smallest accepted length.
    max : int | None
        Largest accepted length, or ``None`` when unbounded.
    got : int
        Actual length of the input.
    """

    _fields = ("min", "max", "got")

    def __init__(self, min: int, max: int | None, got: int) -> None:
        self.min = min
        self.max = max
        self.got = got
        if max is None:
            message = f"Expecting input length of at least {min}, not {got}"
        else:
            message = f"Expecting input length in the range {min}..={max}, not {got}"
        super().__init__(message)


class InvalidAlphabetError(CheckDigitError):
    """Raised when one or more characters fall outside the required alphabet

    Parameters
    ----------
    alphabet : str
        Name of the character class, e.g. ``"ascii-numeric"``.
    """

    _fields = ("alphabet",)

    def __init__(self, alphabet: str) -> None:
        self.alphabet = alphabet
        super().__init__(f"Expecting characters from the alphabet {alphabet!r}")


class InvalidCheckDigitError(CheckDigitError):
    """Raised when the supplied check characters do not match the computed ones

    Parameters
    ----------
    expecting : str
        Check characters computed from the data portion.
    got : str
        Check characters found at the end of the input.
    """

    _fields = ("expecting", "got")

    def __init__(self, expecting: str, got: str) -> None:
        self.expecting = expecting
        self.got = got
        super().__init__(
            f"Invalid check digit in string, expecting {expecting}, got {got}"
        )


class IdentifierError(PyCheckDigitsError):
    """Raised when an identifier type rejects a value

    The underlying :class:`CheckDigitError`, if any, is available as
    ``__cause__``.

    Parameters
    ----------
    type_name : str
        Name of the identifier type, e.g. ``"LegalEntityId"``.
    value : str
        The rejected input.
    reason : str, optional
        Why the value was rejected.
    """

    def __init__(self, type_name: str, value: str, reason: str = "") -> None:
        self.type_name = type_name
        self.value = value
        self.reason = reason
        message = f"{value!r} is not a valid {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.type_name, self.value, self.reason))


# ---------------------------------------------------------------------------
# Helper constructors
# ---------------------------------------------------------------------------

def invalid_length(min: int, max: int | None, got: int) -> InvalidLengthError:
    """Log and return an :class:`InvalidLengthError`."""
    logger.warning("Invalid input length, %d not in %s..=%s", got, min, max)
    return InvalidLengthError(min, max, got)


def invalid_alphabet(alphabet: str) -> InvalidAlphabetError:
    """Log and return an :class:`InvalidAlphabetError`."""
    logger.warning("One or more input characters not in the alphabet %s", alphabet)
    return InvalidAlphabetError(alphabet)


def invalid_check_digit(expecting: str, got: str) -> InvalidCheckDigitError:
    """Log and return an :class:`InvalidCheckDigitError`."""
    logger.warning("Invalid check digit expecting %s, got %s", expecting, got)
    return InvalidCheckDigitError(expecting, got)
