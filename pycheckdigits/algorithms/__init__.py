#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Check-digit algorithm implementations

This sub-package provides one module per algorithm family:

* :mod:`~pycheckdigits.algorithms.luhn` — Luhn (ISO/IEC 7812-1 Annex B)
* :mod:`~pycheckdigits.algorithms.gs1` — GS1 mod-10 weighted
* :mod:`~pycheckdigits.algorithms.iso7064` — ISO/IEC 7064:2003 systems
* :mod:`~pycheckdigits.algorithms.sedol` — SEDOL weighted sum

All algorithms share the :class:`~pycheckdigits.algorithms.base.Calculator`
interface.
"""

from __future__ import annotations

from pycheckdigits.algorithms import gs1, iso7064, luhn, sedol
from pycheckdigits.algorithms.base import Calculator

__all__ = ["Calculator", "gs1", "iso7064", "luhn", "sedol"]
