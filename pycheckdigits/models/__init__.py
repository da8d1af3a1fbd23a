#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Immutable descriptors for the check-digit engine

Descriptors name the alphabet, code format or ISO 7064 system an
algorithm instance is bound to.  They are the sole configuration input
accepted by the algorithm layer.
"""

from __future__ import annotations

from pycheckdigits.models.descriptors import Alphabet, CodeFormat, IsoVariant

__all__ = ["Alphabet", "CodeFormat", "IsoVariant"]
