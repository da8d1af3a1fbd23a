#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for validation and numeric transforms

This sub-package centralises the input guards and character arithmetic
so that no logic is duplicated across the algorithm modules.
"""

from __future__ import annotations
