#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyCheckDigits command-line interface

Provides one command per calculator operation:

1. **list**     — Show the available algorithms
2. **compute**  — Print the check characters for each data string
3. **create**   — Print each data string with its check characters appended
4. **validate** — Check complete codes, exit status 1 if any fails

Usage
-----
::

    # GS1 GLN check digit
    python -m pycheckdigits.cli compute gs1-gln 943646579210

    # LEI check digits
    python -m pycheckdigits.cli create iso7064-mod-97-10 54930084UKLVMY22DS

    # Validate several ISINs
    python -m pycheckdigits.cli validate luhn US0378331005 US0378331009
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from pycheckdigits.algorithms import gs1, iso7064, luhn, sedol
from pycheckdigits.algorithms.base import Calculator
from pycheckdigits.exceptions import CheckDigitError
from pycheckdigits.models.descriptors import CodeFormat, IsoVariant

logger = logging.getLogger("pycheckdigits.cli")

# ---------------------------------------------------------------------------
# Algorithm configuration
# ---------------------------------------------------------------------------

ALGORITHM_CONFIG: dict[str, Callable[[], Calculator]] = {
    "luhn": luhn.get_algorithm_instance,
    "sedol": sedol.get_algorithm_instance,
    **{
        "gs1-" + fmt.value.lower().replace("legacy_", "").replace("_", "-"):
            (lambda fmt=fmt: gs1.get_algorithm_instance(fmt))
        for fmt in CodeFormat
    },
    **{
        "iso7064-" + variant.value.lower().replace("_", "-"):
            (lambda variant=variant: iso7064.get_algorithm_instance(variant))
        for variant in IsoVariant
    },
}
"""Command-line algorithm names mapped to calculator factories.

Names are ``luhn``, ``sedol``, ``gs1-<format>`` (e.g. ``gs1-gln``,
``gs1-gtin-13``, ``gs1-upc-a``) and ``iso7064-mod-<m>-<r>`` (e.g.
``iso7064-mod-97-10``).
"""


def _calculator(name: str) -> Calculator:
    return ALGORITHM_CONFIG[name]()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_list(args):
    """List available algorithms."""
    for key in ALGORITHM_CONFIG:
        calc = _calculator(key)
        print(f"  {key:<22s} {calc.name} (width {calc.check_digit_width})")
    return 0


def cmd_compute(args):
    """Print the check characters for each data string."""
    calc = _calculator(args.algorithm)
    failed = 0
    for value in args.values:
        try:
            print(calc.format_check_value(calc.compute(value)))
        except CheckDigitError as exc:
            print(f"FAIL: {value}: {exc}")
            failed += 1
    return 0 if failed == 0 else 1


def cmd_create(args):
    """Print each data string with its check characters."""
    calc = _calculator(args.algorithm)
    failed = 0
    for value in args.values:
        try:
            print(calc.create(value))
        except CheckDigitError as exc:
            print(f"FAIL: {value}: {exc}")
            failed += 1
    return 0 if failed == 0 else 1


def cmd_validate(args):
    """Validate complete codes."""
    calc = _calculator(args.algorithm)
    total_ok = 0
    total_fail = 0
    for value in args.values:
        try:
            calc.validate(value)
            print(f"  {value}: OK")
            total_ok += 1
        except CheckDigitError as exc:
            print(f"  {value}: FAIL: {exc}")
            total_fail += 1

    logger.info("%s: %d OK, %d failed", calc.name, total_ok, total_fail)
    return 0 if total_fail == 0 else 1


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pycheckdigits",
        description="Compute and validate identifier check digits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    pycheckdigits list                                      # available algorithms
    pycheckdigits compute gs1-gln 943646579210              # -> 4
    pycheckdigits create sedol 054052                       # -> 0540528
    pycheckdigits validate luhn US0378331005                # OK
    pycheckdigits create iso7064-mod-97-10 54930084UKLVMY22DS
""",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Operation to run")

    sub.add_parser("list", help="List available algorithms")
    for name, help_text, metavar in (
        ("compute", "Print the check characters", "DATA"),
        ("create", "Append the check characters", "DATA"),
        ("validate", "Validate complete codes", "CODE"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument(
            "algorithm",
            choices=sorted(ALGORITHM_CONFIG),
            metavar="ALGORITHM",
            help="Algorithm name (see 'list')",
        )
        cmd.add_argument("values", nargs="+", metavar=metavar)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "list": cmd_list,
        "compute": cmd_compute,
        "create": cmd_create,
        "validate": cmd_validate,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
