#!/usr/bin/env python3
from __future__ import annotations
import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional, TextIO, Tuple

from fraction import DEFAULT_DTYPE, DTYPES, Fraction, resolve_dtype

logger = logging.getLogger(__name__)

# (label, (num, den) or (num,), (num, den) or (num,))
CASES: List[Tuple[str, Tuple[int, ...], Tuple[int, ...]]] = [
    ("Nominal case (positive values)", (100, 150), (2, 5)),
    ("Nominal case (positive and negative values)", (30, 15), (242, -10)),
    ("Nominal case (negative values)", (-3, 33), (7, -21)),
    ("limit test (with 0 and 1)", (0, 33), (1,)),
    ("test of '0' and 'Inf'", (1, 0), ()),
]


def exercise(f1: Fraction, f2: Fraction) -> List[str]:
    """Apply the four operations and report which of the six comparisons hold."""
    lines = [
        f"{f1} + {f2} = {f1 + f2}",
        f"{f1} - {f2} = {f1 - f2}",
        f"{f1} * {f2} = {f1 * f2}",
        f"{f1} / {f2} = {f1 / f2}",
    ]
    checks = [
        ("<", f1 < f2),
        ("<=", f1 <= f2),
        (">", f1 > f2),
        (">=", f1 >= f2),
        ("==", f1 == f2),
        ("!=", f1 != f2),
    ]
    for op, holds in checks:
        if holds:
            lines.append(f"{f1} {op} {f2}")
    return lines


def run(dtype: str | type = DEFAULT_DTYPE, out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    dt = resolve_dtype(dtype)
    logger.info("running %d cases with %s", len(CASES), dt.__name__)
    for i, (label, a, b) in enumerate(CASES, start=1):
        if i > 1:
            out.write("\n")
        out.write(f"Test {i}: {label}\n")
        for line in exercise(Fraction(*a, dtype=dt), Fraction(*b, dtype=dt)):
            out.write(line + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(description="Print sample fraction computations.")
    parser.add_argument("--dtype", choices=sorted(DTYPES), default=DEFAULT_DTYPE.__name__,
                        help="fixed-width integer type of numerator and denominator")
    parser.add_argument("-v", "--verbose", action="store_true", help="log degenerate results")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    run(args.dtype)
    return 0


if __name__ == "__main__":
    sys.exit(main())
