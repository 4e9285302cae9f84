"""Polynomial arithmetic demo: walks through construction, arithmetic,
evaluation and interpolation over int, float, Fraction and F_p scalars.

Usage: python main.py [seed] [--verbose]
"""

import logging
import sys
from fractions import Fraction

from polynomial import (Polynomial, FieldElement, DuplicateNodeError,
                        config, rng)


def banner(title: str):
    print("=" * 50)
    print(title)
    print("=" * 50)


def show_arithmetic():
    a = Polynomial([0, 1, 2])
    b = Polynomial([1, 2, 3])
    print(f"  a       = {a!r}")
    print(f"  b       = {b!r}")
    print(f"  a + b   = {a + b!r}")
    print(f"  b * b   = {b * b!r}")
    print(f"  b(8)    = {b.eval_at(8)}")
    print(f"  normalize [0.0, 1.0, 2.0, 3.0, 0.0, 0.0] -> "
          f"{Polynomial([0.0, 1.0, 2.0, 3.0, 0.0, 0.0])!r}")
    print(f"  all zeros [0, 0, 0] -> {Polynomial([0, 0, 0])!r}")
    print()


def show_interpolation():
    pts = [(1, 325), (3, 2383), (5, 6609)]
    p = Polynomial.interpolate_from(pts)
    print(f"  points      = {pts}")
    print(f"  float       = {p!r}")
    print(f"  p(0)        = {p.eval_at(0)}")

    exact = Polynomial.interpolate_from(
        [(Fraction(x), Fraction(y)) for x, y in [(2, 1083), (5, 6609), (0, 533)]])
    print(f"  Fraction    = {exact!r}")
    print(f"  p(0) direct = {Polynomial.interpolate_at_zero(pts)}")
    print()


def show_field(seed: int):
    rng.set_seed(seed)
    secret = FieldElement(42)
    poly = Polynomial.random(degree=2, constant=secret)
    shares = [(FieldElement(i), poly.eval_at(FieldElement(i))) for i in range(1, 4)]
    recovered = Polynomial.interpolate_from(shares)
    print(f"  degree      = {poly.degree}")
    print(f"  recovered   = {recovered == poly}")
    print(f"  p(0)        = {recovered.eval_at(FieldElement(0))!r}")
    print()


def show_duplicates():
    pts = [(1.0, 2.0), (1.0, 3.0)]
    try:
        Polynomial.interpolate_from(pts)
    except DuplicateNodeError as exc:
        print(f"  raise policy: {exc}")
    ieee = Polynomial.interpolate_from(pts, policy=config.DIVISION_IEEE)
    print(f"  ieee policy:  {ieee!r}")
    print()


def main():
    args = sys.argv[1:]
    verbose = '--verbose' in args
    args = [a for a in args if a != '--verbose']
    seed = int(args[0]) if args else 42

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    banner("SCENARIO 1: Arithmetic over integers")
    show_arithmetic()

    banner("SCENARIO 2: Lagrange interpolation")
    show_interpolation()

    banner("SCENARIO 3: Round trip over F_p")
    show_field(seed)

    banner("SCENARIO 4: Duplicate x-coordinates")
    show_duplicates()


if __name__ == "__main__":
    main()
