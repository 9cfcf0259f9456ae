"""Polynomial arithmetic walkthrough: entry point.

Prints worked examples over the rationals and over F_p, p = 2^127 - 1.
Usage: python main.py [seed]
"""

import sys
from fractions import Fraction

from polyring import rng
from polyring.field import FieldElement
from polyring.polynomial import Polynomial, format_polynomial, gcd


def show(label: str, poly: Polynomial):
    print(f"  {label:<12}", end="")
    format_polynomial(poly, sys.stdout)
    print()


def rational_examples():
    x = Polynomial([Fraction(0), Fraction(1)])
    a = (x - 1) * (x + 1) * (x + 2)
    b = (x - 1) * (2 * x + 3)
    show("a", a)
    show("b", b)
    show("a + b", a + b)
    show("a * b", a * b)
    q, r = divmod(a, b)
    show("a / b", q)
    show("a % b", r)
    show("gcd(a, b)", gcd(a, b))
    show("a(x+1)", a.compose(x + 1))
    print(f"  {'a(2)':<12}{a(Fraction(2))}")


def field_examples(seed: int):
    rng.set_seed(seed)
    zero = FieldElement.zero()
    common = Polynomial([FieldElement(3), FieldElement(1)], zero=zero)
    a = common * Polynomial.random(degree=2)
    b = common * Polynomial.random(degree=1)
    show("a", a)
    show("b", b)
    show("gcd(a, b)", gcd(a, b))
    q, r = divmod(a, b)
    assert a == q * b + r
    print(f"  {'a(1)':<12}{a(FieldElement(1))}")


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42

    print("=" * 50)
    print("Rational coefficients")
    print("=" * 50)
    rational_examples()
    print()

    print("=" * 50)
    print(f"Coefficients in F_p (seed={seed})")
    print("=" * 50)
    field_examples(seed)


if __name__ == "__main__":
    main()
