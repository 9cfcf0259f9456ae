"""Tests for the Euclidean polynomial GCD."""

from fractions import Fraction

import pytest

from polyring.field import FieldElement
from polyring.polynomial import Polynomial, gcd


def field_poly(*coeffs):
    return Polynomial([FieldElement(c) for c in coeffs], zero=FieldElement.zero())


def test_coprime_gives_one():
    x = Polynomial([0, 1])
    assert gcd(x, Polynomial([1, 1])) == Polynomial([1])
    assert gcd(x, Polynomial([1, 1])).degree == 0

def test_common_linear_factor():
    a = Polynomial([-1, 1]) * Polynomial([1, 1])
    result = gcd(a, Polynomial([-1, 1]))
    assert result == Polynomial([-1, 1])
    assert result.leading_coefficient == 1

def test_argument_order_does_not_matter():
    a = Polynomial([-1, 0, 1])
    b = Polynomial([-1, 1])
    assert gcd(a, b) == gcd(b, a)

def test_result_is_monic():
    a = Polynomial([Fraction(-2), Fraction(0), Fraction(2)])
    b = Polynomial([Fraction(-4), Fraction(4)])
    assert gcd(a, b) == Polynomial([Fraction(-1), Fraction(1)])

def test_with_nonzero_constant():
    assert gcd(Polynomial([0, 0, 1]), Polynomial([3])) == Polynomial([1])

def test_with_zero_polynomial():
    p = Polynomial([Fraction(2), Fraction(4)])
    assert gcd(p, Polynomial()) == p.monic()
    assert gcd(Polynomial(), p) == p.monic()
    assert gcd(Polynomial(), Polynomial()) == 0

def test_over_prime_field():
    a = field_poly(2, 1) * field_poly(3, 1)
    b = field_poly(2, 1) * field_poly(5, 1)
    result = gcd(a, b)
    assert result == field_poly(2, 1)
    assert str(result) == "x+2"

def test_quadratic_common_factor_over_field():
    common = field_poly(1, 0, 1)
    a = common * field_poly(4, 1)
    b = common * field_poly(-7, 3)
    assert a.gcd(b) == common

def test_unsupported_operand():
    with pytest.raises(TypeError):
        gcd(Polynomial([1, 1]), "x")
