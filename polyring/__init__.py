"""Univariate polynomials: arithmetic, division, GCD, composition, formatting."""

from polyring.field import FieldElement, PRIME
from polyring.polynomial import Coefficient, Polynomial, format_polynomial, gcd
from polyring import rng
