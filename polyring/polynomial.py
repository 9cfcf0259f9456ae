"""Univariate polynomials over a generic coefficient type.

A Polynomial stores coefficients low-to-high: coeffs[i] multiplies x^i.
The stored list never ends in a zero coefficient, so the zero polynomial is
the empty list and has degree -1.
"""

import numbers
from typing import Iterable, Iterator, Protocol, TextIO

from polyring.field import FieldElement


class Coefficient(Protocol):
    """What a coefficient type has to support.

    Ordering is only used when formatting, to decide whether a term needs a
    leading '+'. Division and GCD assume the type behaves like a field.
    """

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __eq__(self, other) -> bool: ...
    def __gt__(self, other) -> bool: ...


class Polynomial:
    """Polynomial in x with coefficients of one type.

    `zero` is the coefficient type's zero value. It pads short operands,
    seeds sums and decides which trailing coefficients get stripped.
    """

    __slots__ = ('_coeffs', 'zero')
    __hash__ = None  # mutable through +=, -=, *=

    def __init__(self, coeffs: Iterable[Coefficient] = (), zero: Coefficient = 0):
        self.zero = zero
        self._coeffs = list(coeffs)
        self._strip()

    def _strip(self):
        while self._coeffs and self._coeffs[-1] == self.zero:
            self._coeffs.pop()

    @classmethod
    def constant(cls, c: Coefficient = 0, zero: Coefficient = 0) -> 'Polynomial':
        """Constant polynomial c; the zero polynomial when c is zero."""
        return cls([c], zero)

    @classmethod
    def monomial(cls, c: Coefficient, degree: int, zero: Coefficient = 0) -> 'Polynomial':
        """c * x^degree."""
        if degree < 0:
            raise ValueError(f"Monomial degree must be non-negative, got {degree}")
        return cls([zero] * degree + [c], zero)

    @staticmethod
    def random(degree: int, constant: FieldElement | None = None) -> 'Polynomial':
        """Random polynomial over F_p of the given degree with p(0) = constant.

        Every coefficient above the constant term is non-zero. A zero constant
        with degree 0 gives the zero polynomial.
        """
        if degree < 0:
            raise ValueError(f"Polynomial degree must be non-negative, got {degree}")
        if constant is None:
            constant = FieldElement.random_including_zero()
        coeffs = [constant]
        for _ in range(degree):
            coeffs.append(FieldElement.random())
        return Polynomial(coeffs, zero=FieldElement.zero())

    def copy(self) -> 'Polynomial':
        return Polynomial(self._coeffs, self.zero)

    def _lift(self, other):
        """Promote a scalar to a constant polynomial; None if other is unusable."""
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, (numbers.Number, type(self.zero))):
            return Polynomial.constant(other, self.zero)
        return None

    # Queries

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    @property
    def coefficients(self) -> tuple:
        return tuple(self._coeffs)

    @property
    def leading_coefficient(self) -> Coefficient:
        return self.coefficient_at(self.degree)

    def coefficient_at(self, degree: int) -> Coefficient:
        """Coefficient of x^degree, zero for any degree outside the stored range."""
        if 0 <= degree < len(self._coeffs):
            return self._coeffs[degree]
        return self.zero

    __getitem__ = coefficient_at

    def __iter__(self) -> Iterator[Coefficient]:
        return iter(self.coefficients)

    def __len__(self):
        return len(self._coeffs)

    def __bool__(self):
        return bool(self._coeffs)

    def __eq__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        if self.degree != other.degree:
            return False
        return all(self[d] == other[d] for d in range(self.degree, -1, -1))

    # Arithmetic

    def __add__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        size = max(len(self), len(other))
        return Polynomial([self[i] + other[i] for i in range(size)], self.zero)

    def __radd__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        size = max(len(self), len(other))
        return Polynomial([self[i] - other[i] for i in range(size)], self.zero)

    def __rsub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other - self

    def __neg__(self):
        return Polynomial([self.zero - c for c in self._coeffs], self.zero)

    def __mul__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        product = [self.zero] * (len(self) + len(other))
        for i, a in enumerate(self._coeffs):
            for j, b in enumerate(other._coeffs):
                product[i + j] += a * b
        return Polynomial(product, self.zero)

    def __rmul__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return other * self

    def __iadd__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        size = max(len(self), len(other))
        self._coeffs.extend([self.zero] * (size - len(self._coeffs)))
        for i in range(size):
            self._coeffs[i] += other[i]
        self._strip()
        return self

    def __isub__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        size = max(len(self), len(other))
        self._coeffs.extend([self.zero] * (size - len(self._coeffs)))
        for i in range(size):
            self._coeffs[i] -= other[i]
        self._strip()
        return self

    def __imul__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        product = self.__mul__(other)
        self._coeffs = product._coeffs
        return self

    def __truediv__(self, other):
        """Quotient of polynomial long division."""
        other = self._lift(other)
        if other is None:
            return NotImplemented
        if not other:
            raise ZeroDivisionError("polynomial division by zero")
        remainder = list(self._coeffs)
        quotient = [self.zero] * max(len(self) - other.degree, 0)
        lead = other.leading_coefficient
        # Each step cancels the top term of the running remainder.
        for shift in range(len(quotient) - 1, -1, -1):
            t = remainder[shift + other.degree] / lead
            quotient[shift] = t
            for j, c in enumerate(other._coeffs):
                remainder[shift + j] -= t * c
        return Polynomial(quotient, self.zero)

    __floordiv__ = __truediv__

    def __mod__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        return self - (self / other) * other

    def __divmod__(self, other):
        other = self._lift(other)
        if other is None:
            return NotImplemented
        quotient = self / other
        return quotient, self - quotient * other

    def __call__(self, value: Coefficient) -> Coefficient:
        """Evaluate at value using Horner's method."""
        result = self.zero
        for coeff in reversed(self._coeffs):
            result = coeff + result * value
        return result

    def compose(self, other) -> 'Polynomial':
        """self(other(x)), expanding each power of other by repeated multiplication."""
        inner = self._lift(other)
        if inner is None:
            raise TypeError(f"Cannot compose a polynomial with {type(other).__name__}")
        composition = Polynomial(zero=self.zero)
        for i, coeff in enumerate(self._coeffs):
            if coeff == self.zero:
                continue
            term = Polynomial.constant(coeff, self.zero)
            for _ in range(i):
                term *= inner
            composition += term
        return composition

    def monic(self) -> 'Polynomial':
        """Divide through by the leading coefficient. Zero stays zero."""
        lead = self.leading_coefficient
        return Polynomial([c / lead for c in self._coeffs], self.zero)

    def gcd(self, other) -> 'Polynomial':
        return gcd(self, other)

    add = __add__
    subtract = __sub__
    multiply = __mul__
    divide = __truediv__
    remainder = __mod__
    evaluate = __call__

    def __repr__(self):
        return f"Polynomial({self._coeffs!r})"

    def __str__(self):
        return format_polynomial(self)


def gcd(a: Polynomial, b) -> Polynomial:
    """Greatest common divisor by the Euclidean algorithm, normalized to be monic.

    Stops once the running remainder is constant. A non-zero constant there
    means a and b are coprime and the result is 1; a zero remainder leaves
    the last non-zero remainder, which is returned monic. gcd(0, 0) is 0.
    Only a true GCD when the coefficient type is a field.
    """
    first, second = a, a._lift(b)
    if second is None:
        raise TypeError(f"Cannot take gcd of a polynomial and {type(b).__name__}")
    if first.degree < second.degree:
        first, second = second, first
    while second.degree > 0:
        first, second = second, first % second
    if second:
        return Polynomial.constant(first.zero + 1, first.zero)
    return first.monic()


def _power(degree: int) -> str:
    return 'x' if degree == 1 else f'x^{degree}'


def format_polynomial(poly: Polynomial, out: TextIO | None = None) -> str:
    """Render poly highest degree first, e.g. x^3+2*x^2-x+3.

    Coefficients of 1 and -1 are dropped in front of x, and only non-leading
    positive terms get an explicit '+'. The text is written to `out` when
    given, and returned either way.
    """
    top = poly.degree
    if top == -1:
        text = '0'
    else:
        one = poly.zero + 1
        minus_one = poly.zero - one
        parts = []
        for d in range(top, -1, -1):
            c = poly[d]
            if c == poly.zero:
                continue
            if c == one:
                if d != top:
                    parts.append('+')
                parts.append(_power(d) if d else str(c))
            elif c == minus_one:
                if d:
                    parts.append('-' + _power(d))
                else:
                    if d != top and c > poly.zero:
                        parts.append('+')
                    parts.append(str(c))
            else:
                if d != top and c > poly.zero:
                    parts.append('+')
                parts.append(str(c))
                if d:
                    parts.append('*' + _power(d))
        text = ''.join(parts)
    if out is not None:
        out.write(text)
    return text
