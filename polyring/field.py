"""Prime field F_p, p = 2^127 - 1, as an exact coefficient type.

Polynomial division and GCD need a coefficient type where every non-zero
element is invertible; FieldElement is that type. Ordering compares the
canonical representative in [0, p) so polynomials over F_p can be printed.
"""

from polyring import rng

PRIME = (1 << 127) - 1  # 2^127 - 1


def _lift(other):
    if isinstance(other, FieldElement):
        return other
    if isinstance(other, int):
        return FieldElement(other)
    return None


class FieldElement:
    """Element of F_p, stored as its representative in [0, p)."""

    __slots__ = ('value',)

    def __init__(self, value: int):
        self.value = value % PRIME

    def __add__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value + other.value)

    __radd__ = __add__

    def __sub__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value - other.value)

    def __rsub__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value * other.value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self):
        return FieldElement(-self.value)

    def __pow__(self, exp):
        if isinstance(exp, FieldElement):
            exp = exp.value
        if exp < 0:
            return self.inverse() ** -exp
        return FieldElement(pow(self.value, exp, PRIME))

    def __eq__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return self.value > other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"F({self.value})"

    def __str__(self):
        return str(self.value)

    def __bool__(self):
        return self.value != 0

    def inverse(self):
        """Multiplicative inverse via Fermat's little theorem: a^{p-2} mod p."""
        if self.value == 0:
            raise ZeroDivisionError("Cannot invert zero")
        return FieldElement(pow(self.value, PRIME - 2, PRIME))

    @staticmethod
    def random():
        """Random non-zero element."""
        return FieldElement(rng.randbelow(PRIME - 1) + 1)

    @staticmethod
    def random_including_zero():
        return FieldElement(rng.randbelow(PRIME))

    @staticmethod
    def zero():
        return FieldElement(0)

    @staticmethod
    def one():
        return FieldElement(1)
