"""Exact scalar: arithmetic in F_p where p = 2^127 - 1 (Mersenne prime)."""

from polynomial import rng
from polynomial.errors import DivisionByZeroError

PRIME = (1 << 127) - 1  # 2^127 - 1


def _coerce(other):
    if isinstance(other, FieldElement):
        return other
    if isinstance(other, int):
        return FieldElement(other)
    return None


class FieldElement:
    """Element of F_p. Integers on either side of an operator are lifted.

    Compared with a plain int, an element equals only its signed
    representative (see signed()), which keeps hashing consistent.
    """

    __slots__ = ('value',)

    def __init__(self, value: int):
        self.value = value % PRIME

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value + other.value)

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value - other.value)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(other.value - self.value)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.value * other.value)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = _coerce(other)
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
        if isinstance(other, FieldElement):
            return self.value == other.value
        if isinstance(other, int):
            return self.signed() == other
        return NotImplemented

    def __hash__(self):
        return hash(self.signed())

    def __repr__(self):
        return f"F({self.value})"

    def __str__(self):
        return str(self.value)

    def __bool__(self):
        return self.value != 0

    def inverse(self):
        """Multiplicative inverse via Fermat's little theorem: a^{p-2} mod p."""
        if self.value == 0:
            raise DivisionByZeroError("zero has no inverse in F_p")
        return FieldElement(pow(self.value, PRIME - 2, PRIME))

    def to_int(self):
        return self.value

    def signed(self):
        """Representative in (-p/2, p/2]; the only int this element equals."""
        return self.value if self.value <= PRIME // 2 else self.value - PRIME

    @staticmethod
    def random():
        """Return a random non-zero field element."""
        return FieldElement(rng.randbelow(PRIME - 1) + 1)

    @staticmethod
    def zero():
        return FieldElement(0)

    @staticmethod
    def one():
        return FieldElement(1)
