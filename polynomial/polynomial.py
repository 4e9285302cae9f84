"""Univariate polynomials over a generic scalar, and Lagrange interpolation."""

import logging
import math

from polynomial import config, rng
from polynomial.errors import (DivisionByZeroError, DuplicateNodeError,
                               InvalidArgumentError)
from polynomial.scalar import is_zero as scalar_is_zero, one_of, zero_of

logger = logging.getLogger(__name__)


def normalize(coeffs) -> tuple:
    """Drop trailing zero coefficients, never going below one coefficient.

    An all-zero sequence collapses to its first element, so the zero
    polynomial keeps the scalar type it was built from.
    """
    coeffs = tuple(coeffs)
    if not coeffs:
        raise InvalidArgumentError("a polynomial needs at least one coefficient")
    end = len(coeffs)
    while end > 1 and scalar_is_zero(coeffs[end - 1]):
        end -= 1
    return coeffs[:end]


def _ieee_quotient(num, den):
    if num == 0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)


def _divide(num, den, policy: str):
    """num / den; a zero divisor raises unless policy is IEEE and both are real."""
    try:
        return num / den
    except ZeroDivisionError as exc:
        inexact = all(isinstance(v, (int, float)) for v in (num, den))
        if inexact and policy == config.DIVISION_IEEE:
            return _ieee_quotient(num, den)
        raise DivisionByZeroError(f"cannot divide {num} by zero") from exc


def _check_nodes(x_values: list, policy: str):
    if not x_values:
        raise InvalidArgumentError("interpolation needs at least one point")
    if policy != config.DIVISION_RAISE:
        return
    for i, xi in enumerate(x_values):
        for j in range(i + 1, len(x_values)):
            if scalar_is_zero(xi - x_values[j]):
                raise DuplicateNodeError(xi, i, j)


def _check_points(points, policy: str) -> list:
    points = [(x, y) for x, y in points]
    _check_nodes([x for x, _ in points], policy)
    return points


class Polynomial:
    """Immutable polynomial. coeffs[0] = constant term.

    Coefficients are kept in normal form: no trailing zeros, and the zero
    polynomial is a single zero coefficient (degree 0).
    """

    __slots__ = ('coeffs',)

    def __init__(self, coeffs):
        object.__setattr__(self, 'coeffs', normalize(coeffs))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Polynomial, (self.coeffs,))

    @classmethod
    def zero(cls, like=0) -> 'Polynomial':
        """Zero polynomial over the scalar type of ``like``."""
        return cls([zero_of(like)])

    @classmethod
    def constant(cls, value) -> 'Polynomial':
        return cls([value])

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def is_zero(self) -> bool:
        return len(self.coeffs) == 1 and scalar_is_zero(self.coeffs[0])

    def __len__(self):
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    # --- Arithmetic ---

    def add(self, other: 'Polynomial') -> 'Polynomial':
        """Coefficient-wise sum; the shorter side is padded with zeros."""
        lhs, rhs = self.coeffs, other.coeffs
        lhs_zero, rhs_zero = zero_of(lhs[0]), zero_of(rhs[0])
        result = []
        for i in range(max(len(lhs), len(rhs))):
            a = lhs[i] if i < len(lhs) else lhs_zero
            b = rhs[i] if i < len(rhs) else rhs_zero
            result.append(a + b)
        return Polynomial(result)

    def mul(self, other: 'Polynomial') -> 'Polynomial':
        """Product by discrete convolution of the coefficient sequences."""
        zero = zero_of(self.coeffs[0] * other.coeffs[0])
        result = [zero] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                result[i + j] += a * b
        return Polynomial(result)

    def eval_at(self, x):
        """Evaluate at x using Horner's method."""
        result = zero_of(self.coeffs[0])
        for coeff in reversed(self.coeffs):
            result = result * x + coeff
        return result

    evaluate = eval_at
    __call__ = eval_at

    @staticmethod
    def _lift(other):
        if isinstance(other, Polynomial):
            return other
        return Polynomial([other])

    def __add__(self, other):
        return self.add(self._lift(other))

    __radd__ = __add__

    def __neg__(self):
        return Polynomial([-c for c in self.coeffs])

    def __sub__(self, other):
        return self.add(-self._lift(other))

    def __rsub__(self, other):
        return self._lift(other).add(-self)

    def __mul__(self, other):
        return self.mul(self._lift(other))

    def __rmul__(self, other):
        return self._lift(other).mul(self)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self.coeffs) != len(other.coeffs):
            return False
        return all(a == b for a, b in zip(self.coeffs, other.coeffs))

    def __hash__(self):
        return hash(self.coeffs)

    def __str__(self):
        return ' + '.join(f"({c}x^{i})" for i, c in enumerate(self.coeffs))

    def __repr__(self):
        return f"Poly: {self}"

    # --- Construction from samples ---

    @staticmethod
    def random(degree: int, constant, bound: int = 100) -> 'Polynomial':
        """Random polynomial of exactly the given degree with p(0) = constant.

        Scalar types with a ``random()`` constructor (FieldElement) draw from
        it; any other type draws integers in [-bound, bound].
        """
        if degree < 0:
            raise InvalidArgumentError(f"degree must be >= 0, got {degree}")
        if bound < 1:
            raise InvalidArgumentError(f"bound must be >= 1, got {bound}")
        kind = type(constant)
        draw = getattr(kind, 'random', None)
        if not callable(draw):
            def draw():
                return kind(rng.randint(-bound, bound))
        coeffs = [constant]
        for _ in range(degree):
            coeffs.append(draw())
        while degree > 0 and scalar_is_zero(coeffs[-1]):
            coeffs[-1] = draw()
        return Polynomial(coeffs)

    @staticmethod
    def _lagrange_term(points: list, idx: int, policy: str) -> 'Polynomial':
        """y_idx times the basis polynomial that is 1 at x_idx, 0 at other x."""
        xi, yi = points[idx]
        term = Polynomial([one_of(xi)])
        for j, (xj, _) in enumerate(points):
            if j == idx:
                continue
            denominator = xi - xj
            term = term.mul(Polynomial([
                _divide(-xj, denominator, policy),
                _divide(one_of(denominator), denominator, policy),
            ]))
        return term.mul(Polynomial([yi]))

    @staticmethod
    def interpolate_from(points, policy: str | None = None) -> 'Polynomial':
        """Lowest-degree polynomial through the (x, y) points.

        points: iterable of (x_i, y_i) pairs with distinct x_i.
        policy: a config.DIVISION_* value; None uses the context default.
        Raises InvalidArgumentError when empty and DuplicateNodeError when
        two x_i coincide (under DIVISION_RAISE).
        """
        policy = config.resolve(policy)
        points = _check_points(points, policy)
        result = Polynomial.zero(like=points[0][1])
        for idx in range(len(points)):
            result = result.add(Polynomial._lagrange_term(points, idx, policy))
        logger.debug("interpolated %d points to degree %d",
                     len(points), result.degree)
        if any(isinstance(c, float) and not math.isfinite(c) for c in result):
            logger.warning("interpolation produced non-finite coefficients: %r",
                           result)
        return result

    @staticmethod
    def interpolate_at_zero(points, policy: str | None = None):
        """Lagrange interpolation evaluated at x=0.

        Returns p(0) = sum_i y_i * lambda_i where
        lambda_i = prod_{j!=i} (-x_j)/(x_i - x_j).
        """
        points = [(x, y) for x, y in points]
        lambdas = lagrange_coefficients_at_zero([x for x, _ in points], policy)
        result = zero_of(points[0][1])
        for (_, yi), lambda_i in zip(points, lambdas):
            result = result + yi * lambda_i
        return result


def lagrange_coefficients_at_zero(x_values, policy: str | None = None) -> list:
    """Lagrange basis weights at x=0 for the given x-coordinates.

    Returns lambda_i = prod_{j!=i} (-x_j) / (x_i - x_j) for each i.
    """
    policy = config.resolve(policy)
    x_values = list(x_values)
    _check_nodes(x_values, policy)
    lambdas = []
    for i, xi in enumerate(x_values):
        numerator = one_of(xi)
        denominator = one_of(xi)
        for j, xj in enumerate(x_values):
            if i == j:
                continue
            numerator = numerator * (-xj)
            denominator = denominator * (xi - xj)
        lambdas.append(_divide(numerator, denominator, policy))
    return lambdas
