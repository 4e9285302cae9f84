"""Univariate polynomial arithmetic over a generic scalar type."""

from polynomial.errors import (PolynomialError, InvalidArgumentError,
                               DivisionByZeroError, DuplicateNodeError)
from polynomial.field import FieldElement, PRIME
from polynomial.polynomial import (Polynomial, normalize,
                                   lagrange_coefficients_at_zero)
from polynomial.scalar import Scalar, zero_of, one_of, is_zero
from polynomial import config, rng
