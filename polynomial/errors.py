"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(PolynomialError, ValueError):
    """An argument violates a documented precondition.

    Raised for an empty coefficient sequence, an empty point set and
    unknown configuration values.
    """


class DivisionByZeroError(PolynomialError, ZeroDivisionError):
    """A scalar division by zero that the active policy does not allow."""


class DuplicateNodeError(InvalidArgumentError, DivisionByZeroError):
    """Two interpolation points share an x-coordinate."""

    def __init__(self, x, first: int, second: int):
        super().__init__(
            f"points {first} and {second} share x-coordinate {x}")
        self.x = x
        self.indices = (first, second)
