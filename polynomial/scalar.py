"""Scalar capability set and identity helpers.

A coefficient can be any value closed under ``+``, ``-``, ``*``, unary ``-``
and ``==``. Interpolation additionally divides with ``/``. Python ``int``,
``float``, ``Fraction``, ``Decimal`` and ``FieldElement`` all qualify; note
that ``int / int`` is a ``float``, so integer points interpolate to float
coefficients unless given as ``Fraction``.
"""

from typing import Protocol, TypeVar


class Scalar(Protocol):
    def __add__(self, other, /): ...
    def __sub__(self, other, /): ...
    def __mul__(self, other, /): ...
    def __truediv__(self, other, /): ...
    def __neg__(self): ...
    def __eq__(self, other, /) -> bool: ...


T = TypeVar('T', bound=Scalar)


def _identity(value, name: str, literal: int):
    factory = getattr(type(value), name, None)
    if callable(factory):
        return factory()
    return type(value)(literal)


def zero_of(value: T) -> T:
    """Additive identity of ``value``'s type."""
    return _identity(value, 'zero', 0)


def one_of(value: T) -> T:
    """Multiplicative identity of ``value``'s type."""
    return _identity(value, 'one', 1)


def is_zero(value) -> bool:
    return value == zero_of(value)
