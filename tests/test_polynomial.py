"""Tests for polynomial construction, arithmetic and evaluation."""

import copy
import pickle
from decimal import Decimal
from fractions import Fraction

import pytest

from polynomial.errors import InvalidArgumentError
from polynomial.field import FieldElement
from polynomial.polynomial import Polynomial, normalize


# --- Normalization ---

def test_trailing_zeros_trimmed():
    p = Polynomial([0.0, 1.0, 2.0, 3.0, 0.0, 0.0])
    assert p.coeffs == (0.0, 1.0, 2.0, 3.0)
    assert p == Polynomial([0.0, 1.0, 2.0, 3.0])


def test_inner_zeros_kept():
    assert Polynomial([0, 0, 5, 0]).coeffs == (0, 0, 5)


@pytest.mark.parametrize("zeros", [[0], [0, 0], [0.0, 0.0, 0.0], [0] * 10])
def test_all_zero_collapses_to_single_zero(zeros):
    p = Polynomial(zeros)
    assert len(p) == 1
    assert p.coeffs[0] == 0
    assert p.degree == 0
    assert p.is_zero()


def test_zero_keeps_scalar_type():
    assert type(Polynomial([Fraction(0), Fraction(0)]).coeffs[0]) is Fraction
    assert type(Polynomial.zero(like=FieldElement(3)).coeffs[0]) is FieldElement


def test_single_element_unchanged():
    assert Polynomial([1.0]).coeffs == (1.0,)
    assert Polynomial([0]).coeffs == (0,)


def test_empty_rejected():
    with pytest.raises(InvalidArgumentError):
        Polynomial([])
    with pytest.raises(ValueError):
        normalize(())


def test_normalize_idempotent():
    once = normalize([1, 2, 0, 0])
    assert normalize(once) == once
    p = Polynomial([3, 0, 0])
    assert Polynomial(p.coeffs) == p


def test_field_zeros_trimmed():
    p = Polynomial([FieldElement(1), FieldElement(0)])
    assert p.coeffs == (FieldElement(1),)


def test_accepts_any_iterable():
    assert Polynomial(x for x in (1, 2, 0)) == Polynomial([1, 2])


# --- Addition ---

def test_add():
    assert Polynomial([0, 1, 2]).add(Polynomial([1, 2, 3])) == Polynomial([1, 3, 5])
    assert Polynomial([0.0, 1.0, 2.0]) + Polynomial([1.0, 2.0, 3.0]) == \
        Polynomial([1.0, 3.0, 5.0])


def test_add_different_lengths():
    short, long = Polynomial([1.0]), Polynomial([0.0, 1.0, 3.0])
    assert short + long == Polynomial([1.0, 1.0, 3.0])
    assert long + short == Polynomial([1.0, 1.0, 3.0])
    assert Polynomial([0]) + Polynomial([0, 1]) == Polynomial([0, 1])


def test_add_inverse_collapses_to_zero():
    p = Polynomial([1, -2, 3])
    total = p + (-p)
    assert total == Polynomial([0])
    assert total.is_zero()


def test_add_scalar():
    assert Polynomial([1, 2]) + 4 == Polynomial([5, 2])
    assert 4 + Polynomial([1, 2]) == Polynomial([5, 2])


def test_sub():
    assert Polynomial([5, 2, 1]) - Polynomial([1, 2, 1]) == Polynomial([4])
    assert 1 - Polynomial([1, 1]) == Polynomial([0, -1])


# --- Multiplication ---

def test_mul():
    assert Polynomial([1.0, 2.0, 3.0]).mul(Polynomial([1.0, 2.0, 3.0])) == \
        Polynomial([1.0, 4.0, 10.0, 12.0, 9.0])
    assert Polynomial([1, 2, 3]) * Polynomial([1, 2, 3]) == Polynomial([1, 4, 10, 12, 9])


def test_mul_by_zero():
    assert Polynomial([1, 2, 3]) * Polynomial([0]) == Polynomial([0])
    assert Polynomial([0]) * Polynomial([1, 2, 3]) == Polynomial([0])


def test_mul_longer():
    assert Polynomial([1, 2, 3, 4]) * Polynomial([0, 1, 2, 3]) == \
        Polynomial([0, 1, 4, 10, 16, 17, 12])
    assert Polynomial([1, 2, 3]) * Polynomial([1, 2, 3, 4, 5]) == \
        Polynomial([1, 4, 10, 16, 22, 22, 15])


def test_mul_degree_adds():
    p = Polynomial([1, 1]) * Polynomial([-1, 0, 2])
    assert p.degree == 3


def test_mul_scalar():
    assert 3 * Polynomial([1, 2]) == Polynomial([3, 6])
    assert Polynomial([1, 2]) * 0 == Polynomial([0])


def test_mul_field():
    p = Polynomial([FieldElement(1), FieldElement(1)])
    assert p * p == Polynomial([FieldElement(1), FieldElement(2), FieldElement(1)])


# --- Evaluation ---

def test_eval_at():
    assert Polynomial([1, 2, 3]).eval_at(8) == 209


def test_eval_at_large():
    p = Polynomial([1, 4, 10, 16, 22, 22, 15])
    assert p.eval_at(29) == 9389554026


def test_eval_aliases():
    p = Polynomial([3, 2])
    assert p.evaluate(5) == 13
    assert p(5) == 13


def test_eval_zero_polynomial():
    z = Polynomial([0.0, 0.0])
    for x in (-3.5, 0.0, 1e9):
        assert z.eval_at(x) == 0.0


def test_eval_constant():
    p = Polynomial([FieldElement(42)])
    assert p.eval_at(FieldElement(0)) == 42
    assert p.eval_at(FieldElement(99)) == 42


def test_eval_exact_types():
    assert Polynomial([Fraction(1, 2), Fraction(1, 3)]).eval_at(Fraction(3)) == \
        Fraction(3, 2)
    assert Polynomial([Decimal("0.1"), Decimal("1")]).eval_at(Decimal("2")) == \
        Decimal("2.1")


# --- Equality, formatting, immutability ---

def test_equality_is_structural():
    assert Polynomial([1, 2]) != Polynomial([1, 2, 3])
    assert Polynomial([1, 2]) != Polynomial([1, 3])
    assert Polynomial([1, 2]) != [1, 2]
    assert Polynomial([0.1 + 0.2]) != Polynomial([0.3])


def test_hash_matches_equality():
    assert len({Polynomial([1, 2, 0]), Polynomial([1, 2])}) == 1
    mixed, plain = Polynomial([FieldElement(-1), FieldElement(3)]), Polynomial([-1, 3])
    assert mixed == plain
    assert hash(mixed) == hash(plain)
    assert len({mixed, plain}) == 1


def test_str_format():
    assert str(Polynomial([1, 2, 3])) == "(1x^0) + (2x^1) + (3x^2)"
    assert str(Polynomial([0])) == "(0x^0)"


def test_repr_format():
    assert repr(Polynomial([1.0, -2.5])) == "Poly: (1.0x^0) + (-2.5x^1)"


def test_immutable():
    p = Polynomial([1, 2])
    with pytest.raises(AttributeError):
        p.coeffs = (3,)
    with pytest.raises(AttributeError):
        del p.coeffs
    with pytest.raises(TypeError):
        p.coeffs[0] = 5


def test_operations_leave_operands_untouched():
    a, b = Polynomial([1, 2]), Polynomial([3, 4, 5])
    _ = a + b
    _ = a * b
    assert a.coeffs == (1, 2)
    assert b.coeffs == (3, 4, 5)


def test_constant_and_zero_constructors():
    assert Polynomial.constant(7) == Polynomial([7])
    assert Polynomial.zero() == Polynomial([0])
    assert list(Polynomial([1, 2])) == [1, 2]


def test_copy_and_pickle():
    p = Polynomial([1, 2, 3])
    assert copy.copy(p) == p
    assert copy.deepcopy(p) == p
    assert pickle.loads(pickle.dumps(p)) == p
