import math

import pytest

from ftpp.ivector3 import IVector3


@pytest.fixture
def vec1():
    return IVector3(3, 4, 1)


@pytest.fixture
def vec2():
    return IVector3(1, 2, 3)


def test_components(vec1):
    assert (vec1.x, vec1.y, vec1.z) == (3, 4, 1)


def test_add(vec1, vec2):
    assert vec1 + vec2 == IVector3(4, 6, 4)


def test_sub(vec1, vec2):
    assert vec1 - vec2 == IVector3(2, 2, -2)


def test_mul_vector(vec1, vec2):
    assert vec1 * vec2 == IVector3(3, 8, 3)


def test_div_vector(vec1, vec2):
    assert vec1 / vec2 == IVector3(3, 2, 0)


def test_equality(vec1, vec2):
    assert (vec1 == vec2) is False
    assert (vec1 != vec2) is True
    assert vec1 == IVector3(3, 4, 1)


def test_length(vec1):
    assert vec1.length() == pytest.approx(math.sqrt(26))
    assert vec1.length() == pytest.approx(5.099, abs=1e-3)


def test_normalize(vec1):
    norm = vec1.normalize()
    assert norm.length() == pytest.approx(1.0)
    assert norm.x == pytest.approx(3 / math.sqrt(26))
    assert norm.y == pytest.approx(4 / math.sqrt(26))
    assert norm.z == pytest.approx(1 / math.sqrt(26))


def test_normalize_zero():
    assert IVector3(0, 0, 0).normalize() == IVector3(0.0, 0.0, 0.0)


def test_dot(vec1, vec2):
    assert vec1.dot(vec2) == 14


def test_cross(vec1, vec2):
    assert vec1.cross(vec2) == IVector3(10, -8, 2)


def test_cross_is_perpendicular(vec1, vec2):
    product = vec1.cross(vec2)
    assert product.dot(vec1) == 0
    assert product.dot(vec2) == 0


def test_cross_with_self_is_zero(vec1):
    assert vec1.cross() == IVector3(0, 0, 0)


def test_scalar_ops(vec1):
    assert vec1 * 3 == IVector3(9, 12, 3)
    assert vec1 / 2 == IVector3(1, 2, 0)


def test_integer_division_truncates_toward_zero():
    assert IVector3(-7, 7, -1) / 2 == IVector3(-3, 3, 0)


def test_components_are_mutable(vec1):
    vec1.z = 5
    assert vec1 == IVector3(3, 4, 5)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        IVector3(1, 1, 1) / 0