import math

import pytest

from gravfield.vector_utils import Vector, ZERO


def test_components_follow_theta():
    v = Vector(2.0, math.pi / 2)
    assert v.magnitude_x() == pytest.approx(0.0, abs=1e-12)
    assert v.magnitude_y() == pytest.approx(2.0)


@pytest.mark.parametrize("a, b", [
    (Vector(1.0, 0.3), Vector(2.5, -1.2)),
    (Vector(3.0, math.pi), Vector(0.5, math.pi / 3)),
    (Vector(1e-9, 2.0), Vector(7.0, -3.0)),
])
def test_compose_is_commutative(a, b):
    ab = a.compose(b)
    ba = b.compose(a)
    assert ab.magnitude == pytest.approx(ba.magnitude)
    assert ab.theta == pytest.approx(ba.theta)


def test_compose_with_zero_returns_original():
    v = Vector(4.2, 5.0)
    assert v.compose(ZERO) == v
    assert ZERO.compose(v) == v
    assert v.compose(Vector(0.0, 1.3)) is v


def test_compose_opposite_vectors_cancel():
    v = Vector(3.0, 0.0).compose(Vector(3.0, math.pi))
    assert v.magnitude == pytest.approx(0.0, abs=1e-12)


def test_compose_perpendicular():
    v = Vector(3.0, 0.0).compose(Vector(4.0, math.pi / 2))
    assert v.magnitude == pytest.approx(5.0)
    assert v.theta == pytest.approx(math.atan2(4.0, 3.0))


def test_compose_is_associative_within_tolerance():
    a, b, c = Vector(1.0, 0.1), Vector(2.0, 2.0), Vector(0.7, -1.0)
    left = a.compose(b).compose(c)
    right = a.compose(b.compose(c))
    assert left.magnitude_x() == pytest.approx(right.magnitude_x())
    assert left.magnitude_y() == pytest.approx(right.magnitude_y())


def test_scaled_keeps_direction():
    v = Vector(2.0, 1.1).scaled(3.0)
    assert v == Vector(6.0, 1.1)


def test_vectors_are_immutable():
    v = Vector(1.0, 0.0)
    with pytest.raises(AttributeError):
        v.magnitude = 2.0
