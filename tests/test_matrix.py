import math

import pytest

from cephalopod.matrix import Mat3x3
from cephalopod.types import Rect, Vec2


def assert_mat_close(m1, m2):
    assert m1.values() == pytest.approx(m2.values(), abs=1e-9)


def test_default_is_identity():
    assert Mat3x3().values() == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    assert Mat3x3() == Mat3x3.IDENTITY


def test_wrong_number_of_values():
    with pytest.raises(TypeError):
        Mat3x3(1, 2, 3)


def test_identity_determinant():
    assert Mat3x3().determinant() == 1.0


def test_singular_has_no_inverse():
    assert Mat3x3(1, 2, 3, 2, 4, 6, 0, 0, 1).inverse() is None


def test_inverse_round_trip():
    m = Mat3x3().translate(Vec2(3, -7)).rotate(0.7).scale(Vec2(2, 5))
    assert_mat_close(m * m.inverse(), Mat3x3())
    assert_mat_close(m.inverse() * m, Mat3x3())


def test_transpose_twice_is_original():
    m = Mat3x3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m.transposed().transposed() == m
    assert m.transposed().values()[1] == m.values()[3]


def test_translate_moves_origin_to_offset():
    offset = Vec2(3, 4)
    assert Mat3x3().translate(offset).apply(Vec2()) == offset


def test_mul_with_vector_matches_apply():
    m = Mat3x3().rotate(1.1).translate(Vec2(2, 2))
    p = Vec2(5, -1)
    assert m * p == m.apply(p)


def test_rotation_preserves_length_and_undoes():
    p = Vec2(3, 4)
    q = Mat3x3().rotate(0.9).apply(p)
    assert math.hypot(q.x, q.y) == pytest.approx(math.hypot(p.x, p.y))
    back = Mat3x3().rotate(-0.9).apply(q)
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)


def test_rotation_about_center_keeps_center_fixed():
    center = Vec2(10, 20)
    q = Mat3x3().rotate(1.3, center).apply(center)
    assert q.x == pytest.approx(center.x)
    assert q.y == pytest.approx(center.y)


def test_scale_about_center_keeps_center_fixed():
    center = Vec2(4, 6)
    q = Mat3x3().scale(Vec2(3, 2), center).apply(center)
    assert q.x == pytest.approx(center.x)
    assert q.y == pytest.approx(center.y)


def test_apply_rect_with_scale():
    r = Mat3x3().scale(Vec2(2, 3)).apply_rect(Rect(0, 0, 1, 1))
    assert r == Rect(0, 0, 2, 3)


def test_apply_rect_identity():
    rect = Rect(1, 2, 3, 4)
    assert Mat3x3().apply_rect(rect) == rect


def test_uniform_scale_number():
    assert Mat3x3().scale(2) == Mat3x3().scale(Vec2(2, 2))


def test_multiplication_is_associative():
    a = Mat3x3().rotate(0.3)
    b = Mat3x3().translate(Vec2(1, 2))
    c = Mat3x3().scale(Vec2(2, 0.5))
    assert_mat_close((a * b) * c, a * (b * c))


def test_combine_equals_product():
    a = Mat3x3().rotate(0.4)
    b = Mat3x3().translate(Vec2(5, 6))
    assert a.combine(b) == a * b


def test_scalar_multiplication():
    m = Mat3x3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert (2 * m).values() == tuple(2 * v for v in m.values())