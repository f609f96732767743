import math

import pytest

from voxelmesh.vectors import Vector3D, Vector3DF, Vector3DI, Vector4DF, max3, min3

IDENTITY = [1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0]


def translation_data(tx, ty, tz):
    data = list(IDENTITY)
    data[12], data[13], data[14] = tx, ty, tz
    return data


class FakeMatrix:
    def __init__(self, data):
        self.data = data


@pytest.mark.parametrize("values", [(3, 1, 2), (1, 2, 3), (2, 3, 1), (3, 2, 1)])
def test_min3_max3(values):
    assert min3(*values) == 1
    assert max3(*values) == 3


def test_float_vector_casts_components():
    v = Vector3DF(1, 2, 3)
    assert tuple(v) == (1.0, 2.0, 3.0)
    assert all(isinstance(c, float) for c in v)


def test_int_vector_truncates_toward_zero():
    v = Vector3DI(1.9, -1.9, 2.0)
    assert tuple(v) == (1, -1, 2)


def test_add_sub_round_trip():
    a = Vector3DI(4, -5, 6)
    b = Vector3DI(7, 8, -9)
    assert (a + b) - b == a


def test_inplace_returns_same_object():
    v = Vector3DF(1.0, 2.0, 3.0)
    same = v
    v += Vector3DF(1.0, 1.0, 1.0)
    assert v is same
    assert tuple(v) == (2.0, 3.0, 4.0)


def test_scalar_operand_is_cast_to_component_type():
    v = Vector3DI(1, 2, 3) + 1.7
    assert tuple(v) == (2, 3, 4)


def test_int_division_truncates():
    assert tuple(Vector3DI(-7, 7, 8) / 2) == (-3, 3, 4)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3DF(1.0, 2.0, 3.0) / 0


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vector3DF(1.0, 2.0, 3.0) + "a"


def test_cross_of_axes():
    v = Vector3DF(1, 0, 0).cross(Vector3DF(0, 1, 0))
    assert v == Vector3DF(0, 0, 1)


def test_cross_is_orthogonal():
    a = Vector3DF(1.5, -2.0, 0.5)
    b = Vector3DF(0.25, 3.0, -1.0)
    c = a.copy().cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_normalize_float_gives_unit_length():
    v = Vector3DF(3.0, -4.0, 12.0).normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_vector_unchanged():
    v = Vector3DF(0, 0, 0).normalize()
    assert v == Vector3DF(0, 0, 0)


def test_normalize_int_scales_to_255():
    v = Vector3DI(10, 20, 30).normalize()
    assert 250 <= v.length() <= 255
    assert all(isinstance(c, int) for c in v)


def test_distance_properties():
    a = Vector3DF(1.0, 2.0, 3.0)
    b = Vector3DF(-4.0, 0.5, 9.0)
    assert a.dist(b) == pytest.approx(b.dist(a))
    assert a.dist(a) == 0.0
    assert a.dist_sq(b) == pytest.approx(a.dist(b) ** 2)
    assert a.length_sq() == pytest.approx(a.length() ** 2)


def test_clamp_limits_components():
    v = Vector3DF(-5.0, 0.5, 7.0).clamp(0.0, 1.0)
    assert tuple(v) == (0.0, 0.5, 1.0)


def test_random_within_bounds():
    for _ in range(50):
        v = Vector3DF().random(2.0, 3.0, -1.0, 0.0, 10.0, 20.0)
        assert 2.0 <= v.x <= 3.0
        assert -1.0 <= v.y <= 0.0
        assert 10.0 <= v.z <= 20.0


def test_random_between_vectors():
    lo, hi = Vector3DF(1, 2, 3), Vector3DF(4, 5, 6)
    for _ in range(50):
        v = Vector3DF().random_between(lo, hi)
        assert all(a <= c <= b for a, c, b in zip(lo, v, hi))


@pytest.mark.parametrize("rgb", [(1.0, 0.0, 0.0), (0.2, 0.5, 0.8), (0.9, 0.3, 0.1), (0.4, 0.4, 0.4)])
def test_hsv_round_trip(rgb):
    back = Vector3DF(*rgb).rgb_to_hsv().hsv_to_rgb()
    assert tuple(back) == pytest.approx(rgb)


def test_grey_has_no_saturation():
    hsv = Vector3DF(0.4, 0.4, 0.4).rgb_to_hsv()
    assert hsv.y == 0.0
    assert hsv.z == pytest.approx(0.4)


def test_transform_identity_and_translation():
    v = Vector3DF(1.0, 2.0, 3.0)
    assert v.copy().transform(IDENTITY) == v
    moved = v.copy().transform(FakeMatrix(translation_data(10.0, 20.0, 30.0)))
    assert tuple(moved) == pytest.approx((11.0, 22.0, 33.0))


def test_imul_with_matrix_transforms():
    v = Vector3DF(1.0, 1.0, 1.0)
    v *= FakeMatrix(translation_data(1.0, 2.0, 3.0))
    assert tuple(v) == pytest.approx((2.0, 3.0, 4.0))


def test_copy_is_independent():
    a = Vector3DF(1, 2, 3)
    b = a.copy()
    b.set(9, 9, 9)
    assert a == Vector3DF(1, 2, 3)
    assert isinstance(b, Vector3D)


def test_vector4_set_defaults_w_to_one():
    v = Vector4DF().set(1.0, 2.0, 3.0)
    assert v.w == 1.0


def test_vector4_cross_matches_3d_and_zeroes_w():
    a = Vector4DF(1.5, -2.0, 0.5, 7.0)
    b = Vector4DF(0.25, 3.0, -1.0, 2.0)
    c = a.copy().cross(b)
    expected = Vector3DF(a.x, a.y, a.z).cross(Vector3DF(b.x, b.y, b.z))
    assert (c.x, c.y, c.z) == pytest.approx(tuple(expected))
    assert c.w == 0.0


def test_vector4_clamp_upper_only():
    v = Vector4DF(-5.0, 5.0, 0.5, 2.0).clamp(1.0, 1.0, 1.0, 1.0)
    assert tuple(v) == (-5.0, 1.0, 0.5, 1.0)


def test_vector4_inplace_with_3d_keeps_w():
    v = Vector4DF(1.0, 2.0, 3.0, 4.0)
    v += Vector3DF(1.0, 1.0, 1.0)
    assert v.w == 4.0
    assert (v.x, v.y, v.z) == (2.0, 3.0, 4.0)


def test_vector4_normalize_and_length():
    v = Vector4DF(1.0, 2.0, -2.0, 4.0).normalize()
    assert v.length() == pytest.approx(1.0)
    assert Vector4DF().normalize() == Vector4DF()
    assert Vector4DF().length() == 0.0


def test_vector4_distance():
    a = Vector4DF(1.0, 2.0, 3.0, 4.0)
    b = Vector4DF(0.0, -1.0, 5.0, 2.0)
    assert a.dist(b) == pytest.approx(math.sqrt(a.dist_sq(b)))
    assert a.dist(a) == 0.0


def test_vector4_transform():
    v = Vector4DF(1.0, 2.0, 3.0, 1.0)
    assert v.copy().transform(IDENTITY) == v
    moved = v.copy().transform(translation_data(1.0, 1.0, 1.0))
    assert tuple(moved) == pytest.approx((2.0, 3.0, 4.0, 1.0))
    direction = Vector4DF(1.0, 2.0, 3.0, 0.0).transform(translation_data(1.0, 1.0, 1.0))
    assert tuple(direction) == pytest.approx((1.0, 2.0, 3.0, 0.0))


def test_vector4_transform_wrong_size_raises():
    with pytest.raises(ValueError):
        Vector4DF(1.0, 2.0, 3.0, 4.0).transform([1.0, 2.0, 3.0])


def test_vector4_add_sub_round_trip():
    a = Vector4DF(1.0, 2.0, 3.0, 4.0)
    b = Vector4DF(0.5, -1.5, 2.5, -3.5)
    assert tuple((a + b) - b) == pytest.approx(tuple(a))
    assert a.dot(b) == pytest.approx(b.dot(a))