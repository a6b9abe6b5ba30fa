import math

import pytest

from raytools.vec4 import Vec4, to_homogeneous
from raytools.vectors import Normal3, Point3, Vec3


def test_creates_vector():
    v = Vec4(0.0, 0.0, 0.0, 0.0)
    assert (v.x, v.y, v.z, v.w) == (0.0, 0.0, 0.0, 0.0)
    assert Vec4() == v


def test_out_of_bounds_index_raises():
    v = Vec4(1.0, 2.0, 0.5, 7.5)
    assert (v[0], v[1], v[2], v[3]) == (1.0, 2.0, 0.5, 7.5)
    with pytest.raises(IndexError):
        v[4]
    with pytest.raises(IndexError):
        v[-1]


def test_sets_coords():
    v = Vec4()
    v.x = 5.0
    v[1] = 4.0
    v[2] = 0.2
    v.w = -5.2
    assert v.x == 5.0
    assert v[1] == 4.0
    assert v[2] == 0.2
    assert v[3] == -5.2


def test_changes_sign():
    v = -Vec4(-1.55, -1.55, -1.55, -1.55)
    assert list(v) == [1.55, 1.55, 1.55, 1.55]


def test_adds_vector_or_number():
    v = Vec4(0.0, 0.0, 5.0, 3.5) + 4.46
    assert list(v) == pytest.approx([4.46, 4.46, 9.46, 7.96])
    v = v + Vec4(4.0, 6.0, 0.0, 45.0)
    assert list(v) == pytest.approx([8.46, 10.46, 9.46, 52.96])


def test_subtracts_vector_or_number():
    v = Vec4(0.0, 0.0, 3.0, -5.5) - 4.46
    assert list(v) == pytest.approx([-4.46, -4.46, -1.46, -9.96])
    v = v - Vec4(4.0, 6.0, 0.0, -1.2)
    assert list(v) == pytest.approx([-8.46, -10.46, -1.46, -8.76])


def test_length():
    assert Vec4(0.0, 0.0, 0.0, 0.0).length() == 0.0
    assert Vec4(1.0, 1.0, 1.0, 1.0).length() == 2.0
    assert Vec4(3.0, 3.0, 3.0, 3.0).length() == 6.0
    assert Vec4(-5.0, -5.0, 5.0, 5.0).length() == 10.0


def test_multiplies_with_number():
    v = Vec4(1.0, 0.0, 5.0, -9.0) * 5.0
    assert list(v) == [5.0, 0.0, 25.0, -45.0]
    assert 5.0 * Vec4(1.0, 0.0, 5.0, -9.0) == v


def test_normalizes_vector():
    v = Vec4(4.53, 93.5, -56.3, -100.00001)
    v.normalize()
    assert v.length() == pytest.approx(1.0, rel=1e-14)


def test_dot_product():
    assert Vec4(3.0, 3.0, 4.0, 1.0).dot(Vec4(3.0, 3.0, 9.0, -10.0)) == 44.0
    assert Vec4(-1.0, 5.0, 9.0, -3.0).dot(Vec4(-3.0, 3.0, 6.0, 0.0)) == 72.0


def test_unit_vector():
    v = Vec4(4.36, 7.62, 0.466, -30485.55555555).unit()
    assert v.length() == pytest.approx(1.0, rel=1e-14)


def test_adds_two_vectors():
    v = Vec4(4.532, 45.67, 0.83, -44.6) + Vec4(0.3456, 124.67, 1.0, 9.0)
    assert list(v) == pytest.approx([4.8776, 170.34, 1.83, -35.6])


def test_subtracts_two_vectors():
    v = Vec4(40.54, 2.4, 0.62, 0.0) - Vec4(4.20, -1.7, -1.0, -99.99999)
    assert list(v) == pytest.approx([36.34, 4.1, 1.62, 99.99999])


def test_divides_by_number():
    v = Vec4(36.6, -30.6, 120.2586, -0.5555555) / 3.0
    assert list(v) == pytest.approx([36.6 / 3.0, -30.6 / 3.0, 120.2586 / 3.0, -0.5555555 / 3.0])


def test_divides_by_vector():
    v = Vec4(434.5, 93.5, 3858.53, -0.99999999) / Vec4(32.5, -16.2, 0.567, -999.99999999)
    assert v.x == pytest.approx(434.5 / 32.5)
    assert v.y == pytest.approx(-93.5 / 16.2)
    assert v.z == pytest.approx(3858.53 / 0.567)
    assert v[3] == pytest.approx(-0.99999999 / -999.99999999)


def test_equality_and_inequality():
    assert Vec4(4.2, -6.54, 34855.38596, -0.9938375) == Vec4(4.2, -6.54, 34855.38596, -0.9938375)
    assert Vec4(4.2, -6.54, 0.0, 100.0) != Vec4(4.2, -4.36, 0.0, 100.0)


def test_zero():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    v.zero()
    assert v == Vec4()


def test_point_lifts_with_w_one():
    v = to_homogeneous(Point3(-3.0, 4.0, 5.0))
    assert v == Vec4(-3.0, 4.0, 5.0, 1.0)
    assert v.to_point3() == Point3(-3.0, 4.0, 5.0)


def test_vector_and_normal_lift_with_w_zero():
    assert to_homogeneous(Vec3(-4.0, 6.0, 8.0)) == Vec4(-4.0, 6.0, 8.0, 0.0)
    assert to_homogeneous(Normal3(0.0, 1.0, 0.0)) == Vec4(0.0, 1.0, 0.0, 0.0)


def test_conversions_drop_w():
    v = Vec4(1.0, 2.0, 3.0, 9.0)
    assert v.to_vec3() == Vec3(1.0, 2.0, 3.0)
    assert v.to_normal3() == Normal3(1.0, 2.0, 3.0)


def test_to_homogeneous_rejects_other_types():
    with pytest.raises(TypeError):
        to_homogeneous((1.0, 2.0, 3.0))


def test_str_format():
    assert str(Vec4(1.0, 2.5, -3.0, 0.0)) == "(1,2.5,-3,0)"


def test_length_matches_sqrt():
    assert Vec4(1.0, 2.0, 2.0, 4.0).length() == pytest.approx(math.sqrt(25.0))