"""Tests for Vector3 and the reflect/refract helpers."""

import math

import pytest

from conftest import assert_vec_close
from core.utils import NO_REFRACTION, clamp, reflect, refract, sign
from core.vector import Vector3


class TestVectorArithmetic:
    """Operators and products."""

    def test_add_sub_neg(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert a + b == Vector3(5.0, 7.0, 9.0)
        assert b - a == Vector3(3.0, 3.0, 3.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_scalar_and_componentwise_multiply(self):
        a = Vector3(1.0, 2.0, 3.0)
        assert a * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * a == Vector3(2.0, 4.0, 6.0)
        assert a * Vector3(2.0, 0.5, -1.0) == Vector3(2.0, 1.0, -3.0)

    def test_divide(self):
        assert Vector3(2.0, 4.0, 6.0) / 2.0 == Vector3(1.0, 2.0, 3.0)

    def test_divide_by_zero_is_asserted(self):
        with pytest.raises(AssertionError):
            Vector3(1.0, 1.0, 1.0) / 0.0

    def test_operators_return_new_vectors(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = a + Vector3(0.0, 0.0, 0.0)
        assert b is not a
        assert a == Vector3(1.0, 2.0, 3.0)

    def test_dot_and_cross(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
        assert y.cross(x) == Vector3(0.0, 0.0, -1.0)
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, 5.0, 6.0)) == 32.0

    def test_length_and_normalize(self):
        v = Vector3(3.0, 4.0, 0.0)
        assert v.length() == 5.0
        assert_vec_close(v.normalize(), (0.6, 0.8, 0.0))
        assert v.normalize().length() == pytest.approx(1.0)

    def test_normalize_zero_vector_is_asserted(self):
        with pytest.raises(AssertionError):
            Vector3(0.0, 0.0, 0.0).normalize()

    def test_axis_access_and_iteration(self):
        v = Vector3(7.0, 8.0, 9.0)
        assert (v[0], v[1], v[2]) == (7.0, 8.0, 9.0)
        assert list(v) == [7.0, 8.0, 9.0]
        assert v.to_tuple() == (7.0, 8.0, 9.0)


class TestHelpers:

    def test_sign(self):
        assert sign(-2.5) == -1.0
        assert sign(0.0) == 0.0
        assert sign(3.0) == 1.0

    def test_clamp(self):
        assert clamp(2.0, 0.0, 1.0) == 1.0
        assert clamp(-2.0, 0.0, 1.0) == 0.0
        assert clamp(0.25, 0.0, 1.0) == 0.25


UNIT_NORMALS = [
    Vector3(0.0, 1.0, 0.0),
    Vector3(1.0, 0.0, 0.0),
    Vector3(1.0, 1.0, 1.0).normalize(),
    Vector3(-0.3, 0.2, 0.9).normalize(),
]

UNIT_INCIDENTS = [
    Vector3(0.0, -1.0, 0.0),
    Vector3(1.0, -1.0, 0.0).normalize(),
    Vector3(0.2, 0.5, -0.8).normalize(),
]


class TestReflect:
    """Mirror reflection about a unit normal."""

    @pytest.mark.parametrize("n", UNIT_NORMALS)
    @pytest.mark.parametrize("i", UNIT_INCIDENTS)
    def test_reflection_keeps_length_and_flips_normal_component(self, i, n):
        r = reflect(i, n)
        assert r.length() == pytest.approx(1.0)
        assert r.dot(n) == pytest.approx(-i.dot(n))

    def test_reflect_off_floor(self):
        r = reflect(Vector3(1.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert r == Vector3(1.0, 1.0, 0.0)


class TestRefract:
    """Snell refraction with back-face handling and total internal reflection."""

    def test_normal_incidence_passes_straight_through(self):
        r = refract(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.5)
        assert_vec_close(r, (0.0, -1.0, 0.0))

    def test_snell_law_entering_denser_medium(self):
        angle = math.radians(30.0)
        i = Vector3(math.sin(angle), -math.cos(angle), 0.0)
        r = refract(i, Vector3(0.0, 1.0, 0.0), 1.5)
        assert r.length() == pytest.approx(1.0)
        # sin(theta_t) = sin(theta_i) / 1.5
        assert r.x == pytest.approx(0.5 / 1.5)
        assert r.y < 0.0

    def test_back_face_flips_normal(self):
        r = refract(Vector3(0.0, 1.0, 0.0), Vector3(0.0, 1.0, 0.0), 1.5)
        assert_vec_close(r, (0.0, 1.0, 0.0))

    def test_leaving_denser_medium_bends_away_from_normal(self):
        angle = math.radians(20.0)
        i = Vector3(math.sin(angle), math.cos(angle), 0.0)
        r = refract(i, Vector3(0.0, 1.0, 0.0), 1.5)
        assert r.x == pytest.approx(1.5 * math.sin(angle))

    def test_total_internal_reflection_returns_sentinel(self):
        i = Vector3(0.8, 0.6, 0.0)
        r = refract(i, Vector3(0.0, 1.0, 0.0), 1.5)
        assert r == NO_REFRACTION
        assert r == Vector3(1.0, 0.0, 0.0)
