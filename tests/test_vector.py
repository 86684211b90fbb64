"""Unit tests for vector algebra.

Tests cover:
- Componentwise scale, add and subtract
- Dot product and length
- Normalization to unit length
- Algebraic laws (commutativity, length scaling)
"""

import math

import pytest
import taichi as ti


class TestVectorOperations:
    """Tests for individual vector operations."""

    def test_scale(self):
        """Test that scale multiplies every component."""
        from src.raycaster.core.vector import scale, vec3

        result = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = scale(vec3(1.0, -2.0, 3.0), 2.0)

        test_kernel()
        r = result[None]
        assert abs(r[0] - 2.0) < 1e-6
        assert abs(r[1] - (-4.0)) < 1e-6
        assert abs(r[2] - 6.0) < 1e-6

    def test_add_and_subtract(self):
        """Test componentwise addition and subtraction."""
        from src.raycaster.core.vector import add, subtract, vec3

        sum_result = ti.field(dtype=ti.math.vec3, shape=())
        diff_result = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            a = vec3(1.0, 2.0, 3.0)
            b = vec3(0.5, -1.0, 4.0)
            sum_result[None] = add(a, b)
            diff_result[None] = subtract(a, b)

        test_kernel()
        s = sum_result[None]
        d = diff_result[None]
        assert abs(s[0] - 1.5) < 1e-6
        assert abs(s[1] - 1.0) < 1e-6
        assert abs(s[2] - 7.0) < 1e-6
        assert abs(d[0] - 0.5) < 1e-6
        assert abs(d[1] - 3.0) < 1e-6
        assert abs(d[2] - (-1.0)) < 1e-6

    def test_dot_and_length(self):
        """Test dot product and Euclidean length."""
        from src.raycaster.core.vector import dot, length, vec3

        dot_result = ti.field(dtype=ti.f32, shape=())
        length_result = ti.field(dtype=ti.f32, shape=())

        @ti.kernel
        def test_kernel():
            dot_result[None] = dot(vec3(1.0, 2.0, 3.0), vec3(4.0, -5.0, 6.0))
            length_result[None] = length(vec3(3.0, 4.0, 12.0))

        test_kernel()
        assert abs(dot_result[None] - 12.0) < 1e-6
        assert abs(length_result[None] - 13.0) < 1e-6

    def test_normalize_direction(self):
        """Test that normalize keeps direction and produces unit length."""
        from src.raycaster.core.vector import normalize, vec3

        result = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = normalize(vec3(0.0, 3.0, 4.0))

        test_kernel()
        r = result[None]
        assert abs(r[0]) < 1e-6
        assert abs(r[1] - 0.6) < 1e-6
        assert abs(r[2] - 0.8) < 1e-6

    def test_normalize_zero_vector_is_nan(self):
        """Test that the zero vector has no direction (NaN components)."""
        from src.raycaster.core.vector import normalize, vec3

        result = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            result[None] = normalize(vec3(0.0, 0.0, 0.0))

        test_kernel()
        assert math.isnan(result[None][0])


class TestVectorLaws:
    """Tests for algebraic laws over a set of sample vectors."""

    SAMPLES = [
        ((1.0, 2.0, 3.0), (-4.0, 0.5, 2.0), 2.5),
        ((0.1, -0.2, 0.3), (7.0, 8.0, -9.0), -3.0),
        ((-5.0, 5.0, 0.0), (0.0, 0.0, 1.0), 0.25),
    ]

    @pytest.mark.parametrize("a,b,s", SAMPLES)
    def test_laws(self, a, b, s):
        """Test commutativity, length scaling and unit normalization."""
        from src.raycaster.core.vector import add, dot, length, normalize, scale, vec3

        add_ab = ti.field(dtype=ti.math.vec3, shape=())
        add_ba = ti.field(dtype=ti.math.vec3, shape=())
        dot_ab = ti.field(dtype=ti.f32, shape=())
        dot_ba = ti.field(dtype=ti.f32, shape=())
        scaled_length = ti.field(dtype=ti.f32, shape=())
        plain_length = ti.field(dtype=ti.f32, shape=())
        unit_length = ti.field(dtype=ti.f32, shape=())

        @ti.kernel
        def test_kernel(va: ti.math.vec3, vb: ti.math.vec3, factor: ti.f32):
            add_ab[None] = add(va, vb)
            add_ba[None] = add(vb, va)
            dot_ab[None] = dot(va, vb)
            dot_ba[None] = dot(vb, va)
            scaled_length[None] = length(scale(va, factor))
            plain_length[None] = length(va)
            unit_length[None] = length(normalize(va))

        test_kernel(vec3(*a), vec3(*b), s)

        for i in range(3):
            assert add_ab[None][i] == add_ba[None][i]
        assert dot_ab[None] == dot_ba[None]
        assert abs(scaled_length[None] - abs(s) * plain_length[None]) < 1e-4
        assert abs(unit_length[None] - 1.0) < 1e-5


class TestRay:
    """Tests for the ray data structure."""

    def test_ray_at(self):
        """Test origin + t * direction with an unnormalized direction."""
        from src.raycaster.core.ray import make_ray, ray_at
        from src.raycaster.core.vector import vec3

        result = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            ray = make_ray(vec3(1.0, 0.0, -1.0), vec3(0.0, 2.0, 1.0))
            result[None] = ray_at(ray, 1.5)

        test_kernel()
        r = result[None]
        assert (r[0], r[1], r[2]) == (1.0, 3.0, 0.5)
