"""Unit tests for the view-plane camera and pixel coordinate mapping.

Tests cover:
- Near distance derived from the field of view
- Parameter validation
- Pixel to view-plane mapping (corners, center, aspect correction)
- Primary ray construction
"""

import math

import pytest
import taichi as ti


class TestMakeCamera:
    """Tests for camera construction."""

    def test_default_fov_gives_unit_near(self):
        """Test that fov = pi/4 puts the view plane one unit from the eye."""
        from src.raycaster.camera.viewplane import make_camera

        camera = make_camera(10.0, math.pi / 4.0)

        assert abs(camera.near - 1.0) < 1e-9
        assert camera.far == 10.0
        assert camera.fov == math.pi / 4.0

    def test_near_is_inverse_tangent(self):
        """Test near = 1 / tan(fov) for other angles."""
        from src.raycaster.camera.viewplane import make_camera

        for fov in [0.1, 0.5, 1.0, 1.5]:
            camera = make_camera(5.0, fov)
            assert abs(camera.near - 1.0 / math.tan(fov)) < 1e-12

    def test_narrower_fov_moves_plane_further(self):
        """Test that a narrower field of view increases near."""
        from src.raycaster.camera.viewplane import make_camera

        assert make_camera(10.0, 0.3).near > make_camera(10.0, 0.9).near

    @pytest.mark.parametrize("fov", [0.0, -0.5, math.pi / 2.0, 2.0])
    def test_rejects_out_of_range_fov(self, fov):
        """Test that fov outside (0, pi/2) is rejected."""
        from src.raycaster.camera.viewplane import make_camera

        with pytest.raises(ValueError, match="Field of view"):
            make_camera(10.0, fov)

    def test_rejects_non_positive_far(self):
        """Test that a non-positive far distance is rejected."""
        from src.raycaster.camera.viewplane import make_camera

        with pytest.raises(ValueError, match="Far distance"):
            make_camera(0.0, math.pi / 4.0)

    def test_camera_is_immutable(self):
        """Test that the camera cannot be modified after creation."""
        import dataclasses

        from src.raycaster.camera.viewplane import make_camera

        camera = make_camera(10.0, math.pi / 4.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            camera.near = 2.0


def _map_pixel(x, y, width, height):
    """Run normalize_coords in a kernel and return the result as a tuple."""
    from src.raycaster.camera.pixel_coords import normalize_coords

    result = ti.field(dtype=ti.math.vec3, shape=())

    @ti.kernel
    def test_kernel(px: ti.i32, py: ti.i32, w: ti.i32, h: ti.i32):
        result[None] = normalize_coords(px, py, w, h)

    test_kernel(x, y, width, height)
    r = result[None]
    return (float(r[0]), float(r[1]), float(r[2]))


class TestNormalizeCoords:
    """Tests for pixel to view-plane mapping."""

    def test_top_left_maps_to_one_one(self):
        """Test that pixel (0, 0) maps to (1, 1, 0)."""
        assert _map_pixel(0, 0, 640, 640) == (1.0, 1.0, 0.0)

    def test_center_maps_to_origin(self):
        """Test that the center pixel of a square image maps to (0, 0, 0)."""
        assert _map_pixel(320, 320, 640, 640) == (0.0, 0.0, 0.0)

    def test_horizontal_axis_is_mirrored(self):
        """Test that x grows to the left: column 0 is +1, the last column near -1."""
        x0, _, _ = _map_pixel(0, 0, 640, 640)
        x_last, _, _ = _map_pixel(639, 0, 640, 640)

        assert x0 == 1.0
        assert abs(x_last - (1.0 - 2.0 * 639.0 / 640.0)) < 1e-6
        assert x_last < x0

    def test_vertical_axis_points_up(self):
        """Test that row 0 is the top (+1) and rows decrease downward."""
        _, y_top, _ = _map_pixel(0, 0, 640, 480)
        _, y_bottom, _ = _map_pixel(0, 479, 640, 480)

        assert y_top == 1.0
        assert abs(y_bottom - (1.0 - 2.0 * 479.0 / 480.0)) < 1e-6

    def test_aspect_correction_wide_image(self):
        """Test that the horizontal coordinate is scaled by width / height."""
        x, y, z = _map_pixel(320, 240, 640, 480)

        # nx = 1, so x = 1 - 640/480
        assert abs(x - (1.0 - 640.0 / 480.0)) < 1e-6
        assert abs(y) < 1e-6
        assert z == 0.0


class TestPrimaryRay:
    """Tests for primary ray construction."""

    def test_ray_origin_and_direction(self):
        """Test origin (0, 0, -near) and direction (x, y, near)."""
        from src.raycaster.camera.viewplane import eye_position, primary_ray
        from src.raycaster.core.vector import vec3

        origin = ti.field(dtype=ti.math.vec3, shape=())
        direction = ti.field(dtype=ti.math.vec3, shape=())
        eye = ti.field(dtype=ti.math.vec3, shape=())

        @ti.kernel
        def test_kernel():
            ray = primary_ray(vec3(0.25, -0.5, 0.0), 2.0)
            origin[None] = ray.origin
            direction[None] = ray.direction
            eye[None] = eye_position(2.0)

        test_kernel()
        o = origin[None]
        d = direction[None]
        assert (o[0], o[1], o[2]) == (0.0, 0.0, -2.0)
        assert (d[0], d[1], d[2]) == (0.25, -0.5, 2.0)
        assert eye[None][2] == -2.0
