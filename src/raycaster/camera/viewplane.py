"""View-plane camera model for primary ray generation.

The camera sits on the z-axis behind a view plane and looks toward +z. Its
only derived quantity is the distance ``near`` from the eye to the view plane,
computed from the field-of-view half-angle:

    near = 1 / tan(fov)

Primary rays start at the eye ``(0, 0, -near)`` and pass through the view-plane
point produced by :func:`src.raycaster.camera.pixel_coords.normalize_coords`.
Their direction ``(x, y, near)`` is left unnormalized.

Example:
    >>> import math
    >>> camera = make_camera(10.0, math.pi / 4.0)
    >>> round(camera.near, 6)
    1.0
"""

import math
from dataclasses import dataclass

import taichi as ti

from src.raycaster.core.ray import Ray, make_ray
from src.raycaster.core.vector import vec3

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass(frozen=True)
class Camera:
    """Configuration for the view-plane camera.

    Attributes:
        near: Distance from the eye to the view plane (1 / tan(fov)).
        far: Far clipping distance. Stored for completeness, not used by the
            intersection code.
        fov: Field-of-view half-angle in radians.
    """

    near: float
    far: float
    fov: float


def make_camera(far: float, fov: float) -> Camera:
    """Create a camera from a far distance and field-of-view half-angle.

    Args:
        far: Far clipping distance (must be positive).
        fov: Field-of-view half-angle in radians, strictly between 0 and pi/2
            so that tan(fov) is finite and positive.

    Returns:
        A Camera with near = 1 / tan(fov).

    Raises:
        ValueError: If fov or far are out of range.
    """
    if not 0.0 < fov < math.pi / 2.0:
        raise ValueError(f"Field of view {fov} must be in (0, pi/2) radians")
    if far <= 0.0:
        raise ValueError(f"Far distance {far} must be positive")
    return Camera(near=1.0 / math.tan(fov), far=far, fov=fov)


# =============================================================================
# Ray Generation (Taichi-compatible)
# =============================================================================


@ti.func
def eye_position(near: ti.f32) -> vec3:
    """Position of the eye, a distance ``near`` behind the view plane."""
    return vec3(0.0, 0.0, -1.0 * near)


@ti.func
def primary_ray(coords: vec3, near: ti.f32) -> Ray:
    """Build the ray from the eye through a view-plane point.

    Args:
        coords: View-plane coordinates from normalize_coords (z is ignored).
        near: Camera near distance.

    Returns:
        A Ray with origin (0, 0, -near) and direction (coords.x, coords.y, near).
    """
    return make_ray(eye_position(near), vec3(coords.x, coords.y, near))
