"""Sphere primitive with analytic ray-sphere intersection.

The ray-sphere intersection is found by solving

    |O + t*D - P|^2 = R^2

for the ray origin O, direction D, sphere center P and radius R, which expands
to a*t^2 + b*t + c = 0 with

    a = dot(D, D)
    b = 2 * dot(O - P, D)
    c = dot(P, P) + dot(O, O) - 2 * dot(O, P) - R^2

A positive discriminant b^2 - 4ac is a hit; zero (a tangent ray) and negative
values are misses.

Two near-root formulas are available, selected by :class:`RootFormula`:

``LEGACY``
    ``t0 = (b^2 - sqrt(disc)) / (2a)``. This is not the textbook quadratic
    root, but it is the formula the animation was designed with, and the
    rendered image depends on it. No sign check is applied to ``t0``.
``STANDARD``
    ``t0 = (-b - sqrt(disc)) / (2a)``, falling back to the far root when the
    near one is behind the origin, and reporting a miss when both are.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.geometry.sphere import Sphere, intersect_sphere, vec3
    >>> sphere = Sphere(center=vec3(0.0, -2.0, 4.0), radius=0.75)
    >>> # Use intersect_sphere within a Taichi kernel
"""

from enum import IntEnum

import taichi as ti

from src.raycaster.core.ray import Ray, ray_at
from src.raycaster.core.vector import dot, normalize, subtract, vec3


class RootFormula(IntEnum):
    """Which quadratic root the intersection reports."""

    LEGACY = 0
    STANDARD = 1


# Plain int for comparisons inside Taichi scope
_STANDARD_ROOT = int(RootFormula.STANDARD)


@ti.dataclass
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere (vec3).
        radius: The radius of the sphere (positive float).
    """

    center: vec3
    radius: ti.f32


@ti.dataclass
class SphereHit:
    """Record of a ray-sphere intersection.

    Attributes:
        hit: 1 if the ray hit the sphere, 0 otherwise.
        t: Ray parameter of the reported root. Only valid if hit == 1.
        point: The intersection point. Only valid if hit == 1.
        normal: Unit surface normal pointing away from the center.
            Only valid if hit == 1.
        discriminant: The quadratic discriminant b^2 - 4ac.
    """

    hit: ti.i32
    t: ti.f32
    point: vec3
    normal: vec3
    discriminant: ti.f32


@ti.func
def make_sphere(center: vec3, radius: ti.f32) -> Sphere:
    """Create a sphere from center and radius inside a Taichi kernel."""
    return Sphere(center=center, radius=radius)


@ti.func
def compute_discriminant(ray: Ray, sphere: Sphere):
    """Compute the quadratic coefficients and discriminant for a ray.

    Args:
        ray: The ray to test (direction need not be normalized).
        sphere: The sphere to test against.

    Returns:
        A tuple (a, b, discriminant).
    """
    origin = ray.origin
    direction = ray.direction
    center = sphere.center

    a = dot(direction, direction)
    b = 2.0 * dot(subtract(origin, center), direction)
    c = (
        dot(center, center)
        + dot(origin, origin)
        - 2.0 * dot(origin, center)
        - sphere.radius * sphere.radius
    )
    discriminant = b * b - 4.0 * a * c
    return a, b, discriminant


@ti.func
def intersect_sphere(ray: Ray, sphere: Sphere, root_formula: ti.i32) -> SphereHit:
    """Intersect a ray with a sphere.

    Args:
        ray: The ray to test.
        sphere: The sphere to test against.
        root_formula: An int(RootFormula) value choosing the near-root formula.

    Returns:
        A SphereHit. Check the hit field to determine if an intersection
        occurred.
    """
    a, b, discriminant = compute_discriminant(ray, sphere)

    # Initialize result fields (Taichi requires outer-scope declaration)
    did_hit = 0
    hit_t = 0.0
    hit_point = vec3(0.0, 0.0, 0.0)
    hit_normal = vec3(0.0, 0.0, 0.0)

    if discriminant > 0.0:
        sqrt_d = ti.sqrt(discriminant)
        t = 0.0
        valid = 1

        if root_formula == _STANDARD_ROOT:
            t = (-b - sqrt_d) / (2.0 * a)
            if t <= 0.0:
                t = (-b + sqrt_d) / (2.0 * a)
            if t <= 0.0:
                valid = 0
        else:
            t = (b * b - sqrt_d) / (2.0 * a)

        if valid == 1:
            did_hit = 1
            hit_t = t
            hit_point = ray_at(ray, t)
            hit_normal = normalize(subtract(hit_point, sphere.center))

    return SphereHit(
        hit=did_hit,
        t=hit_t,
        point=hit_point,
        normal=hit_normal,
        discriminant=discriminant,
    )
