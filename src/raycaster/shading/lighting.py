"""Diffuse lighting from a light orbiting in the XZ-plane.

The light direction at animation time ``t`` is ``normalize(cos t, 0, sin t)``,
so the light completes one orbit every 2*pi time units. A surface point with
unit normal ``n`` receives

    L = -dot(light, n)

Points with ``L <= 0`` face away from the light and are pure black; there is no
ambient term. Lit points get a red channel of ``round(255 * L^2)``. The
squared falloff gives a softer ramp than a linear Lambertian term.
"""

import taichi as ti

from src.raycaster.core.vector import dot, normalize, vec3
from src.raycaster.geometry.sphere import SphereHit
from src.raycaster.shading.color import encode_channel, pack_color

# Alpha value for every rendered pixel
OPAQUE = 255


@ti.func
def light_direction(current_time: ti.f32) -> vec3:
    """Unit direction of the orbiting light at a given animation time."""
    return normalize(vec3(ti.cos(current_time), 0.0, ti.sin(current_time)))


@ti.func
def lighting_amount(normal: vec3, current_time: ti.f32) -> ti.f32:
    """Compute the lighting scalar for a surface normal.

    Args:
        normal: Unit surface normal.
        current_time: Animation time driving the light direction.

    Returns:
        -dot(light_direction, normal). Positive values are lit.
    """
    return dot(light_direction(current_time), normal) * -1.0


@ti.func
def background_color() -> ti.u32:
    """Packed color of pixels whose ray misses every object."""
    return pack_color(0, 0, 0, OPAQUE)


@ti.func
def shade_hit(hit: SphereHit, current_time: ti.f32) -> ti.u32:
    """Map an intersection record to a packed pixel color.

    Args:
        hit: Result of intersect_sphere.
        current_time: Animation time driving the light direction.

    Returns:
        The packed color: background for misses, black for unlit points and
        a red ramp for lit points.
    """
    color = background_color()
    if hit.hit == 1:
        amount = lighting_amount(hit.normal, current_time)
        # NaN compares false here, so a degenerate normal stays unlit
        if amount > 0.0:
            color = pack_color(encode_channel(amount * amount), 0, 0, OPAQUE)
    return color
