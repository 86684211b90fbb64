"""Per-pixel ray casting for the animated sphere scene.

This module implements the render kernel. For each pixel it maps the pixel to
the view plane, builds the primary ray, intersects it with the sphere and
shades the hit with the orbiting light, writing one packed color per pixel.

Pixels are independent of each other, so the pixel loop is the outermost loop
of a Taichi kernel and runs in parallel. The kernel returning is the barrier
before the framebuffer can be presented.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.core.tracer import render_pixel
    >>> from src.raycaster.scene.single_sphere import create_single_sphere_scene
    >>>
    >>> sphere, camera = create_single_sphere_scene()
    >>> pixel = render_pixel(0, 0, 640, 640, camera, sphere, current_time=0.0)
    >>> hex(pixel)  # corner pixels miss the sphere
    '0xff000000'
"""

import taichi as ti

from src.raycaster.camera.pixel_coords import normalize_coords
from src.raycaster.camera.viewplane import Camera, primary_ray
from src.raycaster.core.ray import Ray, make_ray
from src.raycaster.core.vector import vec3
from src.raycaster.geometry.sphere import RootFormula, Sphere, intersect_sphere, make_sphere
from src.raycaster.scene.single_sphere import SphereParams
from src.raycaster.shading.lighting import shade_hit

# =============================================================================
# Ray Casting Core
# =============================================================================


@ti.func
def cast_ray(ray: Ray, sphere: Sphere, current_time: ti.f32, root_formula: ti.i32) -> ti.u32:
    """Cast a ray at the sphere and return the packed pixel color.

    Args:
        ray: The primary ray.
        sphere: The sphere to intersect.
        current_time: Animation time driving the light direction.
        root_formula: An int(RootFormula) value.

    Returns:
        The packed color for the ray.
    """
    hit = intersect_sphere(ray, sphere, root_formula)
    return shade_hit(hit, current_time)


@ti.func
def compute_pixel(
    x: ti.i32,
    y: ti.i32,
    width: ti.i32,
    height: ti.i32,
    near: ti.f32,
    sphere: Sphere,
    current_time: ti.f32,
    root_formula: ti.i32,
) -> ti.u32:
    """Compute the packed color of a single pixel.

    Args:
        x: Pixel column (0 = left).
        y: Pixel row (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.
        near: Camera near distance.
        sphere: The sphere to render.
        current_time: Animation time.
        root_formula: An int(RootFormula) value.

    Returns:
        The packed color of the pixel.
    """
    coords = normalize_coords(x, y, width, height)
    ray = primary_ray(coords, near)
    return cast_ray(ray, sphere, current_time, root_formula)


# =============================================================================
# Rendering Kernels
# =============================================================================


@ti.kernel
def _render_frame(
    framebuffer: ti.template(),
    width: ti.i32,
    height: ti.i32,
    near: ti.f32,
    center: vec3,
    radius: ti.f32,
    current_time: ti.f32,
    root_formula: ti.i32,
):
    """Write every pixel of the flat row-major framebuffer."""
    for index in range(width * height):
        sphere = make_sphere(center, radius)
        x = index % width
        y = index // width
        framebuffer[index] = compute_pixel(
            x, y, width, height, near, sphere, current_time, root_formula
        )


@ti.kernel
def _render_single_pixel(
    x: ti.i32,
    y: ti.i32,
    width: ti.i32,
    height: ti.i32,
    near: ti.f32,
    center: vec3,
    radius: ti.f32,
    current_time: ti.f32,
    root_formula: ti.i32,
) -> ti.u32:
    """Render one pixel. Used for testing and debugging."""
    sphere = make_sphere(center, radius)
    return compute_pixel(x, y, width, height, near, sphere, current_time, root_formula)


@ti.kernel
def _trace_single_ray(
    origin: vec3,
    direction: vec3,
    center: vec3,
    radius: ti.f32,
    current_time: ti.f32,
    root_formula: ti.i32,
) -> ti.u32:
    """Cast an arbitrary ray. Used for testing and debugging."""
    sphere = make_sphere(center, radius)
    return cast_ray(make_ray(origin, direction), sphere, current_time, root_formula)


# =============================================================================
# Public Rendering API
# =============================================================================


def render_frame(
    framebuffer: "ti.ScalarField",
    width: int,
    height: int,
    camera: Camera,
    sphere: SphereParams,
    current_time: float,
    root_formula: RootFormula = RootFormula.LEGACY,
) -> None:
    """Render a full frame into a flat ti.u32 framebuffer field.

    Args:
        framebuffer: Field of shape (width * height,) and dtype ti.u32.
        width: Image width in pixels.
        height: Image height in pixels.
        camera: The camera (only near is used).
        sphere: The sphere to render.
        current_time: Animation time.
        root_formula: Near-root formula for the intersection.

    Raises:
        ValueError: If the field size doesn't match width * height.
    """
    if framebuffer.shape != (width * height,):
        raise ValueError(
            f"Framebuffer shape {framebuffer.shape} doesn't match {width}x{height}"
        )
    _render_frame(
        framebuffer,
        width,
        height,
        camera.near,
        vec3(*sphere.center),
        sphere.radius,
        current_time,
        int(root_formula),
    )


def render_pixel(
    x: int,
    y: int,
    width: int,
    height: int,
    camera: Camera,
    sphere: SphereParams,
    current_time: float,
    root_formula: RootFormula = RootFormula.LEGACY,
) -> int:
    """Render a single pixel and return its packed color.

    This is a Python-callable function for testing. For rendering whole
    frames, use render_frame() which processes all pixels in parallel.
    """
    return int(
        _render_single_pixel(
            x,
            y,
            width,
            height,
            camera.near,
            vec3(*sphere.center),
            sphere.radius,
            current_time,
            int(root_formula),
        )
    )


def trace_ray(
    origin: tuple[float, float, float],
    direction: tuple[float, float, float],
    sphere: SphereParams,
    current_time: float,
    root_formula: RootFormula = RootFormula.LEGACY,
) -> int:
    """Cast a single ray at a sphere and return the packed color.

    Args:
        origin: Ray origin.
        direction: Ray direction (need not be normalized).
        sphere: The sphere to intersect.
        current_time: Animation time.
        root_formula: Near-root formula for the intersection.

    Returns:
        The packed 0xAARRGGBB color.
    """
    return int(
        _trace_single_ray(
            vec3(*origin),
            vec3(*direction),
            vec3(*sphere.center),
            sphere.radius,
            current_time,
            int(root_formula),
        )
    )
