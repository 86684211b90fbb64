"""Mapping from integer pixel indices to view-plane coordinates.

Pixel (0, 0) is the top-left of the framebuffer. The mapping is

    nx = 2x / width
    ny = 2y / height
    (1 - nx * width / height, 1 - ny, 0)

so row 0 lands at +1 vertically and the horizontal axis is both aspect
corrected and mirrored (column 0 lands at +1). The mirroring is part of the
rendered image and must stay as it is.
"""

import taichi as ti

from src.raycaster.core.vector import vec3


@ti.func
def normalize_coords(x: ti.i32, y: ti.i32, width: ti.i32, height: ti.i32) -> vec3:
    """Convert a pixel position into a view-plane point.

    Args:
        x: Pixel column (0 = left).
        y: Pixel row (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        The view-plane point (x', y', 0).
    """
    w = ti.cast(width, ti.f32)
    h = ti.cast(height, ti.f32)
    nx = ti.cast(2 * x, ti.f32) / w
    ny = ti.cast(2 * y, ti.f32) / h
    return vec3(1.0 - nx * w / h, 1.0 - ny, 0.0)
