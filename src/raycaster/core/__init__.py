"""Core rendering module.

Components:
    vector: vec3 algebra (scale, add, subtract, dot, length, normalize)
    ray: Ray data structure
    tracer: Per-pixel ray casting and the frame kernel
    renderer: FrameRenderer owning the packed framebuffer
    driver: Animation state and the frame loop

All per-pixel work runs in Taichi kernels, one parallel iteration per pixel.
"""

from .ray import Ray, make_ray, ray_at
from .vector import add, dot, length, normalize, scale, subtract, vec3

# Note: tracer, renderer and driver are NOT imported here to avoid circular imports.
# Import directly from src.raycaster.core.renderer or src.raycaster.core.driver.

__all__ = [
    "Ray",
    "ray_at",
    "make_ray",
    "vec3",
    "scale",
    "add",
    "subtract",
    "dot",
    "length",
    "normalize",
]
