"""Camera module for view and ray generation.

Components:
    viewplane: Camera parameters (near/far/fov) and primary ray construction
    pixel_coords: Pixel index to view-plane coordinate mapping

The camera looks down +z from (0, 0, -near). Ray generation runs inside the
render kernel, one primary ray per pixel.
"""

from .pixel_coords import normalize_coords
from .viewplane import Camera, eye_position, make_camera, primary_ray

__all__ = [
    "Camera",
    "make_camera",
    "eye_position",
    "primary_ray",
    "normalize_coords",
]
