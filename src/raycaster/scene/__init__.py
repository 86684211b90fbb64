"""Scene module for scene and render configuration.

Components:
    single_sphere: Sphere parameters, render settings and the scene factory
"""

from .single_sphere import (
    DEFAULT_SPHERE,
    RenderSettings,
    SphereParams,
    create_single_sphere_scene,
)

__all__ = [
    "DEFAULT_SPHERE",
    "RenderSettings",
    "SphereParams",
    "create_single_sphere_scene",
]
