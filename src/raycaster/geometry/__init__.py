"""Geometry module for the sphere primitive.

Components:
    sphere: Sphere primitive with analytic ray-sphere intersection

Intersection routines are Taichi functions (@ti.func) called from the
per-pixel render kernel.
"""

from .sphere import (
    RootFormula,
    Sphere,
    SphereHit,
    compute_discriminant,
    intersect_sphere,
    make_sphere,
)

__all__ = [
    "RootFormula",
    "Sphere",
    "SphereHit",
    "compute_discriminant",
    "intersect_sphere",
    "make_sphere",
]
