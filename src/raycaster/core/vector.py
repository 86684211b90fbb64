"""Vector algebra for the ray caster.

All vectors are ``taichi.math.vec3`` values. Every operation returns a new
vector and none of them mutate their inputs, so they can be used freely from
any Taichi function or kernel.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> @ti.kernel
    ... def unit_x() -> ti.f32:
    ...     return length(normalize(vec3(3.0, 0.0, 0.0)))
"""

import taichi as ti
import taichi.math as tm

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.func
def scale(v: vec3, s: ti.f32) -> vec3:
    """Multiply every component of a vector by a scalar.

    Args:
        v: The input vector.
        s: The scale factor.

    Returns:
        The vector (v.x * s, v.y * s, v.z * s).
    """
    return vec3(v.x * s, v.y * s, v.z * s)


@ti.func
def add(a: vec3, b: vec3) -> vec3:
    """Componentwise sum of two vectors."""
    return vec3(a.x + b.x, a.y + b.y, a.z + b.z)


@ti.func
def subtract(a: vec3, b: vec3) -> vec3:
    """Componentwise difference a - b."""
    return vec3(a.x - b.x, a.y - b.y, a.z - b.z)


@ti.func
def dot(a: vec3, b: vec3) -> ti.f32:
    """Compute the dot product of two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The sum of the componentwise products.
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


@ti.func
def length(v: vec3) -> ti.f32:
    """Compute the Euclidean length of a vector as sqrt(dot(v, v))."""
    return ti.sqrt(dot(v, v))


@ti.func
def normalize(v: vec3) -> vec3:
    """Scale a vector to unit length.

    Each component is divided by the vector's length. The zero vector has no
    direction: its components come back as NaN, so callers must only pass
    vectors with a positive length.

    Args:
        v: The input vector (non-zero).

    Returns:
        A unit vector in the same direction as v.
    """
    n = length(v)
    return vec3(v.x / n, v.y / n, v.z / n)
