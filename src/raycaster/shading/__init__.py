"""Shading module: lighting and packed color encoding.

Components:
    lighting: Orbiting light direction and the squared diffuse falloff
    color: Packed 0xAARRGGBB pixels and NumPy unpacking helpers
"""

from .color import (
    encode_channel,
    framebuffer_to_rgb,
    framebuffer_to_rgba,
    pack_color,
    pack_color_value,
    unpack_color_value,
    unpack_colors,
)
from .lighting import (
    OPAQUE,
    background_color,
    light_direction,
    lighting_amount,
    shade_hit,
)

__all__ = [
    "pack_color",
    "encode_channel",
    "pack_color_value",
    "unpack_color_value",
    "unpack_colors",
    "framebuffer_to_rgba",
    "framebuffer_to_rgb",
    "OPAQUE",
    "background_color",
    "light_direction",
    "lighting_amount",
    "shade_hit",
]
