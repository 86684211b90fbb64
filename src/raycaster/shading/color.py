"""Packed 32-bit pixel colors.

A packed pixel stores one byte per channel, from least to most significant:
blue, green, red, alpha (``0xAARRGGBB``). The render kernel writes packed
values with :func:`pack_color`; the host-side helpers below unpack a whole
framebuffer with NumPy for display and export.

Example:
    >>> hex(pack_color_value(255, 0, 0, 255))
    '0xffff0000'
    >>> unpack_color_value(0xFFFF0000)
    (255, 0, 0, 255)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

# Bit offsets of each channel inside a packed pixel
BLUE_SHIFT = 0
GREEN_SHIFT = 8
RED_SHIFT = 16
ALPHA_SHIFT = 24


@ti.func
def pack_color(r, g, b, a) -> ti.u32:
    """Pack four 8-bit channels into a single 32-bit pixel.

    Args:
        r: Red channel (0-255).
        g: Green channel (0-255).
        b: Blue channel (0-255).
        a: Alpha channel (0-255).

    Returns:
        The packed pixel value.
    """
    return (
        ti.cast(b, ti.u32)
        | (ti.cast(g, ti.u32) << GREEN_SHIFT)
        | (ti.cast(r, ti.u32) << RED_SHIFT)
        | (ti.cast(a, ti.u32) << ALPHA_SHIFT)
    )


@ti.func
def encode_channel(intensity: ti.f32) -> ti.u32:
    """Convert an intensity in [0, 1] to a rounded 8-bit channel value."""
    level = tm.clamp(255.0 * intensity, 0.0, 255.0)
    return ti.cast(level + 0.5, ti.u32)


# =============================================================================
# Host-side helpers (NumPy)
# =============================================================================


def pack_color_value(r: int, g: int, b: int, a: int) -> int:
    """Pack four 8-bit channels on the host, matching pack_color."""
    for name, value in (("r", r), ("g", g), ("b", b), ("a", a)):
        if not 0 <= value <= 255:
            raise ValueError(f"Channel {name} = {value} is outside 0..255")
    return (a << ALPHA_SHIFT) | (r << RED_SHIFT) | (g << GREEN_SHIFT) | (b << BLUE_SHIFT)


def unpack_color_value(pixel: int) -> tuple[int, int, int, int]:
    """Split a packed pixel into its (r, g, b, a) channels."""
    return (
        (pixel >> RED_SHIFT) & 0xFF,
        (pixel >> GREEN_SHIFT) & 0xFF,
        (pixel >> BLUE_SHIFT) & 0xFF,
        (pixel >> ALPHA_SHIFT) & 0xFF,
    )


def unpack_colors(buffer: npt.NDArray[np.uint32]) -> npt.NDArray[np.uint8]:
    """Unpack an array of packed pixels into RGBA channels.

    Args:
        buffer: Array of packed pixels of any shape.

    Returns:
        Array of shape buffer.shape + (4,) with dtype uint8, channels in
        (r, g, b, a) order.
    """
    pixels = np.asarray(buffer, dtype=np.uint32)
    channels = np.stack(
        [
            (pixels >> RED_SHIFT) & 0xFF,
            (pixels >> GREEN_SHIFT) & 0xFF,
            (pixels >> BLUE_SHIFT) & 0xFF,
            (pixels >> ALPHA_SHIFT) & 0xFF,
        ],
        axis=-1,
    )
    return channels.astype(np.uint8)


def framebuffer_to_rgba(
    buffer: npt.NDArray[np.uint32],
    width: int,
    height: int,
) -> npt.NDArray[np.uint8]:
    """Convert a flat row-major framebuffer into an image array.

    Args:
        buffer: Flat array of width * height packed pixels.
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Array of shape (height, width, 4) with dtype uint8. Row 0 is the top
        of the image.

    Raises:
        ValueError: If the buffer length does not match width * height.
    """
    if len(buffer) != width * height:
        raise ValueError(
            f"Buffer length {len(buffer)} doesn't match {width}x{height} = {width * height}"
        )
    return unpack_colors(buffer).reshape(height, width, 4)


def framebuffer_to_rgb(
    buffer: npt.NDArray[np.uint32],
    width: int,
    height: int,
) -> npt.NDArray[np.float32]:
    """Convert a flat framebuffer into a float RGB image in [0, 1].

    Returns:
        Array of shape (height, width, 3) with dtype float32.
    """
    rgba = framebuffer_to_rgba(buffer, width, height)
    return (rgba[..., :3].astype(np.float32) / 255.0).astype(np.float32)
