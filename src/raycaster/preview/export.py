"""Image export utilities for rendered frames.

This module saves packed framebuffers to files.

Supported formats:
    - PNG (8-bit RGBA via Pillow)

Example:
    >>> from src.raycaster.core.renderer import FrameRenderer
    >>> from src.raycaster.preview.export import save_renderer_png
    >>>
    >>> renderer = FrameRenderer()
    >>> renderer.render(current_time=1.0)
    >>> save_renderer_png(renderer, "frame.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.raycaster.shading.color import framebuffer_to_rgba

if TYPE_CHECKING:
    from src.raycaster.core.renderer import FrameRenderer


def save_framebuffer_png(
    buffer: npt.NDArray[np.uint32],
    width: int,
    height: int,
    filepath: str | Path,
) -> Path:
    """Save a flat packed framebuffer as an RGBA PNG file.

    Args:
        buffer: Flat row-major array of width * height packed pixels.
        width: Image width in pixels.
        height: Image height in pixels.
        filepath: Output file path (should end in .png).

    Returns:
        The path the image was written to.

    Raises:
        ValueError: If the buffer length doesn't match width * height.
    """
    rgba = framebuffer_to_rgba(buffer, width, height)
    path = Path(filepath)
    PILImage.fromarray(rgba).save(path)
    return path


def save_renderer_png(renderer: FrameRenderer, filepath: str | Path) -> Path:
    """Save the renderer's last frame as an RGBA PNG file."""
    return save_framebuffer_png(
        renderer.get_buffer_numpy(), renderer.width, renderer.height, filepath
    )
