"""Frame renderer owning the packed framebuffer.

The FrameRenderer allocates a flat ``ti.u32`` field of ``width * height``
packed pixels once and overwrites it on every call to :meth:`render`. Pixel
``(x, y)`` lives at index ``y * width + x``; row 0 is the top of the image.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.raycaster.core.renderer import FrameRenderer
    >>> from src.raycaster.scene.single_sphere import RenderSettings
    >>>
    >>> renderer = FrameRenderer(RenderSettings(width=128, height=128))
    >>> renderer.render(current_time=0.0)
    >>> buffer = renderer.get_buffer_numpy()  # shape (16384,), dtype uint32
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.raycaster.core.tracer import render_frame
from src.raycaster.scene.single_sphere import RenderSettings, create_single_sphere_scene
from src.raycaster.shading.color import framebuffer_to_rgba

# Maximum supported image dimensions
MAX_IMAGE_WIDTH = 4096
MAX_IMAGE_HEIGHT = 4096


class FrameRenderer:
    """Renders frames of the animated sphere into a packed framebuffer.

    Attributes:
        settings: The render settings the renderer was created with.
        camera: Camera derived from the settings.
        sphere: The sphere being rendered.
    """

    def __init__(self, settings: RenderSettings | None = None) -> None:
        """Initialize the renderer and allocate the framebuffer.

        Args:
            settings: Render settings. If None, uses default RenderSettings().

        Raises:
            ValueError: If the dimensions are not positive or exceed the
                maximum supported size, or the camera settings are invalid.
        """
        if settings is None:
            settings = RenderSettings()

        width, height = settings.width, settings.height
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions ({width}x{height}) must be positive")
        if width > MAX_IMAGE_WIDTH or height > MAX_IMAGE_HEIGHT:
            raise ValueError(
                f"Image dimensions ({width}x{height}) exceed maximum supported "
                f"({MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT})"
            )

        self.settings = settings
        # Fixed for the lifetime of the framebuffer
        self._width = width
        self._height = height
        self.sphere, self.camera = create_single_sphere_scene(settings)
        self._framebuffer = ti.field(dtype=ti.u32, shape=width * height)

    @property
    def width(self) -> int:
        """Get the image width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the image height."""
        return self._height

    @property
    def framebuffer(self) -> ti.ScalarField:
        """The raw Taichi framebuffer field."""
        return self._framebuffer

    def render(self, current_time: float) -> None:
        """Recompute every pixel for the given animation time.

        Args:
            current_time: Animation time driving the light direction.
        """
        render_frame(
            self._framebuffer,
            self.width,
            self.height,
            self.camera,
            self.sphere,
            current_time,
            self.settings.root_formula,
        )

    def clear(self) -> None:
        """Set every pixel to zero (fully transparent black)."""
        self._framebuffer.fill(0)

    def get_buffer_numpy(self) -> npt.NDArray[np.uint32]:
        """Get a copy of the framebuffer as a flat uint32 array."""
        return self._framebuffer.to_numpy().astype(np.uint32)

    def get_image_rgba(self) -> npt.NDArray[np.uint8]:
        """Get the framebuffer as an 8-bit RGBA image of shape (height, width, 4)."""
        return framebuffer_to_rgba(self.get_buffer_numpy(), self.width, self.height)

    def pixel(self, x: int, y: int) -> int:
        """Get the packed color of one pixel from the last rendered frame."""
        return int(self._framebuffer[y * self.width + x])

    def __repr__(self) -> str:
        """Return a string representation of the renderer state."""
        return (
            f"FrameRenderer(width={self.width}, height={self.height}, "
            f"root_formula={self.settings.root_formula.name})"
        )
