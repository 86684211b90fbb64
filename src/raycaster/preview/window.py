"""Live preview window using Taichi GGUI.

This module provides the display surface the frame driver presents to. It
wraps ti.ui.Window and a canvas, converting each packed framebuffer into the
float RGB image field the canvas draws.

Features:
    - Packed 0xAARRGGBB framebuffer presentation
    - Escape key and window-close detection
    - Title text shown in an overlay panel (GGUI titles are fixed at creation)
    - Advisory refresh-rate cap

Example:
    >>> from src.raycaster.preview.window import WindowSurface
    >>>
    >>> surface = WindowSurface(640, 640)
    >>> while surface.is_open() and not surface.is_key_down("Escape"):
    ...     surface.present(buffer, 640, 640)
"""

from __future__ import annotations

import os
import time
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti

from src.raycaster.scene.single_sphere import DEFAULT_FRAME_INTERVAL
from src.raycaster.shading.color import framebuffer_to_rgb

if TYPE_CHECKING:
    import numpy.typing as npt


class WindowSurface:
    """Display surface backed by a Taichi GGUI window.

    Attributes:
        width: Window width in pixels.
        height: Window height in pixels.
        frame_interval: Minimum seconds between presented frames.
        display_image: Taichi field storing the display image (RGB float).
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        title: str = "Test - ESC to exit",
        frame_interval: float = DEFAULT_FRAME_INTERVAL,
        vsync: bool = True,
    ) -> None:
        """Initialize the display surface.

        Args:
            width: Window width in pixels.
            height: Window height in pixels.
            title: Window title, fixed once the window is created.
            frame_interval: Minimum seconds between presents; 0 disables the cap.
            vsync: Whether the window waits for vertical sync.

        Note:
            The window itself is created lazily on first use, so constructing
            a WindowSurface does not require a display.
        """
        self.width = width
        self.height = height
        self.frame_interval = frame_interval
        self._title = title
        self._vsync = vsync
        self._title_text = title
        self._last_present: float | None = None

        self._window: ti.ui.Window | None = None
        self._canvas: ti.ui.Canvas | None = None

        # Shape is (width, height) for Taichi field, RGB values stored as vec3
        self.display_image: ti.MatrixField = ti.Vector.field(
            3, dtype=ti.f32, shape=(width, height)
        )

    def _initialize_window(self) -> None:
        """Create the Taichi GGUI window and canvas.

        Raises:
            RuntimeError: If Taichi cannot create the window (for example,
                without a display).
        """
        if self._window is not None:
            return

        self._window = ti.ui.Window(
            name=self._title,
            res=(self.width, self.height),
            vsync=self._vsync,
        )
        self._canvas = self._window.get_canvas()

    def open(self) -> None:
        """Create the window now instead of on first use."""
        self._initialize_window()

    @property
    def window(self) -> ti.ui.Window:
        """Get the Taichi GGUI window, initializing if needed."""
        if self._window is None:
            self._initialize_window()
        assert self._window is not None
        return self._window

    @property
    def canvas(self) -> ti.ui.Canvas:
        """Get the canvas for rendering."""
        if self._canvas is None:
            self._initialize_window()
        assert self._canvas is not None
        return self._canvas

    @property
    def title_text(self) -> str:
        """The most recent title text."""
        return self._title_text

    # =========================================================================
    # Display surface interface
    # =========================================================================

    def is_open(self) -> bool:
        """Check if the window is still open."""
        return bool(self.window.running)

    def is_key_down(self, key: str) -> bool:
        """Check whether a key (GGUI key name, e.g. "Escape") is held down."""
        return bool(self.window.is_pressed(key))

    def set_title(self, text: str) -> None:
        """Set the text shown in the title overlay."""
        self._title_text = text

    def present(self, buffer: npt.NDArray[np.uint32], width: int, height: int) -> None:
        """Show a packed framebuffer.

        Args:
            buffer: Flat row-major array of width * height packed pixels.
            width: Frame width in pixels.
            height: Frame height in pixels.

        Raises:
            ValueError: If the frame size doesn't match the window or the
                buffer length doesn't match width * height.
        """
        if (width, height) != (self.width, self.height):
            raise ValueError(
                f"Frame size {width}x{height} doesn't match window "
                f"{self.width}x{self.height}"
            )
        self.update_image(framebuffer_to_rgb(buffer, width, height))
        self.show_frame()
        self._pace()

    # =========================================================================
    # Frame display
    # =========================================================================

    def update_image(self, image: npt.NDArray[np.float32]) -> None:
        """Update the display image from a numpy array.

        Args:
            image: NumPy array of shape (height, width, 3) with dtype float32
                and values in [0, 1]. Row 0 is the top of the image.

        Raises:
            ValueError: If image shape doesn't match (height, width, 3).
        """
        expected_shape = (self.height, self.width, 3)
        if image.shape != expected_shape:
            raise ValueError(
                f"Image shape {image.shape} doesn't match expected {expected_shape}"
            )

        # Taichi fields use (x, y) indexing with the origin at the bottom-left
        image_transposed = np.ascontiguousarray(
            np.transpose(np.flipud(image), (1, 0, 2))
        )
        self.display_image.from_numpy(image_transposed)

    def show_frame(self) -> None:
        """Draw the display image and title overlay, then present the frame."""
        self.canvas.set_image(self.display_image)
        with self.window.GUI.sub_window("Stats", 0.02, 0.02, 0.2, 0.06) as gui:
            gui.text(self._title_text)
        self.window.show()

    def _pace(self) -> None:
        """Sleep so presents are at least frame_interval seconds apart."""
        now = time.perf_counter()
        if self._last_present is not None and self.frame_interval > 0.0:
            remaining = self.frame_interval - (now - self._last_present)
            if remaining > 0.0:
                time.sleep(remaining)
                now = time.perf_counter()
        self._last_present = now

    def close(self) -> None:
        """Close the window. After calling this, it cannot be reopened."""
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Check if a display is available for GUI rendering.

        Returns:
            True if a display is available, False for headless environments.
        """
        display = os.environ.get("DISPLAY")
        wayland = os.environ.get("WAYLAND_DISPLAY")

        # On macOS, display is always available if not in SSH
        if os.name == "posix" and os.uname().sysname == "Darwin":
            ssh_connection = os.environ.get("SSH_CONNECTION")
            if ssh_connection and not display:
                return False
            return True

        if display or wayland:
            return True

        # Windows generally always has display
        if os.name == "nt":
            return True

        return False
