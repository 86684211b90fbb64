"""Off-screen display surface.

HeadlessSurface satisfies the frame driver's display surface interface without
opening a window. It keeps a copy of the last presented frame, which makes it
useful for rendering snapshots on machines without a display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class HeadlessSurface:
    """Display surface that stores frames instead of showing them."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.title = ""
        self.frames_presented = 0
        self.last_buffer: npt.NDArray[np.uint32] | None = None
        self._open = True
        self._pressed: set[str] = set()

    def is_open(self) -> bool:
        return self._open

    def is_key_down(self, key: str) -> bool:
        return key in self._pressed

    def press_key(self, key: str) -> None:
        """Mark a key as held down."""
        self._pressed.add(key)

    def release_key(self, key: str) -> None:
        self._pressed.discard(key)

    def set_title(self, text: str) -> None:
        self.title = text

    def present(self, buffer: npt.NDArray[np.uint32], width: int, height: int) -> None:
        """Store a copy of the frame.

        Raises:
            ValueError: If the frame size doesn't match the surface or the
                buffer length doesn't match width * height.
        """
        if (width, height) != (self.width, self.height):
            raise ValueError(
                f"Frame size {width}x{height} doesn't match surface "
                f"{self.width}x{self.height}"
            )
        if len(buffer) != width * height:
            raise ValueError(
                f"Buffer length {len(buffer)} doesn't match {width}x{height} = {width * height}"
            )
        self.last_buffer = np.array(buffer, dtype=np.uint32, copy=True)
        self.frames_presented += 1

    def close(self) -> None:
        self._open = False
