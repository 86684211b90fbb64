"""Frame driver for the animated sphere.

The driver runs a two-state machine, RUNNING and TERMINATED. Every tick it

1. checks the display surface and stops if it was closed or the exit key is
   held down,
2. re-renders every pixel with the current animation time,
3. writes an FPS counter, including this frame, into the surface title,
4. presents the framebuffer,
5. advances the animation time by a fixed step and counts the frame.

Nothing else is carried between frames; each frame is recomputed from scratch.

Example:
    >>> from src.raycaster.core.driver import FrameDriver
    >>> from src.raycaster.core.renderer import FrameRenderer
    >>> from src.raycaster.preview.window import WindowSurface
    >>>
    >>> renderer = FrameRenderer()
    >>> surface = WindowSurface(renderer.width, renderer.height)
    >>> FrameDriver(renderer, surface).run()  # Blocks until the window closes
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

    from src.raycaster.core.renderer import FrameRenderer

# Key that ends the animation (Taichi GGUI key name)
EXIT_KEY = "Escape"

# Title suffix used when the frame rate cannot be computed
TITLE_ERROR = "error"


class DisplaySurface(Protocol):
    """Anything that can show packed frames and report window/key state."""

    def is_open(self) -> bool:
        """Whether the surface is still open."""
        ...

    def is_key_down(self, key: str) -> bool:
        """Whether the given key is currently held down."""
        ...

    def present(self, buffer: npt.NDArray[np.uint32], width: int, height: int) -> None:
        """Show a flat row-major buffer of packed pixels.

        Raises:
            ValueError: If the buffer does not hold width * height pixels.
        """
        ...

    def set_title(self, text: str) -> None:
        """Replace the title text."""
        ...


class DriverState(Enum):
    """States of the frame loop."""

    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class AnimationState:
    """Animation clock and frame counter.

    Attributes:
        current_time: Animation time. Only ever passed through cos/sin, so it
            is allowed to grow without bound.
        frame_count: Number of frames presented so far.
    """

    current_time: float = 0.0
    frame_count: int = 0

    def advance(self, time_step: float) -> None:
        """Move to the next frame."""
        self.current_time += time_step
        self.frame_count += 1


def compose_title(base: str, frame_count: int, elapsed: float | None) -> str:
    """Build the window title with a frames-per-second counter.

    Args:
        base: Base title text.
        frame_count: Frames presented so far.
        elapsed: Seconds since the loop started, or None if the clock failed.

    Returns:
        "<base> <fps>", or "<base> error" when the rate can't be computed.
    """
    if elapsed is None or elapsed <= 0.0:
        return f"{base} {TITLE_ERROR}"
    return f"{base} {int(frame_count / elapsed)}"


class FrameDriver:
    """Drives the render/present loop against a display surface.

    Attributes:
        renderer: The FrameRenderer producing frames.
        surface: The display surface frames are presented on.
        state: The animation state (time and frame counter).
        status: RUNNING until the surface closes or the exit key is pressed.
    """

    def __init__(
        self,
        renderer: FrameRenderer,
        surface: DisplaySurface,
        *,
        clock: Callable[[], float] = time.perf_counter,
        exit_key: str = EXIT_KEY,
    ) -> None:
        """Initialize the driver.

        Args:
            renderer: The FrameRenderer producing frames.
            surface: The display surface to present on.
            clock: Monotonic clock in seconds used for the FPS counter.
            exit_key: Key that terminates the loop.
        """
        self.renderer = renderer
        self.surface = surface
        self.state = AnimationState()
        self.status = DriverState.RUNNING
        self._clock = clock
        self._exit_key = exit_key
        self._start_time: float | None = None

    @property
    def time_step(self) -> float:
        """Animation time added after each frame."""
        return self.renderer.settings.time_step

    def _should_stop(self) -> bool:
        return not self.surface.is_open() or self.surface.is_key_down(self._exit_key)

    def _elapsed(self) -> float | None:
        """Seconds since the loop started, or None if the clock is unavailable."""
        if self._start_time is None:
            return None
        try:
            return self._clock() - self._start_time
        except OSError:
            return None

    def start(self) -> None:
        """Start the FPS clock. Called automatically by run()."""
        try:
            self._start_time = self._clock()
        except OSError:
            self._start_time = None

    def tick(self) -> bool:
        """Render and present one frame.

        Returns:
            True if a frame was presented, False once the driver has
            terminated. After termination no further renders or presents
            happen.
        """
        if self.status is DriverState.TERMINATED:
            return False

        if self._should_stop():
            self.status = DriverState.TERMINATED
            return False

        self.renderer.render(self.state.current_time)

        # Title counts the frame about to be shown so the overlay drawn by
        # present() is current
        title = compose_title(
            self.renderer.settings.title, self.state.frame_count + 1, self._elapsed()
        )
        self.surface.set_title(title)
        self.surface.present(
            self.renderer.get_buffer_numpy(), self.renderer.width, self.renderer.height
        )
        self.state.advance(self.time_step)
        return True

    def run(self, max_frames: int | None = None) -> AnimationState:
        """Run the frame loop.

        Args:
            max_frames: Stop after this many frames. None runs until the
                surface closes or the exit key is pressed.

        Returns:
            The final animation state.
        """
        self.start()
        while max_frames is None or self.state.frame_count < max_frames:
            if not self.tick():
                break
        return self.state
