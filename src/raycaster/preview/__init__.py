"""Preview module for display and export.

Components:
    window: Taichi GGUI display surface for the live animation
    headless: Off-screen display surface keeping the last frame
    export: PNG export of packed framebuffers (Pillow)

Example:
    >>> from src.raycaster.preview import WindowSurface, save_framebuffer_png
    >>> surface = WindowSurface(640, 640)
"""

from src.raycaster.preview.export import save_framebuffer_png, save_renderer_png
from src.raycaster.preview.headless import HeadlessSurface
from src.raycaster.preview.window import WindowSurface

__all__ = [
    "WindowSurface",
    "HeadlessSurface",
    "save_framebuffer_png",
    "save_renderer_png",
]
