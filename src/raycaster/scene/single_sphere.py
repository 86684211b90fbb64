"""Single-sphere scene configuration.

This module holds the configuration of the animated scene: one sphere below
and in front of the camera, lit by a light orbiting in the XZ-plane.

Example:
    >>> from src.raycaster.scene.single_sphere import (
    ...     RenderSettings, create_single_sphere_scene
    ... )
    >>> sphere, camera = create_single_sphere_scene(RenderSettings())
    >>> sphere.center
    (0.0, -2.0, 4.0)
"""

import math
from dataclasses import dataclass, field

from src.raycaster.camera.viewplane import Camera, make_camera
from src.raycaster.geometry.sphere import RootFormula

# =============================================================================
# Scene Parameters
# =============================================================================


@dataclass(frozen=True)
class SphereParams:
    """Host-side description of a sphere.

    Attributes:
        center: Center point (x, y, z).
        radius: Radius, strictly positive.

    Raises:
        ValueError: If radius is not positive.
    """

    center: tuple[float, float, float]
    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius = {self.radius} must be positive.")


# The sphere rendered by default
DEFAULT_SPHERE = SphereParams(center=(0.0, -2.0, 4.0), radius=0.75)

# Default viewport size
DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 640

# Animation time added per frame
DEFAULT_TIME_STEP = 0.05

# ~60 Hz refresh cap
DEFAULT_FRAME_INTERVAL = 0.0166


@dataclass
class RenderSettings:
    """Parameters for rendering and animating the scene.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Field-of-view half-angle in radians. Default is pi/4.
        far: Far clipping distance stored on the camera.
        time_step: Animation time added after every frame.
        title: Base window title; the FPS counter is appended to it.
        frame_interval: Minimum seconds between presented frames (advisory).
        root_formula: Near-root formula used by the sphere intersection.
        sphere: The sphere to render.

    Example:
        >>> settings = RenderSettings(width=320, height=240)
        >>> settings.aspect_ratio
        1.3333333333333333
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fov: float = math.pi / 4.0
    far: float = 10.0
    time_step: float = DEFAULT_TIME_STEP
    title: str = "Test"
    frame_interval: float = DEFAULT_FRAME_INTERVAL
    root_formula: RootFormula = RootFormula.LEGACY
    sphere: SphereParams = field(default_factory=lambda: DEFAULT_SPHERE)

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


# =============================================================================
# Scene Factory
# =============================================================================


def create_single_sphere_scene(
    settings: RenderSettings | None = None,
) -> tuple[SphereParams, Camera]:
    """Create the sphere and camera for the animated scene.

    Args:
        settings: Render settings. If None, uses default RenderSettings().

    Returns:
        A tuple of (SphereParams, Camera).

    Raises:
        ValueError: If the camera parameters are out of range.
    """
    if settings is None:
        settings = RenderSettings()

    camera = make_camera(settings.far, settings.fov)
    return settings.sphere, camera
