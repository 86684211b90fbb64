#!/usr/bin/env python3
"""Animated sphere with an orbiting light in a live preview window.

This script opens a Taichi GGUI window and ray casts the single-sphere scene
every frame while the light orbits around it.

Usage:
    python -m examples.animated_sphere [options]

Options:
    --width WIDTH         Window width in pixels (default: 640)
    --height HEIGHT       Window height in pixels (default: 640)
    --fov-degrees DEG     Field-of-view half-angle in degrees (default: 45)
    --time-step STEP      Animation time per frame (default: 0.05)
    --standard-root       Use the textbook near-root formula
    --frames N            Stop after N frames (default: run until closed)

Controls:
    - Escape or closing the window exits
"""

from __future__ import annotations

import argparse
import math
import platform
import sys
from pathlib import Path

# Ensure the project root is in the Python path for direct execution
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import taichi as ti  # noqa: E402


def initialize_taichi() -> str:
    """Initialize Taichi with the best available backend.

    On macOS, prefers Metal. Falls back to CPU if GPU is unavailable.

    Returns:
        Name of the backend being used.
    """
    system = platform.system()

    if system == "Darwin":
        # macOS: prefer Metal
        try:
            ti.init(arch=ti.metal)
            return "Metal (GPU)"
        except Exception:
            pass

    # Try generic GPU (CUDA on Linux/Windows, Vulkan as fallback)
    try:
        ti.init(arch=ti.gpu)
        return "GPU"
    except Exception:
        pass

    # Fall back to CPU
    ti.init(arch=ti.cpu)
    return "CPU"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Animate a ray cast sphere lit by an orbiting light.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=640,
        help="Window width in pixels (default: 640)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=640,
        help="Window height in pixels (default: 640)",
    )
    parser.add_argument(
        "--fov-degrees",
        type=float,
        default=45.0,
        help="Field-of-view half-angle in degrees (default: 45)",
    )
    parser.add_argument(
        "--time-step",
        type=float,
        default=0.05,
        help="Animation time added per frame (default: 0.05)",
    )
    parser.add_argument(
        "--standard-root",
        action="store_true",
        help="Use the textbook near-root formula instead of the legacy one",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many frames (default: run until closed)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the animated sphere.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = parse_args(argv)

    # Initialize Taichi first (before allocating any fields)
    backend = initialize_taichi()
    print(f"Taichi backend: {backend}")

    # Import after Taichi initialization
    from src.raycaster.core.driver import FrameDriver
    from src.raycaster.core.renderer import FrameRenderer
    from src.raycaster.geometry.sphere import RootFormula
    from src.raycaster.preview.window import WindowSurface
    from src.raycaster.scene.single_sphere import RenderSettings

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            fov=math.radians(args.fov_degrees),
            time_step=args.time_step,
            root_formula=RootFormula.STANDARD if args.standard_root else RootFormula.LEGACY,
        )
        renderer = FrameRenderer(settings)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    # Check if display is available
    if not WindowSurface.is_display_available():
        print("Error: No display available. Cannot open the preview window.", file=sys.stderr)
        print("Use examples/render_sphere_frame.py to render without a display.", file=sys.stderr)
        return 1

    print(f"Aspect ratio: {settings.aspect_ratio}")
    print(f"Creating window ({settings.width}x{settings.height})...")
    surface = WindowSurface(
        settings.width,
        settings.height,
        title=f"{settings.title} - ESC to exit",
        frame_interval=settings.frame_interval,
    )

    try:
        surface.open()
    except Exception as exc:
        print(f"Error: could not create window: {exc}", file=sys.stderr)
        return 1

    driver = FrameDriver(renderer, surface)
    try:
        state = driver.run(max_frames=args.frames)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        state = driver.state
    finally:
        surface.close()

    print(f"Rendered {state.frame_count} frames (t = {state.current_time:.2f}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
