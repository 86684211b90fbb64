#!/usr/bin/env python3
"""Render a frame of the animated sphere to a PNG without opening a window.

Usage:
    python -m examples.render_sphere_frame [options]

Options:
    --width WIDTH       Image width in pixels (default: 640)
    --height HEIGHT     Image height in pixels (default: 640)
    --time TIME         Animation time of the frame (default: 0.0)
    --frames N          Drive N frames through the frame loop and save the last
    --standard-root     Use the textbook near-root formula
    --output OUTPUT     Output file path (default: sphere.png)

Example:
    python -m examples.render_sphere_frame --time 4.7 --output lit.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

# Ensure the project root is in the Python path for direct execution
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import taichi as ti  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a single frame of the animated sphere.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=640, help="Image width (default: 640)")
    parser.add_argument("--height", type=int, default=640, help="Image height (default: 640)")
    parser.add_argument(
        "--time",
        type=float,
        default=0.0,
        help="Animation time of the rendered frame (default: 0.0)",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Run this many frames through the frame loop and save the last one",
    )
    parser.add_argument(
        "--standard-root",
        action="store_true",
        help="Use the textbook near-root formula instead of the legacy one",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sphere.png",
        help="Output file path (default: sphere.png)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Render and save one frame.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = parse_args(argv)
    ti.init(arch=ti.cpu)

    # Lazy imports to allow Taichi initialization first
    from src.raycaster.core.driver import FrameDriver
    from src.raycaster.core.renderer import FrameRenderer
    from src.raycaster.geometry.sphere import RootFormula
    from src.raycaster.preview.export import save_framebuffer_png, save_renderer_png
    from src.raycaster.preview.headless import HeadlessSurface
    from src.raycaster.scene.single_sphere import RenderSettings

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            root_formula=RootFormula.STANDARD if args.standard_root else RootFormula.LEGACY,
        )
        renderer = FrameRenderer(settings)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    start_time = time.time()

    if args.frames is not None:
        print(f"Running {args.frames} frames ({settings.width}x{settings.height})...")
        surface = HeadlessSurface(settings.width, settings.height)
        state = FrameDriver(renderer, surface).run(max_frames=args.frames)
        if surface.last_buffer is None:
            print("Error: no frame was rendered", file=sys.stderr)
            return 1
        path = save_framebuffer_png(
            surface.last_buffer, settings.width, settings.height, args.output
        )
        print(f"  Last frame at t = {state.current_time - settings.time_step:.2f}")
    else:
        print(f"Rendering frame at t = {args.time} ({settings.width}x{settings.height})...")
        renderer.render(args.time)
        path = save_renderer_png(renderer, args.output)

    elapsed = time.time() - start_time
    print(f"Saved {path.resolve()} in {elapsed:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
