"""Taichi-based ray caster for an animated single-sphere scene.

This package renders a sphere lit by an orbiting light into a packed-pixel
framebuffer, with support for:
- Per-pixel ray casting in a parallel Taichi kernel
- Analytic ray-sphere intersection
- Time-varying diffuse lighting
- Live preview through a Taichi GGUI window and PNG snapshots

Subpackages:
    core: Vector utilities, rays, the per-pixel tracer, renderer and frame driver
    camera: View-plane camera and pixel coordinate mapping
    geometry: Sphere primitive and intersection
    shading: Lighting and packed color encoding
    scene: Scene and render configuration
    preview: Display window and image export
"""

__version__ = "0.1.0"
