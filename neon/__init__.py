"""A small tile-based ray tracing framework: rays, materials, spheres, scenes, camera, images."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "geometry",
    "image",
    "integrator",
    "material",
    "ray",
    "sandbox",
    "scene",
    "utils",
]