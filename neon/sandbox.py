"""Render the test scene to a PNG file, tile by tile on worker threads."""

from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from neon.camera import Camera
from neon.geometry import Sphere
from neon.image import Image, TileIterator
from neon.integrator import Integrator
from neon.material import PhongMaterial, PointLight
from neon.scene import Scene
from neon.utils import Progressbar


def build_test_scene() -> Scene:
    """Two Phong spheres, one resting on a huge ground sphere, and a point light."""
    mat1 = PhongMaterial((0.1, 0.1, 0.1), (0.8, 0.4, 0.6), (0.6, 0.4, 0.5), 50.0)
    mat2 = PhongMaterial((0.05, 0.05, 0.05), (0.6, 1.0, 0.6), (0.0, 0.0, 0.0), 10.0)
    mat3 = PointLight((0.1, 0.1, 0.1), (1.0, 1.0, 1.0), (0.5, 0.5, 0.5))

    scene = Scene()
    scene.add(Sphere((0, 0, -1), 0.5, mat1))
    scene.add(Sphere((0, -100.5, -1), 100.0, mat2))
    scene.add(Sphere((0, 5, -1), 0.0, mat3))
    return scene


def render(
    width: int = 512,
    height: int = 512,
    tile_size=(32, 32),
    progress: Optional[Progressbar] = None,
) -> Image:
    """Render the test scene into a new image."""
    canvas = Image(width, height)
    scene = build_test_scene()
    camera = Camera(
        (0, 0, 3),
        (0, 0, 0),
        (0, 1, 0),
        60,
        width / height,
        0.1,
        4,
    )

    def render_tile(tile: TileIterator) -> None:
        integrator = Integrator()
        for x, y in tile:
            ray = camera.sample(x / width, y / height)
            color = np.clip(integrator.integrate(ray, scene), 0.0, 1.0)
            rgb = (color * 255.99).astype(int)
            canvas.set_bottom_up((x, y), (*rgb.tolist(), 255))
            if progress is not None and progress.increment() % 20 == 0:
                progress.display()

    if progress is not None:
        progress.start()
    with ThreadPoolExecutor() as pool:
        list(pool.map(render_tile, canvas.to_tiles(tile_size)))
    if progress is not None:
        progress.end()
    return canvas


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render the test scene to a PNG file.")
    parser.add_argument("--width", type=int, default=512)
    parser.add_argument("--height", type=int, default=512)
    parser.add_argument("--tile", type=int, default=32, help="tile edge in pixels")
    parser.add_argument("--output", default="result.png")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0 or args.tile <= 0:
        parser.error("width, height and tile must be positive")

    progress = Progressbar(args.width * args.height)
    canvas = render(args.width, args.height, (args.tile, args.tile), progress)
    canvas.save(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())