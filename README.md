# neon

A small ray tracing framework. It provides the building blocks of a renderer:
rays and hit records, Phong and point-light materials, spheres, a scene with
a sky-gradient background, a look-at camera, an integrator, an RGBA image
that can be split into tiles and saved as PNG, and a timer and progress bar.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Rendering the sandbox scene

The package installs a command that renders a fixed test scene (a sphere
resting on a large ground sphere, plus a point light) into a PNG file,
working tile by tile on a thread pool and showing a progress bar:

```
neon-sandbox
```

Options:

- `--width` and `--height`: image size in pixels (default 512 × 512).
- `--tile`: tile edge in pixels (default 32).
- `--output`: file to write (default `result.png`).

## Using the library

```python
import numpy as np

from neon.camera import Camera
from neon.image import Image
from neon.integrator import Integrator
from neon.sandbox import build_test_scene

scene = build_test_scene()
canvas = Image(64, 64)
camera = Camera((0, 0, 3), (0, 0, 0), (0, 1, 0), 60, aspect=1.0,
                aperture=0.1, focus_dist=4.0)
integrator = Integrator()

for tile in canvas.to_tiles((32, 32)):
    for x, y in tile:
        ray = camera.sample(x / canvas.width, y / canvas.height)
        color = np.clip(integrator.integrate(ray, scene), 0.0, 1.0)
        rgb = (color * 255.99).astype(int)
        canvas.set_bottom_up((x, y), (*rgb.tolist(), 255))

canvas.save("out.png")
```

`neon.sandbox.render(width, height, tile_size, progress)` does the same for
the test scene and returns the finished `Image`.

Main pieces:

- `neon.ray` – `Ray` (origin, normalised direction, parameter `t`, `at`,
  `eval`) and the `Intersection` record (`p`, `n`, `material`).
- `neon.material` – `Material` coefficients, `PhongMaterial` and the
  emissive `PointLight`.
- `neon.geometry` – the `Rendable` base class and `Sphere`, whose
  `ray_intersect(ray)` returns the nearest hit closer than `ray.t` (and
  shortens `ray.t`) or `None`.
- `neon.scene` – `Scene` with `add`, `ray_intersect`,
  `sample_background_light`, and the `objects` and `lights` properties.
- `neon.camera` – `Camera` built from position, target, up vector, vertical
  field of view, aspect, aperture and focus distance.
- `neon.integrator` – `Integrator.integrate(ray, scene)`.
- `neon.image` – `Image` with pixel access (`image[x, y]`, top row first;
  `get_bottom_up` / `set_bottom_up` counting from the bottom row),
  `to_tiles`, `inject`, `resize`, `load`, `from_file` and `save`, and
  `TileIterator` yielding `(x, y)` indices.
- `neon.utils` – a pausable `Timer` and a thread-safe text `Progressbar`.
- `neon.sandbox` – `build_test_scene`, `render` and the `main` command.

## What it does not do

This is a framework rather than a finished renderer:

- `Camera.sample(s, t)` ignores its arguments and always returns the ray
  from the world origin along -z, so every pixel sees the same thing.
- `Integrator.integrate` does no shading: a ray that hits an object gives
  black, a ray that misses gives the sky colour. The Phong coefficients and
  the scene's lights are stored but not used for lighting.
- There is no anti-aliasing, no multiple samples per pixel and no
  geometry other than spheres.

With these, the sandbox scene renders as a uniform black image.