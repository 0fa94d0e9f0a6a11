"""A collection of renderable objects and its lights."""

from __future__ import annotations

from typing import Optional

import numpy as np

from neon.geometry import Rendable
from neon.ray import Intersection, Ray

_SKY_TOP = np.array([0.5, 0.5, 0.9])
_SKY_BOTTOM = np.ones(3)


class Scene:
    """Objects to render; those with emissive materials are also lights."""

    def __init__(self):
        self._objects: list[Rendable] = []
        self._lights: list[Rendable] = []

    def add(self, obj: Rendable) -> None:
        """Add an object, registering it as a light if its material emits."""
        if obj.material is None:
            raise ValueError("objects added to a scene need a material")
        self._objects.append(obj)
        if obj.material.emissive:
            self._lights.append(obj)

    @property
    def objects(self) -> list[Rendable]:
        return list(self._objects)

    @property
    def lights(self) -> list[Rendable]:
        return list(self._lights)

    def ray_intersect(self, ray: Ray) -> Optional[Intersection]:
        """The nearest hit along ``ray`` among all objects, or None."""
        nearest = None
        for obj in self._objects:
            hit = obj.ray_intersect(ray)
            if hit is not None:
                nearest = hit
        return nearest

    def sample_background_light(self, direction) -> np.ndarray:
        """Sky colour blending from white below to blue above."""
        d = np.asarray(direction, dtype=np.float64)
        unit = d / np.linalg.norm(d)
        t = 0.5 * (unit[1] + 1.0)
        return (1.0 - t) * _SKY_BOTTOM + t * _SKY_TOP