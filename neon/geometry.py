"""Renderable geometry that rays can hit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from neon.material import Material
from neon.ray import Intersection, Ray


class Rendable(ABC):
    """An object that can be intersected by rays and carries a material."""

    #: Minimum hit distance, to avoid a surface hitting itself.
    EPS = 0.0001

    def __init__(self, material: Optional[Material] = None):
        self.material = material

    @abstractmethod
    def ray_intersect(self, ray: Ray) -> Optional[Intersection]:
        """Return the hit nearer than ``ray.t``, shortening ``ray.t``, or None."""


class Sphere(Rendable):
    """A sphere given by its centre and radius."""

    def __init__(self, center, radius: float, material: Optional[Material] = None):
        super().__init__(material)
        self.center = np.broadcast_to(
            np.asarray(center, dtype=np.float64), (3,)
        ).copy()
        self.radius = float(radius)

    def ray_intersect(self, ray: Ray) -> Optional[Intersection]:
        if self.radius <= 0.0:
            return None
        oc = ray.origin - self.center
        b = float(np.dot(oc, ray.direction))
        c = float(np.dot(oc, oc)) - self.radius * self.radius
        disc = b * b - c
        if disc <= 0.0:
            return None
        root = math.sqrt(disc)
        for t in (-b - root, -b + root):
            if self.EPS < t < ray.t:
                ray.t = t
                p = ray.at(t)
                n = (p - self.center) / self.radius
                return Intersection(p=p, n=n, material=self.material)
        return None