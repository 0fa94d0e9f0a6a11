"""Evaluation of the light arriving along a ray."""

from __future__ import annotations

import numpy as np

from neon.ray import Ray
from neon.scene import Scene


class Integrator:
    """Computes the radiance carried back along a camera ray."""

    def integrate(self, ray: Ray, scene: Scene) -> np.ndarray:
        """Black where the ray hits an object, the sky colour otherwise."""
        hit = scene.ray_intersect(ray)
        if hit is not None:
            return np.zeros(3)
        return scene.sample_background_light(ray.direction)