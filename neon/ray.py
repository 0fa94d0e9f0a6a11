"""Rays and the record of a ray hitting a surface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    from neon.material import Material

#: Largest finite single-precision float, used as "no hit yet" distance.
FLOAT_MAX = float(np.finfo(np.float32).max)


def _vec3(value) -> np.ndarray:
    """Return ``value`` as a fresh float vector of length 3."""
    arr = np.asarray(value, dtype=np.float64)
    return np.broadcast_to(arr, (3,)).copy()


class Ray:
    """A half line starting at ``origin`` along a unit ``direction``."""

    def __init__(self, origin=(0.0, 0.0, 0.0), direction=(0.0, 0.0, 1.0)):
        self.origin = _vec3(origin)
        direction = _vec3(direction)
        length = float(np.linalg.norm(direction))
        if length == 0.0 or not np.isfinite(length):
            raise ValueError("ray direction must be a non-zero finite vector")
        self.direction = direction / length
        self.t = FLOAT_MAX

    def at(self, t_eval: float) -> np.ndarray:
        """Point on the ray at parameter ``t_eval``."""
        return self.origin + self.direction * t_eval

    def eval(self) -> np.ndarray:
        """Point on the ray at its current parameter ``t``."""
        return self.origin + self.direction * self.t

    def __repr__(self) -> str:
        return (
            f"Ray(origin={self.origin.tolist()}, "
            f"direction={self.direction.tolist()}, t={self.t})"
        )


@dataclass(eq=False)
class Intersection:
    """Information about the point where a ray hit a surface."""

    p: np.ndarray = field(default_factory=lambda: np.zeros(3))
    n: np.ndarray = field(default_factory=lambda: np.zeros(3))
    material: Optional["Material"] = None

    def __post_init__(self) -> None:
        self.p = _vec3(self.p)
        self.n = _vec3(self.n)