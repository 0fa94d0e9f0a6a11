"""Surface materials: Phong reflectors and point lights."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _vec3(value) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64)
    return np.broadcast_to(arr, (3,)).copy()


def _zeros() -> np.ndarray:
    return np.zeros(3)


@dataclass(eq=False)
class Material:
    """Light and reflection coefficients shared by all materials."""

    la: np.ndarray = field(default_factory=_zeros)
    ld: np.ndarray = field(default_factory=_zeros)
    ls: np.ndarray = field(default_factory=_zeros)
    ka: np.ndarray = field(default_factory=_zeros)
    kd: np.ndarray = field(default_factory=_zeros)
    ks: np.ndarray = field(default_factory=_zeros)
    shininess: float = 0.0
    emissive: bool = False

    def __post_init__(self) -> None:
        for name in ("la", "ld", "ls", "ka", "kd", "ks"):
            setattr(self, name, _vec3(getattr(self, name)))
        self.shininess = float(self.shininess)


class PointLight(Material):
    """A light that glows uniformly with ambient, diffuse and specular parts."""

    def __init__(self, la=1.0, ld=1.0, ls=1.0):
        super().__init__(la=la, ld=ld, ls=ls, emissive=True)


class PhongMaterial(Material):
    """A surface reflecting light by the Phong approximation."""

    def __init__(self, ka=1.0, kd=1.0, ks=1.0, shininess=1.0):
        super().__init__(ka=ka, kd=kd, ks=ks, shininess=shininess)