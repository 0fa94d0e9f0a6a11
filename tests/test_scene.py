import numpy as np
import pytest

from neon.geometry import Sphere
from neon.material import PhongMaterial, PointLight
from neon.ray import Ray
from neon.scene import Scene


def test_lights_are_tracked():
    scene = Scene()
    surface = Sphere((0, 0, -1), 0.5, PhongMaterial())
    lamp = Sphere((0, 5, -1), 0.0, PointLight())
    scene.add(surface)
    scene.add(lamp)
    assert scene.objects == [surface, lamp]
    assert scene.lights == [lamp]


def test_lights_list_is_a_copy():
    scene = Scene()
    scene.add(Sphere((0, 5, -1), 0.0, PointLight()))
    scene.lights.clear()
    assert len(scene.lights) == 1


def test_object_without_material_rejected():
    with pytest.raises(ValueError):
        Scene().add(Sphere((0, 0, 0), 1.0))


def test_nearest_hit_is_reported_regardless_of_order():
    near_mat, far_mat = PhongMaterial(), PhongMaterial()
    for order in ((0, 1), (1, 0)):
        spheres = [
            Sphere((0, 0, -2), 0.5, near_mat),
            Sphere((0, 0, -6), 0.5, far_mat),
        ]
        scene = Scene()
        for i in order:
            scene.add(spheres[i])
        hit = scene.ray_intersect(Ray((0, 0, 0), (0, 0, -1)))
        assert hit.material is near_mat


def test_miss_returns_none():
    scene = Scene()
    scene.add(Sphere((0, 0, -2), 0.5, PhongMaterial()))
    assert scene.ray_intersect(Ray((0, 0, 0), (0, 1, 0))) is None


def test_background_top_and_bottom():
    scene = Scene()
    np.testing.assert_allclose(scene.sample_background_light((0, 1, 0)), [0.5, 0.5, 0.9])
    np.testing.assert_allclose(scene.sample_background_light((0, -1, 0)), [1.0, 1.0, 1.0])


def test_background_ignores_direction_length():
    scene = Scene()
    a = scene.sample_background_light((1, 2, 3))
    b = scene.sample_background_light((10, 20, 30))
    np.testing.assert_allclose(a, b)