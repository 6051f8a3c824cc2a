import numpy as np
import pytest

from rastertrace.material import Emissive, Lambertian, Material
from rastertrace.ray import Ray, RaycastHit


def _hit():
    return RaycastHit(1.0, (1.0, 2.0, 3.0), (0.0, 1.0, 0.0))


def test_material_is_abstract():
    with pytest.raises(TypeError):
        Material((1.0, 1.0, 1.0))


def test_lambertian_scatter_starts_at_hit_point():
    material = Lambertian((0.5, 0.25, 0.75))
    hit = _hit()
    attenuation, scattered = material.scatter(Ray((0, 0, 0), (0, -1, 0)), hit)
    assert np.allclose(scattered.origin, hit.point)
    assert np.allclose(attenuation, material.albedo)


def test_lambertian_direction_within_unit_sphere_of_normal():
    material = Lambertian(0.5)
    hit = _hit()
    for _ in range(50):
        _, scattered = material.scatter(Ray((0, 0, 0), (0, -1, 0)), hit)
        assert np.linalg.norm(scattered.direction - hit.normal) < 1.0


def test_scalar_albedo_fills_channels():
    material = Lambertian(0.5)
    assert np.allclose(material.albedo, np.full(3, 0.5))


def test_lambertian_emits_nothing():
    assert np.array_equal(Lambertian((1.0, 1.0, 1.0)).emissive(), np.zeros(3))


def test_emissive_absorbs_rays():
    material = Emissive((1.0, 0.5, 0.25), 3.0)
    assert material.scatter(Ray((0, 0, 0), (0, 0, 1)), _hit()) is None


def test_emissive_scales_albedo():
    albedo = np.array([1.0, 0.5, 0.25])
    material = Emissive(albedo, 2.0)
    assert np.allclose(material.emissive(), albedo * material.intensity)


def test_emissive_default_intensity_is_albedo():
    albedo = np.array([0.3, 0.6, 0.9])
    assert np.allclose(Emissive(albedo).emissive(), albedo)


def test_bad_albedo_shape():
    with pytest.raises(ValueError):
        Lambertian((1.0, 1.0))