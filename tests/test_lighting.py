import pytest

from raytracer.lighting import PhongReflection
from raytracer.material import ObjectMaterial
from raytracer.scene import Scene
from raytracer.shapes import Intersection, Ray
from raytracer.vector import Vec3


def _phong(light=Vec3(0, 1, 0), viewer=Vec3(0, 1, 0), normal=Vec3(0, 1, 0),
           material=None, ambient_factor=1.0):
    material = material or ObjectMaterial(
        ambient=Vec3(0.2, 0.4, 0.6),
        diffuse=Vec3(0.5, 0.25, 1.0),
        specular=Vec3(0.3, 0.6, 0.9),
        specular_coefficient=8,
    )
    scene = Scene(light_position=light, light_color=Vec3(1, 1, 1),
                  ambient_factor=ambient_factor)
    hit = Intersection(number_of_intersections=1, point=Vec3(0, 0, 0), normal=normal)
    return PhongReflection(
        intersection=hit,
        material=material,
        ray=Ray(viewer, -viewer.normalized()),
        scene=scene,
    )


def approx(v):
    return pytest.approx(tuple(v))


def test_normal_is_normalized():
    phong = _phong(normal=Vec3(0, 5, 0))
    assert tuple(phong.n()) == approx(Vec3(0, 1, 0))


def test_light_and_view_vectors():
    phong = _phong(light=Vec3(0, 3, 0), viewer=Vec3(2, 0, 0))
    assert tuple(phong.l()) == approx(Vec3(0, 1, 0))
    assert tuple(phong.v()) == approx(Vec3(1, 0, 0))
    assert phong.p() == Vec3(0, 0, 0)


def test_reflected_light_mirrors_about_normal():
    phong = _phong(light=Vec3(1, 1, 0))
    r = phong.r()
    l = phong.l()
    assert r.length() == pytest.approx(1.0)
    assert r.y == pytest.approx(l.y)
    assert r.x == pytest.approx(-l.x)


def test_head_on_diffuse_equals_material_diffuse():
    phong = _phong()
    assert tuple(phong.diffuse_term()) == approx(phong.material.diffuse)


def test_head_on_specular_equals_material_specular():
    phong = _phong()
    assert tuple(phong.specular_term()) == approx(phong.material.specular)


def test_light_behind_surface_gives_no_diffuse_or_specular():
    phong = _phong(light=Vec3(0, -1, 0))
    assert tuple(phong.diffuse_term()) == approx(Vec3(0, 0, 0))
    assert tuple(phong.specular_term()) == approx(Vec3(0, 0, 0))


def test_ambient_term_scales_with_factor():
    full = _phong(ambient_factor=1.0)
    none = _phong(ambient_factor=0.0)
    assert tuple(full.ambient_term()) == approx(full.material.ambient)
    assert tuple(none.ambient_term()) == approx(Vec3(0, 0, 0))


def test_higher_exponent_narrows_highlight():
    low = _phong(light=Vec3(1, 1, 0), viewer=Vec3(-0.5, 1, 0))
    high = _phong(light=Vec3(1, 1, 0), viewer=Vec3(-0.5, 1, 0))
    high.material.specular_coefficient = 64
    assert 0.0 < high.specular_term().x < low.specular_term().x


def test_intensity_is_sum_of_terms():
    phong = _phong(light=Vec3(1, 2, 0.5), viewer=Vec3(-1, 1, 0))
    total = phong.diffuse_term() + phong.specular_term() + phong.ambient_term()
    assert tuple(phong.intensity()) == approx(total)