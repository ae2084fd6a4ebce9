import pytest

from raytracer.scene import Scene, init_scene1, init_scene2
from raytracer.shapes import Plane, Ray, Sphere, Triangles
from raytracer.vector import Vec3


def test_default_scene_is_empty():
    scene = Scene()
    assert scene.shapes_in_scene == []
    assert scene.ambient_factor == 0.0


def test_scene1_shape_ids_in_order():
    scene = init_scene1()
    assert [s.id for s in scene.shapes_in_scene] == [1, 2, 3, 4, 5, 6, 7]


def test_scene1_shape_kinds():
    shapes = init_scene1().shapes_in_scene
    assert isinstance(shapes[0], Sphere)
    assert shapes[0].radius == 0.825
    assert all(isinstance(s, Triangles) for s in shapes[1:])
    assert [len(s.triangles) for s in shapes[1:]] == [4, 2, 2, 2, 2, 2]


def test_scene1_sphere_and_pyramid():
    shapes = init_scene1().shapes_in_scene
    sphere = shapes[0]
    assert sphere.centre == Vec3(0.9, -1.925, -6.69)
    assert sphere.radius == 0.825
    assert sphere.material.specular == sphere.material.diffuse
    assert sphere.material.specular_coefficient == 64
    assert len(shapes[1].triangles) == 4
    assert all(len(s.triangles) == 2 for s in shapes[2:])


def test_scene1_light():
    scene = init_scene1()
    assert scene.light_position == Vec3(0, 2.5, -7.75)
    assert scene.light_color == Vec3(1, 1, 1)
    assert scene.ambient_factor == pytest.approx(0.1)


def test_scene1_ray_forward_hits_back_wall():
    back_wall = init_scene1().shapes_in_scene[6]
    hit = back_wall.get_intersection(Ray(Vec3(0, 0, 0), Vec3(0, 0, -1)))
    assert hit.number_of_intersections == 1
    assert hit.id == 7
    assert tuple(hit.point) == pytest.approx((0.0, 0.0, -10.5))


def test_scene2_shapes():
    shapes = init_scene2().shapes_in_scene
    assert [s.id for s in shapes] == [1, 2, 3, 4, 5, 6, 7]
    assert len(shapes[0].triangles) == 20
    assert len(shapes[4].triangles) == 12
    assert isinstance(shapes[5], Plane) and isinstance(shapes[6], Plane)
    assert [type(s) for s in shapes[1:4]] == [Sphere, Sphere, Sphere]


def test_scene2_light_and_floor():
    scene = init_scene2()
    assert scene.light_position == Vec3(4, 6, -1)
    floor = scene.shapes_in_scene[5]
    assert floor.normal == Vec3(0, 1, 0)
    assert tuple(floor.material.ambient) == pytest.approx(
        tuple(0.5 * floor.material.diffuse)
    )


def test_scenes_are_independent():
    first = init_scene1()
    second = init_scene1()
    first.shapes_in_scene[0].material.diffuse = Vec3(9, 9, 9)
    assert second.shapes_in_scene[0].material.diffuse == Vec3(0.6, 0.6, 0.6)