"""Scene description and the two built-in demo scenes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from raytracer.shapes import Plane, Shape, Sphere, Triangles
from raytracer.vector import Vec3


@dataclass
class Scene:
    """A light source and the shapes it illuminates."""

    light_position: Vec3 = field(default_factory=Vec3)
    light_color: Vec3 = field(default_factory=Vec3)
    ambient_factor: float = 0.0
    shapes_in_scene: list[Shape] = field(default_factory=list)


def _vertices(coords: Iterable[tuple[float, float, float]]) -> list[Vec3]:
    return [Vec3(*c) for c in coords]


BLUE_PYRAMID = _vertices([
    (-0.4, -2.75, -9.55), (-0.93, 0.55, -8.51), (0.11, -2.75, -7.98),
    (0.11, -2.75, -7.98), (-0.93, 0.55, -8.51), (-1.46, -2.75, -7.47),
    (-1.46, -2.75, -7.47), (-0.93, 0.55, -8.51), (-1.97, -2.75, -9.04),
    (-1.97, -2.75, -9.04), (-0.93, 0.55, -8.51), (-0.4, -2.75, -9.55),
])

FLOOR1 = _vertices([
    (2.75, -2.75, -5), (2.75, -2.75, -10.5), (-2.75, -2.75, -10.5),
    (-2.75, -2.75, -5), (2.75, -2.75, -5), (-2.75, -2.75, -10.5),
])

CEILING = _vertices([
    (2.75, 2.75, -10.5), (2.75, 2.75, -5), (-2.75, 2.75, -5),
    (-2.75, 2.75, -10.5), (2.75, 2.75, -10.5), (-2.75, 2.75, -5),
])

RIGHT_WALL = _vertices([
    (2.75, 2.75, -5), (2.75, 2.75, -10.5), (2.75, -2.75, -10.5),
    (2.75, -2.75, -5), (2.75, 2.75, -5), (2.75, -2.75, -10.5),
])

LEFT_WALL = _vertices([
    (-2.75, -2.75, -5), (-2.75, -2.75, -10.5), (-2.75, 2.75, -10.5),
    (-2.75, 2.75, -5), (-2.75, -2.75, -5), (-2.75, 2.75, -10.5),
])

BACK_WALL = _vertices([
    (2.75, -2.75, -10.5), (2.75, 2.75, -10.5), (-2.75, 2.75, -10.5),
    (-2.75, 2.75, -10.5), (-2.75, -2.75, -10.5), (2.75, -2.75, -10.5),
])

ICOSAHEDRON = _vertices([
    (-2, -1, -7), (-1.276, -0.4472, -6.474), (-2.276, -0.4472, -6.149),
    (-1.276, -0.4472, -6.474), (-2, -1, -7), (-1.276, -0.4472, -7.526),
    (-2, -1, -7), (-2.276, -0.4472, -6.149), (-2.894, -0.4472, -7),
    (-2, -1, -7), (-2.894, -0.4472, -7), (-2.276, -0.4472, -7.851),
    (-2, -1, -7), (-2.276, -0.4472, -7.851), (-1.276, -0.4472, -7.526),
    (-1.276, -0.4472, -6.474), (-1.276, -0.4472, -7.526), (-1.106, 0.4472, -7),
    (-2.276, -0.4472, -6.149), (-1.276, -0.4472, -6.474), (-1.724, 0.4472, -6.149),
    (-2.894, -0.4472, -7), (-2.276, -0.4472, -6.149), (-2.724, 0.4472, -6.474),
    (-2.276, -0.4472, -7.851), (-2.894, -0.4472, -7), (-2.724, 0.4472, -7.526),
    (-1.276, -0.4472, -7.526), (-2.276, -0.4472, -7.851), (-1.724, 0.4472, -7.851),
    (-1.276, -0.4472, -6.474), (-1.106, 0.4472, -7), (-1.724, 0.4472, -6.149),
    (-2.276, -0.4472, -6.149), (-1.724, 0.4472, -6.149), (-2.724, 0.4472, -6.474),
    (-2.894, -0.4472, -7), (-2.724, 0.4472, -6.474), (-2.724, 0.4472, -7.526),
    (-2.276, -0.4472, -7.851), (-2.724, 0.4472, -7.526), (-1.724, 0.4472, -7.851),
    (-1.276, -0.4472, -7.526), (-1.724, 0.4472, -7.851), (-1.106, 0.4472, -7),
    (-1.724, 0.4472, -6.149), (-1.106, 0.4472, -7), (-2, 1, -7),
    (-2.724, 0.4472, -6.474), (-1.724, 0.4472, -6.149), (-2, 1, -7),
    (-2.724, 0.4472, -7.526), (-2.724, 0.4472, -6.474), (-2, 1, -7),
    (-1.724, 0.4472, -7.851), (-2.724, 0.4472, -7.526), (-2, 1, -7),
    (-1.106, 0.4472, -7), (-1.724, 0.4472, -7.851), (-2, 1, -7),
])

GREEN_CONE = _vertices([
    (0, -1, -5.8), (0, 0.6, -5), (0.4, -1, -5.693),
    (0.4, -1, -5.693), (0, 0.6, -5), (0.6928, -1, -5.4),
    (0.6928, -1, -5.4), (0, 0.6, -5), (0.8, -1, -5),
    (0.8, -1, -5), (0, 0.6, -5), (0.6928, -1, -4.6),
    (0.6928, -1, -4.6), (0, 0.6, -5), (0.4, -1, -4.307),
    (0.4, -1, -4.307), (0, 0.6, -5), (0, -1, -4.2),
    (0, -1, -4.2), (0, 0.6, -5), (-0.4, -1, -4.307),
    (-0.4, -1, -4.307), (0, 0.6, -5), (-0.6928, -1, -4.6),
    (-0.6928, -1, -4.6), (0, 0.6, -5), (-0.8, -1, -5),
    (-0.8, -1, -5), (0, 0.6, -5), (-0.6928, -1, -5.4),
    (-0.6928, -1, -5.4), (0, 0.6, -5), (-0.4, -1, -5.693),
    (-0.4, -1, -5.693), (0, 0.6, -5), (0, -1, -5.8),
])


def _mesh(vertices: list[Vec3], shape_id: int) -> Triangles:
    mesh = Triangles()
    mesh.init_triangles(vertices, shape_id)
    return mesh


def init_scene1() -> Scene:
    """A closed box with a reflective sphere and a blue pyramid."""
    scene = Scene()

    sphere = Sphere(Vec3(0.9, -1.925, -6.69), 0.825, 1)
    sphere.material.diffuse = Vec3(0.6, 0.6, 0.6)
    sphere.material.specular = 1.0 * sphere.material.diffuse
    sphere.material.reflection_strength = Vec3(0.4, 0.4, 0.4)
    sphere.material.specular_coefficient = 64
    scene.shapes_in_scene.append(sphere)

    pyramid = _mesh(BLUE_PYRAMID, 2)
    pyramid.material.diffuse = Vec3(0.0, 0.85, 0.95)
    pyramid.material.specular = 0.1 * pyramid.material.diffuse
    pyramid.material.reflection_strength = Vec3(0.3, 0.3, 0.3)
    scene.shapes_in_scene.append(pyramid)

    for vertices, shape_id, diffuse in (
        (RIGHT_WALL, 3, Vec3(0.0, 0.7, 0.0)),
        (LEFT_WALL, 4, Vec3(0.7, 0.0, 0.0)),
        (FLOOR1, 5, Vec3(0.8, 0.8, 0.8)),
        (CEILING, 6, Vec3(1.0, 1.0, 1.0)),
    ):
        wall = _mesh(vertices, shape_id)
        wall.material.diffuse = diffuse
        wall.material.ambient = 0.1 * diffuse
        scene.shapes_in_scene.append(wall)

    back_wall = _mesh(BACK_WALL, 7)
    back_wall.material.diffuse = Vec3(1.0, 1.0, 1.0)
    scene.shapes_in_scene.append(back_wall)

    scene.light_position = Vec3(0, 2.5, -7.75)
    scene.light_color = Vec3(1, 1, 1)
    scene.ambient_factor = 0.1
    return scene


def init_scene2() -> Scene:
    """An icosahedron, spheres and a cone on an open floor."""
    scene = Scene()

    icosahedron = _mesh(ICOSAHEDRON, 1)
    icosahedron.material.diffuse = Vec3(1.0, 0.0, 0.0)
    icosahedron.material.reflection_strength = Vec3(0.5, 0.5, 0.5)
    scene.shapes_in_scene.append(icosahedron)

    yellow = Sphere(Vec3(1, -0.5, -3.5), 0.5, 2)
    yellow.material.diffuse = Vec3(1.0, 1.0, 0.0)
    yellow.material.specular = yellow.material.diffuse
    yellow.material.specular_coefficient = 64
    scene.shapes_in_scene.append(yellow)

    grey = Sphere(Vec3(0, 1, -5), 0.4, 3)
    grey.material.diffuse = Vec3(0.6, 0.6, 0.6)
    grey.material.specular = grey.material.diffuse
    grey.material.reflection_strength = Vec3(0.5, 0.5, 0.5)
    grey.material.specular_coefficient = 64
    scene.shapes_in_scene.append(grey)

    purple = Sphere(Vec3(-0.8, -0.75, -4), 0.25, 4)
    purple.material.diffuse = Vec3(0.4, 0.1, 1.0)
    purple.material.specular = purple.material.diffuse
    purple.material.reflection_strength = Vec3(0.3, 0.3, 0.3)
    purple.material.specular_coefficient = 64
    scene.shapes_in_scene.append(purple)

    cone = _mesh(GREEN_CONE, 5)
    cone.material.diffuse = Vec3(0.0, 0.8, 0.0)
    cone.material.specular = cone.material.diffuse
    cone.material.specular_coefficient = 8
    scene.shapes_in_scene.append(cone)

    floor = Plane(Vec3(0, -1, 0), Vec3(0, 1, 0), 6)
    floor.material.diffuse = Vec3(0.8, 0.8, 0.8)
    floor.material.ambient = 0.5 * floor.material.diffuse
    scene.shapes_in_scene.append(floor)

    back_wall = Plane(Vec3(0, 0, -12), Vec3(0, 0, 1), 7)
    back_wall.material.diffuse = Vec3(0.0, 0.6, 0.6)
    back_wall.material.ambient = 0.5 * back_wall.material.diffuse
    back_wall.material.specular = back_wall.material.diffuse
    back_wall.material.specular_coefficient = 8
    scene.shapes_in_scene.append(back_wall)

    scene.light_position = Vec3(4, 6, -1)
    scene.light_color = Vec3(1, 1, 1)
    scene.ambient_factor = 0.1
    return scene