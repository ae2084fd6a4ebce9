"""Rays, intersections and the shapes that can be ray traced."""

from __future__ import annotations

import dataclasses
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from raytracer.material import ObjectMaterial
from raytracer.vector import Vec3

_TRIANGLE_EPSILON = 0.0000001


def dot_normalized(v1: Vec3, v2: Vec3) -> float:
    """Cosine of the angle between two vectors."""
    return v1.normalized().dot(v2.normalized())


@dataclass
class Ray:
    origin: Vec3 = field(default_factory=Vec3)
    direction: Vec3 = field(default_factory=Vec3)


@dataclass
class Intersection:
    """Result of intersecting a ray with a shape."""

    number_of_intersections: int = 0
    point: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    id: int = -1
    material: ObjectMaterial = field(default_factory=ObjectMaterial)


@dataclass
class Triangle:
    p1: Vec3
    p2: Vec3
    p3: Vec3


class Shape(ABC):
    """A surface with an identifier and a material."""

    def __init__(self, shape_id: int = -1) -> None:
        self.id = shape_id
        self.material = ObjectMaterial()

    def _material_copy(self) -> ObjectMaterial:
        return dataclasses.replace(self.material)

    def _empty_intersection(self) -> Intersection:
        return Intersection(id=self.id, material=self._material_copy())

    @abstractmethod
    def get_intersection(self, ray: Ray) -> Intersection:
        """Intersect ``ray`` with this shape."""


class Triangles(Shape):
    """A mesh of triangles sharing one identifier and material."""

    def __init__(self) -> None:
        super().__init__()
        self.triangles: list[Triangle] = []

    def init_triangles(self, vertices: Sequence[Vec3], shape_id: int) -> None:
        """Append one triangle per three consecutive vertices."""
        if len(vertices) % 3:
            raise ValueError("vertex count must be a multiple of three")
        self.id = shape_id
        it = iter(vertices)
        self.triangles.extend(Triangle(a, b, c) for a, b, c in zip(it, it, it))

    def intersect_triangle(self, ray: Ray, triangle: Triangle) -> Intersection:
        """Möller–Trumbore ray/triangle intersection."""
        edge1 = triangle.p2 - triangle.p1
        edge2 = triangle.p3 - triangle.p1
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)
        if -_TRIANGLE_EPSILON < a < _TRIANGLE_EPSILON:
            return Intersection()
        f = 1.0 / a
        s = ray.origin - triangle.p1
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return Intersection()
        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return Intersection()
        t = f * edge2.dot(q)
        if t <= _TRIANGLE_EPSILON:
            return Intersection()
        return Intersection(
            number_of_intersections=1,
            point=ray.origin + ray.direction * t,
            normal=edge1.cross(edge2).normalized(),
            id=self.id,
            material=self._material_copy(),
        )

    def get_intersection(self, ray: Ray) -> Intersection:
        """Nearest hit among all triangles."""
        if not self.triangles:
            raise IndexError("mesh has no triangles")
        first, *rest = self.triangles
        result = self.intersect_triangle(ray, first)
        nearest = 9999.0
        if result.number_of_intersections:
            nearest = result.point.distance(ray.origin)
        for triangle in rest:
            hit = self.intersect_triangle(ray, triangle)
            if hit.number_of_intersections:
                distance = hit.point.distance(ray.origin)
                if distance < nearest:
                    nearest = distance
                    result = hit
        result.material = self._material_copy()
        result.id = self.id
        return result


class Sphere(Shape):
    def __init__(self, centre: Vec3, radius: float, shape_id: int) -> None:
        super().__init__(shape_id)
        self.centre = centre
        self.radius = radius

    def get_intersection(self, ray: Ray) -> Intersection:
        result = self._empty_intersection()
        oc = ray.origin - self.centre
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return result
        root = math.sqrt(discriminant)
        t = (-b - root) / (2.0 * a)
        if t < 0:
            t = (-b + root) / (2.0 * a)
            if t < 0:
                return result
        result.point = ray.origin + ray.direction * t
        result.normal = (result.point - self.centre).normalized()
        result.number_of_intersections = 1
        return result


class Cylinder(Shape):
    """An open vertical cylinder rising ``height`` above ``center``."""

    def __init__(
        self, center: Vec3, radius: float, shape_id: int, height: float = 1.0
    ) -> None:
        super().__init__(shape_id)
        self.center = center
        self.radius = radius
        self.height = height

    def get_intersection(self, ray: Ray) -> Intersection:
        result = self._empty_intersection()
        oc = ray.origin - self.center
        d = ray.direction
        a = d.x * d.x + d.z * d.z
        if a == 0:
            return result
        b = 2.0 * (oc.x * d.x + oc.z * d.z)
        c = oc.x * oc.x + oc.z * oc.z - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return result
        root = math.sqrt(discriminant)
        t = min((-b - root) / (2.0 * a), (-b + root) / (2.0 * a))
        y = ray.origin.y + t * d.y
        if y < self.center.y or y > self.center.y + self.height:
            return result
        result.point = ray.origin + d * t
        result.normal = (result.point - Vec3(self.center.x, y, self.center.z)).normalized()
        result.number_of_intersections = 1
        return result


class Plane(Shape):
    def __init__(self, point: Vec3, normal: Vec3, shape_id: int) -> None:
        super().__init__(shape_id)
        self.point = point
        self.normal = normal

    def get_intersection(self, ray: Ray) -> Intersection:
        result = self._empty_intersection()
        result.normal = self.normal
        facing = self.normal.dot(ray.direction)
        if facing >= 0:
            return result
        s = (self.point - ray.origin).dot(self.normal) / facing
        result.number_of_intersections = 1
        result.point = ray.origin + ray.direction * s
        return result