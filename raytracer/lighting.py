"""Phong reflection model."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.material import ObjectMaterial
from raytracer.scene import Scene
from raytracer.shapes import Intersection, Ray
from raytracer.vector import Vec3


@dataclass
class PhongReflection:
    """Shading inputs for one point: the hit, its material, the ray and the scene."""

    intersection: Intersection = field(default_factory=Intersection)
    material: ObjectMaterial = field(default_factory=ObjectMaterial)
    ray: Ray = field(default_factory=Ray)
    scene: Scene = field(default_factory=Scene)

    def l(self) -> Vec3:
        """Unit vector towards the light."""
        return (self.scene.light_position - self.p()).normalized()

    def n(self) -> Vec3:
        """Unit surface normal."""
        return self.intersection.normal.normalized()

    def p(self) -> Vec3:
        """The point being shaded."""
        return self.intersection.point

    def v(self) -> Vec3:
        """Unit vector towards the viewer."""
        return (self.ray.origin - self.p()).normalized()

    def r(self) -> Vec3:
        """The light vector reflected about the normal."""
        return -self.l().reflect(self.n())

    def ambient_term(self) -> Vec3:
        light_ambient = self.scene.ambient_factor * self.scene.light_color
        return self.material.ambient * light_ambient

    def diffuse_term(self) -> Vec3:
        l_dot_n = max(0.0, self.l().dot(self.n()))
        return self.material.diffuse * l_dot_n * self.scene.light_color

    def specular_term(self) -> Vec3:
        r_dot_v = max(0.0, self.r().dot(self.v()))
        factor = r_dot_v ** self.material.specular_coefficient
        return self.material.specular * self.scene.light_color * factor

    def intensity(self) -> Vec3:
        """Sum of the diffuse, specular and ambient terms."""
        return self.diffuse_term() + self.specular_term() + self.ambient_term()