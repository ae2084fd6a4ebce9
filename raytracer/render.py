"""Casting rays through a scene and rendering images."""

from __future__ import annotations

import argparse
import dataclasses
import math
from dataclasses import dataclass
from itertools import product
from typing import Optional, Sequence

from raytracer import logs
from raytracer.imagebuffer import ImageBuffer
from raytracer.lighting import PhongReflection
from raytracer.scene import Scene, init_scene1, init_scene2
from raytracer.shapes import Intersection, Ray
from raytracer.vector import Vec3

_OFFSET = 0.0001
_FIELD_OF_VIEW = 90.0


@dataclass
class RayAndPixel:
    """A primary ray and the pixel it colours."""

    ray: Ray
    x: int
    y: int


def has_intersection(scene: Scene, ray: Ray, skip_id: int) -> int:
    """Id of the first shape blocking ``ray`` before the light, or -1."""
    light_distance = ray.origin.distance(scene.light_position)
    for shape in scene.shapes_in_scene:
        hit = shape.get_intersection(ray)
        if shape.id == skip_id or not hit.number_of_intersections:
            continue
        distance = hit.point.distance(ray.origin)
        if 0.00001 < distance < light_distance - 0.01:
            return hit.id
    return -1


def get_closest_intersection(scene: Scene, ray: Ray, skip_id: int) -> Intersection:
    """Nearest intersection of ``ray`` with any shape except ``skip_id``."""
    closest = Intersection()
    nearest = math.inf
    for shape in scene.shapes_in_scene:
        if shape.id == skip_id:
            continue
        hit = shape.get_intersection(ray)
        distance = hit.point.distance(ray.origin)
        if hit.number_of_intersections and distance < nearest:
            nearest = distance
            closest = hit
    return closest


def raytrace_single_ray(scene: Scene, ray: Ray, level: int, source_id: int) -> Vec3:
    """Colour seen along ``ray``, following up to ``level`` bounces."""
    result = get_closest_intersection(scene, ray, source_id)
    if not result.number_of_intersections:
        return Vec3(0, 0, 0)

    material = dataclasses.replace(result.material)
    phong = PhongReflection(intersection=result, material=material, ray=ray, scene=scene)

    light_direction = (scene.light_position - result.point).normalized()
    shadow_ray = Ray(result.point + light_direction * _OFFSET, light_direction)
    if has_intersection(scene, shadow_ray, result.material.id) != -1:
        material.diffuse = material.diffuse * 0.5

    color = phong.intensity()

    if level > 0 and material.reflection_strength != Vec3(0, 0, 0):
        reflected = ray.direction.reflect(result.normal).normalized()
        reflected_ray = Ray(result.point + reflected * _OFFSET, reflected)
        reflected_color = raytrace_single_ray(scene, reflected_ray, level - 1, result.material.id)
        color = color + reflected_color * material.reflection_strength

    if level > 0 and material.refractive_index < 1.0:
        eta_i, eta_t = 1.0, material.refractive_index
        normal = result.normal
        if ray.direction.dot(normal) > 0:
            eta_i, eta_t = eta_t, eta_i
            normal = -normal
        ratio = eta_i / eta_t
        cos_i = -normal.dot(ray.direction)
        sin_t2 = ratio * ratio * (1.0 - cos_i * cos_i)
        if sin_t2 <= 1.0:
            cos_t = math.sqrt(1.0 - sin_t2)
            refracted = ratio * ray.direction + (ratio * cos_i - cos_t) * normal
            refracted_ray = Ray(result.point - refracted * _OFFSET, refracted)
            refracted_color = raytrace_single_ray(scene, refracted_ray, level - 1, result.material.id)
            color = color + refracted_color * (1.0 - material.reflection_strength.x)

    return color


def get_rays_for_viewpoint(scene: Scene, image: ImageBuffer, view_point: Vec3) -> list[RayAndPixel]:
    """Pinhole-camera rays from ``view_point`` looking down -z, one per pixel."""
    width, height = image.width, image.height
    aspect_ratio = width / height
    tan_fov = math.tan(math.radians(_FIELD_OF_VIEW / 2.0))

    def ray_for(x: int, y: int) -> RayAndPixel:
        ndc_x = (x + 0.5) / width * 2 - 1
        ndc_y = (y + 0.5) / height * 2 - 1
        direction = Vec3(ndc_x * aspect_ratio * tan_fov, ndc_y * tan_fov, -1).normalized()
        return RayAndPixel(Ray(view_point, direction), x, y)

    return [ray_for(x, y) for x, y in product(range(width), range(height))]


def raytrace_image(
    scene: Scene, image: ImageBuffer, view_point: Vec3, width: int, height: int
) -> None:
    """Resize ``image`` and fill it with the scene seen from ``view_point``."""
    image.initialize(width, height)
    for item in get_rays_for_viewpoint(scene, image, view_point):
        image.set_pixel(item.x, item.y, raytrace_single_ray(scene, item.ray, 5, -1))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render one of the built-in scenes to a PNG file."""
    parser = argparse.ArgumentParser(description="Ray trace a built-in scene to a PNG file.")
    parser.add_argument("--scene", type=int, choices=(1, 2), default=1)
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=800)
    parser.add_argument("--output", default="output.png")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    logs.debug("Starting main")
    scene = init_scene1() if args.scene == 1 else init_scene2()
    image = ImageBuffer()
    raytrace_image(scene, image, Vec3(0, 0, 0), args.width, args.height)
    image.save_to_file(args.output)
    return 0