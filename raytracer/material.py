"""Surface materials for shading."""

from dataclasses import dataclass, field

from raytracer.vector import Vec3


@dataclass
class ObjectMaterial:
    """Colour, reflection and specular parameters of a surface."""

    ambient: Vec3 = field(default_factory=Vec3)
    diffuse: Vec3 = field(default_factory=Vec3)
    specular: Vec3 = field(default_factory=Vec3)
    reflection_strength: Vec3 = field(default_factory=Vec3)
    specular_coefficient: float = 0.0
    refractive_index: float = 1.0
    id: int = -1


def gold_from_some_random_website() -> ObjectMaterial:
    """A gold-looking material."""
    diffuse = Vec3(0.912, 0.782, 0.082)
    return ObjectMaterial(
        ambient=0.1 * diffuse,
        diffuse=diffuse,
        specular=Vec3(1.00, 0.913, 0.8),
        reflection_strength=0.1 * Vec3(0.857, 0.90, 0.70),
        specular_coefficient=27.8,
    )


def brass_from_lecture() -> ObjectMaterial:
    """A brass material."""
    return ObjectMaterial(
        ambient=Vec3(0.33, 0.22, 0.03),
        diffuse=Vec3(0.78, 0.57, 0.11),
        specular=Vec3(0.99, 0.91, 0.81),
        specular_coefficient=27.8,
        reflection_strength=Vec3(0.1, 0.1, 0.1),
    )