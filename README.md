# raytracer

A small ray tracer in pure Python. It renders one of two built-in scenes to
an RGB PNG image:

1. A closed room with coloured walls, a reflective grey sphere and a blue
   pyramid.
2. An open scene with a red icosahedron, three spheres and a green cone.
   It has an infinite floor plane and an infinite back-wall plane.

Shading uses the Phong reflection model, which adds ambient, diffuse and
specular terms. A shadow ray is cast towards the light from every hit. When
that ray is blocked, the diffuse colour of the surface is halved. Materials
with a non-zero reflection strength trace reflected rays. Materials with a
refractive index below 1 also trace refracted rays. Primary rays follow up to
five bounces.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
raytracer --scene 2 --width 400 --height 300 --output scene2.png
```

| Option     | Default      | Meaning                   |
|------------|--------------|---------------------------|
| `--scene`  | `1`          | which scene to render (1 or 2) |
| `--width`  | `800`        | image width in pixels     |
| `--height` | `800`        | image height in pixels    |
| `--output` | `output.png` | path of the PNG to write  |

Width and height must be positive. The camera sits at the origin and looks
down the negative z axis. Rendering runs on the CPU in pure Python, so large
images take a while.

## Library use

```python
from raytracer.imagebuffer import ImageBuffer
from raytracer.render import raytrace_image
from raytracer.scene import init_scene1
from raytracer.vector import Vec3

scene = init_scene1()
image = ImageBuffer()
raytrace_image(scene, image, Vec3(0, 0, 0), 200, 200)
image.save_to_file("scene1.png")
```

Modules:

- `raytracer.vector`
  - `Vec3` is an immutable 3-vector.
  - It supports `+` and `-`, and negation.
  - `*` scales by a number, or multiplies component-wise by another `Vec3`.
  - `/` divides by a number.
  - It has the methods `dot`, `cross`, `length`, `normalized`, `distance`,
    `reflect` and `clamped`.
  - `normalized()` of the zero vector gives all-NaN components.
- `raytracer.shapes`
  - `Ray`, `Intersection` and `Triangle`.
  - The abstract `Shape` and its subclasses `Sphere`, `Cylinder`, `Plane`
    and `Triangles`. Each has a `get_intersection(ray)` method.
  - `Cylinder` is an open vertical tube rising `height` above its centre.
    The default height is 1.
  - `Plane` only reports hits for rays travelling against its normal.
  - `Triangles.init_triangles(vertices, shape_id)` groups the vertices in
    threes. A vertex count that is not a multiple of three raises
    `ValueError`.
  - Also provides `dot_normalized(v1, v2)`.
- `raytracer.material`
  - `ObjectMaterial` holds the ambient, diffuse, specular and reflection
    colours, the specular coefficient, the refractive index and an id.
  - Two presets: `gold_from_some_random_website()` and
    `brass_from_lecture()`.
- `raytracer.scene`
  - `Scene` holds the light position, the light colour, the ambient factor
    and `shapes_in_scene`.
  - `init_scene1()` and `init_scene2()` build the two built-in scenes.
- `raytracer.lighting`
  - `PhongReflection` gives `ambient_term()`, `diffuse_term()`,
    `specular_term()` and their sum, `intensity()`.
  - It also provides the vector helpers `l`, `n`, `p`, `v` and `r`.
- `raytracer.imagebuffer`
  - `ImageBuffer` is a pixel buffer whose `(0, 0)` is the bottom-left pixel.
  - `initialize(width, height)` resets the buffer to a grey checkerboard.
  - `set_pixel` and `get_pixel` raise `IndexError` for coordinates outside
    the image.
  - The buffer tracks which rows have been modified. `reset_modified()`
    clears that record.
  - `encode_png()` returns the PNG bytes, with colours clamped to 0–1.
    `save_to_file(path)` writes them to a file.
  - Both raise `ValueError` for an empty image.
- `raytracer.render`
  - `get_rays_for_viewpoint` builds rays for a pinhole camera with a 90°
    field of view.
  - `has_intersection` and `get_closest_intersection` query the scene.
  - `raytrace_single_ray` traces one ray and `raytrace_image` traces a whole
    image.
  - `main` is the entry point of the `raytracer` command.
- `raytracer.logs`
  - `debug`, `info`, `warn`, `warning` and `error` print ANSI-coloured lines
    to standard output.
  - The message is a `str.format` template.

## What it does not do

There is no window or interactive viewer. Each run renders a single scene to
a PNG file, and you cannot switch scenes while viewing them. Scenes are built
in code; they are not read from scene description files.