# raytracer

A small path tracer in pure Python. It renders scenes made of spheres lit by a
sky gradient, and writes the result as a plain-text PPM (`P3`) image. Three
kinds of surface are available:

- `Lambertian`: matte, diffuse surfaces
- `Metal`: mirror-like surfaces, blurred by a `fuzz` factor (capped at 1)
- `Dielectric`: glass-like surfaces that refract or reflect, using Schlick's
  approximation to choose between them

No third-party libraries are required.

## Installation

```
pip install .
```

## Rendering from the command line

```
raytracer
```

This builds a random scene of small spheres around three large ones, splits
the image into tiles rendered on worker threads, and writes the image to
`output.ppm`. While it works it prints a line as each tile starts and
finishes, then a progress bar for each row written to the file.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `-o`, `--output` | `output.ppm` | File to write |
| `--width` | `300` | Image width in pixels; the height follows from a 3:2 aspect ratio |
| `--samples` | `50` | Samples per pixel |
| `--depth` | `900` | Maximum number of bounces per ray |
| `--threads` | number of CPUs | Number of tiles, each rendered on its own thread |
| `--seed` | none | Reseed the random generator before building the scene |

A non-positive width, sample count or thread count is rejected with a usage
error. For a quick preview:

```
raytracer --width 120 --samples 8 --depth 20 -o preview.ppm
```

The image is divided into tiles with `batch_layout`; when the image size is
not a multiple of the tile size, the pixels left over at the right and bottom
edges stay black.

## Using the library

- `raytracer.vector`: `Vec3`, an immutable 3D vector with arithmetic
  operators, `dot`, `cross`, `length`, `length_squared`, `unit_vector` and
  `is_near_zero`
- `raytracer.color`: `Color`, a `Vec3` with `r`, `g`, `b` properties whose
  components must lie in `[0, 1]` (otherwise `ValueError`); `Color.random`
  and `validate_color_value`. Arithmetic on colours gives plain `Vec3` values.
- `raytracer.ray`: `Ray`, with `origin`, `direction` and `at(t)`
- `raytracer.hittable`: `Hittable`, the interface for anything a ray can
  hit, and `HitRecord`
- `raytracer.sphere`: `Sphere(center, radius, material)`
- `raytracer.materials`: `Lambertian`, `Metal`, `Dielectric`, the `Scatter`
  result of `Material.scatter`, and the helpers `reflect`, `refract` and
  `reflectance`
- `raytracer.world`: `World`, a list of hittables whose `hit` returns the
  nearest hit or `None`, and `generate_random_world()`
- `raytracer.camera`: `Camera`, a positionable thin-lens camera with a
  vertical field of view and depth of field
- `raytracer.image`: `Image`, an in-memory grid of colours
- `raytracer.writer`: `PPMWriter`, a context manager writing one pixel per
  line, and `write_image(image, path)`
- `raytracer.render`: `RenderSettings`, `ray_color`, `gamma_correct`,
  `batch_layout`, `render_batch`, `render`, `progress_bar` and the command's
  `main`
- `raytracer.sampling`: random sampling helpers; `seed(value)` reseeds the
  generator they all share

A small render:

```python
from raytracer.camera import Camera
from raytracer.render import RenderSettings, render
from raytracer.sampling import seed
from raytracer.vector import Vec3
from raytracer.world import generate_random_world
from raytracer.writer import write_image

seed(42)
world = generate_random_world()
settings = RenderSettings(width=120, samples_per_pixel=8, max_depth=20, threads=4)
camera = Camera(
    look_from=Vec3(13, -2, 3),
    look_at=Vec3(0, 0, 0),
    view_up=Vec3(0, 1, 0),
    vertical_fov_degrees=30,
    aspect_ratio=settings.aspect_ratio,
    aperture=0.1,
    focus_dist=10.0,
)
image = render(world, camera, settings)
write_image(image, "output.ppm")
```

Scenes can also be built by hand:

```python
from raytracer.color import Color
from raytracer.materials import Dielectric, Lambertian, Metal
from raytracer.sphere import Sphere
from raytracer.vector import Vec3
from raytracer.world import World

world = World()
world.add(Sphere(Vec3(0, 1000, 0), 1000, Lambertian(Color(0.5, 0.5, 0.5))))
world.add(Sphere(Vec3(0, -1, 0), 1.0, Dielectric(Color(1, 1, 1), 1.5)))
world.add(Sphere(Vec3(4, -1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
```

## What it does not do

There is no window or interactive preview: the rendered image is only written
to a PPM file. Spheres are the only shape, and there are no light sources
other than the sky gradient.

## Running the tests

```
pip install .[test]
pytest
```