"""Path-tracing render loop, progress reporting and the command-line entry point."""

from __future__ import annotations

import argparse
import math
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from . import sampling
from .arithmetics import clamp, scale
from .camera import Camera
from .color import Color
from .image import Image
from .ray import Ray
from .vector import Vec3
from .world import World, generate_random_world
from .writer import OUTPUT_IMAGE_NAME, PPMWriter

PROGRESS_NUM_BARS = 30
_SHADOW_ACNE_EPSILON = 0.001
_SKY_BOTTOM = Vec3(0.5, 0.7, 1.0)
_SKY_TOP = Vec3(1.0, 1.0, 1.0)


def _default_threads() -> int:
    return os.cpu_count() or 1


@dataclass
class RenderSettings:
    """Image size, sampling quality and parallelism of a render."""

    width: int = 1200 // 4
    aspect_ratio: float = 3.0 / 2.0
    samples_per_pixel: int = 50
    max_depth: int = 900
    threads: int = field(default_factory=_default_threads)

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("Image width must be positive.")
        if self.samples_per_pixel < 1:
            raise ValueError("Samples per pixel must be positive.")
        if self.threads < 1:
            raise ValueError("Thread count must be positive.")

    @property
    def height(self) -> int:
        return int(self.width / self.aspect_ratio)


def ray_color(ray: Ray, world: World, depth: int) -> Vec3:
    """Radiance carried back along ``ray``, following at most ``depth`` bounces."""
    attenuation = Vec3(1.0, 1.0, 1.0)
    current = ray
    for _ in range(depth):
        record = world.hit(current, _SHADOW_ACNE_EPSILON, sampling.INFINITY)
        if record is None:
            unit_direction = current.direction.unit_vector()
            t = 0.5 * (unit_direction.y + 1.0)
            return attenuation * ((1.0 - t) * _SKY_BOTTOM + t * _SKY_TOP)
        scatter = record.material.scatter(current, record)
        if scatter is None:
            return Vec3(0.0, 0.0, 0.0)
        attenuation = attenuation * scatter.attenuation
        current = scatter.scattered
    return Vec3(0.0, 0.0, 0.0)


def gamma_correct(color: Vec3, samples_per_pixel: int) -> Color:
    """Average accumulated samples and apply gamma 2 correction."""
    factor = 1.0 / samples_per_pixel
    r, g, b = (clamp(math.sqrt(factor * c), 0.0, 1.0) for c in color)
    return Color(r, g, b)


def batch_layout(cores: int, width: int, height: int) -> tuple[int, int, int, int]:
    """Split the image into tiles: (rows, cols, row_size, col_size).

    Rows index horizontal tiles of ``row_size`` pixels, columns vertical
    tiles of ``col_size`` pixels.
    """
    if cores < 1:
        raise ValueError("At least one core is required.")
    cols = math.ceil(math.sqrt(cores))
    rows = math.ceil(cores / cols)
    return rows, cols, width // rows, height // cols


def render_batch(
    image: Image,
    world: World,
    camera: Camera,
    settings: RenderSettings,
    row: int,
    col: int,
    row_size: int,
    col_size: int,
) -> None:
    """Trace every pixel of one tile and store it in ``image``."""
    print(f"Thread:({row}, {col}) started")
    x_span = max(image.width - 1, 1)
    y_span = max(image.height - 1, 1)
    for j in range(col * col_size, (col + 1) * col_size):
        for i in range(row * row_size, (row + 1) * row_size):
            total = Vec3(0.0, 0.0, 0.0)
            for _ in range(settings.samples_per_pixel):
                u = (i + sampling.random_double()) / x_span
                v = (j + sampling.random_double()) / y_span
                total = total + ray_color(camera.get_ray(u, v), world, settings.max_depth)
            image.set_pixel(i, j, gamma_correct(total, settings.samples_per_pixel))
    print(f"Thread:({row}, {col}) finished")


def progress_bar(fraction: float) -> str:
    """Text progress bar for ``fraction`` in [0, 1]."""
    if not (0.0 <= fraction <= 1.0):
        raise ValueError("Progress percentage value must be between 0.0f and 1.0f range.")
    filled = int(scale(fraction, 0.0, 1.0, 0.0, PROGRESS_NUM_BARS))
    bars = "".join("=" if filled >= i else " " for i in range(PROGRESS_NUM_BARS))
    return f"[{bars}] ({fraction * 100:g}%)"


def render(world: World, camera: Camera, settings: RenderSettings) -> Image:
    """Render ``world`` through ``camera`` using one worker per tile."""
    image = Image(settings.width, settings.height)
    rows, cols, row_size, col_size = batch_layout(settings.threads, image.width, image.height)
    print(f"Starting computing with {settings.threads} threads")
    tiles = [(i, j) for j in range(cols) for i in range(rows)]
    with ThreadPoolExecutor(max_workers=len(tiles)) as pool:
        futures = [
            pool.submit(render_batch, image, world, camera, settings, i, j, row_size, col_size)
            for i, j in tiles
        ]
        for future in futures:
            future.result()
    return image


def _save(image: Image, path: str) -> None:
    with PPMWriter(path, image.width, image.height) as writer:
        for j in range(image.height):
            for i in range(image.width):
                writer.write_pixel(image.get_pixel(i, j))
            print(progress_bar((j + 1) / image.height))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the random sphere scene to a PPM file.")
    parser.add_argument("-o", "--output", default=OUTPUT_IMAGE_NAME)
    parser.add_argument("--width", type=int, default=RenderSettings.width)
    parser.add_argument("--samples", type=int, default=RenderSettings.samples_per_pixel)
    parser.add_argument("--depth", type=int, default=RenderSettings.max_depth)
    parser.add_argument("--threads", type=int, default=_default_threads())
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.seed is not None:
        sampling.seed(args.seed)

    try:
        settings = RenderSettings(
            width=args.width,
            samples_per_pixel=args.samples,
            max_depth=args.depth,
            threads=args.threads,
        )
    except ValueError as exc:
        parser.error(str(exc))

    world = generate_random_world()
    camera = Camera(
        look_from=Vec3(13, -2, 3),
        look_at=Vec3(0.0, 0.0, 0.0),
        view_up=Vec3(0.0, 1.0, 0.0),
        vertical_fov_degrees=30,
        aspect_ratio=settings.aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )
    image = render(world, camera, settings)
    _save(image, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())