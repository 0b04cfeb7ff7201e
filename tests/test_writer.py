import pytest

from raytracer.color import Color
from raytracer.image import Image
from raytracer.writer import PPMWriter, write_image


def test_header_format(tmp_path):
    path = tmp_path / "out.ppm"
    with PPMWriter(path, 2, 1):
        pass
    assert path.read_text() == "P3\n2 1\n255\n"


def test_pixel_values_scaled_and_rounded(tmp_path):
    path = tmp_path / "out.ppm"
    with PPMWriter(path, 1, 1) as writer:
        writer.write_pixel(Color(1, 0, 0.5))
    lines = path.read_text().splitlines()
    assert lines[3] == "255 0 128"


def test_write_pixel_requires_open_writer(tmp_path):
    writer = PPMWriter(tmp_path / "out.ppm", 1, 1)
    with pytest.raises(ValueError):
        writer.write_pixel(Color(0, 0, 0))


def test_closed_after_context(tmp_path):
    path = tmp_path / "out.ppm"
    with PPMWriter(path, 1, 1) as writer:
        writer.write_pixel(Color(1, 1, 1))
    with pytest.raises(ValueError):
        writer.write_pixel(Color(1, 1, 1))


def test_write_image_round_trip(tmp_path):
    image = Image(3, 2)
    image.set_pixel(0, 0, Color(1, 1, 1))
    image.set_pixel(2, 1, Color(0, 1, 0))
    path = tmp_path / "image.ppm"
    write_image(image, path)

    tokens = path.read_text().split()
    assert tokens[:4] == ["P3", "3", "2", "255"]
    values = [int(tok) for tok in tokens[4:]]
    assert len(values) == 3 * 3 * 2
    pixels = [tuple(values[k:k + 3]) for k in range(0, len(values), 3)]
    assert pixels[0] == (255, 255, 255)
    assert pixels[5] == (0, 255, 0)
    assert pixels[1:5] == [(0, 0, 0)] * 4
    assert all(0 <= v <= 255 for v in values)