import pytest

from raytracer.color import Color
from raytracer.image import Image


def test_new_image_is_black():
    image = Image(3, 2)
    assert list(image) == [Color(0, 0, 0)] * 6


def test_set_then_get():
    image = Image(4, 3)
    image.set_pixel(2, 1, Color(0.1, 0.2, 0.3))
    assert image.get_pixel(2, 1) == Color(0.1, 0.2, 0.3)
    assert image.get_pixel(1, 2) == Color(0, 0, 0)


def test_iteration_is_row_major():
    image = Image(2, 2)
    image.set_pixel(1, 0, Color(1, 0, 0))
    image.set_pixel(0, 1, Color(0, 1, 0))
    assert list(image) == [Color(0, 0, 0), Color(1, 0, 0), Color(0, 1, 0), Color(0, 0, 0)]


@pytest.mark.parametrize("i,j", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_raises(i, j):
    image = Image(3, 2)
    with pytest.raises(IndexError):
        image.get_pixel(i, j)
    with pytest.raises(IndexError):
        image.set_pixel(i, j, Color(1, 1, 1))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 5)