import numpy as np
import pytest
from PIL import Image


def solid_grid(width, height, rgb):
    """PixelGrid filled with one colour."""
    grid = np.zeros((height, width, 3), dtype=np.uint8)
    grid[:, :] = rgb
    return grid


def vertical_step_grid(width, height):
    """Left half black, right half white."""
    grid = np.zeros((height, width, 3), dtype=np.uint8)
    grid[:, width // 2 :] = 255
    return grid


@pytest.fixture
def png_path(tmp_path):
    img = Image.new("RGB", (4, 4))
    pixels = img.load()
    for y in range(4):
        for x in range(4):
            pixels[x, y] = (x * 40, y * 60, 150)
    path = tmp_path / "sample.png"
    img.save(path)
    return path
