import numpy as np
import pytest

from rawquant.utils.loader import PlanarImage, save_planar_rgb


def solid_image(width, height, value):
    plane = np.full(width * height, value, dtype=np.uint8)
    return PlanarImage.from_planes(plane, plane, plane, width, height)


@pytest.fixture
def gray128_4x4():
    """4x4 image with every sample at 128."""
    return solid_image(4, 4, 128)


@pytest.fixture
def random_image():
    """Seeded 16x12 image with independent random planes."""
    rng = np.random.default_rng(1234)
    w, h = 16, 12
    r, g, b = (rng.integers(0, 256, w * h, dtype=np.uint8) for _ in range(3))
    return PlanarImage.from_planes(r, g, b, w, h)


@pytest.fixture
def write_raw(tmp_path):
    """Write a PlanarImage to a .rgb file and return its path."""
    def _write(image, name="image.rgb"):
        path = tmp_path / name
        save_planar_rgb(image, path)
        return path
    return _write
