import logging

import numpy as np
import pytest

from rawquant.errors import ParameterError, TruncatedInputError
from rawquant.utils.loader import PlanarImage, load_planar_rgb, save_image


def test_reads_planes_in_rgb_order(tmp_path):
    path = tmp_path / "ramp.rgb"
    path.write_bytes(bytes(range(48)))

    img = load_planar_rgb(path, 4, 4)

    assert img.width == 4 and img.height == 4
    assert img.r.tolist() == list(range(0, 16))
    assert img.g.tolist() == list(range(16, 32))
    assert img.b.tolist() == list(range(32, 48))


def test_planes_are_read_only(tmp_path):
    path = tmp_path / "img.rgb"
    path.write_bytes(bytes(12))
    img = load_planar_rgb(path, 2, 2)
    with pytest.raises(ValueError):
        img.r[0] = 1


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        load_planar_rgb(tmp_path / "nope.rgb", 4, 4)


def test_short_file_is_zero_filled_with_warning(tmp_path, caplog):
    path = tmp_path / "short.rgb"
    path.write_bytes(bytes([7]) * 20)

    with caplog.at_level(logging.WARNING, logger="rawquant.utils.loader"):
        img = load_planar_rgb(path, 4, 4)

    assert img.r.tolist() == [7] * 16
    assert img.g.tolist() == [7] * 4 + [0] * 12
    assert img.b.tolist() == [0] * 16
    assert "truncated" in caplog.text


def test_short_file_strict_raises(tmp_path):
    path = tmp_path / "short.rgb"
    path.write_bytes(bytes(20))
    with pytest.raises(TruncatedInputError) as info:
        load_planar_rgb(path, 4, 4, strict=True)
    assert info.value.expected == 48
    assert info.value.actual == 20


def test_trailing_bytes_are_ignored(tmp_path):
    path = tmp_path / "long.rgb"
    path.write_bytes(bytes([1] * 12 + [9] * 5))
    img = load_planar_rgb(path, 2, 2)
    assert img.b.tolist() == [1, 1, 1, 1]


def test_rejects_empty_dimensions(tmp_path):
    with pytest.raises(ParameterError):
        load_planar_rgb(tmp_path / "x.rgb", 0, 4)


def test_save_and_load_planar_file(random_image, write_raw):
    path = write_raw(random_image)
    loaded = load_planar_rgb(path, random_image.width, random_image.height)
    for got, want in zip(loaded.planes, random_image.planes):
        np.testing.assert_array_equal(got, want)


def test_from_planes_checks_length():
    with pytest.raises(ValueError):
        PlanarImage.from_planes([1, 2, 3], [1, 2, 3], [1, 2, 3], 2, 2)


def test_save_image_validates_input(tmp_path):
    with pytest.raises(TypeError):
        save_image(np.zeros((2, 2, 3), dtype=np.float32), tmp_path / "x.png")
    with pytest.raises(ValueError):
        save_image(np.zeros((2, 2), dtype=np.uint8), tmp_path / "x.png")
