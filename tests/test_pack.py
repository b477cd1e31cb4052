import numpy as np
import pytest

from rawquant.utils.pack import pack_interleaved


def test_interleaves_rgb():
    buf = pack_interleaved(np.array([1, 2]), np.array([3, 4]), np.array([5, 6]), 2, 1)
    assert buf.data.dtype == np.uint8
    assert buf.data.tolist() == [1, 3, 5, 2, 4, 6]
    assert len(buf) == 6
    assert buf.tobytes() == bytes([1, 3, 5, 2, 4, 6])


def test_to_array_shape():
    n = 6
    plane = np.arange(n)
    buf = pack_interleaved(plane, plane, plane, 3, 2)
    arr = buf.to_array()
    assert arr.shape == (2, 3, 3)
    assert arr[1, 2].tolist() == [5, 5, 5]


def test_buffer_does_not_alias_inputs():
    r = np.array([10, 20], dtype=np.uint8)
    buf = pack_interleaved(r, r, r, 2, 1)
    buf.data[0] = 99
    assert r.tolist() == [10, 20]
    assert pack_interleaved(r, r, r, 2, 1).data is not buf.data


def test_rejects_wrong_plane_length():
    with pytest.raises(ValueError):
        pack_interleaved(np.zeros(4), np.zeros(3), np.zeros(4), 2, 2)
