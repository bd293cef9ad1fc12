import numpy as np
import pytest

from densegrid.src.core.errors import EmptyGridError, GridShapeError
from densegrid.src.core.grid import Grid


def test_from_array_round_trip():
    arr = np.arange(6).reshape(2, 3)
    g = Grid.from_array(arr)
    assert (g.width, g.height) == (3, 2)
    assert g[2, 1] == 5
    assert isinstance(g[0, 0], int)
    np.testing.assert_array_equal(g.to_array(), arr)


def test_to_array_dtype():
    g = Grid.from_str_bytes("ab\ncd")
    arr = g.to_array(dtype=np.uint8)
    assert arr.shape == (2, 2)
    assert arr.dtype == np.uint8
    assert arr[1, 0] == ord("c")


def test_from_array_rejects_bad_shapes():
    with pytest.raises(GridShapeError):
        Grid.from_array(np.zeros(4))
    with pytest.raises(EmptyGridError):
        Grid.from_array(np.zeros((0, 3)))
