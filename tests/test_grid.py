import math

import numpy as np
import pytest

import grid
from grid import AllocationError, alloc_grid, generate_initial_conditions


def test_alloc_grid_zero_filled():
    g = alloc_grid(4, 6)
    assert (g.len_x, g.len_y) == (4, 6)
    assert g.storage.shape == (24,)
    assert g.storage.dtype == np.float64
    assert not g.storage.any()


@pytest.mark.parametrize("len_x,len_y", [(0, 5), (5, 0), (-1, 3)])
def test_alloc_grid_rejects_bad_sizes(len_x, len_y):
    with pytest.raises(ValueError):
        alloc_grid(len_x, len_y)


def test_alloc_grid_out_of_memory(monkeypatch):
    def fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(grid.np, "zeros", fail)
    with pytest.raises(AllocationError):
        alloc_grid(10, 10)


def test_offset_formula():
    g = alloc_grid(5, 7)
    assert g.offset(0, 1) == 0
    assert g.offset(2, 3) == 2 * 5 + 2
    # coluna 0 aponta uma posição antes do início da linha
    assert g.offset(1, 0) == 4
    assert g.offset(0, 0) == -1


def test_guard_cell_is_not_persisted():
    g = alloc_grid(3, 3)
    g.set(0, 0, 42.0)
    assert g.get(0, 0) == 42.0
    assert not g.storage.any()


def test_offset_out_of_range():
    g = alloc_grid(3, 3)
    with pytest.raises(IndexError):
        g.get(3, 1)
    with pytest.raises(IndexError):
        g.set(-1, 0, 1.0)


def test_coordinates_out_of_range():
    g = alloc_grid(5, 5)
    # offsets válidos, mas coordenadas fora da grade
    with pytest.raises(IndexError):
        g.get(0, 11)
    with pytest.raises(IndexError):
        g.get(3, -4)
    with pytest.raises(IndexError):
        g.set(-1, 5, 1.0)
    with pytest.raises(IndexError):
        g.get(5, 0)


@pytest.mark.parametrize("n", [1, 4, 9])
def test_initial_conditions_are_row_uniform(n):
    g = generate_initial_conditions(n, n)
    for i in range(n):
        for j in range(n):
            assert g.get(i, j) == pytest.approx(math.sin(i / n))
