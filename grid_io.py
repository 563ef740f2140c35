import numpy as np

from grid import alloc_grid

CELL_DTYPE = np.float64


def store_grid(g, path):
    """
    Grava as len_x*len_y células como float64 cru, sem cabeçalho.
    Devolve quantos elementos foram escritos; falha só gera aviso.
    """
    num_cells = g.num_cells
    cell_size = np.dtype(CELL_DTYPE).itemsize

    try:
        with open(path, "wb") as grid_file:
            bytes_written = grid_file.write(g.storage.astype(CELL_DTYPE, copy=False).tobytes())
    except OSError as e:
        print(f"[ERRO] {e}")
        bytes_written = 0

    elements_written = bytes_written // cell_size
    if elements_written < num_cells:
        print("An error occurred while saving the grid.")

    return elements_written


def load_grid(path, len_x, len_y):
    """Lê de volta um arquivo gravado por store_grid."""
    data = np.fromfile(path, dtype=CELL_DTYPE)
    if data.size != len_x * len_y:
        raise ValueError(
            f"{path} tem {data.size} células, esperado {len_x * len_y} ({len_x}x{len_y})"
        )

    g = alloc_grid(len_x, len_y)
    g.storage[:] = data
    return g
