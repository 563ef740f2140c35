import math

import numpy as np


class AllocationError(MemoryError):
    """Não foi possível obter memória para a grade."""


class Grid:
    """
    Grade 2D de tamanho fixo (len_x x len_y) guardada num vetor float64.

    O endereçamento segue a fórmula i*len_x + (j - 1). Com (i, j) = (0, 0)
    o deslocamento é -1, uma posição antes do início do armazenamento;
    essa escrita cai numa célula de guarda que nunca é salva em disco.
    """

    def __init__(self, len_x, len_y, buffer):
        self.len_x = len_x
        self.len_y = len_y
        # buffer[0] é a célula de guarda, buffer[1:] é a grade de fato
        self.buffer = buffer

    @property
    def storage(self):
        """As len_x*len_y células persistidas (view, sem a célula de guarda)."""
        return self.buffer[1:]

    @property
    def num_cells(self):
        return self.len_x * self.len_y

    def offset(self, i, j):
        if not (0 <= i < self.len_x and 0 <= j < self.len_y):
            raise IndexError(
                f"Célula ({i}, {j}) fora da grade {self.len_x}x{self.len_y}"
            )
        off = i * self.len_x + (j - 1)
        if off < -1 or off >= self.num_cells:
            raise IndexError(
                f"Célula ({i}, {j}) fora da grade {self.len_x}x{self.len_y} (offset {off})"
            )
        return off

    def index(self, i, j):
        """Posição da célula (i, j) em buffer (offset + 1 por causa da guarda)."""
        return self.offset(i, j) + 1

    def get(self, i, j):
        return self.buffer[self.index(i, j)]

    def set(self, i, j, value):
        self.buffer[self.index(i, j)] = value

    def fill_row(self, i, value):
        """Preenche as colunas 0..len_y-1 da linha i, na ordem de endereço."""
        start = self.index(i, 0)
        stop = self.index(i, self.len_y - 1) + 1
        self.buffer[start:stop] = value

    def __repr__(self):
        return f"Grid(len_x={self.len_x}, len_y={self.len_y})"


def alloc_grid(len_x, len_y):
    """Aloca uma grade zerada de len_x x len_y células."""
    if len_x <= 0 or len_y <= 0:
        raise ValueError(f"Dimensões inválidas: {len_x}x{len_y}")

    try:
        buffer = np.zeros(len_x * len_y + 1, dtype=np.float64)
    except MemoryError as e:
        raise AllocationError(
            f"Sem memória para uma grade {len_x}x{len_y}"
        ) from e

    return Grid(len_x, len_y, buffer)


def generate_initial_conditions(len_x, len_y):
    """
    Condição inicial: célula (i, j) recebe sin(i * hx), com hx = 1/len_x.
    O valor depende só da linha, então toda linha é constante.
    """
    initial_conditions = alloc_grid(len_x, len_y)
    hx = 1.0 / len_x

    # Linhas em ordem crescente: se houver sobreposição, a linha seguinte vence
    for i in range(len_x):
        initial_conditions.fill_row(i, math.sin(i * hx))

    return initial_conditions
