from dataclasses import dataclass

import numpy as np

STABILITY_LIMIT = 0.5


@dataclass(frozen=True)
class Stepsize:
    """Passos de discretização no espaço (x, y) e no tempo (t)."""

    x: float
    y: float
    t: float


def stepsize_from_grid_options(go):
    return Stepsize(
        x=1.0 / go.len_x,
        y=1.0 / go.len_y,
        t=1.0 / go.len_t,
    )


def stability_number(h):
    """h.t/h.x² + h.t/h.y², o esquema explícito é estável se <= 0.5."""
    return h.t / (h.x * h.x) + h.t / (h.y * h.y)


def is_stable(h):
    return stability_number(h) <= STABILITY_LIMIT


def _check_pair(current, previous):
    if current is previous or np.shares_memory(current.buffer, previous.buffer):
        raise ValueError("current e previous não podem compartilhar memória")
    if (current.len_x, current.len_y) != (previous.len_x, previous.len_y):
        raise ValueError(
            f"Grades de tamanhos diferentes: {current.len_x}x{current.len_y} "
            f"e {previous.len_x}x{previous.len_y}"
        )


def interior_range(g):
    """
    Índices (i, j) atualizados pelo stencil: 1 <= i < len_x-2 e 1 <= j < len_y-2.
    A faixa exclui uma linha e uma coluna a mais além do anel de borda.
    """
    return range(1, g.len_x - 2), range(1, g.len_y - 2)


def solve_interior(current, previous, h):
    """
    Passo explícito (Euler no tempo, diferença central no espaço) para a
    equação do calor 2D. Lê apenas de previous e escreve apenas em current.

    Versão vetorizada: calcula todas as células internas de uma vez com
    índices no buffer, sem laços em Python.
    """
    _check_pair(current, previous)

    rows, cols = interior_range(current)
    if len(rows) == 0 or len(cols) == 0:
        return current

    # Garante que os vizinhos mais distantes existem antes do acesso vetorizado
    previous.index(rows[-1] + 1, cols[-1])
    previous.index(rows[-1], cols[-1] + 1)

    i = np.arange(rows.start, rows.stop)
    j = np.arange(cols.start, cols.stop)
    # Mesma fórmula de Grid.offset, deslocada em 1 pela célula de guarda
    idx = (i[:, None] * current.len_x + j[None, :]).ravel()

    p = previous.buffer
    step_x = current.len_x
    u = p[idx]

    x_contribution = h.t * (p[idx + step_x] - 2 * u + p[idx - step_x]) / (h.x * h.x)
    y_contribution = h.t * (p[idx + 1] - 2 * u + p[idx - 1]) / (h.y * h.y)

    current.buffer[idx] = u + x_contribution + y_contribution
    return current


def solve_interior_loops(current, previous, h):
    """Mesmo cálculo de solve_interior, célula por célula. Usado como referência."""
    _check_pair(current, previous)

    rows, cols = interior_range(current)
    for i in rows:
        for j in cols:
            uijn = previous.get(i, j)

            uiP1jn = previous.get(i + 1, j)
            uiM1jn = previous.get(i - 1, j)
            x_contribution = h.t * (uiP1jn - 2 * uijn + uiM1jn) / (h.x * h.x)

            uijP1n = previous.get(i, j + 1)
            uijM1n = previous.get(i, j - 1)
            y_contribution = h.t * (uijP1n - 2 * uijn + uijM1n) / (h.y * h.y)

            current.set(i, j, uijn + x_contribution + y_contribution)

    return current
