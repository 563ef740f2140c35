BOUNDARY_VALUE = 0.0


def apply_boundary_conditions(g, value=BOUNDARY_VALUE):
    """
    Condição de Dirichlet: zera as quatro bordas da grade (in place).
    Deve rodar logo após a alocação, antes de solve_interior.
    """
    # Borda Norte (coluna 0)
    for i in range(g.len_x):
        g.set(i, 0, value)

    # Borda Sul (coluna len_y - 1)
    for i in range(g.len_x):
        g.set(i, g.len_y - 1, value)

    # Borda Leste (linha 0)
    for j in range(g.len_y):
        g.set(0, j, value)

    # Borda Oeste (linha len_x - 1)
    for j in range(g.len_y):
        g.set(g.len_x - 1, j, value)

    return g
