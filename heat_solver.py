#!/usr/bin/env python3
import sys
import time

from boundary import apply_boundary_conditions
from grid import AllocationError, alloc_grid, generate_initial_conditions
from grid_io import store_grid
from grid_options import InvalidOptionError, parse_grid_options, print_usage
from stencil import is_stable, solve_interior, stability_number, stepsize_from_grid_options
from timing import start_timer, stop_timer


def run_simulation(go, h=None, solver=solve_interior, clock=time.time):
    """
    Executa todos os passos de tempo.

    grids[0] é a condição inicial; para tau >= 1 aloca uma grade nova, aplica
    as bordas e resolve o interior a partir de grids[tau - 1]. Todas as grades
    ficam em memória. Devolve (grids, timings) com os segundos de cada fase.
    """
    timings = {}

    tm = start_timer("Initial Conditions", clock)
    initial_conditions = generate_initial_conditions(go.len_x, go.len_y)
    timings[tm.message] = stop_timer(tm)

    if h is None:
        h = stepsize_from_grid_options(go)
    if not is_stable(h):
        print(f"[SOLVER] Aviso: passos instáveis (h.t/h.x² + h.t/h.y² = {stability_number(h):g} > 0.5)")

    grids_by_timestep = [initial_conditions]

    tm = start_timer("Solve Problem", clock)
    for tau in range(1, go.len_t):
        current = alloc_grid(go.len_x, go.len_y)
        apply_boundary_conditions(current)
        solver(current, grids_by_timestep[tau - 1], h)
        grids_by_timestep.append(current)
    timings[tm.message] = stop_timer(tm)

    return grids_by_timestep, timings


def main(argv=None):
    if argv is None:
        argv = sys.argv

    try:
        go = parse_grid_options(argv)
    except InvalidOptionError as e:
        print_usage(str(e))
        sys.exit(1)

    print(f"[SOLVER] Grade {go.len_x}x{go.len_y}, {go.len_t} passos de tempo")

    try:
        grids, _ = run_simulation(go)
    except AllocationError as e:
        print(f"[ERRO FATAL] {e}")
        sys.exit(1)

    tm = start_timer("Store Grid")
    store_grid(grids[-1], go.output)
    stop_timer(tm)

    return 0


if __name__ == '__main__':
    sys.exit(main())
