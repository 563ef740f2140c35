#!/usr/bin/env python3
import numpy as np
import pandas as pd

from grid_options import GridOptions
from heat_solver import run_simulation
from stencil import solve_interior, solve_interior_loops

SOLVERS = {
    'Vetorizado': solve_interior,
    'Lacos': solve_interior_loops,
}


def print_section(title):
    print("\n" + "="*70)
    print(f"  {title}")
    print("="*70)


def run_benchmark(sizes, len_t):
    """
    Roda a simulação para cada tamanho N x N com os dois stencils e devolve
    um DataFrame com o tempo de cada fase e se as grades finais conferem.
    """
    results = []

    for N in sizes:
        go = GridOptions(len_x=N, len_y=N, len_t=len_t)
        finals = {}

        for versao, solver in SOLVERS.items():
            print(f"\n▸ {versao} {N}x{N}, {len_t} passos...")
            grids, timings = run_simulation(go, solver=solver)
            finals[versao] = grids[-1].storage

            results.append({
                'Versao': versao,
                'Tamanho': N,
                'Passos': len_t,
                'Tempo_Inicial_s': timings['Initial Conditions'],
                'Tempo_Solver_s': timings['Solve Problem'],
            })

        consistente = np.allclose(finals['Vetorizado'], finals['Lacos'], equal_nan=True)
        if not consistente:
            print(f"ERRO: Resultados diferem em {N}x{N}!")
        for row in results[-len(SOLVERS):]:
            row['Consistente'] = consistente

    return pd.DataFrame(results)


def generate_analysis(df):
    print_section("ANÁLISE DE RESULTADOS")

    for tamanho in sorted(df['Tamanho'].unique()):
        vet = df[(df['Versao'] == 'Vetorizado') & (df['Tamanho'] == tamanho)]
        loops = df[(df['Versao'] == 'Lacos') & (df['Tamanho'] == tamanho)]

        if vet.empty or loops.empty:
            continue

        tempo_vet = vet['Tempo_Solver_s'].values[0]
        tempo_loops = loops['Tempo_Solver_s'].values[0]
        speedup = tempo_loops / tempo_vet if tempo_vet > 0 else 0

        print(f"\n{tamanho}x{tamanho}:")
        print(f"  Laços:       {tempo_loops:>10.4f}s")
        print(f"  Vetorizado:  {tempo_vet:>10.4f}s")
        print(f"  Speedup:     {speedup:>10.2f}x")


def main():
    print_section("BENCHMARK - STENCIL EXPLÍCITO")

    df = run_benchmark([50, 100, 200], 10)

    output_file = 'resultados_benchmark.csv'
    df.to_csv(output_file, index=False)
    print(f"\nDados salvos em: {output_file}")

    generate_analysis(df)


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        print("\nBenchmark interrompido pelo usuário.")
