"""
Graph-generation presets for APSP benchmarking.

Johnson's algorithm runs one Dijkstra per vertex, so sizes are far smaller
than single-source benchmarks use. Each preset is a dict of keyword arguments
for ``generate_graph(...)``.
"""

SEEDS = [0, 1, 2]

# A: Baseline scaling (Erdős–Rényi, sparse)
TEST_A_BASELINE_SCALING = [
    dict(n=n, m=4 * n, graph_type="erdos_renyi", seed=seed)
    for n in (50, 100, 200)
    for seed in SEEDS
]

# B: Heavy negative shift (most edges negative)
TEST_B_NEGATIVE_HEAVY = [
    dict(n=100, m=400, graph_type="erdos_renyi", w_max=10, negative_shift=500, seed=seed)
    for seed in SEEDS
]

# C: Propagation-friendly structure (DAG)
TEST_C_DAG = [
    dict(n=150, m=1_000, graph_type="dag", seed=seed)
    for seed in SEEDS
]

# D: Equal-length ties (grid, unit weights)
TEST_D_GRID = [
    dict(n=144, graph_type="grid", w_min=1, w_max=1, negative_shift=3, seed=seed)
    for seed in SEEDS
]

ALL_TEST_SETS = {
    "A_baseline_scaling": TEST_A_BASELINE_SCALING,
    "B_negative_heavy": TEST_B_NEGATIVE_HEAVY,
    "C_dag": TEST_C_DAG,
    "D_grid": TEST_D_GRID,
}
