"""
Benchmark script for integer GEMM (Matrix Multiply) kernels.
Tests baseline, NumPy, and Numba implementations of multiply().
"""

import sys
import os
import time
from pathlib import Path

# Set thread limits BEFORE importing NumPy to prevent BLAS thread contention
# This ensures fair comparison and stable results
os.environ["OMP_NUM_THREADS"] = "1"
os.environ["MKL_NUM_THREADS"] = "1"
os.environ["OPENBLAS_NUM_THREADS"] = "1"
os.environ["NUMEXPR_NUM_THREADS"] = "1"

import numpy as np
import pandas as pd

# Add project root to path (two levels up from this file)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from matmul_lab.kernels.matmul_baseline import multiply
from matmul_lab.kernels.matmul_numpy import multiply_numpy
from matmul_lab.kernels.matmul_numba import multiply_numba
from matmul_lab.kernels.matrix import zeros

# Benchmark configurations
# Format: (M, N, P) - A is M x N, B is N x P
DEFAULT_CONFIGS = [
    (16, 16, 16),       # Tiny
    (32, 64, 32),       # Small
    (64, 128, 64),      # Medium-small
    (128, 256, 128),    # Medium
    (256, 512, 256),    # Large
]

# Pure Python is only timed below this many multiply-adds
BASELINE_LIMIT = 1_000_000

KERNELS = {
    'baseline': multiply,
    'numpy': multiply_numpy,
    'numba': multiply_numba,
}


def runs_for_size(problem_size, num_runs):
    """More runs for small problems, where timer noise dominates."""
    if problem_size < 100_000:
        return max(num_runs, 100)
    elif problem_size < 1_000_000:
        return max(num_runs, 30)
    elif problem_size < 100_000_000:
        return num_runs
    else:
        return max(5, num_runs // 2)


def make_operands(M, N, P, seed=42, low=-100, high=100):
    """Random integer operands as nested lists, like the kernels' callers pass."""
    rng = np.random.RandomState(seed)
    A = rng.randint(low, high, size=(M, N)).tolist()
    B = rng.randint(low, high, size=(N, P)).tolist()
    return A, B


def time_kernel(kernel, A, B, M, N, P, num_warmup, num_runs):
    """
    Time kernel(A, B, C, M, N, P) and return (C, per-call seconds).

    A fresh result container is used for the warmup; timed runs overwrite the
    same container, which multiply() allows since C is assigned, not
    accumulated.
    """
    C = zeros(M, P)
    for _ in range(num_warmup):
        kernel(A, B, C, M, N, P)

    times = []
    for _ in range(num_runs):
        t_start = time.perf_counter()
        kernel(A, B, C, M, N, P)
        t_end = time.perf_counter()
        times.append(t_end - t_start)

    return C, np.array(times)


def summarize(kernel_name, M, N, P, times):
    """One result row: latency percentiles and integer op throughput."""
    ops = 2 * M * N * P
    bytes_moved = (M * N + N * P + M * P) * 8  # int64 = 8 bytes
    median = np.median(times)

    return {
        'kernel': kernel_name,
        'M': M, 'N': N, 'P': P,
        'ops': ops,
        'bytes_moved': bytes_moved,
        'runs': len(times),
        # Use median for primary metric (more robust to outliers)
        'latency_ms': median * 1000,
        'latency_p50_ms': np.percentile(times, 50) * 1000,
        'latency_p95_ms': np.percentile(times, 95) * 1000,
        'latency_p99_ms': np.percentile(times, 99) * 1000,
        'throughput_gops': (ops / 1e9) / median if median > 0 else float('nan'),
    }


def benchmark_matmul(configs, num_warmup=3, num_runs=10, kernels=None,
                     baseline_limit=BASELINE_LIMIT):
    """
    Benchmark matrix multiplication kernels.

    Args:
        configs: List of tuples (M, N, P) representing matrix dimensions
        num_warmup: Number of warmup runs (also triggers Numba compilation)
        num_runs: Minimum number of timed runs
        kernels: Names from KERNELS to run, default all
        baseline_limit: Skip the pure Python kernel above this M*N*P

    Returns:
        DataFrame with one row per (kernel, size) that completed
    """
    if kernels is None:
        kernels = list(KERNELS)

    results = []

    for M, N, P in configs:
        print(f"\nBenchmarking GEMM: M={M}, N={N}, P={P}")

        problem_size = M * N * P
        actual_runs = runs_for_size(problem_size, num_runs)

        A, B = make_operands(M, N, P)
        # Reference for correctness check
        C_ref = np.array(A, dtype=np.int64).reshape(M, N) @ np.array(B, dtype=np.int64).reshape(N, P)

        for name in kernels:
            print(f"  Testing {name}...")
            if name == 'baseline' and problem_size > baseline_limit:
                print("    Skipping baseline (problem too large)")
                continue

            try:
                C, times = time_kernel(KERNELS[name], A, B, M, N, P,
                                       num_warmup, actual_runs)

                C_arr = np.array(C, dtype=np.int64).reshape(M, P)
                if not np.array_equal(C_arr, C_ref):
                    max_diff = np.max(np.abs(C_arr - C_ref))
                    raise AssertionError(f"{name} correctness check failed: max_diff={max_diff}")

                row = summarize(name, M, N, P, times)
                print(f"    latency={row['latency_ms']:.3f} ms, "
                      f"throughput={row['throughput_gops']:.3f} GOPS")
                results.append(row)
            except Exception as e:
                print(f"    Error: {e}")

    return pd.DataFrame(results)


def parse_size(text):
    """Parse 'M,N,P' into a tuple of three ints (argparse type)."""
    parts = text.split(',')
    if len(parts) != 3:
        raise ValueError(f"Expected M,N,P, got {text!r}")
    return tuple(int(part) for part in parts)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description='Benchmark integer GEMM kernels')
    parser.add_argument('--sizes', type=parse_size, nargs='+', default=DEFAULT_CONFIGS,
                        metavar='M,N,P', help='Problem sizes to benchmark')
    parser.add_argument('--kernels', nargs='+', choices=list(KERNELS), default=list(KERNELS),
                        help='Kernels to benchmark')
    parser.add_argument('--warmup', type=int, default=3, help='Warmup runs per kernel')
    parser.add_argument('--runs', type=int, default=10, help='Minimum timed runs per kernel')
    parser.add_argument('--output', type=Path,
                        default=project_root / "results" / "matmul_results.csv",
                        help='CSV file to write')
    args = parser.parse_args()

    print("=" * 70)
    print("Integer GEMM Benchmark Suite - SINGLE-THREADED MODE")
    print("=" * 70)
    print("  - NumPy BLAS: 1 thread (limited via env vars set before import)")
    print("  - Numba: 1 thread (set via set_num_threads)")
    print("=" * 70)

    # Set Numba threads to 1 before any JIT compilation
    from numba import set_num_threads
    set_num_threads(1)

    df = benchmark_matmul(args.sizes, num_warmup=args.warmup, num_runs=args.runs,
                          kernels=args.kernels)
    df['mode'] = 'single_threaded'

    # Save results
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    print(f"\nResults saved to: {args.output}")

    # Print summary
    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print(df.to_string(index=False))
