"""
Profiling script for the baseline kernel.
Uses cProfile to show where the pure Python multiply() spends its time.
"""

import sys
import cProfile
import pstats
from pathlib import Path
import numpy as np

# Add project root to path (two levels up from this file)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from matmul_lab.kernels.matmul_baseline import multiply
from matmul_lab.kernels.matrix import zeros


def profile_matmul(M=64, N=128, P=64, top=10):
    """Profile baseline matrix multiplication."""
    print("Profiling baseline multiply...")
    np.random.seed(42)
    A = np.random.randint(-100, 100, size=(M, N)).tolist()
    B = np.random.randint(-100, 100, size=(N, P)).tolist()
    C = zeros(M, P)

    profiler = cProfile.Profile()
    profiler.enable()
    multiply(A, B, C, M, N, P)
    profiler.disable()

    stats = pstats.Stats(profiler)
    stats.sort_stats('cumulative')
    print(f"\nTop {top} functions by cumulative time:")
    stats.print_stats(top)

    return stats


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description='Profile the baseline matmul kernel')
    parser.add_argument('--size', type=int, default=64,
                        help='Square problem size (M = N = P)')
    parser.add_argument('--top', type=int, default=10, help='Number of functions to list')
    args = parser.parse_args()

    print("=" * 60)
    print("Baseline Kernel Profiling")
    print("=" * 60)

    profile_matmul(args.size, args.size, args.size, top=args.top)

    print("\n" + "=" * 60)
    print("Profiling complete!")
    print("=" * 60)
