"""
Numba JIT integer GEMM.
The same triple loop as the baseline, compiled to machine code on int64
arrays. No tiling and no parallel loops: it exists to cross-check the
baseline and to time compiled code against it.
"""

import numpy as np
from numba import njit

from matmul_lab.kernels.matrix import check_operands, infer_dims, as_int64, write_back


@njit(cache=True)
def _multiply_kernel(A, B, C, m, n, p):
    # Unchecked indexing: callers must have run check_operands()
    for i in range(m):
        for j in range(p):
            acc = 0
            for k in range(n):
                acc += A[i, k] * B[k, j]
            C[i, j] = acc


def multiply_numba(A, B, C, m, n, p):
    """
    Same contract as matmul_baseline.multiply(), computed by a Numba kernel.

    Operands are copied into contiguous int64 arrays before the call, so
    products wrap around on int64 overflow.
    Non-integer operands raise TypeError before C is touched.
    """
    check_operands(A, B, C, m, n, p)

    out = np.zeros((m, p), dtype=np.int64)
    _multiply_kernel(as_int64(A, m, n, "A"), as_int64(B, n, p, "B"), out, m, n, p)
    write_back(C, out)


def matmul_numba(A, B):
    """Allocating variant: return C = A @ B as an int64 array."""
    m, n, p = infer_dims(A, B)
    C = np.zeros((m, p), dtype=np.int64)
    multiply_numba(A, B, C, m, n, p)
    return C


def verify_correctness(A, B, C_result):
    """Verify that C_result matches A @ B (reference implementation)."""
    m, n, p = infer_dims(A, B)
    C_ref = as_int64(A, m, n) @ as_int64(B, n, p)
    return np.array_equal(C_result, C_ref)


if __name__ == "__main__":
    np.random.seed(42)
    M, N, P = 128, 256, 64
    A = np.random.randint(-100, 100, size=(M, N)).astype(np.int64)
    B = np.random.randint(-100, 100, size=(N, P)).astype(np.int64)

    print("Running Numba matmul...")
    # Warmup
    _ = matmul_numba(A[:4, :4], B[:4, :4])

    C = matmul_numba(A, B)

    if verify_correctness(A, B, C):
        print("Correctness check passed!")
    else:
        print("Correctness check failed!")
        print(f"Max diff: {np.max(np.abs(C - A @ B))}")
