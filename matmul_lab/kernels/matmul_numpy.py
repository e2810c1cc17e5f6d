"""
NumPy vectorized integer GEMM.
Uses the @ operator on int64 arrays; overflow wraps around like native int64.
"""

import numpy as np

from matmul_lab.kernels.matmul_baseline import matmul_baseline
from matmul_lab.kernels.matrix import check_operands, infer_dims, as_int64, write_back


def matmul_numpy(A, B):
    """
    Compute C = A @ B using NumPy vectorization.

    Args:
        A: m x n matrix (nested sequence or 2-D array)
        B: n x p matrix (nested sequence or 2-D array)

    Returns:
        C: numpy array of shape (m, p), dtype int64
    """
    m, n, p = infer_dims(A, B)
    C = np.zeros((m, p), dtype=np.int64)
    multiply_numpy(A, B, C, m, n, p)
    return C


def multiply_numpy(A, B, C, m, n, p):
    """Same contract as matmul_baseline.multiply(), computed with NumPy."""
    check_operands(A, B, C, m, n, p)
    write_back(C, as_int64(A, m, n, "A") @ as_int64(B, n, p, "B"))


def verify_correctness(A, B, C_result):
    """Verify that C_result matches the baseline kernel."""
    m, n, p = infer_dims(A, B)
    C_ref = np.array(matmul_baseline(A, B), dtype=np.int64).reshape(m, p)
    return np.array_equal(C_result, C_ref)


if __name__ == "__main__":
    np.random.seed(42)
    M, N, P = 128, 256, 64
    A = np.random.randint(-100, 100, size=(M, N)).astype(np.int64)
    B = np.random.randint(-100, 100, size=(N, P)).astype(np.int64)

    print("Running NumPy matmul...")
    C = matmul_numpy(A, B)

    if verify_correctness(A, B, C):
        print("✓ Correctness check passed!")
    else:
        print("✗ Correctness check failed!")
