"""
Baseline integer GEMM using pure Python loops.
The reference kernel: every other backend is checked against it.
"""

from matmul_lab.kernels.matrix import check_operands, infer_dims, zeros, as_int64


def multiply(A, B, C, m, n, p):
    """
    Compute C = A @ B in place with a naive triple loop.

    C[i][j] is assigned (not accumulated) with sum(A[i][k] * B[k][j] for k < n)
    for every i < m, j < p. A and B are only read.

    Args:
        A: m x n matrix, sequence of rows of ints
        B: n x p matrix, sequence of rows of ints
        C: m x p result container, pre-allocated by the caller, overwritten
        m: rows of A
        n: shared inner dimension (columns of A, rows of B)
        p: columns of B

    Raises:
        ContainerTooSmallError: a container is smaller than (m, n, p) declares
        DimensionMismatchError: a container is larger than (m, n, p) declares
        MatrixShapeError: a dimension is negative or not an integer
        OverflowError: C is a fixed-width integer array and a result does not
            fit in it; elements of C before that one are already written
    """
    check_operands(A, B, C, m, n, p)

    for i in range(m):
        A_row = A[i]
        C_row = C[i]
        for j in range(p):
            accumulator = 0
            for k in range(n):
                accumulator += A_row[k] * B[k][j]
            C_row[j] = accumulator


def multiply_unchecked(A, B, C, m, n, p):
    """
    Legacy form of multiply() that trusts (m, n, p) without looking at the
    containers.

    Declared dimensions larger than a container raise IndexError, possibly
    after earlier rows of C were already written. Rows or columns of C beyond
    (m, p) are left untouched.
    """
    for i in range(m):
        for j in range(p):
            C[i][j] = 0
            for k in range(n):
                C[i][j] += A[i][k] * B[k][j]


def matmul_baseline(A, B):
    """
    Allocating variant: return a new list-of-lists C = A @ B.

    Dimensions are read off the containers; ragged or incompatible operands
    raise the same errors as multiply().
    """
    m, n, p = infer_dims(A, B)
    C = zeros(m, p)
    multiply(A, B, C, m, n, p)
    return C


def verify_correctness(A, B, C_result):
    """Verify that C_result matches A @ B (NumPy reference, exact for ints)."""
    m, n, p = infer_dims(A, B)
    C_ref = as_int64(A, m, n) @ as_int64(B, n, p)
    return (as_int64(C_result, m, p) == C_ref).all()


if __name__ == "__main__":
    A = [[1, 2, 3],
         [4, 5, 6]]
    B = [[7, 8],
         [9, 10],
         [11, 12]]
    C = zeros(2, 2)

    print("Running baseline multiply...")
    multiply(A, B, C, 2, 3, 2)
    print(f"C = {C}")

    if verify_correctness(A, B, C):
        print("✓ Correctness check passed!")
    else:
        print("✗ Correctness check failed!")
