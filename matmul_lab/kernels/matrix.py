"""
Shape validation and small helpers shared by the matmul kernels.

All kernels take the caller's (m, n, p) at face value only after
check_operands() has confirmed that A is m x n, B is n x p and C is m x p.
"""

import numpy as np


class MatrixShapeError(ValueError):
    """Raised when a dimension or container cannot describe a valid product."""


class ContainerTooSmallError(MatrixShapeError):
    """A container has fewer rows or columns than the declared dimensions."""


class DimensionMismatchError(MatrixShapeError):
    """A container's true size disagrees with the declared dimensions."""


def _check_dim(name, value):
    # bool is an int subclass but never a meaningful extent
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise MatrixShapeError(f"Dimension {name} must be an integer, got {value!r}")
    if value < 0:
        raise MatrixShapeError(f"Dimension {name} must be non-negative, got {value}")


def _check_extent(label, axis, actual, expected, dim):
    if actual < expected:
        raise ContainerTooSmallError(
            f"{label} has {actual} {axis}, expected {expected} ({dim})"
        )
    if actual > expected:
        raise DimensionMismatchError(
            f"{label} has {actual} {axis}, but {dim}={expected}"
        )


def check_container(name, X, rows, cols, row_dim, col_dim):
    """
    Check that X is exactly rows x cols.

    Args:
        name: container label used in error messages ('A', 'B' or 'C')
        X: sequence of rows
        rows, cols: declared extents
        row_dim, col_dim: dimension letters for the two axes, e.g. 'm', 'n'

    Raises:
        ContainerTooSmallError: X is shorter than declared on some axis
        DimensionMismatchError: X is longer than declared on some axis
    """
    _check_extent(name, "rows", len(X), rows, row_dim)
    for i in range(rows):
        _check_extent(f"{name}[{i}]", "columns", len(X[i]), cols, col_dim)


def check_operands(A, B, C, m, n, p):
    """Validate (m, n, p) against the true extents of A, B and C."""
    _check_dim("m", m)
    _check_dim("n", n)
    _check_dim("p", p)

    check_container("A", A, m, n, "m", "n")
    check_container("B", B, n, p, "n", "p")
    check_container("C", C, m, p, "m", "p")


def infer_dims(A, B):
    """
    Read (m, n, p) off the containers, for the allocating kernels.

    Raises:
        DimensionMismatchError: A's column count and B's row count disagree
    """
    m = len(A)
    n = len(A[0]) if m else len(B)
    if n != len(B):
        raise DimensionMismatchError(
            f"Dimension mismatch: A has {n} columns but B has {len(B)} rows"
        )
    p = len(B[0]) if len(B) else 0
    return m, n, p


def zeros(rows, cols):
    """Fresh rows x cols list-of-lists filled with 0."""
    return [[0] * cols for _ in range(rows)]


def identity(size):
    eye = zeros(size, size)
    for i in range(size):
        eye[i][i] = 1
    return eye


def transpose(X):
    if not len(X):
        return []
    return [[X[i][j] for i in range(len(X))] for j in range(len(X[0]))]


def scale(a, X):
    return [[a * x for x in row] for row in X]


def as_int64(X, rows, cols, name="matrix"):
    """
    Copy the rows x cols block of X into a contiguous int64 array.

    Raises:
        TypeError: X holds non-integer values
    """
    if isinstance(X, np.ndarray) and X.ndim == 2:
        if not np.issubdtype(X.dtype, np.integer):
            raise TypeError(f"{name} must hold integers, got dtype {X.dtype}")
        return np.ascontiguousarray(X[:rows, :cols], dtype=np.int64)

    out = np.zeros((rows, cols), dtype=np.int64)
    for i in range(rows):
        for j in range(cols):
            value = X[i][j]
            if not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name}[{i}][{j}] must be an integer, got {value!r}")
            out[i, j] = value
    return out


def write_back(C, product):
    """Assign each element of a 2-D array into the caller's container C."""
    rows, cols = product.shape
    for i in range(rows):
        row = C[i]
        for j in range(cols):
            row[j] = int(product[i, j])
