"""
Metamorphic relations for multiply(), checked on random integer matrices.
"""

import numpy as np
from hypothesis import given, strategies as st

from matmul_lab.kernels.matmul_baseline import matmul_baseline
from matmul_lab.kernels.matrix import identity, transpose, scale, zeros
from matmul_lab.test_utils import mm_pairs, mm_chains, mm_sums


def add(X, Y):
    return [[x + y for x, y in zip(rx, ry)] for rx, ry in zip(X, Y)]


@given(mm_pairs())
def test_matches_definition(pair):
    A, B = pair
    C = matmul_baseline(A, B)
    expected = np.array(A, dtype=np.int64) @ np.array(B, dtype=np.int64)
    np.testing.assert_array_equal(np.array(C, dtype=np.int64), expected)


@given(mm_pairs(), st.integers(-50, 50))
def test_scalar_premultiplication(pair, a):
    A, B = pair
    assert matmul_baseline(scale(a, A), B) == scale(a, matmul_baseline(A, B))


@given(mm_pairs())
def test_transpose_law(pair):
    A, B = pair
    assert matmul_baseline(transpose(B), transpose(A)) == transpose(matmul_baseline(A, B))


@given(mm_pairs())
def test_right_identity(pair):
    A, _ = pair
    assert matmul_baseline(A, identity(len(A[0]))) == A


@given(mm_pairs())
def test_left_identity(pair):
    A, _ = pair
    assert matmul_baseline(identity(len(A)), A) == A


@given(mm_pairs())
def test_annihilation(pair):
    A, B = pair
    n, p = len(B), len(B[0])
    assert matmul_baseline(A, zeros(n, p)) == zeros(len(A), p)


@given(mm_pairs())
def test_negation_cancels(pair):
    A, B = pair
    assert matmul_baseline(scale(-1, A), scale(-1, B)) == matmul_baseline(A, B)


@given(mm_chains())
def test_associativity(chain):
    A, B, C = chain
    assert matmul_baseline(matmul_baseline(A, B), C) == matmul_baseline(A, matmul_baseline(B, C))


@given(mm_sums())
def test_distributivity(operands):
    A, B1, B2 = operands
    assert matmul_baseline(A, add(B1, B2)) == add(matmul_baseline(A, B1), matmul_baseline(A, B2))
