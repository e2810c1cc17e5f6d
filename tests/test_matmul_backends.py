"""
The NumPy and Numba kernels must agree with the pure Python baseline.
"""

import numpy as np
import pytest
from hypothesis import given, settings

from matmul_lab.kernels.matmul_baseline import matmul_baseline
from matmul_lab.kernels.matmul_numpy import matmul_numpy, multiply_numpy, verify_correctness
from matmul_lab.kernels.matmul_numba import matmul_numba, multiply_numba
from matmul_lab.kernels import matmul_numba as numba_module
from matmul_lab.kernels.matrix import zeros
from matmul_lab.test_utils import mm_pairs

A = [[1, 2, 3],
     [4, 5, 6]]
B = [[7, 8],
     [9, 10],
     [11, 12]]
AB = [[58, 64],
      [139, 154]]


@pytest.mark.parametrize('kernel', [multiply_numpy, multiply_numba], ids=['numpy', 'numba'])
def test_writes_into_list_container(kernel):
    C = [[-1, -1], [-1, -1]]
    kernel(A, B, C, 2, 3, 2)
    assert C == AB
    assert all(type(x) is int for row in C for x in row)


@pytest.mark.parametrize('kernel', [multiply_numpy, multiply_numba], ids=['numpy', 'numba'])
def test_writes_into_array_container(kernel):
    C = np.full((2, 2), -1, dtype=np.int64)
    kernel(np.array(A), np.array(B), C, 2, 3, 2)
    np.testing.assert_array_equal(C, AB)


@pytest.mark.parametrize('matmul', [matmul_numpy, matmul_numba], ids=['numpy', 'numba'])
def test_allocating_returns_int64(matmul):
    C = matmul(A, B)
    assert C.dtype == np.int64
    assert C.shape == (2, 2)
    np.testing.assert_array_equal(C, AB)


@settings(deadline=None)
@given(mm_pairs(max_shape=(8, 8, 8), min_shape=(0, 0, 0)))
def test_backends_agree(pair):
    A, B = pair
    m, n = len(A), len(B)
    # B has no rows when n == 0, so p reads as 0 there too
    p = len(B[0]) if n else 0
    expected = matmul_baseline(A, B)

    for kernel in (multiply_numpy, multiply_numba):
        C = zeros(m, p)
        kernel(A, B, C, m, n, p)
        assert C == expected


def test_numpy_wraps_on_int64_overflow():
    C = matmul_numpy([[2 ** 62]], [[4]])
    assert C[0, 0] == 0


def test_verify_correctness():
    assert verify_correctness(A, B, np.array(AB))
    assert not verify_correctness(A, B, np.array([[58, 64], [139, 0]]))
    assert numba_module.verify_correctness(A, B, matmul_numba(A, B))


def test_verify_correctness_rejects_wrong_shape():
    assert not verify_correctness(A, B, np.array([58, 64, 139, 154]))
    assert not verify_correctness(A, B, np.array([[58], [64], [139], [154]]))


@pytest.mark.parametrize('kernel', [multiply_numpy, multiply_numba], ids=['numpy', 'numba'])
@pytest.mark.parametrize('A_bad', [
    np.array([[1.5, 2, 3], [4, 5, 6]]),
    [[1, 2, 3], [4, 5.5, 6]],
], ids=['array', 'list'])
def test_non_integer_operand_rejected(kernel, A_bad):
    C = [[-1, -1], [-1, -1]]
    with pytest.raises(TypeError, match='A.* must .*integer'):
        kernel(A_bad, B, C, 2, 3, 2)
    assert C == [[-1, -1], [-1, -1]]


@pytest.mark.parametrize('matmul', [matmul_numpy, matmul_numba], ids=['numpy', 'numba'])
def test_non_integer_right_operand_rejected(matmul):
    with pytest.raises(TypeError, match=r'B\[2\]\[1\] must be an integer'):
        matmul(A, [[7, 8], [9, 10], [11, 12.0]])
