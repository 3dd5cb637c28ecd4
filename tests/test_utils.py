import numpy as np
import pytest

from lptools.utils import (
    base_vector,
    cross,
    dot,
    gcd_list,
    integral_nullspace,
    matrix_rank,
    positive_ratio,
    primitive,
    to_lattice_point,
)


def test_to_lattice_point():
    assert to_lattice_point(np.array([1, -2, 3])) == (1, -2, 3)
    assert to_lattice_point([2.0, 3]) == (2, 3)
    assert to_lattice_point([10**30]) == (10**30,)
    with pytest.raises(ValueError, match="not an integer"):
        to_lattice_point([1, 0.5])
    with pytest.raises(ValueError, match="Expected 3 coordinates"):
        to_lattice_point([1, 2], dim=3)


def test_vectors():
    assert base_vector(1, 3) == (0, 1, 0)
    assert base_vector(0, 2, -1) == (-1, 0)
    assert dot((1, 2, 3), (4, 5, 6)) == 32
    assert cross((1, 0, 0), (0, 1, 0)) == (0, 0, 1)
    assert cross((1, -1, 0), (0, 0, -1)) == (1, 1, 0)
    with pytest.raises(ValueError):
        cross((1, 0), (0, 1))


def test_gcd():
    assert gcd_list([4, -6, 8]) == 2
    assert gcd_list([]) == 0
    assert primitive((4, -6, 0)) == (2, -3, 0)
    assert primitive((0, 0)) == (0, 0)
    assert primitive((1, 5)) == (1, 5)


def test_positive_ratio():
    assert positive_ratio((1, 2), (3, 6)) == (3, 1)
    assert positive_ratio((2, 4), (1, 2)) == (1, 2)
    assert positive_ratio((0, -2), (0, -5)) == (5, 2)
    assert positive_ratio((1, 2), (-1, -2)) is None
    assert positive_ratio((1, 2), (1, 3)) is None
    assert positive_ratio((1, 0), (0, 1)) is None


def test_rank():
    assert matrix_rank([], 3) == 0
    assert matrix_rank([[1, 1, 0], [2, 2, 0]], 3) == 1
    assert matrix_rank([[1, 0, 0], [0, 1, 0], [0, 0, 1]], 3) == 3


def test_integral_nullspace():
    assert integral_nullspace([], 2) == [(1, 0), (0, 1)]

    M = [[1, 1, 0], [0, 2, 2]]
    null = integral_nullspace(M, 3)
    assert len(null) == 1
    assert null[0] in [(1, -1, 1), (-1, 1, -1)]

    null = integral_nullspace([[2, 3, 0]], 3)
    assert len(null) == 2
    for v in null:
        assert dot(v, (2, 3, 0)) == 0
        assert gcd_list(v) == 1
    assert matrix_rank(null, 3) == 2
