# =============================================================================
# This file is part of LPTools.
#
# LPTools is free software: you can redistribute it and/or modify it under the
# terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# LPTools is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with
# LPTools. If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
#
# -----------------------------------------------------------------------------
# Description:  This module contains exact integer helpers used throughout
#               LPTools.
# -----------------------------------------------------------------------------

# 'standard' imports
import functools
import math

# 3rd party imports
import flint
import numpy as np
from numpy.typing import ArrayLike


# lattice points
# --------------
def to_lattice_point(pt: ArrayLike, dim: int = None) -> tuple:
    """
    **Description:**
    Converts an array-like of integers into a tuple of Python integers.

    Python integers have arbitrary precision, so every subsequent dot product
    or bound computation is exact.

    **Arguments:**
    - `pt`: The point (or vector).
    - `dim`: The expected number of components. Not checked if None.

    **Returns:**
    The point as a tuple of Python integers.

    **Example:**
    ```python {2}
    from lptools.utils import to_lattice_point
    to_lattice_point(np.array([1, -2, 3]))
    # (1, -2, 3)
    ```
    """
    out = []
    for c in np.asarray(pt, dtype=object).ravel().tolist():
        try:
            c_int = int(c)
        except (TypeError, ValueError):
            raise ValueError(f"Coordinate {c!r} of {pt} is not an integer...")
        if c_int != c:
            raise ValueError(f"Coordinate {c!r} of {pt} is not an integer...")
        out.append(c_int)

    if dim is not None and len(out) != dim:
        raise ValueError(
            f"Expected {dim} coordinates but {list(pt)} has {len(out)}..."
        )
    return tuple(out)


def base_vector(k: int, dim: int, value: int = 1) -> tuple:
    """
    **Description:**
    Returns the vector `value * e_k` in `ZZ^dim`.

    **Arguments:**
    - `k`: The axis.
    - `dim`: The ambient dimension.
    - `value`: The non-zero component.

    **Returns:**
    The vector as a tuple.
    """
    return tuple(value if i == k else 0 for i in range(dim))


def dot(a: tuple, b: tuple) -> int:
    # exact dot product of two integer tuples
    return sum(x * y for x, y in zip(a, b))


def cross(a: tuple, b: tuple) -> tuple:
    """
    **Description:**
    Cross product of two vectors of `ZZ^3`.

    **Arguments:**
    - `a`: The first vector.
    - `b`: The second vector.

    **Returns:**
    The vector a x b.
    """
    if len(a) != 3 or len(b) != 3:
        raise ValueError("The cross product is only defined in dimension 3.")
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


# basic math
# ----------
# variant of math.gcd over all elements in arr
gcd_list = lambda arr: functools.reduce(math.gcd, arr, 0)


def primitive(v: tuple) -> tuple:
    """
    **Description:**
    Divides an integer vector by the gcd of its components. The zero vector
    is returned unchanged.

    **Arguments:**
    - `v`: The vector.

    **Returns:**
    The primitive vector pointing in the same direction.

    **Example:**
    ```python {2}
    from lptools.utils import primitive
    primitive((4, -6, 0))
    # (2, -3, 0)
    ```
    """
    g = gcd_list(v)
    if g <= 1:
        return tuple(v)
    return tuple(c // g for c in v)


def positive_ratio(a: tuple, c: tuple) -> "tuple | None":
    """
    **Description:**
    Checks whether `c` is a positive multiple of `a`, using exact
    cross-multiplication.

    **Arguments:**
    - `a`: A non-zero integer vector.
    - `c`: Another non-zero integer vector of the same length.

    **Returns:**
    A pair `(num, den)` of positive integers with `den*c == num*a` if `c` is
    a positive multiple of `a`. Otherwise, None.

    **Example:**
    ```python {2,4}
    from lptools.utils import positive_ratio
    positive_ratio((1, 2), (3, 6))
    # (3, 1)
    positive_ratio((1, 2), (-1, -2))
    # None
    ```
    """
    i0 = next(i for i, x in enumerate(a) if x != 0)
    if c[i0] == 0 or (c[i0] > 0) != (a[i0] > 0):
        return None

    for x, y in zip(a, c):
        if x * c[i0] != y * a[i0]:
            return None

    return abs(c[i0]), abs(a[i0])


# linear algebra
# --------------
def matrix_rank(M: list, ncols: int) -> int:
    """
    **Description:**
    Exact rank of an integer matrix.

    **Arguments:**
    - `M`: The matrix, as a list of rows.
    - `ncols`: The number of columns (needed when `M` has no rows).

    **Returns:**
    The rank of M.
    """
    if len(M) == 0 or ncols == 0:
        return 0
    return flint.fmpz_mat([list(row) for row in M]).rank()


def integral_nullspace(M: list, ncols: int) -> list:
    """
    **Description:**
    Returns a basis of the integral nullspace of an integer matrix, i.e., of
    the vectors v with M v = 0.

    The computation is exact (done by Flint).

    **Arguments:**
    - `M`: The matrix, as a list of rows.
    - `ncols`: The number of columns (needed when `M` has no rows).

    **Returns:**
    A list of primitive tuples, one for each basis vector.

    **Example:**
    ```python {2}
    from lptools.utils import integral_nullspace
    len(integral_nullspace([[1, 1, 0]], 3))
    # 2
    ```
    """
    if len(M) == 0:
        return [base_vector(i, ncols) for i in range(ncols)]

    null, nullity = flint.fmpz_mat([list(row) for row in M]).nullspace()
    null = null.tolist()

    # trim extra columns
    basis = [tuple(int(null[i][j]) for i in range(ncols)) for j in range(nullity)]

    # reduce by gcd
    return [primitive(v) for v in basis]
