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
# Description:  This module contains the axis-aligned unit segments and unit
#               cells that parametrize Minkowski sums of polytopes.
# -----------------------------------------------------------------------------

# typing
from typing import Iterable

# the three kinds of unit segments
CLOSED = "closed"
RIGHT_STRICT = "right_strict"
LEFT_STRICT = "left_strict"


def _check_axis(k) -> int:
    if int(k) != k or k < 0:
        raise ValueError(f"Axis {k!r} must be a non-negative integer...")
    return int(k)


class _UnitSegmentBase:
    """
    Base class of the unit segments from the origin to `e_k`. Subclasses set
    `kind`, which tells which endpoints are included.
    """

    kind = None

    def __init__(self, k: int) -> None:
        self.k = _check_axis(k)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.k})"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.k == other.k

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.k))

    def axes(self) -> tuple:
        return (self.k,)


class UnitSegment(_UnitSegmentBase):
    """
    The unit segment from `(0,...,0)` (included) to `e_k` (included).

    **Example:**
    ```python {3}
    from lptools import BoundedLatticePolytope, UnitSegment
    p = BoundedLatticePolytope([[0, 0], [1, 0], [0, 1]])
    p.minkowski_sum(UnitSegment(0)).count()
    # 5
    ```
    """

    kind = CLOSED


class RightStrictUnitSegment(_UnitSegmentBase):
    """
    The unit segment from `(0,...,0)` (included) to `e_k` (excluded).
    """

    kind = RIGHT_STRICT


class LeftStrictUnitSegment(_UnitSegmentBase):
    """
    The unit segment from `(0,...,0)` (excluded) to `e_k` (included).
    """

    kind = LEFT_STRICT


class _UnitCellBase:
    """
    Base class of the unit cells, i.e., the Minkowski sums of unit segments of
    the same kind along distinct axes. The empty cell is the origin.
    """

    kind = None

    def __init__(self, dims: Iterable[int] = ()) -> None:
        dims = tuple(_check_axis(k) for k in dims)
        if len(set(dims)) != len(dims):
            raise ValueError(f"The axes {list(dims)} of a unit cell must be distinct.")
        self.dims = dims

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.dims)})"

    def __str__(self) -> str:
        return "{" + ",".join(str(k) for k in self.dims) + "}"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.dims == other.dims

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.dims))

    def __len__(self) -> int:
        return len(self.dims)

    def axes(self) -> tuple:
        return self.dims


class UnitCell(_UnitCellBase):
    """
    The Minkowski sum of the `UnitSegment`s along the axes in `dims`.

    **Example:**
    ```python {2}
    from lptools import UnitCell
    print(UnitCell([0, 2]))
    # {0,2}
    ```
    """

    kind = CLOSED


class RightStrictUnitCell(_UnitCellBase):
    """
    The Minkowski sum of the `RightStrictUnitSegment`s along the axes in
    `dims`.
    """

    kind = RIGHT_STRICT


class LeftStrictUnitCell(_UnitCellBase):
    """
    The Minkowski sum of the `LeftStrictUnitSegment`s along the axes in
    `dims`.
    """

    kind = LEFT_STRICT


def is_unit_shape(obj) -> bool:
    # whether obj can be used in a Minkowski sum
    return isinstance(obj, (_UnitSegmentBase, _UnitCellBase))
