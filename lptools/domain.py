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
# Description:  This module contains the Domain class, an axis-aligned box of
#               lattice points.
# -----------------------------------------------------------------------------

# 'standard' imports
import itertools
import math

# 3rd party imports
from numpy.typing import ArrayLike

# LPTools imports
from lptools.utils import to_lattice_point


class Domain:
    """
    This class describes a bounded axis-aligned box of lattice points
    `[lower, upper]`, both corners included. If `lower[i] > upper[i]` for
    some `i`, then the domain is empty.

    ## Constructor

    ### `lptools.domain.Domain`

    **Arguments:**
    - `lower`: The lowest corner of the box.
    - `upper`: The highest corner of the box.

    **Example:**
    ```python {2}
    from lptools import Domain
    d = Domain([0, 0], [2, 1])
    d.size()
    # 6
    ```
    """

    def __init__(self, lower: ArrayLike, upper: ArrayLike) -> None:
        self._lower = to_lattice_point(lower)
        self._upper = to_lattice_point(upper, dim=len(self._lower))

    # defaults
    # ========
    def __repr__(self) -> str:
        return f"Domain({list(self._lower)}, {list(self._upper)})"

    def __str__(self) -> str:
        return (
            f"A {self.dim()}-dimensional domain from {list(self._lower)} "
            f"to {list(self._upper)}"
        )

    def __eq__(self, other: "Domain") -> bool:
        if not isinstance(other, Domain):
            return False
        return self._lower == other._lower and self._upper == other._upper

    def __ne__(self, other: "Domain") -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self._lower, self._upper))

    def __iter__(self):
        """
        **Description:**
        Iterates over the lattice points of the domain. The first coordinate
        varies fastest, so the order is fixed and reproducible.

        **Arguments:**
        None.

        **Returns:**
        An iterator over the points, as tuples.

        **Example:**
        ```python {2}
        d = Domain([0, 0], [1, 1])
        list(d)
        # [(0, 0), (1, 0), (0, 1), (1, 1)]
        ```
        """
        if self.is_empty():
            return iter(())

        ranges = [range(l, u + 1) for l, u in zip(self._lower, self._upper)]
        return (
            tuple(reversed(pt)) for pt in itertools.product(*reversed(ranges))
        )

    def __contains__(self, pt: ArrayLike) -> bool:
        return self.is_inside(pt)

    # getters
    # =======
    def lower_bound(self) -> tuple:
        """
        **Description:**
        Returns the lowest corner of the domain.

        **Arguments:**
        None.

        **Returns:**
        The lower bound, as a tuple.
        """
        return self._lower

    def upper_bound(self) -> tuple:
        """
        **Description:**
        Returns the highest corner of the domain.

        **Arguments:**
        None.

        **Returns:**
        The upper bound, as a tuple.
        """
        return self._upper

    def dim(self) -> int:
        # the ambient dimension
        return len(self._lower)

    def extent(self) -> tuple:
        """
        **Description:**
        Returns the number of lattice points along each axis.

        **Arguments:**
        None.

        **Returns:**
        The componentwise extent, `upper - lower + 1`, clamped at zero.
        """
        return tuple(max(0, u - l + 1) for l, u in zip(self._lower, self._upper))

    def size(self) -> int:
        """
        **Description:**
        Returns the number of lattice points in the domain.

        **Arguments:**
        None.

        **Returns:**
        The number of lattice points.

        **Example:**
        ```python {2,4}
        Domain([0, 0, 0], [1, 2, 3]).size()
        # 24
        Domain([0, 0], [-1, 5]).size()
        # 0
        ```
        """
        return math.prod(self.extent())

    def is_empty(self) -> bool:
        # empty iff some axis has no lattice points
        return any(l > u for l, u in zip(self._lower, self._upper))

    def is_inside(self, pt: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point lies in the domain.

        **Arguments:**
        - `pt`: The point.

        **Returns:**
        True if and only if `lower <= pt <= upper` componentwise.
        """
        if len(pt) != self.dim():
            raise ValueError(
                f"The point {list(pt)} does not have dimension {self.dim()}."
            )
        return all(l <= c <= u for l, c, u in zip(self._lower, pt, self._upper))

    def intersection(self, lower: ArrayLike, upper: ArrayLike) -> "Domain":
        """
        **Description:**
        Returns the intersection of this domain with the box `[lower, upper]`.

        **Arguments:**
        - `lower`: The lowest corner of the other box.
        - `upper`: The highest corner of the other box.

        **Returns:**
        The intersection, which may be empty.

        **Example:**
        ```python {2}
        d = Domain([0, 0], [4, 4])
        d.intersection([2, -1], [6, 3])
        # Domain([2, 0], [4, 3])
        ```
        """
        lower = to_lattice_point(lower, dim=self.dim())
        upper = to_lattice_point(upper, dim=self.dim())
        return Domain(
            [max(a, b) for a, b in zip(self._lower, lower)],
            [min(a, b) for a, b in zip(self._upper, upper)],
        )
