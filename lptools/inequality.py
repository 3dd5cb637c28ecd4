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
# Description:  This module contains the Inequality class, a single integer
#               half-space.
# -----------------------------------------------------------------------------

# 3rd party imports
from numpy.typing import ArrayLike

# LPTools imports
from lptools.utils import dot, to_lattice_point


class Inequality:
    """
    This class describes the integer half-space `normal . x <= bound`, or
    `normal . x < bound` if it is strict.

    ## Constructor

    ### `lptools.inequality.Inequality`

    **Arguments:**
    - `normal`: A non-zero integer vector.
    - `bound`: An integer.
    - `strict`: Whether the bounding hyperplane is excluded.

    **Example:**
    ```python {2,3}
    from lptools import Inequality
    h = Inequality([1, 1], 2)
    h.contains([1, 1]), h.contains([2, 1])
    # (True, False)
    ```
    """

    def __init__(self, normal: ArrayLike, bound: int, strict: bool = False) -> None:
        self._normal = to_lattice_point(normal)
        if not any(self._normal):
            raise ValueError("The normal of an inequality cannot be zero.")

        self._bound = to_lattice_point([bound])[0]
        self._strict = bool(strict)

    # defaults
    # ========
    def __repr__(self) -> str:
        return (
            f"Inequality({list(self._normal)}, {self._bound}"
            f"{', strict=True' if self._strict else ''})"
        )

    def __str__(self) -> str:
        lhs = " ".join(str(c) for c in self._normal)
        return f"[ {lhs} ] . x {'<' if self._strict else '<='} {self._bound}"

    def __eq__(self, other: "Inequality") -> bool:
        if not isinstance(other, Inequality):
            return False
        return (self._normal, self._bound, self._strict) == (
            other._normal,
            other._bound,
            other._strict,
        )

    def __ne__(self, other: "Inequality") -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((self._normal, self._bound, self._strict))

    def __iter__(self):
        # allows unpacking as normal, bound, strict
        return iter((self._normal, self._bound, self._strict))

    # getters
    # =======
    @property
    def normal(self) -> tuple:
        return self._normal

    @property
    def bound(self) -> int:
        return self._bound

    @property
    def strict(self) -> bool:
        return self._strict

    def dim(self) -> int:
        return len(self._normal)

    # properties
    # ==========
    def contains(self, pt: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point satisfies the inequality.

        **Arguments:**
        - `pt`: The point.

        **Returns:**
        True if and only if the point lies in the half-space.
        """
        v = dot(self._normal, pt)
        return v < self._bound if self._strict else v <= self._bound

    def axis(self) -> "int | None":
        """
        **Description:**
        Returns the axis of an axis-aligned inequality.

        **Arguments:**
        None.

        **Returns:**
        The index of the only non-zero component of the normal, or None if the
        normal has several non-zero components.
        """
        nonzero = [i for i, c in enumerate(self._normal) if c != 0]
        return nonzero[0] if len(nonzero) == 1 else None

    def is_axis_aligned(self) -> bool:
        return self.axis() is not None


def as_inequality(h) -> Inequality:
    """
    **Description:**
    Converts a half-space description into an `Inequality`.

    **Arguments:**
    - `h`: An `Inequality`, or a tuple `(normal, bound)` or
        `(normal, bound, strict)`.

    **Returns:**
    The corresponding `Inequality`.

    **Example:**
    ```python {2}
    as_inequality(([0, -1], 3))
    # Inequality([0, -1], 3)
    ```
    """
    if isinstance(h, Inequality):
        return h

    if len(h) not in (2, 3):
        raise ValueError(
            f"Half-space {h} must be given as (normal, bound) or "
            "(normal, bound, strict)..."
        )
    return Inequality(*h)
