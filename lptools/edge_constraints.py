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
# Description:  This module contains the dimension-specific synthesis of the
#               extra half-spaces that a simplex needs before being summed
#               with unit segments or cells.
# -----------------------------------------------------------------------------

# 'standard' imports
import itertools
import warnings

# LPTools imports
from lptools import config
from lptools.utils import base_vector, cross, dot


class NoEdgeConstraints:
    """
    Strategy for dimensions 1 and 2. Edges of a simplex are then facets (or
    vertices), so the Minkowski sum only needs the facets and the bounding
    box. Nothing is added.

    :::note
    Unlike `UnsupportedEdgeConstraints`, this strategy emits no diagnostic.
    Nothing is missing in these dimensions, so the Minkowski sums stay exact.
    :::
    """

    dim = None

    def __init__(self, dim: int) -> None:
        self.dim = dim

    def add_edge_constraints(self, polytope, pts: list) -> int:
        return 0


class UnsupportedEdgeConstraints(NoEdgeConstraints):
    """
    Strategy for dimensions 4 and higher. One should add constraints bounded
    by edges, 2-faces, etc, and one axis, but this is not implemented. Nothing
    is added and a warning is shown, since the Minkowski sums of the resulting
    polytope may be too large.
    """

    def add_edge_constraints(self, polytope, pts: list) -> int:
        if config.warn_unsupported_edge_constraints:
            warnings.warn(
                "Edge constraints of simplices are only implemented in "
                f"dimension 3, not in dimension {self.dim}. Minkowski sums "
                "of this polytope may contain extra points."
            )
        return 0


class EdgeConstraints3D(NoEdgeConstraints):
    """
    Strategy for dimension 3. For every edge of the simplex and every axis,
    the plane containing the edge and parallel to the axis is added as a
    constraint when it supports the simplex. These are exactly the facets
    that a Minkowski sum with unit segments creates, so they must be present
    beforehand.
    """

    def __init__(self, dim: int = 3) -> None:
        if dim != 3:
            raise ValueError(f"EdgeConstraints3D cannot be used in dimension {dim}.")
        super().__init__(dim)

    def add_edge_constraints(self, polytope, pts: list) -> int:
        """
        **Description:**
        Adds the edge constraints of every pair of vertices of the simplex.

        **Arguments:**
        - `polytope`: The polytope to cut.
        - `pts`: The vertices of the simplex, as tuples.

        **Returns:**
        The number of constraints that were passed to `cut`.
        """
        n_added = 0
        for i, j in itertools.combinations(range(len(pts)), 2):
            n_added += self.add_edge_constraint(polytope, i, j, pts)
        return n_added

    def add_edge_constraint(self, polytope, i: int, j: int, pts: list) -> int:
        """
        **Description:**
        Adds the constraints bounded by the edge `pts[i]pts[j]` and one axis.

        For both orientations `s` and every axis `k`, the candidate normal is
        `(pts[i]-pts[j]) x (s e_k)`. The half-space is kept if all the other
        vertices lie strictly inside it. For a full-dimensional simplex this
        means that `dim - 1` vertices do.

        **Arguments:**
        - `polytope`: The polytope to cut.
        - `i`: The index of the first vertex.
        - `j`: The index of the second vertex.
        - `pts`: The vertices of the simplex, as tuples.

        **Returns:**
        The number of constraints that were passed to `cut`.
        """
        ab = tuple(x - y for x, y in zip(pts[i], pts[j]))

        n_added = 0
        for s in (1, -1):
            for k in range(self.dim):
                n = cross(ab, base_vector(k, self.dim, s))
                if not any(n):
                    # edge is parallel to the axis
                    continue

                b = dot(n, pts[i])
                nb_in = sum(dot(n, p) < b for p in pts)
                if nb_in == len(pts) - 2:
                    polytope.cut(n, b, True)
                    n_added += 1
        return n_added


def edge_constraint_strategy(dim: int) -> NoEdgeConstraints:
    """
    **Description:**
    Returns the edge-constraint strategy for the given ambient dimension.

    **Arguments:**
    - `dim`: The ambient dimension.

    **Returns:**
    `EdgeConstraints3D` in dimension 3, `NoEdgeConstraints` in dimensions 1
    and 2, and `UnsupportedEdgeConstraints` otherwise.

    **Example:**
    ```python {2}
    from lptools.edge_constraints import edge_constraint_strategy
    type(edge_constraint_strategy(3)).__name__
    # 'EdgeConstraints3D'
    ```
    """
    if dim == 3:
        return EdgeConstraints3D(dim)
    if dim <= 2:
        return NoEdgeConstraints(dim)
    return UnsupportedEdgeConstraints(dim)
