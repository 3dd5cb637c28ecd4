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
# Description:  This module contains tools designed to perform computations
#               with bounded lattice polytopes given by half-spaces.
# -----------------------------------------------------------------------------

# 'standard' imports
import warnings

# 3rd party imports
import numpy as np
from numpy.typing import ArrayLike
from tqdm import tqdm

# LPTools imports
from lptools import config
from lptools.domain import Domain
from lptools.edge_constraints import edge_constraint_strategy
from lptools.inequality import Inequality, as_inequality
from lptools.shapes import LEFT_STRICT, RIGHT_STRICT, is_unit_shape
from lptools.utils import (
    base_vector,
    dot,
    integral_nullspace,
    matrix_rank,
    positive_ratio,
    to_lattice_point,
)


class BoundedLatticePolytope:
    """
    This class handles computations with bounded convex polytopes of `RR^N`
    given by an H-representation, i.e., as an intersection of (large or
    strict) integer half-spaces `a.x <= b` or `a.x < b`, together with a
    bounding box containing all their lattice points. It supports cuts,
    dilations, Minkowski sums with axis-aligned unit segments and cells, and
    the enumeration of the lattice points.

    The H-representation is not required to be irredundant. All computations
    are exact.

    ## Constructor

    ### `lptools.polytope.BoundedLatticePolytope`

    **Description:**
    Constructs a `BoundedLatticePolytope` object. This is handled by the
    hidden [`__init__`](#__init__) function.

    **Arguments:**
    - `points`: At most N+1 affinely independent lattice points. The polytope
        is the simplex they span.
    - `domain`: A `Domain` (or a pair `(lower, upper)`) bounding the polytope.
        Used together with `halfspaces`.
    - `halfspaces`: An iterable of `Inequality` objects (or tuples
        `(normal, bound)` or `(normal, bound, strict)`) cutting the domain.
    - `dim`: The ambient dimension of a default-constructed polytope.
    - `verbosity`: The verbosity level.

    **Example:**
    We construct a triangle from its vertices and a square from half-spaces.
    ```python {2,5}
    from lptools import BoundedLatticePolytope, Domain
    p1 = BoundedLatticePolytope([[0, 0], [2, 0], [0, 2]])
    p1.count()
    # 6
    p2 = BoundedLatticePolytope(domain=Domain([-5, -5], [5, 5]),
                                halfspaces=[([1, 0], 1), ([-1, 0], 0),
                                            ([0, 1], 1), ([0, -1], 0)])
    p2.count()
    # 4
    ```
    """

    def __init__(
        self,
        points: ArrayLike = None,
        domain: "Domain | tuple" = None,
        halfspaces=None,
        dim: int = None,
        verbosity: int = 0,
    ) -> None:
        """
        **Description:**
        Initializes a `BoundedLatticePolytope` object. Without arguments, the
        polytope is invalid until it is initialized or cut.

        **Arguments:**
        - `points`: At most N+1 affinely independent lattice points.
        - `domain`: A `Domain` (or a pair `(lower, upper)`) bounding the
            polytope.
        - `halfspaces`: The half-spaces cutting the domain.
        - `dim`: The ambient dimension of a default-constructed polytope.
        - `verbosity`: The verbosity level.

        **Returns:**
        Nothing.
        """
        self._clear(dim)

        if points is not None:
            if domain is not None or halfspaces is not None:
                raise ValueError(
                    "A polytope is built either from points or from a domain "
                    "and half-spaces, not both."
                )
            self.init_simplex(points, verbosity=verbosity)
        elif domain is not None:
            self.init_domain(domain, halfspaces if halfspaces is not None else [])
        elif halfspaces is not None:
            raise ValueError("A domain is needed to build a polytope from half-spaces.")

    def _clear(self, dim: int = None) -> None:
        """
        **Description:**
        Resets the polytope to the invalid, default state.

        **Arguments:**
        - `dim`: The ambient dimension, if known.

        **Returns:**
        Nothing.
        """
        self._dim = dim
        # the rows A[i].x <= B[i] (or < if not I[i])
        self._A = []
        self._B = []
        self._I = []
        # bounding box of the lattice points
        self._domain = None
        self._valid = False

    # defaults
    # ========
    def __repr__(self) -> str:
        """
        **Description:**
        Returns a string describing the polytope along with all its
        inequalities, one per line.

        **Arguments:**
        None.

        **Returns:**
        A string describing the polytope.

        **Example:**
        ```python {2}
        p = BoundedLatticePolytope([[0], [3]])
        print(repr(p))
        # A bounded lattice polytope in ZZ^1 with 2 inequalities
        # [ 1 ] . x <= 3
        # [ -1 ] . x <= 0
        ```
        """
        return "\n".join([str(self)] + [str(h) for h in self.inequalities()])

    def __str__(self) -> str:
        """
        **Description:**
        Returns a human-readable string describing the polytope.

        **Arguments:**
        None.

        **Returns:**
        A string describing the polytope.
        """
        space = f" in ZZ^{self._dim}" if self._dim is not None else ""
        if not self._valid:
            return f"An invalid bounded lattice polytope{space}"
        return (
            f"A bounded lattice polytope{space} with "
            f"{len(self._A)} inequalities"
        )

    def copy(self) -> "BoundedLatticePolytope":
        """
        **Description:**
        Returns an independent copy of the polytope.

        **Arguments:**
        None.

        **Returns:**
        The copy.
        """
        other = BoundedLatticePolytope.__new__(BoundedLatticePolytope)
        other._dim = self._dim
        # rows are immutable tuples, and so is the domain
        other._A = list(self._A)
        other._B = list(self._B)
        other._I = list(self._I)
        other._domain = self._domain
        other._valid = self._valid
        return other

    def swap(self, other: "BoundedLatticePolytope") -> None:
        """
        **Description:**
        Swaps the content of this polytope with another one. This exchanges
        the internal state as a whole, so it takes constant time.

        **Arguments:**
        - `other`: The other polytope.

        **Returns:**
        Nothing.
        """
        if not isinstance(other, BoundedLatticePolytope):
            raise TypeError(f"Cannot swap a polytope with {type(other)}...")
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__

    # getters
    # =======
    def dim(self) -> "int | None":
        """
        **Description:**
        Returns the ambient dimension N of the polytope.

        **Arguments:**
        None.

        **Returns:**
        The ambient dimension, or None if it is not known yet.
        """
        return self._dim

    def get_domain(self) -> "Domain | None":
        """
        **Description:**
        Returns the bounding box of the polytope. Every lattice point of the
        polytope lies in it, but it is not necessarily the tightest one.

        **Arguments:**
        None.

        **Returns:**
        The bounding box, or None if the polytope was only built by cuts.
        """
        return self._domain

    def nb_inequalities(self) -> int:
        return len(self._A)

    def inequalities(self) -> list:
        """
        **Description:**
        Returns the inequalities defining the polytope, in insertion order.

        **Arguments:**
        None.

        **Returns:**
        A list of `Inequality` objects.

        **Example:**
        ```python {2}
        p = BoundedLatticePolytope([[0, 0], [1, 0], [0, 1]])
        [str(h) for h in p.inequalities()]
        # ['[ 1 0 ] . x <= 1', '[ -1 0 ] . x <= 0', '[ 0 1 ] . x <= 1',
        #  '[ 0 -1 ] . x <= 0', '[ 1 1 ] . x <= 1']
        ```
        """
        return [
            Inequality(a, b, strict=not large)
            for a, b, large in zip(self._A, self._B, self._I)
        ]

    def inequality_matrix(self) -> np.ndarray:
        """
        **Description:**
        Returns the inequalities as a matrix whose rows are
        `[a_0, ..., a_{N-1}, b]`, standing for `a.x <= b` (or `a.x < b` for
        strict rows, see [`inequalities`](#inequalities)).

        The entries are Python integers, so they are exact.

        **Arguments:**
        None.

        **Returns:**
        A numpy array of shape `(nb_inequalities, N+1)` and object dtype.
        """
        width = (self._dim or 0) + 1
        rows = [list(a) + [b] for a, b in zip(self._A, self._B)]
        return np.array(rows, dtype=object).reshape(len(rows), width)

    def is_valid(self) -> bool:
        """
        **Description:**
        Checks the validity of the polytope. A default-constructed polytope,
        or one built from bad simplex points, is invalid.

        **Arguments:**
        None.

        **Returns:**
        True if the polytope has been initialized or cut.
        """
        return self._valid

    # initialization
    # ==============
    def init_domain(self, domain: "Domain | tuple", halfspaces=()) -> None:
        """
        **Description:**
        Initializes the polytope as the intersection of a domain and a
        collection of half-spaces. Any previous content is discarded.

        The box constraints of the domain are stored as inequalities, then
        every half-space is added with [`cut`](#cut). Axis-aligned
        half-spaces shrink the bounding box.

        **Arguments:**
        - `domain`: A `Domain`, or a pair `(lower, upper)`.
        - `halfspaces`: An iterable of `Inequality` objects, or tuples
            `(normal, bound)` or `(normal, bound, strict)`.

        **Returns:**
        Nothing.

        **Example:**
        ```python {2}
        p = BoundedLatticePolytope(dim=2)
        p.init_domain(Domain([0, 0], [9, 9]), [([1, 1], 2)])
        p.count(), p.get_domain()
        # (6, Domain([0, 0], [9, 9]))
        ```
        """
        if not isinstance(domain, Domain):
            domain = Domain(*domain)

        # check everything before touching the store
        halfspaces = [as_inequality(h) for h in halfspaces]
        for h in halfspaces:
            if h.dim() != domain.dim():
                raise ValueError(
                    f"The half-space {h} does not have dimension {domain.dim()}."
                )

        self._clear(domain.dim())
        self._domain = domain
        self._add_box_constraints(domain.lower_bound(), domain.upper_bound())

        for h in halfspaces:
            self.cut(h.normal, h.bound, not h.strict)

        self._valid = True

    def init_simplex(self, points: ArrayLike, verbosity: int = 0) -> bool:
        """
        **Description:**
        Initializes the polytope as the simplex spanned by at most N+1
        affinely independent lattice points. Any previous content is
        discarded.

        The stored inequalities are the bounding box of the points, the
        equations of their affine hull (as pairs of opposite inequalities)
        if there are less than N+1 points, one inequality per facet, and the
        extra edge constraints of the ambient dimension (see
        `lptools.edge_constraints`). The facet normals are computed exactly
        from the integral nullspace of the edges of each facet.

        **Arguments:**
        - `points`: The vertices of the simplex.
        - `verbosity`: The verbosity level.

        **Returns:**
        True if the polytope was built. False if there were no points, too
        many points, or affinely dependent points, in which case the
        polytope is left invalid.

        **Example:**
        ```python {2,4}
        p = BoundedLatticePolytope(dim=2)
        p.init_simplex([[0, 0], [1, 1], [2, 2]])
        # False
        p.init_simplex([[0, 0], [2, 0], [0, 2]])
        # True
        ```
        """
        pts = [to_lattice_point(pt) for pt in points]
        if len(pts) == 0:
            self._clear(self._dim)
            if verbosity >= 1:
                print("init_simplex: No points were given...")
            return False

        dim = len(pts[0])
        if any(len(pt) != dim for pt in pts):
            raise ValueError("All the points must have the same dimension.")
        self._clear(dim)

        if len(pts) > dim + 1:
            if verbosity >= 1:
                print(
                    f"init_simplex: A simplex in ZZ^{dim} has at most "
                    f"{dim+1} vertices, but {len(pts)} points were given..."
                )
            return False

        rel = [tuple(x - y for x, y in zip(pt, pts[0])) for pt in pts[1:]]
        if matrix_rank(rel, dim) < len(rel):
            if verbosity >= 1:
                print(f"init_simplex: The points {pts} are affinely dependent...")
            return False

        # bounding box
        lower = [min(c) for c in zip(*pts)]
        upper = [max(c) for c in zip(*pts)]
        self._domain = Domain(lower, upper)
        self._add_box_constraints(lower, upper)

        # equations of the affine hull
        if len(pts) < dim + 1:
            for n in integral_nullspace(rel, dim):
                b = dot(n, pts[0])
                self.cut(n, b)
                self.cut(tuple(-c for c in n), -b)

        # facets
        if len(pts) >= 2:
            for j in range(len(pts)):
                facet = pts[:j] + pts[j + 1 :]
                base = facet[0]
                edges = [tuple(x - y for x, y in zip(q, base)) for q in facet[1:]]
                out = tuple(x - y for x, y in zip(pts[j], base))

                n = next(
                    v for v in integral_nullspace(edges, dim) if dot(v, out) != 0
                )
                if dot(n, out) > 0:
                    n = tuple(-c for c in n)
                self.cut(n, dot(n, base))

        edge_constraint_strategy(dim).add_edge_constraints(self, pts)

        if verbosity >= 1:
            print(
                f"init_simplex: Built a simplex with {len(pts)} vertices and "
                f"{len(self._A)} inequalities."
            )
        self._valid = True
        return True

    def _add_box_constraints(self, lower: tuple, upper: tuple) -> None:
        # the 2N inequalities -lower[i] <= x_i <= upper[i]
        for i in range(len(lower)):
            self.cut(base_vector(i, len(lower)), upper[i])
            self.cut(base_vector(i, len(lower), -1), -lower[i])

    # containment
    # ===========
    def is_inside(self, pt: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a lattice point lies in the polytope.

        **Arguments:**
        - `pt`: Any lattice point of the space.

        **Returns:**
        True if and only if the point is inside the polytope.

        **Example:**
        ```python {2,4}
        p = BoundedLatticePolytope([[0, 0], [2, 0], [0, 2]])
        p.is_inside([1, 1])
        # True
        p.is_inside([2, 1])
        # False
        ```
        """
        if not self._valid:
            return False

        pt = to_lattice_point(pt, dim=self._dim)
        if self._domain is not None and not self._domain.is_inside(pt):
            return False
        return self.is_domain_point_inside(pt)

    def is_domain_point_inside(self, pt: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a lattice point of the bounding box lies in the
        polytope. This skips the bounding box check of
        [`is_inside`](#is_inside), so it is slightly faster.

        **Arguments:**
        - `pt`: A lattice point inside the bounding box.

        **Returns:**
        True if and only if the point is inside the polytope.
        """
        if not self._valid:
            return False

        if not isinstance(pt, tuple):
            pt = to_lattice_point(pt, dim=self._dim)
        for a, b, large in zip(self._A, self._B, self._I):
            v = dot(a, pt)
            if (v > b) if large else (v >= b):
                return False
        return True

    # modification
    # ============
    def cut(self, a: ArrayLike, b: int, large: bool = True) -> int:
        """
        **Description:**
        Cuts the polytope by the half-space `a.x <= b` (or `a.x < b` if it is
        not large).

        If an inequality with a normal that is a positive multiple of `a` is
        already stored, then it is kept or tightened in place instead of
        adding a new one, so cutting twice by the same half-space changes
        nothing. Inequalities with opposite normals are not merged.
        Axis-aligned cuts also shrink the bounding box.

        :::note
        The complexity is linear in the number of inequalities, because of the
        search for a parallel inequality.
        :::

        **Arguments:**
        - `a`: A non-zero integer vector.
        - `b`: An integer.
        - `large`: Whether the inequality is large (True) or strict (False).

        **Returns:**
        The index of the inequality in the polytope.

        **Example:**
        ```python {2,3,4}
        p = BoundedLatticePolytope([[0, 0], [4, 0], [0, 4]])
        p.cut([1, 0], 2)
        p.cut([2, 0], 2)
        p.count()
        # 9
        ```
        """
        a = to_lattice_point(a)
        b = to_lattice_point([b])[0]
        large = bool(large)
        if not any(a):
            raise ValueError("Cannot cut a polytope by a zero normal vector.")
        if self._dim is None:
            self._dim = len(a)
        elif len(a) != self._dim:
            raise ValueError(
                f"The normal {list(a)} does not have dimension {self._dim}."
            )

        self._valid = True
        for i, a_i in enumerate(self._A):
            ratio = positive_ratio(a_i, a)
            if ratio is None:
                continue

            # a = (num/den) a_i, so a.x <= b iff a_i.x <= b*den/num
            num, den = ratio
            new, old = b * den, self._B[i] * num
            if new < old:
                self._A[i] = a
                self._B[i] = b
                self._I[i] = large
                self._tighten_domain(i)
            elif new == old and not large and self._I[i]:
                self._I[i] = False
                self._tighten_domain(i)
            return i

        self._A.append(a)
        self._B.append(b)
        self._I.append(large)
        self._tighten_domain(len(self._A) - 1)
        return len(self._A) - 1

    def _tighten_domain(self, i: int) -> None:
        """
        **Description:**
        Shrinks the bounding box using the i-th inequality, if it is
        axis-aligned.

        **Arguments:**
        - `i`: The index of the inequality.

        **Returns:**
        Nothing.
        """
        if self._domain is None:
            return

        a, b, large = self._A[i], self._B[i], self._I[i]
        k = Inequality(a, b).axis()
        if k is None:
            return
        c = a[k]

        lower = list(self._domain.lower_bound())
        upper = list(self._domain.upper_bound())
        if c > 0:
            # x_k <= b/c, or x_k < b/c
            bound = b // c if large else -(-b // c) - 1
            if bound >= upper[k]:
                return
            upper[k] = bound
        else:
            # x_k >= b/c, or x_k > b/c
            bound = -(b // -c) if large else (-b) // (-c) + 1
            if bound <= lower[k]:
                return
            lower[k] = bound
        self._domain = Domain(lower, upper)

    def dilate(self, t: int) -> "BoundedLatticePolytope":
        """
        **Description:**
        Dilates the polytope P into `tP = {t x : x in P}`, in place.

        For negative `t`, the polytope is also mirrored through the origin:
        every normal is negated and every bound is multiplied by `|t|`. The
        strictness of the inequalities is preserved in both cases.

        **Arguments:**
        - `t`: A non-zero integer.

        **Returns:**
        The polytope itself.

        **Example:**
        ```python {2}
        p = BoundedLatticePolytope([[0, 0], [2, 0], [0, 2]])
        p.dilate(2).count()
        # 15
        ```
        """
        t = to_lattice_point([t])[0]
        if t == 0:
            raise ValueError("Cannot dilate a polytope by zero.")

        if t > 0:
            self._B = [b * t for b in self._B]
        else:
            self._A = [tuple(-c for c in a) for a in self._A]
            self._B = [b * -t for b in self._B]

        if self._domain is not None:
            # lattice bounds may have been rounded, so pad before re-tightening
            pad = abs(t) - 1
            lower = self._domain.lower_bound()
            upper = self._domain.upper_bound()
            if t < 0:
                lower, upper = upper, lower
            self._domain = Domain(
                [t * c - pad for c in lower], [t * c + pad for c in upper]
            )
            for i in range(len(self._A)):
                self._tighten_domain(i)

        return self

    def minkowski_sum(self, shape) -> "BoundedLatticePolytope":
        """
        **Description:**
        Computes the Minkowski sum of the polytope with a unit segment or a
        unit cell, in place.

        Each inequality `a.x <= b` with `a[k] > 0` is pushed outwards by
        `a[k]` for every summed axis `k`. For right-strict shapes, the pushed
        inequalities become strict, since the far endpoint is excluded. For
        left-strict shapes, the inequalities with `a[k] < 0` become strict,
        since the origin is excluded. The bounding box grows by one along
        every summed axis.

        :::important
        The result is only exact if the polytope stores all the facets that
        the sum creates. This is the case for boxes, for simplices in
        dimension at most 3, and for their dilations and sums.
        :::

        **Arguments:**
        - `shape`: A `UnitSegment`, `RightStrictUnitSegment`,
            `LeftStrictUnitSegment`, `UnitCell`, `RightStrictUnitCell` or
            `LeftStrictUnitCell`.

        **Returns:**
        The polytope itself.

        **Example:**
        ```python {3}
        p = BoundedLatticePolytope(domain=Domain([0, 0], [1, 1]))
        p.minkowski_sum(UnitSegment(0)).count()
        # 6
        ```
        """
        if not is_unit_shape(shape):
            raise TypeError(f"Cannot compute the Minkowski sum with {shape!r}...")

        axes = shape.axes()
        if self._dim is not None:
            for k in axes:
                if k >= self._dim:
                    raise ValueError(
                        f"Axis {k} is out of range in dimension {self._dim}."
                    )

        for k in axes:
            self._sum_unit_segment(k, shape.kind)
        return self

    def _sum_unit_segment(self, k: int, kind: str) -> None:
        """
        **Description:**
        Minkowski sum with the unit segment along axis k.

        **Arguments:**
        - `k`: The axis.
        - `kind`: Which endpoints of the segment are included.

        **Returns:**
        Nothing.
        """
        for i, a in enumerate(self._A):
            if a[k] > 0:
                self._B[i] += a[k]
                if kind == RIGHT_STRICT:
                    self._I[i] = False
            elif a[k] < 0 and kind == LEFT_STRICT:
                self._I[i] = False

        if self._domain is not None:
            upper = list(self._domain.upper_bound())
            upper[k] += 1
            self._domain = Domain(self._domain.lower_bound(), upper)

    # enumeration
    # ===========
    def _scan(self, domain: "Domain | None", verbosity: int = 0):
        """
        **Description:**
        Iterates over the lattice points of the polytope that lie in the
        given box, by checking every point of the box.

        **Arguments:**
        - `domain`: The box to scan.
        - `verbosity`: The verbosity level. A progress bar is shown if it is
            at least 1.

        **Returns:**
        A generator of points, as tuples.
        """
        if not self._valid or domain is None or domain.is_empty():
            return

        size = domain.size()
        threshold = config.enumeration_warning_threshold
        if threshold is not None and size > threshold:
            warnings.warn(
                f"Enumerating the {size} lattice points of the bounding box "
                f"{domain!r}. This may take a long time..."
            )

        pts = (tqdm if verbosity >= 1 else lambda x, **kwargs: x)(
            iter(domain), total=size
        )
        for pt in pts:
            if self.is_domain_point_inside(pt):
                yield pt

    def count(self, verbosity: int = 0) -> int:
        """
        **Description:**
        Computes the number of lattice points in the polytope.

        :::note
        This checks every point of the bounding box, so it can be slow.
        :::

        **Arguments:**
        - `verbosity`: The verbosity level.

        **Returns:**
        The number of lattice points.

        **Example:**
        ```python {2}
        p = BoundedLatticePolytope([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]])
        p.count()
        # 4
        ```
        """
        return sum(1 for _ in self._scan(self._domain, verbosity))

    def count_in(self, low: ArrayLike, hi: ArrayLike, verbosity: int = 0) -> int:
        """
        **Description:**
        Computes the number of lattice points in the polytope that also lie
        in the box `[low, hi]`.

        **Arguments:**
        - `low`: The lowest corner of the box.
        - `hi`: The highest corner of the box.
        - `verbosity`: The verbosity level.

        **Returns:**
        The number of lattice points.

        **Example:**
        ```python {2}
        p = BoundedLatticePolytope([[0, 0], [2, 0], [0, 2]])
        p.count_in([1, 0], [5, 5])
        # 3
        ```
        """
        if self._domain is None:
            return 0
        return sum(
            1 for _ in self._scan(self._domain.intersection(low, hi), verbosity)
        )

    def count_up_to(self, n_max: int, verbosity: int = 0) -> int:
        """
        **Description:**
        Computes the number of lattice points in the polytope, but stops as
        soon as `n_max` points have been found.

        For instance, a d-dimensional lattice simplex with no other lattice
        points than its vertices contains d+1 points, so `count_up_to(d+2)`
        tells whether it has more without counting all of them.

        **Arguments:**
        - `n_max`: The maximum number of points to count.
        - `verbosity`: The verbosity level.

        **Returns:**
        The number of lattice points, or `n_max` if there are at least
        `n_max`.

        **Example:**
        ```python {2,4}
        p = BoundedLatticePolytope([[0, 0], [4, 0], [0, 4]])
        p.count_up_to(5)
        # 5
        p.count_up_to(100)
        # 15
        ```
        """
        nb = 0
        if n_max <= 0:
            return nb
        for _ in self._scan(self._domain, verbosity):
            nb += 1
            if nb >= n_max:
                break
        return nb

    def get_points(self, verbosity: int = 0) -> list:
        """
        **Description:**
        Computes the lattice points in the polytope, in the iteration order
        of its bounding box.

        **Arguments:**
        - `verbosity`: The verbosity level.

        **Returns:**
        A list of tuples. Its length is `count()`.

        **Example:**
        ```python {2}
        p = BoundedLatticePolytope([[0, 0], [1, 0], [0, 1]])
        p.get_points()
        # [(0, 0), (1, 0), (0, 1)]
        ```
        """
        return list(self._scan(self._domain, verbosity))

    def insert_points(self, pts_set: set, verbosity: int = 0) -> None:
        """
        **Description:**
        Adds the lattice points in the polytope to a set.

        **Arguments:**
        - `pts_set`: Any object with an `add` method, such as a set.
        - `verbosity`: The verbosity level.

        **Returns:**
        Nothing.
        """
        for pt in self._scan(self._domain, verbosity):
            pts_set.add(pt)

    def points(self, verbosity: int = 0) -> np.ndarray:
        """
        **Description:**
        Computes the lattice points in the polytope, as a numpy array.

        **Arguments:**
        - `verbosity`: The verbosity level.

        **Returns:**
        An integer array of shape `(count(), N)`.
        """
        if self._dim is None:
            return np.empty((0, 0), dtype=int)
        return np.array(self.get_points(verbosity), dtype=int).reshape(-1, self._dim)


# non-mutating variants
# ---------------------
def scale(P: BoundedLatticePolytope, t: int) -> BoundedLatticePolytope:
    """
    **Description:**
    Returns the dilation tP of a polytope, leaving P untouched. See
    [`BoundedLatticePolytope.dilate`](#dilate).

    **Arguments:**
    - `P`: The polytope.
    - `t`: A non-zero integer.

    **Returns:**
    The polytope tP.
    """
    return P.copy().dilate(t)


def minkowski_sum(P: BoundedLatticePolytope, shape) -> BoundedLatticePolytope:
    """
    **Description:**
    Returns the Minkowski sum of a polytope with a unit segment or cell,
    leaving P untouched. See
    [`BoundedLatticePolytope.minkowski_sum`](#minkowski_sum).

    **Arguments:**
    - `P`: The polytope.
    - `shape`: The unit segment or cell.

    **Returns:**
    The polytope P + shape.

    **Example:**
    ```python {3}
    from lptools.polytope import minkowski_sum
    p = BoundedLatticePolytope([[0, 0], [1, 0], [0, 1]])
    minkowski_sum(p, UnitCell([0, 1])).count(), p.count()
    # (8, 3)
    ```
    """
    return P.copy().minkowski_sum(shape)
