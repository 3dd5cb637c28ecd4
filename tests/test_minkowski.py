import functools
import itertools
import math
from fractions import Fraction

import pytest

from lptools import (
    BoundedLatticePolytope,
    Domain,
    LeftStrictUnitCell,
    LeftStrictUnitSegment,
    RightStrictUnitCell,
    RightStrictUnitSegment,
    UnitCell,
    UnitSegment,
    minkowski_sum,
    scale,
)
from lptools.shapes import CLOSED, LEFT_STRICT, RIGHT_STRICT
from lptools.utils import dot

CELLS = {CLOSED: UnitCell, RIGHT_STRICT: RightStrictUnitCell, LEFT_STRICT: LeftStrictUnitCell}
SEGMENTS = {
    CLOSED: UnitSegment,
    RIGHT_STRICT: RightStrictUnitSegment,
    LEFT_STRICT: LeftStrictUnitSegment,
}


# Exact membership in P + [segments], by Fourier-Motzkin elimination of the
# segment parameters
# ---------------------------------------------------------------------------
def _normalize(rows):
    best = {}
    for c, r, s in rows:
        g = functools.reduce(math.gcd, c, 0)
        if g == 0:
            if r < 0 or (r == 0 and s):
                return None
            continue
        c = tuple(x // g for x in c)
        r = r / g
        if c not in best or r < best[c][0] or (r == best[c][0] and s):
            best[c] = (r, s)
    return [(c, r, s) for c, (r, s) in best.items()]


def fm_feasible(rows, nvars):
    """Whether some real t satisfies every c.t <= r (c.t < r if strict)."""
    rows = _normalize(rows)
    if rows is None:
        return False
    for v in range(nvars):
        pos = [r for r in rows if r[0][v] > 0]
        neg = [r for r in rows if r[0][v] < 0]
        new = [r for r in rows if r[0][v] == 0]
        for cp, rp, sp in pos:
            for cn, rn, sn in neg:
                lp, ln = cp[v], -cn[v]
                c = tuple(ln * x + lp * y for x, y in zip(cp, cn))
                new.append((c, ln * rp + lp * rn, sp or sn))
        rows = _normalize(new)
        if rows is None:
            return False
    return True


def in_sum(rows, x, segments):
    """Whether x lies in P + sum of the (axis, kind) segments."""
    m = len(segments)
    system = []
    for normal, bound, strict in rows:
        c = tuple(-normal[k] for k, _ in segments)
        system.append((c, Fraction(bound - dot(normal, x)), strict))
    for i, (_, kind) in enumerate(segments):
        e = tuple(1 if j == i else 0 for j in range(m))
        system.append((tuple(-c for c in e), Fraction(0), kind == LEFT_STRICT))
        system.append((e, Fraction(1), kind == RIGHT_STRICT))
    return fm_feasible(system, m)


def check_sum(p, segments, q):
    """Compares q with P + segments on a box around both."""
    rows = p.inequalities()
    lower = [c - 1 for c in p.get_domain().lower_bound()]
    upper = [c + 2 for c in p.get_domain().upper_bound()]
    for x in Domain(lower, upper):
        expected = in_sum(rows, x, segments)
        assert q.is_inside(x) == expected, (x, segments)
        if expected:
            assert q.get_domain().is_inside(x)


SIMPLICES_2D = [
    [[0, 0], [2, 0], [0, 2]],
    [[0, 0], [3, 1], [1, 2]],
    [[1, -1], [-2, 1], [0, 3]],
    [[0, 0], [3, 2]],
    [[1, 1]],
]

SIMPLICES_3D = [
    [[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]],
    [[0, 0, 0], [2, 1, 0], [0, 2, 1], [1, 0, 2]],
    [[0, 0, 0], [2, 1, 0], [1, 0, 2]],
    [[0, 0, 0], [2, 1, 1]],
]


# tests
# -----
def test_unit_square_plus_segment():
    p = BoundedLatticePolytope(
        domain=Domain([-3, -3], [3, 3]),
        halfspaces=[([1, 0], 1), ([-1, 0], 0), ([0, 1], 1), ([0, -1], 0)],
    )
    assert p.count() == 4

    p.minkowski_sum(UnitSegment(0))
    assert p.count() == 6
    assert p.get_domain() == Domain([0, 0], [2, 1])


@pytest.mark.parametrize("kind", [CLOSED, RIGHT_STRICT, LEFT_STRICT])
@pytest.mark.parametrize("pts", SIMPLICES_2D)
def test_sum_2d(pts, kind):
    p = BoundedLatticePolytope(pts)
    for dims in [(), (0,), (1,), (0, 1), (1, 0)]:
        q = minkowski_sum(p, CELLS[kind](dims))
        check_sum(p, [(k, kind) for k in dims], q)
    for k in range(2):
        q = minkowski_sum(p, SEGMENTS[kind](k))
        check_sum(p, [(k, kind)], q)


@pytest.mark.parametrize("kind", [CLOSED, RIGHT_STRICT, LEFT_STRICT])
@pytest.mark.parametrize("pts", SIMPLICES_3D)
def test_sum_3d(pts, kind):
    p = BoundedLatticePolytope(pts)
    for dims in [(0,), (1,), (2,), (0, 2), (0, 1, 2)]:
        q = minkowski_sum(p, CELLS[kind](dims))
        check_sum(p, [(k, kind) for k in dims], q)


def test_mixed_sums():
    p = BoundedLatticePolytope([[0, 0, 0], [2, 1, 0], [0, 2, 1], [1, 0, 2]])
    segments = [(0, RIGHT_STRICT), (1, LEFT_STRICT), (2, CLOSED)]

    q = p.copy()
    for k, kind in segments:
        q.minkowski_sum(SEGMENTS[kind](k))
    check_sum(p, segments, q)


def test_sum_after_dilation():
    p = BoundedLatticePolytope([[0, 0], [3, 1], [1, 2]])
    for t in (2, -1, -2):
        d = scale(p, t)
        q = minkowski_sum(d, UnitCell([0, 1]))
        check_sum(d, [(0, CLOSED), (1, CLOSED)], q)


def test_sum_grows():
    for pts in SIMPLICES_2D + SIMPLICES_3D:
        p = BoundedLatticePolytope(pts)
        for k in range(len(pts[0])):
            assert minkowski_sum(p, UnitSegment(k)).count() >= p.count()


def test_cell_order():
    p = BoundedLatticePolytope([[0, 0, 0], [2, 1, 0], [0, 2, 1], [1, 0, 2]])
    expected = set(minkowski_sum(p, UnitCell([0, 1, 2])).get_points())
    for dims in itertools.permutations(range(3)):
        assert set(minkowski_sum(p, UnitCell(dims)).get_points()) == expected


def test_cell_is_sequence_of_segments():
    p = BoundedLatticePolytope([[0, 0], [3, 1], [1, 2]])
    for kind in (CLOSED, RIGHT_STRICT, LEFT_STRICT):
        q = p.copy()
        q.minkowski_sum(SEGMENTS[kind](0)).minkowski_sum(SEGMENTS[kind](1))
        r = minkowski_sum(p, CELLS[kind]([0, 1]))
        assert q.get_points() == r.get_points()
        assert q.inequalities() == r.inequalities()


def test_strict_segments_split_closed_segment():
    # [0,1] is the disjoint union of [0,1) and {1}
    p = BoundedLatticePolytope([[0, 0], [3, 1], [1, 2]])
    closed = set(minkowski_sum(p, UnitSegment(0)).get_points())
    right = set(minkowski_sum(p, RightStrictUnitSegment(0)).get_points())
    shifted = {(x + 1, y) for x, y in p.get_points()}
    assert right | shifted == closed

    # and of {0} and (0,1]
    left = set(minkowski_sum(p, LeftStrictUnitSegment(0)).get_points())
    assert left | set(p.get_points()) == closed


def test_unit_cube():
    p = BoundedLatticePolytope(domain=Domain([0, 0, 0], [1, 1, 1]))
    assert p.count() == 8
    assert minkowski_sum(p, UnitCell([0, 1, 2])).count() == 27
    assert minkowski_sum(p, RightStrictUnitCell([0, 1, 2])).count() == 8
    assert minkowski_sum(p, LeftStrictUnitCell([0, 1, 2])).count() == 8
    assert minkowski_sum(p, UnitCell([])).count() == 8


def test_sum_errors():
    p = BoundedLatticePolytope([[0, 0], [1, 0], [0, 1]])
    with pytest.raises(ValueError, match="out of range"):
        p.minkowski_sum(UnitSegment(2))
    with pytest.raises(TypeError):
        p.minkowski_sum((0, 1))

    # nothing was modified
    assert p.count() == 3
