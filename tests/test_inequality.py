import pytest

from lptools import BoundedLatticePolytope, Domain, Inequality
from lptools.inequality import as_inequality


def test_contains():
    h = Inequality([1, 1], 2)
    assert h.contains([1, 1])
    assert not h.contains([2, 1])

    h = Inequality([1, 1], 2, strict=True)
    assert not h.contains([1, 1])
    assert h.contains([1, 0])


def test_axis():
    assert Inequality([0, -3, 0], 1).axis() == 1
    assert Inequality([0, -3, 0], 1).is_axis_aligned()
    assert Inequality([1, -3, 0], 1).axis() is None


def test_unpacking():
    normal, bound, strict = Inequality([2, 0], 5, True)
    assert normal == (2, 0)
    assert bound == 5
    assert strict


def test_zero_normal():
    with pytest.raises(ValueError, match="cannot be zero"):
        Inequality([0, 0], 1)


def test_as_inequality():
    h = Inequality([1, 0], 1)
    assert as_inequality(h) is h
    assert as_inequality(([1, 0], 1)) == h
    assert as_inequality(([1, 0], 1, True)) == Inequality([1, 0], 1, strict=True)
    with pytest.raises(ValueError, match="must be given as"):
        as_inequality(([1, 0],))


def test_display():
    assert str(Inequality([1, -2], 3)) == "[ 1 -2 ] . x <= 3"
    assert str(Inequality([1, -2], 3, True)) == "[ 1 -2 ] . x < 3"
    assert repr(Inequality([1, -2], 3, True)) == "Inequality([1, -2], 3, strict=True)"


def test_axis_tightens_domain():
    p = BoundedLatticePolytope(domain=Domain([0, 0], [9, 9]))
    for h in [Inequality([0, 3], 7), Inequality([1, 1], 4)]:
        p.cut(h.normal, h.bound)
    # only the axis-aligned inequality shrinks the box
    assert p.get_domain() == Domain([0, 0], [9, 2])
