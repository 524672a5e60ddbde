import numpy as np
import pytest

from cvxgeom_lib import EPSILON, Point, trianglearea, isleft, islefton, isright, isrighton, sqdist, scalar_eq
from cvxgeom_lib import lineint, segmentintersect, polyat, polyisreflex, polycopy, polyisconvex
from cvxgeom_lib import polysignarea, polyarea, ispolycw, inpolygon


def test_point_arithmetic():
    p = Point(1, 2) + Point(3, 4)
    assert p == Point(4, 6)
    assert p / 2 == Point(2, 3)
    assert p[0] == p.x == 4
    assert isinstance(p / 2, Point)


def test_trianglearea_sign():
    assert trianglearea((0, 0), (1, 0), (0, 1)) == 1
    assert trianglearea((0, 0), (0, 1), (1, 0)) == -1


@pytest.mark.parametrize("c, left, lefton, right, righton", [
    ((0, 1), True, True, False, False),
    ((0, -1), False, False, True, True),
    ((2, 0), False, True, False, True),
])
def test_orientation_predicates(c, left, lefton, right, righton):
    a, b = (0, 0), (1, 0)
    assert isleft(a, b, c) == left
    assert islefton(a, b, c) == lefton
    assert isright(a, b, c) == right
    assert isrighton(a, b, c) == righton


def test_sqdist():
    assert sqdist((1, 1), (4, 5)) == 25


def test_scalar_eq_uses_epsilon():
    assert EPSILON == 0.0001
    assert scalar_eq(1.0, 1.00005)
    assert not scalar_eq(1.0, 1.001)
    assert scalar_eq(1.0, 1.001, precision=0.01)


def test_lineint_crossing():
    assert lineint((0, 0), (2, 2), (0, 2), (2, 0)) == Point(1, 1)


def test_lineint_extends_beyond_points():
    p = lineint((0, 0), (1, 1), (0, 4), (4, 3.9999))
    assert p[0] == pytest.approx(p[1])
    assert p[0] > 1


def test_lineint_parallel_returns_origin():
    assert lineint((0, 0), (1, 0), (0, 1), (1, 1)) == Point(0, 0)


def test_segmentintersect_crossing():
    found, p = segmentintersect((0, 0), (2, 2), (0, 2), (2, 0))
    assert found
    assert p == Point(1, 1)


def test_segmentintersect_outside_first_segment():
    found, p = segmentintersect((0, 0), (1, 1), (0, 4), (4, 0))
    assert not found
    assert p == Point(0, 0)

    found, p = segmentintersect((0, 0), (1, 1), (0, 4), (4, 0), firstissegment=False)
    assert found
    assert p == Point(2, 2)


def test_segmentintersect_outside_second_segment():
    found, p = segmentintersect((0, 4), (4, 0), (0, 0), (1, 1))
    assert not found

    found, p = segmentintersect((0, 4), (4, 0), (0, 0), (1, 1), secondissegment=False)
    assert found
    assert p == Point(2, 2)


def test_segmentintersect_parallel():
    found, p = segmentintersect((0, 0), (1, 0), (0, 1), (1, 1))
    assert not found


def test_segmentintersect_near_parallel_depends_on_precision():
    args = ((0, 0), (1, 0), (0, 1), (1, 1.00001))
    found, p = segmentintersect(*args, firstissegment=False, secondissegment=False)
    assert not found

    found, p = segmentintersect(*args, firstissegment=False, secondissegment=False, precision=1e-9)
    assert found


def test_segmentintersect_shared_start_is_not_a_collision():
    found, p = segmentintersect((0, 0), (1, 1), (0, 0), (1, 0))
    assert not found


def test_segmentintersect_touching_end():
    found, p = segmentintersect((0, 0), (1, 1), (1, 1), (2, 0))
    assert found
    assert p == Point(1, 1)


def test_polyat_wraps(square):
    assert polyat(square, 0) == square[0]
    assert polyat(square, -1) == square[3]
    assert polyat(square, 5) == square[1]
    assert polyat(square, -5) == square[3]


def test_polycopy(square):
    assert polycopy(square, 1, 2) == [square[1], square[2]]
    assert polycopy(square, 2, 0) == [square[2], square[3], square[0]]
    assert polycopy(square, 3, 5) == [square[3], square[0], square[1]]


def test_polyisreflex(lshape):
    assert [polyisreflex(lshape, i) for i in range(len(lshape))] == [False, False, False, True, False, False]


def test_polyisconvex(square, lshape):
    assert polyisconvex(square)
    assert not polyisconvex(lshape)


def test_polysignarea(square, lshape):
    assert polysignarea(square) == 16
    assert polysignarea(square[::-1]) == -16
    assert polyarea(square[::-1]) == 16
    assert polyarea(np.array(lshape)) == 12


def test_ispolycw(square):
    assert not ispolycw(square)
    assert ispolycw(square[::-1])


def test_inpolygon(lshape):
    I = inpolygon(lshape, np.array([[1, 1], [3, 1], [1, 3], [3, 3]]))
    assert I.tolist() == [True, True, True, False]
