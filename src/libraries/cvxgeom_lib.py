#!/usr/bin/env python

"""
MIT License (modified)

Copyright (c) 2020 The Trustees of the University of Pennsylvania
Authors:
Omur Arslan <omur@seas.upenn.edu>
Vasileios Vasilopoulos <vvasilo@seas.upenn.edu>

Permission is hereby granted, free of charge, to any person obtaining a copy
of this **file** (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

import numpy as np
import matplotlib.path as mpath
from collections import namedtuple


# Default tolerance for parallel-line tests and float equality
EPSILON = 0.0001


class Point(namedtuple('Point', ['x', 'y'])):
    """
    Immutable 2D point. Indexable as p[0], p[1] so that it can be mixed freely
    with [x, y] lists and numpy rows in the predicates below.
    """
    __slots__ = ()

    def __add__(self, other):
        return Point(self[0] + other[0], self[1] + other[1])

    def __truediv__(self, s):
        return Point(self[0] / s, self[1] / s)


def trianglearea(a, b, c):
    """Calculates the area of a triangle spanned by three points.
    Note that the area will be negative if the points are not given in counter-clockwise order.

    Input:
        a : First point
        b : Second point
        c : Third point

    Output:
        Area of triangle (twice the geometric area, signed)
    """
    return ((b[0] - a[0])*(c[1] - a[1]))-((c[0] - a[0])*(b[1] - a[1]))

def isleft(a, b, c):
    return trianglearea(a, b, c) > 0

def islefton(a, b, c):
    return trianglearea(a, b, c) >= 0

def isright(a, b, c):
    return trianglearea(a, b, c) < 0

def isrighton(a, b, c):
    return trianglearea(a, b, c) <= 0

def sqdist(a, b):
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dx * dx + dy * dy

def scalar_eq(a, b, precision=EPSILON):
    """Check if two scalars are equal.

    Input:
        a : first scalar
        b : second scalar
        precision : precision to check equality

    Output:
        True if scalars are equal
    """
    return abs(a - b) <= precision

def lineint(p1, p2, q1, q2, precision=EPSILON):
    """Compute the intersection between the infinite lines through (p1,p2) and (q1,q2).

    Input:
        p1, p2 : two points on the first line
        q1, q2 : two points on the second line
        precision : precision to check if lines are parallel (default EPSILON)

    Output:
        The intersection point, or the origin if the lines are parallel
    """
    a1 = p2[1] - p1[1]
    b1 = p1[0] - p2[0]
    c1 = a1 * p1[0] + b1 * p1[1]
    a2 = q2[1] - q1[1]
    b2 = q1[0] - q2[0]
    c2 = a2 * q1[0] + b2 * q1[1]
    det = a1 * b2 - a2 * b1
    if not scalar_eq(det, 0, precision): # lines are not parallel
        return Point((b2 * c1 - b1 * c2) / det, (a1 * c2 - a2 * c1) / det)
    return Point(0., 0.)

def segmentintersect(p1, p2, p3, p4, firstissegment=True, secondissegment=True, precision=EPSILON):
    """Intersects the line (or segment) p1-p2 with the line (or segment) p3-p4.

    Input:
        p1, p2 : start and end vertex of the first line
        p3, p4 : start and end vertex of the second line
        firstissegment : if True, the intersection must lie within p1-p2
        secondissegment : if True, the intersection must lie within p3-p4
        precision : precision to check if lines are parallel (default EPSILON)

    Output:
        found : True if there is an intersection
        point : The intersection point (the origin if not found)
    """
    a = p4[1] - p3[1]
    b = p2[0] - p1[0]
    c = p4[0] - p3[0]
    d = p2[1] - p1[1]

    # denominator of the linear system, zero for parallel lines
    denom = (a * b) - (c * d)
    if -precision <= denom <= precision:
        return False, Point(0., 0.)

    e = p1[1] - p3[1]
    f = p1[0] - p3[0]
    ua = ((c * e) - (a * f)) / denom
    if firstissegment and not (0. <= ua <= 1.):
        return False, Point(0., 0.)

    ub = ((b * e) - (d * f)) / denom
    if secondissegment and not (0. <= ub <= 1.):
        return False, Point(0., 0.)

    # coincident start points do not count as a collision
    if ua == 0. and ub == 0.:
        return False, Point(0., 0.)

    return True, Point(p1[0] + ua * b, p1[1] + ua * d)

def polyat(polygon, i):
    """Gets a vertex at position i on the polygon.
    It does not matter if i is out of bounds.

    Input:
        polygon : The polygon
        i : Position desired on the polygon

    Output:
        Vertex at position i
    """
    s = len(polygon)
    return polygon[i % s]

def polyisreflex(polygon, i):
    """Checks if a point in the polygon is a reflex point.

    Input:
        polygon : The polygon
        i : index of point to check

    Output:
        True is point is a reflex point
    """
    return isright(polyat(polygon, i - 1), polyat(polygon, i), polyat(polygon, i + 1))

def polycopy(polygon, i, j):
    """Copies the polygon from vertex i to vertex j, walking forward and wrapping around.

    Input:
        polygon : The source polygon
        i : start vertex
        j : end vertex (inclusive)

    Output:
        The resulting copy.
    """
    while j < i:
        j += len(polygon)
    return [polyat(polygon, k) for k in range(i, j+1)]

def polyisconvex(polygon):
    """Checks that no vertex of a counter-clockwise polygon is reflex."""
    for i in range(0, len(polygon)):
        if polyisreflex(polygon, i):
            return False
    return True

def polysignarea(xy):
    """
    polysignarea(xy) determines the signed area of a non-self-intersecting
    polygon with vertices xy

    Input:
        xy   : Vertex coordinated of a non-self-intersecting polygon
               (Nx2 numpy.array)
    Output:
        area : Signed area of the polygon (positive if counter-clockwise)
    Usage:
        import numpy as np
        from cvxgeom_lib import polysignarea
        xy = np.array([[0,0],[1,0],[0,1]])
        area = polysignarea(xy)
    """
    xy = np.asarray(xy, dtype=float).reshape(-1,2) # Convert the input data into a 2D array
    xyNext = np.roll(xy, -1, axis=0)
    area = np.sum(xy[:,0]*xyNext[:,1] - xyNext[:,0]*xy[:,1])

    return 0.5*area

def polyarea(xy):
    """
    polyarea(xy) determines the area of a non-self-intersecting polygon
    with vertices xy
    """
    return abs(polysignarea(xy))

def ispolycw(xy):
    """
    ispolycw(xy) determines if the vertices, xy, of a non-self-intersecting polygon
    are in clockwise order. Its computation is based on the signed are of the polygon.

    Input:
        xy : Vertex coordinated of a non-self-intersecting polygon
             (Nx2 numpy.array)
    Output:
        cw : a boolean variable which is True if the input polygon is in clockwise order
    """
    return (polysignarea(xy) <= 0)

def inpolygon(xy, p):
    """
    inpolygon(xy, p) determines if a given set of points, p, are contained in
    a polygon, with vertex set xy.
    Input:
        xy : Vertex coordinates of a polygon
              (Nx2 numpy.array)
        p  : Coordinates of a set of points
              (Mx2 numpy.array)
    Output:
        I  : a boolean array indicating which points are contained in the polygon
    """

    # Convert input data into 2D arrays
    xy = np.asarray(xy, dtype=float).reshape(-1,2)
    p = np.asarray(p, dtype=float).reshape(-1,2)

    # Create a path decribing the polygon and check if each point is contained in the polygon
    polypath = mpath.Path(xy)
    I = polypath.contains_points(p)

    return I
