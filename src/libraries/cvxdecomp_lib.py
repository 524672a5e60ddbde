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

import logging
import numpy as np
from shapely.geometry import Polygon
from shapely.ops import unary_union

from cvxgeom_lib import EPSILON, Point, isleft, islefton, isright, isrighton, sqdist
from cvxgeom_lib import lineint, segmentintersect, polyat, polyisreflex, polycopy, polyisconvex, polyarea

logger = logging.getLogger(__name__)


# Max amount of vertices per output polygon (8 is the Box2D limit)
MAX_VERTICES = 8


class DecompositionError(Exception):
    """Base class for the errors raised while decomposing a polygon."""
    pass


class InvalidPolygonError(DecompositionError, ValueError):
    """Raised when the input cannot be decomposed at all (too few vertices, zero area, bad shape)."""
    pass


class InvalidParamsError(DecompositionError, ValueError):
    pass


def default_params():
    """
    Returns a fresh dictionary with the default decomposition options:
        1) 'max_vertices': Maximum number of vertices of each output polygon
        2) 'epsilon': Tolerance for parallel lines, float equality and the zero-area check
    """
    DecompParams = dict()
    DecompParams['max_vertices'] = MAX_VERTICES
    DecompParams['epsilon'] = EPSILON
    return DecompParams


def unpackparams(DecompParams=None):
    """
    Merges user options over the defaults and checks them.

    Input:
        DecompParams : Partial or complete dictionary of options (or None)

    Output:
        Complete dictionary of options
    """
    params = default_params()
    if DecompParams is not None:
        unknown = sorted(set(DecompParams) - set(params))
        if unknown:
            raise InvalidParamsError("Unknown decomposition options: %s" % ", ".join(unknown))
        params.update(DecompParams)

    if params['max_vertices'] < 3:
        raise InvalidParamsError("max_vertices must be at least 3, got %r" % (params['max_vertices'],))
    if not params['epsilon'] > 0:
        raise InvalidParamsError("epsilon must be positive, got %r" % (params['epsilon'],))

    return params


def polyvalidate(polygon, epsilon=EPSILON):
    """
    Converts the input into a list of Points and rejects inputs that cannot
    be decomposed. A closing vertex equal to the first one is dropped.

    Input:
        polygon : Vertex coordinates (Nx2 array-like)
        epsilon : Tolerance for the zero-area check, relative to the squared bounding box diagonal

    Output:
        List of Points
    """
    xy = np.asarray(polygon, dtype=float)
    if xy.ndim != 2 or xy.shape[1] != 2:
        raise InvalidPolygonError("Expected an Nx2 sequence of vertices, got shape %s" % (xy.shape,))
    if not np.all(np.isfinite(xy)):
        raise InvalidPolygonError("Vertex coordinates must be finite")

    # Closed rings repeat the first vertex at the end
    if xy.shape[0] > 1 and (xy[0] == xy[-1]).all():
        xy = xy[0:-1]

    if xy.shape[0] < 3:
        raise InvalidPolygonError("A polygon needs at least 3 vertices, got %d" % xy.shape[0])
    # zero area relative to the size of the bounding box
    extent = np.sum((xy.max(axis=0) - xy.min(axis=0))**2)
    if polyarea(xy) <= epsilon * extent:
        raise InvalidPolygonError("Polygon has zero area (all vertices collinear)")

    return [Point(float(x), float(y)) for x, y in xy]


def polycansee(polygon, i, j, precision=EPSILON):
    """Checks if two vertices in the polygon can see each other.

    Input:
        polygon : The polygon
        i : Vertex 1
        j : Vertex 2
        precision : precision to check if lines are parallel

    Output:
        True if vertices can see each other
    """
    n = len(polygon)
    i = i % n
    j = j % n

    # the diagonal has to leave each endpoint through its interior angle
    if polyisreflex(polygon, i):
        if islefton(polyat(polygon, i), polyat(polygon, i - 1), polyat(polygon, j)) and isrighton(polyat(polygon, i), polyat(polygon, i + 1), polyat(polygon, j)):
            return False
    else:
        if isrighton(polyat(polygon, i), polyat(polygon, i + 1), polyat(polygon, j)) or islefton(polyat(polygon, i), polyat(polygon, i - 1), polyat(polygon, j)):
            return False

    if polyisreflex(polygon, j):
        if islefton(polyat(polygon, j), polyat(polygon, j - 1), polyat(polygon, i)) and isrighton(polyat(polygon, j), polyat(polygon, j + 1), polyat(polygon, i)):
            return False
    else:
        if isrighton(polyat(polygon, j), polyat(polygon, j + 1), polyat(polygon, i)) or islefton(polyat(polygon, j), polyat(polygon, j - 1), polyat(polygon, i)):
            return False

    for k in range(0, n): # for each edge
        if (k + 1) % n == i or k == i or (k + 1) % n == j or k == j: # ignore incident edges
            continue

        found, p = segmentintersect(polyat(polygon, i), polyat(polygon, j), polyat(polygon, k), polyat(polygon, k + 1), precision=precision)
        if found:
            return False

    return True


def polycrossings(polygon, i, precision=EPSILON):
    """
    Extends the two edges at the reflex vertex i into the polygon and finds
    the closest edges they hit.

    Input:
        polygon : The polygon
        i : Index of a reflex vertex
        precision : precision to check if lines are parallel

    Output:
        lowerIndex, lowerInt : Closest edge (by its end vertex) hit by the extension of edge (i-1, i), and the hit point
        upperIndex, upperInt : Closest edge (by its start vertex) hit by the extension of edge (i+1, i), and the hit point
    """
    lowerIndex = 0
    upperIndex = 0
    lowerInt = Point(0., 0.)
    upperInt = Point(0., 0.)
    lowerDist = float('inf')
    upperDist = float('inf')

    for j in range(0, len(polygon)):
        if isleft(polyat(polygon, i - 1), polyat(polygon, i), polyat(polygon, j)) and isrighton(polyat(polygon, i - 1), polyat(polygon, i), polyat(polygon, j - 1)): # if line intersects with an edge
            p = lineint(polyat(polygon, i - 1), polyat(polygon, i), polyat(polygon, j), polyat(polygon, j - 1), precision) # find the point of intersection
            if isright(polyat(polygon, i + 1), polyat(polygon, i), p): # make sure it's inside the poly
                d = sqdist(polyat(polygon, i), p)
                if d < lowerDist: # keep only the closest intersection
                    lowerDist = d
                    lowerInt = p
                    lowerIndex = j

        if isleft(polyat(polygon, i + 1), polyat(polygon, i), polyat(polygon, j + 1)) and isrighton(polyat(polygon, i + 1), polyat(polygon, i), polyat(polygon, j)):
            p = lineint(polyat(polygon, i + 1), polyat(polygon, i), polyat(polygon, j), polyat(polygon, j + 1), precision)
            if isleft(polyat(polygon, i - 1), polyat(polygon, i), p):
                d = sqdist(polyat(polygon, i), p)
                if d < upperDist:
                    upperDist = d
                    upperInt = p
                    upperIndex = j

    return lowerIndex, lowerInt, upperIndex, upperInt


def polybestdiagonal(polygon, i, lowerIndex, upperIndex, precision=EPSILON):
    """
    Picks the vertex between lowerIndex and upperIndex that the reflex vertex i
    should be connected to. Visible vertices are scored by closeness, with a
    bonus for reflex vertices that the diagonal also resolves.

    Output:
        Index of the best vertex (lowerIndex if none is visible); it may exceed
        the polygon length and is meant for polycopy
    """
    while upperIndex < lowerIndex:
        upperIndex += len(polygon)

    highestScore = 0.
    bestIndex = lowerIndex
    for j in range(lowerIndex, upperIndex + 1):
        if not polycansee(polygon, i, j, precision):
            continue

        score = 1. / (sqdist(polyat(polygon, i), polyat(polygon, j)) + 1)
        if polyisreflex(polygon, j):
            if isrighton(polyat(polygon, j - 1), polyat(polygon, j), polyat(polygon, i)) and islefton(polyat(polygon, j + 1), polyat(polygon, j), polyat(polygon, i)):
                score += 3
            else:
                score += 2
        else:
            score += 1

        # ties keep the first vertex found
        if score > highestScore:
            bestIndex = j
            highestScore = score

    return bestIndex


def polysplit(polygon, maxvertices=MAX_VERTICES, precision=EPSILON):
    """
    Splits the polygon once: at its first reflex vertex, or in half by index
    if it is convex but has more than maxvertices vertices.

    Input:
        polygon : The polygon to split (list of Points, counter-clockwise)
        maxvertices : Maximum number of vertices of each output polygon
        precision : precision to check if lines are parallel

    Output:
        (lowerPoly, upperPoly), or None if the polygon is a final convex piece
    """
    for i in range(0, len(polygon)):
        if not polyisreflex(polygon, i):
            continue

        lowerIndex, lowerInt, upperIndex, upperInt = polycrossings(polygon, i, precision)

        # if there are no vertices to connect to, choose a point in the middle
        if lowerIndex == (upperIndex + 1) % len(polygon):
            p = (lowerInt + upperInt) / 2.
            lowerPoly = polycopy(polygon, i, upperIndex)
            lowerPoly.append(p)
            upperPoly = polycopy(polygon, lowerIndex, i)
            upperPoly.append(p)
            logger.debug("Reflex vertex %d split through Steiner point (%g, %g)", i, p[0], p[1])
        else:
            bestIndex = polybestdiagonal(polygon, i, lowerIndex, upperIndex, precision)
            lowerPoly = polycopy(polygon, i, bestIndex)
            upperPoly = polycopy(polygon, bestIndex, i)
            logger.debug("Reflex vertex %d connected to vertex %d", i, bestIndex % len(polygon))

        return lowerPoly, upperPoly

    # polygon is already convex
    if len(polygon) > maxvertices:
        half = len(polygon) // 2
        logger.debug("Splitting convex polygon with %d vertices at vertex %d", len(polygon), half)
        return polycopy(polygon, 0, half), polycopy(polygon, half, 0)

    return None


def polycvxdecomp(polygon, maxvertices=MAX_VERTICES, precision=EPSILON):
    """Decompose the polygon into convex sub-polygons. Algorithm based on Mark Bayazit's polygon decomposition.

    Pending sub-polygons are kept on an explicit stack, so the number of
    splits is not limited by the interpreter's recursion limit. Every split
    of a simple counter-clockwise polygon yields two pieces with at least 3
    and fewer vertices than their parent; anything else means the input is
    malformed (self-intersecting or clockwise) and DecompositionError is raised.

    Input:
        polygon : The polygon to decompose (list of Points, counter-clockwise)
        maxvertices : Maximum number of vertices of each output polygon
        precision : precision to check if lines are parallel

    Output:
        List of decomposed convex polygons, lower pieces before upper pieces
    """
    if len(polygon) < 3:
        raise DecompositionError("Cannot decompose a polygon with %d vertices" % len(polygon))

    pieces = []
    stack = [(polygon, 0)]
    while stack:
        current, level = stack.pop()
        subpolygons = polysplit(current, maxvertices, precision)
        if subpolygons is None:
            logger.debug("Level %d: convex piece with %d vertices", level, len(current))
            pieces.append(current)
            continue

        lowerPoly, upperPoly = subpolygons
        logger.debug("Level %d: sub-polygons with %d and %d vertices", level, len(lowerPoly), len(upperPoly))
        for sub in (lowerPoly, upperPoly):
            if len(sub) < 3 or len(sub) >= len(current):
                logger.error("Splitting a %d-vertex polygon produced a %d-vertex piece", len(current), len(sub))
                raise DecompositionError("Splitting a %d-vertex polygon produced a %d-vertex piece; "
                                         "the input is not a simple counter-clockwise polygon" % (len(current), len(sub)))

        # lower is pushed last so that it is processed first
        stack.append((upperPoly, level + 1))
        stack.append((lowerPoly, level + 1))

    return pieces


def decompose(polygon, DecompParams=None):
    """
    Decomposes a simple polygon into convex sub-polygons.

    Input:
        polygon : Vertex coordinates of a simple polygon in counter-clockwise order
                  (Nx2 array-like, list of tuples or Points; a closed ring is accepted)
        DecompParams : Options for the decomposition (see default_params)

    Output:
        List of convex polygons, each a list of Points with at most
        DecompParams['max_vertices'] vertices

    Usage:
        from cvxdecomp_lib import decompose
        pieces = decompose([(0,0),(4,0),(4,2),(2,2),(2,4),(0,4)])
    """
    params = unpackparams(DecompParams)
    vertices = polyvalidate(polygon, params['epsilon'])

    pieces = polycvxdecomp(vertices, params['max_vertices'], params['epsilon'])
    logger.debug("Decomposed %d-vertex polygon into %d convex pieces", len(vertices), len(pieces))

    return pieces


def polyconvexdecomposition(xy, DecompParams=None):
    """
    Numpy front end of decompose.

    Input:
        xy : Vertex Coordinates of input polygon - start and end vertices may be the same
             (Nx2 numpy.array)
        DecompParams : Options for the decomposition (see default_params)

    Output:
        List of convex polygons (Mx2 numpy.array), start and end vertices are NOT the same
    """
    return [np.array(piece, dtype=float).reshape(-1,2) for piece in decompose(xy, DecompParams)]


def verifydecomposition(polygon, pieces, DecompParams=None):
    """
    Checks that a list of pieces is a convex partition of the polygon.

    Input:
        polygon : The decomposed polygon
        pieces : The output of decompose
        DecompParams : Options used for the decomposition

    Output:
        report : dictionary with
                    1) 'area_error': difference between the polygon area and the total area of the pieces
                    2) 'overlap_area': total area of the pairwise intersections of the pieces
                    3) 'union_error': area of the symmetric difference between the polygon and the union of the pieces
                    4) 'convex': True if no piece has a reflex vertex
                    5) 'within_cap': True if no piece exceeds max_vertices
                    6) 'valid': True if all of the above are within tolerance
    """
    params = unpackparams(DecompParams)
    vertices = polyvalidate(polygon, params['epsilon'])

    polygon_in = Polygon(vertices)
    polygon_pieces = [Polygon(piece) for piece in pieces]

    area_in = polyarea(vertices)
    area_error = abs(area_in - sum([polyarea(piece) for piece in pieces]))

    overlap_area = 0.
    for a in range(0, len(polygon_pieces)):
        for b in range(a + 1, len(polygon_pieces)):
            overlap_area += polygon_pieces[a].intersection(polygon_pieces[b]).area

    if polygon_pieces:
        union_error = polygon_in.symmetric_difference(unary_union(polygon_pieces)).area
    else:
        union_error = area_in

    report = dict()
    report['area_error'] = area_error
    report['overlap_area'] = overlap_area
    report['union_error'] = union_error
    report['convex'] = all([polyisconvex(piece) for piece in pieces])
    report['within_cap'] = all([len(piece) <= params['max_vertices'] for piece in pieces])

    # tolerance relative to the polygon area
    tolerance = params['epsilon'] * max(1., area_in)
    report['valid'] = (area_error <= tolerance and overlap_area <= tolerance and union_error <= tolerance
                       and report['convex'] and report['within_cap'])

    return report
