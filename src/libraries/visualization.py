"""
MIT License (modified)

Copyright (c) 2020 The Trustees of the University of Pennsylvania
Authors:
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

import numpy
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from cvxdecomp_lib import polyvalidate


PIECE_COLORS = ['#FFCC00', '#66CCFF', '#99CC66', '#FF9966', '#CC99FF', '#FF6699']


def visualize_decomposition(Polygon, Pieces, ax=None, show_vertices=True):
	"""
	Function that draws a polygon and its convex decomposition
	
	Input:
		1) Polygon: Vertex Coordinates of the decomposed polygon - Nx2 numpy.array or list of points
		2) Pieces: Convex pieces returned by the decomposition - M-member list of Kx2 point lists
		3) ax: matplotlib Axes to draw on (a new figure is created if None)
		4) show_vertices: Flag that is True if the piece vertices and the Steiner points should be marked
	
	Output:
		1) ax: The Axes containing the plot
	
	Test:
		import matplotlib.pyplot as plt
		import visualization
		from cvxdecomp_lib import decompose
		xy = [(0,0),(5,0),(5,5),(0,5),(0,4),(4,4),(4,1),(0,1)]
		ax = visualization.visualize_decomposition(xy, decompose(xy))
		plt.show()
	"""
	vertices = numpy.array(polyvalidate(Polygon))
	if ax is None:
		fig = plt.figure()
		ax = fig.add_subplot(1,1,1)

	# One filled patch per convex piece, colors cycling
	for i in range(len(Pieces)):
		piece = numpy.array(Pieces[i], dtype=float).reshape(-1,2)
		ax.add_patch(mpatches.Polygon(piece, closed=True, facecolor=PIECE_COLORS[i % len(PIECE_COLORS)], edgecolor='k', alpha=0.6))

	# Outline of the input polygon on top
	ax.add_patch(mpatches.Polygon(vertices, closed=True, fill=False, edgecolor='b', linewidth=2))

	if show_vertices and len(Pieces) > 0:
		piece_vertices = numpy.vstack([numpy.array(piece, dtype=float).reshape(-1,2) for piece in Pieces])
		ax.plot(piece_vertices[:,0], piece_vertices[:,1], 'k.')

		# Steiner points are piece vertices that are not input vertices
		is_steiner = numpy.array([not (numpy.abs(vertices - v) < 1e-9).all(axis=1).any() for v in piece_vertices])
		if is_steiner.any():
			ax.plot(piece_vertices[is_steiner,0], piece_vertices[is_steiner,1], 'r*', markersize=10)

	ax.autoscale_view()
	ax.axis('equal')
	return ax
