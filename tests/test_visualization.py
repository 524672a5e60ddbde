import matplotlib.pyplot as plt
import pytest

from cvxdecomp_lib import decompose
from visualization import visualize_decomposition


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_one_patch_per_piece_plus_outline(cshape):
    pieces = decompose(cshape)
    ax = visualize_decomposition(cshape, pieces)
    assert len(ax.patches) == len(pieces) + 1


def test_draws_on_given_axes(lshape):
    fig, ax = plt.subplots()
    assert visualize_decomposition(lshape, decompose(lshape), ax=ax) is ax


def test_steiner_points_are_marked(vnotch, lshape):
    ax = visualize_decomposition(vnotch, decompose(vnotch))
    stars = [line for line in ax.lines if line.get_marker() == '*']
    assert len(stars) == 1
    assert list(stars[0].get_xdata()) == [5, 5]

    ax = visualize_decomposition(lshape, decompose(lshape))
    assert not [line for line in ax.lines if line.get_marker() == '*']


def test_vertices_can_be_hidden(lshape):
    ax = visualize_decomposition(lshape, decompose(lshape), show_vertices=False)
    assert len(ax.lines) == 0
