import math

import matplotlib
matplotlib.use('Agg')

import pytest


@pytest.fixture
def square():
    return [(0, 0), (4, 0), (4, 4), (0, 4)]


@pytest.fixture
def lshape():
    # single reflex vertex at (2,2)
    return [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4)]


@pytest.fixture
def cshape():
    return [(0, 0), (5, 0), (5, 5), (0, 5), (0, 4), (4, 4), (4, 1), (0, 1)]


@pytest.fixture
def vnotch():
    # both edges at the notch tip hit the bottom edge, no vertex in between
    return [(0, 0), (10, 0), (10, 10), (6, 10), (5, 5), (4, 10), (0, 10)]


@pytest.fixture
def dodecagon():
    return [(10 * math.cos(2 * math.pi * k / 12), 10 * math.sin(2 * math.pi * k / 12)) for k in range(12)]
