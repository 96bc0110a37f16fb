"""
Shared fixtures for trajectory reconstruction tests.
"""

import matplotlib

matplotlib.use('Agg')

import pytest

from trajectory_recon import Point, PointType


def make_point(ts, x, y, z, label='node'):
    return Point(ts=float(ts), x=float(x), y=float(y), z=float(z), type=PointType(label))


@pytest.fixture
def example_points():
    """Three node points and two pred points around the gap [2, 5]."""
    return [
        make_point(0, 0, 0, 5, 'node'),
        make_point(1, 1, 1, 4, 'node'),
        make_point(2, 2, 2, 3, 'node'),
        make_point(5, 5, 5, 0, 'pred'),
        make_point(6, 6, 6, 1, 'pred'),
    ]


@pytest.fixture
def example_records():
    """The example trajectory in the nested capture layout."""
    return {
        'positions': [
            {'ts': 0, 'pos': {'x': 0, 'y': 0, 'z': 5}, 'type': 'node'},
            {'ts': 1, 'pos': {'x': 1, 'y': 1, 'z': 4}, 'type': 'node'},
            {'ts': 2, 'pos': {'x': 2, 'y': 2, 'z': 3}, 'type': 'node'},
            {'ts': 5, 'pos': {'x': 5, 'y': 5, 'z': 0}, 'type': 'pred'},
            {'ts': 6, 'pos': {'x': 6, 'y': 6, 'z': 1}, 'type': 'pred'},
        ]
    }
