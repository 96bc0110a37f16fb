"""
Point record conversion and loading tests.
"""

import json

import numpy as np
import pytest

from trajectory_recon import (
    DataIntegrityError,
    PointType,
    load_points,
    points_from_records,
    points_to_records,
    trajectory_arrays
)

from conftest import make_point


def test_flat_and_nested_records_are_equivalent():
    flat = points_from_records([{'ts': 1, 'x': 2, 'y': 3, 'z': 4, 'type': 'node'}])
    nested = points_from_records([{'ts': 1, 'pos': {'x': 2, 'y': 3, 'z': 4}, 'type': 'node'}])

    assert flat == nested
    assert flat[0].type == PointType.NODE
    assert flat[0].position == (2.0, 3.0, 4.0)


def test_spline_label_is_not_accepted_as_input():
    with pytest.raises(DataIntegrityError, match="reserved"):
        points_from_records([{'ts': 0, 'x': 0, 'y': 0, 'z': 0, 'type': 'spline'}])


def test_unknown_label_is_rejected():
    with pytest.raises(DataIntegrityError, match="unknown point type"):
        points_from_records([{'ts': 0, 'x': 0, 'y': 0, 'z': 0, 'type': 'ghost'}])


def test_missing_coordinate_is_rejected():
    with pytest.raises(DataIntegrityError, match="Record 1"):
        points_from_records([
            {'ts': 0, 'x': 0, 'y': 0, 'z': 0, 'type': 'node'},
            {'ts': 1, 'x': 0, 'y': 0, 'type': 'pred'},
        ])


def test_non_numeric_timestamp_is_rejected():
    with pytest.raises(DataIntegrityError, match="Record 0"):
        points_from_records([{'ts': 'abc', 'x': 0, 'y': 0, 'z': 0, 'type': 'node'}])


def test_non_object_record_is_rejected():
    with pytest.raises(DataIntegrityError, match="expected an object"):
        points_from_records([[0, 1, 2, 3, 'node']])


def test_non_object_pos_is_rejected():
    with pytest.raises(DataIntegrityError, match="'pos'"):
        points_from_records([{'ts': 0, 'pos': [1, 2, 3], 'type': 'node'}])


def test_to_records_uses_label_values(example_points):
    records = points_to_records(example_points)

    assert records[0] == {'ts': 0.0, 'x': 0.0, 'y': 0.0, 'z': 5.0, 'type': 'node'}
    assert [r['type'] for r in records] == ['node', 'node', 'node', 'pred', 'pred']


def test_load_points_from_positions_object(tmp_path, example_records):
    path = tmp_path / 'positions.json'
    path.write_text(json.dumps(example_records))

    points = load_points(path)

    assert len(points) == 5
    assert points[3] == make_point(5, 5, 5, 0, 'pred')


def test_load_points_from_list(tmp_path):
    path = tmp_path / 'points.json'
    path.write_text(json.dumps([{'ts': 0.5, 'x': 1, 'y': 2, 'z': 3, 'type': 'pred'}]))

    assert load_points(path) == [make_point(0.5, 1, 2, 3, 'pred')]


def test_load_points_requires_positions_key(tmp_path):
    path = tmp_path / 'bad.json'
    path.write_text(json.dumps({'points': []}))

    with pytest.raises(DataIntegrityError, match="positions"):
        load_points(path)


@pytest.mark.parametrize('payload', [{'positions': 5}, 42, 'positions'])
def test_load_points_requires_record_list(tmp_path, payload):
    path = tmp_path / 'bad.json'
    path.write_text(json.dumps(payload))

    with pytest.raises(DataIntegrityError, match="list of point records"):
        load_points(path)


def test_trajectory_arrays_follow_point_order(example_points):
    xs, ys, zs = trajectory_arrays(example_points)

    np.testing.assert_array_equal(xs, [0, 1, 2, 5, 6])
    np.testing.assert_array_equal(ys, [0, 1, 2, 5, 6])
    np.testing.assert_array_equal(zs, [5, 4, 3, 0, 1])
