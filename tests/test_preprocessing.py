"""
Cleaning and segmentation tests.
"""

import math

import pytest

from trajectory_recon import DataIntegrityError, PointType, PreconditionError
from trajectory_recon.data_processing import PointSetCleaner, SegmentClassifier

from conftest import make_point


def test_duplicate_timestamp_keeps_last_point():
    """Two points at ts=0: only the later one survives."""
    first = make_point(0, 1, 1, 1)
    second = make_point(0, 9, 8, 7)
    third = make_point(1, 2, 2, 2)

    cleaned = PointSetCleaner().clean([first, second, third])

    assert [p.ts for p in cleaned] == [0.0, 1.0]
    assert cleaned[0] is second
    assert cleaned[0].position == (9.0, 8.0, 7.0)


def test_duplicate_across_labels_keeps_last_label():
    cleaned = PointSetCleaner().clean([make_point(3, 0, 0, 0, 'node'), make_point(3, 1, 1, 1, 'pred')])

    assert len(cleaned) == 1
    assert cleaned[0].type == PointType.PRED


def test_cleaned_points_are_strictly_increasing():
    raw = [make_point(ts, ts, 0, 1) for ts in [4, 1, 3, 1, 0, 2.5, 4, 7]]

    cleaned = PointSetCleaner().clean(raw)
    timestamps = [p.ts for p in cleaned]

    assert timestamps == [0.0, 1.0, 2.5, 3.0, 4.0, 7.0]
    assert all(a < b for a, b in zip(timestamps, timestamps[1:]))


def test_clean_does_not_modify_input():
    raw = [make_point(2, 0, 0, 0), make_point(1, 0, 0, 0), make_point(2, 5, 5, 5)]
    snapshot = list(raw)

    PointSetCleaner().clean(raw)

    assert raw == snapshot


def test_nan_timestamp_is_rejected():
    raw = [make_point(0, 0, 0, 0), make_point(math.nan, 1, 1, 1), make_point(2, 2, 2, 2)]

    with pytest.raises(DataIntegrityError):
        PointSetCleaner().clean(raw)


@pytest.mark.parametrize('bad', [
    make_point(math.inf, 1, 1, 1),
    make_point(1, math.nan, 1, 1),
    make_point(1, 1, -math.inf, 1),
])
def test_non_finite_values_are_rejected(bad):
    raw = [make_point(0, 0, 0, 0), bad, make_point(2, 2, 2, 2)]

    with pytest.raises(DataIntegrityError, match="non-finite"):
        PointSetCleaner().clean(raw)


def test_check_strictly_increasing_rejects_equal_neighbours():
    points = [make_point(1, 0, 0, 0), make_point(1, 1, 1, 1)]

    with pytest.raises(DataIntegrityError, match="index 1"):
        PointSetCleaner.check_strictly_increasing(points)


def test_classify_preserves_order(example_points):
    segments = SegmentClassifier().classify(example_points)

    assert [p.ts for p in segments.nodes] == [0.0, 1.0, 2.0]
    assert [p.ts for p in segments.preds] == [5.0, 6.0]


def test_locate_gap(example_points):
    classifier = SegmentClassifier()

    assert classifier.locate_gap(classifier.classify(example_points)) == (2.0, 5.0)


def test_locate_gap_without_nodes():
    classifier = SegmentClassifier()
    segments = classifier.classify([make_point(5, 0, 0, 0, 'pred')])

    with pytest.raises(PreconditionError, match="node"):
        classifier.locate_gap(segments)


def test_locate_gap_without_preds():
    classifier = SegmentClassifier()
    segments = classifier.classify([make_point(0, 0, 0, 0, 'node')])

    with pytest.raises(PreconditionError, match="pred"):
        classifier.locate_gap(segments)
