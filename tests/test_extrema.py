import pytest

from touchstone_reader.datapoint import DataPoint, MeasurementPair
from touchstone_reader.errors import EmptyDataset
from touchstone_reader.extrema import Extrema


def _point(freq, lhs, rhs, *extra):
    pairs = (MeasurementPair(lhs, rhs),) + tuple(MeasurementPair(a, b) for a, b in extra)
    return DataPoint(freq, pairs)


@pytest.mark.parametrize("name", ["min_freq", "max_freq", "min_lhs", "max_lhs", "min_rhs", "max_rhs"])
def test_unseeded_raises(name):
    with pytest.raises(EmptyDataset):
        getattr(Extrema(), name)


def test_first_point_seeds_everything():
    ext = Extrema()
    ext.update(_point(5.0, 0.3, -40.0))
    assert ext.seeded
    assert (ext.min_freq, ext.max_freq) == (5.0, 5.0)
    assert (ext.min_lhs, ext.max_lhs) == (0.3, 0.3)
    assert (ext.min_rhs, ext.max_rhs) == (-40.0, -40.0)


def test_bounds_every_point():
    points = [
        _point(2.0, 0.5, 10.0),
        _point(1.0, 0.9, -30.0),
        _point(3.0, 0.1, 5.0, (100.0, -100.0)),
    ]
    ext = Extrema.from_points(points)
    assert (ext.min_freq, ext.max_freq) == (1.0, 3.0)
    assert (ext.min_lhs, ext.max_lhs) == (0.1, 0.9)
    assert (ext.min_rhs, ext.max_rhs) == (-30.0, 10.0)
    for p in points:
        assert ext.min_freq <= p.frequency <= ext.max_freq
        assert ext.min_lhs <= p.pairs[0].lhs <= ext.max_lhs
        assert ext.min_rhs <= p.pairs[0].rhs <= ext.max_rhs


def test_only_first_pair_counts():
    ext = Extrema.from_points([_point(1.0, 0.0, 0.0, (99.0, -99.0))])
    assert ext.max_lhs == 0.0
    assert ext.min_rhs == 0.0
