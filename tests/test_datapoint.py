import math

import numpy as np
import pytest

from touchstone_reader.datapoint import DataPoint, MeasurementPair, Side, convert_pair
from touchstone_reader.options import FrequencyUnit, Options, ParameterFormat


def test_side_selects_component():
    pair = MeasurementPair(0.5, -10.0)
    assert pair.component(Side.LHS) == 0.5
    assert pair.component(Side.RHS) == -10.0


def test_pair_to_complex():
    assert MeasurementPair(0.3, 0.4).to_complex(ParameterFormat.RI) == pytest.approx(0.3 + 0.4j)
    assert MeasurementPair(2.0, 90.0).to_complex(ParameterFormat.MA) == pytest.approx(2j)
    assert MeasurementPair(-20.0, 180.0).to_complex(ParameterFormat.DB) == pytest.approx(-0.1)


def test_convert_between_formats():
    ri = MeasurementPair(0.0, 1.0)
    ma = convert_pair(ri, ParameterFormat.RI, ParameterFormat.MA)
    assert ma.lhs == pytest.approx(1.0)
    assert ma.rhs == pytest.approx(90.0)

    db = convert_pair(ma, ParameterFormat.MA, ParameterFormat.DB)
    assert db.lhs == pytest.approx(0.0)
    assert db.rhs == ma.rhs

    back = convert_pair(db, ParameterFormat.DB, ParameterFormat.RI)
    assert back.lhs == pytest.approx(0.0, abs=1e-12)
    assert back.rhs == pytest.approx(1.0)

    assert convert_pair(ri, ParameterFormat.RI, ParameterFormat.RI) is ri


def test_zero_magnitude_in_db_is_negative_infinity():
    db = convert_pair(MeasurementPair(0.0, 0.0), ParameterFormat.RI, ParameterFormat.DB)
    assert db.lhs == -math.inf


def test_frequency_hz_uses_option_unit():
    point = DataPoint(2.5, (MeasurementPair(1.0, 0.0),))
    assert point.frequency_hz(Options()) == 2.5e9
    assert point.frequency_hz(Options(frequency_unit=FrequencyUnit.KHZ)) == 2500.0


@pytest.mark.parametrize("n_pairs, ports", [(1, 1), (4, 2), (9, 3), (16, 4), (2, None), (3, None)])
def test_num_ports_from_pair_count(n_pairs, ports):
    point = DataPoint(1.0, tuple(MeasurementPair(0.0, 0.0) for _ in range(n_pairs)))
    assert point.num_ports == ports


def test_point_to_complex_vector():
    point = DataPoint(1.0, (MeasurementPair(1.0, 0.0), MeasurementPair(1.0, 180.0)))
    np.testing.assert_allclose(point.to_complex(ParameterFormat.MA), [1.0, -1.0], atol=1e-12)


def test_points_are_immutable():
    point = DataPoint(1.0, (MeasurementPair(1.0, 0.0),))
    with pytest.raises(AttributeError):
        point.frequency = 2.0


def test_component_rejects_non_side():
    with pytest.raises(TypeError):
        MeasurementPair(0.5, -10.0).component("LHS")
