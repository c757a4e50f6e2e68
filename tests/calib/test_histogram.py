import math

import pytest

from varproc.calib.histogram import Histogram, Range


def build_histogram():
    # interior bins [2, 3, 5] over [0, 10)
    return Histogram.from_values(0.0, 10.0, [1.0, 2.0, 3.0, 5.0, 7.0])


def test_find_bin_maps_under_and_overflow():
    histogram = build_histogram()

    assert histogram.number_of_bins() == 3
    assert histogram.find_bin(-1.0) == 0
    assert histogram.find_bin(0.0) == 1
    assert histogram.find_bin(3.4) == 2
    assert histogram.find_bin(9.99) == 3
    assert histogram.find_bin(10.0) == 4
    assert histogram.find_bin(math.nan) == 0


def test_normalized_value_excludes_under_and_overflow():
    histogram = build_histogram()

    assert histogram.normalization() == pytest.approx(10.0)
    assert histogram.normalized_value(5.0) == pytest.approx(0.3)
    assert histogram.normalized_value(8.0) == pytest.approx(0.5)


def test_empty_histogram_normalizes_to_zero():
    histogram = Histogram.from_values(0.0, 1.0, [4.0, 0.0, 0.0, 4.0])

    assert histogram.normalized_value(0.5) == 0.0


def test_histogram_from_mapping_accepts_max():
    histogram = Histogram.from_mapping({"min": -1.0, "max": 3.0, "values": [0, 1, 1, 0]})

    assert histogram.range.width == pytest.approx(4.0)
    assert histogram.range.max == pytest.approx(3.0)


def test_histogram_values_are_read_only():
    histogram = build_histogram()

    with pytest.raises(ValueError):
        histogram.values[1] = 100.0


def test_invalid_calibration_is_rejected():
    with pytest.raises(ValueError):
        Range(0.0, 0.0)
    with pytest.raises(ValueError):
        Histogram.from_values(0.0, 1.0, [1.0, 2.0])
