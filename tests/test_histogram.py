"""Tests for fixed-range binning and the fitted normal overlay."""

import math

import pytest

from meansd.core.errors import InvalidParameterError
from meansd.core.model import Dataset
from meansd.stats.common.histogram import HistogramBinner
from meansd.stats.common.prng import SeededRandom
from meansd.stats.common.sampling import draw_normal


@pytest.fixture
def binner():
    return HistogramBinner(range_min=-50.0, range_max=80.0, bin_count=30)


@pytest.fixture
def samples():
    return draw_normal(400, 14.0, 23.1, SeededRandom(24))


def test_every_sample_is_counted(binner, samples):
    assert binner.bin(samples).total == len(samples)


def test_outliers_are_clamped_into_edge_bins(binner):
    hist = binner.bin([-1e9, -50.0, 79.999, 80.0, 1e9])
    assert hist.counts[0] == 2
    assert hist.counts[-1] == 3
    assert hist.total == 5


def test_bin_index_boundaries():
    binner = HistogramBinner(0.0, 10.0, 5)
    assert binner.bin_width == 2.0
    assert [binner.bin_index(v) for v in (0.0, 1.999, 2.0, 9.999, 10.0)] == [
        0, 0, 1, 4, 4
    ]


def test_infinities_clamp_and_nan_is_rejected(binner):
    assert binner.bin_index(math.inf) == binner.bin_count - 1
    assert binner.bin_index(-math.inf) == 0
    with pytest.raises(InvalidParameterError, match="NaN"):
        binner.bin([1.0, math.nan])


def test_rebinning_is_idempotent(binner, samples):
    assert binner.bin(samples) == binner.bin(samples)


def test_bin_does_not_modify_dataset(binner, samples):
    before = samples.values
    binner.bin(samples)
    assert samples.values == before


def test_growing_prefixes_only_add_counts(binner, samples):
    previous = binner.bin(samples.prefix(0)).counts
    for k in range(50, len(samples) + 1, 50):
        counts = binner.bin(samples.prefix(k)).counts
        assert sum(counts) == k
        assert all(c >= p for c, p in zip(counts, previous))
        previous = counts


def test_empty_dataset_gives_zero_counts(binner):
    hist = binner.bin(Dataset())
    assert hist.counts == (0,) * 30
    assert hist.max_count == 0


@pytest.mark.parametrize(
    "range_min, range_max, bin_count",
    [(0.0, 10.0, 0), (0.0, 10.0, -3), (10.0, 10.0, 5), (10.0, 0.0, 5), (0.0, math.inf, 5)],
)
def test_invalid_configuration(range_min, range_max, bin_count):
    with pytest.raises(InvalidParameterError):
        HistogramBinner(range_min, range_max, bin_count)


def test_edges_and_centers():
    binner = HistogramBinner(0.0, 10.0, 5)
    assert binner.edges() == (0.0, 2.0, 4.0, 6.0, 8.0, 10.0)
    assert binner.centers() == (1.0, 3.0, 5.0, 7.0, 9.0)
    hist = binner.bin([1.0])
    assert hist.edges() == binner.edges()
    assert hist.centers() == binner.centers()


def test_histogram_payload():
    payload = HistogramBinner(0.0, 10.0, 5).bin([1.0, 1.5]).to_payload()
    assert payload == {
        "range_min": 0.0,
        "range_max": 10.0,
        "bin_count": 5,
        "bin_width": 2.0,
        "counts": (2, 0, 0, 0, 0),
    }


def test_normal_curve_peaks_at_mean():
    binner = HistogramBinner(0.0, 100.0, 30)
    curve = binner.normal_curve(mean=50.0, sd=10.0, peak=12, points=200)
    assert len(curve) == 201
    assert curve[0][0] == 0.0
    assert curve[-1][0] == pytest.approx(100.0)
    assert curve[100] == (50.0, 12.0)
    assert max(y for _, y in curve) == 12.0
    assert curve[80][1] == pytest.approx(curve[120][1])


def test_normal_curve_with_zero_sd_is_a_spike():
    binner = HistogramBinner(0.0, 100.0, 30)
    curve = binner.normal_curve(mean=50.0, sd=0.0, peak=4, points=200)
    assert [x for x, y in curve if y > 0] == [50.0]


def test_normal_curve_rejects_negative_sd():
    with pytest.raises(InvalidParameterError):
        HistogramBinner(0.0, 1.0, 2).normal_curve(0.5, -1.0, 1)
