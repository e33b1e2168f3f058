"""Tests for nice thresholds and the closed-upper bin convention."""

import numpy as np
import pytest

from morphax.data import Point
from morphax.layout import assign_bins, bin_edges, bin_points, threshold_ticks


class TestThresholds:
    """d3-compatible tick generation."""

    def test_reference_counts_on_percent_domain(self):
        np.testing.assert_allclose(threshold_ticks((0, 100), 20), np.arange(0, 101, 5))
        np.testing.assert_allclose(threshold_ticks((0, 100), 10), np.arange(0, 101, 10))

    def test_nice_steps(self):
        # 100 / 3 = 33.3 -> error 3.33 >= sqrt(10) -> step 50
        np.testing.assert_allclose(threshold_ticks((0, 100), 3), [0, 50, 100])
        # 1 / 4 = 0.25 -> error 2.5 >= sqrt(2) -> step 0.2
        np.testing.assert_allclose(threshold_ticks((0, 1), 4), [0, 0.2, 0.4, 0.6, 0.8, 1.0])

    def test_invalid_count(self):
        with pytest.raises(ValueError, match="Threshold count"):
            threshold_ticks((0, 100), 0)

    def test_edges_include_domain_bounds(self):
        edges = bin_edges((0, 100), 20)
        assert edges[0] == 0 and edges[-1] == 100
        assert len(edges) == 21

    def test_edges_for_off_grid_domain(self):
        edges = bin_edges((3, 97), 10)
        np.testing.assert_allclose(edges, [3, 10, 20, 30, 40, 50, 60, 70, 80, 90, 97])

    def test_zero_width_domain_has_one_bin(self):
        edges = bin_edges((5, 5), 10)
        assert len(edges) == 2
        np.testing.assert_array_equal(assign_bins([5, 1, 9], edges), [0, 0, 0])


class TestAssignBins:
    """Closed-upper boundary convention."""

    def test_threshold_values_fall_in_lower_bin(self):
        edges = bin_edges((0, 100), 10)
        index = assign_bins([0, 10, 10.000001, 50, 100], edges)
        np.testing.assert_array_equal(index, [0, 0, 1, 4, 9])

    def test_out_of_domain_values_are_clamped(self):
        edges = bin_edges((0, 100), 10)
        np.testing.assert_array_equal(assign_bins([-5, 250], edges), [0, 9])

    def test_nan_goes_to_first_bin(self):
        edges = bin_edges((0, 100), 10)
        np.testing.assert_array_equal(assign_bins([np.nan], edges), [0])


class TestBinPoints:
    """Bins of points."""

    def test_empty_bins_retained_and_order_kept(self):
        points = [Point("a", value_a=95), Point("b", value_a=5), Point("c", value_a=92)]
        bins = bin_points(points, lambda p: p.value_a, (0, 100), 10)
        assert len(bins) == 10
        assert [b.lower for b in bins] == sorted(b.lower for b in bins)
        assert [p.id for p in bins[9].members] == ["a", "c"]
        assert [p.id for p in bins[0].members] == ["b"]
        assert all(len(b.members) == 0 for b in bins[1:9])

    def test_every_point_is_binned(self, demo_points):
        bins = bin_points(demo_points, lambda p: p.value_a, (0, 100), 20)
        assert sum(len(b.members) for b in bins) == len(demo_points)

    def test_midpoint(self):
        bins = bin_points([], lambda p: 0.0, (0, 100), 20)
        assert bins[9].midpoint == 47.5
