"""Tests for the fixed-tick collision relaxation."""

import jax.numpy as jnp
import numpy as np
import pytest

from morphax.layout import MIN_COLLIDE_RADIUS, SimulationConfig, relax
from morphax.layout.collision import _resolve_overlaps


def _min_pair_distance(positions: np.ndarray) -> float:
    diff = positions[:, None, :] - positions[None, :, :]
    dist = np.sqrt((diff**2).sum(-1))
    np.fill_diagonal(dist, np.inf)
    return float(dist.min())


class TestRelax:
    """Collision simulator contract."""

    def test_repeated_runs_are_bit_identical(self):
        targets = np.linspace(100.0, 600.0, 50)
        init = np.stack([targets, np.full(50, 260.0)], axis=-1)
        a = relax(init, targets, 260.0, 9.0, 120)
        b = relax(init, targets, 260.0, 9.0, 120)
        np.testing.assert_array_equal(a.positions, b.positions)
        np.testing.assert_array_equal(a.velocities, b.velocities)

    def test_overlaps_resolved(self):
        targets = np.linspace(100.0, 600.0, 50)
        init = np.stack([targets, np.full(50, 260.0)], axis=-1)
        result = relax(init, targets, 260.0, 9.0, 120)
        # collide radius 9 -> 18 px separation target; 16 px is the point size
        assert _min_pair_distance(result.positions) >= 16.0

    def test_coincident_nodes_separate_deterministically(self):
        init = np.tile([50.0, 50.0], (12, 1))
        a = relax(init, lambda i: 50.0, 50.0, 3.0, 120)
        b = relax(init, lambda i: 50.0, 50.0, 3.0, 120)
        np.testing.assert_array_equal(a.positions, b.positions)
        assert _min_pair_distance(a.positions) >= 2 * 3.0 - 0.1
        assert np.all(np.isfinite(a.positions))

    def test_shared_target_spreads_in_both_axes(self):
        # 40 nodes in one column would need 480 px; the box is 200 px tall
        init = np.tile([100.0, 100.0], (40, 1))
        result = relax(init, np.full(40, 100.0), 100.0, 6.0, 120, bounds=(0, 0, 200, 200))
        assert np.unique(np.round(result.positions[:, 0], 6)).size > 1
        assert np.ptp(result.positions[:, 0]) >= 2 * 6.0
        assert _min_pair_distance(result.positions) >= 2 * 6.0 - 0.1

    def test_coincident_pair_splits_off_axis(self):
        pos = jnp.array([[10.0, 10.0], [10.0, 10.0]])
        out = np.asarray(_resolve_overlaps(pos, jnp.asarray(4.0), jnp.asarray(1.0)))
        np.testing.assert_allclose(out[0] + out[1], [20.0, 20.0])
        assert np.linalg.norm(out[0] - out[1]) == pytest.approx(4.0)
        assert abs(out[0, 0] - out[1, 0]) > 1.0
        assert abs(out[0, 1] - out[1, 1]) > 1.0

    def test_callable_and_array_targets_agree(self):
        targets = np.array([10.0, 40.0, 70.0])
        init = np.stack([targets, np.zeros(3)], axis=-1)
        a = relax(init, targets, 0.0, 4.0, 30)
        b = relax(init, lambda i: targets[i], 0.0, 4.0, 30)
        np.testing.assert_array_equal(a.positions, b.positions)

    def test_bounds_respected(self):
        init = np.tile([0.0, 10.0], (20, 1))
        result = relax(init, np.zeros(20), 10.0, 5.0, 60, bounds=(0.0, 0.0, 100.0, 20.0))
        assert result.positions[:, 0].min() >= 0.0
        assert result.positions[:, 1].min() >= 0.0
        assert result.positions[:, 1].max() <= 20.0

    def test_zero_iterations_returns_initial(self):
        init = np.array([[1.0, 2.0], [30.0, 4.0]])
        result = relax(init, init[:, 0], 3.0, 2.0, 0)
        np.testing.assert_array_equal(result.positions, init)

    def test_empty_input(self):
        result = relax(np.zeros((0, 2)), np.zeros(0), 0.0, 5.0, 120)
        assert result.positions.shape == (0, 2)

    def test_negative_iterations_rejected(self):
        with pytest.raises(ValueError, match="iterations"):
            relax(np.zeros((1, 2)), np.zeros(1), 0.0, 5.0, -1)


class TestDegenerateInputs:
    """NaN never propagates into the final positions."""

    @pytest.mark.parametrize("radius", [0.0, -3.0, float("nan"), float("inf")])
    def test_degenerate_radius_is_clamped(self, radius):
        init = np.tile([5.0, 5.0], (4, 1))
        result = relax(init, np.full(4, 5.0), 5.0, radius, 40)
        assert np.all(np.isfinite(result.positions))
        assert _min_pair_distance(result.positions) > 0.0

    def test_nan_inputs_are_replaced(self):
        init = np.array([[np.nan, 1.0], [2.0, np.inf]])
        targets = np.array([np.nan, 2.0])
        result = relax(init, targets, float("nan"), 1.0, 20)
        assert np.all(np.isfinite(result.positions))
        assert np.all(np.isfinite(result.velocities))

    def test_min_radius_constant(self):
        assert MIN_COLLIDE_RADIUS > 0


def test_config_defaults_match_reference():
    config = SimulationConfig()
    assert config.strength_x == 1.0
    assert config.strength_y == 0.1
    assert 0 < config.alpha_decay < 0.05
    assert config.settle_passes > 0
