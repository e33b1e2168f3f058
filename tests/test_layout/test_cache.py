"""Tests for layout fingerprints and the LRU layout cache."""

import pytest

from morphax.data import Point
from morphax.layout import (
    EXPORT_PARAMS,
    LayoutCache,
    dataset_fingerprint,
    layout_fingerprint,
)


class TestFingerprints:
    def test_stable_for_equal_inputs(self, three_points, style, editor_params):
        a = layout_fingerprint("GRID", three_points, style, editor_params)
        b = layout_fingerprint("grid", list(three_points), style, editor_params)
        assert a == b

    def test_palette_does_not_affect_key(self, three_points, style, editor_params):
        recoloured = style.replace(palette=("#000000",), opacity=0.3)
        assert layout_fingerprint("BEESWARM", three_points, style, editor_params) == (
            layout_fingerprint("BEESWARM", three_points, recoloured, editor_params)
        )

    def test_radius_affects_key(self, three_points, style, editor_params):
        larger = style.replace(point_radius=10)
        assert layout_fingerprint("BAR", three_points, style, editor_params) != (
            layout_fingerprint("BAR", three_points, larger, editor_params)
        )

    def test_params_and_kind_affect_key(self, three_points, style, editor_params):
        base = layout_fingerprint("BAR", three_points, style, editor_params)
        assert base != layout_fingerprint("BAR", three_points, style, EXPORT_PARAMS)
        assert base != layout_fingerprint("GRID", three_points, style, editor_params)

    def test_dataset_order_and_values_matter(self, three_points):
        base = dataset_fingerprint(three_points)
        assert base != dataset_fingerprint(three_points[::-1])
        edited = [Point("p0", "A", 1.0, 0.0)] + three_points[1:]
        assert base != dataset_fingerprint(edited)

    def test_label_is_not_geometric(self, three_points):
        relabelled = [Point(p.id, p.category, p.value_a, p.value_b, label="x") for p in three_points]
        assert dataset_fingerprint(three_points) == dataset_fingerprint(relabelled)


class TestLayoutCache:
    def test_hit_returns_same_object(self, demo_points, style, editor_params):
        cache = LayoutCache(params=editor_params)
        first = cache.get("SCATTER", demo_points, style)
        second = cache.get("SCATTER", demo_points, style)
        assert first is second
        assert (cache.hits, cache.misses) == (1, 1)

    def test_style_change_recomputes_only_on_radius(self, demo_points, style, editor_params):
        cache = LayoutCache(params=editor_params)
        cache.get("BEESWARM", demo_points, style)
        cache.get("BEESWARM", demo_points, style.replace(opacity=0.5))
        assert cache.misses == 1
        cache.get("BEESWARM", demo_points, style.replace(point_radius=5))
        assert cache.misses == 2

    def test_lru_eviction(self, three_points, style, editor_params):
        cache = LayoutCache(max_entries=2, params=editor_params)
        cache.get("GRID", three_points, style)
        cache.get("SCATTER", three_points, style)
        cache.get("GRID", three_points, style)  # refresh GRID
        cache.get("BAR", three_points, style)  # evicts SCATTER
        stats = cache.stats()
        assert stats.entries == 2
        assert stats.evictions == 1
        cache.get("GRID", three_points, style)
        assert cache.hits == 2
        cache.get("SCATTER", three_points, style)
        assert cache.misses == 4

    def test_clear_keeps_counters(self, three_points, style, editor_params):
        cache = LayoutCache(params=editor_params)
        cache.get("GRID", three_points, style)
        cache.clear()
        assert len(cache) == 0
        assert cache.misses == 1

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="max_entries"):
            LayoutCache(max_entries=0)

    def test_shape_change_reuses_layout(self, demo_points, style, editor_params):
        cache = LayoutCache(params=editor_params)
        first = cache.get("BEESWARM", demo_points, style)
        assert cache.get("BEESWARM", demo_points, style.replace(shape="SQUARE")) is first
        assert cache.misses == 1
