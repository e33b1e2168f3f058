"""Tests for the story engine and frame sampling."""

import numpy as np
import pytest

from morphax.layout import EXPORT_PARAMS, LayoutCache, LayoutKind
from morphax.story import StoryEngine, build_frame_sequence
from morphax.style import DEFAULT_PALETTE


@pytest.fixture
def engine(demo_points, style, editor_params) -> StoryEngine:
    return StoryEngine(demo_points, style=style, params=editor_params)


class TestStoryEngine:
    def test_track_ends_match_first_and_last_layouts(self, engine):
        first = engine.frame(0.0, 1200.0)
        last = engine.frame(1200.0, 1200.0)
        assert first.positions.xy.tolist() == engine.layout("BAR").xy.tolist()
        assert last.positions.xy.tolist() == engine.layout("RADIAL").xy.tolist()
        assert (last.start_kind, last.end_kind) == (LayoutKind.SCATTER, LayoutKind.RADIAL)

    def test_segment_boundary_is_the_middle_layout(self, engine):
        frame = engine.frame(600.0, 1200.0)
        assert frame.scroll == (1, 0.0)
        np.testing.assert_array_equal(frame.positions.xy, engine.layout("SCATTER").xy)

    def test_category_colours(self, engine):
        colors = engine.frame(0.0, 1.0).colors
        assert colors == dict(zip("ABC", DEFAULT_PALETTE[:3]))

    def test_scrolling_only_blends(self, engine):
        for offset in np.linspace(0.0, 0.45, 10):
            engine.frame(float(offset), 1.0)
        assert engine.cache.misses == 2

    def test_loose_records_are_coerced(self):
        records = [
            {"id": "a", "category": "X", "valueA": 10, "valueB": 20},
            {"id": "b", "category": "X", "valueA": "n/a", "valueB": 20},
        ]
        with pytest.warns(UserWarning, match="1 of 2 points"):
            engine = StoryEngine(records)
        assert engine.n_coerced == 1
        assert np.all(np.isfinite(engine.frame(0.3, 1.0).positions.xy))

    def test_cache_params_must_match(self, demo_points, editor_params):
        with pytest.raises(ValueError, match="params"):
            StoryEngine(demo_points, params=editor_params, cache=LayoutCache(params=EXPORT_PARAMS))


class TestFrameSequence:
    def test_samples_whole_story(self, engine):
        frames = build_frame_sequence(engine, 11, progress=False)
        assert len(frames) == 11
        assert frames[0].scroll == (0, 0.0)
        assert frames[-1].scroll == (1, 1.0)
        assert frames[5].overlay.label == "Step 2 of 3"
        # BAR, SCATTER and RADIAL computed once each
        assert engine.cache.misses == 3

    def test_invalid_frame_count(self, engine):
        with pytest.raises(ValueError, match="n_frames"):
            build_frame_sequence(engine, 0, progress=False)
