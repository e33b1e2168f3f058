"""Story engine: scroll offset in, renderable frame out.

Data flow for one frame::

    scroll offset --map_scroll_offset--> (step index, local progress)
        --active_pair--> (start kind, end kind)
        --LayoutCache--> start / end PositionMaps
        --blend--> blended PositionMap (+ colours, overlay)

Layouts are looked up through a :class:`LayoutCache`, so scrolling within
a segment only re-runs the blend.
"""
from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Sequence

import numpy as np

from ..data.points import Point, coerce_points
from ..layout.cache import LayoutCache
from ..layout.kinds import LayoutKind
from ..layout.params import EDITOR_PARAMS, LayoutParams
from ..layout.position_map import PositionMap
from ..style.colors import assign_colors
from ..style.style import StyleParameters
from ..transition.easing import ease_cubic_in_out
from ..transition.interpolate import blend
from ..transition.scroll import ScrollPosition, map_scroll_offset
from .steps import DEFAULT_STEPS, NarrativeOverlay, Step, StorySequence

logger = logging.getLogger(__name__)


class StoryFrame(NamedTuple):
    """Everything a renderer needs for one frame."""

    scroll: ScrollPosition
    start_kind: LayoutKind
    end_kind: LayoutKind
    positions: PositionMap
    colors: dict[str, str]  # category -> colour
    overlay: NarrativeOverlay


class StoryEngine:
    """Binds a dataset, a step sequence and a style into frames.

    Parameters
    ----------
    points : sequence of Point or mapping
        Dataset; loose records are coerced (see :func:`coerce_points`).
    steps : StorySequence or sequence of Step, optional
        Defaults to :data:`DEFAULT_STEPS`.
    style : StyleParameters, optional
        Defaults to ``StyleParameters()``.
    params : LayoutParams
        Canvas and layout constants.
    cache : LayoutCache, optional
        Shared cache; a private one is created when omitted.  Its params
        must match *params*.
    easing : callable
        Morph easing (default cubic in-out).
    """

    def __init__(
        self,
        points: Sequence[Point],
        steps: StorySequence | Sequence[Step] | None = None,
        style: StyleParameters | None = None,
        params: LayoutParams = EDITOR_PARAMS,
        cache: LayoutCache | None = None,
        easing: Callable[[float], float] = ease_cubic_in_out,
    ) -> None:
        report = coerce_points(points)
        self.points = report.points
        self.n_coerced = report.n_coerced
        if steps is None:
            steps = DEFAULT_STEPS
        self.steps = steps if isinstance(steps, StorySequence) else StorySequence(steps)
        self.style = style if style is not None else StyleParameters()
        self.params = params
        if cache is not None and cache.params != params:
            raise ValueError("LayoutCache params do not match the engine params")
        self.cache = cache if cache is not None else LayoutCache(params=params)
        self.easing = easing
        self._colors = assign_colors((p.category for p in self.points), self.style.palette)

    def layout(self, kind: LayoutKind | str) -> PositionMap:
        """Cached position map of the dataset under *kind*."""
        return self.cache.get(kind, self.points, self.style)

    def frame_at(self, step_index: int, progress: float) -> StoryFrame:
        """Frame for the pair starting at *step_index* at local *progress*."""
        start_step, end_step = self.steps.active_pair(step_index)
        start = self.layout(start_step.layout)
        end = self.layout(end_step.layout)
        return StoryFrame(
            scroll=ScrollPosition(step_index, float(progress)),
            start_kind=start_step.layout,
            end_kind=end_step.layout,
            positions=blend(start, end, progress, self.easing),
            colors=dict(self._colors),
            overlay=self.steps.overlay(step_index, progress),
        )

    def frame(self, raw_offset: float, extent: float) -> StoryFrame:
        """Frame for a raw scroll offset on a track of length *extent*."""
        position = map_scroll_offset(raw_offset, extent, len(self.steps))
        return self.frame_at(position.step_index, position.local_progress)


def build_frame_sequence(
    engine: StoryEngine,
    n_frames: int = 60,
    *,
    progress: bool = True,
) -> list[StoryFrame]:
    """Sample *n_frames* frames uniformly over the whole story.

    Parameters
    ----------
    engine : StoryEngine
        Story to sample.
    n_frames : int
        Number of frames (>= 1); the first is the start of the story and the
        last its end.
    progress : bool
        Show a tqdm progress bar (default True).

    Returns
    -------
    list[StoryFrame]
    """
    if n_frames < 1:
        raise ValueError(f"n_frames must be >= 1, got {n_frames}")

    offsets = np.linspace(0.0, 1.0, n_frames)
    iterator = offsets
    if progress:
        from tqdm.auto import tqdm
        iterator = tqdm(offsets, desc="Building frames", unit="frame")

    frames = [engine.frame(float(offset), 1.0) for offset in iterator]
    logger.info(
        "Built %d frames (%d layout computations, %d cache hits)",
        len(frames), engine.cache.misses, engine.cache.hits,
    )
    return frames
