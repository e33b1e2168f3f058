"""Narrative steps and the scroll-driven story engine."""

from .engine import StoryEngine, StoryFrame, build_frame_sequence
from .steps import (
    DEFAULT_STEPS,
    MIN_STEPS,
    NarrativeOverlay,
    Step,
    StorySequence,
    TextAnchor,
)

__all__ = [
    "DEFAULT_STEPS",
    "MIN_STEPS",
    "NarrativeOverlay",
    "Step",
    "StoryEngine",
    "StoryFrame",
    "StorySequence",
    "TextAnchor",
    "build_frame_sequence",
]
