"""Narrative steps and the ordered story sequence.

A story is at least two steps long.  At any time the active pair is
``(steps[i], steps[i + 1])``, or the last step twice when ``i`` is the
final index.  During a transition the earlier step's text is shown until
the midpoint, then the later step's, faded by :func:`text_opacity`.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterator, NamedTuple, Sequence

from ..layout.kinds import LayoutKind
from ..transition.interpolate import text_opacity

MIN_STEPS = 2


class TextAnchor(str, Enum):
    """Where the narrative card sits on screen."""

    CENTER = "CENTER"
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclasses.dataclass(frozen=True)
class Step:
    """One stage of the story.

    Parameters
    ----------
    id : str
        Step identifier.
    layout : LayoutKind or str
        Layout shown at this step; invalid kinds raise ``ValueError``.
    text : str
        Narrative text.
    anchor : TextAnchor or str
        Placement of the text card.
    """

    id: str
    layout: LayoutKind
    text: str = ""
    anchor: TextAnchor = TextAnchor.CENTER

    def __post_init__(self) -> None:
        object.__setattr__(self, "layout", LayoutKind.parse(self.layout))
        object.__setattr__(self, "anchor", TextAnchor(self.anchor))


class NarrativeOverlay(NamedTuple):
    """What the text overlay shows for a given frame."""

    step: Step
    opacity: float
    label: str  # "Step k of n"


class StorySequence:
    """Immutable ordered sequence of steps.

    Editing operations return a new sequence.

    Raises
    ------
    ValueError
        On construction with no steps, or with duplicate step ids.
    """

    def __init__(self, steps: Sequence[Step]) -> None:
        steps = tuple(steps)
        if not steps:
            raise ValueError("A story needs at least one step")
        ids = [s.id for s in steps]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate step ids in {ids}")
        self._steps = steps

    # sequence protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __getitem__(self, index: int) -> Step:
        return self._steps[index]

    def __repr__(self) -> str:
        kinds = ", ".join(s.layout.value for s in self._steps)
        return f"StorySequence([{kinds}])"

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def layouts(self) -> tuple[LayoutKind, ...]:
        """Every layout kind the story exercises, in first-use order."""
        return tuple(dict.fromkeys(s.layout for s in self._steps))

    # editing -------------------------------------------------------------

    def add(self, step: Step) -> "StorySequence":
        """Append *step*."""
        return StorySequence(self._steps + (step,))

    def update(self, index: int, **changes) -> "StorySequence":
        """Replace fields of the step at *index*."""
        steps = list(self._steps)
        steps[index] = dataclasses.replace(steps[index], **changes)
        return StorySequence(steps)

    def remove(self, index: int) -> "StorySequence":
        """Drop the step at *index*.

        Raises
        ------
        ValueError
            If the story would drop below :data:`MIN_STEPS` steps.
        """
        if len(self._steps) <= MIN_STEPS:
            raise ValueError(f"A story keeps at least {MIN_STEPS} steps")
        steps = list(self._steps)
        del steps[index]
        return StorySequence(steps)

    # navigation ----------------------------------------------------------

    def active_pair(self, index: int) -> tuple[Step, Step]:
        """``(steps[i], steps[i + 1])``; the last step twice at the end."""
        index = min(max(index, 0), len(self._steps) - 1)
        nxt = self._steps[index + 1] if index + 1 < len(self._steps) else self._steps[-1]
        return self._steps[index], nxt

    def overlay(self, index: int, progress: float) -> NarrativeOverlay:
        """Narrative overlay for the pair starting at *index*."""
        prev, nxt = self.active_pair(index)
        index = min(max(index, 0), len(self._steps) - 1)
        past_midpoint = progress >= 0.5
        shown = nxt if past_midpoint else prev
        number = min(index + (2 if past_midpoint else 1), len(self._steps))
        return NarrativeOverlay(
            step=shown,
            opacity=text_opacity(progress),
            label=f"Step {number} of {len(self._steps)}",
        )


DEFAULT_STEPS = StorySequence(
    [
        Step("step-1", LayoutKind.BAR, "It starts with a simple breakdown...", TextAnchor.CENTER),
        Step("step-2", LayoutKind.SCATTER, "Looking at the correlation...", TextAnchor.RIGHT),
        Step("step-3", LayoutKind.RADIAL, "Finally, the complete cycle.", TextAnchor.BOTTOM),
    ]
)
