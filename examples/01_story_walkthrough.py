"""Scroll story walkthrough.

Demonstrates morphax basics: the demo dataset, the default BAR -> SCATTER
-> RADIAL story, and frames sampled at a few scroll offsets.

Verifies:
- The ends of the scroll track show the first and last layouts exactly
- Scrolling inside a segment re-blends without recomputing layouts
- The narrative overlay switches text at the segment midpoint
"""

import numpy as np

from morphax.data import make_demo_points
from morphax.story import StoryEngine
from morphax.transition import overall_percent, scroll_extent

points = make_demo_points(50, seed=0)
engine = StoryEngine(points)
extent = scroll_extent(600.0, len(engine.steps))  # one viewport per segment

print("Scroll Story Walkthrough")
print("=" * 40)
print(f"Points: {len(engine.points)}  Steps: {engine.steps}")
print(f"Track length: {extent:.0f} px")

for offset in np.linspace(0.0, extent, 9):
    frame = engine.frame(float(offset), extent)
    pct = overall_percent(frame.scroll, len(engine.steps))
    print(
        f"  {offset:7.1f} px  {pct:3d}%  "
        f"{frame.start_kind.value:>8s} -> {frame.end_kind.value:<8s}  "
        f"{frame.overlay.label}  opacity={frame.overlay.opacity:.2f}  "
        f"{frame.overlay.step.text!r}"
    )

stats = engine.cache.stats()
print(f"\nLayout cache: {stats.misses} computed, {stats.hits} reused")

first = engine.frame(0.0, extent).positions
last = engine.frame(extent, extent).positions
assert first.equals(engine.layout("BAR")), "Track start should be the BAR layout!"
assert last.equals(engine.layout("RADIAL")), "Track end should be the RADIAL layout!"
assert stats.misses == 3, "Each layout should be computed once!"

print("\nAll walkthrough checks passed!")
