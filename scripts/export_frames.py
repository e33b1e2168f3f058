"""Sample a scroll story into frame arrays.

Builds a story (the demo dataset and default steps unless a JSON dataset
is given), samples frames uniformly over the whole scroll track and
writes:

- ``frames.npz``: ``positions`` ``(n_frames, n_points, 2)``, ``ids``,
  ``step_index`` and ``local_progress`` per frame.
- ``frames.json``: per-frame layout pair and overlay text / opacity, plus
  the category colours.

Usage
-----
Default demo story, 60 frames::

    python scripts/export_frames.py

Custom dataset (a JSON array of point records) on the export canvas::

    python scripts/export_frames.py --data points.json --preset export

Show help::

    python scripts/export_frames.py --help
"""
from __future__ import annotations

import argparse
import json
import logging
import os

import numpy as np

from morphax.data import coerce_points, make_demo_points
from morphax.layout import get_params
from morphax.story import StoryEngine, build_frame_sequence
from morphax.style import StyleParameters, get_palette

logger = logging.getLogger(__name__)

RESULTS_DIR = "results/"


def _load_points(path: str | None):
    if path is None:
        return make_demo_points()
    with open(path) as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON array of point records")
    return list(coerce_points(records).points)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data", default=None, help="JSON array of point records")
    parser.add_argument("--frames", type=int, default=60, help="Number of frames")
    parser.add_argument("--preset", default="editor", help="Layout preset (editor/export)")
    parser.add_argument("--palette", default="PASTEL", help="Palette name")
    parser.add_argument("--radius", type=float, default=8.0, help="Point radius")
    parser.add_argument("--shape", default="CIRCLE", help="Point marker shape")
    parser.add_argument("--output-dir", default=RESULTS_DIR)
    parser.add_argument("--no-progress", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    style = StyleParameters(
        point_radius=args.radius,
        palette=get_palette(args.palette),
        shape=args.shape.upper(),
    )
    engine = StoryEngine(_load_points(args.data), style=style, params=get_params(args.preset))
    frames = build_frame_sequence(engine, args.frames, progress=not args.no_progress)

    os.makedirs(args.output_dir, exist_ok=True)
    npz_path = os.path.join(args.output_dir, "frames.npz")
    np.savez(
        npz_path,
        ids=np.array(frames[0].positions.ids),
        positions=np.stack([f.positions.xy for f in frames]),
        step_index=np.array([f.scroll.step_index for f in frames]),
        local_progress=np.array([f.scroll.local_progress for f in frames]),
    )

    summary = {
        "preset": args.preset,
        "n_points": len(engine.points),
        "n_coerced": engine.n_coerced,
        "shape": style.shape.value,
        "colors": frames[0].colors,
        "frames": [
            {
                "start": f.start_kind.value,
                "end": f.end_kind.value,
                "text": f.overlay.step.text,
                "opacity": f.overlay.opacity,
                "label": f.overlay.label,
            }
            for f in frames
        ],
    }
    json_path = os.path.join(args.output_dir, "frames.json")
    with open(json_path, "w") as f:
        json.dump(summary, f, indent=2)

    logger.info("Wrote %s and %s", npz_path, json_path)


if __name__ == "__main__":
    main()
