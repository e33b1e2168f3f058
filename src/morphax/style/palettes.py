"""Named colour palettes.

Built-in presets cover light (PASTEL, ELEGANT), saturated (VIBRANT, NEON)
and sequential (OCEAN, SUNSET) looks.  Any matplotlib qualitative
colormap (``tab10``, ``Set2``, ...) is also accepted by :func:`get_palette`.
"""
from __future__ import annotations

import matplotlib
from matplotlib.colors import ListedColormap, to_hex

PALETTES: dict[str, tuple[str, ...]] = {
    "PASTEL": ("#fbb4ae", "#b3cde3", "#ccebc5", "#decbe4", "#fed9a6", "#ffffcc", "#e5d8bd", "#fddaec"),
    "VIBRANT": ("#e41a1c", "#377eb8", "#4daf4a", "#984ea3", "#ff7f00", "#ffff33", "#a65628", "#f781bf"),
    "OCEAN": ("#ffffd9", "#edf8b1", "#c7e9b4", "#7fcdbb", "#41b6c4", "#1d91c0", "#225ea8", "#0c2c84"),
    "SUNSET": ("#fff7bc", "#fee391", "#fec44f", "#fe9929", "#ec7014", "#cc4c02", "#993404", "#662506"),
    "NEON": ("#FF00FF", "#00FFFF", "#FFFF00", "#00FF00", "#FF0000", "#8A2BE2"),
    "ELEGANT": ("#8dd3c7", "#ffffb3", "#bebada", "#fb8072", "#80b1d3", "#fdb462", "#b3de69", "#fccde5"),
}

DEFAULT_PALETTE: tuple[str, ...] = PALETTES["PASTEL"]


def get_palette(name: str) -> tuple[str, ...]:
    """Look up a palette by preset name or matplotlib qualitative colormap.

    Parameters
    ----------
    name : str
        Preset name (case-insensitive) or a matplotlib colormap with a
        discrete colour list, e.g. ``"tab10"``.

    Returns
    -------
    tuple[str, ...]
        Hex colours.

    Raises
    ------
    ValueError
        If *name* is neither a preset nor a listed matplotlib colormap.
    """
    preset = PALETTES.get(name.upper())
    if preset is not None:
        return preset
    try:
        cmap = matplotlib.colormaps[name]
    except KeyError:
        cmap = None
    # Qualitative colormaps are short listed maps; skip 256-entry gradients.
    if isinstance(cmap, ListedColormap) and cmap.N <= 20:
        return tuple(to_hex(c) for c in cmap.colors)
    available = ", ".join(sorted(PALETTES))
    raise ValueError(
        f"Unknown palette {name!r}. Available presets: {available} "
        "(or a qualitative matplotlib colormap such as 'tab10')"
    )
