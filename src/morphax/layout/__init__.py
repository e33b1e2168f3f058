"""Layout engine: placement algorithms, binning, collision relaxation.

"""

from .binning import Bin, assign_bins, bin_edges, bin_points, threshold_ticks
from .cache import LayoutCache, dataset_fingerprint, layout_fingerprint
from .calculator import compute_layout
from .collision import MIN_COLLIDE_RADIUS, RelaxResult, SimulationConfig, relax
from .kinds import OVERFLOW_KINDS, LayoutKind
from .params import EDITOR_PARAMS, EXPORT_PARAMS, Canvas, LayoutParams, get_params
from .position_map import PositionMap
from .scales import BandScale, band_scale, linear_scale

__all__ = [
    "BandScale",
    "Bin",
    "Canvas",
    "EDITOR_PARAMS",
    "EXPORT_PARAMS",
    "LayoutCache",
    "LayoutKind",
    "LayoutParams",
    "MIN_COLLIDE_RADIUS",
    "OVERFLOW_KINDS",
    "PositionMap",
    "RelaxResult",
    "SimulationConfig",
    "assign_bins",
    "band_scale",
    "bin_edges",
    "bin_points",
    "compute_layout",
    "dataset_fingerprint",
    "get_params",
    "layout_fingerprint",
    "linear_scale",
    "relax",
    "threshold_ticks",
]
