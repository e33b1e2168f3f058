"""Deterministic layout and morph engine for scroll-driven data stories.

Coordinates are logical canvas pixels (post-margin) throughout.
"""

# Float64 enforcement - must happen before any JAX imports that might
# create arrays with default float32 precision.  The collision kernel
# relies on it for bit-identical results across calls.
import jax
jax.config.update("jax_enable_x64", True)

__version__ = "0.1.0"
