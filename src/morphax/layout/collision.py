"""Fixed-tick collision relaxation for the beeswarm layout (pure JAX).

Each call builds a fresh :class:`SwarmState` arena, advances it with a
``jax.jit``-compiled ``jax.lax.fori_loop`` for exactly ``iterations`` ticks
and returns NumPy arrays.  Nothing is retained between calls, and the
contract is "deterministic after N ticks", not "converged".

One tick:

1. ``alpha_k = (1 - alpha_decay) ** (k + 1)``.
2. Spring forces on the velocities:
   ``v += alpha_k * (strength_x * (target_x - x), strength_y * (center_y - y))``.
3. ``v *= 1 - velocity_decay``; ``p += v``.
4. ``collision_passes`` Jacobi passes: every pair closer than
   ``2 * collide_radius`` is pushed apart along the line of centres by
   ``collide_strength * overlap / 2`` each, then positions are clamped to
   the optional bounds.

After the last tick, ``settle_passes`` more Jacobi passes run without any
spring force, so the springs cannot leave residual overlap behind.

Nodes that start on the same spot (repeated values) are fanned out on a
phyllotaxis spiral before the first tick.  Centres that still coincide
later have no line of centres; they are pushed apart along a golden-angle
direction picked from the index pair.  Both rules are deterministic, so
the result never depends on a random jiggle.
"""
from __future__ import annotations

import dataclasses
import math
from functools import partial
from typing import Callable, NamedTuple

import equinox as eqx
import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

MIN_COLLIDE_RADIUS: float = 0.5
"""Floor applied to degenerate (non-positive or non-finite) radii."""

_COINCIDENT_EPS = 1e-9
_GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))


@dataclasses.dataclass(frozen=True)
class SimulationConfig:
    """Simulation constants (reference defaults).

    Parameters
    ----------
    strength_x : float
        Spring strength toward the target x.
    strength_y : float
        Spring strength toward the vertical centre.
    alpha_decay : float
        Per-tick cooling rate of the force multiplier.
    velocity_decay : float
        Fraction of velocity lost per tick.
    collide_strength : float
        Overlap-severity factor of the pairwise displacement (0--1].
    collision_passes : int
        Overlap resolution passes per tick.
    settle_passes : int
        Spring-free overlap passes after the last tick.
    """

    strength_x: float = 1.0
    strength_y: float = 0.1
    alpha_decay: float = 1.0 - 0.001 ** (1.0 / 300.0)
    velocity_decay: float = 0.4
    collide_strength: float = 0.7
    collision_passes: int = 3
    settle_passes: int = 30


class SwarmState(eqx.Module):
    """Per-call node arena carried through the tick loop."""

    positions: Float[Array, "n 2"]
    velocities: Float[Array, "n 2"]


class RelaxResult(NamedTuple):
    """Final state of :func:`relax` (NumPy arrays)."""

    positions: Float[np.ndarray, "n 2"]
    velocities: Float[np.ndarray, "n 2"]


# ---------------------------------------------------------------------------
# Kernel
# ---------------------------------------------------------------------------


def _resolve_overlaps(
    pos: Float[Array, "n 2"],
    min_dist: Float[Array, ""],
    strength: Float[Array, ""],
) -> Float[Array, "n 2"]:
    """One Jacobi pass of pairwise overlap displacement."""
    n = pos.shape[0]
    diff = pos[:, None, :] - pos[None, :, :]  # i - j
    dist = jnp.sqrt(jnp.sum(diff * diff, axis=-1))

    idx = jnp.arange(n)
    not_self = idx[:, None] != idx[None, :]
    coincident = dist < _COINCIDENT_EPS

    # Antisymmetric in (i, j): the pair is pushed in opposite directions.
    delta = idx[:, None] - idx[None, :]
    tie_angle = jnp.abs(delta).astype(pos.dtype) * _GOLDEN_ANGLE
    tie = jnp.sign(delta).astype(pos.dtype)[..., None] * jnp.stack(
        [jnp.cos(tie_angle), jnp.sin(tie_angle)], axis=-1
    )
    safe = jnp.where(coincident, 1.0, dist)
    unit = jnp.where(coincident[..., None], tie, diff / safe[..., None])

    overlap = jnp.where(not_self & (dist < min_dist), min_dist - dist, 0.0)
    shift = (0.5 * strength) * overlap[..., None] * unit
    return pos + jnp.sum(shift, axis=1)


def _spread_coincident(
    positions: Float[np.ndarray, "n 2"],
    radius: float,
) -> Float[np.ndarray, "n 2"]:
    """Fan out repeated start positions along a phyllotaxis spiral.

    The first node on a spot stays put; the k-th repeat moves to distance
    ``radius * sqrt(k)`` at angle ``k * golden_angle``.
    """
    _, group = np.unique(positions, axis=0, return_inverse=True)
    rank = np.zeros(len(positions))
    seen: dict[int, int] = {}
    for i, g in enumerate(np.asarray(group).reshape(-1).tolist()):
        rank[i] = seen.get(g, 0)
        seen[g] = seen.get(g, 0) + 1
    angle = rank * _GOLDEN_ANGLE
    offset = np.stack([np.cos(angle), np.sin(angle)], axis=-1)
    return positions + radius * np.sqrt(rank)[:, None] * offset


@partial(jax.jit, static_argnames=("iterations", "passes", "settle"))
def _simulate(
    state: SwarmState,
    targets: Float[Array, "n"],
    center_y: Float[Array, ""],
    min_dist: Float[Array, ""],
    lower: Float[Array, "2"],
    upper: Float[Array, "2"],
    coefficients: Float[Array, "5"],
    iterations: int,
    passes: int,
    settle: int,
) -> SwarmState:
    strength_x, strength_y, alpha_decay, velocity_decay, collide_strength = coefficients

    def collide(_, p):
        return jnp.clip(_resolve_overlaps(p, min_dist, collide_strength), lower, upper)

    def tick(k, s: SwarmState) -> SwarmState:
        alpha = (1.0 - alpha_decay) ** (k + 1).astype(s.positions.dtype)
        pos, vel = s.positions, s.velocities
        force = jnp.stack(
            [strength_x * (targets - pos[:, 0]), strength_y * (center_y - pos[:, 1])],
            axis=-1,
        )
        vel = (vel + alpha * force) * (1.0 - velocity_decay)
        pos = jax.lax.fori_loop(0, passes, collide, pos + vel)
        return SwarmState(positions=pos, velocities=vel)

    state = jax.lax.fori_loop(0, iterations, tick, state)
    settled = jax.lax.fori_loop(0, settle, collide, state.positions)
    return SwarmState(positions=settled, velocities=state.velocities)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def relax(
    initial_positions,
    target_x: Callable[[int], float] | Float[np.ndarray, "n"],
    center_y: float,
    collide_radius: float,
    iterations: int,
    *,
    bounds: tuple[float, float, float, float] | None = None,
    config: SimulationConfig = SimulationConfig(),
) -> RelaxResult:
    """Relax nodes toward their target x and a centre line without overlap.

    Parameters
    ----------
    initial_positions : array_like
        ``(n, 2)`` starting positions.  Non-finite entries are replaced by
        the node's target x / ``center_y``.
    target_x : callable or array_like
        Either ``index -> x`` (evaluated once per node) or an ``(n,)`` array.
    center_y : float
        Vertical centre line.
    collide_radius : float
        Collision radius; centres end at least ``2 * collide_radius`` apart
        up to simulation tolerance.  Degenerate radii are clamped to
        :data:`MIN_COLLIDE_RADIUS`.
    iterations : int
        Exact number of ticks.  With 0 ticks the (cleaned, clamped) initial
        positions are returned as they are.
    bounds : tuple, optional
        ``(xmin, ymin, xmax, ymax)`` clamp applied after every collision pass.
    config : SimulationConfig
        Force constants.

    Returns
    -------
    RelaxResult
        Final positions and velocities as float64 NumPy arrays.

    Raises
    ------
    ValueError
        If *iterations* is negative or the position array is not ``(n, 2)``.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    init = np.array(initial_positions, dtype=np.float64).reshape(-1, 2)
    n = init.shape[0]
    if n == 0:
        empty = np.zeros((0, 2))
        return RelaxResult(positions=empty, velocities=empty.copy())

    if callable(target_x):
        targets = np.array([target_x(i) for i in range(n)], dtype=np.float64)
    else:
        targets = np.asarray(target_x, dtype=np.float64).reshape(n)

    center = float(center_y) if math.isfinite(center_y) else 0.0
    targets = np.where(np.isfinite(targets), targets, init[:, 0])
    targets = np.nan_to_num(targets, nan=0.0, posinf=0.0, neginf=0.0)
    init = np.where(
        np.isfinite(init), init, np.stack([targets, np.full(n, center)], axis=-1)
    )

    radius = float(collide_radius)
    if not (math.isfinite(radius) and radius > 0):
        radius = MIN_COLLIDE_RADIUS

    if bounds is None:
        lower = np.array([-np.inf, -np.inf])
        upper = np.array([np.inf, np.inf])
    else:
        xmin, ymin, xmax, ymax = (float(b) for b in bounds)
        lower = np.array([xmin, ymin])
        upper = np.array([max(xmin, xmax), max(ymin, ymax)])
    if iterations > 0:
        init = _spread_coincident(init, radius)
    init = np.clip(init, lower, upper)

    coefficients = jnp.array(
        [
            config.strength_x,
            config.strength_y,
            config.alpha_decay,
            config.velocity_decay,
            config.collide_strength,
        ],
        dtype=jnp.float64,
    )
    state = SwarmState(
        positions=jnp.asarray(init), velocities=jnp.zeros((n, 2), dtype=jnp.float64)
    )
    final = _simulate(
        state,
        jnp.asarray(targets),
        jnp.asarray(center, dtype=jnp.float64),
        jnp.asarray(2.0 * radius, dtype=jnp.float64),
        jnp.asarray(lower),
        jnp.asarray(upper),
        coefficients,
        iterations=int(iterations),
        passes=int(config.collision_passes),
        settle=int(config.settle_passes) if iterations > 0 else 0,
    )

    # Freeze back to NumPy; never let a NaN escape.
    positions = np.asarray(final.positions, dtype=np.float64)
    velocities = np.asarray(final.velocities, dtype=np.float64)
    positions = np.where(np.isfinite(positions), positions, init)
    velocities = np.where(np.isfinite(velocities), velocities, 0.0)
    return RelaxResult(positions=positions, velocities=velocities)
