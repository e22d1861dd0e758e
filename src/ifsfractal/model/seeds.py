"""
Seed Sets
=========
Deterministic starting working sets for the generator.

The generator never invents points: an empty starting set stays empty.
These helpers produce something to iterate on.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

Bounds = tuple[float, float, float, float]
UNIT_BOUNDS: Bounds = (-1.0, 1.0, -1.0, 1.0)


def grid_seed(n: int, bounds: Bounds = UNIT_BOUNDS) -> npt.NDArray[np.float64]:
    """
    Regular n x n grid of points covering ``bounds``.

    Args:
        n: Points per axis. 0 gives an empty set.
        bounds: (xmin, xmax, ymin, ymax).

    Returns:
        An (n*n, 2) array, row-major (x varies fastest).
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    if n == 0:
        return np.empty((0, 2), dtype=np.float64)
    xmin, xmax, ymin, ymax = bounds
    xs = np.linspace(xmin, xmax, n)
    ys = np.linspace(ymin, ymax, n)
    gx, gy = np.meshgrid(xs, ys)
    return np.c_[gx.ravel(), gy.ravel()]


def square_outline_seed(n_per_side: int, half_size: float = 0.5) -> npt.NDArray[np.float64]:
    """
    Points along the outline of an axis-aligned square centered at the origin.

    Each side contributes ``n_per_side`` points, starting at its first corner
    and excluding the next one, so corners appear exactly once.
    """
    if n_per_side < 0:
        raise ValueError(f"n_per_side must be non-negative, got {n_per_side}.")
    if n_per_side == 0:
        return np.empty((0, 2), dtype=np.float64)

    h = half_size
    corners = np.array([[-h, -h], [h, -h], [h, h], [-h, h], [-h, -h]])
    t = np.linspace(0.0, 1.0, n_per_side, endpoint=False)[:, None]
    sides = [a + t * (b - a) for a, b in zip(corners[:-1], corners[1:])]
    return np.vstack(sides)


def random_seed(n: int, seed: int = 0, bounds: Bounds = UNIT_BOUNDS) -> npt.NDArray[np.float64]:
    """Uniform random points in ``bounds``, reproducible for a given ``seed``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    rng = np.random.default_rng(seed)
    xmin, xmax, ymin, ymax = bounds
    xs = rng.uniform(xmin, xmax, n)
    ys = rng.uniform(ymin, ymax, n)
    return np.c_[xs, ys]
