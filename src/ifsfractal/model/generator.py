"""
Point Cloud Generation
======================
Evolves a working set of 2D points through the maps of a MapSet.

Iteration is flat: every round pushes the *whole* working set through
every map in stored order, and each round acts on the previous round's
output. Points never branch into one child per map, so the size of the
cloud is the size of the starting set.

This is deliberately not the textbook IFS algorithm (chaos game or
exhaustive branching). See DESIGN.md before changing it.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, TYPE_CHECKING, Union

import numpy as np

from ifsfractal.model.affine_map import AffineMap
from ifsfractal.model.map_set import MapSet

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

MapsLike = Union[MapSet, Sequence[AffineMap]]


def as_points(points: Optional[npt.ArrayLike]) -> npt.NDArray[np.float64]:
    """
    Coerce input into an (N, 2) float64 array.

    Args:
        points: None, an empty sequence, a list of (x, y) tuples or an (N, 2) array.

    Returns:
        A new (N, 2) array. None and empty input give shape (0, 2).

    Raises:
        ValueError: If the input is not of shape (N, 2).
    """
    if points is None:
        return np.empty((0, 2), dtype=np.float64)

    arr = np.array(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")

    return arr


def map_operands(
    maps: Iterable[AffineMap]
) -> list[tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]]:
    """
    Precompute (transposed linear part, offset) for each map, in order.

    Applying an operand pair to an (N, 2) array is ``points @ linear_t + offset``,
    the same arithmetic as AffineMap.apply().
    """
    operands = []
    for affine_map in maps:
        matrix = affine_map.to_matrix()
        operands.append((np.ascontiguousarray(matrix[:2, :2].T), matrix[:2, 2].copy()))
    return operands


def generate_points(
    maps: MapsLike,
    iterations: int,
    points: Optional[npt.ArrayLike] = None
) -> npt.NDArray[np.float64]:
    """
    Pure generation function: (maps, iterations, starting points) -> points.

    Args:
        maps: A MapSet or a sequence of AffineMaps, applied in order.
        iterations: Number of rounds (>= 0).
        points: Starting working set, (N, 2). May be empty or None.

    Returns:
        A new (N, 2) float64 array. The input is never modified.
    """
    return PointCloudGenerator(maps).generate(iterations, points)


def to_vertex_buffer(points: npt.ArrayLike) -> npt.NDArray[np.float32]:
    """
    Pack points for a GPU vertex buffer.

    Returns:
        A C-contiguous float32 array of shape (N, 2): x0, y0, x1, y1, ...
        with a stride of two floats and no padding, in generation order.
    """
    arr = as_points(points)
    return np.ascontiguousarray(arr, dtype=np.float32)


def point_bounds(points: npt.ArrayLike) -> Optional[tuple[float, float, float, float]]:
    """
    Axis-aligned bounds of the finite points as (xmin, xmax, ymin, ymax).

    Returns None if there is no finite point.
    """
    arr = as_points(points)
    finite = arr[np.all(np.isfinite(arr), axis=1)]
    if finite.shape[0] == 0:
        return None
    xmin, ymin = finite.min(axis=0)
    xmax, ymax = finite.max(axis=0)
    return float(xmin), float(xmax), float(ymin), float(ymax)


class PointCloudGenerator:
    """
    Generates IFS point clouds for a MapSet.

    The generator holds no state that affects results: a call is a pure
    function of the map snapshot, the iteration count and the starting
    points. It only keeps two work buffers so that repeated per-frame calls
    with the same point count do not reallocate them.
    """

    def __init__(self, maps: MapsLike, seed: Optional[npt.ArrayLike] = None) -> None:
        """
        Args:
            maps: The MapSet to read on every call. A plain sequence of maps
                is wrapped in a new MapSet.
            seed: Default starting working set used when generate() is
                called without points. Empty if omitted.
        """
        self.map_set: MapSet = maps if isinstance(maps, MapSet) else MapSet(maps=maps)
        self.seed: npt.NDArray[np.float64] = as_points(seed)

        self._work: npt.NDArray[np.float64] = np.empty((0, 2), dtype=np.float64)
        self._scratch: npt.NDArray[np.float64] = np.empty((0, 2), dtype=np.float64)

    def set_seed(self, seed: Optional[npt.ArrayLike]) -> None:
        self.seed = as_points(seed)

    def generate(
        self,
        iterations: int,
        points: Optional[npt.ArrayLike] = None
    ) -> npt.NDArray[np.float64]:
        """
        Run ``iterations`` rounds over the working set.

        Args:
            iterations: Number of rounds (>= 0).
            points: Starting working set. Defaults to the generator's seed.

        Returns:
            A new (N, 2) float64 array owned by the caller.

        Raises:
            ValueError: If iterations is negative or points is not (N, 2).
        """
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}.")

        start = self.seed if points is None else as_points(points)
        n_points = start.shape[0]
        maps = self.map_set.snapshot()

        if n_points == 0:
            return np.empty((0, 2), dtype=np.float64)
        if iterations == 0 or not maps:
            return start.copy()

        operands = map_operands(maps)

        work, scratch = self._buffers(n_points)
        work[...] = start

        # Non-contractive maps may overflow; inf/nan are valid output here.
        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            for _ in range(iterations):
                for linear_t, offset in operands:
                    np.matmul(work, linear_t, out=scratch)
                    scratch += offset
                    work, scratch = scratch, work

        logger.debug(
            f"Generated {n_points} points over {iterations} rounds with {len(maps)} maps."
        )
        return work.copy()

    def _buffers(self, n_points: int) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Return the two (n_points, 2) work buffers, reallocating only on size change."""
        if self._work.shape[0] != n_points:
            self._work = np.empty((n_points, 2), dtype=np.float64)
            self._scratch = np.empty((n_points, 2), dtype=np.float64)
        return self._work, self._scratch
