"""
Fractal State (Data Model)
==========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the map set, the starting working set and the
   iteration count in one place.
2. Controller surface: add_map / remove_map / set_map / generate are the only
   operations the host needs; Views read from this object, the Store writes
   to it.
3. Decoupling: It has no Qt dependency, so it can be driven from tests or
   scripts without a rendering context.

Classes:
    FractalState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from ifsfractal.config import DEFAULT_ITERATIONS
from ifsfractal.model.affine_map import AffineMap
from ifsfractal.model.generator import PointCloudGenerator, as_points
from ifsfractal.model.map_set import MapSet
from ifsfractal.model.presets import create_preset

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class FractalState:
    """
    Holds everything needed to produce one frame of points.
    Pass this instance to your Store and Views.
    """
    map_set: MapSet = field(default_factory=MapSet)
    seed: npt.NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2), dtype=np.float64))
    iterations: int = DEFAULT_ITERATIONS
    preset_name: Optional[str] = None

    def __post_init__(self) -> None:
        self.seed = as_points(self.seed)
        self._generator = PointCloudGenerator(self.map_set)

    # ---- controller surface ----

    def add_map(self, affine_map: AffineMap) -> None:
        self.map_set.add(affine_map)

    def remove_map(self, index: int) -> AffineMap:
        return self.map_set.remove_at(index)

    def set_map(self, index: int, affine_map: AffineMap) -> None:
        self.map_set.set_at(index, affine_map)

    def generate(self, iterations: Optional[int] = None) -> npt.NDArray[np.float64]:
        """
        Generate the point cloud for the current maps and seed.

        Args:
            iterations: Rounds to run. Defaults to ``self.iterations``.
        """
        rounds = self.iterations if iterations is None else iterations
        # map_set and seed may have been reassigned directly.
        self._generator.map_set = self.map_set
        return self._generator.generate(rounds, self.seed)

    # ---- configuration ----

    def set_seed(self, seed: Optional[npt.ArrayLike]) -> None:
        self.seed = as_points(seed)
        logger.debug(f"Seed set to {self.seed.shape[0]} points.")

    def load_preset(self, key: str) -> None:
        """Replace the map set with a fresh copy of a named preset."""
        self.map_set = create_preset(key)
        self.preset_name = key
        logger.info(f"Loaded preset '{key}' with {len(self.map_set)} maps.")

    def reset(self) -> None:
        """Back to the default map set, an empty seed and the default iteration count."""
        self.map_set = MapSet()
        self.seed = np.empty((0, 2), dtype=np.float64)
        self.iterations = DEFAULT_ITERATIONS
        self.preset_name = None
        logger.info("Fractal state has been reset.")
