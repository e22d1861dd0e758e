from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import QMutex, QMutexLocker, QObject, Signal

from ifsfractal.model.affine_map import AffineMap
from ifsfractal.model.errors import FractalError
from ifsfractal.model.generator import to_vertex_buffer
from ifsfractal.model.state import FractalState

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class FractalStore(QObject):
    """
    Central state store with signals for view sync.

    All edits and generate() calls go through one mutex, so a generation
    call never sees the map set change half-way through a frame.
    """
    maps_changed = Signal(object)
    seed_changed = Signal(int)
    iterations_changed = Signal(int)
    error_raised = Signal(str)

    def __init__(self, state: Optional[FractalState] = None) -> None:
        super().__init__()
        self.state = state if state is not None else FractalState()
        self._mutex = QMutex()

    # ---- edits ----

    def add_map(self, affine_map: AffineMap) -> None:
        with QMutexLocker(self._mutex):
            self.state.add_map(affine_map)
        self.maps_changed.emit(self.state.map_set.snapshot())

    def remove_map(self, index: int) -> AffineMap:
        try:
            with QMutexLocker(self._mutex):
                removed = self.state.remove_map(index)
        except FractalError as e:
            self.error_raised.emit(str(e))
            raise
        self.maps_changed.emit(self.state.map_set.snapshot())
        return removed

    def set_map(self, index: int, affine_map: AffineMap) -> None:
        try:
            with QMutexLocker(self._mutex):
                self.state.set_map(index, affine_map)
        except FractalError as e:
            self.error_raised.emit(str(e))
            raise
        self.maps_changed.emit(self.state.map_set.snapshot())

    def load_preset(self, key: str) -> None:
        try:
            with QMutexLocker(self._mutex):
                self.state.load_preset(key)
        except KeyError as e:
            logger.error(f"Unknown preset: {e}")
            self.error_raised.emit(f"Unknown preset '{key}'.")
            raise
        self.maps_changed.emit(self.state.map_set.snapshot())

    def set_seed(self, seed: npt.ArrayLike) -> None:
        with QMutexLocker(self._mutex):
            self.state.set_seed(seed)
        self.seed_changed.emit(self.state.seed.shape[0])

    def set_iterations(self, iterations: int) -> None:
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}.")
        with QMutexLocker(self._mutex):
            self.state.iterations = iterations
        self.iterations_changed.emit(iterations)

    # ---- generation ----

    def generate(self, iterations: Optional[int] = None) -> npt.NDArray[np.float64]:
        with QMutexLocker(self._mutex):
            return self.state.generate(iterations)

    def generate_vertex_buffer(self, iterations: Optional[int] = None) -> npt.NDArray[np.float32]:
        """One frame of points packed for upload; ownership passes to the caller."""
        return to_vertex_buffer(self.generate(iterations))
