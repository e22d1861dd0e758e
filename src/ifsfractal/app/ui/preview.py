from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from ifsfractal.config import POINT_COLOR, POINT_SIZE, VIEW_BOX
from ifsfractal.model.generator import point_bounds

if TYPE_CHECKING:
    import numpy.typing as npt

# -------------------------------------------------------------------------------
# Preview widget
# -------------------------------------------------------------------------------

class PointCloudView(pg.PlotWidget):
    """
    pyqtgraph sink for generated point clouds with:
      - locked 1:1 aspect and an orthographic (-1..1) view box by default,
      - points drawn as single-pixel dots without connecting lines,
      - optional fit-to-points.

    The view owns no generation logic; it only displays the buffer it is given.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)

        self.setAspectLocked(True)
        self.hideAxis("left")
        self.hideAxis("bottom")
        self.setMenuEnabled(False)

        self._item = pg.ScatterPlotItem(
            size=POINT_SIZE,
            pen=None,
            brush=pg.mkBrush(POINT_COLOR),
            pxMode=True,
        )
        self.addItem(self._item)
        self._n_points: int = 0

        self.set_view_box(VIEW_BOX)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def n_points(self) -> int:
        return self._n_points

    def set_points(self, buffer: npt.NDArray[np.float32]) -> None:
        """
        Upload a frame of points.

        Args:
            buffer: Tightly packed (N, 2) float32 array, e.g. from to_vertex_buffer().
                An empty buffer clears the view.
        """
        arr = np.asarray(buffer, dtype=np.float32).reshape(-1, 2)
        self._n_points = arr.shape[0]
        if self._n_points == 0:
            self._item.clear()
            return
        self._item.setData(x=arr[:, 0], y=arr[:, 1])

    def set_view_box(self, bounds: tuple[float, float, float, float]) -> None:
        """Set the visible (left, right, bottom, top) range in world units."""
        left, right, bottom, top = bounds
        self.setXRange(left, right, padding=0.0)
        self.setYRange(bottom, top, padding=0.0)

    def fit_to_points(self, buffer: npt.NDArray[np.float32], padding: float = 0.05) -> None:
        """Zoom to the finite points of ``buffer``; keeps the current range if there are none."""
        bounds = point_bounds(buffer)
        if bounds is None:
            return
        xmin, xmax, ymin, ymax = bounds
        self.setXRange(xmin, xmax, padding=padding)
        self.setYRange(ymin, ymax, padding=padding)
