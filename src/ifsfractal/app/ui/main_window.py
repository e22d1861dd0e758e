"""
Main viewer window: a point cloud view driven by a frame timer.
"""
from __future__ import annotations

import logging
import time

import numpy as np

from PySide6.QtCore import QSettings, QTimer, Slot
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QComboBox, QLabel, QMainWindow, QSpinBox, QStatusBar, QToolBar

from ifsfractal.app.application import VISIBLE_APP_NAME
from ifsfractal.app.state import FractalStore
from ifsfractal.app.ui.preview import PointCloudView
from ifsfractal.config import (
    DEFAULT_ITERATIONS,
    DEFAULT_PRESET,
    DEFAULT_SEED_GRID,
    FRAME_INTERVAL_MS,
    VIEW_BOX,
    WINDOW_SIZE,
)
from ifsfractal.model.presets import list_keys
from ifsfractal.model.seeds import grid_seed

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 1_000_000


class MainWindow(QMainWindow):
    def __init__(self, store: FractalStore | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # Global store
        self.store = store if store is not None else FractalStore()

        settings = QSettings()
        iterations = settings.value("generation/iterations", DEFAULT_ITERATIONS, type=int)
        grid = settings.value("generation/seed_grid", DEFAULT_SEED_GRID, type=int)
        preset = settings.value("generation/preset", DEFAULT_PRESET, type=str)

        # ---- Central: point cloud view ----
        self.view = PointCloudView(self)
        self.setCentralWidget(self.view)
        self._last_buffer = np.empty((0, 2), dtype=np.float32)

        # ---- Toolbar ----
        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.preset_combo = QComboBox(toolbar)
        self.preset_combo.addItems(list_keys())
        toolbar.addWidget(QLabel(self.tr("Preset "), toolbar))
        toolbar.addWidget(self.preset_combo)

        self.iterations_spin = QSpinBox(toolbar)
        self.iterations_spin.setRange(0, MAX_ITERATIONS)
        self.iterations_spin.setSingleStep(100)
        toolbar.addSeparator()
        toolbar.addWidget(QLabel(self.tr("Iterations "), toolbar))
        toolbar.addWidget(self.iterations_spin)

        toolbar.addSeparator()
        self.fit_action = QAction(self.tr("Fit"), self)
        self.fit_action.setToolTip(self.tr("Zoom to the current point cloud"))
        self.fit_action.triggered.connect(self.fit_view)
        toolbar.addAction(self.fit_action)

        self.reset_view_action = QAction(self.tr("Reset view"), self)
        self.reset_view_action.triggered.connect(self.reset_view)
        toolbar.addAction(self.reset_view_action)

        self.setStatusBar(QStatusBar(self))

        # ---- Store wiring ----
        self.store.error_raised.connect(self._show_error)
        self.store.set_seed(grid_seed(grid))
        self.store.set_iterations(iterations)
        if preset in list_keys():
            self.store.load_preset(preset)
            self.preset_combo.setCurrentText(preset)

        self.iterations_spin.setValue(self.store.state.iterations)
        self.preset_combo.currentTextChanged.connect(self._on_preset_changed)
        self.iterations_spin.valueChanged.connect(self.store.set_iterations)

        # ---- Frame loop ----
        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self.render_frame)
        self._timer.start()

    @Slot()
    def render_frame(self) -> None:
        """Generate once and hand the buffer to the view."""
        t0 = time.perf_counter()
        buffer = self.store.generate_vertex_buffer()
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        self.view.set_points(buffer)
        self._last_buffer = buffer
        self.statusBar().showMessage(
            self.tr("{n} points, {it} iterations, {ms:.1f} ms").format(
                n=buffer.shape[0], it=self.store.state.iterations, ms=elapsed_ms
            )
        )

    @Slot()
    def fit_view(self) -> None:
        """Zoom the view to the last rendered frame."""
        self.view.fit_to_points(self._last_buffer)

    @Slot()
    def reset_view(self) -> None:
        self.view.set_view_box(VIEW_BOX)

    @Slot(str)
    def _on_preset_changed(self, key: str) -> None:
        self.store.load_preset(key)

    @Slot(str)
    def _show_error(self, msg: str) -> None:
        self.statusBar().showMessage(msg, 5000)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._timer.stop()
        settings = QSettings()
        settings.setValue("generation/iterations", self.store.state.iterations)
        if self.store.state.preset_name:
            settings.setValue("generation/preset", self.store.state.preset_name)
        logger.info("Viewer closed.")
        super().closeEvent(event)
