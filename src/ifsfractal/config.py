"""
Configuration & Global Constants
================================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the viewer defaults (window size, view box, iteration
   count) in one place instead of scattering literals through the GUI code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets when the app is frozen into an .exe.

Exports:
    DEFAULT_MAP_COUNT (int): Number of zero maps in a freshly created MapSet.
    DEFAULT_ITERATIONS (int): Iteration rounds generated per frame.
    VIEW_BOX (tuple): Orthographic (left, right, bottom, top) view range.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/ifsfractal/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Model defaults
DEFAULT_MAP_COUNT: int = 5
DEFAULT_ITERATIONS: int = 10000
DEFAULT_SEED_GRID: int = 64
DEFAULT_PRESET: str = "sierpinski"

# Viewer defaults
WINDOW_TITLE: str = "IFS Fractal Generator"
WINDOW_SIZE: tuple[int, int] = (640, 480)
VIEW_BOX: tuple[float, float, float, float] = (-1.0, 1.0, -1.0, 1.0)
BACKGROUND_COLOR: str = "k"
POINT_COLOR: str = "w"
POINT_SIZE: float = 1.0
FRAME_INTERVAL_MS: int = 16

LOG_FILE: str = get_resource_path("ifsfractal.log")
