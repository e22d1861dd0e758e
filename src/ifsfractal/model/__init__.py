"""
The MODEL layer contains pure data structures and the generation algorithm.
It has NO knowledge of the GUI (Qt) or the Visualization (pyqtgraph).
It deals with affine maps, map sets and point clouds.
"""
from ifsfractal.model.affine_map import AffineMap
from ifsfractal.model.errors import FractalError, IndexOutOfRange
from ifsfractal.model.generator import PointCloudGenerator, generate_points, to_vertex_buffer
from ifsfractal.model.map_set import MapSet

__all__ = [
    "AffineMap",
    "FractalError",
    "IndexOutOfRange",
    "MapSet",
    "PointCloudGenerator",
    "generate_points",
    "to_vertex_buffer",
]
