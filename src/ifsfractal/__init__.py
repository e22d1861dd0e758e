"""Real-time IFS fractal point cloud generator."""
__version__ = "0.1.0"
