"""Exceptions raised by the model layer."""
from __future__ import annotations


class FractalError(Exception):
    """Base class for all ifsfractal errors."""


class IndexOutOfRange(FractalError, IndexError):
    """Raised when a MapSet index is outside [0, size)."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Map index {index} out of range for map set of size {size}.")
