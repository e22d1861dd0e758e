"""
Affine Maps
===========
One contraction transform of an Iterated Function System.

A map is stored the way the user thinks about it, as a "rectangle" with a
center, a size and a rotation angle, and is converted on demand to a 3x3
homogeneous matrix. The composition order is fixed for every map:

    p' = Translate(center) · Scale(size) · Rotate(angle) · p

i.e. a point is rotated about the origin first, then scaled along the x/y
axes, then moved by ``center``.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def rotation_matrix(angle_rad: float) -> npt.NDArray[np.float64]:
    """Homogeneous rotation about the origin (counter-clockwise)."""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return np.array([
        [cos_a, -sin_a, 0.0],
        [sin_a, cos_a, 0.0],
        [0.0, 0.0, 1.0],
    ])


def scale_matrix(sx: float, sy: float) -> npt.NDArray[np.float64]:
    """Homogeneous axis-aligned scaling."""
    return np.array([
        [sx, 0.0, 0.0],
        [0.0, sy, 0.0],
        [0.0, 0.0, 1.0],
    ])


def translation_matrix(tx: float, ty: float) -> npt.NDArray[np.float64]:
    """Homogeneous translation."""
    return np.array([
        [1.0, 0.0, tx],
        [0.0, 1.0, ty],
        [0.0, 0.0, 1.0],
    ])


@dataclass(frozen=True)
class AffineMap:
    """
    A single IFS map described by a center, a size and a rotation.

    Attributes:
        center: (x, y) translation applied last.
        size: (sx, sy) scale factors. Both in (0, 1) for a contraction.
        angle: Rotation in radians, applied first.
    """
    center: tuple[float, float] = (0.0, 0.0)
    size: tuple[float, float] = (0.0, 0.0)
    angle: float = 0.0

    def __post_init__(self) -> None:
        # Normalise sequences / numpy scalars to plain float tuples so that
        # equality and hashing behave like a value type.
        object.__setattr__(self, "center", (float(self.center[0]), float(self.center[1])))
        object.__setattr__(self, "size", (float(self.size[0]), float(self.size[1])))
        object.__setattr__(self, "angle", float(self.angle))

    @classmethod
    def zero(cls) -> AffineMap:
        """The zero-valued map; collapses every point onto the origin."""
        return cls()

    @classmethod
    def identity(cls) -> AffineMap:
        return cls(center=(0.0, 0.0), size=(1.0, 1.0), angle=0.0)

    @classmethod
    def from_degrees(
        cls,
        center: tuple[float, float],
        size: tuple[float, float],
        angle_deg: float
    ) -> AffineMap:
        """Convenience constructor taking the rotation in degrees."""
        return cls(center=center, size=size, angle=math.radians(angle_deg))

    def with_center(self, x: float, y: float) -> AffineMap:
        return replace(self, center=(x, y))

    def with_size(self, sx: float, sy: float) -> AffineMap:
        return replace(self, size=(sx, sy))

    def with_angle(self, angle_rad: float) -> AffineMap:
        return replace(self, angle=angle_rad)

    def to_matrix(self) -> npt.NDArray[np.float64]:
        """
        Build the 3x3 homogeneous transform T(center) · S(size) · R(angle).

        Returns:
            A new (3, 3) float64 array. The same field values always give a
            bit-identical matrix.
        """
        translate = translation_matrix(*self.center)
        scale = scale_matrix(*self.size)
        rotate = rotation_matrix(self.angle)
        return translate @ scale @ rotate

    @property
    def linear_part(self) -> npt.NDArray[np.float64]:
        """The 2x2 rotation/scale block of the matrix."""
        return self.to_matrix()[:2, :2]

    @property
    def translation(self) -> npt.NDArray[np.float64]:
        return np.array(self.center, dtype=np.float64)

    @property
    def is_contraction(self) -> bool:
        """True if both scale factors lie in the open interval (0, 1)."""
        return all(0.0 < abs(s) < 1.0 for s in self.size)

    def apply(self, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """
        Transform a set of points.

        Args:
            points: (N, 2) array or list of (x, y) pairs.

        Returns:
            A new (N, 2) float64 array with the transformed points.

        Raises:
            ValueError: If the input cannot be read as (N, 2).
        """
        arr = np.asarray(points, dtype=np.float64)
        if arr.size == 0:
            return np.empty((0, 2), dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")
        return arr @ self.linear_part.T + self.translation
