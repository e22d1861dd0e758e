"""Predefined Map Sets (Catalog)."""
from __future__ import annotations

from enum import StrEnum
import math
from typing import Callable

from ifsfractal.model.affine_map import AffineMap
from ifsfractal.model.map_set import MapSet


class PresetKey(StrEnum):
    DEFAULT = "default"
    IDENTITY = "identity"
    SIERPINSKI = "sierpinski"
    CARPET = "carpet"
    SPIRAL = "spiral"


_REGISTRY: dict[str, Callable[[], MapSet]] = {}


def register_preset(key: str) -> Callable[[Callable[[], MapSet]], Callable[[], MapSet]]:
    """Decorator to register a MapSet factory under ``key``."""
    def decorator(factory: Callable[[], MapSet]) -> Callable[[], MapSet]:
        _REGISTRY[key] = factory
        return factory
    return decorator


def create_preset(key: str) -> MapSet:
    """Build a fresh MapSet for a registered preset."""
    factory = _REGISTRY.get(key)
    if not factory:
        raise KeyError(f"No preset registered for key '{key}'")
    return factory()


def list_keys() -> list[str]:
    return [str(key) for key in _REGISTRY]


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------

@register_preset(PresetKey.DEFAULT)
def _default() -> MapSet:
    # Five zero maps, same as a new MapSet.
    return MapSet()


@register_preset(PresetKey.IDENTITY)
def _identity() -> MapSet:
    return MapSet(maps=[AffineMap.identity()])


@register_preset(PresetKey.SIERPINSKI)
def _sierpinski() -> MapSet:
    """Three half-size maps pulling towards the corners of a triangle."""
    corners = [
        (math.cos(math.radians(90 + 120 * k)), math.sin(math.radians(90 + 120 * k)))
        for k in range(3)
    ]
    return MapSet(maps=[
        AffineMap(center=(0.5 * x, 0.5 * y), size=(0.5, 0.5), angle=0.0)
        for x, y in corners
    ])


@register_preset(PresetKey.CARPET)
def _carpet() -> MapSet:
    """Eight third-size maps on the border cells of a 3x3 grid."""
    third = 1.0 / 3.0
    maps = []
    for i in (-1, 0, 1):
        for j in (-1, 0, 1):
            if i == 0 and j == 0:
                continue
            maps.append(AffineMap(center=(2 * third * i, 2 * third * j), size=(third, third)))
    return MapSet(maps=maps)


@register_preset(PresetKey.SPIRAL)
def _spiral() -> MapSet:
    return MapSet(maps=[
        AffineMap.from_degrees(center=(0.1, 0.0), size=(0.92, 0.92), angle_deg=20.0),
        AffineMap.from_degrees(center=(0.3, 0.2), size=(0.3, 0.3), angle_deg=-45.0),
    ])
