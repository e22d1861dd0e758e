"""
Map Set
=======
An ordered, index-addressed collection of AffineMaps.

The order of the maps is the order in which the generator applies them, so
every mutation keeps positions stable except ``remove_at`` which shifts the
following entries down by one.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ifsfractal.config import DEFAULT_MAP_COUNT
from ifsfractal.model.affine_map import AffineMap
from ifsfractal.model.errors import IndexOutOfRange

logger = logging.getLogger(__name__)


class MapSet:
    """
    Owning container of the IFS maps.

    A new set holds DEFAULT_MAP_COUNT zero maps, which collapse every point
    onto the origin until the caller overwrites them.
    """

    def __init__(self, maps: Optional[Iterable[AffineMap]] = None) -> None:
        if maps is None:
            self._maps: list[AffineMap] = [AffineMap.zero() for _ in range(DEFAULT_MAP_COUNT)]
        else:
            self._maps = list(maps)

    @classmethod
    def empty(cls) -> MapSet:
        return cls(maps=[])

    def __len__(self) -> int:
        return len(self._maps)

    def __iter__(self) -> Iterator[AffineMap]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> AffineMap:
        return self.get(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapSet):
            return NotImplemented
        return self._maps == other._maps

    def __repr__(self) -> str:
        return f"MapSet({self._maps!r})"

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def add(self, affine_map: AffineMap) -> None:
        """Append a map; it will be applied after all existing maps."""
        self._maps.append(affine_map)
        logger.debug(f"Added map #{len(self._maps) - 1}: {affine_map}")

    def remove_at(self, index: int) -> AffineMap:
        """
        Remove the map at ``index`` and return it.

        Raises:
            IndexOutOfRange: If index is outside [0, size). The set is unchanged.
        """
        self._check_index(index)
        removed = self._maps.pop(index)
        logger.debug(f"Removed map #{index}, {len(self._maps)} left.")
        return removed

    def set_at(self, index: int, affine_map: AffineMap) -> None:
        """
        Replace the map at ``index`` keeping its position.

        Raises:
            IndexOutOfRange: If index is outside [0, size). The set is unchanged.
        """
        self._check_index(index)
        self._maps[index] = affine_map
        logger.debug(f"Replaced map #{index}: {affine_map}")

    def get(self, index: int) -> AffineMap:
        self._check_index(index)
        return self._maps[index]

    def snapshot(self) -> tuple[AffineMap, ...]:
        """Immutable copy of the current maps in application order."""
        return tuple(self._maps)

    def copy(self) -> MapSet:
        return MapSet(maps=self._maps)

    def is_contractive(self) -> bool:
        """True if the set is non-empty and every map is a contraction."""
        return bool(self._maps) and all(m.is_contraction for m in self._maps)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected rather than wrapped around.
        if not 0 <= index < len(self._maps):
            logger.warning(f"Rejected map index {index} (size {len(self._maps)}).")
            raise IndexOutOfRange(index, len(self._maps))
