"""Segment positions along a single axis."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class AxisLayout:
    """Partitions one axis into consecutive segments.

    Each segment starts exactly where the previous one ends, so the
    segments never overlap and leave no gaps. Negative sizes are treated
    as zero.
    """

    def __init__(
        self,
        sizes: Sequence[float] | np.ndarray,
        offset: float = 0.0,
    ) -> None:
        self._sizes = np.maximum(np.asarray(sizes, dtype=np.float64), 0.0)
        self._offset = offset
        self._positions = self._compute_positions()

    def _compute_positions(self) -> np.ndarray:
        """Compute the start coordinate of each segment."""
        positions = np.empty(len(self._sizes), dtype=np.float64)
        current = self._offset
        for i, size in enumerate(self._sizes):
            positions[i] = current
            current += size
        return positions

    @property
    def positions(self) -> np.ndarray:
        """Start coordinates for each segment (read-only)."""
        return self._positions

    @property
    def sizes(self) -> np.ndarray:
        return self._sizes

    @property
    def offset(self) -> float:
        return self._offset
