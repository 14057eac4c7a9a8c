"""Region algebra: immutable axis-aligned rectangles for layout computation.

Every operation returns a new Region. Operations that turn out to be a
no-op (offset by zero, grow/shrink to the current size, intersecting with
a region that already contains this one) return the receiver itself.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from ..core.validation import is_number, normalize_ratios, validate_number
from .axis_layout import AxisLayout

logger = logging.getLogger(__name__)

# Padding ratios are capped so that one side can take at most half a dimension
MAX_PAD_RATIO = 0.5


@dataclass(frozen=True)
class Region:
    """An axis-aligned rectangle with top-left position and size.

    Width and height are clamped to zero at construction; position is
    not constrained.
    """

    x: float
    y: float
    w: float
    h: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "w", max(self.w, 0))
        object.__setattr__(self, "h", max(self.h, 0))

    @classmethod
    def from_region(cls, other: Region) -> Region:
        return cls(other.x, other.y, other.w, other.h)

    @classmethod
    def from_dict(cls, d: dict) -> Region:
        return cls(d["x"], d["y"], d["w"], d["h"])

    # --- Accessors ---

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def end(self) -> tuple[float, float]:
        """Bottom-right corner ``(x + w, y + h)``."""
        return self.right, self.bottom

    @property
    def area(self) -> float:
        return self.w * self.h

    def get(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.w, self.h

    def __iter__(self) -> Iterator[float]:
        return iter(self.get())

    def get_center(self) -> tuple[float, float]:
        return self.x + self.w / 2, self.y + self.h / 2

    def exists(self) -> bool:
        """True if the region has positive width and height."""
        return self.w > 0 and self.h > 0

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}

    # --- Splitting ---

    def split_vertical(self, *ratios: float) -> tuple[Region, ...]:
        """Split into regions stacked top to bottom.

        ``region.split_vertical(0.1, 0.9)`` gives a strip taking the top
        10% and one taking the remaining 90%. Ratios are normalized by
        their sum, so ``(1, 1, 2)`` and ``(0.25, 0.25, 0.5)`` are the same.
        """
        fractions = normalize_ratios(ratios)
        axis = AxisLayout(self.h * fractions, offset=self.y)
        return tuple(
            Region(self.x, float(y), self.w, float(h))
            for y, h in zip(axis.positions, axis.sizes)
        )

    def split_horizontal(self, *ratios: float) -> tuple[Region, ...]:
        """Split into regions laid out left to right. See split_vertical."""
        fractions = normalize_ratios(ratios)
        axis = AxisLayout(self.w * fractions, offset=self.x)
        return tuple(
            Region(float(x), self.y, float(w), self.h)
            for x, w in zip(axis.positions, axis.sizes)
        )

    def grid(self, rows: float, cols: float) -> list[Region]:
        """Partition into ``rows * cols`` equal cells.

        Note the axis naming: ``rows`` divides the width and ``cols``
        divides the height. Cells are emitted with the ``rows`` index in
        the outer loop, so for ``grid(2, 2)`` the order is (0, 0), (0, 1),
        (1, 0), (1, 1) in (x index, y index).

        Fractional counts keep the cell size w / rows but only emit
        floor(rows) columns of cells, like a counted loop up to rows - 1.
        """
        if rows <= 0 or cols <= 0:
            logger.debug("grid(%s, %s) has no cells", rows, cols)
            return []
        cell_w = self.w / rows
        cell_h = self.h / cols
        return [
            Region(self.x + cell_w * ix, self.y + cell_h * iy, cell_w, cell_h)
            for ix in range(math.floor(rows))
            for iy in range(math.floor(cols))
        ]

    # --- Padding ---

    def _pad(self, left: float, top: float, right: float, bottom: float) -> Region:
        return Region(
            self.x + left,
            self.y + top,
            self.w - (left + right),
            self.h - (top + bottom),
        )

    def pad(
        self,
        left: float,
        top: float | None = None,
        right: float | None = None,
        bottom: float | None = None,
    ) -> Region:
        """Create an inner region, with padding on each side.

        ``pad(v)`` pads all sides by v, ``pad(a, b)`` pads left/right by a
        and top/bottom by b, ``pad(l, t, r, b)`` pads each side
        independently. Over-padding gives a zero-size region.
        """
        validate_number(left, "Padding")
        if top is None:
            top = left
        if bottom is None:
            bottom = top
        if right is None:
            right = left
        return self._pad(left, top, right, bottom)

    def pad_ratio(
        self,
        left: float,
        top: float | None = None,
        right: float | None = None,
        bottom: float | None = None,
    ) -> Region:
        """Same as pad, but each value is a fraction of the dimension.

        ``pad_ratio(0.2)`` pads by 20% of the width on the left and right
        and 20% of the height on the top and bottom. Each ratio is capped
        at MAX_PAD_RATIO.
        """
        validate_number(left, "Padding ratio")
        left = min(MAX_PAD_RATIO, left)
        top = min(MAX_PAD_RATIO, left if top is None else top)
        bottom = min(MAX_PAD_RATIO, top if bottom is None else bottom)
        right = min(MAX_PAD_RATIO, left if right is None else right)
        return self._pad(left * self.w, top * self.h, right * self.w, bottom * self.h)

    # --- Resizing ---

    def grow_to(self, width: float | Region, height: float | None = None) -> Region:
        """Grow to at least width x height. Never shrinks."""
        width, height = get_wh(width, height)
        w = max(width, self.w)
        h = max(height, self.h)
        if w != self.w or h != self.h:
            return Region(self.x, self.y, w, h)
        return self

    def shrink_to(self, width: float | Region, height: float | None = None) -> Region:
        """Shrink to at most width x height. Never grows."""
        width, height = get_wh(width, height)
        w = min(width, self.w)
        h = min(height, self.h)
        if w != self.w or h != self.h:
            return Region(self.x, self.y, w, h)
        return self

    def scale_to_fit(
        self, width: float | Region, height: float | None = None,
    ) -> tuple[Region, float]:
        """Scale uniformly to fit within width x height, keeping aspect ratio.

        Returns the scaled region and the scale factor, so that content
        drawn inside it (text, images) can be scaled by the same amount.

        A zero-size axis puts no bound on the scale. If both axes are
        zero-size the scale is 0.0.
        """
        width, height = get_wh(width, height)
        scale_x = width / self.w if self.w else math.inf
        scale_y = height / self.h if self.h else math.inf
        # The smaller factor keeps the result inside both bounds
        scale = min(scale_x, scale_y)
        if not self.w and not self.h:
            logger.debug("scale_to_fit on zero-size region %r; using scale 0", self)
            scale = 0.0
        return Region(self.x, self.y, self.w * scale, self.h * scale), scale

    # --- Alignment ---

    def center_x(self, other: Region) -> Region:
        """Move horizontally so the centers line up with other."""
        cx, _ = self.get_center()
        target_x, _ = other.get_center()
        return Region(self.x + (target_x - cx), self.y, self.w, self.h)

    def center_y(self, other: Region) -> Region:
        """Move vertically so the centers line up with other."""
        _, cy = self.get_center()
        _, target_y = other.get_center()
        return Region(self.x, self.y + (target_y - cy), self.w, self.h)

    def center(self, other: Region) -> Region:
        return self.center_x(other).center_y(other)

    def intersect(self, other: Region) -> Region:
        """Overlap of two regions. Disjoint regions give a zero-size region."""
        x = max(other.x, self.x)
        y = max(other.y, self.y)
        end_x = min(self.right, other.right)
        end_y = min(self.bottom, other.bottom)
        w = max(end_x - x, 0)
        h = max(end_y - y, 0)
        if (x, y, w, h) != self.get():
            return Region(x, y, w, h)
        return self

    def offset(self, dx: float = 0, dy: float = 0) -> Region:
        if dx != 0 or dy != 0:
            return Region(self.x + dx, self.y + dy, self.w, self.h)
        return self


def make_region(
    x: float | Region,
    y: float | None = None,
    w: float | None = None,
    h: float | None = None,
) -> Region:
    """Create a Region from x, y, w, h, or copy one from an existing Region."""
    if isinstance(x, Region):
        return Region.from_region(x)
    if not is_number(x):
        raise TypeError(
            f"Expected x, y, w, h numbers or a Region, got {type(x).__name__}."
        )
    validate_number(y, "y")
    validate_number(w, "w")
    validate_number(h, "h")
    return Region(x, y, w, h)


def get_wh(w: float | Region, h: float | None = None) -> tuple[float, float]:
    """Resolve a width/height pair from two numbers or a Region.

    Both values are clamped to zero.
    """
    if isinstance(w, Region):
        return w.w, w.h
    if not is_number(w):
        raise TypeError(
            f"Expected w, h numbers or a Region, got {type(w).__name__}."
        )
    validate_number(h, "h")
    return max(w, 0), max(h, 0)
