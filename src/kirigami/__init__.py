"""kirigami: region algebra for cutting rectangles into layouts."""

from ._version import __version__
from .layout.geometry import MAX_PAD_RATIO, Region, get_wh, make_region
from .layout.axis_layout import AxisLayout
from .export.frame import regions_from_frame, regions_to_array, regions_to_frame

__all__ = [
    "__version__",
    "Region",
    "make_region",
    "get_wh",
    "MAX_PAD_RATIO",
    "AxisLayout",
    "regions_to_array",
    "regions_to_frame",
    "regions_from_frame",
]
