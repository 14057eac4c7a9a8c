"""Tabular export of region sequences for inspection and plotting."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from ..layout.geometry import Region

REGION_COLUMNS = ("x", "y", "w", "h")


def regions_to_array(regions: Iterable[Region]) -> np.ndarray:
    """Stack regions into an (n, 4) float array of x, y, w, h."""
    rows = [r.get() for r in regions]
    if not rows:
        return np.empty((0, 4), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)


def regions_to_frame(
    regions: Sequence[Region],
    names: Sequence[Any] | None = None,
) -> pd.DataFrame:
    """Build a DataFrame with one row per region.

    Parameters
    ----------
    regions : sequence of Region
    names : optional row labels, one per region. Must be unique.
    """
    regions = list(regions)
    index = None
    if names is not None:
        names = list(names)
        if len(names) != len(regions):
            raise ValueError(
                f"Got {len(names)} names for {len(regions)} regions."
            )
        index = pd.Index(names)
        if index.has_duplicates:
            dupes = index[index.duplicated()].unique().tolist()
            raise ValueError(f"Region names must be unique. Found duplicates: {dupes[:5]}")
    return pd.DataFrame(
        regions_to_array(regions),
        index=index,
        columns=list(REGION_COLUMNS),
    )


def regions_from_frame(df: Any) -> list[Region]:
    """Rebuild regions from a DataFrame with x, y, w, h columns.

    Widths and heights are clamped the same way the Region constructor
    clamps them.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(df).__name__}."
        )
    missing = [c for c in REGION_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(
            f"Region columns missing from DataFrame: {missing}. "
            f"Available: {list(df.columns)}"
        )
    values = df.loc[:, list(REGION_COLUMNS)].to_numpy(dtype=np.float64)
    return [Region(*(float(v) for v in row)) for row in values]
