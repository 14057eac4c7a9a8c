"""Tests for DataFrame / array export of regions."""

import numpy as np
import pandas as pd
import pytest

from kirigami.export.frame import (
    REGION_COLUMNS,
    regions_from_frame,
    regions_to_array,
    regions_to_frame,
)
from kirigami.layout.geometry import Region


class TestRegionsToArray:
    def test_shape_and_values(self, square):
        arr = regions_to_array(square.grid(2, 2))
        assert arr.shape == (4, 4)
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr[1], [0, 50, 50, 50])

    def test_empty(self):
        assert regions_to_array([]).shape == (0, 4)

    def test_accepts_generator(self, square):
        arr = regions_to_array(r for r in square.split_vertical(1, 1))
        assert arr.shape == (2, 4)


class TestRegionsToFrame:
    def test_columns(self, square):
        df = regions_to_frame(square.split_horizontal(1, 3))
        assert tuple(df.columns) == REGION_COLUMNS
        assert len(df) == 2
        assert df["w"].tolist() == pytest.approx([25, 75])

    def test_named_rows(self, square):
        header, body = square.split_vertical(0.1, 0.9)
        df = regions_to_frame([header, body], names=["header", "body"])
        assert list(df.index) == ["header", "body"]
        assert df.at["body", "y"] == pytest.approx(10)

    def test_name_count_mismatch(self, square):
        with pytest.raises(ValueError, match="2 names for 1 regions"):
            regions_to_frame([square], names=["a", "b"])

    def test_duplicate_names(self, square):
        with pytest.raises(ValueError, match="unique"):
            regions_to_frame([square, square], names=["a", "a"])


class TestRegionsFromFrame:
    def test_roundtrip(self, offset_rect):
        regions = list(offset_rect.split_horizontal(1, 2, 1))
        assert regions_from_frame(regions_to_frame(regions)) == regions

    def test_clamps_sizes(self):
        df = pd.DataFrame({"x": [0.0], "y": [0.0], "w": [-1.0], "h": [5.0]})
        assert regions_from_frame(df) == [Region(0, 0, 0, 5)]

    def test_extra_columns_ignored(self):
        df = pd.DataFrame({"name": ["a"], "x": [1], "y": [2], "w": [3], "h": [4]})
        assert regions_from_frame(df) == [Region(1, 2, 3, 4)]

    def test_missing_columns(self):
        df = pd.DataFrame({"x": [0], "y": [0]})
        with pytest.raises(KeyError, match="missing"):
            regions_from_frame(df)

    def test_not_a_frame(self):
        with pytest.raises(TypeError, match="DataFrame"):
            regions_from_frame([[0, 0, 1, 1]])
