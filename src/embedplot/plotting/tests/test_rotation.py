"""Tests for rotation.py."""

import numpy as np
import pandas as pd
import pytest

from embedplot.plotting.rotation import data_range, extract_coords, pc_rotate


class TestExtractCoords:
    def test_mapping_with_coords(self):
        xy = extract_coords({"coords": [[0, 1], [2, 3]], "other": None})
        assert xy.shape == (2, 2)
        assert xy.dtype == float

    def test_extra_columns_dropped(self):
        xy = extract_coords(np.arange(9).reshape(3, 3))
        assert xy.tolist() == [[0, 1], [3, 4], [6, 7]]

    def test_data_frame(self):
        xy = extract_coords(pd.DataFrame({"a": [1, 2], "b": [3, 4]}))
        assert xy.tolist() == [[1, 3], [2, 4]]

    @pytest.mark.parametrize("bad", [[1, 2, 3], [[1], [2]], np.empty((0, 2))])
    def test_rejects_bad_shapes(self, bad):
        with pytest.raises(ValueError):
            extract_coords(bad)


class TestPcRotate:
    def test_aligns_main_variance_with_x(self):
        xy = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]])
        rotated = pc_rotate(xy)
        np.testing.assert_allclose(np.abs(rotated[:, 0]), [np.sqrt(2), 0, np.sqrt(2)], atol=1e-12)
        np.testing.assert_allclose(rotated[:, 1], 0, atol=1e-12)

    def test_preserves_distances(self):
        rng = np.random.default_rng(0)
        xy = rng.normal(size=(20, 2)) * [5, 1] + [10, -3]
        rotated = pc_rotate(xy)

        def dists(a):
            return np.linalg.norm(a[:, None, :] - a[None, :, :], axis=-1)

        np.testing.assert_allclose(dists(rotated), dists(xy), atol=1e-9)
        assert rotated[:, 0].var() >= rotated[:, 1].var()

    def test_single_point(self):
        assert pc_rotate(np.array([[3.0, 4.0]])).shape == (1, 2)

    def test_data_range(self):
        assert data_range(np.array([[0, -2], [5, 1]])) == (-2.0, 5.0)
