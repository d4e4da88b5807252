"""
Coordinate handling: input coercion and principal-axis rotation.
"""

from typing import Any, Mapping, Tuple

import numpy as np


def extract_coords(coords: Any) -> np.ndarray:
    """
    Coerce embedded coordinates to an (N, 2) float array.

    Accepts an array-like with at least two columns (extra columns are
    dropped), or a mapping holding the array under ``"coords"``.
    """
    if isinstance(coords, Mapping) and "coords" in coords:
        coords = coords["coords"]
    xy = np.asarray(coords, dtype=float)
    if xy.ndim != 2 or xy.shape[1] < 2:
        raise ValueError(
            f"coords must be a matrix with at least 2 columns, got shape {xy.shape}"
        )
    if xy.shape[0] < 1:
        raise ValueError("coords must contain at least one point")
    return xy[:, :2]


def pc_rotate(coords: np.ndarray) -> np.ndarray:
    """
    Project centered coordinates onto their first two principal directions.

    For a 2D point set this is a rotation (possibly with a reflection) that
    puts the direction of greatest variance along the X axis, with no
    rescaling: the result is ``U[:, :2] * s[:2]`` from the SVD of the
    centered data.
    """
    xy = np.asarray(coords, dtype=float)
    centered = xy - xy.mean(axis=0)
    u, s, _ = np.linalg.svd(centered, full_matrices=False)
    rotated = u[:, :2] * s[:2]
    # a single point has only one singular direction
    if rotated.shape[1] < 2:
        rotated = np.column_stack([rotated, np.zeros(len(rotated))])
    return rotated


def data_range(coords: np.ndarray) -> Tuple[float, float]:
    """Range over all coordinate values, used to give both axes equal extents."""
    return float(np.nanmin(coords)), float(np.nanmax(coords))


__all__ = ['extract_coords', 'pc_rotate', 'data_range']
