"""
Region Detector Module
======================

Stateless batch containment - applies a region to many points at once.

Design:
- All methods are static (no instance state)
- Same arity rules as Region.contains(), applied to the whole batch
- Returns boolean masks (functional style)
"""

import numpy as np

from regionbox_geometry.shapes import Region


class RegionDetector:
    """
    Vectorized point-in-region tests over an N x k array of points.

    Rules per row (k = number of columns):
    - k < 2: every point is outside
    - k == 2: x1/x2 only (projection query on a Parallelepiped3D)
    - k >= 3: a Parallelepiped3D also checks x3; a Rectangle2D ignores it
    """

    @staticmethod
    def detect(region: Region, points) -> np.ndarray:
        """
        Detect which points lie inside the region.

        Args:
            region: Rectangle2D or Parallelepiped3D
            points: Array-like of shape (N, k)

        Returns:
            Boolean mask of shape (N,) where True = inside region

        Raises:
            ValueError: If points is not 2-dimensional
        """
        points = np.asarray(points, dtype=float)
        if points.ndim == 1 and points.size == 0:
            return np.array([], dtype=bool)
        if points.ndim != 2:
            raise ValueError(f"points must be an N x k array, got shape {points.shape}")

        n, k = points.shape
        if n == 0:
            return np.array([], dtype=bool)
        if k < 2:
            return np.zeros(n, dtype=bool)

        checked = region.axes[:2] if k == 2 else region.axes[:3]
        lows = np.array([axis.low for axis in checked])
        highs = np.array([axis.high for axis in checked])
        window = points[:, :len(checked)]

        # NaN compares False on both sides
        inside = np.logical_and(lows <= window, window <= highs)
        return inside.all(axis=1)

    @staticmethod
    def count_inside(region: Region, points) -> int:
        """Number of points inside the region."""
        return int(np.sum(RegionDetector.detect(region, points)))
