import math
from typing import List, Optional, Sequence

import numpy as np

from georelate.components.geometry.coordinate import Coordinate
from georelate.components.geometry.geometry_base import Geometry
from georelate.components.geometry.rect import Rect


class GeometryOps:
    """Closed-form helpers over coordinate sequences"""

    @classmethod
    def to_array(cls, coords: Sequence[Coordinate]) -> np.ndarray:
        """Coordinates as an (N, 2) float array"""
        if len(coords) == 0:
            return np.empty((0, 2), dtype=float)
        return np.array([(c.x, c.y) for c in coords], dtype=float)

    @classmethod
    def bounding_rect(cls, geometry: Geometry) -> Optional[Rect]:
        """
        Bounding rectangle of a geometry

        Args:
            geometry: Any geometry

        Returns:
            Rect covering every coordinate, or None for an empty geometry
        """
        crds = cls.to_array(list(geometry.coords()))
        if crds.shape[0] == 0:
            return None
        lo = crds.min(axis=0)
        hi = crds.max(axis=0)
        return Rect((float(lo[0]), float(lo[1])), (float(hi[0]), float(hi[1])))

    @classmethod
    def envelopes_intersect(cls, a: Optional[Rect], b: Optional[Rect]) -> bool:
        if a is None or b is None:
            return False
        return a.intersects(b)

    @classmethod
    def signed_area(cls, ring: Sequence[Coordinate]) -> float:
        """
        Shoelace signed area, positive for counter-clockwise rings

        Coordinates are shifted to the first vertex to limit cancellation.
        """
        crds = cls.to_array(ring)
        if crds.shape[0] < 3:
            return 0.0
        crds = crds - crds[0]
        x, y = crds[:, 0], crds[:, 1]
        return float(np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]) / 2.0)

    @classmethod
    def length(cls, coords: Sequence[Coordinate]) -> float:
        crds = cls.to_array(coords)
        if crds.shape[0] < 2:
            return 0.0
        return float(np.sum(np.hypot(*np.diff(crds, axis=0).T)))

    @classmethod
    def remove_repeated_points(cls, coords: Sequence[Coordinate]) -> List[Coordinate]:
        """Drop consecutive duplicates, keeping the first of each run"""
        result: List[Coordinate] = []
        for c in coords:
            if not result or result[-1] != c:
                result.append(c)
        return result

    @classmethod
    def is_finite(cls, coord: Coordinate) -> bool:
        return math.isfinite(coord.x) and math.isfinite(coord.y)
