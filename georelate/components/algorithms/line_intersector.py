"""
Robust segment intersection.

Endpoint and collinear cases copy input coordinates exactly. Proper
crossings are solved once in exact rational arithmetic and rounded to the
nearest double, so every edge that shares the crossing receives the same
coordinate.
"""
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Tuple

from georelate.core import Orientation
from georelate.components.geometry.coordinate import Coordinate
from georelate.components.algorithms.orientation import orientation_index


@dataclass(frozen=True)
class LineIntersection:
    """
    Result of intersecting two segments

    A single point (proper or not) or, for collinear overlaps, the two
    endpoints of the shared sub-segment.
    """
    points: Tuple[Coordinate, ...]
    is_proper: bool = False

    @property
    def is_collinear(self) -> bool:
        return len(self.points) == 2

    @property
    def is_single_point(self) -> bool:
        return len(self.points) == 1


def envelope_contains(p1: Coordinate, p2: Coordinate, q: Coordinate) -> bool:
    """True if q lies in the envelope of segment p1-p2"""
    return (min(p1.x, p2.x) <= q.x <= max(p1.x, p2.x)
            and min(p1.y, p2.y) <= q.y <= max(p1.y, p2.y))


def envelopes_intersect(p1: Coordinate, p2: Coordinate, q1: Coordinate, q2: Coordinate) -> bool:
    """True if the envelopes of segments p1-p2 and q1-q2 intersect"""
    return not (
        min(q1.x, q2.x) > max(p1.x, p2.x) or max(q1.x, q2.x) < min(p1.x, p2.x)
        or min(q1.y, q2.y) > max(p1.y, p2.y) or max(q1.y, q2.y) < min(p1.y, p2.y)
    )


def is_on_segment(p: Coordinate, p0: Coordinate, p1: Coordinate) -> bool:
    """True if p lies on the closed segment p0-p1"""
    if not envelope_contains(p0, p1, p):
        return False
    return orientation_index(p0, p1, p) == Orientation.COLLINEAR


def _distance_to_segment(p: Coordinate, a: Coordinate, b: Coordinate) -> float:
    if a == b:
        return ((p.x - a.x) ** 2 + (p.y - a.y) ** 2) ** 0.5
    len2 = (b.x - a.x) ** 2 + (b.y - a.y) ** 2
    r = ((p.x - a.x) * (b.x - a.x) + (p.y - a.y) * (b.y - a.y)) / len2
    r = min(1.0, max(0.0, r))
    px = a.x + r * (b.x - a.x)
    py = a.y + r * (b.y - a.y)
    return ((p.x - px) ** 2 + (p.y - py) ** 2) ** 0.5


class LineIntersector:
    """
    Computes the intersection of two line segments

    Stateless: each call returns a fresh LineIntersection (or None), so a
    single instance can be shared by every edge pair of a computation.
    """

    def compute_intersection(
        self,
        p1: Coordinate,
        p2: Coordinate,
        q1: Coordinate,
        q2: Coordinate
    ) -> Optional[LineIntersection]:
        """
        Intersect segment p1-p2 with segment q1-q2

        Returns:
            LineIntersection, or None if the segments are disjoint
        """
        if not envelopes_intersect(p1, p2, q1, q2):
            return None

        # both endpoints of one segment on the same side of the other: no intersection
        pq1 = orientation_index(p1, p2, q1)
        pq2 = orientation_index(p1, p2, q2)
        if (pq1 > 0 and pq2 > 0) or (pq1 < 0 and pq2 < 0):
            return None

        qp1 = orientation_index(q1, q2, p1)
        qp2 = orientation_index(q1, q2, p2)
        if (qp1 > 0 and qp2 > 0) or (qp1 < 0 and qp2 < 0):
            return None

        if pq1 == 0 and pq2 == 0 and qp1 == 0 and qp2 == 0:
            return self._compute_collinear_intersection(p1, p2, q1, q2)

        # single intersection point; copy it when it is an input vertex
        if pq1 == 0 or pq2 == 0 or qp1 == 0 or qp2 == 0:
            if p1 == q1 or p1 == q2:
                point = p1
            elif p2 == q1 or p2 == q2:
                point = p2
            elif pq1 == 0:
                point = q1
            elif pq2 == 0:
                point = q2
            elif qp1 == 0:
                point = p1
            else:
                point = p2
            return LineIntersection((point,), is_proper=False)

        return LineIntersection((self._proper_intersection(p1, p2, q1, q2),), is_proper=True)

    def _compute_collinear_intersection(
        self,
        p1: Coordinate,
        p2: Coordinate,
        q1: Coordinate,
        q2: Coordinate
    ) -> Optional[LineIntersection]:
        q1_in_p = envelope_contains(p1, p2, q1)
        q2_in_p = envelope_contains(p1, p2, q2)
        p1_in_q = envelope_contains(q1, q2, p1)
        p2_in_q = envelope_contains(q1, q2, p2)

        if q1_in_p and q2_in_p:
            return self._collinear_result(q1, q2)
        if p1_in_q and p2_in_q:
            return self._collinear_result(p1, p2)
        if q1_in_p and p1_in_q:
            return self._collinear_result(q1, p1)
        if q1_in_p and p2_in_q:
            return self._collinear_result(q1, p2)
        if q2_in_p and p1_in_q:
            return self._collinear_result(q2, p1)
        if q2_in_p and p2_in_q:
            return self._collinear_result(q2, p2)
        return None

    @staticmethod
    def _collinear_result(a: Coordinate, b: Coordinate) -> LineIntersection:
        if a == b:
            return LineIntersection((a,))
        return LineIntersection((a, b))

    def _proper_intersection(
        self,
        p1: Coordinate,
        p2: Coordinate,
        q1: Coordinate,
        q2: Coordinate
    ) -> Coordinate:
        px, py = Fraction(p1.x), Fraction(p1.y)
        rx, ry = Fraction(p2.x) - px, Fraction(p2.y) - py
        sx, sy = Fraction(q2.x) - Fraction(q1.x), Fraction(q2.y) - Fraction(q1.y)
        denom = rx * sy - ry * sx
        t = ((Fraction(q1.x) - px) * sy - (Fraction(q1.y) - py) * sx) / denom
        point = Coordinate(float(px + t * rx), float(py + t * ry))

        # rounding can push the point outside a near-degenerate segment
        if not (envelope_contains(p1, p2, point) and envelope_contains(q1, q2, point)):
            point = self._nearest_endpoint(p1, p2, q1, q2)
        return point

    @staticmethod
    def _nearest_endpoint(p1: Coordinate, p2: Coordinate, q1: Coordinate, q2: Coordinate) -> Coordinate:
        candidates = [
            (_distance_to_segment(p1, q1, q2), p1),
            (_distance_to_segment(p2, q1, q2), p2),
            (_distance_to_segment(q1, p1, p2), q1),
            (_distance_to_segment(q2, p1, p2), q2),
        ]
        return min(candidates, key=lambda item: item[0])[1]

    @staticmethod
    def compute_edge_distance(p: Coordinate, p0: Coordinate, p1: Coordinate) -> float:
        """
        Ordering distance of p along segment p0-p1

        Not a true distance: it is the larger axis delta, which is monotone
        along the segment and exact for vertices. Points other than p0
        always get a non-zero value.
        """
        dx = abs(p1.x - p0.x)
        dy = abs(p1.y - p0.y)
        if p == p0:
            return 0.0
        if p == p1:
            return max(dx, dy)

        pdx = abs(p.x - p0.x)
        pdy = abs(p.y - p0.y)
        dist = pdx if dx > dy else pdy
        if dist == 0.0:
            dist = max(pdx, pdy)
        return dist
