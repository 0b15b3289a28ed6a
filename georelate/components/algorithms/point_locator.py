"""
Point-in-geometry classification.

PointLocator answers INTERIOR / BOUNDARY / EXTERIOR for any geometry,
applying the boundary node rule to line endpoints. locate_in_areas only
looks at polygonal components and is what node labelling needs.
"""
from typing import Sequence

from georelate.core import BoundaryNodeRule, Location, Orientation, RELATE_CONSTANTS
from georelate.components.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    Line,
    LineString,
    Point,
    Polygon,
    Rect,
)
from georelate.components.algorithms.orientation import orientation_index
from georelate.components.algorithms.line_intersector import is_on_segment


class RayCrossingCounter:
    """
    Counts crossings of a ray from a point towards +x with ring segments

    Upward segments include their start and exclude their end, downward
    segments the reverse, so shared vertices are counted once.
    """

    def __init__(self, point: Coordinate):
        self._point = point
        self._crossing_count = 0
        self._is_on_segment = False

    @property
    def is_on_segment(self) -> bool:
        return self._is_on_segment

    def count_segment(self, p1: Coordinate, p2: Coordinate) -> None:
        p = self._point
        # segment strictly left of the point
        if p1.x < p.x and p2.x < p.x:
            return

        if p == p2:
            self._is_on_segment = True
            return

        # horizontal segments only matter when the point is on them
        if p1.y == p.y and p2.y == p.y:
            if min(p1.x, p2.x) <= p.x <= max(p1.x, p2.x):
                self._is_on_segment = True
            return

        if (p1.y > p.y >= p2.y) or (p2.y > p.y >= p1.y):
            orient = orientation_index(p1, p2, p)
            if orient == Orientation.COLLINEAR:
                self._is_on_segment = True
                return
            if p2.y < p1.y:
                orient = -orient
            if orient == Orientation.COUNTER_CLOCKWISE:
                self._crossing_count += 1

    @property
    def location(self) -> Location:
        if self._is_on_segment:
            return Location.BOUNDARY
        if self._crossing_count % 2 == 1:
            return Location.INTERIOR
        return Location.EXTERIOR

    @classmethod
    def locate_in_ring(cls, point: Coordinate, ring: Sequence[Coordinate]) -> Location:
        """
        Locate a point relative to a closed ring

        Args:
            point: Point to classify
            ring: Closed ring coordinates

        Returns:
            INTERIOR, BOUNDARY or EXTERIOR
        """
        counter = cls(point)
        for i in range(1, len(ring)):
            counter.count_segment(ring[i], ring[i - 1])
            if counter.is_on_segment:
                return counter.location
        return counter.location


def is_on_line(point: Coordinate, coords: Sequence[Coordinate]) -> bool:
    """True if the point lies on any segment of the coordinate sequence"""
    return any(is_on_segment(point, coords[i - 1], coords[i]) for i in range(1, len(coords)))


class PointLocator:
    """
    Computes the location of a point relative to a geometry

    Collections follow the boundary node rule: a point on the boundary of
    an odd number of components (under MOD2) is a boundary point.
    """

    def __init__(self, boundary_node_rule: BoundaryNodeRule = RELATE_CONSTANTS.DEFAULT_BOUNDARY_NODE_RULE):
        self._boundary_node_rule = boundary_node_rule

    def locate(self, point: Coordinate, geometry: Geometry) -> Location:
        """
        Locate a point relative to a geometry

        Args:
            point: Point to classify
            geometry: Target geometry

        Returns:
            INTERIOR, BOUNDARY or EXTERIOR
        """
        if geometry.is_empty:
            return Location.EXTERIOR
        if isinstance(geometry, LineString):
            return self._locate_on_line_string(point, geometry)
        if isinstance(geometry, Line):
            return self._locate_on_line_string(point, geometry.to_line_string())
        if isinstance(geometry, Polygon):
            return self._locate_in_polygon(point, geometry)
        if isinstance(geometry, Rect):
            return self._locate_in_polygon(point, geometry.to_polygon())

        state = {"is_in": False, "boundary_count": 0}
        self._compute_location(point, geometry, state)
        if self._boundary_node_rule.is_in_boundary(state["boundary_count"]):
            return Location.BOUNDARY
        if state["boundary_count"] > 0 or state["is_in"]:
            return Location.INTERIOR
        return Location.EXTERIOR

    def _compute_location(self, point: Coordinate, geometry: Geometry, state: dict) -> None:
        if geometry.is_empty:
            return
        if isinstance(geometry, GeometryCollection):
            for member in geometry.geoms:
                self._compute_location(point, member, state)
            return

        if isinstance(geometry, Point):
            loc = Location.INTERIOR if geometry.coordinate == point else Location.EXTERIOR
        elif isinstance(geometry, Line):
            loc = self._locate_on_line_string(point, geometry.to_line_string())
        elif isinstance(geometry, LineString):
            loc = self._locate_on_line_string(point, geometry)
        elif isinstance(geometry, Rect):
            loc = self._locate_in_polygon(point, geometry.to_polygon())
        elif isinstance(geometry, Polygon):
            loc = self._locate_in_polygon(point, geometry)
        else:
            raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")

        if loc == Location.INTERIOR:
            state["is_in"] = True
        elif loc == Location.BOUNDARY:
            state["boundary_count"] += 1

    @staticmethod
    def _locate_on_line_string(point: Coordinate, line: LineString) -> Location:
        coords = line.coordinates
        if not line.is_closed and (point == coords[0] or point == coords[-1]):
            return Location.BOUNDARY
        if is_on_line(point, coords):
            return Location.INTERIOR
        return Location.EXTERIOR

    @staticmethod
    def _locate_in_polygon(point: Coordinate, polygon: Polygon) -> Location:
        if polygon.is_empty:
            return Location.EXTERIOR
        shell_loc = RayCrossingCounter.locate_in_ring(point, polygon.exterior.coordinates)
        if shell_loc != Location.INTERIOR:
            return shell_loc
        for hole in polygon.interiors:
            hole_loc = RayCrossingCounter.locate_in_ring(point, hole.coordinates)
            if hole_loc == Location.INTERIOR:
                return Location.EXTERIOR
            if hole_loc == Location.BOUNDARY:
                return Location.BOUNDARY
        return Location.INTERIOR

    @classmethod
    def locate_in_areas(cls, point: Coordinate, geometry: Geometry) -> Location:
        """
        Locate a point relative to the polygonal components of a geometry only

        Points and lines are ignored, so a point off every polygon is
        EXTERIOR even when it lies on a line component.
        """
        if geometry.is_empty:
            return Location.EXTERIOR
        if isinstance(geometry, Rect):
            return cls._locate_in_polygon(point, geometry.to_polygon())
        if isinstance(geometry, Polygon):
            return cls._locate_in_polygon(point, geometry)
        if isinstance(geometry, GeometryCollection):
            for member in geometry.geoms:
                loc = cls.locate_in_areas(point, member)
                if loc != Location.EXTERIOR:
                    return loc
        return Location.EXTERIOR
