"""
Topology labels.

A Label records, for each of the two input geometries, where a graph
component lies: ON the component itself and, for edges of areas, on its
LEFT and RIGHT sides.
"""
from typing import List, Optional, Tuple

from georelate.core import Location, Position


class TopologyPosition:
    """
    Locations of one geometry relative to one graph component

    Line/point positions hold ON only. Area positions hold ON, LEFT and
    RIGHT. Asking a line position for a side returns NONE.
    """

    def __init__(self, locations: List[Location]):
        if len(locations) not in (1, 3):
            raise ValueError(f"TopologyPosition needs 1 or 3 locations, got {len(locations)}")
        self._locations = list(locations)

    @classmethod
    def line_or_point(cls, on: Location = Location.NONE) -> 'TopologyPosition':
        return cls([on])

    @classmethod
    def area(
        cls,
        on: Location = Location.NONE,
        left: Location = Location.NONE,
        right: Location = Location.NONE
    ) -> 'TopologyPosition':
        return cls([on, left, right])

    @property
    def is_area(self) -> bool:
        return len(self._locations) == 3

    @property
    def is_line(self) -> bool:
        return len(self._locations) == 1

    def get(self, position: Position) -> Location:
        if position < len(self._locations):
            return self._locations[position]
        return Location.NONE

    def set(self, position: Position, location: Location) -> None:
        if position >= len(self._locations):
            raise ValueError(f"Cannot set {position.name} on a line/point position")
        self._locations[position] = location

    def is_empty(self) -> bool:
        """True if every location is NONE"""
        return all(loc == Location.NONE for loc in self._locations)

    def is_any_empty(self) -> bool:
        """True if at least one location is NONE"""
        return any(loc == Location.NONE for loc in self._locations)

    def set_all(self, location: Location) -> None:
        self._locations = [location] * len(self._locations)

    def set_all_if_empty(self, location: Location) -> None:
        """Fill only the NONE entries"""
        self._locations = [location if loc == Location.NONE else loc for loc in self._locations]

    def flip(self) -> None:
        """Swap LEFT and RIGHT"""
        if self.is_area:
            self._locations[Position.LEFT], self._locations[Position.RIGHT] = (
                self._locations[Position.RIGHT], self._locations[Position.LEFT]
            )

    def copy(self) -> 'TopologyPosition':
        return TopologyPosition(self._locations)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TopologyPosition):
            return NotImplemented
        return self._locations == other._locations

    def __repr__(self) -> str:
        return "".join(loc.symbol for loc in self._locations)


class Label:
    """
    Per-geometry topology positions of a graph component

    Index 0 is the first relate argument, index 1 the second.
    """

    def __init__(self, positions: Tuple[TopologyPosition, TopologyPosition]):
        self._positions = [positions[0], positions[1]]

    @classmethod
    def empty_line(cls) -> 'Label':
        return cls((TopologyPosition.line_or_point(), TopologyPosition.line_or_point()))

    @classmethod
    def empty_area(cls) -> 'Label':
        return cls((TopologyPosition.area(), TopologyPosition.area()))

    @classmethod
    def line(cls, geom_index: int, on: Location) -> 'Label':
        """Line/point label with ON set for one geometry"""
        label = cls.empty_line()
        label.set_on_location(geom_index, on)
        return label

    @classmethod
    def area(cls, geom_index: int, on: Location, left: Location, right: Location) -> 'Label':
        """Area label with ON, LEFT and RIGHT set for one geometry"""
        label = cls.empty_area()
        label._positions[geom_index] = TopologyPosition.area(on, left, right)
        return label

    def copy(self) -> 'Label':
        return Label((self._positions[0].copy(), self._positions[1].copy()))

    def flip(self) -> None:
        for position in self._positions:
            position.flip()

    def position(self, geom_index: int) -> TopologyPosition:
        return self._positions[geom_index]

    def location(self, geom_index: int, position: Position = Position.ON) -> Location:
        return self._positions[geom_index].get(position)

    def set_location(self, geom_index: int, position: Position, location: Location) -> None:
        self._positions[geom_index].set(position, location)

    def set_on_location(self, geom_index: int, location: Location) -> None:
        self._positions[geom_index].set(Position.ON, location)

    def set_all_locations(self, geom_index: int, location: Location) -> None:
        self._positions[geom_index].set_all(location)

    def set_all_locations_if_empty(self, geom_index: int, location: Location) -> None:
        self._positions[geom_index].set_all_if_empty(location)

    def is_empty(self, geom_index: int) -> bool:
        return self._positions[geom_index].is_empty()

    def is_any_empty(self, geom_index: int) -> bool:
        return self._positions[geom_index].is_any_empty()

    def is_area(self, geom_index: Optional[int] = None) -> bool:
        """Area label for the given geometry, or for either one when no index is given"""
        if geom_index is None:
            return self._positions[0].is_area or self._positions[1].is_area
        return self._positions[geom_index].is_area

    def is_line(self, geom_index: int) -> bool:
        return self._positions[geom_index].is_line

    @property
    def geometry_count(self) -> int:
        """Number of geometries this label carries any location for"""
        return sum(1 for position in self._positions if not position.is_empty())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Label):
            return NotImplemented
        return self._positions == other._positions

    def __repr__(self) -> str:
        return f"A:{self._positions[0]!r} B:{self._positions[1]!r}"
