from typing import TYPE_CHECKING, Optional

from georelate.core import BoundaryNodeRule, Quadrant
from georelate.components.geometry import Coordinate
from georelate.components.algorithms import orientation_index
from georelate.components.geomgraph.label import Label

if TYPE_CHECKING:
    from georelate.components.geomgraph.edge import Edge


class EdgeEnd:
    """
    A stub of an edge leaving a node

    Holds the node coordinate, a second coordinate giving the direction of
    the stub and the label it inherits from its parent edge. Edge-ends
    around a node are ordered counter-clockwise starting from the positive
    x axis.
    """

    def __init__(
        self,
        edge: 'Edge',
        coordinate: Coordinate,
        direction_coordinate: Coordinate,
        label: Optional[Label] = None
    ):
        self.edge = edge
        self.label = label
        self.coordinate = coordinate
        self.direction_coordinate = direction_coordinate
        self.dx = direction_coordinate.x - coordinate.x
        self.dy = direction_coordinate.y - coordinate.y
        self.quadrant = Quadrant.of(self.dx, self.dy)

    def compare_direction(self, other: 'EdgeEnd') -> int:
        """
        Compare the angle of two edge-ends leaving the same node

        Quadrants are compared first; inside a quadrant the exact
        orientation test decides, so no angle is ever computed.

        Returns:
            -1, 0 or 1 as this edge-end is before, equal to or after other
        """
        if self.dx == other.dx and self.dy == other.dy:
            return 0
        if self.quadrant > other.quadrant:
            return 1
        if self.quadrant < other.quadrant:
            return -1
        return int(orientation_index(other.coordinate, other.direction_coordinate, self.direction_coordinate))

    def compute_label(self, boundary_node_rule: BoundaryNodeRule) -> None:
        """Plain edge-ends already carry their final label"""

    def __repr__(self) -> str:
        return (f"EdgeEnd(({self.coordinate.x} {self.coordinate.y}) -> "
                f"({self.direction_coordinate.x} {self.direction_coordinate.y}) "
                f"{self.quadrant.name} {self.label!r})")
