from abc import ABC, abstractmethod
from typing import Iterator

from georelate.core import Dimension, GeometryType
from georelate.components.geometry.coordinate import Coordinate


class Geometry(ABC):
    """
    Abstract base class for all geometry value types

    Geometries are plain containers: they expose their coordinates,
    dimension and boundary dimension, and leave every algorithm to the
    relate engine.
    """

    @property
    @abstractmethod
    def geom_type(self) -> GeometryType:
        """Geometry type tag"""
        pass

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        """Topological dimension (EMPTY for empty geometries)"""
        pass

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def coords(self) -> Iterator[Coordinate]:
        """Iterate over every coordinate of the geometry"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.coords())!r})"
