from typing import Iterator, Sequence, Tuple, Union
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coordinate:
    """
    A 2D coordinate

    Compared and hashed by exact value, ordered by x then y, so it can be
    used directly as a node key.
    """
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_value(cls, value: Union['Coordinate', Sequence[float]]) -> 'Coordinate':
        """
        Build a coordinate from a Coordinate or an (x, y) pair

        Args:
            value: Coordinate instance or sequence with at least 2 numbers

        Returns:
            Coordinate instance

        Raises:
            ValueError: If the sequence has fewer than 2 elements
        """
        if isinstance(value, cls):
            return value
        if len(value) < 2:
            raise ValueError(f"Coordinate needs x and y values, got {value!r}")
        return cls(float(value[0]), float(value[1]))


CoordinateLike = Union[Coordinate, Sequence[float]]
