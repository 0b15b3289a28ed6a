"""
DE-9IM intersection matrix.

A 3x3 int8 numpy array indexed by (location in A, location in B), holding
the dimension of each intersection (-1 for empty). Rows and columns follow
Location: INTERIOR, BOUNDARY, EXTERIOR.
"""
from typing import TYPE_CHECKING, Optional

import numpy as np

from georelate.core import (
    Dimension,
    InvalidPatternError,
    Location,
    Position,
    RELATE_CONSTANTS,
)

if TYPE_CHECKING:
    from georelate.components.geomgraph import Label

_VALID_DIMENSIONS = frozenset(int(d) for d in Dimension)
_SIDES = (Position.LEFT, Position.RIGHT)


class IntersectionMatrix:
    """
    Dimensionally extended nine-intersection matrix

    Values only ever grow while a relate computation folds in its graph
    components; freeze() makes the matrix read-only once it is returned.
    """

    def __init__(self, elements: Optional[str] = None):
        """
        Initialize matrix

        Args:
            elements: Optional 9 character dimension string such as
                'FF2FF1212'; all cells start empty otherwise
        """
        size = RELATE_CONSTANTS.MATRIX_SIZE
        self._matrix = np.full((size, size), int(Dimension.EMPTY), dtype=np.int8)
        if elements is not None:
            self._set_from_string(elements)

    @classmethod
    def from_string(cls, elements: str) -> 'IntersectionMatrix':
        """
        Build a matrix from its 9 character string form

        Raises:
            InvalidPatternError: If the string is not 9 dimension symbols (F, 0, 1, 2)
        """
        return cls(elements)

    def _set_from_string(self, elements: str) -> None:
        self._check_pattern_shape(elements)
        for i, symbol in enumerate(elements.upper()):
            if symbol == RELATE_CONSTANTS.SYMBOL_FALSE:
                value = Dimension.EMPTY
            elif symbol in RELATE_CONSTANTS.DIMENSION_DIGITS:
                value = int(symbol)
            else:
                raise InvalidPatternError(elements, f"'{symbol}' is not a dimension symbol")
            self._matrix[divmod(i, RELATE_CONSTANTS.MATRIX_SIZE)] = value

    @staticmethod
    def _check_pattern_shape(pattern) -> None:
        if not isinstance(pattern, str):
            raise InvalidPatternError(pattern, f"expected str, got {type(pattern).__name__}")
        if len(pattern) != RELATE_CONSTANTS.PATTERN_LENGTH:
            raise InvalidPatternError(
                pattern, f"expected {RELATE_CONSTANTS.PATTERN_LENGTH} characters, got {len(pattern)}"
            )

    @property
    def is_frozen(self) -> bool:
        return not self._matrix.flags.writeable

    def freeze(self) -> 'IntersectionMatrix':
        """Make the matrix read-only and return it"""
        self._matrix.flags.writeable = False
        return self

    def _check_writable(self) -> None:
        if self.is_frozen:
            raise ValueError("IntersectionMatrix is frozen")

    def set(self, row: Location, column: Location, dimension: int) -> None:
        """
        Set one cell

        Raises:
            ValueError: If the dimension is not -1, 0, 1 or 2
        """
        self._check_writable()
        if int(dimension) not in _VALID_DIMENSIONS:
            raise ValueError(f"Invalid dimension value: {dimension}")
        self._matrix[row, column] = int(dimension)

    def set_at_least(self, row: Location, column: Location, minimum: int) -> None:
        """Raise one cell to at least the given dimension"""
        if self._matrix[row, column] < minimum:
            self.set(row, column, minimum)

    def set_at_least_if_valid(self, row: Location, column: Location, minimum: int) -> None:
        """set_at_least, skipped when either location is unknown"""
        if row != Location.NONE and column != Location.NONE:
            self.set_at_least(row, column, minimum)

    def set_at_least_from_label(self, label: 'Label', on_dimension: int = Dimension.LINE) -> None:
        """
        Fold in a graph component's label

        The ON locations intersect with on_dimension (1 for edges, 0 for
        nodes); for area labels each side contributes an area intersection.
        """
        self.set_at_least_if_valid(label.location(0, Position.ON), label.location(1, Position.ON), on_dimension)
        if label.is_area():
            for side in _SIDES:
                self.set_at_least_if_valid(label.location(0, side), label.location(1, side), Dimension.AREA)

    def set_at_least_from_pattern(self, minimum: str) -> None:
        """
        Raise cells to the digits of a 9 character pattern, ignoring other symbols

        Raises:
            InvalidPatternError: If the pattern is malformed
        """
        pattern = self._normalize_pattern(minimum)
        for i, symbol in enumerate(pattern):
            if symbol in RELATE_CONSTANTS.DIMENSION_DIGITS:
                row, column = divmod(i, RELATE_CONSTANTS.MATRIX_SIZE)
                self.set_at_least(Location(row), Location(column), int(symbol))

    def set_all(self, dimension: int) -> None:
        self._check_writable()
        if int(dimension) not in _VALID_DIMENSIONS:
            raise ValueError(f"Invalid dimension value: {dimension}")
        self._matrix.fill(int(dimension))

    def get(self, row: Location, column: Location) -> Dimension:
        return Dimension(int(self._matrix[row, column]))

    def to_array(self) -> np.ndarray:
        """Copy of the underlying 3x3 array"""
        return self._matrix.copy()

    @classmethod
    def _normalize_pattern(cls, pattern) -> str:
        cls._check_pattern_shape(pattern)
        normalized = pattern.upper()
        valid = RELATE_CONSTANTS.valid_pattern_symbols()
        for symbol in normalized:
            if symbol not in valid:
                raise InvalidPatternError(pattern, f"invalid symbol '{symbol}'")
        return normalized

    @staticmethod
    def matches_dimension(actual: int, symbol: str) -> bool:
        """
        Test one matrix value against one pattern symbol

        Args:
            actual: Stored dimension (-1..2)
            symbol: One of T, F, *, 0, 1, 2 (upper case)
        """
        if symbol == RELATE_CONSTANTS.SYMBOL_DONT_CARE:
            return True
        if symbol == RELATE_CONSTANTS.SYMBOL_TRUE:
            return actual >= 0
        if symbol == RELATE_CONSTANTS.SYMBOL_FALSE:
            return actual == Dimension.EMPTY
        return actual == int(symbol)

    def matches(self, pattern: str) -> bool:
        """
        Test the matrix against a DE-9IM pattern

        Args:
            pattern: 9 characters from T, F, *, 0, 1, 2 (case-insensitive)

        Returns:
            True if every cell matches its pattern symbol

        Raises:
            InvalidPatternError: If the pattern is malformed
        """
        normalized = self._normalize_pattern(pattern)
        values = self._matrix.ravel()
        return all(self.matches_dimension(int(values[i]), symbol) for i, symbol in enumerate(normalized))

    def _matches_any(self, predicate: str) -> bool:
        return any(self.matches(pattern) for pattern in RELATE_CONSTANTS.patterns_for(predicate))

    def transpose(self) -> 'IntersectionMatrix':
        """New matrix with the roles of A and B swapped"""
        transposed = IntersectionMatrix()
        transposed._matrix = self._matrix.T.copy()
        return transposed

    # Named predicates

    def is_disjoint(self) -> bool:
        return self._matches_any("disjoint")

    def is_intersects(self) -> bool:
        return not self.is_disjoint()

    def is_touches(self, dimension_a: int, dimension_b: int) -> bool:
        """Touches is undefined (false) between two point sets"""
        if dimension_a == Dimension.POINT and dimension_b == Dimension.POINT:
            return False
        return self._matches_any("touches")

    def is_crosses(self, dimension_a: int, dimension_b: int) -> bool:
        """
        Crosses is defined for point/line, point/area, line/area (either
        order) and line/line
        """
        lower_dims = (Dimension.POINT, Dimension.LINE)
        if dimension_a == Dimension.LINE and dimension_b == Dimension.LINE:
            return self._matches_any("crosses_lines")
        if dimension_a < dimension_b and dimension_a in lower_dims:
            return self._matches_any("crosses_lower_higher")
        if dimension_a > dimension_b and dimension_b in lower_dims:
            return self._matches_any("crosses_higher_lower")
        return False

    def is_overlaps(self, dimension_a: int, dimension_b: int) -> bool:
        """Overlaps needs both geometries to have the same dimension"""
        if dimension_a != dimension_b:
            return False
        if dimension_a in (Dimension.POINT, Dimension.AREA):
            return self._matches_any("overlaps_points_areas")
        if dimension_a == Dimension.LINE:
            return self._matches_any("overlaps_lines")
        return False

    def is_contains(self) -> bool:
        return self._matches_any("contains")

    def is_within(self) -> bool:
        return self.transpose().is_contains()

    def is_covers(self) -> bool:
        return self._matches_any("covers")

    def is_covered_by(self) -> bool:
        return self.transpose().is_covers()

    def is_equals(self, dimension_a: int, dimension_b: int) -> bool:
        """Topological equality; geometries of different dimension are never equal"""
        if dimension_a != dimension_b:
            return False
        return self._matches_any("equals")

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntersectionMatrix):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __str__(self) -> str:
        return "".join(Dimension(int(value)).symbol for value in self._matrix.ravel())

    def __repr__(self) -> str:
        return f"IntersectionMatrix({str(self)!r})"
