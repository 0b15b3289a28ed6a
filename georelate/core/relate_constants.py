"""
Relate Constants

Centralized location for the fixed values of the DE-9IM engine: matrix
shape, pattern alphabet and the pattern strings behind the named predicates.
"""
from dataclasses import dataclass, field
from typing import Dict, Tuple

from georelate.core.enums import BoundaryNodeRule


@dataclass(frozen=True)
class RelateConstants:
    """
    Immutable constants for relate computations (Immutable Object Pattern)
    """

    # Matrix layout
    MATRIX_SIZE: int = 3
    PATTERN_LENGTH: int = 9

    # DE-9IM alphabet
    SYMBOL_FALSE: str = "F"
    SYMBOL_TRUE: str = "T"
    SYMBOL_DONT_CARE: str = "*"
    DIMENSION_DIGITS: str = "012"

    DEFAULT_BOUNDARY_NODE_RULE: BoundaryNodeRule = BoundaryNodeRule.MOD2

    # Predicate patterns. A predicate holds if any of its patterns matches.
    PREDICATE_PATTERNS: Dict[str, Tuple[str, ...]] = field(default_factory=lambda: {
        "disjoint": ("FF*FF****",),
        "intersects": ("T********", "*T*******", "***T*****", "****T****"),
        "touches": ("FT*******", "F**T*****", "F***T****"),
        "contains": ("T*****FF*",),
        "covers": ("T*****FF*", "*T****FF*", "***T**FF*", "****T*FF*"),
        "equals": ("T*F**FFF*",),
        # dimension dependent variants
        "crosses_lower_higher": ("T*T******",),
        "crosses_higher_lower": ("T*****T**",),
        "crosses_lines": ("0********",),
        "overlaps_points_areas": ("T*T***T**",),
        "overlaps_lines": ("1*T***T**",),
    })

    @classmethod
    def valid_pattern_symbols(cls) -> str:
        """All characters accepted in a pattern (upper case)"""
        return cls.SYMBOL_FALSE + cls.SYMBOL_TRUE + cls.SYMBOL_DONT_CARE + cls.DIMENSION_DIGITS

    def patterns_for(self, predicate: str) -> Tuple[str, ...]:
        """
        Look up the patterns for a named predicate

        Args:
            predicate: Predicate key (e.g. 'touches')

        Returns:
            Tuple of pattern strings

        Raises:
            KeyError: If the predicate is unknown
        """
        return self.PREDICATE_PATTERNS[predicate]


# Singleton instance for easy access
RELATE_CONSTANTS = RelateConstants()
