"""
MatchScore Value Object
Whole-number percentage score with validation (0-100)
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchScore:
    """Percentage score value object - immutable"""

    value: int

    def __post_init__(self):
        """Validate score range"""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("Score must be an integer")

        if not 0 <= self.value <= 100:
            raise ValueError("Score must be between 0 and 100")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value}%"

    def __repr__(self) -> str:
        return f"MatchScore({self.value})"
