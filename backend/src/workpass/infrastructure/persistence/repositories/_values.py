"""
Column value helpers shared by the repositories
"""
from enum import Enum
from typing import Any, Dict

from workpass.domain.value_objects import MatchScore


def column_values(updates: Dict[str, Any]) -> Dict[str, Any]:
    """Unwrap enums and value objects into plain column values"""
    values = {}
    for key, value in updates.items():
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, MatchScore):
            value = int(value)
        values[key] = value
    return values
