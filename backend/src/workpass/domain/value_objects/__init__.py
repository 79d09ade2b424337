"""Value Objects - Immutable objects defined by their attributes"""

from .contact import ContactIdentifier
from .match_score import MatchScore
__all__ = [
    "ContactIdentifier",
    "MatchScore",
]
