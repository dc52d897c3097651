"""Course category and difficulty classification."""

from .category import classify_category
from .difficulty import estimate_difficulty, normalize_difficulty

__all__ = [
    "classify_category",
    "estimate_difficulty",
    "normalize_difficulty",
]
