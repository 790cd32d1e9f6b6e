"""
Edit distance (Levenshtein) between two strings.

Provides interchangeable backends that return identical results:
- dynamic_programming: full (len1+1) x (len2+1) table, the reference implementation
- compact: two rolling rows, O(min(n, m)) memory
- levenshtein: C implementation from the python-Levenshtein package
"""
import logging
from typing import Callable, Dict, List

import Levenshtein

from docgate.core.constants import DEFAULT_EDIT_DISTANCE_METHOD

logger = logging.getLogger(__name__)


def levenshtein_distance(str1: str, str2: str) -> int:
    """
    Minimum number of single-character insertions, deletions and substitutions
    needed to turn str1 into str2.

    Args:
        str1: First string
        str2: Second string

    Returns:
        Edit distance (0 only when the strings are identical)
    """
    len1 = len(str1)
    len2 = len(str2)

    matrix: List[List[int]] = [[0] * (len2 + 1) for _ in range(len1 + 1)]

    # Distance against the empty prefix is the prefix length
    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            cost = 0 if str1[i - 1] == str2[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,         # deletion
                matrix[i][j - 1] + 1,         # insertion
                matrix[i - 1][j - 1] + cost,  # substitution
            )

    return matrix[len1][len2]


def levenshtein_distance_compact(str1: str, str2: str) -> int:
    """
    Same result as levenshtein_distance, keeping only two rows sized by the
    shorter string.
    """
    if len(str1) < len(str2):
        str1, str2 = str2, str1

    previous = list(range(len(str2) + 1))
    for i, char1 in enumerate(str1, start=1):
        current = [i] + [0] * len(str2)
        for j, char2 in enumerate(str2, start=1):
            cost = 0 if char1 == char2 else 1
            current[j] = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
        previous = current

    return previous[-1]


def _levenshtein_library_distance(str1: str, str2: str) -> int:
    return Levenshtein.distance(str1, str2)


class EditDistanceCalculator:
    """Compute edit distance with a configurable backend."""

    BACKENDS: Dict[str, Callable[[str, str], int]] = {
        "dynamic_programming": levenshtein_distance,
        "compact": levenshtein_distance_compact,
        "levenshtein": _levenshtein_library_distance,
    }

    def __init__(self, method: str = DEFAULT_EDIT_DISTANCE_METHOD):
        """
        Initialize edit distance calculator.

        Args:
            method: Backend name, one of BACKENDS. Unknown names fall back
                to the dynamic programming reference implementation.
        """
        if method not in self.BACKENDS:
            logger.warning(
                f"Unknown edit distance method '{method}', falling back to '{DEFAULT_EDIT_DISTANCE_METHOD}'"
            )
            method = DEFAULT_EDIT_DISTANCE_METHOD
        self.method = method
        self._backend = self.BACKENDS[method]

    def distance(self, str1: str, str2: str) -> int:
        """Edit distance between str1 and str2 using the configured backend."""
        return self._backend(str1, str2)
