"""
Similarity calculation for OCR keyword matching.

Converts Levenshtein edit distance into a length-normalized ratio in [0, 1].
"""
import logging
from typing import Optional

from .edit_distance import EditDistanceCalculator

logger = logging.getLogger(__name__)


class SimilarityCalculator:
    """Calculate similarity between two strings."""

    def __init__(self, edit_distance: Optional[EditDistanceCalculator] = None):
        """
        Initialize similarity calculator.

        Args:
            edit_distance: EditDistanceCalculator to use (reference backend if omitted)
        """
        self.edit_distance = edit_distance or EditDistanceCalculator()

    def calculate_similarity(self, str1: str, str2: str) -> float:
        """
        Calculate similarity as (longest length - distance) / longest length.

        Args:
            str1: First string
            str2: Second string

        Returns:
            Similarity score between 0.0 and 1.0 (1.0 = identical, also for two empty strings)
        """
        max_length = max(len(str1), len(str2))
        if max_length == 0:
            return 1.0  # Both empty = identical

        distance = self.edit_distance.distance(str1, str2)
        similarity = (max_length - distance) / max_length

        logger.debug(f"Similarity '{str1}' vs '{str2}': distance={distance}, similarity={similarity:.2%}")

        return similarity
