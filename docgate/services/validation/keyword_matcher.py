"""
Fuzzy keyword matching against a normalized token sequence.

For each token, in order:
1. Exact match with the lower-cased keyword returns immediately (similarity 1.0).
2. Tokens whose length differs too much from the keyword are skipped without
   computing an edit distance.
3. Otherwise the similarity is computed and the running best is kept.
4. Scanning stops once the running best reaches the early termination similarity,
   unless the exact keyword occurs among the remaining tokens.

Length pruning only skips tokens that cannot reach the threshold. Edit distance
is at least the length difference, so for a keyword of length k and a token longer by d the similarity
is at most k / (k + d), and for a token shorter by d at most (k - d) / k. The
window ceil(k * tolerance) with tolerance 0.3 is therefore safe for thresholds
of 1 / 1.3 (about 0.77) and above. For lower thresholds the window is widened
to ceil(k * (1 - t) / t) so no token able to reach the threshold is skipped.

Pruning therefore never changes is_match, nor the best match and similarity of
a keyword that matches. For a keyword that does not match, the reported
best_match and similarity only cover tokens inside the window and can be lower
than an exhaustive scan would report.
"""
import math
import logging
from typing import Iterable, Optional

from docgate.core.constants import (
    DEFAULT_EARLY_TERMINATION_SIMILARITY,
    DEFAULT_LENGTH_TOLERANCE,
    DEFAULT_SIMILARITY_THRESHOLD,
)
from docgate.models.validation_models import MatchResult

from .content_normalizer import ContentNormalizer
from .similarity_calculator import SimilarityCalculator

logger = logging.getLogger(__name__)


class KeywordMatcher:
    """Find the best fuzzy match for a keyword among tokens."""

    def __init__(
        self,
        similarity_calculator: Optional[SimilarityCalculator] = None,
        length_tolerance: Optional[float] = DEFAULT_LENGTH_TOLERANCE,
        early_termination_similarity: float = DEFAULT_EARLY_TERMINATION_SIMILARITY,
        normalizer: Optional[ContentNormalizer] = None
    ):
        """
        Initialize keyword matcher.

        Args:
            similarity_calculator: SimilarityCalculator instance (default backend if omitted)
            length_tolerance: Fraction of the keyword length a token may differ by.
                None disables length pruning.
            early_termination_similarity: Stop scanning once the best similarity reaches this
            normalizer: ContentNormalizer used by find_fuzzy_match for raw text
        """
        self.similarity_calculator = similarity_calculator or SimilarityCalculator()
        self.length_tolerance = length_tolerance
        self.early_termination_similarity = early_termination_similarity
        self.normalizer = normalizer or ContentNormalizer()

    def max_length_difference(
        self,
        keyword_length: int,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    ) -> Optional[int]:
        """
        Largest token/keyword length difference that is still compared.

        Returns:
            Allowed difference in characters, or None when pruning is disabled
        """
        if self.length_tolerance is None or similarity_threshold <= 0:
            return None

        tolerance = max(self.length_tolerance, (1 - similarity_threshold) / similarity_threshold)
        return math.ceil(keyword_length * tolerance)

    @staticmethod
    def _exact_match(keyword: str, token: str) -> MatchResult:
        return MatchResult(keyword=keyword, best_match=token, similarity=1.0, is_match=True)

    def find_best_match(
        self,
        keyword: str,
        tokens: Iterable[str],
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    ) -> MatchResult:
        """
        Find the token most similar to keyword.

        Args:
            keyword: Keyword to search for (compared lower-cased)
            tokens: Normalized tokens, scanned in order
            similarity_threshold: Minimum similarity for is_match

        Returns:
            MatchResult with the best token, or best_match=None if every token was pruned
        """
        normalized_keyword = keyword.lower()
        keyword_length = len(normalized_keyword)
        max_length_diff = self.max_length_difference(keyword_length, similarity_threshold)

        best_match: Optional[str] = None
        best_similarity = 0.0

        tokens = list(tokens)
        for index, token in enumerate(tokens):
            if token == normalized_keyword:
                logger.debug(f"Exact match for keyword '{keyword}'")
                return self._exact_match(keyword, token)

            if max_length_diff is not None and abs(len(token) - keyword_length) > max_length_diff:
                continue

            similarity = self.similarity_calculator.calculate_similarity(normalized_keyword, token)
            if similarity > best_similarity:
                best_similarity = similarity
                best_match = token

                if best_similarity >= self.early_termination_similarity:
                    # An exact token further on still wins over the near match
                    if normalized_keyword in tokens[index + 1:]:
                        return self._exact_match(keyword, normalized_keyword)
                    logger.debug(
                        f"Early exit for keyword '{keyword}': '{token}' at {best_similarity:.2%}"
                    )
                    break

        return MatchResult(
            keyword=keyword,
            best_match=best_match,
            similarity=best_similarity,
            is_match=best_similarity >= similarity_threshold,
        )

    def find_fuzzy_match(
        self,
        keyword: str,
        text: str,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    ) -> MatchResult:
        """Normalize raw text, then find the best match for keyword in it."""
        return self.find_best_match(keyword, self.normalizer.iter_tokens(text), similarity_threshold)
