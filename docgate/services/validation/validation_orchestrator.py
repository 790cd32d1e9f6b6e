"""
Validation orchestration for OCR document gating.

Turns normalized tokens and matcher output into a pass/fail verdict with a
percentage, using one of two policies:
- word overlap: fraction of reference words found verbatim in the candidate text
- fuzzy keywords: number of configured keywords found approximately

Early stop caveat (fuzzy keywords): once min_keywords_required keywords have
matched, the remaining keywords are not compared and are reported as
non-matching placeholders. The verdict is unaffected, but percentage and the
match list can understate how many keywords would have matched. Use explain()
or KeywordConfig.full_evaluation for complete diagnostics.
"""
import logging
from typing import List, Optional, Tuple, Union

from docgate.core.config import settings
from docgate.core.error_handling import ConfigurationError, handle_validation_errors
from docgate.core.logging import verdict_extra
from docgate.models.validation_models import (
    KeywordConfig,
    MatchResult,
    OverlapConfig,
    ValidationPolicy,
    ValidationResult,
)

from .content_normalizer import ContentNormalizer
from .edit_distance import EditDistanceCalculator
from .keyword_matcher import KeywordMatcher
from .similarity_calculator import SimilarityCalculator

logger = logging.getLogger(__name__)


def count_reference_matches(
    extracted_text: str,
    reference_text: str,
    normalizer: ContentNormalizer
) -> Tuple[int, int]:
    """
    Count reference words that appear in the extracted text.

    A candidate word may satisfy any number of identical reference words.

    Returns:
        Tuple of (matched reference words, total reference words)
    """
    extracted_words = set(normalizer.normalize(extracted_text))
    reference_words = normalizer.normalize(reference_text)
    matched = sum(1 for word in reference_words if word in extracted_words)
    return matched, len(reference_words)


def calculate_match_percentage(
    extracted_text: str,
    reference_text: str,
    normalizer: Optional[ContentNormalizer] = None
) -> float:
    """
    Fraction of reference words that appear in the extracted text.

    Returns 0.0 when the reference text has no words.
    """
    matched, total = count_reference_matches(extracted_text, reference_text, normalizer or ContentNormalizer())
    return matched / total if total else 0.0


class DocumentValidator:
    """Decide whether OCR-extracted text matches a known document."""

    def __init__(
        self,
        keyword_matcher: Optional[KeywordMatcher] = None,
        normalizer: Optional[ContentNormalizer] = None
    ):
        """
        Initialize document validator.

        Args:
            keyword_matcher: Pre-configured KeywordMatcher (built from settings if not provided)
            normalizer: ContentNormalizer instance (optional)
        """
        self.normalizer = normalizer or ContentNormalizer()

        if keyword_matcher is None:
            edit_distance = EditDistanceCalculator(settings.EDIT_DISTANCE_METHOD)
            keyword_matcher = KeywordMatcher(
                similarity_calculator=SimilarityCalculator(edit_distance),
                length_tolerance=settings.LENGTH_TOLERANCE,
                early_termination_similarity=settings.EARLY_TERMINATION_SIMILARITY,
                normalizer=self.normalizer,
            )
        self.keyword_matcher = keyword_matcher

    # ============================================================================
    # WORD OVERLAP POLICY
    # ============================================================================

    @handle_validation_errors("Word-overlap validation failed")
    def validate_document(self, extracted_text: str, config: OverlapConfig) -> ValidationResult:
        """
        Validate by the fraction of reference words present in the extracted text.

        Args:
            extracted_text: Text from the OCR engine
            config: Reference text and match threshold

        Returns:
            ValidationResult; percentage is 0 and is_match False for an empty reference
        """
        matched, total = count_reference_matches(extracted_text, config.reference_text, self.normalizer)

        if total == 0:
            logger.warning("Reference text contains no words, document cannot match")
            percentage = 0.0
        else:
            percentage = matched / total

        # An empty reference never matches, even with a zero threshold
        is_match = total > 0 and percentage >= config.match_threshold

        result = ValidationResult(
            policy=ValidationPolicy.WORD_OVERLAP,
            is_match=is_match,
            percentage=percentage,
            matched_reference_tokens=matched,
            total_reference_tokens=total,
        )

        logger.info(
            f"Word overlap: {matched}/{total} reference words found ({percentage:.2%}), "
            f"threshold {config.match_threshold:.2%} -> {'MATCH' if is_match else 'NO MATCH'}",
            extra=verdict_extra(result)
        )
        return result

    # ============================================================================
    # FUZZY KEYWORD POLICY
    # ============================================================================

    def _evaluate_keywords(
        self,
        tokens: List[str],
        config: KeywordConfig,
        stop_early: bool
    ) -> ValidationResult:
        keywords = list(config.keywords)
        matches: List[MatchResult] = []
        matched_count = 0

        for index, keyword in enumerate(keywords):
            match = self.keyword_matcher.find_best_match(keyword, tokens, config.similarity_threshold)
            matches.append(match)
            logger.debug(
                f"Keyword '{keyword}': best='{match.best_match}' "
                f"similarity={match.similarity:.2%} match={match.is_match}"
            )

            if not match.is_match:
                continue

            matched_count += 1
            if stop_early and matched_count >= config.min_keywords_required:
                remaining = keywords[index + 1:]
                if remaining:
                    logger.debug(f"Enough keywords matched, skipping {len(remaining)} remaining")
                matches.extend(MatchResult.not_evaluated(k) for k in remaining)
                break

        total_keywords = len(keywords)
        percentage = matched_count / total_keywords if total_keywords else 0.0
        is_match = matched_count >= config.min_keywords_required

        if config.min_keywords_required > total_keywords:
            logger.warning(
                f"min_keywords_required={config.min_keywords_required} exceeds the "
                f"{total_keywords} configured keywords, document can never match"
            )

        result = ValidationResult(
            policy=ValidationPolicy.FUZZY_KEYWORDS,
            is_match=is_match,
            percentage=percentage,
            matched_count=matched_count,
            total_keywords=total_keywords,
            matches=matches,
        )

        logger.info(
            f"Fuzzy keywords: {matched_count}/{total_keywords} matched "
            f"(required {config.min_keywords_required}) -> {'MATCH' if is_match else 'NO MATCH'}",
            extra=verdict_extra(result)
        )
        return result

    @handle_validation_errors("Fuzzy keyword validation failed")
    def validate_with_fuzzy_keywords(self, extracted_text: str, config: KeywordConfig) -> ValidationResult:
        """
        Validate by counting keywords found approximately in the extracted text.

        Keywords are evaluated in order. Unless config.full_evaluation is set,
        evaluation stops as soon as min_keywords_required keywords have matched
        and every remaining keyword is reported as a non-matching placeholder,
        so percentage may understate the true number of matches.

        Args:
            extracted_text: Text from the OCR engine
            config: Keywords, per-keyword similarity threshold and required count

        Returns:
            ValidationResult with one MatchResult per configured keyword
        """
        tokens = self.normalizer.normalize(extracted_text)
        return self._evaluate_keywords(tokens, config, stop_early=not config.full_evaluation)

    @handle_validation_errors("Keyword decision failed")
    def decide(self, extracted_text: str, config: KeywordConfig) -> bool:
        """Verdict only; stops comparing keywords once enough of them have matched."""
        tokens = self.normalizer.normalize(extracted_text)
        return self._evaluate_keywords(tokens, config, stop_early=True).is_match

    @handle_validation_errors("Keyword explanation failed")
    def explain(self, extracted_text: str, config: KeywordConfig) -> ValidationResult:
        """
        Compare every keyword, without the early stop.

        The verdict equals decide(); percentage and matches cover all keywords.
        """
        tokens = self.normalizer.normalize(extracted_text)
        return self._evaluate_keywords(tokens, config, stop_early=False)

    # ============================================================================
    # SETTINGS-DRIVEN ENTRY POINT
    # ============================================================================

    @handle_validation_errors("Document validation failed")
    def validate(
        self,
        extracted_text: str,
        policy: Optional[Union[ValidationPolicy, str]] = None
    ) -> ValidationResult:
        """
        Validate with the policy and configuration from settings.

        Args:
            extracted_text: Text from the OCR engine
            policy: Override the policy selected by FUZZY_MATCHING_ENABLED

        Returns:
            ValidationResult of the selected policy
        """
        try:
            selected = ValidationPolicy(policy) if policy is not None else settings.validation_policy
        except ValueError as e:
            raise ConfigurationError(f"Unknown validation policy '{policy}'") from e

        if selected is ValidationPolicy.FUZZY_KEYWORDS:
            return self.validate_with_fuzzy_keywords(extracted_text, KeywordConfig.from_settings())
        return self.validate_document(extracted_text, OverlapConfig.from_settings())
