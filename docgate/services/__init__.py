"""Services package for OCR text validation."""

from docgate.services.validation import DocumentValidator, KeywordMatcher, SimilarityCalculator, ContentNormalizer

__all__ = [
    'DocumentValidator',
    'KeywordMatcher',
    'SimilarityCalculator',
    'ContentNormalizer',
]
