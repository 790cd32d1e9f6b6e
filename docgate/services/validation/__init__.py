"""
Validation package for OCR document gating.

Split into focused modules:
- content_normalizer.py: Text to token normalization
- edit_distance.py: Levenshtein distance backends
- similarity_calculator.py: Length-normalized similarity ratio
- keyword_matcher.py: Fuzzy keyword search with length pruning and early exit
- validation_orchestrator.py: Word-overlap and fuzzy-keyword policies
"""
from .validation_orchestrator import DocumentValidator, calculate_match_percentage
from .keyword_matcher import KeywordMatcher
from .similarity_calculator import SimilarityCalculator
from .edit_distance import EditDistanceCalculator, levenshtein_distance, levenshtein_distance_compact
from .content_normalizer import ContentNormalizer, normalize_text

__all__ = [
    'DocumentValidator',
    'calculate_match_percentage',
    'KeywordMatcher',
    'SimilarityCalculator',
    'EditDistanceCalculator',
    'levenshtein_distance',
    'levenshtein_distance_compact',
    'ContentNormalizer',
    'normalize_text',
]
