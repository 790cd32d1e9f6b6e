"""
Shared constants for document validation.

This module consolidates constants used across the codebase to ensure
consistency and make it easier to modify common values.
"""

# Normalization
# Letters kept as-is even where the word-character class would not cover them
ALLOWED_EXTRA_LETTERS = "äöüß"

# Thresholds
DEFAULT_MATCH_THRESHOLD = 0.6
DEFAULT_SIMILARITY_THRESHOLD = 0.80
DEFAULT_MIN_KEYWORDS_REQUIRED = 3

# Keyword matcher heuristics
# A window of ceil(length * 0.3) never skips a token able to reach a
# similarity of 1 / 1.3 (about 0.77); KeywordMatcher widens it below that.
DEFAULT_LENGTH_TOLERANCE = 0.3
DEFAULT_EARLY_TERMINATION_SIMILARITY = 0.95

# Edit distance backends
DEFAULT_EDIT_DISTANCE_METHOD = "dynamic_programming"
