"""
Pydantic models for validation configuration and results.
"""
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ValidationPolicy(str, Enum):
    """Policy used to decide whether a document matches."""
    WORD_OVERLAP = "word_overlap"
    FUZZY_KEYWORDS = "fuzzy_keywords"


class OverlapConfig(BaseModel):
    """Configuration for the word-overlap policy."""

    model_config = ConfigDict(frozen=True)

    reference_text: str = Field(..., description="Reference document the candidate text is compared against")
    match_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Minimum fraction of reference words that must appear in the candidate text"
    )

    @classmethod
    def from_settings(cls) -> "OverlapConfig":
        """Build the configuration from the process settings."""
        from docgate.core.config import settings
        return cls(
            reference_text=settings.REFERENCE_TEXT,
            match_threshold=settings.MATCH_THRESHOLD,
        )


class KeywordConfig(BaseModel):
    """
    Configuration for the fuzzy-keyword policy.

    min_keywords_required may exceed the number of keywords; such a
    configuration is accepted and simply never matches.
    """

    model_config = ConfigDict(frozen=True)

    keywords: Tuple[str, ...] = Field(
        default=(),
        description="Keywords to search for, evaluated in the given order"
    )
    similarity_threshold: float = Field(
        default=0.80,
        ge=0.0,
        le=1.0,
        description="Minimum similarity for a single keyword to count as found"
    )
    min_keywords_required: int = Field(
        default=3,
        ge=0,
        description="Number of keywords that must be found for the document to match"
    )
    full_evaluation: bool = Field(
        default=False,
        description="Evaluate every keyword instead of stopping once enough have matched"
    )

    @classmethod
    def from_settings(cls) -> "KeywordConfig":
        """Build the configuration from the process settings."""
        from docgate.core.config import settings
        return cls(
            keywords=tuple(settings.KEYWORDS),
            similarity_threshold=settings.SIMILARITY_THRESHOLD,
            min_keywords_required=settings.MIN_KEYWORDS_REQUIRED,
            full_evaluation=settings.FULL_KEYWORD_EVALUATION,
        )


class MatchResult(BaseModel):
    """Best fuzzy match of one keyword within a token sequence."""

    model_config = ConfigDict(frozen=True)

    keyword: str
    best_match: Optional[str] = None
    similarity: float = Field(default=0.0, ge=0.0, le=1.0)
    is_match: bool = False
    evaluated: bool = Field(
        default=True,
        description="False for keywords skipped after the required number of matches was reached"
    )

    @classmethod
    def not_evaluated(cls, keyword: str) -> "MatchResult":
        """Placeholder for a keyword that was skipped by the early stop."""
        return cls(keyword=keyword, best_match=None, similarity=0.0, is_match=False, evaluated=False)


class ValidationResult(BaseModel):
    """Verdict of a validation call."""

    model_config = ConfigDict(frozen=True)

    policy: ValidationPolicy
    is_match: bool
    percentage: float = Field(..., ge=0.0, le=1.0)

    # Fuzzy-keyword policy only
    matched_count: Optional[int] = None
    total_keywords: Optional[int] = None
    matches: List[MatchResult] = Field(default_factory=list)

    # Word-overlap policy only
    matched_reference_tokens: Optional[int] = None
    total_reference_tokens: Optional[int] = None

    @property
    def percentage_display(self) -> int:
        """Percentage rounded to a whole number, as shown to the user."""
        return round(self.percentage * 100)

    @property
    def evaluated_count(self) -> int:
        """Number of keywords that were actually compared against the text."""
        return sum(1 for match in self.matches if match.evaluated)
