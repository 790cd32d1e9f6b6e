"""Pydantic models for validation configuration and results."""

from .validation_models import (
    ValidationPolicy,
    OverlapConfig,
    KeywordConfig,
    MatchResult,
    ValidationResult
)

__all__ = [
    "ValidationPolicy",
    "OverlapConfig",
    "KeywordConfig",
    "MatchResult",
    "ValidationResult"
]
