"""
Configuration settings for the document gate.
"""
from pydantic_settings import BaseSettings
from typing import List

from docgate.core.constants import (
    DEFAULT_EARLY_TERMINATION_SIMILARITY,
    DEFAULT_EDIT_DISTANCE_METHOD,
    DEFAULT_LENGTH_TOLERANCE,
    DEFAULT_MATCH_THRESHOLD,
    DEFAULT_MIN_KEYWORDS_REQUIRED,
    DEFAULT_SIMILARITY_THRESHOLD,
)
from docgate.models.validation_models import ValidationPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # Options: "text", "json"
    LOG_INCLUDE_VALIDATION_ID: bool = True  # Include the per-call validation id in logs

    # Performance Monitoring
    SLOW_VALIDATION_WARNING_THRESHOLD_MS: int = 250  # Warn if a validation call takes longer (milliseconds)

    # Word-Overlap Validation
    REFERENCE_TEXT: str = (
        "Zielsetzung: Im Rahmen der digitalen Transformation entwickeln wir eine mobile Applikation, "
        "deren primäre Zielsetzung in der Vereinfachung des Zugangs zu behördlicher Kommunikation liegt. "
        "zetteln ist eine Applikation die offizielle Texte in verständliche Sprache wiedergibt. "
        "Die Applikation erläutert amtliche Schriftstücke durch Kontextualisierung und bietet eine "
        "adaptive Ausfüllhilfen für Antragsverfahren. Nutzer und Nutzerinnen können unterstützt durch "
        "die Applikation strukturiert analoge Dokumente sortieren, bearbeiten und digitalisieren. "
        "Der Text ist schwierig? Teste die App auf demo.zetteln.app"
    )
    MATCH_THRESHOLD: float = DEFAULT_MATCH_THRESHOLD  # Fraction of reference words that must appear

    # Fuzzy Keyword Validation
    FUZZY_MATCHING_ENABLED: bool = True  # Use fuzzy keyword matching instead of word overlap
    KEYWORDS: List[str] = [
        "zetteln",          # App name - highly distinctive
        "Zielsetzung",      # Long word appearing twice
        "behördlicher",     # Contains umlauts - distinctive
        "Applikation",      # Key term appearing multiple times
        "digitalisieren",   # Long distinctive word
    ]
    SIMILARITY_THRESHOLD: float = DEFAULT_SIMILARITY_THRESHOLD  # 80% similarity required per keyword
    MIN_KEYWORDS_REQUIRED: int = DEFAULT_MIN_KEYWORDS_REQUIRED  # Need 3 out of 5 keywords to validate
    FULL_KEYWORD_EVALUATION: bool = False  # Evaluate every keyword instead of stopping once enough matched

    # Matching Engine Tuning
    EDIT_DISTANCE_METHOD: str = DEFAULT_EDIT_DISTANCE_METHOD  # Options: "dynamic_programming", "compact", "levenshtein"
    LENGTH_TOLERANCE: float = DEFAULT_LENGTH_TOLERANCE  # Exact for thresholds >= 1/1.3, widened automatically below
    EARLY_TERMINATION_SIMILARITY: float = DEFAULT_EARLY_TERMINATION_SIMILARITY

    @property
    def validation_policy(self) -> ValidationPolicy:
        """Resolve which validation policy the gate runs by default."""
        if self.FUZZY_MATCHING_ENABLED:
            return ValidationPolicy.FUZZY_KEYWORDS
        return ValidationPolicy.WORD_OVERLAP

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Allow extra fields in .env for backward compatibility


settings = Settings()
