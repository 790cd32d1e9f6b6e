"""
Demonstration of OCR document gating.

Shows how both validation policies react to typical OCR noise.
"""
import logging

from docgate.core.config import settings
from docgate.core.logging import setup_logging
from docgate.models import KeywordConfig, OverlapConfig
from docgate.services.validation import DocumentValidator


def print_comparison(description: str, ocr_text: str, validator: DocumentValidator):
    """Print both policy verdicts for one OCR text."""
    print(f"\n{'='*80}")
    print(f"Test: {description}")
    print(f"{'='*80}")
    print(f"\nOCR text ({len(ocr_text)} chars):")
    print(f"  {ocr_text[:100]!r}")

    overlap = validator.validate_document(ocr_text, OverlapConfig.from_settings())
    print(f"\nWord overlap: {overlap.matched_reference_tokens}/{overlap.total_reference_tokens} "
          f"words ({overlap.percentage_display}%)")
    print("✅ PASS" if overlap.is_match else "❌ FAIL")

    keywords = validator.validate_with_fuzzy_keywords(ocr_text, KeywordConfig.from_settings())
    print(f"\nFuzzy keywords: {keywords.matched_count}/{keywords.total_keywords} "
          f"(need {settings.MIN_KEYWORDS_REQUIRED})")
    for match in keywords.matches:
        if not match.evaluated:
            print(f"  - {match.keyword:<16} (skipped, enough keywords matched)")
        else:
            print(f"  - {match.keyword:<16} best={match.best_match!s:<16} {match.similarity:.0%}")
    print("✅ PASS" if keywords.is_match else "❌ FAIL")


def main():
    """Run demonstration scenarios."""
    setup_logging()
    logging.getLogger("docgate").setLevel(logging.WARNING)

    validator = DocumentValidator()

    print_comparison("Clean scan", settings.REFERENCE_TEXT, validator)

    print_comparison(
        "Noisy scan (lost umlauts, l/I and 1/i confusion)",
        "Zielsetzunq: lm Rahmen der diqitalen Transformation entwickeIn wir eine mobile Appl1kation, "
        "deren primare Zielsetzung in der Vereinfachung des Zugangs zu behordlicher Kommunikation liegt. "
        "zettein ist eine App1ikation die offizielle Texte in verstandliche Sprache wiedergibt.",
        validator
    )

    print_comparison(
        "Unrelated letter",
        "Sehr geehrte Damen und Herren, anbei erhalten Sie Ihren Steuerbescheid für 2023.",
        validator
    )


if __name__ == "__main__":
    main()
