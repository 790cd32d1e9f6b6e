"""
Text normalization utilities for OCR text comparison.
"""
import re
import logging
from typing import Iterator, List, Optional

from docgate.core.constants import ALLOWED_EXTRA_LETTERS

logger = logging.getLogger(__name__)

# Anything that is not a word character, whitespace or an allow-listed letter.
# str patterns are Unicode-aware, so accented letters stay single characters.
NON_WORD_PATTERN = re.compile(r"[^\w\s" + re.escape(ALLOWED_EXTRA_LETTERS) + r"]")


class ContentNormalizer:
    """Fold raw OCR text into a comparable token sequence."""

    def normalize(self, text: Optional[str]) -> List[str]:
        """
        Normalize text into lowercase, punctuation-free tokens.

        Never fails: empty or missing text yields an empty list.

        Args:
            text: Text to normalize

        Returns:
            Tokens in the order they appear in the text
        """
        return list(self.iter_tokens(text))

    def iter_tokens(self, text: Optional[str]) -> Iterator[str]:
        """
        Lazily yield normalized tokens.

        Each call returns a fresh iterator, so the sequence can be restarted
        by calling again with the same text.
        """
        if not text:
            return iter(())

        lower_case = text.lower()
        no_punctuation = NON_WORD_PATTERN.sub(" ", lower_case)
        return (word for word in no_punctuation.split() if word)


_default_normalizer = ContentNormalizer()


def normalize_text(text: Optional[str]) -> List[str]:
    """Normalize text with the shared normalizer."""
    return _default_normalizer.normalize(text)
