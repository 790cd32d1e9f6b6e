"""
Unit tests for OCR text normalization.
"""
import random
import unittest

from docgate.services.validation import ContentNormalizer, normalize_text


class TestNormalize(unittest.TestCase):
    """Test cases for token normalization."""

    def setUp(self):
        """Set up test fixtures."""
        self.normalizer = ContentNormalizer()

    def test_lowercases_and_strips_punctuation(self):
        """Test that punctuation becomes a separator and case is folded."""
        self.assertEqual(self.normalizer.normalize("Hallo, Welt!"), ["hallo", "welt"])

    def test_keeps_umlauts_and_sharp_s(self):
        """Test that German letters stay intact."""
        tokens = self.normalizer.normalize("Straße GRÜN behördlicher Öl")
        self.assertEqual(tokens, ["straße", "grün", "behördlicher", "öl"])

    def test_keeps_other_diacritics_as_single_characters(self):
        """Test that accented letters are not decomposed or dropped."""
        tokens = self.normalizer.normalize("Café Română")
        self.assertEqual(tokens, ["café", "română"])
        self.assertEqual(len(tokens[0]), 4)

    def test_dots_split_urls(self):
        """Test that dotted names are split into separate words."""
        self.assertEqual(self.normalizer.normalize("demo.zetteln.app"), ["demo", "zetteln", "app"])

    def test_digits_and_underscores_kept(self):
        """Test that digits and underscores count as word characters."""
        self.assertEqual(self.normalizer.normalize("Seite 2/10 snake_case"), ["seite", "2", "10", "snake_case"])

    def test_empty_and_whitespace_only(self):
        """Test that empty input yields no tokens instead of failing."""
        self.assertEqual(self.normalizer.normalize(""), [])
        self.assertEqual(self.normalizer.normalize("   \n\t  "), [])
        self.assertEqual(self.normalizer.normalize("?!.,;"), [])
        self.assertEqual(self.normalizer.normalize(None), [])

    def test_order_preserved_with_duplicates(self):
        """Test that tokens keep their order and repeats."""
        self.assertEqual(self.normalizer.normalize("b a b"), ["b", "a", "b"])

    def test_iter_tokens_is_restartable(self):
        """Test that each call returns a fresh iterator."""
        text = "Der Hund läuft"
        first = list(self.normalizer.iter_tokens(text))
        second = list(self.normalizer.iter_tokens(text))
        self.assertEqual(first, second)
        self.assertEqual(first, ["der", "hund", "läuft"])

    def test_module_function_matches_class(self):
        """Test that normalize_text is the same operation."""
        text = "Zielsetzung: Im Rahmen der digitalen Transformation"
        self.assertEqual(normalize_text(text), self.normalizer.normalize(text))


class TestNormalizeIdempotence(unittest.TestCase):
    """Normalizing the joined tokens again yields the same tokens."""

    ALPHABET = "aBcäÖüßé 1_\t\n.,:;!?-/()\"'€"

    def test_idempotent_on_random_text(self):
        """Test idempotence over random noisy strings."""
        rng = random.Random(1234)
        normalizer = ContentNormalizer()
        for _ in range(500):
            text = "".join(rng.choice(self.ALPHABET) for _ in range(rng.randint(0, 40)))
            tokens = normalizer.normalize(text)
            self.assertEqual(normalizer.normalize(" ".join(tokens)), tokens, repr(text))

    def test_tokens_are_non_empty_and_lowercase(self):
        """Test that every token is non-empty and already lower-cased."""
        rng = random.Random(99)
        normalizer = ContentNormalizer()
        for _ in range(200):
            text = "".join(rng.choice(self.ALPHABET) for _ in range(rng.randint(0, 40)))
            for token in normalizer.normalize(text):
                self.assertTrue(token)
                self.assertEqual(token, token.lower())


if __name__ == '__main__':
    unittest.main()
