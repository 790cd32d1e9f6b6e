"""
Unit tests for edit distance and similarity scoring.
"""
import random
import unittest

import Levenshtein

from docgate.services.validation import (
    EditDistanceCalculator,
    SimilarityCalculator,
    levenshtein_distance,
    levenshtein_distance_compact,
)


def _random_word(rng: random.Random, alphabet: str = "abcäöß", max_length: int = 8) -> str:
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(0, max_length)))


class TestLevenshteinDistance(unittest.TestCase):
    """Test cases for the reference dynamic programming implementation."""

    def test_known_distances(self):
        """Test textbook examples."""
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)
        self.assertEqual(levenshtein_distance("flaw", "lawn"), 2)
        self.assertEqual(levenshtein_distance("zetteln", "zettaln"), 1)
        self.assertEqual(levenshtein_distance("straße", "strasse"), 2)

    def test_empty_string_distance_is_length(self):
        """Test the boundary row and column."""
        self.assertEqual(levenshtein_distance("", ""), 0)
        self.assertEqual(levenshtein_distance("", "abc"), 3)
        self.assertEqual(levenshtein_distance("abcd", ""), 4)

    def test_identical_strings(self):
        """Test that identical strings have distance zero."""
        self.assertEqual(levenshtein_distance("applikation", "applikation"), 0)

    def test_metric_properties_on_random_words(self):
        """Test symmetry, identity and the triangle inequality."""
        rng = random.Random(42)
        for _ in range(300):
            a, b, c = _random_word(rng), _random_word(rng), _random_word(rng)
            d_ab = levenshtein_distance(a, b)
            self.assertEqual(d_ab, levenshtein_distance(b, a))
            self.assertEqual(levenshtein_distance(a, a), 0)
            self.assertEqual(d_ab == 0, a == b)
            self.assertLessEqual(d_ab, levenshtein_distance(a, c) + levenshtein_distance(c, b))
            self.assertGreaterEqual(d_ab, abs(len(a) - len(b)))


class TestEditDistanceBackends(unittest.TestCase):
    """All backends must return identical distances."""

    def test_backends_agree(self):
        """Test compact and library backends against the reference table."""
        rng = random.Random(7)
        for _ in range(500):
            a, b = _random_word(rng, max_length=12), _random_word(rng, max_length=12)
            expected = levenshtein_distance(a, b)
            self.assertEqual(levenshtein_distance_compact(a, b), expected, (a, b))
            self.assertEqual(Levenshtein.distance(a, b), expected, (a, b))

    def test_calculator_selects_backend(self):
        """Test that every configured method name is usable."""
        for method in EditDistanceCalculator.BACKENDS:
            calculator = EditDistanceCalculator(method)
            self.assertEqual(calculator.method, method)
            self.assertEqual(calculator.distance("kitten", "sitting"), 3)

    def test_unknown_method_falls_back(self):
        """Test that an unknown method logs a warning and uses the reference backend."""
        with self.assertLogs("docgate.services.validation.edit_distance", level="WARNING"):
            calculator = EditDistanceCalculator("hamming")
        self.assertEqual(calculator.method, "dynamic_programming")
        self.assertEqual(calculator.distance("flaw", "lawn"), 2)


class TestSimilarityCalculator(unittest.TestCase):
    """Test cases for the length-normalized similarity ratio."""

    def setUp(self):
        """Set up test fixtures."""
        self.calculator = SimilarityCalculator()

    def test_both_empty_is_identical(self):
        """Test that two empty strings are fully similar."""
        self.assertEqual(self.calculator.calculate_similarity("", ""), 1.0)

    def test_one_empty_is_zero(self):
        """Test that a string against the empty string scores zero."""
        self.assertEqual(self.calculator.calculate_similarity("abc", ""), 0.0)
        self.assertEqual(self.calculator.calculate_similarity("", "abc"), 0.0)

    def test_single_substitution(self):
        """Test one substitution in a seven letter word."""
        similarity = self.calculator.calculate_similarity("zetteln", "zettaln")
        self.assertAlmostEqual(similarity, 6 / 7)

    def test_uses_longer_length(self):
        """Test normalization by the longer string."""
        self.assertAlmostEqual(self.calculator.calculate_similarity("abc", "abcd"), 0.75)
        self.assertAlmostEqual(self.calculator.calculate_similarity("abcd", "abc"), 0.75)

    def test_bounds_on_random_words(self):
        """Test that similarity is within [0, 1] and 1.0 for identical words."""
        rng = random.Random(3)
        for _ in range(300):
            a, b = _random_word(rng), _random_word(rng)
            similarity = self.calculator.calculate_similarity(a, b)
            self.assertGreaterEqual(similarity, 0.0)
            self.assertLessEqual(similarity, 1.0)
            self.assertEqual(self.calculator.calculate_similarity(a, a), 1.0)

    def test_library_backend_same_scores(self):
        """Test that the python-Levenshtein backend gives the same ratios."""
        library = SimilarityCalculator(EditDistanceCalculator("levenshtein"))
        for a, b in [("zetteln", "zettaln"), ("applikation", "appl1kati0n"), ("", "x")]:
            self.assertEqual(
                library.calculate_similarity(a, b),
                self.calculator.calculate_similarity(a, b)
            )


if __name__ == '__main__':
    unittest.main()
