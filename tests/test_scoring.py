# Tests for gomatria.scoring
import unittest

from gomatria.models import Cipher
from gomatria.scoring import fold, letter_table, score, unique_in_order

SIMPLE = Cipher(
    "simple", "A=1 B=2 C=3", False, {"A": 1, "B": 2, "C": 3}
)
CASED = Cipher(
    "cased", "lower and upper differ", True, {"a": 1, "A": 100}
)
WITH_FIVE = Cipher("five", "explicit digit", False, {"5": 50, "A": 1})
NEGATIVE = Cipher("neg", "negative values", False, {"A": -4, "B": 1})


class TestScore(unittest.TestCase):
    def test_empty_text_scores_zero(self):
        for c in (SIMPLE, CASED, WITH_FIVE, NEGATIVE):
            self.assertEqual(score("", c), 0)

    def test_sums_mapped_letters(self):
        self.assertEqual(score("ABC", SIMPLE), 6)
        self.assertEqual(score("CAB", SIMPLE), 6)
        self.assertEqual(score("AAA", SIMPLE), 3)

    def test_unmapped_non_digits_contribute_nothing(self):
        self.assertEqual(score("xyz !?-", SIMPLE), 0)
        self.assertEqual(score("A Z", SIMPLE), 1)
        self.assertEqual(score("ÄÖ€", SIMPLE), 0)

    def test_digit_fallback(self):
        self.assertEqual(score("5", SIMPLE), 5)
        self.assertEqual(score("1234567890", SIMPLE), 45)
        self.assertEqual(score("A9", SIMPLE), 10)

    def test_explicit_digit_entry_wins(self):
        self.assertEqual(score("5", WITH_FIVE), 50)
        self.assertEqual(score("56", WITH_FIVE), 56)

    def test_non_ascii_digits_are_not_face_valued(self):
        # Arabic-Indic five
        self.assertEqual(score("٥", SIMPLE), 0)

    def test_case_insensitive_folds(self):
        self.assertEqual(score("abc", SIMPLE), score("ABC", SIMPLE))
        self.assertEqual(score("aBc", SIMPLE), 6)

    def test_case_sensitive_keeps_case(self):
        self.assertEqual(score("a", CASED), 1)
        self.assertEqual(score("A", CASED), 100)
        self.assertEqual(score("aA", CASED), 101)

    def test_prefolded_text_scores_the_same(self):
        text = "Hello, abc 42"
        self.assertEqual(score(fold(text, SIMPLE), SIMPLE), score(text, SIMPLE))

    def test_negative_values_allowed(self):
        self.assertEqual(score("AAB", NEGATIVE), -7)


class TestHelpers(unittest.TestCase):
    def test_fold(self):
        self.assertEqual(fold("abc", SIMPLE), "ABC")
        self.assertEqual(fold("abc", CASED), "abc")

    def test_letter_table_sorted_by_character(self):
        c = Cipher("t", "", True, {"b": 2, "A": 1, "a": 3, "0": 9})
        self.assertEqual(
            letter_table(c), [("0", 9), ("A", 1), ("a", 3), ("b", 2)]
        )

    def test_unique_in_order(self):
        self.assertEqual(unique_in_order([5, 3, 5, 1, 3]), [5, 3, 1])
        self.assertEqual(unique_in_order([]), [])

    def test_cipher_letters_are_read_only(self):
        with self.assertRaises(TypeError):
            SIMPLE.letters["D"] = 4


if __name__ == "__main__":
    unittest.main()
