"""
Test suite for the exprparse lexer.

Tests cover:
- take_while splitting behaviour
- Digit, whitespace and operator extraction
- Source location computation

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.lexer import (
    take_while, extract_digits, extract_whitespace, extract_operator,
    is_ascii_digit, is_space, SourceLocation, EmptyInputError, LexerError
)


class TestTakeWhile(unittest.TestCase):
    """Test cases for take_while."""

    def test_splits_at_first_rejected_character(self):
        self.assertEqual(take_while(lambda c: c == 'a', "aab"), ("b", "aa"))

    def test_all_characters_accepted(self):
        self.assertEqual(take_while(lambda c: True, "xyz"), ("", "xyz"))

    def test_first_character_rejected(self):
        self.assertEqual(take_while(lambda c: False, "xyz"), ("xyz", ""))

    def test_empty_input(self):
        self.assertEqual(take_while(lambda c: True, ""), ("", ""))

    def test_stops_at_first_rejection_only(self):
        """Characters after the split point are not examined for the match."""
        self.assertEqual(take_while(str.isalpha, "ab1cd"), ("1cd", "ab"))

    def test_matched_plus_remainder_is_input(self):
        for source in ["", "123", "12ab", "  x", "+-*/"]:
            with self.subTest(source=source):
                remainder, matched = take_while(is_ascii_digit, source)
                self.assertEqual(matched + remainder, source)


class TestExtractDigits(unittest.TestCase):
    """Test cases for digit extraction."""

    def test_extract_number_from_expr(self):
        self.assertEqual(extract_digits("1+2"), ("+2", "1"))
        self.assertEqual(extract_digits("10+2"), ("+2", "10"))

    def test_do_not_extract_from_empty_input(self):
        self.assertEqual(extract_digits(""), ("", ""))

    def test_extract_digits_without_remainder(self):
        self.assertEqual(extract_digits("100"), ("", "100"))

    def test_decimal_strings_extract_whole(self):
        """Any non-negative integer's decimal form is taken in full."""
        for n in [0, 1, 7, 10, 99, 1000, 65535, 123456789, 2 ** 31 - 1, 2 ** 63 - 1]:
            with self.subTest(n=n):
                self.assertEqual(extract_digits(str(n)), ("", str(n)))

    def test_non_digit_start(self):
        self.assertEqual(extract_digits("a12"), ("a12", ""))
        self.assertEqual(extract_digits(" 12"), (" 12", ""))

    def test_unicode_digits_are_not_digits(self):
        self.assertEqual(extract_digits("١٢٣"), ("١٢٣", ""))
        self.assertEqual(extract_digits("12²"), ("²", "12"))

    def test_extraction_is_repeatable(self):
        """Extracting again from the same remainder gives the same result."""
        remainder, digits = extract_digits("42 + 7")
        self.assertEqual(extract_digits(remainder), extract_digits(remainder))
        self.assertEqual(extract_digits("42 + 7"), (remainder, digits))


class TestExtractWhitespace(unittest.TestCase):
    """Test cases for whitespace extraction."""

    def test_extract_spaces(self):
        self.assertEqual(extract_whitespace("   1 1 11"), ("1 1 11", "   "))

    def test_no_spaces(self):
        self.assertEqual(extract_whitespace("1 "), ("1 ", ""))
        self.assertEqual(extract_whitespace(""), ("", ""))

    def test_tabs_and_newlines_are_not_whitespace(self):
        self.assertEqual(extract_whitespace("\t1"), ("\t1", ""))
        self.assertEqual(extract_whitespace(" \n1"), ("\n1", " "))


class TestExtractOperator(unittest.TestCase):
    """Test cases for operator extraction."""

    def test_takes_one_character(self):
        self.assertEqual(extract_operator("+2"), ("2", "+"))
        self.assertEqual(extract_operator("*"), ("", "*"))

    def test_does_not_validate(self):
        self.assertEqual(extract_operator("?2"), ("2", "?"))
        self.assertEqual(extract_operator("12"), ("2", "1"))

    def test_empty_input_raises(self):
        with self.assertRaises(EmptyInputError) as ctx:
            extract_operator("")

        self.assertIsInstance(ctx.exception, LexerError)
        self.assertEqual(ctx.exception.code, "L001")
        self.assertEqual(ctx.exception.remaining, "")
        self.assertIn("operator", str(ctx.exception))


class TestCharacterClasses(unittest.TestCase):
    """Test cases for the character predicates."""

    def test_is_ascii_digit(self):
        for char in "0123456789":
            self.assertTrue(is_ascii_digit(char))
        for char in "a+ /:٣":
            self.assertFalse(is_ascii_digit(char))

    def test_is_ascii_digit_rejects_multi_character_strings(self):
        """Strings that sort between '0' and '9' are not single digits."""
        for text in ["10", "5a", "09", ""]:
            with self.subTest(text=text):
                self.assertFalse(is_ascii_digit(text))

    def test_is_space(self):
        self.assertTrue(is_space(" "))
        for char in "\t\n\r x":
            self.assertFalse(is_space(char))


class TestSourceLocation(unittest.TestCase):
    """Test cases for offset to line/column conversion."""

    def test_first_line(self):
        location = SourceLocation.from_offset("1 ? 2", 2, "expr.txt")
        self.assertEqual(location, SourceLocation("expr.txt", 1, 3, 2))
        self.assertEqual(str(location), "expr.txt:1:3")

    def test_after_newline(self):
        location = SourceLocation.from_offset("1\n+2", 2)
        self.assertEqual((location.line, location.column), (2, 1))

    def test_end_of_input(self):
        location = SourceLocation.from_offset("12", 2)
        self.assertEqual((location.line, location.column, location.offset), (1, 3, 2))

    def test_offset_is_clamped(self):
        self.assertEqual(SourceLocation.from_offset("ab", 10).offset, 2)
        self.assertEqual(SourceLocation.from_offset("ab", -1).offset, 0)


if __name__ == '__main__':
    unittest.main()
