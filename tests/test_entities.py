import unittest
from unistr.entities import CharacterSet, SemanticVersion, TextRange
from unistr.patterns import NEWLINES, WHITESPACES, WHITESPACES_AND_NEWLINES, LETTERS

class TestTextRange(unittest.TestCase):
    def test_length_and_slice(self):
        text_range = TextRange(2, 5)
        self.assertEqual(text_range.length, 3)
        self.assertEqual(len(text_range), 3)
        self.assertEqual(text_range.to_slice(), slice(2, 5))
        self.assertIn(2, text_range)
        self.assertNotIn(5, text_range)

    def test_inverted_bounds_rejected(self):
        with self.assertRaises(ValueError):
            TextRange(3, 1)

    def test_from_bounds(self):
        self.assertEqual(TextRange.from_bounds(range(1, 4)), TextRange(1, 4))
        self.assertEqual(TextRange.from_bounds((0, 2)), TextRange(0, 2))
        with self.assertRaises(ValueError):
            TextRange.from_bounds(range(0, 6, 2))
        with self.assertRaises(TypeError):
            TextRange.from_bounds('0:2')

class TestSemanticVersion(unittest.TestCase):
    def test_behaves_like_tuple(self):
        version = SemanticVersion(1, 4, 2)
        major, minor, patch = version
        self.assertEqual((major, minor, patch), (1, 4, 2))
        self.assertEqual(version, (1, 4, 2))
        self.assertEqual(hash(version), hash((1, 4, 2)))

    def test_ordering(self):
        self.assertLess(SemanticVersion(1, 2, 9), SemanticVersion(1, 10, 0))

    def test_negative_rejected(self):
        with self.assertRaises(ValueError):
            SemanticVersion(1, -1, 0)

class TestCharacterSet(unittest.TestCase):
    def test_whitespace_sets(self):
        self.assertIn(' ', WHITESPACES)
        self.assertIn('\t', WHITESPACES)
        self.assertIn('\u00a0', WHITESPACES)
        self.assertNotIn('\n', WHITESPACES)
        self.assertIn('\n', NEWLINES)
        self.assertIn('\u2028', NEWLINES)
        self.assertIn('\r', WHITESPACES_AND_NEWLINES)
        self.assertIn('\u3000', WHITESPACES_AND_NEWLINES)

    def test_only_single_scalars(self):
        self.assertNotIn('  ', WHITESPACES)
        self.assertNotIn('', WHITESPACES)

    def test_letters_include_marks(self):
        self.assertIn('\u0301', LETTERS)
        self.assertIn('ß', LETTERS)

    def test_from_characters(self):
        brackets = CharacterSet.from_characters('[]')
        self.assertIn('[', brackets)
        self.assertIn(']', brackets)
        self.assertNotIn('a', brackets)
        self.assertNotIn('a', CharacterSet.from_characters(''))

    def test_union_and_inverted(self):
        union = CharacterSet.from_characters('a') | CharacterSet.from_characters('b')
        self.assertIn('a', union)
        self.assertIn('b', union)
        self.assertNotIn('c', union)
        self.assertIn('c', union.inverted())
        self.assertNotIn('a', union.inverted())
        self.assertIn('\n', union.inverted())

    def test_contains_all(self):
        self.assertTrue(WHITESPACES.contains_all(' \t '))
        self.assertFalse(WHITESPACES.contains_all(' x '))
        self.assertFalse(WHITESPACES.contains_all(''))

    def test_split(self):
        self.assertEqual(WHITESPACES.split(' a  b '), ['', 'a', 'b', ''])
