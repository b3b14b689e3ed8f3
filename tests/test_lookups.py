import unittest
from unistr.lookups import BooleanData, DefaultsData

class TestBooleanData(unittest.TestCase):
    def test_token_table(self):
        booleans = BooleanData()
        self.assertIs(booleans.token_to_value['yes'], True)
        self.assertIs(booleans.token_to_value['0'], False)
        self.assertIn('👍🏽', booleans.true_tokens)
        self.assertIn('n', booleans.false_tokens)
        self.assertEqual(len(booleans.true_tokens), len(booleans.false_tokens))

class TestDefaultsData(unittest.TestCase):
    def test_defaults(self):
        defaults = DefaultsData()
        self.assertEqual(defaults.truncation_trailing, '…')
        self.assertEqual(defaults.word_separators, ['_', '-'])
        self.assertEqual(defaults.version_separator, '.')
        self.assertEqual(defaults.version_components, 3)
        self.assertEqual(defaults.version_placeholder, '0')

    def test_version_components_must_match_semantic_version(self):
        defaults = DefaultsData()
        defaults.semantic_version = {**defaults.semantic_version, 'components': 4}
        with self.assertRaises(ValueError):
            defaults.version_components
