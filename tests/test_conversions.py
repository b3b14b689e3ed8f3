import sys
import unittest
from unistr import conversions
from unistr.conversions import SemanticVersionError
from unistr.entities import SemanticVersion

INT_DIGIT_LIMIT = sys.get_int_max_str_digits() if hasattr(sys, 'get_int_max_str_digits') else 0

class TestParseSemanticVersion(unittest.TestCase):
    def test_full_version(self):
        self.assertEqual(conversions.parse_semantic_version('1.2.3'), (1, 2, 3))

    def test_missing_components_are_padded(self):
        self.assertEqual(conversions.parse_semantic_version('1.2'), (1, 2, 0))
        self.assertEqual(conversions.parse_semantic_version('1'), (1, 0, 0))

    def test_empty_is_zero(self):
        self.assertEqual(conversions.parse_semantic_version(''), (0, 0, 0))

    def test_returns_semantic_version(self):
        version = conversions.parse_semantic_version('10.0.1')
        self.assertIsInstance(version, SemanticVersion)
        self.assertEqual(version.major, 10)
        self.assertEqual(str(version), '10.0.1')

    def test_leading_zeros(self):
        self.assertEqual(conversions.parse_semantic_version('01.002'), (1, 2, 0))

    def test_large_components(self):
        version = conversions.parse_semantic_version('99999999999999999999.0.1')
        self.assertEqual(version.major, 99999999999999999999)

    @unittest.skipUnless(INT_DIGIT_LIMIT, "interpreter has no integer string conversion limit")
    def test_component_over_conversion_limit(self):
        with self.assertRaises(SemanticVersionError):
            conversions.parse_semantic_version('9' * (INT_DIGIT_LIMIT + 1))
        with self.assertRaises(SemanticVersionError):
            conversions.parse_semantic_version('1.' + '9' * (INT_DIGIT_LIMIT + 1))

    def test_too_many_components(self):
        with self.assertRaises(SemanticVersionError):
            conversions.parse_semantic_version('1.2.3.4')

    def test_non_numeric_component(self):
        for text in ('1.a.3', '1..3', '1.2.', ' 1.2', '1.-2', '1.²'):
            with self.subTest(text=text):
                with self.assertRaises(SemanticVersionError):
                    conversions.parse_semantic_version(text)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            conversions.parse_semantic_version('v1')

class TestEnsureSemanticVersionCorrectness(unittest.TestCase):
    def test_normalizes(self):
        self.assertEqual(conversions.ensure_semantic_version_correctness('4'), '4.0.0')
        self.assertEqual(conversions.ensure_semantic_version_correctness('4.1.7'), '4.1.7')
        self.assertEqual(conversions.ensure_semantic_version_correctness(''), '0.0.0')

class TestToBool(unittest.TestCase):
    def test_true_tokens(self):
        for text in ('1', 'true', 'TRUE', 't', ' yes ', 'Y', '👍', '👍🏻', '👍🏿'):
            with self.subTest(text=text):
                self.assertIs(conversions.to_bool(text), True)

    def test_false_tokens(self):
        for text in ('0', 'False', 'f', 'no\n', 'N', '👎', '👎🏽'):
            with self.subTest(text=text):
                self.assertIs(conversions.to_bool(text), False)

    def test_unknown_tokens(self):
        for text in ('', 'maybe', '2', 'yes please', 'nan'):
            with self.subTest(text=text):
                self.assertIsNone(conversions.to_bool(text))

class TestToNumbers(unittest.TestCase):
    def test_to_int(self):
        self.assertEqual(conversions.to_int('42'), 42)
        self.assertEqual(conversions.to_int('-7'), -7)
        self.assertEqual(conversions.to_int('+7'), 7)

    @unittest.skipUnless(INT_DIGIT_LIMIT, "interpreter has no integer string conversion limit")
    def test_to_int_over_conversion_limit(self):
        self.assertIsNone(conversions.to_int('9' * (INT_DIGIT_LIMIT + 1)))
        self.assertIsNone(conversions.to_int('-' + '9' * (INT_DIGIT_LIMIT + 1)))

    def test_to_int_rejects(self):
        for text in ('', ' 42', '4_2', '4.2', '٤٢', 'forty'):
            with self.subTest(text=text):
                self.assertIsNone(conversions.to_int(text))

    def test_to_float(self):
        self.assertEqual(conversions.to_float('1.5'), 1.5)
        self.assertEqual(conversions.to_float('-2e3'), -2000.0)
        self.assertEqual(conversions.to_float('7'), 7.0)

    def test_to_float_rejects(self):
        for text in ('', ' 1.5', '1_000.0', 'one'):
            with self.subTest(text=text):
                self.assertIsNone(conversions.to_float(text))

class TestBase64(unittest.TestCase):
    def test_encode(self):
        self.assertEqual(conversions.to_base64_encoded('Hello World'), 'SGVsbG8gV29ybGQ=')
        self.assertEqual(conversions.to_base64_encoded(''), '')

    def test_decode(self):
        self.assertEqual(conversions.to_base64_decoded('SGVsbG8gV29ybGQ='), 'Hello World')

    def test_round_trip_unicode(self):
        text = '🇮🇹 café'
        self.assertEqual(conversions.to_base64_decoded(conversions.to_base64_encoded(text)), text)

    def test_decode_invalid(self):
        self.assertIsNone(conversions.to_base64_decoded('not base64!'))
        self.assertIsNone(conversions.to_base64_decoded('/w=='))

class TestUrlEscaped(unittest.TestCase):
    def test_escapes_spaces_and_unicode(self):
        self.assertEqual(conversions.url_escaped('a b'), 'a%20b')
        self.assertEqual(conversions.url_escaped('ç'), '%C3%A7')

    def test_keeps_query_characters(self):
        self.assertEqual(conversions.url_escaped('key=value&x=1'), 'key=value&x=1')
