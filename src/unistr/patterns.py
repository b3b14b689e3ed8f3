"""Character classes, regex patterns and shared defaults for text processing.
"""

__docformat__ = 'google'

import regex
from unistr.entities import CharacterSet
from unistr.lookups import BooleanData, DefaultsData
from typing import List

# Lookup tables
DEFAULTS: DefaultsData = DefaultsData()
BOOLEANS: BooleanData = BooleanData()

## Segmentation
GRAPHEME_CLUSTER: str = r'\X'
"""Uncompiled regex building block matching one extended grapheme cluster."""

GRAPHEME_PATTERN: regex.Pattern = regex.compile(GRAPHEME_CLUSTER)
"""Compiled regex matching one extended grapheme cluster.

Used in `unistr.indexing.clusters`, which every position-based function
relies on."""

## Character sets
WHITESPACES: CharacterSet = CharacterSet(r'[\t\p{Zs}]')
"""Horizontal whitespace: tab and the space separators (general category Zs)."""

NEWLINES: CharacterSet = CharacterSet(r'[\n\x0b\x0c\r\x85\u2028\u2029]')
"""Line and paragraph separators (U+000A through U+000D, U+0085, U+2028, U+2029)."""

WHITESPACES_AND_NEWLINES: CharacterSet = CharacterSet(r'[\t\n\x0b\x0c\r\x85\u2028\u2029\p{Zs}]')
"""Union of `WHITESPACES` and `NEWLINES`; the default set for trimming."""

DECIMAL_DIGITS: CharacterSet = CharacterSet(r'\p{Nd}')
LETTERS: CharacterSet = CharacterSet(r'[\p{L}\p{M}]')
LOWERCASE_LETTERS: CharacterSet = CharacterSet(r'\p{Ll}')
UPPERCASE_LETTERS: CharacterSet = CharacterSet(r'[\p{Lu}\p{Lt}]')
ALPHANUMERICS: CharacterSet = CharacterSet(r'[\p{L}\p{M}\p{N}]')
PUNCTUATION: CharacterSet = CharacterSet(r'\p{P}')
SYMBOLS: CharacterSet = CharacterSet(r'\p{S}')

## Transformations
TRUNCATION_TRAILING: str = DEFAULTS.truncation_trailing
"""String appended by `unistr.transforms.truncate` when text is cut short."""

WORD_SEPARATORS: List[str] = DEFAULTS.word_separators
"""Literal characters that separate words in addition to whitespace.

Used by the case-style transforms in `unistr.transforms`."""

WORD_SEPARATOR: str = f"(?:{'|'.join(map(regex.escape, WORD_SEPARATORS))}|{WHITESPACES_AND_NEWLINES.pattern})+"

WORD_SEPARATOR_PATTERN: regex.Pattern = regex.compile(WORD_SEPARATOR)
"""Compiled regex matching a run of word separators or whitespace.

Used in `unistr.transforms.words`."""

COMBINING_MARK_PATTERN: regex.Pattern = regex.compile(r'\p{M}+')
"""Compiled regex matching combining marks left over after canonical decomposition.

Used in `unistr.transforms.removing_accents_or_diacritics`."""

## Conversions
VERSION_SEPARATOR: str = DEFAULTS.version_separator
VERSION_COMPONENTS: int = DEFAULTS.version_components
VERSION_PLACEHOLDER: str = DEFAULTS.version_placeholder

VERSION_COMPONENT_PATTERN: regex.Pattern = regex.compile(r'[0-9]+')
"""Compiled regex matching a valid semantic version component (ASCII digits only).

Used in `unistr.conversions.ensure_semantic_version_correctness`."""

INTEGER_PATTERN: regex.Pattern = regex.compile(r'[+-]?[0-9]+')
"""Compiled regex matching a signed decimal integer with no surrounding whitespace.

Used in `unistr.conversions.to_int`."""

URL_QUERY_SAFE: str = "!$&'()*+,-./:;=?@_~"
"""Punctuation left unescaped by `unistr.conversions.url_escaped`."""
