"""Derived string forms: trimming, condensing, truncation and case styles.

All functions return a new string and work character by character (grapheme
cluster by grapheme cluster), built on `unistr.indexing`.

The case-style transforms share one word-split step: text is split on `_`,
`-` and runs of whitespace, and empty fragments are dropped. The join rule is
what distinguishes them:

    | Transform   | Join rule                                                |
    |-------------|----------------------------------------------------------|
    | pascal_cased| concatenate, each word's first character upper-cased     |
    | camel_cased | pascal_cased, then first character lower-cased           |
    | snake_cased | join with '_', case preserved                            |
    | slug_cased  | join with '-', lower-cased                               |
    | kebab_cased | '-' + slug_cased + '-'                                   |

`snake_cased` and `slug_cased` reproduce their own output when re-applied.
`pascal_cased` and `camel_cased` do not: once separators are removed, the
original word boundaries cannot be recovered.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'trimmed',
    'trimmed_left',
    'trimmed_right',
    'condensing_excessive_spaces',
    'condensing_excessive_spaces_and_newlines',
    'removing_characters',
    'removing_accents_or_diacritics',
    'replace',
    'truncate',
    'words',
    'first_character_of_each_word',
    'capitalized_first_character',
    'decapitalized_first_character',
    'pascal_cased',
    'camel_cased',
    'snake_cased',
    'slug_cased',
    'kebab_cased',
    'swap_cased'
]

import unicodedata
from itertools import dropwhile
from typing import List, Optional
from unistr.entities import CharacterSet
from unistr.indexing import clusters, ranges_of_occurrences
from unistr.patterns import (
    WHITESPACES,
    WHITESPACES_AND_NEWLINES,
    WORD_SEPARATOR_PATTERN,
    COMBINING_MARK_PATTERN,
    TRUNCATION_TRAILING
)

## Trimming and condensing
def trimmed(text: str, character_set: CharacterSet = WHITESPACES_AND_NEWLINES) -> str:
    """
    Strip leading and trailing characters made up entirely of scalars in a set.

    Interior content is left untouched.

    Args:
        text: Any string
        character_set: Characters to strip (default whitespace and newlines)

    Returns:
        Trimmed text, or an empty string if every character is in the set

    Example:
        >>> trimmed('  hello world \\r\\n')
        'hello world'
        >>> from unistr.entities import CharacterSet
        >>> trimmed('--a-b--', CharacterSet.from_characters('-'))
        'a-b'
    """
    return trimmed_right(trimmed_left(text, character_set), character_set)

def trimmed_left(text: str, character_set: CharacterSet = WHITESPACES_AND_NEWLINES) -> str:
    """
    Strip leading characters in a set.

    Example:
        >>> trimmed_left('  hello  ')
        'hello  '
    """
    return ''.join(dropwhile(character_set.contains_all, clusters(text)))

def trimmed_right(text: str, character_set: CharacterSet = WHITESPACES_AND_NEWLINES) -> str:
    """
    Strip trailing characters in a set.

    Example:
        >>> trimmed_right('  hello  ')
        '  hello'
    """
    kept = list(dropwhile(character_set.contains_all, reversed(clusters(text))))
    return ''.join(reversed(kept))

def condensing_excessive_spaces(text: str) -> str:
    """
    Collapse runs of whitespace into a single space and trim both ends.

    Newlines are not treated as whitespace here.

    Example:
        >>> condensing_excessive_spaces('test    too many    spaces')
        'test too many spaces'
        >>> condensing_excessive_spaces('  a \\n  b ')
        'a \\n b'
    """
    return ' '.join(filter(None, WHITESPACES.split(text)))

def condensing_excessive_spaces_and_newlines(text: str) -> str:
    """
    Collapse runs of whitespace and newlines into a single space and trim both ends.

    Example:
        >>> condensing_excessive_spaces_and_newlines('  a \\n\\n  b ')
        'a b'
    """
    return ' '.join(filter(None, WHITESPACES_AND_NEWLINES.split(text)))

def removing_characters(text: str, character_set: CharacterSet) -> str:
    """
    Drop every character whose first scalar belongs to a set.

    Example:
        >>> from unistr.patterns import DECIMAL_DIGITS
        >>> removing_characters('a1b2c3', DECIMAL_DIGITS)
        'abc'
    """
    return ''.join(c for c in clusters(text) if c[0] not in character_set)

def removing_accents_or_diacritics(text: str) -> str:
    """
    Strip accents and other combining marks.

    Applies canonical decomposition, removes combining marks and recomposes
    what remains. Text without marks comes back unchanged.

    Example:
        >>> removing_accents_or_diacritics('äöüÄÖÜ')
        'aouAOU'
        >>> removing_accents_or_diacritics('Crème Brûlée')
        'Creme Brulee'
    """
    decomposed = unicodedata.normalize('NFD', text)
    stripped = COMBINING_MARK_PATTERN.sub('', decomposed)
    return unicodedata.normalize('NFC', stripped)

def replace(text: str, target: str, replacement: str, case_sensitive: bool = True) -> str:
    """
    Replace every non-overlapping literal occurrence of `target`.

    Occurrences are matched on character boundaries, so a target never matches
    part of an accented letter or emoji sequence.

    Example:
        >>> replace('Hello hello', 'HELLO', 'bye', case_sensitive=False)
        'bye bye'
        >>> replace('e\\u0301 e', 'e', 'x') == 'e\\u0301 x'
        True
    """
    parts = clusters(text)
    pieces = []
    position = 0
    for match in ranges_of_occurrences(text, target, case_sensitive):
        pieces.extend(parts[position:match.lower])
        pieces.append(replacement)
        position = match.upper
    pieces.extend(parts[position:])
    return ''.join(pieces)

def truncate(text: str, length: int, trailing: Optional[str] = TRUNCATION_TRAILING) -> str:
    """
    Cut text to `length` characters and append a trailing marker.

    Args:
        text: Any string
        length: Number of characters to keep
        trailing: Appended only when text was cut; None appends nothing

    Returns:
        The text unchanged when `length` is at least the character count,
        the first `length` characters plus `trailing` when it is shorter,
        or an empty string for a negative `length`

    Example:
        >>> truncate('Hello World', 5)
        'Hello…'
        >>> truncate('Hello', 5)
        'Hello'
        >>> truncate('Hello', -1)
        ''
    """
    parts = clusters(text)
    if 0 <= length < len(parts):
        return ''.join(parts[:length]) + (trailing or '')
    elif length >= len(parts):
        return text
    else:
        return ''

## Case styles
def words(text: str) -> List[str]:
    """
    Split text into words on `_`, `-` and whitespace, dropping empty fragments.

    Example:
        >>> words('  hello_big-wide  world ')
        ['hello', 'big', 'wide', 'world']
    """
    return [word for word in WORD_SEPARATOR_PATTERN.split(text) if word]

def first_character_of_each_word(text: str) -> List[str]:
    """
    Return the first character of each whitespace-separated word.

    Example:
        >>> first_character_of_each_word('Portable Network Graphics')
        ['P', 'N', 'G']
    """
    return [clusters(word)[0] for word in WHITESPACES_AND_NEWLINES.split(text) if word]

def capitalized_first_character(text: str) -> str:
    """
    Upper-case the first character and leave the rest unchanged.

    Example:
        >>> capitalized_first_character('élan vital')
        'Élan vital'
        >>> capitalized_first_character('')
        ''
    """
    parts = clusters(text)
    if not parts:
        return text
    return parts[0].upper() + ''.join(parts[1:])

def decapitalized_first_character(text: str) -> str:
    """
    Lower-case the first character and leave the rest unchanged.

    Example:
        >>> decapitalized_first_character('HelloWorld')
        'helloWorld'
    """
    parts = clusters(text)
    if not parts:
        return text
    return parts[0].lower() + ''.join(parts[1:])

def _capitalize_word(word: str) -> str:
    # A word written entirely in capitals is title-cased; otherwise interior
    # capitals (e.g. existing camel humps) are kept.
    if word.isupper():
        return capitalized_first_character(word.lower())
    return capitalized_first_character(word)

def pascal_cased(text: str) -> str:
    """
    Join words with each word's first character upper-cased.

    Example:
        >>> pascal_cased('HELLO WORLD')
        'HelloWorld'
        >>> pascal_cased('hello_big-world')
        'HelloBigWorld'
        >>> pascal_cased('parse jsonData')
        'ParseJsonData'
    """
    return ''.join(map(_capitalize_word, words(text)))

def camel_cased(text: str) -> str:
    """
    Pascal case with the first character lower-cased.

    Example:
        >>> camel_cased('Hello World')
        'helloWorld'
    """
    return decapitalized_first_character(pascal_cased(text))

def snake_cased(text: str) -> str:
    """
    Join words with underscores, preserving their case.

    Example:
        >>> snake_cased('hello world')
        'hello_world'
        >>> snake_cased('Hello-World  again')
        'Hello_World_again'
    """
    return '_'.join(words(text))

def slug_cased(text: str) -> str:
    """
    Join words with hyphens and lower-case the result.

    Example:
        >>> slug_cased('Hello World')
        'hello-world'
        >>> slug_cased('  Hello__World  ')
        'hello-world'
    """
    return '-'.join(words(text)).lower()

def kebab_cased(text: str) -> str:
    """
    Slug case wrapped in leading and trailing hyphens.

    Example:
        >>> kebab_cased('Hello World')
        '-hello-world-'
    """
    return f'-{slug_cased(text)}-'

def swap_cased(text: str) -> str:
    """
    Swap upper and lower case character by character.

    Characters with no case pass through unchanged.

    Example:
        >>> swap_cased('Hello World 🇮🇹')
        'hELLO wORLD 🇮🇹'
    """
    def swap(cluster: str) -> str:
        if cluster.islower():
            return cluster.upper()
        elif cluster.isupper():
            return cluster.lower()
        return cluster

    return ''.join(map(swap, clusters(text)))
