"""Grapheme-aware indexing and extraction.

Every position in this module counts extended grapheme clusters: what a reader
perceives as one character, such as a flag emoji or a letter followed by
combining accents. Python's own `len` and slicing count code points instead,
which splits such characters apart.

Lookups that receive an out-of-range position or range return `None` (or an
empty string where documented). `first_character` and `last_character` are
the exception: calling them on empty text is a programming error and raises
`IndexError`.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'clusters',
    'character_count',
    'first_character',
    'last_character',
    'character_at',
    'prefix',
    'suffix',
    'substring',
    'range_of_first_occurrence',
    'ranges_of_occurrences',
    'starts_with',
    'ends_with',
    'contains',
    'contains_characters',
    'removing_prefix',
    'removing_suffix',
    'replacing_characters',
    'reversed_text'
]

from bisect import bisect_left
from itertools import accumulate
from typing import Iterator, List, Optional, Sequence, Union
from unistr.entities import CharacterSet, TextRange
from unistr.patterns import GRAPHEME_PATTERN

RangeLike = Union[TextRange, range, tuple]

def clusters(text: str) -> List[str]:
    """
    Split text into extended grapheme clusters.

    Args:
        text: Any string

    Returns:
        List of clusters in order; joining them reproduces `text`

    Example:
        >>> clusters('e\\u0301te\\u0301') == ['e\\u0301', 't', 'e\\u0301']
        True
        >>> clusters('🇮🇹!')
        ['🇮🇹', '!']
    """
    return GRAPHEME_PATTERN.findall(text)

def character_count(text: str) -> int:
    """
    Count the user-perceived characters in text.

    Example:
        >>> character_count('🇮🇹🇮🇹')
        2
        >>> len('🇮🇹🇮🇹')
        4
    """
    return len(clusters(text))

def first_character(text: str) -> str:
    """
    Return the first character of text.

    Raises:
        IndexError: If `text` is empty. Check for emptiness before calling.

    Example:
        >>> first_character('🇮🇹 flag')
        '🇮🇹'
    """
    match = GRAPHEME_PATTERN.match(text)
    if match is None:
        raise IndexError('first_character() called on empty text')
    return match.group()

def last_character(text: str) -> str:
    """
    Return the last character of text.

    Raises:
        IndexError: If `text` is empty. Check for emptiness before calling.

    Example:
        >>> last_character('flag 🇮🇹')
        '🇮🇹'
    """
    parts = clusters(text)
    if not parts:
        raise IndexError('last_character() called on empty text')
    return parts[-1]

def character_at(text: str, position: int) -> Optional[str]:
    """
    Return the character at a position, or None if the position is out of range.

    Negative positions are out of range; they do not count from the end.

    Example:
        >>> character_at('héllo', 1)
        'é'
        >>> character_at('héllo', 5) is None
        True
        >>> character_at('héllo', -1) is None
        True
    """
    parts = clusters(text)
    if 0 <= position < len(parts):
        return parts[position]
    return None

def prefix(text: str, max_length: int) -> str:
    """
    Return up to `max_length` leading characters.

    Returns the whole text when `max_length` exceeds its length, and an empty
    string when `max_length` is zero or negative.

    Example:
        >>> prefix('🇮🇹🇫🇷🇩🇪', 2)
        '🇮🇹🇫🇷'
        >>> prefix('abc', -1)
        ''
    """
    if max_length <= 0:
        return ''
    return ''.join(clusters(text)[:max_length])

def suffix(text: str, max_length: int) -> str:
    """
    Return up to `max_length` trailing characters.

    Example:
        >>> suffix('🇮🇹🇫🇷🇩🇪', 2)
        '🇫🇷🇩🇪'
        >>> suffix('abc', 0)
        ''
    """
    if max_length <= 0:
        return ''
    return ''.join(clusters(text)[-max_length:])

def _in_bounds(text_range: TextRange, length: int) -> bool:
    return 0 <= text_range.lower <= length and 0 <= text_range.upper <= length

def substring(text: str, text_range: RangeLike) -> Optional[str]:
    """
    Return the characters in a half-open range.

    Args:
        text: Any string
        text_range: `TextRange`, `(lower, upper)` tuple or step-1 `range`.
            An upper bound equal to the character count means "through the end".

    Returns:
        The substring, or None if either bound lies outside `[0, length]`

    Example:
        >>> substring('héllo', (1, 3))
        'él'
        >>> substring('héllo', range(0, 5))
        'héllo'
        >>> substring('héllo', (2, 6)) is None
        True
    """
    text_range = TextRange.from_bounds(text_range)
    parts = clusters(text)
    if not _in_bounds(text_range, len(parts)):
        return None
    return ''.join(parts[text_range.to_slice()])

def _iter_matches(parts: Sequence[str], needle: str, case_sensitive: bool,
                  overlapping: bool = False) -> Iterator[TextRange]:
    """
    Yield ranges of `needle` in cluster coordinates, in order of position.

    Matching runs on a (optionally case-folded) copy of the text. Case folding
    can change how many code points a cluster occupies, so positions are mapped
    back through the folded offset of each cluster boundary. Matches that
    begin or end inside a cluster are skipped.
    """
    if not needle:
        return

    fold = (lambda s: s) if case_sensitive else str.casefold
    folded_parts = [fold(part) for part in parts]
    boundaries = list(accumulate(map(len, folded_parts), initial=0))
    haystack = ''.join(folded_parts)
    target = fold(needle)

    start = haystack.find(target)
    while start != -1:
        end = start + len(target)
        lower = bisect_left(boundaries, start)
        upper = bisect_left(boundaries, end)
        aligned = (
            lower < len(boundaries) and boundaries[lower] == start
            and upper < len(boundaries) and boundaries[upper] == end
        )
        if aligned:
            yield TextRange(lower, upper)
            start = haystack.find(target, start + 1 if overlapping else end)
        else:
            start = haystack.find(target, start + 1)

def range_of_first_occurrence(text: str, needle: str, case_sensitive: bool = True) -> Optional[TextRange]:
    """
    Find the first literal occurrence of `needle`.

    Args:
        text: Text to search
        needle: Literal string to look for
        case_sensitive: False to compare case-folded text

    Returns:
        `TextRange` in the character coordinates of the original `text`, or
        None if `needle` is empty or not found

    Example:
        >>> range_of_first_occurrence('ABCdef', 'abc', case_sensitive=False)
        TextRange(lower=0, upper=3)
        >>> range_of_first_occurrence('Straße', 'SS', case_sensitive=False)
        TextRange(lower=4, upper=5)
        >>> range_of_first_occurrence('ABCdef', 'abc') is None
        True
    """
    return next(_iter_matches(clusters(text), needle, case_sensitive), None)

def ranges_of_occurrences(text: str, needle: str, case_sensitive: bool = True) -> List[TextRange]:
    """
    Find all non-overlapping literal occurrences of `needle`, left to right.

    Example:
        >>> ranges_of_occurrences('ababa', 'aba')
        [TextRange(lower=0, upper=3)]
    """
    return list(_iter_matches(clusters(text), needle, case_sensitive))

def _prefix_range(parts: Sequence[str], needle: str, case_sensitive: bool) -> Optional[TextRange]:
    first_match = next(_iter_matches(parts, needle, case_sensitive), None)
    if first_match is not None and first_match.lower == 0:
        return first_match
    return None

def _suffix_range(parts: Sequence[str], needle: str, case_sensitive: bool) -> Optional[TextRange]:
    matches = _iter_matches(parts, needle, case_sensitive, overlapping=True)
    return next((m for m in matches if m.upper == len(parts)), None)

def starts_with(text: str, prefix: str, case_sensitive: bool = True) -> bool:
    """
    Check if text begins with a literal prefix on a character boundary.

    An empty prefix always matches.

    Example:
        >>> starts_with('Hello', 'hE', case_sensitive=False)
        True
        >>> starts_with('e\\u0301clair', 'e')
        False
    """
    if not prefix:
        return True
    return _prefix_range(clusters(text), prefix, case_sensitive) is not None

def ends_with(text: str, suffix: str, case_sensitive: bool = True) -> bool:
    """
    Check if text ends with a literal suffix on a character boundary.

    Example:
        >>> ends_with('Hello', 'LO', case_sensitive=False)
        True
    """
    if not suffix:
        return True
    return _suffix_range(clusters(text), suffix, case_sensitive) is not None

def contains(text: str, needle: str, case_sensitive: bool = True) -> bool:
    """
    Check if text contains a literal string.

    Example:
        >>> contains('Hello World', 'WORLD', case_sensitive=False)
        True
    """
    if not needle:
        return True
    return range_of_first_occurrence(text, needle, case_sensitive) is not None

def contains_characters(text: str, character_set: CharacterSet) -> bool:
    """
    Check if every scalar in text belongs to a character set.

    Returns False for empty text.

    Example:
        >>> from unistr.patterns import DECIMAL_DIGITS
        >>> contains_characters('2024', DECIMAL_DIGITS)
        True
        >>> contains_characters('', DECIMAL_DIGITS)
        False
    """
    return character_set.contains_all(text)

def removing_prefix(text: str, prefix: Union[int, str] = 1, case_sensitive: bool = True) -> str:
    """
    Remove leading characters by count or by literal prefix.

    Args:
        text: Any string
        prefix: Either the number of leading characters to drop, or a literal
            prefix that is dropped only if `text` begins with it
        case_sensitive: Comparison mode for the literal form

    Returns:
        Text without the prefix. A count outside `[0, length]` returns an
        empty string; a literal prefix that does not match returns `text`
        unchanged.

    Example:
        >>> removing_prefix('hello')
        'ello'
        >>> removing_prefix('hello', 'hel')
        'lo'
        >>> removing_prefix('hello', 'HEL', case_sensitive=False)
        'lo'
        >>> removing_prefix('hello', 'xyz')
        'hello'
    """
    parts = clusters(text)
    if isinstance(prefix, str):
        match = _prefix_range(parts, prefix, case_sensitive)
        if match is None:
            return text
        return ''.join(parts[match.upper:])

    if not 0 <= prefix <= len(parts):
        return ''
    return ''.join(parts[prefix:])

def removing_suffix(text: str, suffix: Union[int, str] = 1, case_sensitive: bool = True) -> str:
    """
    Remove trailing characters by count or by literal suffix.

    Mirror of `removing_prefix`.

    Example:
        >>> removing_suffix('hello')
        'hell'
        >>> removing_suffix('hello', 'llo')
        'he'
        >>> removing_suffix('hello', 7)
        ''
    """
    parts = clusters(text)
    if isinstance(suffix, str):
        match = _suffix_range(parts, suffix, case_sensitive)
        if match is None:
            return text
        return ''.join(parts[:match.lower])

    if not 0 <= suffix <= len(parts):
        return ''
    return ''.join(parts[:len(parts) - suffix])

def replacing_characters(text: str, text_range: RangeLike, replacement: str) -> str:
    """
    Replace the characters in a range with another string.

    Raises:
        IndexError: If the range does not lie within `[0, length]`.

    Example:
        >>> replacing_characters('héllo', (1, 3), 'EE')
        'hEElo'
        >>> replacing_characters('hello', (5, 5), '!')
        'hello!'
    """
    text_range = TextRange.from_bounds(text_range)
    parts = clusters(text)
    if not _in_bounds(text_range, len(parts)):
        raise IndexError(f'{text_range} is out of bounds for text of length {len(parts)}')
    return ''.join(parts[:text_range.lower]) + replacement + ''.join(parts[text_range.upper:])

def reversed_text(text: str) -> str:
    """
    Reverse text character by character, keeping each character intact.

    Example:
        >>> reversed_text('ae\\u0301🇮🇹') == '🇮🇹e\\u0301a'
        True
    """
    return ''.join(reversed(clusters(text)))
