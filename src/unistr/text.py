"""An immutable text value with grapheme-aware length, iteration and subscripts.

`Text` wraps a `str` and exposes the functions of `unistr.indexing`,
`unistr.transforms` and `unistr.conversions` as methods; version parsing is the
`semantic_version` property and segmentation is `clusters`. Subscripts follow the
lookup rules of `unistr.indexing` rather than Python's sequence rules:

    * `text[3]` returns the fourth character, or None when out of range
      (negative positions are out of range; they do not count from the end)
    * `text[1:4]` returns the characters in that span, or None when a bound
      is out of range
    * `text['needle']` returns the `TextRange` of the first occurrence, or None

`first_character` and `last_character` raise `IndexError` on empty text.
"""

__docformat__ = 'google'

__all__ = [
    'Text'
]

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, List, Optional, Tuple, Union
from unistr import conversions, indexing, transforms
from unistr.entities import CharacterSet, SemanticVersion, TextRange
from unistr.patterns import TRUNCATION_TRAILING, WHITESPACES_AND_NEWLINES

@dataclass(frozen=True)
class Text:
    """
    Immutable text measured in grapheme clusters.

    Example:
        >>> flags = Text('🇮🇹🇫🇷')
        >>> len(flags)
        2
        >>> flags[1]
        '🇫🇷'
        >>> flags[5] is None
        True
        >>> Text('Hello World').slug_cased()
        Text(value='hello-world')
    """
    value: str

    @cached_property
    def clusters(self) -> Tuple[str, ...]:
        return tuple(indexing.clusters(self.value))

    @property
    def length(self) -> int:
        return len(self.clusters)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[str]:
        return iter(self.clusters)

    def __contains__(self, needle: str) -> bool:
        return indexing.contains(self.value, str(needle))

    def __add__(self, other: Union['Text', str]) -> 'Text':
        return Text(self.value + str(other))

    def __getitem__(self, key: Union[int, slice, str, TextRange, range]):
        if isinstance(key, str):
            return indexing.range_of_first_occurrence(self.value, key)
        elif isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError(f'Text slices do not support a step, got {key.step}')
            lower = 0 if key.start is None else key.start
            upper = self.length if key.stop is None else key.stop
            if lower > upper:
                return None
            return indexing.substring(self.value, TextRange(lower, upper))
        elif isinstance(key, (TextRange, range, tuple)):
            return indexing.substring(self.value, key)
        elif isinstance(key, int):
            return indexing.character_at(self.value, key)
        else:
            raise TypeError(f'Text indices must be integers, slices, ranges or strings, not {type(key).__name__}')

    # Indexing & extraction
    @property
    def first_character(self) -> str:
        return indexing.first_character(self.value)

    @property
    def last_character(self) -> str:
        return indexing.last_character(self.value)

    def character_at(self, position: int) -> Optional[str]:
        return indexing.character_at(self.value, position)

    def prefix(self, max_length: int) -> 'Text':
        return Text(indexing.prefix(self.value, max_length))

    def suffix(self, max_length: int) -> 'Text':
        return Text(indexing.suffix(self.value, max_length))

    def substring(self, text_range) -> Optional['Text']:
        result = indexing.substring(self.value, text_range)
        return None if result is None else Text(result)

    def range_of_first_occurrence(self, needle: str, case_sensitive: bool = True) -> Optional[TextRange]:
        return indexing.range_of_first_occurrence(self.value, needle, case_sensitive)

    def starts_with(self, prefix: str, case_sensitive: bool = True) -> bool:
        return indexing.starts_with(self.value, prefix, case_sensitive)

    def ends_with(self, suffix: str, case_sensitive: bool = True) -> bool:
        return indexing.ends_with(self.value, suffix, case_sensitive)

    def contains(self, needle: str, case_sensitive: bool = True) -> bool:
        return indexing.contains(self.value, needle, case_sensitive)

    def ranges_of_occurrences(self, needle: str, case_sensitive: bool = True) -> List[TextRange]:
        return indexing.ranges_of_occurrences(self.value, needle, case_sensitive)

    def contains_characters(self, character_set: CharacterSet) -> bool:
        return indexing.contains_characters(self.value, character_set)

    def removing_prefix(self, prefix: Union[int, str] = 1, case_sensitive: bool = True) -> 'Text':
        return Text(indexing.removing_prefix(self.value, prefix, case_sensitive))

    def removing_suffix(self, suffix: Union[int, str] = 1, case_sensitive: bool = True) -> 'Text':
        return Text(indexing.removing_suffix(self.value, suffix, case_sensitive))

    def replacing_characters(self, text_range, replacement: str) -> 'Text':
        return Text(indexing.replacing_characters(self.value, text_range, str(replacement)))

    def reversed(self) -> 'Text':
        return Text(indexing.reversed_text(self.value))

    # Transformation
    def trimmed(self, character_set: CharacterSet = WHITESPACES_AND_NEWLINES) -> 'Text':
        return Text(transforms.trimmed(self.value, character_set))

    def trimmed_left(self, character_set: CharacterSet = WHITESPACES_AND_NEWLINES) -> 'Text':
        return Text(transforms.trimmed_left(self.value, character_set))

    def trimmed_right(self, character_set: CharacterSet = WHITESPACES_AND_NEWLINES) -> 'Text':
        return Text(transforms.trimmed_right(self.value, character_set))

    def condensing_excessive_spaces(self) -> 'Text':
        return Text(transforms.condensing_excessive_spaces(self.value))

    def condensing_excessive_spaces_and_newlines(self) -> 'Text':
        return Text(transforms.condensing_excessive_spaces_and_newlines(self.value))

    def removing_accents_or_diacritics(self) -> 'Text':
        return Text(transforms.removing_accents_or_diacritics(self.value))

    def removing_characters(self, character_set: CharacterSet) -> 'Text':
        return Text(transforms.removing_characters(self.value, character_set))

    def replace(self, target: str, replacement: str, case_sensitive: bool = True) -> 'Text':
        return Text(transforms.replace(self.value, target, str(replacement), case_sensitive))

    def truncate(self, length: int, trailing: Optional[str] = TRUNCATION_TRAILING) -> 'Text':
        return Text(transforms.truncate(self.value, length, trailing))

    def words(self) -> List[str]:
        return transforms.words(self.value)

    def first_character_of_each_word(self) -> List[str]:
        return transforms.first_character_of_each_word(self.value)

    def pascal_cased(self) -> 'Text':
        return Text(transforms.pascal_cased(self.value))

    def camel_cased(self) -> 'Text':
        return Text(transforms.camel_cased(self.value))

    def snake_cased(self) -> 'Text':
        return Text(transforms.snake_cased(self.value))

    def slug_cased(self) -> 'Text':
        return Text(transforms.slug_cased(self.value))

    def kebab_cased(self) -> 'Text':
        return Text(transforms.kebab_cased(self.value))

    def swap_cased(self) -> 'Text':
        return Text(transforms.swap_cased(self.value))

    def capitalized_first_character(self) -> 'Text':
        return Text(transforms.capitalized_first_character(self.value))

    def decapitalized_first_character(self) -> 'Text':
        return Text(transforms.decapitalized_first_character(self.value))

    # Conversions
    @cached_property
    def semantic_version(self) -> SemanticVersion:
        """
        Parsed `MAJOR.MINOR.PATCH` version.

        Raises:
            SemanticVersionError: If the text is not a valid version.
        """
        return conversions.parse_semantic_version(self.value)

    def to_bool(self) -> Optional[bool]:
        return conversions.to_bool(self.value)

    def to_int(self) -> Optional[int]:
        return conversions.to_int(self.value)

    def to_float(self) -> Optional[float]:
        return conversions.to_float(self.value)

    def to_base64_encoded(self) -> 'Text':
        return Text(conversions.to_base64_encoded(self.value))

    def to_base64_decoded(self) -> Optional['Text']:
        result = conversions.to_base64_decoded(self.value)
        return None if result is None else Text(result)

    def url_escaped(self) -> 'Text':
        return Text(conversions.url_escaped(self.value))
