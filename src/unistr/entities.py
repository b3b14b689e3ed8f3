"""Value types shared by the indexing, transformation and conversion modules.
"""

__docformat__ = 'google'

__all__ = [
    'TextRange',
    'SemanticVersion',
    'CharacterSet'
]

import regex
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

@dataclass(frozen=True)
class TextRange:
    """
    A half-open span `[lower, upper)` of grapheme cluster positions.

    Args:
        lower: Position of the first cluster in the span
        upper: Position one past the last cluster in the span

    Raises:
        ValueError: If `lower` is greater than `upper`.

    Bounds are not checked against any particular text here; functions in
    `unistr.indexing` decide what an out-of-range span means for them.

    Example:
        >>> TextRange(1, 4).length
        3
        >>> TextRange.from_bounds(range(0, 2))
        TextRange(lower=0, upper=2)
    """
    lower: int
    upper: int

    def __post_init__(self):
        if self.lower > self.upper:
            raise ValueError(f'Range lower bound {self.lower} is greater than upper bound {self.upper}')

    @property
    def length(self) -> int:
        return self.upper - self.lower

    def __len__(self) -> int:
        return self.length

    def __contains__(self, position: int) -> bool:
        return self.lower <= position < self.upper

    def to_slice(self) -> slice:
        return slice(self.lower, self.upper)

    @classmethod
    def from_bounds(cls, bounds: Union['TextRange', range, tuple]) -> 'TextRange':
        """
        Build a `TextRange` from another range-like value.

        Accepts an existing `TextRange`, a `(lower, upper)` tuple, or a
        `range` with a step of 1.

        Raises:
            ValueError: If a `range` has a step other than 1.
            TypeError: If the value is not range-like.
        """
        if isinstance(bounds, cls):
            return bounds
        elif isinstance(bounds, range):
            if bounds.step != 1:
                raise ValueError(f'Only contiguous ranges are supported, got step {bounds.step}')
            return cls(bounds.start, bounds.stop)
        elif isinstance(bounds, tuple) and len(bounds) == 2:
            return cls(*bounds)
        else:
            raise TypeError(f'Cannot interpret {bounds!r} as a text range')

@dataclass(frozen=True, order=True)
class SemanticVersion:
    """
    A `major.minor.patch` triple of non-negative integers.

    Instances compare and unpack like tuples.

    Example:
        >>> major, minor, patch = SemanticVersion(1, 2, 0)
        >>> str(SemanticVersion(1, 2, 0))
        '1.2.0'
        >>> SemanticVersion(1, 2, 0) == (1, 2, 0)
        True
    """
    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self):
        for name in ('major', 'minor', 'patch'):
            if getattr(self, name) < 0:
                raise ValueError(f'Semantic version {name} component must be non-negative')

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __eq__(self, other) -> bool:
        if isinstance(other, tuple):
            return self.as_tuple() == other
        if isinstance(other, SemanticVersion):
            return self.as_tuple() == other.as_tuple()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}.{self.patch}'

    def as_tuple(self) -> tuple:
        return (self.major, self.minor, self.patch)

@dataclass(frozen=True)
class CharacterSet:
    """
    A predicate over single Unicode scalar values.

    Args:
        pattern: Uncompiled `regex` expression that matches exactly one scalar
            belonging to the set (e.g. `[\\t\\p{Zs}]`).

    Sets are immutable; `inverted` and `|` return new sets. Named sets are
    defined in `unistr.patterns`.

    Example:
        >>> digits = CharacterSet(r'[0-9]')
        >>> '7' in digits
        True
        >>> 'x' in digits.inverted()
        True
    """
    pattern: str
    _compiled: regex.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, '_compiled', regex.compile(self.pattern))

    def __contains__(self, scalar: str) -> bool:
        return len(scalar) == 1 and self._compiled.fullmatch(scalar) is not None

    def __or__(self, other: 'CharacterSet') -> 'CharacterSet':
        return CharacterSet(f'(?:{self.pattern}|{other.pattern})')

    def inverted(self) -> 'CharacterSet':
        return CharacterSet(f'(?s:(?!{self.pattern}).)')

    def contains_all(self, text: str) -> bool:
        """True if every scalar of a non-empty `text` belongs to the set."""
        return len(text) > 0 and all(scalar in self for scalar in text)

    def split(self, text: str) -> list:
        """Split `text` on runs of scalars in the set; fragments may be empty."""
        return regex.split(f'(?:{self.pattern})+', text)

    @classmethod
    def from_characters(cls, characters: Iterable[str]) -> 'CharacterSet':
        """Set containing exactly the given scalars."""
        scalars = sorted(set(''.join(characters)))
        if not scalars:
            return cls('(?!)')
        return cls(f"(?:{'|'.join(map(regex.escape, scalars))})")
