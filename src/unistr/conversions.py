"""Parsing and coercion of human-readable text into values.

Coercions (`to_bool`, `to_int`, `to_float`, `to_base64_decoded`) return None
for text they cannot interpret. Semantic version parsing is stricter: malformed
versions raise `SemanticVersionError`.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'SemanticVersionError',

    # Functions
    'ensure_semantic_version_correctness',
    'parse_semantic_version',
    'to_bool',
    'to_int',
    'to_float',
    'to_base64_encoded',
    'to_base64_decoded',
    'url_escaped'
]

import base64
import logging
from itertools import filterfalse
from typing import Optional
from urllib.parse import quote
from unistr.entities import SemanticVersion
from unistr.transforms import trimmed
from unistr.patterns import (
    BOOLEANS,
    VERSION_SEPARATOR,
    VERSION_COMPONENTS,
    VERSION_PLACEHOLDER,
    VERSION_COMPONENT_PATTERN,
    INTEGER_PATTERN,
    URL_QUERY_SAFE
)

logger = logging.getLogger(__name__)

class SemanticVersionError(ValueError):
    """Raised when text is not a `MAJOR[.MINOR[.PATCH]]` version."""

## Semantic versions
def ensure_semantic_version_correctness(text: str) -> str:
    """
    Normalize a version string to the `MAJOR.MINOR.PATCH` form.

    Missing trailing components are padded with `0`. Empty text is treated as
    version `0.0.0`.

    Args:
        text: Dot-separated version with one to three components

    Returns:
        Version string with exactly three components

    Raises:
        SemanticVersionError: If there are more than three components, or a
            component is empty or contains anything other than ASCII digits.

    Example:
        >>> ensure_semantic_version_correctness('1.2')
        '1.2.0'
        >>> ensure_semantic_version_correctness('')
        '0.0.0'
    """
    if not text:
        return VERSION_SEPARATOR.join([VERSION_PLACEHOLDER] * VERSION_COMPONENTS)

    components = text.split(VERSION_SEPARATOR)

    if not 1 <= len(components) <= VERSION_COMPONENTS:
        logger.debug("Rejected version %r with %d components", text, len(components))
        raise SemanticVersionError(
            f'Invalid number of semantic version components ({len(components)}): {text!r}'
        )

    invalid = list(filterfalse(VERSION_COMPONENT_PATTERN.fullmatch, components))
    if invalid:
        logger.debug("Rejected version %r with non-numeric components %r", text, invalid)
        raise SemanticVersionError(
            f'Each semantic version component should have a numeric value: {text!r}'
        )

    components.extend([VERSION_PLACEHOLDER] * (VERSION_COMPONENTS - len(components)))
    return VERSION_SEPARATOR.join(components)

def parse_semantic_version(text: str) -> SemanticVersion:
    """
    Parse a version string into a `SemanticVersion`.

    Raises:
        SemanticVersionError: If `text` is not a valid version (see
            `ensure_semantic_version_correctness`), or a component has
            more digits than the interpreter converts to an integer.

    Example:
        >>> parse_semantic_version('1.2.3')
        SemanticVersion(major=1, minor=2, patch=3)
        >>> parse_semantic_version('1') == (1, 0, 0)
        True
    """
    components = ensure_semantic_version_correctness(text).split(VERSION_SEPARATOR)
    try:
        return SemanticVersion(*map(int, components))
    except ValueError as e:
        logger.debug("Rejected version with an unconvertible component: %s", e)
        raise SemanticVersionError(
            f'Semantic version component is too large to convert ({len(text)} characters)'
        ) from e

## Coercion
def to_bool(text: str) -> Optional[bool]:
    """
    Interpret text as a boolean.

    Surrounding whitespace and case are ignored. Recognized tokens are listed in
    the packaged boolean table (`1`, `true`, `t`, `yes`, `y`, thumbs up and
    their negative counterparts).

    Example:
        >>> to_bool(' YES ')
        True
        >>> to_bool('👎🏽')
        False
        >>> to_bool('maybe') is None
        True
    """
    token = trimmed(text).lower()
    value = BOOLEANS.token_to_value.get(token)
    if value is None:
        logger.debug("Unrecognized boolean token %r", text)
    return value

def to_int(text: str) -> Optional[int]:
    """
    Interpret text as a signed decimal integer.

    Whitespace, underscores and non-ASCII digits are rejected, as are digit
    strings longer than the interpreter's integer conversion limit.

    Example:
        >>> to_int('-42')
        -42
        >>> to_int(' 42') is None
        True
    """
    if INTEGER_PATTERN.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError as e:
        logger.debug("Could not convert integer text of %d characters: %s", len(text), e)
        return None

def to_float(text: str) -> Optional[float]:
    """
    Interpret text as a floating point number.

    Accepts decimal and exponent notation as well as `inf` and `nan`.
    Surrounding whitespace and underscores are rejected.

    Example:
        >>> to_float('1.5e3')
        1500.0
        >>> to_float('1_000') is None
        True
    """
    if text != text.strip() or '_' in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None

def to_base64_encoded(text: str) -> str:
    """
    Encode text as UTF-8 and then base64.

    Example:
        >>> to_base64_encoded('Hello 🌍')
        'SGVsbG8g8J+MjQ=='
    """
    return base64.b64encode(text.encode('utf-8')).decode('ascii')

def to_base64_decoded(text: str) -> Optional[str]:
    """
    Decode base64 text holding UTF-8 data.

    Returns:
        The decoded string, or None if `text` is not valid base64 or the
        payload is not UTF-8

    Example:
        >>> to_base64_decoded('SGVsbG8g8J+MjQ==')
        'Hello 🌍'
        >>> to_base64_decoded('not base64!') is None
        True
    """
    try:
        return base64.b64decode(text, validate=True).decode('utf-8')
    except ValueError as e:
        logger.debug("Could not decode base64 text %r: %s", text, e)
        return None

def url_escaped(text: str) -> str:
    """
    Percent-encode text for use as a URL query key or value.

    Example:
        >>> url_escaped('a b/ç')
        'a%20b/%C3%A7'
    """
    return quote(text, safe=URL_QUERY_SAFE)
