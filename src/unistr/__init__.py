"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import entities
from . import patterns
from . import indexing
from . import transforms
from . import conversions
from . import text
from .entities import CharacterSet, SemanticVersion, TextRange
from .conversions import SemanticVersionError
from .text import Text

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'entities',
    'patterns',
    'indexing',
    'transforms',
    'conversions',
    'text',
    'CharacterSet',
    'SemanticVersion',
    'SemanticVersionError',
    'Text',
    'TextRange'
]
