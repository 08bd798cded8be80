"""
handreader - parses replayer-format poker hand histories into typed hands.
"""

from .parse import (
    FormatError, Hand, HandParseError, ParserRunner, parse_file, parse_text
)

__version__ = "0.1.0"

__all__ = [
    'FormatError',
    'Hand',
    'HandParseError',
    'ParserRunner',
    'parse_file',
    'parse_text'
]
