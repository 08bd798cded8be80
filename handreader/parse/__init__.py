"""
Replayer hand history parsing module.
Turns "Stage #" export text into typed Hand records.
"""

from .schemas import (
    Action, ActionType, Amount, Card, Game, GameType, Hand, Rank, Seat, Suit
)
from .errors import FormatError, HandParseError
from .utils import format_amount, parse_amount
from .cards import format_card, parse_card
from .games import classify_game
from .patterns import LINE_PATTERNS, LineMatch, classify_line, match_line
from .accumulator import HandAccumulator, accumulate
from .hand_splitter import HandBlock, build_hand, split_hand_blocks, split_hand_blocks_with_tail
from .runner import ParserRunner, parse_file, parse_text

__all__ = [
    'Action',
    'ActionType',
    'Amount',
    'Card',
    'Game',
    'GameType',
    'Hand',
    'Rank',
    'Seat',
    'Suit',
    'FormatError',
    'HandParseError',
    'parse_amount',
    'format_amount',
    'parse_card',
    'format_card',
    'classify_game',
    'LINE_PATTERNS',
    'LineMatch',
    'classify_line',
    'match_line',
    'HandAccumulator',
    'accumulate',
    'HandBlock',
    'build_hand',
    'split_hand_blocks',
    'split_hand_blocks_with_tail',
    'ParserRunner',
    'parse_file',
    'parse_text'
]
