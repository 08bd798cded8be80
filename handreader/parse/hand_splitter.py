"""
Hand splitter module - splits replayer text into per-hand line groups.

Splitting is strictly sequential because a blank line only closes a hand
once a seat has been declared. Only pattern matching happens here; typed
fields are extracted later by build_hand, which has no cross-hand state and
can run on each block independently.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .accumulator import HandAccumulator
from .errors import HandParseError
from .patterns import match_line
from .schemas import Hand

logger = logging.getLogger(__name__)


class HandBlock(NamedTuple):
    first_line_number: int               # 1-based number of lines[0]
    lines: List[str]


def is_seat_line(line: str) -> bool:
    """True when the seat pattern is the winning pattern for the line."""
    found = match_line(line)
    return found is not None and found[0].name == 'seat'


def split_hand_blocks_with_tail(lines: Iterable[str]) -> Tuple[List[HandBlock], Optional[HandBlock]]:
    """
    Split lines into one block per hand, keeping the trailing lines.

    Uses the same boundary rule as HandAccumulator: a whitespace-only line
    after at least one seat line ends the block. Lines after the last block
    that never reached a seat are returned as the tail (None when there are
    none) so their tokens can still be checked.
    """
    blocks: List[HandBlock] = []
    current: List[str] = []
    start = 1
    has_seat = False

    for line_number, line in enumerate(lines, 1):
        if not current:
            start = line_number
        current.append(line)

        if is_seat_line(line):
            has_seat = True
        elif has_seat and not line.strip():
            blocks.append(HandBlock(start, current))
            current = []
            has_seat = False

    # Don't forget the last hand
    tail = None
    if has_seat:
        blocks.append(HandBlock(start, current))
    elif current:
        tail = HandBlock(start, current)

    logger.info(f"Split content into {len(blocks)} hand blocks")
    return blocks, tail


def split_hand_blocks(lines: Iterable[str]) -> List[HandBlock]:
    """Split lines into one block per hand; trailing lines without a seat are dropped."""
    blocks, _ = split_hand_blocks_with_tail(lines)
    return blocks


def build_hand(block: HandBlock) -> Hand:
    """
    Fold one block into its Hand.

    Raises:
        HandParseError: if a line in the block carries a malformed token
    """
    hands = HandAccumulator().consume(block.lines, block.first_line_number)
    if len(hands) != 1:
        raise HandParseError(
            line_number=block.first_line_number,
            line=block.lines[0] if block.lines else '',
            pattern='seat',
            reason=f"block produced {len(hands)} hands"
        )
    return hands[0]
