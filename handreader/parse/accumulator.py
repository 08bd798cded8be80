"""
Hand accumulator: folds classified lines into Hand records.

The accumulator owns a single in-progress hand. Each line is classified and
applied to it; a blank line seen after at least one seat closes the hand.
Blank lines before the first seat (leading noise, a gap after the header)
leave the buffer open.
"""

import logging
from typing import Iterable, List

from .errors import FormatError, HandParseError
from .patterns import classify_line
from .schemas import Hand

logger = logging.getLogger(__name__)


class HandAccumulator:
    """Single-pass state machine turning lines into finalized hands."""

    def __init__(self):
        self.hands: List[Hand] = []
        self.current = Hand()

    def is_hand_boundary(self, line: str) -> bool:
        """A whitespace-only line closes the current hand once it has a seat."""
        return not line.strip() and len(self.current.seats) > 0

    def feed(self, line_number: int, line: str) -> None:
        """
        Apply one line to the in-progress hand.

        Args:
            line_number: 1-based position of the line in the input
            line: Raw line text without its newline

        Raises:
            HandParseError: if a matched line carries a malformed amount or card
        """
        try:
            match = classify_line(line)
        except FormatError as e:
            raise HandParseError(
                line_number=line_number,
                line=line,
                pattern=e.pattern or 'unknown',
                reason=str(e),
                hands=list(self.hands)
            ) from e

        if match is not None:
            match.apply(self.current)
            self.current.raw_offsets.setdefault('hand_start', line_number)
            self.current.raw_offsets['hand_end'] = line_number

        if self.is_hand_boundary(line):
            self.finalize()

    def finalize(self) -> Hand:
        """Move the in-progress hand to the output and start a fresh one."""
        hand = self.current
        self.hands.append(hand)
        self.current = Hand()
        logger.debug(
            f"Finalized hand {hand.stage_id} with {len(hand.seats)} seats "
            f"and {len(hand.actions)} actions"
        )
        return hand

    def finish(self) -> List[Hand]:
        """Flush a hand that has seats at end of input and return all hands."""
        if self.current.seats:
            self.finalize()
        return self.hands

    def consume(self, lines: Iterable[str], first_line_number: int = 1) -> List[Hand]:
        """Feed every line, then finish."""
        for line_number, line in enumerate(lines, first_line_number):
            self.feed(line_number, line)
        return self.finish()


def accumulate(lines: Iterable[str], first_line_number: int = 1) -> List[Hand]:
    """Run a fresh accumulator over lines and return the finalized hands."""
    return HandAccumulator().consume(lines, first_line_number)
