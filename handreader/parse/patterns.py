"""
Line classifier for the "Stage #" replayer export format.

Every line is tried against LINE_PATTERNS in order and the first pattern
that matches wins. Patterns are searched anywhere in the line, so a leading
byte-order mark or indentation does not hide a header or marker. Lines that
match nothing (pot summaries, table totals, dealer chatter) carry no modeled
information and are skipped.
"""

import re
import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Tuple, Union

from .cards import parse_card
from .errors import FormatError
from .games import classify_game
from .schemas import (
    Action, Amount, Bet, Call, Check, Collect, Flop, Fold, Game, Hand, Muck,
    Post, PreFlop, Raise, River, Seat, SEAT_MAX, Show, Turn
)
from .utils import parse_amount

logger = logging.getLogger(__name__)


class HeaderUpdate(NamedTuple):
    game: Game
    stake: Amount
    stage_id: int


class SeatAdded(NamedTuple):
    seat: Seat


class ActionAppended(NamedTuple):
    action: Action


Effect = Union[HeaderUpdate, SeatAdded, ActionAppended]


@dataclass(frozen=True)
class LineMatch:
    """Outcome of classifying one line: which pattern won and what it does."""
    pattern: str
    effect: Effect

    def apply(self, hand: Hand) -> None:
        """Mutate the in-progress hand with this line's effect."""
        effect = self.effect
        if isinstance(effect, HeaderUpdate):
            hand.game = effect.game
            hand.stake = effect.stake
            hand.stage_id = effect.stage_id
        elif isinstance(effect, SeatAdded):
            hand.seats.append(effect.seat)
        else:
            hand.actions.append(effect.action)


class LinePattern(NamedTuple):
    name: str
    regex: "re.Pattern[str]"
    build: Callable[["re.Match[str]"], Effect]


def _header(m: "re.Match[str]") -> Effect:
    return HeaderUpdate(
        game=classify_game(m.group('game')),
        stake=parse_amount(m.group('stake')),
        stage_id=int(m.group('stage_id'))
    )


def _seat(m: "re.Match[str]") -> Effect:
    number = int(m.group('number'))
    if number > SEAT_MAX:
        raise FormatError(f"seat number out of range: {number}", m.group('number'))
    return SeatAdded(Seat(
        number=number,
        player_id=m.group('player_id'),
        stack=parse_amount(m.group('stack'))
    ))


def _player_amount(action_cls) -> Callable[["re.Match[str]"], Effect]:
    def build(m: "re.Match[str]") -> Effect:
        return ActionAppended(action_cls(
            player=m.group('player_id'),
            amount=parse_amount(m.group('amount'))
        ))
    return build


def _player_only(action_cls) -> Callable[["re.Match[str]"], Effect]:
    def build(m: "re.Match[str]") -> Effect:
        return ActionAppended(action_cls(player=m.group('player_id')))
    return build


def _raise(m: "re.Match[str]") -> Effect:
    return ActionAppended(Raise(
        player=m.group('player_id'),
        raise_amount=parse_amount(m.group('raise')),
        total_amount=parse_amount(m.group('total'))
    ))


def _show(m: "re.Match[str]") -> Effect:
    return ActionAppended(Show(
        player=m.group('player_id'),
        cards=(parse_card(m.group('card_1')), parse_card(m.group('card_2')))
    ))


def _preflop(m: "re.Match[str]") -> Effect:
    return ActionAppended(PreFlop())


def _flop(m: "re.Match[str]") -> Effect:
    return ActionAppended(Flop(cards=(
        parse_card(m.group('card_1')),
        parse_card(m.group('card_2')),
        parse_card(m.group('card_3'))
    )))


def _turn(m: "re.Match[str]") -> Effect:
    return ActionAppended(Turn(card=parse_card(m.group('card'))))


def _river(m: "re.Match[str]") -> Effect:
    return ActionAppended(River(card=parse_card(m.group('card'))))


# Priority order matters: the first match wins
LINE_PATTERNS: Tuple[LinePattern, ...] = (
    LinePattern(
        'header',
        re.compile(r'Stage #(?P<stage_id>\d+): (?P<game>.+?) '
                   r'\$(?P<stake>\S+?)(?:,? |,?$)'),
        _header
    ),
    LinePattern(
        'seat',
        re.compile(r'Seat (?P<number>\d+) - (?P<player_id>.+?) \(\$(?P<stack>\S+) in chips\)'),
        _seat
    ),
    LinePattern('bet', re.compile(r'(?P<player_id>.+?) - Bets \$(?P<amount>\S+)'),
                _player_amount(Bet)),
    LinePattern('call', re.compile(r'(?P<player_id>.+?) - Calls \$(?P<amount>\S+)'),
                _player_amount(Call)),
    LinePattern('check', re.compile(r'(?P<player_id>.+?) - Checks'), _player_only(Check)),
    LinePattern('collect', re.compile(r'(?P<player_id>.+?) Collects \$(?P<amount>\S+) from .+'),
                _player_amount(Collect)),
    LinePattern('fold', re.compile(r'(?P<player_id>.+?) - Folds'), _player_only(Fold)),
    LinePattern('muck', re.compile(r'(?P<player_id>.+?) - Mucks'), _player_only(Muck)),
    LinePattern('post', re.compile(r'(?P<player_id>.+?) - Posts .+? \$(?P<amount>\S+)'),
                _player_amount(Post)),
    LinePattern('raise',
                re.compile(r'(?P<player_id>.+?) - Raises \$(?P<raise>\S+) to \$(?P<total>\S+)'),
                _raise),
    LinePattern('show',
                re.compile(r'(?P<player_id>.+?) - Shows \[(?P<card_1>\S+) (?P<card_2>\S+)\]'),
                _show),
    LinePattern('preflop', re.compile(r'\*\*\* POCKET CARDS \*\*\*'), _preflop),
    LinePattern(
        'flop',
        re.compile(r'\*\*\* FLOP \*\*\* \[(?P<card_1>\S+) (?P<card_2>\S+) (?P<card_3>\S+)\]'),
        _flop
    ),
    LinePattern('turn', re.compile(r'\*\*\* TURN \*\*\* \[[^\]]+\] \[(?P<card>\S+)\]'), _turn),
    LinePattern('river', re.compile(r'\*\*\* RIVER \*\*\* \[[^\]]+\] \[(?P<card>\S+)\]'), _river),
)


def match_line(line: str) -> Optional[Tuple[LinePattern, "re.Match[str]"]]:
    """
    Find the winning pattern for a line without extracting any fields.

    Returns:
        (pattern, match) for the first matching pattern, None otherwise
    """
    for pattern in LINE_PATTERNS:
        m = pattern.regex.search(line)
        if m:
            return pattern, m
    return None


def classify_line(line: str) -> Optional[LineMatch]:
    """
    Classify one line and extract its typed fields.

    Returns:
        LineMatch for a recognized line, None for a no-op line

    Raises:
        FormatError: if an amount or card token in a matched line is malformed
    """
    found = match_line(line)
    if found is None:
        return None

    pattern, m = found
    try:
        effect = pattern.build(m)
    except FormatError as e:
        e.pattern = pattern.name
        raise
    return LineMatch(pattern=pattern.name, effect=effect)
