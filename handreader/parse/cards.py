"""
Card token codec ("10c", "Ah").
"""

from .errors import FormatError
from .schemas import Card, Rank, Suit

_RANKS = {rank.value: rank for rank in Rank}
_SUITS = {suit.value: suit for suit in Suit}


def parse_card(token: str) -> Card:
    """
    Parse a card token into a Card.

    The suit is always the single trailing character; the rank is
    everything before it, so "10c" and "Ah" both work.

    Raises:
        FormatError: on a bad length, suit letter or rank token
    """
    if token is None:
        raise FormatError("card is missing", token)

    s = token.strip()
    if not 2 <= len(s) <= 3:
        raise FormatError(f"invalid card length: {token!r}", token)

    suit = _SUITS.get(s[-1])
    if suit is None:
        raise FormatError(f"invalid card suit: {token!r}", token)

    rank = _RANKS.get(s[:-1])
    if rank is None:
        raise FormatError(f"invalid card rank: {token!r}", token)

    return Card(rank=rank, suit=suit)


def format_card(card: Card) -> str:
    return str(card)
