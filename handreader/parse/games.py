"""
Game type classification for stage header labels.
"""

from typing import Dict

from .schemas import Game, GameType

# Exact header labels, including the double space the export writes
KNOWN_GAMES: Dict[str, GameType] = {
    "Holdem  No Limit": "NLH",
    "Holdem (1 on 1)  No Limit": "NLH_HU",
}


def classify_game(label: str) -> Game:
    """
    Map a header game label to a Game.

    Matching is exact and case-sensitive; any other label is returned as
    UNKNOWN with the text kept verbatim.
    """
    game_type = KNOWN_GAMES.get(label)
    if game_type is None:
        return Game.unknown(label)
    return Game(type=game_type)
