"""
Aggregate statistics over parsed hands
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Iterable

from handreader.parse.schemas import Hand

logger = logging.getLogger(__name__)

GAME_TYPES = ('NLH', 'NLH_HU', 'UNKNOWN')


def _street_counts(hand: Hand) -> Dict[str, int]:
    """Board markers reached by a hand, stopping at its first showdown."""
    counts = {'flops': 0, 'turns': 0, 'rivers': 0, 'showdowns': 0}
    for action in hand.actions:
        if action.type == 'FLOP':
            counts['flops'] += 1
        elif action.type == 'TURN':
            counts['turns'] += 1
        elif action.type == 'RIVER':
            counts['rivers'] += 1
        elif action.type == 'SHOW':
            counts['showdowns'] += 1
            break
    return counts


def compute_stats(hands: Iterable[Hand]) -> Dict[str, Any]:
    """
    Compute summary counters over hands.

    Street and showdown counters only cover no-limit hold'em (NLH) hands;
    heads-up and unknown games are counted by type only.
    """
    stats: Dict[str, Any] = {
        'hands': 0,
        'by_game': {game_type: 0 for game_type in GAME_TYPES},
        'flops': 0,
        'turns': 0,
        'rivers': 0,
        'showdowns': 0,
    }
    total_collected = Decimal(0)
    players = set()

    for hand in hands:
        stats['hands'] += 1
        stats['by_game'][hand.game.type] += 1
        players.update(seat.player_id for seat in hand.seats)

        for action in hand.actions:
            if action.type == 'COLLECT':
                total_collected += action.amount.as_decimal()

        if hand.game.type == 'NLH':
            for key, value in _street_counts(hand).items():
                stats[key] += value

    stats['total_collected'] = str(total_collected)
    stats['players'] = len(players)

    logger.debug(f"Computed stats over {stats['hands']} hands")
    return stats


def format_stats(stats: Dict[str, Any]) -> str:
    """Printable summary, one counter per line."""
    by_game = stats['by_game']
    lines = [
        f"Hands: {stats['hands']}",
        f"NLH: {by_game['NLH']}",
        f"NLH HU: {by_game['NLH_HU']}",
        f"Unknown: {by_game['UNKNOWN']}",
        f"Flops: {stats['flops']}",
        f"Turns: {stats['turns']}",
        f"Rivers: {stats['rivers']}",
        f"Showdowns: {stats['showdowns']}",
        f"Players: {stats['players']}",
        f"Collected: ${stats['total_collected']}",
    ]
    return "\n".join(lines)
