#!/usr/bin/env python3
"""
Unit tests for the line classifier using single synthetic lines.
"""

import pytest
from pydantic import ValidationError

from handreader.parse.errors import FormatError
from handreader.parse.patterns import (
    LINE_PATTERNS, ActionAppended, HeaderUpdate, SeatAdded,
    classify_line, match_line
)
from handreader.parse.schemas import Hand, Seat
from handreader.parse.utils import parse_amount
from handreader.parse.cards import parse_card


class TestHeaderAndSeat:
    """Header and seat declarations."""

    def test_header_line(self):
        match = classify_line("Stage #3009812734: Holdem  No Limit $2 - 2009-07-01 00:00:06 (ET)")
        assert match.pattern == 'header'
        assert isinstance(match.effect, HeaderUpdate)
        assert match.effect.game.type == 'NLH'
        assert match.effect.stake == parse_amount("2")
        assert match.effect.stage_id == 3009812734

    def test_header_with_comma_after_stake(self):
        match = classify_line("Stage #1: Holdem (1 on 1)  No Limit $10, Table 4")
        assert match.effect.game.type == 'NLH_HU'
        assert str(match.effect.stake) == "10"

    def test_header_with_fractional_stake(self):
        match = classify_line("Stage #2: Holdem  No Limit $0.50 - 2009-07-01")
        assert str(match.effect.stake) == "0.50"

    def test_header_keeps_unknown_game_label(self):
        match = classify_line("Stage #3: Omaha Pot Limit $5 - 2009-07-01")
        assert match.effect.game.type == 'UNKNOWN'
        assert match.effect.game.label == 'Omaha Pot Limit'

    def test_seat_line(self):
        match = classify_line("Seat 4 - 9FB5D4B6 ($1,200 in chips)")
        assert match.pattern == 'seat'
        assert isinstance(match.effect, SeatAdded)
        seat = match.effect.seat
        assert seat.number == 4
        assert seat.player_id == '9FB5D4B6'
        assert seat.stack == parse_amount("1200")

    def test_seat_with_malformed_stack_raises(self):
        with pytest.raises(FormatError) as exc_info:
            classify_line("Seat 1 - 5EA1D8D7 ($abc in chips)")
        assert exc_info.value.pattern == 'seat'


class TestPlayerActions:
    """Player action lines."""

    @pytest.mark.parametrize("line,action_type,amount", [
        ("9FB5D4B6 - Bets $8", "BET", "8"),
        ("C2B1A8E0 - Calls $4.50", "CALL", "4.50"),
        ("5EA1D8D7 - Posts small blind $1", "POST", "1"),
        ("C2B1A8E0 - Posts big blind $2", "POST", "2"),
        ("9FB5D4B6 Collects $68 from main pot", "COLLECT", "68"),
        ("9FB5D4B6 Collects $1,068.25 from side pot #1", "COLLECT", "1068.25"),
    ])
    def test_amount_actions(self, line, action_type, amount):
        match = classify_line(line)
        assert match.pattern == action_type.lower()
        action = match.effect.action
        assert action.type == action_type
        assert str(action.amount) == amount

    @pytest.mark.parametrize("line,action_type", [
        ("C2B1A8E0 - Checks", "CHECK"),
        ("5EA1D8D7 - Folds", "FOLD"),
        ("CCCC3333 - Mucks", "MUCK"),
    ])
    def test_player_only_actions(self, line, action_type):
        action = classify_line(line).effect.action
        assert action.type == action_type
        assert action.player == line.split(" - ")[0]

    def test_raise_carries_both_amounts(self):
        action = classify_line("9FB5D4B6 - Raises $4 to $6").effect.action
        assert action.type == "RAISE"
        assert action.player == "9FB5D4B6"
        assert action.raise_amount == parse_amount("4")
        assert action.total_amount == parse_amount("6")

    def test_show_extracts_two_cards(self):
        action = classify_line("9FB5D4B6 - Shows [10h 10d] (Three of a Kind, Tens)").effect.action
        assert action.type == "SHOW"
        assert action.cards == (parse_card("10h"), parse_card("10d"))

    def test_show_with_bad_card_raises(self):
        with pytest.raises(FormatError) as exc_info:
            classify_line("9FB5D4B6 - Shows [Zx 10d]")
        assert exc_info.value.pattern == 'show'

    def test_player_id_is_opaque(self):
        action = classify_line("some player - with dash - Folds").effect.action
        assert action.player == "some player - with dash"

    def test_bet_with_malformed_amount_raises(self):
        with pytest.raises(FormatError):
            classify_line("9FB5D4B6 - Bets $8x")


class TestBoardMarkers:
    """Dealer lines revealing board cards."""

    def test_pocket_cards(self):
        match = classify_line("*** POCKET CARDS ***")
        assert match.pattern == 'preflop'
        assert match.effect.action.type == "PREFLOP"

    def test_flop(self):
        action = classify_line("*** FLOP *** [10c 5s 8d]").effect.action
        assert action.type == "FLOP"
        assert [str(c) for c in action.cards] == ["10c", "5s", "8d"]

    def test_turn_takes_the_new_card(self):
        action = classify_line("*** TURN *** [10c 5s 8d] [Jh]").effect.action
        assert action.type == "TURN"
        assert str(action.card) == "Jh"

    def test_river_takes_the_new_card(self):
        action = classify_line("*** RIVER *** [10c 5s 8d Jh] [2s]").effect.action
        assert action.type == "RIVER"
        assert str(action.card) == "2s"

    def test_flop_with_bad_card_raises(self):
        with pytest.raises(FormatError):
            classify_line("*** FLOP *** [10c 5s 1d]")


class TestNoOpLines:
    """Lines with no modeled information are skipped."""

    @pytest.mark.parametrize("line", [
        "",
        "   ",
        "Table: CHELTENHAM DR (Real Money) Seat #4 is the dealer",
        "*** SHOW DOWN ***",
        "*** SUMMARY ***",
        "Total Pot($69) | Rake ($1)",
        "Board [10c 5s 8d Jh 2s]",
        "9FB5D4B6 - Does not show",
        "Stage #abc: Holdem  No Limit",
    ])
    def test_unmatched_line_is_noop(self, line):
        assert classify_line(line) is None
        assert match_line(line) is None


class TestPriority:
    """First matching pattern wins."""

    def test_pattern_order(self):
        names = [p.name for p in LINE_PATTERNS]
        assert names == [
            'header', 'seat', 'bet', 'call', 'check', 'collect', 'fold', 'muck',
            'post', 'raise', 'show', 'preflop', 'flop', 'turn', 'river',
        ]

    def test_earlier_pattern_shadows_later_one(self):
        # Matches both the check and the fold shapes; check is tried first
        match = classify_line("X - Checks - Folds")
        assert match.pattern == 'check'

    def test_match_line_does_not_extract(self):
        pattern, m = match_line("Seat 1 - 5EA1D8D7 ($abc in chips)")
        assert pattern.name == 'seat'
        assert m.group('stack') == 'abc'


def test_apply_mutates_hand():
    hand = Hand()
    classify_line("Stage #9: Holdem  No Limit $2 - x").apply(hand)
    classify_line("Seat 1 - P1 ($10 in chips)").apply(hand)
    classify_line("P1 - Checks").apply(hand)

    assert hand.game.type == 'NLH'
    assert hand.stage_id == 9
    assert [s.player_id for s in hand.seats] == ['P1']
    assert [a.type for a in hand.actions] == ['CHECK']


class TestHeaderStake:
    """The stake token always reaches the amount codec."""

    def test_thousands_separator_stays_in_stake(self):
        match = classify_line("Stage #4: Holdem  No Limit $1,200 - 2009-07-01")
        assert str(match.effect.stake) == "1200"

    def test_stake_at_end_of_line(self):
        assert str(classify_line("Stage #4: Holdem  No Limit $5").effect.stake) == "5"

    @pytest.mark.parametrize("line", [
        "Stage #3009812734: Holdem  No Limit $2.x - 2009-07-01 00:00:06 (ET)",
        "Stage #3009812734: Holdem  No Limit $abc - 2009-07-01 00:00:06 (ET)",
        "Stage #3009812734: Holdem  No Limit $2x, Table 4",
    ])
    def test_malformed_stake_raises(self, line):
        with pytest.raises(FormatError) as exc_info:
            classify_line(line)
        assert exc_info.value.pattern == 'header'


class TestUnanchoredMatching:
    """Patterns are found anywhere in the line."""

    def test_byte_order_mark_before_header(self):
        match = classify_line("\ufeffStage #3009812734: Holdem  No Limit $2 - 2009-07-01")
        assert match.pattern == 'header'
        assert match.effect.game.type == 'NLH'
        assert match.effect.stage_id == 3009812734

    def test_indented_board_marker(self):
        match = classify_line("  *** FLOP *** [10c 5s 8d]")
        assert match.pattern == 'flop'
        assert [str(c) for c in match.effect.action.cards] == ["10c", "5s", "8d"]

    def test_indented_seat_line(self):
        seat = classify_line("\tSeat 6 - C2B1A8E0 ($52.12 in chips)").effect.seat
        assert seat.number == 6
        assert seat.player_id == 'C2B1A8E0'


class TestSeatNumber:
    """Seat numbers fit in one byte."""

    def test_largest_seat_number(self):
        assert classify_line("Seat 255 - P1 ($10 in chips)").effect.seat.number == 255

    def test_seat_number_out_of_range_raises(self):
        with pytest.raises(FormatError) as exc_info:
            classify_line("Seat 300 - P1 ($10 in chips)")
        assert exc_info.value.pattern == 'seat'

    def test_seat_model_rejects_negative_number(self):
        with pytest.raises(ValidationError):
            Seat(number=-1, player_id='P1', stack=parse_amount("10"))
