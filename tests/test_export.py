"""Tests for writing and reading parsed hands"""
import json

import pytest

from handreader.export import hands_to_document, read_hands, write_hands
from handreader.parse import parse_text


@pytest.fixture
def hands(two_hands_text):
    return parse_text(two_hands_text)


def test_document_shape(hands):
    doc = hands_to_document(hands)
    assert len(doc) == 2
    first = doc[0]
    assert first['game'] == {'type': 'NLH', 'label': None}
    assert first['stake'] == {'integer': 2, 'fraction': 0, 'fraction_digits': 0}
    assert first['seats'][1]['player_id'] == '9FB5D4B6'
    assert first['actions'][3] == {
        'type': 'RAISE',
        'player': '9FB5D4B6',
        'raise_amount': {'integer': 4, 'fraction': 0, 'fraction_digits': 0},
        'total_amount': {'integer': 6, 'fraction': 0, 'fraction_digits': 0},
    }
    assert first['actions'][6]['cards'][0] == {'rank': '10', 'suit': 'c'}


def test_json_round_trip(tmp_path, hands):
    path = write_hands(hands, tmp_path / "out" / "hands.json", indent=2)
    assert path.exists()

    with open(path, encoding="utf-8") as f:
        assert len(json.load(f)) == 2
    assert read_hands(path) == hands


def test_jsonl_writes_one_hand_per_line(tmp_path, hands):
    path = write_hands(hands, tmp_path / "hands.jsonl", fmt="jsonl")
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[1])['stage_id'] == 3009812800
    assert read_hands(path) == hands


def test_empty_hand_list(tmp_path):
    path = write_hands([], tmp_path / "empty.json")
    assert path.read_text(encoding="utf-8") == "[]"


def test_unsupported_format(tmp_path, hands):
    with pytest.raises(ValueError):
        write_hands(hands, tmp_path / "hands.csv", fmt="csv")
