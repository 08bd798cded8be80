"""
Pytest configuration and fixtures for tests
"""
import pytest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sample_hands import HU_HAND, NLH_HAND


@pytest.fixture
def two_hands_text():
    """Two hands separated by exactly one blank line"""
    return NLH_HAND + "\n" + HU_HAND


@pytest.fixture
def hand_file(tmp_path, two_hands_text):
    """Replayer export on disk"""
    path = tmp_path / "hands.txt"
    path.write_text(two_hands_text, encoding="utf-8")
    return path
