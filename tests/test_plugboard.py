"""
Tests for the plugboard.
"""

import pytest

from plugboard import Plugboard
from wheels import ALPHABET


class TestPlugboard:
    """Tests for Plugboard."""

    def test_empty_is_identity(self):
        board = Plugboard()
        assert all(board.swap(ch) == ch for ch in ALPHABET)
        assert len(board) == 0

    def test_swaps_both_ways(self):
        board = Plugboard(["AB"])
        assert board.swap("A") == "B"
        assert board.swap("B") == "A"
        assert board.swap("C") == "C"

    def test_accepts_tuples(self):
        board = Plugboard([("Q", "W"), ("E", "R")])
        assert board.forward("W") == "Q"
        assert board.backward("R") == "E"

    def test_involution(self):
        board = Plugboard(["AZ", "BY", "CX", "MN"])
        for ch in ALPHABET:
            assert board.swap(board.swap(ch)) == ch

    def test_pairs_listing(self):
        board = Plugboard(["ZA", "CD"])
        assert board.pairs == ["AZ", "CD"]
        assert repr(board) == "<Plugboard AZ CD>"

    def test_thirteen_pairs(self):
        pairs = [ALPHABET[i:i + 2] for i in range(0, 26, 2)]
        board = Plugboard(pairs)
        assert len(board) == 13
        assert all(board.swap(ch) != ch for ch in ALPHABET)

    @pytest.mark.parametrize("pairs", [["AA"], ["AB", "BC"], ["ABC"], ["A1"]])
    def test_rejects_invalid_pairs(self, pairs):
        with pytest.raises(ValueError):
            Plugboard(pairs)
