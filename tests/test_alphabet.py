from enum import Enum

import pytest

from turingsim import Alphabet, Move, SymbolAlphabet, blank_of


class Bit(Enum):
    DELTA = "_"
    ZERO = "0"
    ONE = "1"


class TestMove:
    @pytest.mark.parametrize(
        "token, expected",
        [("L", Move.LEFT), ("r", Move.RIGHT), ("S", Move.STAY), (" left ", Move.LEFT), ("Stay", Move.STAY)],
    )
    def test_parse_accepts_letters_and_words(self, token, expected):
        assert Move.parse(token) is expected

    def test_parse_passes_through_members(self):
        assert Move.parse(Move.RIGHT) is Move.RIGHT

    @pytest.mark.parametrize("token", ["X", "", 1, None])
    def test_parse_rejects_unknown(self, token):
        with pytest.raises(ValueError):
            Move.parse(token)

    def test_displacements(self):
        assert [Move.LEFT.value, Move.STAY.value, Move.RIGHT.value] == [-1, 0, 1]


class TestSymbolAlphabet:
    def test_blank_is_always_a_member(self):
        alphabet = SymbolAlphabet.of(["0", "1"], "_")
        assert "_" in alphabet
        assert "0" in alphabet
        assert "2" not in alphabet

    def test_open_alphabet_accepts_anything(self):
        alphabet = SymbolAlphabet(blank=0)
        assert alphabet.is_open
        assert 42 in alphabet
        assert "x" in alphabet

    def test_satisfies_capability(self):
        assert isinstance(SymbolAlphabet.of([Bit.ZERO, Bit.ONE], Bit.DELTA), Alphabet)

    def test_blank_of(self):
        assert blank_of(SymbolAlphabet.of("01", "_")) == "_"
        assert blank_of("_") == "_"
        assert blank_of(Bit.DELTA) is Bit.DELTA
