from enum import Enum

import pytest

from turingsim import Move, SymbolAlphabet, SymbolError, Tape


class Bit(Enum):
    DELTA = "_"
    ZERO = "0"
    ONE = "1"

    def __str__(self) -> str:
        return self.value


class TestReadWrite:
    def test_fresh_tape_reads_blank(self):
        tape = Tape("_")
        assert tape.read() == "_"
        assert tape.head_position == 0
        assert tape.snapshot() == []
        assert tape.extent() is None

    def test_write_then_read(self):
        tape = Tape(Bit.DELTA)
        tape.write(Bit.ONE)
        assert tape.read() is Bit.ONE
        tape.write(Bit.ZERO)
        assert tape.read() is Bit.ZERO

    def test_writing_blank_erases(self):
        tape = Tape("_")
        tape.write("1")
        tape.write("_")
        assert tape.read() == "_"
        assert len(tape) == 0
        assert tape.snapshot() == []

    def test_never_written_positions_read_blank(self):
        tape = Tape.from_input("101", "_")
        for _ in range(50):
            tape.move_head(Move.RIGHT)
        assert tape.read() == "_"
        for _ in range(200):
            tape.move_head(Move.LEFT)
        assert tape.head_position == -150
        assert tape.read() == "_"
        assert len(tape) == 3

    def test_closed_alphabet_rejects_foreign_symbols(self):
        tape = Tape(SymbolAlphabet.of("01", "_"))
        tape.write("1")
        with pytest.raises(SymbolError):
            tape.write("2")
        assert tape.read() == "1"


class TestHead:
    def test_moves_accept_letters(self):
        tape = Tape("_")
        tape.move_head("R")
        tape.move_head("R")
        tape.move_head("S")
        tape.move_head("L")
        assert tape.head_position == 1

    def test_head_is_unbounded_to_the_left(self):
        tape = Tape("_", head=-3)
        tape.move_head(Move.LEFT)
        tape.write("x")
        assert tape.snapshot() == [(-4, "x")]


class TestSeeding:
    def test_from_input_places_symbols_from_origin(self):
        tape = Tape.from_input("abc", "_", origin=-1)
        assert tape.snapshot() == [(-1, "a"), (0, "b"), (1, "c")]
        assert tape.head_position == -1
        assert tape.read() == "a"

    def test_from_input_with_custom_head(self):
        tape = Tape.from_input("01", "_", origin=1, head=0)
        assert tape.head_position == 0
        assert tape.read() == "_"

    def test_blank_symbols_in_input_are_not_stored(self):
        tape = Tape.from_input("1_1", "_")
        assert tape.snapshot() == [(0, "1"), (2, "1")]
        assert tape.extent() == (0, 2)

    def test_cells_argument(self):
        tape = Tape("_", cells={5: "a", -2: "b", 0: "_"})
        assert tape.snapshot() == [(-2, "b"), (5, "a")]


class TestInspection:
    def test_snapshot_is_ordered(self):
        tape = Tape("_")
        for position, symbol in [(3, "c"), (-1, "a"), (1, "b")]:
            while tape.head_position < position:
                tape.move_head(Move.RIGHT)
            while tape.head_position > position:
                tape.move_head(Move.LEFT)
            tape.write(symbol)
        assert tape.snapshot() == [(-1, "a"), (1, "b"), (3, "c")]
        assert tape.extent() == (-1, 3)

    def test_contents_include_head(self):
        tape = Tape.from_input([Bit.ZERO, Bit.ONE], Bit.DELTA, origin=1, head=0)
        assert tape.contents() == [Bit.DELTA, Bit.ZERO, Bit.ONE]
        assert tape.contents(include_head=False) == [Bit.ZERO, Bit.ONE]

    def test_contents_of_blank_tape(self):
        assert Tape("_").contents() == ["_"]
        assert Tape("_").contents(include_head=False) == []

    def test_view_brackets_head(self):
        tape = Tape.from_input("abc", "_", head=1)
        assert tape.view() == "a[b]c"
        assert tape.view(radius=1) == "_a[b]c_"
        assert str(Tape.from_input([Bit.ONE], Bit.DELTA)) == "[1]"

    def test_copy_is_independent(self):
        tape = Tape.from_input("ab", "_")
        clone = tape.copy()
        assert clone == tape
        clone.write("z")
        assert tape.read() == "a"
        assert clone != tape


class TestPositions:
    @pytest.mark.parametrize("head", [1.7, "2", True, None])
    def test_head_must_be_an_integer(self, head):
        with pytest.raises(ValueError):
            Tape("_", head=head)

    def test_origin_must_be_an_integer(self):
        with pytest.raises(ValueError):
            Tape.from_input("01", "_", origin=0.5)

    def test_cell_positions_must_be_integers(self):
        with pytest.raises(ValueError):
            Tape("_", cells={1.0: "a"})
