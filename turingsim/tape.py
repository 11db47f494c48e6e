from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .alphabet import Alphabet, Move, Symbol, blank_of
from .errors import SymbolError


def _position(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' debe ser un entero, no {value!r}.")
    return value


class Tape:
    """Cinta infinita hacia ambos lados.

    Solo se guardan las celdas distintas del blanco, en un diccionario indexado
    por la posición. Leer o moverse fuera de lo escrito no reserva memoria.
    """

    def __init__(
        self,
        blank: Any,
        cells: Optional[Dict[int, Symbol]] = None,
        head: int = 0,
    ) -> None:
        self.alphabet: Optional[Alphabet] = blank if isinstance(blank, Alphabet) else None
        self.blank: Symbol = blank_of(blank)
        self.cells: Dict[int, Symbol] = {}
        self._head = _position(head, "head")
        for position, symbol in (cells or {}).items():
            self._store(_position(position, "position"), symbol)

    @classmethod
    def from_input(
        cls,
        symbols: Iterable[Symbol],
        blank: Any,
        *,
        origin: int = 0,
        head: Optional[int] = None,
    ) -> "Tape":
        """Carga la entrada en celdas contiguas a partir de ``origin``.

        La cabeza queda en ``head`` si se indica y, si no, sobre ``origin``.
        """

        origin = _position(origin, "origin")
        tape = cls(blank, head=origin if head is None else head)
        for offset, symbol in enumerate(symbols):
            tape._store(origin + offset, symbol)
        return tape

    def _store(self, position: int, symbol: Symbol) -> None:
        if self.alphabet is not None and symbol not in self.alphabet:
            raise SymbolError(f"El símbolo {symbol!r} no pertenece al alfabeto de la cinta.")
        if symbol == self.blank:
            self.cells.pop(position, None)
        else:
            self.cells[position] = symbol

    @property
    def head_position(self) -> int:
        return self._head

    def read(self) -> Symbol:
        return self.cells.get(self._head, self.blank)

    def read_at(self, position: int) -> Symbol:
        return self.cells.get(position, self.blank)

    def write(self, symbol: Symbol) -> None:
        self._store(self._head, symbol)

    def move_head(self, direction: Any) -> None:
        self._head += Move.parse(direction).value

    def snapshot(self) -> List[Tuple[int, Symbol]]:
        return sorted(self.cells.items(), key=lambda item: item[0])

    def extent(self) -> Optional[Tuple[int, int]]:
        if not self.cells:
            return None
        return min(self.cells), max(self.cells)

    def _window(self, include_head: bool, radius: int = 0) -> range:
        bounds = self.extent()
        if bounds is None:
            start = end = self._head
        else:
            start, end = bounds
            if include_head:
                start = min(start, self._head)
                end = max(end, self._head)
        return range(start - radius, end + radius + 1)

    def contents(self, include_head: bool = True) -> List[Symbol]:
        """Símbolos entre la primera y la última celda escrita, blancos incluidos."""

        if not include_head and not self.cells:
            return []
        return [self.read_at(index) for index in self._window(include_head)]

    def view(self, radius: int = 0) -> str:
        cells = []
        for index in self._window(True, radius):
            symbol = self.read_at(index)
            if index == self._head:
                cells.append(f"[{symbol}]")
            else:
                cells.append(str(symbol))
        return "".join(cells)

    def copy(self) -> "Tape":
        clone = Tape(self.alphabet if self.alphabet is not None else self.blank, head=self._head)
        clone.cells = dict(self.cells)
        return clone

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tape):
            return NotImplemented
        return (
            self.blank == other.blank
            and self._head == other._head
            and self.cells == other.cells
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tape(blank={self.blank!r}, head={self._head}, cells={self.snapshot()!r})"

    def __str__(self) -> str:
        return self.view()
