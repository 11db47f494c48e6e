from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Hashable, Iterable, Optional, Protocol, runtime_checkable

Symbol = Hashable


class Move(Enum):
    """Desplazamiento de la cabeza tras escribir."""

    LEFT = -1
    RIGHT = 1
    STAY = 0

    @property
    def letter(self) -> str:
        return self.name[0]

    @classmethod
    def parse(cls, value: Any) -> "Move":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().upper()
            for move in cls:
                if token in (move.name, move.letter):
                    return move
        raise ValueError(
            f"Movimiento inválido: {value!r}. Valores permitidos: L, R, S."
        )


@runtime_checkable
class Alphabet(Protocol):
    """Capacidad mínima de un alfabeto: un blanco y pertenencia."""

    blank: Symbol

    def __contains__(self, symbol: object) -> bool:
        ...


@dataclass(frozen=True)
class SymbolAlphabet:
    """Alfabeto explícito. Con ``symbols=None`` acepta cualquier valor."""

    blank: Symbol
    symbols: Optional[FrozenSet[Symbol]] = None

    def __post_init__(self) -> None:
        if self.symbols is not None and self.blank not in self.symbols:
            object.__setattr__(self, "symbols", self.symbols | {self.blank})

    @classmethod
    def of(cls, symbols: Iterable[Symbol], blank: Symbol) -> "SymbolAlphabet":
        return cls(blank=blank, symbols=frozenset(symbols))

    @property
    def is_open(self) -> bool:
        return self.symbols is None

    def __contains__(self, symbol: object) -> bool:
        if self.symbols is None:
            return True
        return symbol in self.symbols


def blank_of(value: Any) -> Symbol:
    """Devuelve el blanco de un alfabeto o el propio valor si es un símbolo."""

    if isinstance(value, Alphabet):
        return value.blank
    return value
