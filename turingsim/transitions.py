from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple, Union

from .alphabet import Move, Symbol
from .errors import DuplicateTransition, FrozenTableError

State = Hashable


@dataclass(frozen=True)
class Transition:
    """Regla (estado, símbolo leído) -> (estado siguiente, símbolo escrito, movimiento)."""

    state: State
    read: Symbol
    next_state: State
    write: Symbol
    move: Move

    def __post_init__(self) -> None:
        object.__setattr__(self, "move", Move.parse(self.move))

    @property
    def key(self) -> Tuple[State, Symbol]:
        return (self.state, self.read)

    def describe(self) -> str:
        return (
            f"δ({self.state}, {self.read}) = "
            f"({self.next_state}, {self.write}, {self.move.letter})"
        )


RuleLike = Union[Transition, Tuple[Any, Any, Any, Any, Any]]


class TransitionTable:
    """Función de transición parcial de una MT determinista.

    No es necesario cubrir todos los pares (estado, símbolo): un par sin regla
    detiene la máquina.
    """

    def __init__(self) -> None:
        self._rules: Dict[Tuple[State, Symbol], Transition] = {}
        self._frozen = False

    @classmethod
    def from_rules(cls, rules: Iterable[RuleLike]) -> "TransitionTable":
        table = cls()
        for rule in rules:
            if isinstance(rule, Transition):
                table.add(rule)
            else:
                table.insert(*rule)
        return table

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "TransitionTable":
        self._frozen = True
        return self

    def insert(
        self,
        state: State,
        read: Symbol,
        next_state: State,
        write: Symbol,
        move: Any,
    ) -> Transition:
        return self.add(Transition(state, read, next_state, write, Move.parse(move)))

    def add(self, transition: Transition) -> Transition:
        existing = self._rules.get(transition.key)
        if existing is not None:
            if existing == transition:
                return existing
            raise DuplicateTransition(existing, transition)
        if self._frozen:
            raise FrozenTableError("La tabla de transiciones está congelada.")
        self._rules[transition.key] = transition
        return transition

    def lookup(self, state: State, symbol: Symbol) -> Optional[Transition]:
        return self._rules.get((state, symbol))

    def states(self) -> List[State]:
        seen: Dict[State, None] = {}
        for rule in self._rules.values():
            seen.setdefault(rule.state)
            seen.setdefault(rule.next_state)
        return list(seen)

    def symbols(self) -> List[Symbol]:
        seen: Dict[Symbol, None] = {}
        for rule in self._rules.values():
            seen.setdefault(rule.read)
            seen.setdefault(rule.write)
        return list(seen)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[Transition]:
        return iter(list(self._rules.values()))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"TransitionTable({len(self)} reglas{', congelada' if self._frozen else ''})"
