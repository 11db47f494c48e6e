from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Iterable, Iterator, Optional, Tuple

from .alphabet import Symbol
from .errors import SymbolError
from .tape import Tape
from .transitions import State, Transition, TransitionTable

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10_000


class Status(Enum):
    RUNNING = "running"
    HALTED = "halted"


class HaltReason(Enum):
    HALTING_STATE = "Estado final alcanzado"
    UNDEFINED_TRANSITION = "No existe transición definida"


class Outcome(Enum):
    STEPPED = "stepped"
    HALTED = "halted"
    ALREADY_HALTED = "already_halted"
    BUDGET_EXHAUSTED = "Se alcanzó el límite máximo de pasos"


@dataclass(frozen=True)
class StepResult:
    """Resultado de un único paso."""

    outcome: Outcome
    state: State
    steps: int
    halt_reason: Optional[HaltReason] = None
    transition: Optional[Transition] = None

    @property
    def halted(self) -> bool:
        return self.outcome in (Outcome.HALTED, Outcome.ALREADY_HALTED)


@dataclass(frozen=True)
class RunResult:
    """Resultado de una llamada a ``Machine.run``."""

    outcome: Outcome
    state: State
    steps: int
    steps_taken: int
    halt_reason: Optional[HaltReason] = None

    @property
    def halted(self) -> bool:
        return self.halt_reason is not None

    @property
    def reason(self) -> str:
        if self.halt_reason is not None:
            return self.halt_reason.value
        return Outcome.BUDGET_EXHAUSTED.value


@dataclass
class InstantaneousDescription:
    """Representa una descripción instantánea (ID) de la MT."""

    step: int
    state: State
    head_position: int
    tape_view: str

    def format(self) -> str:
        return (
            f"Paso {self.step:04d}: estado={self.state}, cabeza={self.head_position}\n"
            f"  cinta: {self.tape_view}"
        )


class Machine:
    """Simulador de Máquinas de Turing deterministas de una cinta.

    La máquina es dueña de su cinta y congela la tabla de transiciones al
    construirse, de modo que una misma tabla puede compartirse entre varias
    máquinas. Una vez detenida, la máquina no vuelve a modificarse.
    """

    def __init__(
        self,
        tape: Tape,
        table: TransitionTable,
        initial_state: State,
        halting_states: Iterable[State] = (),
    ) -> None:
        if tape.alphabet is not None:
            for rule in table:
                for symbol in (rule.read, rule.write):
                    if symbol not in tape.alphabet:
                        raise SymbolError(
                            f"La regla {rule.describe()} usa el símbolo {symbol!r}, "
                            "que no pertenece al alfabeto de la cinta."
                        )
        self._tape = tape
        self._table = table.freeze()
        self._state = initial_state
        self._halting_states: FrozenSet[State] = frozenset(halting_states)
        self._steps = 0
        self._halt_reason: Optional[HaltReason] = None
        if initial_state in self._halting_states:
            self._halt_reason = HaltReason.HALTING_STATE

    @property
    def tape(self) -> Tape:
        return self._tape

    @property
    def table(self) -> TransitionTable:
        return self._table

    @property
    def state(self) -> State:
        return self._state

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def halting_states(self) -> FrozenSet[State]:
        return self._halting_states

    @property
    def halt_reason(self) -> Optional[HaltReason]:
        return self._halt_reason

    @property
    def halted(self) -> bool:
        return self._halt_reason is not None

    @property
    def status(self) -> Status:
        return Status.HALTED if self.halted else Status.RUNNING

    def _halt(self, reason: HaltReason) -> None:
        self._halt_reason = reason
        logger.debug(
            "Máquina detenida en %r tras %d pasos: %s", self._state, self._steps, reason.value
        )

    def step(self) -> StepResult:
        if self.halted:
            return StepResult(Outcome.ALREADY_HALTED, self._state, self._steps, self._halt_reason)

        transition = self._table.lookup(self._state, self._tape.read())
        if transition is None:
            self._halt(HaltReason.UNDEFINED_TRANSITION)
            return StepResult(Outcome.HALTED, self._state, self._steps, self._halt_reason)

        self._tape.write(transition.write)
        self._tape.move_head(transition.move)
        self._state = transition.next_state
        self._steps += 1

        if self._state in self._halting_states:
            self._halt(HaltReason.HALTING_STATE)
            return StepResult(
                Outcome.HALTED, self._state, self._steps, self._halt_reason, transition
            )
        return StepResult(Outcome.STEPPED, self._state, self._steps, None, transition)

    def run(self, max_steps: int = DEFAULT_MAX_STEPS) -> RunResult:
        """Ejecuta hasta detenerse o hasta dar ``max_steps`` pasos en esta llamada.

        Si se agota el presupuesto la máquina sigue en ejecución y puede
        reanudarse con otra llamada.
        """

        _check_budget(max_steps)
        start = self._steps
        if self.halted:
            return RunResult(Outcome.ALREADY_HALTED, self._state, self._steps, 0, self._halt_reason)

        while not self.halted and self._steps - start < max_steps:
            self.step()

        taken = self._steps - start
        if self.halted:
            return RunResult(Outcome.HALTED, self._state, self._steps, taken, self._halt_reason)

        logger.debug("Presupuesto de %d pasos agotado en el estado %r", max_steps, self._state)
        return RunResult(Outcome.BUDGET_EXHAUSTED, self._state, self._steps, taken)

    def describe(self, radius: int = 0) -> InstantaneousDescription:
        return InstantaneousDescription(
            step=self._steps,
            state=self._state,
            head_position=self._tape.head_position,
            tape_view=self._tape.view(radius),
        )

    def trace(
        self, max_steps: int = DEFAULT_MAX_STEPS, radius: int = 0
    ) -> Iterator[InstantaneousDescription]:
        """Como ``run`` pero produce la ID inicial y la de cada paso."""

        _check_budget(max_steps)
        start = self._steps
        description = self.describe(radius)
        logger.debug("%s", description.format())
        yield description
        while not self.halted and self._steps - start < max_steps:
            if self.step().transition is None:
                break
            description = self.describe(radius)
            logger.debug("%s", description.format())
            yield description

    def __repr__(self) -> str:
        return (
            f"Machine(state={self._state!r}, steps={self._steps}, "
            f"status={self.status.value}, head={self._tape.head_position})"
        )


def _check_budget(max_steps: Any) -> None:
    if isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps < 0:
        raise ValueError(f"max_steps debe ser un entero no negativo, no {max_steps!r}.")


def run_until_halt(
    table: TransitionTable,
    initial_state: State,
    halting_states: Iterable[State],
    symbols: Iterable[Symbol],
    blank: Any,
    *,
    origin: int = 0,
    head: Optional[int] = None,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> Tuple[RunResult, Tape]:
    """Construye cinta y máquina, la ejecuta y devuelve el resultado y la cinta final."""

    tape = Tape.from_input(symbols, blank, origin=origin, head=head)
    machine = Machine(tape, table, initial_state, halting_states)
    return machine.run(max_steps), tape
