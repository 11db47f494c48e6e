from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .alphabet import Move, SymbolAlphabet
from .machine import DEFAULT_MAX_STEPS, HaltReason, InstantaneousDescription, Machine
from .tape import Tape
from .transitions import Transition, TransitionTable


@dataclass(frozen=True)
class MachineSpecification:
    """Estructura de datos inmutable con la especificación completa."""

    states: List[str]
    initial_state: str
    final_states: List[str]
    input_alphabet: List[str]
    tape_alphabet: List[str]
    blank_symbol: str
    transitions: List[Transition]
    simulation_strings: List[str]
    origin: int = 0
    head: Optional[int] = None

    @property
    def alphabet(self) -> SymbolAlphabet:
        return SymbolAlphabet.of(self.tape_alphabet, self.blank_symbol)

    def build_table(self) -> TransitionTable:
        """Construye la tabla congelada; las reglas en conflicto lanzan DuplicateTransition."""

        return TransitionTable.from_rules(self.transitions).freeze()

    def build_tape(self, input_string: str) -> Tape:
        for symbol in input_string:
            if symbol not in self.input_alphabet:
                raise ValueError(
                    f"El símbolo {symbol!r} de la cadena {input_string!r} no pertenece al alfabeto de entrada."
                )
        return Tape.from_input(input_string, self.alphabet, origin=self.origin, head=self.head)

    def build_machine(self, input_string: str, table: Optional[TransitionTable] = None) -> Machine:
        return Machine(
            self.build_tape(input_string),
            table if table is not None else self.build_table(),
            self.initial_state,
            self.final_states,
        )

    def simulate(
        self,
        input_string: str,
        *,
        max_steps: int = DEFAULT_MAX_STEPS,
        capture_ids: bool = True,
        table: Optional[TransitionTable] = None,
    ) -> MachineResult:
        """Ejecuta la máquina para una cadena de entrada."""

        machine = self.build_machine(input_string, table)
        ids: List[InstantaneousDescription] = []
        if capture_ids:
            ids = list(machine.trace(max_steps))
            # la traza ya consumió el presupuesto; run(0) solo informa el desenlace
            result = machine.run(0)
        else:
            result = machine.run(max_steps)
        return MachineResult(
            accepted=machine.halt_reason is HaltReason.HALTING_STATE,
            halted=machine.halted,
            reason=result.reason,
            steps=machine.steps,
            state=str(machine.state),
            tape="".join(str(symbol) for symbol in machine.tape.contents()),
            ids=ids,
        )

    def simulate_inputs(
        self,
        inputs: Optional[List[str]] = None,
        *,
        max_steps: int = DEFAULT_MAX_STEPS,
        capture_ids: bool = True,
    ) -> Dict[str, MachineResult]:
        """Ejecuta la MT para cada cadena indicada, compartiendo una sola tabla."""

        inputs = inputs if inputs is not None else self.simulation_strings
        table = self.build_table()
        results: Dict[str, MachineResult] = {}
        for input_string in inputs:
            results[input_string] = self.simulate(
                input_string,
                max_steps=max_steps,
                capture_ids=capture_ids,
                table=table,
            )
        return results


@dataclass
class MachineResult:
    """Resultado final de la simulación."""

    accepted: bool
    halted: bool
    reason: str
    steps: int
    state: str
    tape: str
    ids: List[InstantaneousDescription]


def _normalize_config(data: Dict) -> Dict:
    """Acepta configuraciones con o sin el nodo 'machine'."""

    if "machine" in data and isinstance(data["machine"], dict):
        return data["machine"]
    return data


def _symbol(value: Any) -> str:
    # YAML convierte 0 y 1 en enteros; en la cinta todos los símbolos son texto.
    return value if isinstance(value, str) else str(value)


def load_specification(path: str | Path) -> MachineSpecification:
    """Carga y valida el archivo YAML que describe la MT."""

    with Path(path).open("r", encoding="utf-8") as handle:
        raw_data = yaml.safe_load(handle)
    return parse_specification(raw_data)


def parse_specification(raw_data: Any) -> MachineSpecification:
    if not isinstance(raw_data, dict):
        raise ValueError("El archivo YAML debe describir un objeto mapeo.")

    config = _normalize_config(raw_data)

    def require(key: str) -> Dict:
        if key not in config or not isinstance(config[key], dict):
            raise ValueError(f"El bloque '{key}' es obligatorio y debe ser un objeto.")
        return config[key]

    q_states = require("q_states")
    q_list = [_symbol(state) for state in q_states.get("q_list") or []]
    if not q_list:
        raise ValueError("Debe existir al menos un estado en 'q_list'.")
    initial_state = q_states.get("initial")
    initial_state = None if initial_state is None else _symbol(initial_state)
    if initial_state not in q_list:
        raise ValueError("El estado inicial debe pertenecer a 'q_list'.")
    final_states = q_states.get("final") or []
    if not isinstance(final_states, list):
        final_states = [final_states]
    final_states = [_symbol(state) for state in final_states]
    for final_state in final_states:
        if final_state not in q_list:
            raise ValueError(f"El estado final '{final_state}' no pertenece a 'q_list'.")

    alphabet_block = require("alphabet")
    input_alphabet = [_symbol(symbol) for symbol in alphabet_block.get("input") or []]
    if not input_alphabet:
        raise ValueError("'alphabet.input' debe contener símbolos para la cinta de entrada.")

    tape_alphabet = [_symbol(symbol) for symbol in alphabet_block.get("tape") or []]
    if not tape_alphabet:
        raise ValueError("'alphabet.tape' debe contener los símbolos disponibles en la cinta.")

    blank_symbol = config.get("blank")
    if blank_symbol is None:
        blank_symbol = alphabet_block.get("blank")
    if blank_symbol is None:
        raise ValueError("Debe definirse un símbolo en blanco mediante 'blank'.")
    blank_symbol = _symbol(blank_symbol)
    if blank_symbol not in tape_alphabet:
        raise ValueError("El símbolo en blanco debe pertenecer al alfabeto de la cinta.")
    for symbol in input_alphabet:
        if symbol not in tape_alphabet:
            raise ValueError(f"El símbolo de entrada {symbol!r} no pertenece al alfabeto de la cinta.")
        if len(symbol) != 1:
            raise ValueError(f"Los símbolos de entrada deben ser de un carácter: {symbol!r}.")

    origin = config.get("origin", 0)
    head = config.get("head")
    if isinstance(origin, bool) or not isinstance(origin, int):
        raise ValueError("'origin' debe ser un entero.")
    if head is not None and (isinstance(head, bool) or not isinstance(head, int)):
        raise ValueError("'head' debe ser un entero.")

    transition_block = config.get("delta")
    if not isinstance(transition_block, list):
        raise ValueError("El bloque 'delta' debe ser una lista de transiciones.")

    transitions = []
    for index, raw_transition in enumerate(transition_block):
        params = raw_transition.get("params") if isinstance(raw_transition, dict) else None
        output = raw_transition.get("output") if isinstance(raw_transition, dict) else None
        if not isinstance(params, dict) or not isinstance(output, dict):
            raise ValueError("Cada transición debe incluir los nodos 'params' y 'output'.")

        state = _symbol(params.get("initial_state"))
        read_symbol = _symbol(params.get("tape_input"))
        if state not in q_list:
            raise ValueError(f"Estado no válido en transición #{index}: {state!r}.")
        if read_symbol not in tape_alphabet:
            raise ValueError(f"Símbolo no válido en transición #{index}: {read_symbol!r}.")

        next_state = _symbol(output.get("final_state"))
        write_symbol = _symbol(output.get("tape_output"))
        if next_state not in q_list:
            raise ValueError(f"Estado destino no válido en transición #{index}: {next_state!r}.")
        if write_symbol not in tape_alphabet:
            raise ValueError(f"Símbolo de escritura no válido en transición #{index}: {write_symbol!r}.")
        try:
            movement = Move.parse(output.get("tape_displacement"))
        except ValueError as exc:
            raise ValueError(f"Movimiento inválido en transición #{index}: {exc}") from exc

        transitions.append(
            Transition(
                state=state,
                read=read_symbol,
                next_state=next_state,
                write=write_symbol,
                move=movement,
            )
        )

    simulation_strings = raw_data.get("simulation_strings") or config.get("simulation_strings") or []
    if isinstance(simulation_strings, str):
        simulation_strings = [simulation_strings]
    simulation_strings = [str(value) for value in simulation_strings]

    return MachineSpecification(
        states=q_list,
        initial_state=initial_state,
        final_states=final_states,
        input_alphabet=input_alphabet,
        tape_alphabet=tape_alphabet,
        blank_symbol=blank_symbol,
        transitions=transitions,
        simulation_strings=simulation_strings,
        origin=origin,
        head=head,
    )
