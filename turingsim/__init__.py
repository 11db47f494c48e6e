from .alphabet import Alphabet, Move, SymbolAlphabet, blank_of
from .config_loader import MachineResult, MachineSpecification, load_specification, parse_specification
from .errors import DuplicateTransition, FrozenTableError, SymbolError, TuringError
from .machine import (
    HaltReason,
    InstantaneousDescription,
    Machine,
    Outcome,
    RunResult,
    Status,
    StepResult,
    run_until_halt,
)
from .tape import Tape
from .transitions import Transition, TransitionTable

__all__ = [
    "Alphabet",
    "Move",
    "SymbolAlphabet",
    "blank_of",
    "Tape",
    "Transition",
    "TransitionTable",
    "Machine",
    "Status",
    "HaltReason",
    "Outcome",
    "StepResult",
    "RunResult",
    "InstantaneousDescription",
    "run_until_halt",
    "MachineSpecification",
    "MachineResult",
    "load_specification",
    "parse_specification",
    "TuringError",
    "DuplicateTransition",
    "FrozenTableError",
    "SymbolError",
]
