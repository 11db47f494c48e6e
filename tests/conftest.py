from __future__ import annotations

from pathlib import Path

import pytest

from turingsim import Tape, TransitionTable

MACHINES_DIR = Path(__file__).resolve().parent.parent / "machines"


@pytest.fixture
def machines_dir() -> Path:
    return MACHINES_DIR


@pytest.fixture
def unary_table() -> TransitionTable:
    """q0 avanza sobre los 1 y escribe otro 1 en el primer blanco."""
    table = TransitionTable()
    table.insert("q0", "1", "q0", "1", "R")
    table.insert("q0", "_", "qf", "1", "S")
    return table


@pytest.fixture
def unary_tape() -> Tape:
    return Tape.from_input("111", "_", origin=0)


@pytest.fixture
def busy_beaver_table() -> TransitionTable:
    """Castor afanoso de 2 estados: 6 pasos y cuatro 1 en la cinta."""
    return TransitionTable.from_rules(
        [
            ("A", 0, "B", 1, "R"),
            ("A", 1, "B", 1, "L"),
            ("B", 0, "A", 1, "L"),
            ("B", 1, "H", 1, "R"),
        ]
    )
