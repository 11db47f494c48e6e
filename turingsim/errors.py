from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .transitions import Transition


class TuringError(Exception):
    """Error base del paquete."""


class DuplicateTransition(TuringError):
    """Se intentó registrar una regla distinta para una clave ya ocupada."""

    def __init__(self, existing: "Transition", rejected: "Transition") -> None:
        self.existing = existing
        self.rejected = rejected
        super().__init__(
            f"Ya existe una transición para ({existing.state!r}, {existing.read!r}): "
            f"{existing.describe()} (rechazada: {rejected.describe()})"
        )


class FrozenTableError(TuringError):
    """La tabla de transiciones ya no admite cambios."""


class SymbolError(TuringError, ValueError):
    """Símbolo que no pertenece al alfabeto de la cinta."""
