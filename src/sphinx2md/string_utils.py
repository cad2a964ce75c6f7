"""String helpers for Python API identifiers."""

from __future__ import annotations

from sphinx2md.config.defaults import IDENTIFIER_SEPARATOR


def get_last_part_from_full_identifier(full_identifier: str) -> str:
    """Return the final segment of a dotted identifier.

    ``"qiskit.circuit.QuantumCircuit"`` becomes ``"QuantumCircuit"``. A name
    without a separator is returned unchanged.
    """
    return full_identifier.rsplit(IDENTIFIER_SEPARATOR, 1)[-1]
