"""Vertex type alias and the enums shared by deciders, services, and CLI."""

from __future__ import annotations

from collections.abc import Hashable
from enum import StrEnum

# Vertices are opaque keys; edge-list ingestion yields ints or strings.
type Vertex = Hashable
type Edge = tuple[Vertex, Vertex]


class Mode(StrEnum):
    """Which reading of an edge list to analyze."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"
    BOTH = "both"

    def readings(self) -> tuple[bool, ...]:
        """Return the ``directed`` flags this mode expands to."""
        if self is Mode.BOTH:
            return (True, False)
        return (self is Mode.DIRECTED,)


class Strategy(StrEnum):
    """Hamiltonian search implementation."""

    ITERATIVE = "iterative"
    RECURSIVE = "recursive"


class Property(StrEnum):
    """The four decidable structural properties."""

    HAMILTONIAN_PATH = "hamiltonian_path"
    HAMILTONIAN_CYCLE = "hamiltonian_cycle"
    EULERIAN_PATH = "eulerian_path"
    EULERIAN_CYCLE = "eulerian_cycle"
