"""graphcheck — Hamiltonian and Eulerian existence checks for edge-list graphs."""

__version__ = "0.1.0"
