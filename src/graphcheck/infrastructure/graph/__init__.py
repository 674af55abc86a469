"""NetworkX-backed graph store and the lazy per-file graph engine."""
