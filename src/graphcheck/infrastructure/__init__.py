"""Infrastructure layer — graph store, lazy engine, edge-list files.

This layer depends on stdlib and third-party libs (NetworkX).
It may implement domain contracts but must never import from services,
commands, or output.
"""
