"""Domain layer — graph contract, degree analysis, and the four deciders.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
