"""Domain layer — the time value type and its arithmetic.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
