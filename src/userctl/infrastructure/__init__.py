"""Infrastructure layer — file parsing and console I/O.

Depends on domain (for validation) and third-party libs (Click).
It must never import from services, strategies, commands, or output.
"""
