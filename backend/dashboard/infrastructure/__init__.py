"""Infrastructure Layer — database sessions, invoice persistence, view cache, logging.

Invariants:
    - The only layer that talks to the store or holds process-wide state
    - Implements the Protocols declared in core/repository_protocols.py
"""
