"""Services Layer — orchestrates IO around the pure invoice core.

Invariants:
    - Services receive their repository and view cache as arguments (no globals)
    - Routes call services; services never import from api/
"""
