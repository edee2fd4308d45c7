"""Core Layer — pure domain logic, no IO, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - All values exposed from core/ are immutable after construction
"""
