"""CI/CD Sample Service — the JSON web service that the pipeline bundle builds, tests and deploys.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
