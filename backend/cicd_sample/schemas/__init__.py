"""Pydantic Schemas — response contracts for API endpoints.

Design Decisions:
    - Separate from core records: schemas are the wire contract, core is the domain
"""
