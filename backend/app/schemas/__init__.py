"""Pydantic Schemas — request body rules for the 12 resources.

Invariants:
    - Schemas validate at the system boundary (client JSON bodies)
"""
