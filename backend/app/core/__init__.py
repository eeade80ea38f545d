"""Core Layer — in-memory stores and pure request semantics, no HTTP, no IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Query, payload and reference checks are pure functions over plain dicts

Design Decisions:
    - Functional core separated from imperative shell: routes and services
      do the IO, core decides what the answer is
"""
