"""Infrastructure Layer — fixture loading, registry lifecycle and logging.

Invariants:
    - Process-wide state (the registry singleton, log handlers) lives here only
    - Filesystem access is confined to fixture loading at startup
"""
