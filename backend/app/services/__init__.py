"""Services Layer — validated reads and writes against the resource registry.

Design Decisions:
    - One generic service parameterized by ResourceDefinition (no per-resource classes)
"""
