"""Route Modules — generated resource/nested routers plus index and health.

Invariants:
    - Each module builds its own APIRouter with prefix and tags
    - Routes never contain business logic (delegate to services)
"""
