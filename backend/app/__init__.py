"""ResponseRift Application Package — instant mock JSON API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Explicit imports only, no star exports; __version__ is the single version source
"""

__version__ = "1.0.0"
