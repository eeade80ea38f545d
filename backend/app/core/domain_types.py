"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - RecordId wraps int — ids are positive, unique per collection, never reused
    - Record is a plain JSON object (dict) — stores never hold model instances
    - All resource names and filter modes encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and URL path segments without custom encoders
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)

Record = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class ResourceName(str, Enum):
    """The 12 mock resources — value doubles as the URL path segment."""
    USERS = "users"
    POSTS = "posts"
    COMMENTS = "comments"
    ALBUMS = "albums"
    PHOTOS = "photos"
    TODOS = "todos"
    PRODUCTS = "products"
    CATEGORIES = "categories"
    TAGS = "tags"
    CARTS = "carts"
    ORDERS = "orders"
    REVIEWS = "reviews"

    @property
    def singular(self) -> str:
        """Lowercase singular noun, used in messages and delete envelopes."""
        if self.value.endswith("ies"):
            return self.value[:-3] + "y"
        return self.value[:-1]

    @property
    def label(self) -> str:
        """Capitalized singular noun, e.g. "Category"."""
        return self.singular.capitalize()


class FilterMode(str, Enum):
    """How a query-string filter value is compared against a record field."""
    EXACT = "exact"                        # str(value) == param
    CASE_INSENSITIVE = "case_insensitive"  # casefolded string equality
    CONTAINS = "contains"                  # param is a member of a list field
    BOOLEAN = "boolean"                    # value == (param == "true")
