"""Request Body Parsing — raw JSON decode, shape checks left to the validators.

Invariants:
    - Empty or non-JSON bodies raise MalformedBodyError (→ 400 "Invalid JSON payload")
    - NaN / Infinity tokens and numbers that overflow to inf are malformed:
      stored records must always render as standard JSON
    - Any JSON value is returned as-is (objects, arrays, null) — PayloadValidator
      reports non-object bodies

Design Decisions:
    - Read bytes ourselves instead of declaring a pydantic body model: the
      validators must see unknown input to build the resource-specific error list
"""

import json
import math
from typing import Any

from fastapi import Request

from app.core.errors import MalformedBodyError


def _reject_constant(token: str) -> float:
    raise ValueError(f"Non-standard JSON constant {token}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {literal}")
    return value


async def read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        raise MalformedBodyError()
    try:
        return json.loads(
            raw, parse_constant=_reject_constant, parse_float=_finite_float,
        )
    except ValueError:
        raise MalformedBodyError()
