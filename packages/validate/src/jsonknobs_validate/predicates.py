"""Basic JSON type predicates.

Each predicate is a pure function from a value to ``bool`` and never raises,
so any of them can be used directly as a schema node:

    ```python
    validate({"name": string, "age": integer}, payload)
    ```
"""

from __future__ import annotations

import math
import sys
from typing import Any

from .types import MAX_SAFE_INTEGER


def boolean(value: Any) -> bool:
    return isinstance(value, bool)


def number(value: Any) -> bool:
    """True for finite numbers. Booleans are not numbers.

    Ints too large for a double are rejected, since a JSON parser working in
    doubles reads them as infinity.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return abs(value) <= sys.float_info.max
    return isinstance(value, float) and math.isfinite(value)


def integer(value: Any) -> bool:
    """True for integral numbers within the safe integer range.

    An integral float such as ``3.0`` counts, since JSON does not distinguish
    the two.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER
    if isinstance(value, float) and math.isfinite(value):
        return value.is_integer() and abs(value) <= MAX_SAFE_INTEGER
    return False


def string(value: Any) -> bool:
    return isinstance(value, str)


def array(value: Any) -> bool:
    return isinstance(value, list)


def plain_array(value: Any) -> bool:
    """True only for an exact ``list``, as produced by a JSON decoder."""
    return type(value) is list


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_plain_object(value: Any) -> bool:
    """True only for an exact ``dict`` whose keys are all strings."""
    if type(value) is not dict:
        return False
    return all(isinstance(key, str) for key in value)


__all__ = [
    "boolean",
    "number",
    "integer",
    "string",
    "array",
    "plain_array",
    "is_object",
    "is_plain_object",
]
