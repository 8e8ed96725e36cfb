"""Shared type aliases and sentinels."""

from __future__ import annotations

from re import Pattern
from typing import Any, Callable, Dict, List, Union

#: Largest integer a JSON number can carry without losing precision.
MAX_SAFE_INTEGER = 2**53 - 1

#: Path-keyed error messages. The empty path denotes the validated value itself.
ErrorMap = Dict[str, str]

#: What a validator may return: ``True`` (match), ``False`` (mismatch without
#: detail), a message string, or an error map whose empty form means match.
ValidatorResult = Union[bool, str, ErrorMap]

ValidatorFunc = Callable[[Any], ValidatorResult]

#: Anything accepted as a schema before compilation.
SchemaLike = Union[
    ValidatorFunc,
    Pattern,
    None,
    str,
    int,
    float,
    bool,
    List[Any],
    Dict[str, Any],
]


class _Undefined:
    """Marker for a property that exists but holds no value."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


#: A property whose value is ``UNDEFINED`` is treated as absent.
UNDEFINED = _Undefined()
