"""Merging validator results into a path-keyed error map."""

from __future__ import annotations

from typing import Any

from .exceptions import ValidatorResultError
from .types import ErrorMap


def merge_result(errors: ErrorMap, path: str, result: Any) -> None:
    """Merge a validator result into ``errors`` at ``path``.

    ``True`` adds nothing, ``False`` adds an empty message, a string is used as
    the message, and every entry of an error map is written at ``path`` plus
    its own subpath. Subpaths are concatenated verbatim, so producers must
    include their own ``.`` or ``[i]`` separator. Later writes to the same path
    replace earlier ones.

    Raises:
        ValidatorResultError: If ``result`` is none of the above
    """
    if result is True:
        return
    if result is False:
        errors[path] = ""
        return
    if isinstance(result, str):
        errors[path] = result
        return
    if isinstance(result, dict):
        for subpath, message in result.items():
            if not isinstance(subpath, str) or not isinstance(message, str):
                raise ValidatorResultError(
                    "Invalid schema result encountered: error maps must map strings to strings",
                    context={"path": path, "subpath": subpath, "message": message},
                )
            errors[path + subpath] = message
        return
    raise ValidatorResultError(
        "Invalid schema result encountered",
        context={"path": path, "result_type": type(result).__name__},
    )


__all__ = ["merge_result"]
