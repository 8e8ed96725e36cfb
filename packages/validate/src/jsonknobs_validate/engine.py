"""Top-level validation entry points."""

from __future__ import annotations

import logging
from typing import Any, Literal

from .exceptions import ValidationError
from .schema import SchemaNode, compile_schema
from .settings import ValidateSettings, get_settings
from .types import ErrorMap

logger = logging.getLogger(__name__)


def run_node(node: SchemaNode, value: Any, settings: ValidateSettings) -> Literal[True] | ErrorMap:
    """Match ``value`` against a compiled node with a fresh error map."""
    errors: ErrorMap = {}
    node.match_into(value, "", errors, settings)
    if errors:
        return errors
    return True


def validate(
    schema: Any,
    value: Any,
    settings: ValidateSettings | None = None,
) -> Literal[True] | ErrorMap:
    """Validate a decoded JSON value against a schema.

    Args:
        schema: Raw schema or compiled schema node
        value: Decoded JSON value; it is never modified
        settings: Settings for this call; defaults to the process-wide settings

    Returns:
        ``True`` if the value matches, otherwise a non-empty error map keyed
        by path (``""`` is the value itself, ``.name`` a property, ``[i]`` an
        array element)

    Raises:
        SchemaError: If the schema has an unsupported shape
        ValidatorResultError: If a validator returns an invalid result
        Exception: Anything raised by a validator function, unchanged
    """
    if settings is None:
        settings = get_settings()
    node = compile_schema(schema)
    result = run_node(node, value, settings)
    if result is not True:
        logger.debug("Validation failed at %d path(s): %s", len(result), list(result))
    return result


def is_valid(schema: Any, value: Any, settings: ValidateSettings | None = None) -> bool:
    """Return whether ``value`` matches ``schema``."""
    return validate(schema, value, settings) is True


def ensure_valid(schema: Any, value: Any, settings: ValidateSettings | None = None) -> None:
    """Raise :class:`ValidationError` unless ``value`` matches ``schema``.

    Example:
        ```python
        try:
            ensure_valid(person, payload)
        except ValidationError as e:
            return {"status": 400, "errors": e.errors}
        ```
    """
    result = validate(schema, value, settings)
    if result is not True:
        paths = ", ".join(repr(path) for path in result)
        raise ValidationError(
            f"Value does not match schema at {paths}",
            context={"errors": result},
        )


__all__ = ["validate", "is_valid", "ensure_valid", "run_node"]
