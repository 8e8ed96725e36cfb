"""Exception hierarchy for jsonknobs_validate.

Validation keeps two channels apart:

- Value mismatches are never raised. They are reported through the error map
  returned by :func:`jsonknobs_validate.validate`.
- Programmer errors (a malformed schema, bad combinator arguments, a validator
  returning something that is not a result) are raised synchronously as
  subclasses of :class:`ConfigurationError`.

Exceptions raised by user-supplied validator functions are never wrapped and
propagate unchanged.

Example:
    ```python
    from jsonknobs_validate import SchemaError, validate

    try:
        validate({"tags": [str, 1, 2, 3]}, {"tags": []})
    except SchemaError as e:
        logger.error("Bad schema: %s", e)
        logger.error("Offending path: %s", e.context.get("path"))
    ```
"""

from typing import Any, Dict


class JsonknobsError(Exception):
    """Base exception for jsonknobs_validate.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (paths, types, etc.)
        details: Alternative to context (takes precedence when both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(JsonknobsError):
    """Raised for programmer errors: invalid schemas or settings.

    These are bugs to fix, not runtime conditions to handle per call.
    """

    pass


class SchemaError(ConfigurationError):
    """Raised when a schema has an unsupported shape or bad arguments.

    Example:
        ```python
        raise SchemaError(
            "Invalid schema at path '.tags'",
            context={"path": ".tags", "schema_type": "tuple"}
        )
        ```
    """

    pass


class ValidatorResultError(ConfigurationError):
    """Raised when a validator returns something other than a result.

    Valid results are ``True``, ``False``, a string, or an error map.
    """

    pass


class SettingsError(ConfigurationError):
    """Raised when validation settings cannot be loaded."""

    pass


class ValidationError(JsonknobsError):
    """Raised by :func:`jsonknobs_validate.ensure_valid` on a mismatch.

    The error map is available as ``context["errors"]``.

    Example:
        ```python
        try:
            ensure_valid(person, payload)
        except ValidationError as e:
            return {"status": 400, "errors": e.errors}
        ```
    """

    @property
    def errors(self) -> Dict[str, str]:
        """Path-keyed error messages of the failed validation."""
        return self.context.get("errors", {})


__all__ = [
    "JsonknobsError",
    "ConfigurationError",
    "SchemaError",
    "ValidatorResultError",
    "SettingsError",
    "ValidationError",
]
