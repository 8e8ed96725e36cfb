"""Schema compilation and the recursive matcher.

A raw schema is interpreted by its shape, in this order:

1. A callable: a validator function returning a result.
2. A compiled regular expression: matches strings it can ``search``.
3. ``None``, a string, a number or a boolean: matches strictly equal values.
4. A list ``[element]``, ``[element, min]`` or ``[element, min, max]``:
   matches arrays whose length is within bounds and whose elements match.
5. A dict: matches objects with exactly the same keys, each value matching
   the corresponding sub-schema.

Anything else is a :class:`SchemaError`. :func:`compile_schema` resolves the
shape once into a tree of :class:`SchemaNode` objects tagged with a
:class:`SchemaKind`, so shape errors surface before any value is inspected.

Example:
    ```python
    node = compile_schema({"id": integer, "tags": [string, 0, 10]})
    node.kind
    # SchemaKind.OBJECT
    ```
"""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict

from .exceptions import SchemaError
from .predicates import array, integer, is_object, is_plain_object, plain_array, string
from .results import merge_result
from .settings import ValidateSettings, get_settings
from .types import UNDEFINED, ErrorMap, ValidatorResult


class SchemaKind(Enum):
    """Shape of a compiled schema node."""

    VALIDATOR = "validator"
    PATTERN = "pattern"
    LITERAL = "literal"
    ARRAY = "array"
    OBJECT = "object"


class SchemaNode(ABC):
    """A compiled schema node."""

    kind: SchemaKind

    @abstractmethod
    def match_into(
        self,
        value: Any,
        path: str,
        errors: ErrorMap,
        settings: ValidateSettings,
    ) -> None:
        """Match ``value`` and record any mismatch in ``errors``.

        Args:
            value: Value to match
            path: Path of ``value`` relative to the root being validated
            errors: Accumulator written in place
            settings: Settings of the enclosing validation call
        """
        pass


class Validator(ABC):
    """Base class for validators built by the schema combinators.

    A validator is a schema node in its own right. Calling it directly uses
    the process-wide settings; the matcher calls :meth:`check` so the settings
    of the enclosing validation call are used instead.

    Validators compose with ``&`` and ``|``:

        ```python
        ordered_pair = tuple_(number, number) & (lambda v: v[0] <= v[1])
        optional_counts = map_(string, integer) | None
        ```
    """

    @abstractmethod
    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        """Validate a value.

        Args:
            value: Value to validate
            settings: Settings controlling message verbosity

        Returns:
            ``True``, ``False``, a message, or an error map
        """
        pass

    def __call__(self, value: Any) -> ValidatorResult:
        return self.check(value, get_settings())

    def __and__(self, other: Any) -> Validator:
        from .combinators import and_

        return and_(self, other)

    def __rand__(self, other: Any) -> Validator:
        from .combinators import and_

        return and_(other, self)

    def __or__(self, other: Any) -> Validator:
        from .combinators import or_

        return or_(self, other)

    def __ror__(self, other: Any) -> Validator:
        from .combinators import or_

        return or_(other, self)


class ValidatorNode(SchemaNode):
    """A user function or combinator-built validator."""

    kind = SchemaKind.VALIDATOR

    def __init__(self, func: Any):
        self.func = func

    def match_into(self, value, path, errors, settings):
        if isinstance(self.func, Validator):
            result = self.func.check(value, settings)
        else:
            result = self.func(value)
        merge_result(errors, path, result)


class PatternNode(SchemaNode):
    """A regular expression matched against string values."""

    kind = SchemaKind.PATTERN

    def __init__(self, pattern: re.Pattern):
        self.pattern = pattern

    def match_into(self, value, path, errors, settings):
        if not string(value):
            errors[path] = settings.message("Expected string")
            return
        if self.pattern.search(value) is None:
            errors[path] = settings.message(
                f"String value does not match regexp {self.pattern.pattern!r}"
            )


class LiteralNode(SchemaNode):
    """A JSON primitive compared by strict equality."""

    kind = SchemaKind.LITERAL

    def __init__(self, literal: Any):
        self.literal = literal

    def equals(self, value: Any) -> bool:
        expected = self.literal
        if expected is None:
            return value is None
        if isinstance(expected, bool):
            return isinstance(value, bool) and value == expected
        if isinstance(expected, str):
            return isinstance(value, str) and value == expected
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return value == expected

    def match_into(self, value, path, errors, settings):
        if not self.equals(value):
            errors[path] = settings.message(f"Expected {json.dumps(self.literal)}")


class ArrayNode(SchemaNode):
    """An array by example: one element schema and optional length bounds."""

    kind = SchemaKind.ARRAY

    def __init__(self, element: SchemaNode, min_length: int = 0, max_length: int | None = None):
        self.element = element
        self.min_length = min_length
        self.max_length = max_length

    def match_into(self, value, path, errors, settings):
        if not array(value):
            errors[path] = settings.message("Expected array")
            return
        length = len(value)
        if length < self.min_length or (self.max_length is not None and length > self.max_length):
            upper = "inf" if self.max_length is None else self.max_length
            errors[path] = settings.message(
                f"Array not of expected length: {self.min_length} <= {length} <= {upper}"
            )
        # Length errors do not stop element checks.
        for i, item in enumerate(value):
            self.element.match_into(item, f"{path}[{i}]", errors, settings)


class ObjectNode(SchemaNode):
    """An object by example: exactly the declared properties must be present."""

    kind = SchemaKind.OBJECT

    def __init__(self, properties: Dict[str, SchemaNode]):
        self.properties = properties

    def match_into(self, value, path, errors, settings):
        if not is_object(value):
            errors[path] = settings.message("Expected object")
            return
        for prop in value:
            if prop not in self.properties:
                # Reported on the object itself, and nothing else is checked.
                errors[path] = settings.message(f"Unexpected property: {prop}")
                return
        for prop, node in self.properties.items():
            subpath = f"{path}.{prop}"
            if prop not in value or value[prop] is UNDEFINED:
                errors[subpath] = settings.message("Missing property")
                continue
            node.match_into(value[prop], subpath, errors, settings)


def _length_bound(bound: Any, path: str, position: int) -> int:
    if not integer(bound) or bound < 0:
        raise SchemaError(
            f"Invalid schema at path '{path}': array[{position}] must be a non-negative integer",
            context={"path": path, "bound": bound},
        )
    return int(bound)


def compile_schema(schema: Any, path: str = "") -> SchemaNode:
    """Resolve a raw schema into a tree of schema nodes.

    Compiled nodes are returned unchanged, so this is safe to call on
    anything accepted as a schema.

    Args:
        schema: Raw schema or compiled node
        path: Path of the schema within an enclosing schema, used in errors

    Returns:
        The compiled schema node

    Raises:
        SchemaError: If any part of the schema has an unsupported shape
    """
    if isinstance(schema, SchemaNode):
        return schema

    if isinstance(schema, type):
        raise SchemaError(
            f"Invalid schema at path '{path}': classes are not schemas, "
            f"use a predicate such as string or integer instead of {schema.__name__}",
            context={"path": path, "schema_type": schema.__name__},
        )

    if callable(schema):
        return ValidatorNode(schema)

    if isinstance(schema, re.Pattern):
        return PatternNode(schema)

    if schema is None or isinstance(schema, (str, int, float, bool)):
        return LiteralNode(schema)

    if plain_array(schema):
        if len(schema) < 1 or len(schema) > 3:
            raise SchemaError(
                f"Invalid schema at path '{path}': arrays must be of length 1 to 3",
                context={"path": path, "length": len(schema)},
            )
        min_length = 0
        max_length = None
        if len(schema) > 1:
            min_length = _length_bound(schema[1], path, 1)
        if len(schema) > 2:
            max_length = _length_bound(schema[2], path, 2)
        element = compile_schema(schema[0], f"{path}[]")
        return ArrayNode(element, min_length, max_length)

    if is_plain_object(schema):
        properties = {
            prop: compile_schema(sub_schema, f"{path}.{prop}")
            for prop, sub_schema in schema.items()
        }
        return ObjectNode(properties)

    raise SchemaError(
        f"Invalid schema at path '{path}'",
        context={"path": path, "schema_type": type(schema).__name__},
    )


def compile_properties(properties: Any, owner: str) -> Dict[str, SchemaNode]:
    """Compile a property-name to schema mapping passed to a combinator.

    Raises:
        SchemaError: If ``properties`` is not a plain dict or a sub-schema is invalid
    """
    if not is_plain_object(properties):
        raise SchemaError(
            f"Invalid schema: {owner} expects a dict of property schemas",
            context={"combinator": owner, "schema_type": type(properties).__name__},
        )
    return {
        prop: compile_schema(sub_schema, f".{prop}")
        for prop, sub_schema in properties.items()
    }


__all__ = [
    "SchemaKind",
    "SchemaNode",
    "Validator",
    "ValidatorNode",
    "PatternNode",
    "LiteralNode",
    "ArrayNode",
    "ObjectNode",
    "compile_schema",
    "compile_properties",
]
