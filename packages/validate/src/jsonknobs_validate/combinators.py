"""Schema combinators.

Each combinator checks its configuration when it is built, raising
:class:`SchemaError` for anything malformed, and returns a
:class:`Validator` usable anywhere a schema is.

Example:
    ```python
    person = object_(
        {"userid": re.compile(r"^[a-z]+"), "name": string},
        {"age": and_(integer, lambda age: 0 <= age < 150)},
    )
    group = {"supervisor": or_(None, person), "members": [person]}
    validate(group, payload)
    ```

Short-circuiting is deliberate and differs per combinator:

- ``and_`` stops at the first failing schema and returns its result as is.
- ``or_`` discards the errors of every failed variant.
- ``object_`` and ``plain_object`` stop at the first unexpected property.
- ``map_`` stops at the first invalid key, before any value is inspected.
- ``tuple_`` skips element checks when the length is wrong.

``and_all`` never short-circuits and merges the errors of every schema.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .engine import run_node
from .exceptions import SchemaError
from .predicates import array, integer, is_object, is_plain_object
from .results import merge_result
from .schema import SchemaNode, Validator, ValidatorNode, compile_properties, compile_schema
from .settings import ValidateSettings
from .types import UNDEFINED, ErrorMap, ValidatorResult


def _compile_all(schemata: tuple, owner: str) -> List[SchemaNode]:
    if len(schemata) < 1:
        raise SchemaError(
            f"Invalid schema: {owner} needs at least one schema",
            context={"combinator": owner},
        )
    return [compile_schema(schema) for schema in schemata]


def _check_bounds(owner: str, minimum: Any, maximum: Any) -> tuple[int, int | None]:
    if not integer(minimum) or minimum < 0:
        raise SchemaError(
            f"Invalid schema: {owner} minimum must be a non-negative integer",
            context={"combinator": owner, "minimum": minimum},
        )
    if maximum is None:
        return int(minimum), None
    if not integer(maximum) or maximum < 0:
        raise SchemaError(
            f"Invalid schema: {owner} maximum must be a non-negative integer",
            context={"combinator": owner, "maximum": maximum},
        )
    if minimum > maximum:
        raise SchemaError(
            f"Invalid schema: {owner} minimum ({minimum}) exceeds maximum ({maximum})",
            context={"combinator": owner, "minimum": minimum, "maximum": maximum},
        )
    return int(minimum), int(maximum)


def _flatten(nodes: List[SchemaNode], cls: type) -> List[SchemaNode]:
    # Splice in nested validators of the same kind.
    flattened: List[SchemaNode] = []
    for node in nodes:
        if isinstance(node, ValidatorNode) and isinstance(node.func, cls):
            flattened.extend(node.func.nodes)
        else:
            flattened.append(node)
    return flattened


def _present(value: Dict[Any, Any], prop: str) -> bool:
    return prop in value and value[prop] is not UNDEFINED


class AndValidator(Validator):
    """All schemas must match; the first failure is returned as is."""

    def __init__(self, nodes: List[SchemaNode]):
        self.nodes = nodes

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        for node in self.nodes:
            result = run_node(node, value, settings)
            if result is not True:
                return result
        return True


class AndAllValidator(Validator):
    """All schemas must match; errors from every schema are collected."""

    def __init__(self, nodes: List[SchemaNode]):
        self.nodes = nodes

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        errors: ErrorMap = {}
        for node in self.nodes:
            merge_result(errors, "", run_node(node, value, settings))
        return errors


class OrValidator(Validator):
    """At least one schema must match."""

    def __init__(self, nodes: List[SchemaNode]):
        self.nodes = nodes

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        for node in self.nodes:
            if run_node(node, value, settings) is True:
                return True
        return settings.message("or: value does not match any variant")


class ObjectValidator(Validator):
    """An object with required and optional properties.

    Args:
        required: Property name to schema for properties that must be present
        optional: Property name to schema for properties that may be present
        min_optional: Minimum number of optional properties present
        max_optional: Maximum number of optional properties present, or None
    """

    owner = "object_"

    def __init__(
        self,
        required: Dict[str, Any],
        optional: Dict[str, Any] | None = None,
        min_optional: int = 0,
        max_optional: int | None = None,
    ):
        self.required = compile_properties(required, self.owner)
        self.optional = {} if optional is None else compile_properties(optional, self.owner)
        # Checked once here rather than on every call.
        for prop in self.required:
            if prop in self.optional:
                raise SchemaError(
                    f"Invalid schema: property {prop} must not be both required and optional",
                    context={"combinator": self.owner, "property": prop},
                )
        self.min_optional, self.max_optional = _check_bounds(
            self.owner, min_optional, max_optional
        )

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        if not is_object(value):
            return settings.message("Expected object")

        for prop in value:
            if prop not in self.required and prop not in self.optional:
                return settings.message(f"Unexpected property: {prop}")

        errors: ErrorMap = {}
        for prop, node in self.required.items():
            path = f".{prop}"
            if not _present(value, prop):
                errors[path] = settings.message(f"Missing property {prop}")
                continue
            node.match_into(value[prop], path, errors, settings)

        optional_count = 0
        for prop, node in self.optional.items():
            if not _present(value, prop):
                continue
            optional_count += 1
            node.match_into(value[prop], f".{prop}", errors, settings)

        if optional_count < self.min_optional or (
            self.max_optional is not None and optional_count > self.max_optional
        ):
            errors[""] = settings.message("Wrong number of optional properties")
        return errors


class PlainObjectValidator(ObjectValidator):
    """Like :class:`ObjectValidator`, but the value must be an exact ``dict`` with string keys."""

    owner = "plain_object"

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        if not is_plain_object(value):
            return settings.message("Expected plain object")
        return super().check(value, settings)


class PartialObjectValidator(Validator):
    """Declared properties must be present and match; others are ignored."""

    def __init__(self, properties: Dict[str, Any]):
        self.properties = compile_properties(properties, "partial_object")

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        if not is_object(value):
            return settings.message("Expected object")

        errors: ErrorMap = {}
        for prop, node in self.properties.items():
            path = f".{prop}"
            if not _present(value, prop):
                errors[path] = settings.message(f"Missing property {prop}")
                continue
            node.match_into(value[prop], path, errors, settings)
        return errors


class TupleValidator(Validator):
    """An array of fixed length with one schema per position."""

    def __init__(self, nodes: List[SchemaNode]):
        self.nodes = nodes

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        if not array(value):
            return settings.message("Expected array")
        if len(value) != len(self.nodes):
            return settings.message(
                f"Unexpected length of tuple, got {len(value)}, expected {len(self.nodes)}"
            )

        errors: ErrorMap = {}
        for i, node in enumerate(self.nodes):
            node.match_into(value[i], f"[{i}]", errors, settings)
        return errors


class MapValidator(Validator):
    """An object used as a map: every key and every value has a schema.

    All keys are validated before any value; the first invalid key aborts
    with a single error on the object itself.
    """

    def __init__(
        self,
        key_schema: Any,
        value_schema: Any,
        min_entries: int = 0,
        max_entries: int | None = None,
    ):
        self.key_node = compile_schema(key_schema)
        self.value_node = compile_schema(value_schema)
        self.min_entries, self.max_entries = _check_bounds("map_", min_entries, max_entries)

    def check(self, value: Any, settings: ValidateSettings) -> ValidatorResult:
        if not is_object(value):
            return settings.message("Map is not an object")

        for key in value:
            if run_node(self.key_node, key, settings) is not True:
                return settings.message(f"Unexpected property {key}")

        entries = [(key, item) for key, item in value.items() if item is not UNDEFINED]
        errors: ErrorMap = {}
        for key, item in entries:
            self.value_node.match_into(item, f".{key}", errors, settings)
        if len(entries) < self.min_entries:
            errors[""] = settings.message("Not enough entries in the map")
        if self.max_entries is not None and len(entries) > self.max_entries:
            errors[""] = settings.message("Too many entries in the map")
        return errors


def and_(*schemata: Any) -> AndValidator:
    """Match every schema in order, returning the first failure unchanged.

    Raises:
        SchemaError: If no schema is given or one is invalid
    """
    return AndValidator(_flatten(_compile_all(schemata, "and_"), AndValidator))


def and_all(*schemata: Any) -> AndAllValidator:
    """Match every schema, merging the errors of all of them."""
    return AndAllValidator(_compile_all(schemata, "and_all"))


def or_(*schemata: Any) -> OrValidator:
    """Match at least one schema.

    Errors of the failed variants are not reported, only a single failure on
    the value itself.
    """
    return OrValidator(_flatten(_compile_all(schemata, "or_"), OrValidator))


def object_(
    required: Dict[str, Any],
    optional: Dict[str, Any] | None = None,
    min_optional: int = 0,
    max_optional: int | None = None,
) -> ObjectValidator:
    """Match an object with required and optional properties.

    Properties outside ``required`` and ``optional`` are rejected. When the
    number of optional properties present is out of bounds, an error is
    recorded on the object itself.

    Raises:
        SchemaError: If a property is both required and optional, a schema is
            invalid, or the bounds are malformed
    """
    return ObjectValidator(required, optional, min_optional, max_optional)


def plain_object(
    required: Dict[str, Any],
    optional: Dict[str, Any] | None = None,
    min_optional: int = 0,
    max_optional: int | None = None,
) -> PlainObjectValidator:
    """Like :func:`object_`, but also requires an exact ``dict`` with string keys."""
    return PlainObjectValidator(required, optional, min_optional, max_optional)


def partial_object(properties: Dict[str, Any]) -> PartialObjectValidator:
    """Match declared properties only, ignoring any others.

    Intended for composition with :func:`and_` and :func:`and_all`.
    """
    return PartialObjectValidator(properties)


def tuple_(*schemata: Any) -> TupleValidator:
    """Match an array with exactly one element per schema."""
    return TupleValidator(_compile_all(schemata, "tuple_"))


def map_(
    key_schema: Any,
    value_schema: Any,
    min_entries: int = 0,
    max_entries: int | None = None,
) -> MapValidator:
    """Match an object whose keys match ``key_schema`` and values ``value_schema``."""
    return MapValidator(key_schema, value_schema, min_entries, max_entries)


__all__ = [
    "AndValidator",
    "AndAllValidator",
    "OrValidator",
    "ObjectValidator",
    "PlainObjectValidator",
    "PartialObjectValidator",
    "TupleValidator",
    "MapValidator",
    "and_",
    "and_all",
    "or_",
    "object_",
    "plain_object",
    "partial_object",
    "tuple_",
    "map_",
]
