"""Validation of decoded JSON values against schemas written by example.

A schema is either written by example or built with combinators:

- **Literals** (``None``, strings, numbers, booleans) match equal values
- **Patterns** (compiled regular expressions) match strings
- **Arrays** ``[element, min, max]`` match lists of matching elements
- **Dicts** match objects with exactly the same properties
- **Validators** are functions returning ``True``, ``False``, a message, or
  an error map
- **Combinators** (``object_``, ``plain_object``, ``partial_object``,
  ``tuple_``, ``map_``, ``and_``, ``and_all``, ``or_``) build validators

Example:
    ```python
    import re
    from jsonknobs_validate import and_, integer, or_, string, validate

    trimmed = and_(string, lambda s: s == s.strip())
    person = {
        "userid": re.compile(r"^[a-z]+"),
        "name": trimmed,
        "age": or_(None, and_(integer, lambda age: 0 <= age < 150)),
        "hobbies": [trimmed],
    }

    validate(person, {"userid": 1, "name": " ", "age": 200, "hobbies": []})
    # {'.userid': '', '.name': '', '.age': ''}
    ```
"""

from jsonknobs_validate.combinators import (
    AndAllValidator,
    AndValidator,
    MapValidator,
    ObjectValidator,
    OrValidator,
    PartialObjectValidator,
    PlainObjectValidator,
    TupleValidator,
    and_,
    and_all,
    map_,
    object_,
    or_,
    partial_object,
    plain_object,
    tuple_,
)
from jsonknobs_validate.engine import ensure_valid, is_valid, validate
from jsonknobs_validate.exceptions import (
    ConfigurationError,
    JsonknobsError,
    SchemaError,
    SettingsError,
    ValidationError,
    ValidatorResultError,
)
from jsonknobs_validate.predicates import (
    array,
    boolean,
    integer,
    is_object,
    is_plain_object,
    number,
    plain_array,
    string,
)
from jsonknobs_validate.results import merge_result
from jsonknobs_validate.schema import SchemaKind, SchemaNode, Validator, compile_schema
from jsonknobs_validate.settings import (
    ValidateSettings,
    configure,
    get_settings,
    reset_settings,
)
from jsonknobs_validate.types import (
    MAX_SAFE_INTEGER,
    UNDEFINED,
    ErrorMap,
    SchemaLike,
    ValidatorResult,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Validation
    "validate",
    "is_valid",
    "ensure_valid",
    "compile_schema",
    "merge_result",
    "SchemaKind",
    "SchemaNode",
    "Validator",
    # Combinators
    "and_",
    "and_all",
    "or_",
    "object_",
    "plain_object",
    "partial_object",
    "tuple_",
    "map_",
    "AndValidator",
    "AndAllValidator",
    "OrValidator",
    "ObjectValidator",
    "PlainObjectValidator",
    "PartialObjectValidator",
    "TupleValidator",
    "MapValidator",
    # Predicates
    "boolean",
    "number",
    "integer",
    "string",
    "array",
    "plain_array",
    "is_object",
    "is_plain_object",
    # Settings
    "ValidateSettings",
    "get_settings",
    "configure",
    "reset_settings",
    # Types
    "ErrorMap",
    "ValidatorResult",
    "SchemaLike",
    "UNDEFINED",
    "MAX_SAFE_INTEGER",
    # Exceptions
    "JsonknobsError",
    "ConfigurationError",
    "SchemaError",
    "ValidatorResultError",
    "SettingsError",
    "ValidationError",
]
