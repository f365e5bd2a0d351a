"""Fluent runtime validation of arbitrary values.

A chain starts with ``validate(value)`` and calls predicates that assert the
value's type and shape. Type-narrowing predicates (``number``, ``string``,
``array``) return a wrapper exposing the predicates for that type; the first
failing predicate raises a ``ValidationError`` carrying the failure ``kind``,
the offending ``value`` and, for nested failures, the ``cause``.

Example:
    ```python
    from valchain import ValidationError, validate

    validate(port).number().integer().min(1).max(65535)
    validate(tags).array().items("string.notEmpty")

    try:
        validate(config.get("mode")).string().values("fast", "safe")
    except ValidationError as e:
        if e.kind == "values":
            ...
    ```
"""

from valchain.exceptions import (
    ConfigurationError,
    NotFoundError,
    OperationError,
    PredicatePathError,
    ValchainError,
    ValidationError,
)
from valchain.predicates import PredicateSpec, Variant, compile_path, wrapper_for
from valchain.rawtype import UNDEFINED, RawType, raw_type
from valchain.schema import (
    ArraySchema,
    NumberSchema,
    RootSchema,
    StringSchema,
    Wrapper,
    validate,
)
from valchain.settings import ValidationSettings, configure, get_settings, reset_settings

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Entry point
    "validate",
    "UNDEFINED",
    # Type inspection
    "RawType",
    "raw_type",
    # Wrappers
    "Wrapper",
    "RootSchema",
    "NumberSchema",
    "StringSchema",
    "ArraySchema",
    # Predicate tables
    "PredicateSpec",
    "Variant",
    "compile_path",
    "wrapper_for",
    # Exceptions
    "ValchainError",
    "ValidationError",
    "ConfigurationError",
    "PredicatePathError",
    "NotFoundError",
    "OperationError",
    # Settings
    "ValidationSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
