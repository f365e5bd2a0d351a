"""Runtime type tags for arbitrary values.

``raw_type`` classifies a value into one of a small set of tags that the
predicates reason about. Classification is driven by ``type(value)`` and
``callable()`` rather than ``value.__class__``: ``isinstance`` consults a
spoofable ``__class__`` attribute, the concrete type does not.

Example:
    ```python
    from valchain.rawtype import UNDEFINED, RawType, raw_type

    raw_type(3.5)
    # <RawType.NUMBER: 'Number'>
    raw_type(float("nan")) is RawType.NUMBER
    # True
    raw_type(UNDEFINED)
    # <RawType.UNDEFINED: 'Undefined'>
    raw_type({1, 2})
    # 'set'
    ```
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from enum import Enum
from typing import Any


class RawType(str, Enum):
    """Type tags recognized by the validation predicates."""

    UNDEFINED = "Undefined"
    NULL = "Null"
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    ARRAY = "Array"
    FUNCTION = "Function"


class _Undefined:
    """Marker for "no value at all", distinct from ``None``."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[type, tuple]:
        return (_Undefined, ())


UNDEFINED = _Undefined()

# Tags compared by equality in ``strictly_equals``; everything else by identity.
PRIMITIVE_TYPES = frozenset(
    {RawType.UNDEFINED, RawType.NULL, RawType.NUMBER, RawType.STRING, RawType.BOOLEAN}
)


def raw_type(value: Any) -> RawType | str:
    """Return the runtime type tag of ``value``.

    Values that fall outside the ``RawType`` tags are reported by the name of
    their concrete class (``"set"``, ``"bytes"``, ``"datetime"``, ...).
    """
    value_type = type(value)
    if value_type is _Undefined:
        return RawType.UNDEFINED
    if value is None:
        return RawType.NULL
    # bool is an int subclass, so it must be checked first
    if issubclass(value_type, bool):
        return RawType.BOOLEAN
    if issubclass(value_type, numbers.Real):
        return RawType.NUMBER
    if issubclass(value_type, str):
        return RawType.STRING
    if issubclass(value_type, (list, tuple)):
        return RawType.ARRAY
    if issubclass(value_type, Mapping):
        return RawType.OBJECT
    if callable(value):
        return RawType.FUNCTION
    return value_type.__name__


def is_nan(value: Any) -> bool:
    """Return True if ``value`` is a NaN number."""
    if raw_type(value) is not RawType.NUMBER:
        return False
    if issubclass(type(value), numbers.Integral):
        return False
    return math.isnan(value)


def strictly_equals(left: Any, right: Any) -> bool:
    """Compare two values without cross-type coercion.

    Primitive tags compare by ``==`` once both sides share a tag, so ``True``
    never matches ``1`` and NaN never matches itself. Arrays, objects,
    functions and other values compare by identity.
    """
    left_type = raw_type(left)
    if left_type != raw_type(right):
        return False
    if left_type in PRIMITIVE_TYPES:
        return bool(left == right)
    return left is right


__all__ = [
    "RawType",
    "UNDEFINED",
    "raw_type",
    "is_nan",
    "strictly_equals",
]
