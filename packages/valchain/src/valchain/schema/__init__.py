"""Wrapper variants and the ``validate`` entry point.

Importing this package registers every variant: ``RootSchema`` narrows into
``NumberSchema``, ``StringSchema`` or ``ArraySchema`` through the variant
table, so all four must be loaded before a chain can narrow.
"""

from .array import ArraySchema, apply_path
from .base import ValuesMixin, Wrapper, format_value
from .number import NumberSchema
from .root import RootSchema, validate
from .string import StringSchema

__all__ = [
    "ArraySchema",
    "NumberSchema",
    "RootSchema",
    "StringSchema",
    "ValuesMixin",
    "Wrapper",
    "apply_path",
    "format_value",
    "validate",
]
