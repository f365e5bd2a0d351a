"""Wrapper for values narrowed to strings."""

from __future__ import annotations

from typing import Any

from valchain.predicates import Variant, predicate
from valchain.schema.base import ValuesMixin, Wrapper, format_value
from valchain.schema.root import validate


class StringSchema(ValuesMixin, Wrapper):
    """Wrapper returned by ``RootSchema.string()``."""

    __slots__ = ()
    variant = Variant.STRING

    @predicate("string.notEmpty", aliases=("notEmpty",))
    def not_empty(self) -> StringSchema:
        if self.value == "":
            self._fail("string.notEmpty", "Value is an empty string")
        return self

    @predicate("string.maxLength", aliases=("maxLength",))
    def max_length(self, limit: Any) -> StringSchema:
        limit = validate(limit).number().value
        length = len(self.value)
        if length > limit:
            self._fail(
                "string.maxLength",
                f"Value's length {length} is more than {format_value(limit)}",
                limit=limit,
                length=length,
            )
        return self
