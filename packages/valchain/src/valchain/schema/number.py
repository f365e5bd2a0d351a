"""Wrapper for values narrowed to numbers."""

from __future__ import annotations

import math
import numbers
from typing import Any

from valchain.predicates import Variant, predicate
from valchain.schema.base import ValuesMixin, Wrapper, format_value
from valchain.schema.root import validate


def _require_number(limit: Any) -> Any:
    # Argument errors surface unchanged, with their own "number" kind
    return validate(limit).number().value


class NumberSchema(ValuesMixin, Wrapper):
    """Wrapper returned by ``RootSchema.number()``.

    The wrapped value is a real number and never NaN; infinities are allowed
    except by ``integer()``.
    """

    __slots__ = ()
    variant = Variant.NUMBER

    @predicate("number.min")
    def min(self, limit: Any) -> NumberSchema:
        limit = _require_number(limit)
        if self.value < limit:
            self._fail(
                "number.min",
                f"Value {format_value(self.value)} is less than {format_value(limit)}",
                limit=limit,
            )
        return self

    @predicate("number.max")
    def max(self, limit: Any) -> NumberSchema:
        limit = _require_number(limit)
        if self.value > limit:
            self._fail(
                "number.max",
                f"Value {format_value(self.value)} is more than {format_value(limit)}",
                limit=limit,
            )
        return self

    @predicate("number.positive")
    def positive(self) -> NumberSchema:
        if self.value <= 0:
            self._fail("number.positive", f"Value {format_value(self.value)} is not positive")
        return self

    @predicate("number.integer")
    def integer(self) -> NumberSchema:
        value = self.value
        if not issubclass(type(value), numbers.Integral):
            if not math.isfinite(value) or value != math.floor(value):
                self._fail("number.integer", f"Value {format_value(value)} is not an integer")
        return self
