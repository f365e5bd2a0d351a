"""Root wrapper and the ``validate`` entry point."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from valchain.predicates import Variant, predicate, wrapper_for
from valchain.rawtype import UNDEFINED, RawType, is_nan, raw_type
from valchain.schema.base import ValuesMixin, Wrapper, format_value

if TYPE_CHECKING:
    from valchain.schema.array import ArraySchema
    from valchain.schema.number import NumberSchema
    from valchain.schema.string import StringSchema


class RootSchema(ValuesMixin, Wrapper):
    """Wrapper for a value whose type has not been narrowed yet.

    Every predicate returns this wrapper on success, except ``number``,
    ``string`` and ``array``, which return the wrapper for the narrowed type.

    Example:
        ```python
        validate(None).not_null()
        # raises ValidationError(kind='notNull')
        validate(42).defined().not_null().number().positive()
        # NumberSchema(42)
        ```
    """

    __slots__ = ()
    variant = Variant.ROOT

    @predicate("undefined")
    def defined(self) -> RootSchema:
        if raw_type(self.value) is RawType.UNDEFINED:
            self._fail("undefined", "Value is undefined")
        return self

    @predicate("defined", aliases=("undefinedValue",))
    def undefined(self) -> RootSchema:
        if raw_type(self.value) is not RawType.UNDEFINED:
            self._fail("defined", f"Value {format_value(self.value)} is defined")
        return self

    @predicate("null", aliases=("null", "isNull"))
    def is_null(self) -> RootSchema:
        if self.value is not None:
            self._fail("null", f"Value {format_value(self.value)} is not None")
        return self

    @predicate("notNull", aliases=("notNull",))
    def not_null(self) -> RootSchema:
        if self.value is None:
            self._fail("notNull", "Value is None")
        return self

    @predicate("function", aliases=("function", "isFunction"))
    def is_function(self) -> RootSchema:
        if raw_type(self.value) is not RawType.FUNCTION:
            self._fail("function", f"Value {format_value(self.value)} is not a function")
        return self

    @predicate("number", narrows_to=Variant.NUMBER)
    def number(self) -> NumberSchema:
        if raw_type(self.value) is not RawType.NUMBER or is_nan(self.value):
            self._fail("number", f"Value {format_value(self.value)} is not a number")
        return wrapper_for(Variant.NUMBER)(self.value)

    @predicate("string", narrows_to=Variant.STRING)
    def string(self) -> StringSchema:
        if raw_type(self.value) is not RawType.STRING:
            self._fail("string", f"Value {format_value(self.value)} is not a string")
        return wrapper_for(Variant.STRING)(self.value)

    @predicate("array", narrows_to=Variant.ARRAY)
    def array(self) -> ArraySchema:
        if raw_type(self.value) is not RawType.ARRAY:
            self._fail("array", f"Value {format_value(self.value)} is not an array")
        return wrapper_for(Variant.ARRAY)(self.value)

    @predicate("boolean")
    def boolean(self) -> RootSchema:
        if self.value is not True and self.value is not False:
            self._fail("boolean", f"Value {format_value(self.value)} is not a boolean")
        return self

    @predicate("object")
    def object(self) -> RootSchema:
        """Fail unless the value is a mapping such as a ``dict``.

        Instances of ordinary classes (dataclasses, ``SimpleNamespace``, ...)
        are not objects here and are rejected.
        """
        if raw_type(self.value) is not RawType.OBJECT:
            self._fail("object", f"Value {format_value(self.value)} is not an object")
        return self


def validate(value: Any = UNDEFINED) -> RootSchema:
    """Start a validation chain for ``value``.

    Called without an argument, the chain wraps ``UNDEFINED``.

    Example:
        ```python
        from valchain import validate

        validate(5).number().min(1).max(10).integer()
        validate(["a", "b"]).array().items("string.notEmpty")
        validate("draft").values("draft", "published")
        ```
    """
    return RootSchema(value)
