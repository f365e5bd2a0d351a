"""Wrapper base class and the ``values`` predicate shared by every variant."""

from __future__ import annotations

import logging
import reprlib
from typing import Any, ClassVar, NoReturn

from valchain.exceptions import ValidationError
from valchain.predicates import PredicateRegistry, Variant, predicate, register_variant
from valchain.rawtype import strictly_equals
from valchain.settings import get_settings

logger = logging.getLogger(__name__)


class _MessageRepr(reprlib.Repr):
    """Bounded repr that never lets a value's own ``__repr__`` error escape."""

    def repr_instance(self, x: Any, level: int) -> str:
        try:
            text = repr(x)
        except Exception:
            return _opaque(x)
        if len(text) > self.maxother:
            text = text[: self.maxother - 3] + "..."
        return text


def _opaque(value: Any) -> str:
    return f"<{type(value).__name__} object>"


def format_value(value: Any) -> str:
    """Return a repr of ``value`` bounded by the configured ``repr_limit``.

    Values whose ``__repr__`` raises are shown as ``<TypeName object>``.
    """
    limit = get_settings().repr_limit
    formatter = _MessageRepr()
    formatter.maxstring = limit
    formatter.maxother = limit
    try:
        text = formatter.repr(value)
    except Exception:
        text = _opaque(value)
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


def fail(
    kind: str,
    message: str,
    value: Any,
    cause: BaseException | None = None,
    **context: Any,
) -> NoReturn:
    """Raise a ValidationError, chaining ``cause`` when one is given."""
    error = ValidationError(message, kind=kind, value=value, cause=cause, context=context)
    if get_settings().log_failures:
        logger.debug("Validation failed [%s]: %s", kind, message)
    if cause is not None:
        raise error from cause
    raise error


class Wrapper:
    """A value under validation plus the predicates valid for its variant.

    Subclasses declare their predicates with ``@predicate``; the predicate
    table is collected from the class and its bases when the subclass is
    created. A subclass that sets ``variant`` in its own body is registered
    as the implementation of that variant.
    """

    __slots__ = ("_value",)

    variant: ClassVar[Variant | None] = None
    predicates: ClassVar[PredicateRegistry]

    def __init__(self, value: Any):
        self._value = value

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        specs = {}
        for klass in reversed(cls.__mro__):
            for attr, member in vars(klass).items():
                spec = getattr(member, "__predicate_spec__", None)
                if spec is not None:
                    specs[attr] = spec
        cls.predicates = PredicateRegistry(cls.__name__)
        for spec in specs.values():
            cls.predicates.register_spec(spec)
        if "variant" in vars(cls) and cls.variant is not None:
            register_variant(cls.variant, cls)

    @property
    def value(self) -> Any:
        """The wrapped value."""
        return self._value

    def _fail(self, kind: str, message: str, cause: BaseException | None = None, **context: Any) -> NoReturn:
        fail(kind, message, self._value, cause=cause, **context)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_value(self._value)})"


class ValuesMixin:
    """Membership predicate shared by the root, number and string wrappers."""

    __slots__ = ()

    @predicate("values")
    def values(self, *allowed: Any):
        """Fail unless the value strictly equals one of ``allowed``."""
        value = self.value  # type: ignore[attr-defined]
        if not any(strictly_equals(value, candidate) for candidate in allowed):
            self._fail(  # type: ignore[attr-defined]
                "values",
                f"Value {format_value(value)} is not one of {format_value(allowed)}",
                allowed=list(allowed),
            )
        return self
