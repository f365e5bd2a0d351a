"""Wrapper for values narrowed to arrays, and the ``items`` dispatcher.

``items`` accepts two forms of element check:

- a callable, invoked with each element in index order; any exception it
  raises fails the array
- a predicate path such as ``"number.integer"``, applied to each element as
  if the caller had written ``validate(element).number().integer()``

Example:
    ```python
    validate([1, 2, 3]).array().items("number.integer")

    def check_user(user):
        validate(user).object()
        validate(user.get("name")).string().not_empty()

    validate(users).array().items(check_user)
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from valchain.exceptions import PredicatePathError, ValidationError
from valchain.predicates import PredicateSpec, Variant, compile_path, predicate
from valchain.schema.base import Wrapper, fail, format_value
from valchain.schema.root import validate

logger = logging.getLogger(__name__)

ItemCheck = Callable[[Any], Any]


def apply_path(compiled: Sequence[PredicateSpec], item: Any) -> Wrapper:
    """Thread ``item`` through the compiled predicates of a path."""
    wrapper: Wrapper = validate(item)
    for spec in compiled:
        wrapper = spec.invoke(wrapper)
    return wrapper


def _describe(error: BaseException) -> str:
    if isinstance(error, ValidationError):
        return error.message
    try:
        return f"{type(error).__name__}: {error}"
    except Exception:
        return type(error).__name__


def _item_check(spec: Any) -> ItemCheck | None:
    if isinstance(spec, str):
        compiled = compile_path(spec)
        return lambda item: apply_path(compiled, item)
    if callable(spec):
        return spec
    return None


class ArraySchema(Wrapper):
    """Wrapper returned by ``RootSchema.array()``.

    Lists and tuples are arrays.
    """

    __slots__ = ()
    variant = Variant.ARRAY

    @predicate("items")
    def items(self, spec: str | ItemCheck) -> ArraySchema:
        """Validate every element against ``spec``, stopping at the first failure.

        Args:
            spec: A callable taking one element, or a dotted predicate path

        Raises:
            ValidationError: kind ``items``; ``cause`` holds the element's error
                and ``context["index"]`` its position
            PredicatePathError: If ``spec`` is a path that cannot be compiled
        """
        check = _item_check(spec)
        if check is None:
            fail(
                "items",
                f"items() expects a callable or a predicate path, got {format_value(spec)}",
                spec,
            )

        for index, item in enumerate(self.value):
            try:
                check(item)
            except PredicatePathError:
                raise
            except Exception as error:
                logger.debug("Item %d failed: %s", index, type(error).__name__)
                self._fail(
                    "items",
                    f"Item at index {index} failed validation: {_describe(error)}",
                    cause=error,
                    index=index,
                    item=item,
                )
        return self
