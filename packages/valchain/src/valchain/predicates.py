"""Predicate tables and the predicate path compiler.

Every wrapper class owns a ``PredicateRegistry`` mapping predicate names to
``PredicateSpec`` records. The tables are built from methods marked with the
``@predicate`` decorator when the wrapper class is created, so the set of
predicates a wrapper exposes and the set a path can name are the same.

A predicate path such as ``"number.integer"`` is compiled by resolving each
segment in the table of the variant produced by the previous segment,
starting at the root variant:

    ```python
    from valchain.predicates import compile_path

    [spec.name for spec in compile_path("string.notEmpty")]
    # ['string', 'not_empty']
    compile_path("number.not_empty")
    # raises PredicatePathError: unknown predicate for number values
    ```
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from valchain.exceptions import NotFoundError, PredicatePathError
from valchain.registry import Registry

if TYPE_CHECKING:
    from valchain.schema.base import Wrapper

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

PATH_SEPARATOR = "."


class Variant(str, Enum):
    """The closed set of wrapper variants a chain can be in."""

    ROOT = "root"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"


@dataclass(frozen=True)
class PredicateSpec:
    """Description of one predicate method.

    Attributes:
        name: Python method name on the wrapper class
        kind: Failure kind raised by the predicate
        aliases: Extra names accepted in predicate paths
        narrows_to: Variant of the wrapper the predicate returns, or None
            when it returns the wrapper it was called on
        takes_arguments: Whether the predicate needs arguments (such
            predicates cannot appear in a path)
    """

    name: str
    kind: str
    aliases: tuple[str, ...] = ()
    narrows_to: Variant | None = None
    takes_arguments: bool = False

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    def invoke(self, wrapper: Wrapper) -> Wrapper:
        """Call the predicate on ``wrapper`` without arguments."""
        return getattr(wrapper, self.name)()


def predicate(
    kind: str,
    *,
    aliases: tuple[str, ...] = (),
    narrows_to: Variant | None = None,
) -> Callable[[F], F]:
    """Mark a wrapper method as a predicate.

    Args:
        kind: Failure kind the predicate raises
        aliases: Extra names the predicate answers to in paths
        narrows_to: Variant returned by a type-narrowing predicate
    """

    def decorator(func: F) -> F:
        parameters = list(inspect.signature(func).parameters.values())[1:]
        func.__predicate_spec__ = PredicateSpec(  # type: ignore[attr-defined]
            name=func.__name__,
            kind=kind,
            aliases=tuple(aliases),
            narrows_to=narrows_to,
            takes_arguments=bool(parameters),
        )
        return func

    return decorator


class PredicateRegistry(Registry[PredicateSpec]):
    """Predicate table of one wrapper class, keyed by name and alias."""

    def __init__(self, owner: str):
        super().__init__(f"{owner}.predicates")
        self._owner = owner

    @property
    def owner(self) -> str:
        return self._owner

    def register_spec(self, spec: PredicateSpec) -> None:
        """Register ``spec`` under its method name and every alias."""
        for key in spec.names:
            self.register(key, spec)

    def specs(self) -> list[PredicateSpec]:
        """Return each registered spec once, in registration order."""
        unique: dict[str, PredicateSpec] = {}
        for spec in self.list_items():
            unique.setdefault(spec.name, spec)
        return list(unique.values())

    def names(self) -> list[str]:
        """Return the Python method names of the registered predicates."""
        return [spec.name for spec in self.specs()]


_variants: Registry[type] = Registry("variants")


def register_variant(variant: Variant, wrapper_class: type[Wrapper]) -> None:
    """Bind ``variant`` to the wrapper class that implements it."""
    _variants.register(variant.value, wrapper_class)


def wrapper_for(variant: Variant) -> type[Wrapper]:
    """Return the wrapper class implementing ``variant``.

    Raises:
        NotFoundError: If no wrapper class is bound to ``variant``
    """
    return _variants.get(variant.value)


def compile_path(path: str) -> tuple[PredicateSpec, ...]:
    """Resolve a dotted predicate path into the specs to apply, in order.

    Raises:
        PredicatePathError: If the path is empty, has an empty segment, names
            an unknown predicate, or names a predicate that needs arguments
    """
    if not path:
        raise PredicatePathError("Predicate path is empty", path=path)

    variant = Variant.ROOT
    compiled: list[PredicateSpec] = []
    for segment in path.split(PATH_SEPARATOR):
        if not segment:
            raise PredicatePathError(
                f"Predicate path '{path}' contains an empty segment",
                path=path,
                segment=segment,
            )

        table = wrapper_for(variant).predicates
        try:
            spec = table.get(segment)
        except NotFoundError as e:
            raise PredicatePathError(
                f"Unknown predicate '{segment}' for {variant.value} values in path '{path}'",
                path=path,
                segment=segment,
                context={"variant": variant.value, "available": table.names()},
            ) from e

        if spec.takes_arguments:
            raise PredicatePathError(
                f"Predicate '{segment}' takes arguments and cannot be used in path '{path}'",
                path=path,
                segment=segment,
                context={"variant": variant.value},
            )

        compiled.append(spec)
        if spec.narrows_to is not None:
            variant = spec.narrows_to

    logger.debug("Compiled predicate path %r to %s", path, [s.name for s in compiled])
    return tuple(compiled)


__all__ = [
    "PATH_SEPARATOR",
    "PredicateRegistry",
    "PredicateSpec",
    "Variant",
    "compile_path",
    "predicate",
    "register_variant",
    "wrapper_for",
]
