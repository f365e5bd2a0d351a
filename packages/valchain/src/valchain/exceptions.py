"""Exception hierarchy for valchain.

Every error raised by the package extends ``ValchainError``, which carries an
optional context dictionary alongside the message. Two leaves matter to
callers of a validation chain:

- ``ValidationError``: the wrapped value failed a predicate. It records the
  dotted failure ``kind`` (e.g. ``"number.positive"``), the offending
  ``value`` and, for nested failures, the ``cause``.
- ``PredicatePathError``: a predicate path handed to ``items()`` names a
  predicate that does not exist (or cannot be used in a path). This is a
  configuration problem in the calling code, not a data failure.

Example:
    ```python
    from valchain import validate
    from valchain.exceptions import ValidationError

    try:
        validate(-3).number().positive()
    except ValidationError as e:
        e.kind
        # 'number.positive'
        e.value
        # -3
    ```
"""

from typing import Any, Dict


class ValchainError(Exception):
    """Base exception for all valchain errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (both are supported)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context

    @property
    def message(self) -> str:
        """The human-readable error message."""
        return str(self.args[0]) if self.args else ""


class ValidationError(ValchainError):
    """Raised when a predicate in a validation chain fails.

    Attributes:
        kind: Dot-separated identifier of the failing predicate
            (``"string.maxLength"``, ``"items"``, ...)
        value: The value that failed the predicate
        cause: The nested error that triggered this failure, if any

    Example:
        ```python
        error = ValidationError(
            "Value 5 is less than 10",
            kind="number.min",
            value=5,
            context={"limit": 10},
        )
        error.context
        # {'limit': 10, 'kind': 'number.min', 'value': 5}
        ```
    """

    def __init__(
        self,
        message: str,
        kind: str,
        value: Any = None,
        cause: BaseException | None = None,
        context: Dict[str, Any] | None = None,
    ):
        context = dict(context or {})
        context.setdefault("kind", kind)
        context.setdefault("value", value)
        super().__init__(message, context=context)
        self.kind = kind
        self.value = value
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Return the error shape as a plain dictionary.

        Nested ``ValidationError`` causes are expanded recursively; any other
        cause is reported by its type name and message.
        """
        cause: Dict[str, Any] | None = None
        if isinstance(self.cause, ValidationError):
            cause = self.cause.to_dict()
        elif self.cause is not None:
            cause = {"type": type(self.cause).__name__, "message": str(self.cause)}
        return {
            "message": self.message,
            "kind": self.kind,
            "value": self.value,
            "cause": cause,
        }

    def __repr__(self) -> str:
        return f"ValidationError(kind={self.kind!r}, message={self.message!r})"


class ConfigurationError(ValchainError):
    """Raised when the library is configured or called incorrectly.

    Covers bad settings values and optional extensions whose required
    package is not installed.
    """

    pass


class PredicatePathError(ConfigurationError):
    """Raised when a predicate path cannot be resolved.

    Attributes:
        path: The full dotted path that was being compiled
        segment: The segment that could not be resolved (``None`` when the
            path as a whole is malformed)
    """

    def __init__(
        self,
        message: str,
        path: str,
        segment: str | None = None,
        context: Dict[str, Any] | None = None,
    ):
        context = dict(context or {})
        context.setdefault("path", path)
        context.setdefault("segment", segment)
        super().__init__(message, context=context)
        self.path = path
        self.segment = segment


class NotFoundError(ValchainError):
    """Raised when a requested item is not registered."""

    pass


class OperationError(ValchainError):
    """Raised when a registry operation fails, e.g. a duplicate key."""

    pass


__all__ = [
    "ValchainError",
    "ValidationError",
    "ConfigurationError",
    "PredicatePathError",
    "NotFoundError",
    "OperationError",
]
