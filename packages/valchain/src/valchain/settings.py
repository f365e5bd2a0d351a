"""Process-wide settings for message formatting and failure logging.

Settings never change the outcome of a predicate; they only control how
failures are described and whether they are logged.

Environment variables:
    VALCHAIN_REPR_LIMIT: Maximum length of a value's repr inside an error
        message (default: 80)
    VALCHAIN_LOG_FAILURES: Emit a DEBUG record for every raised
        ValidationError (true/false, yes/no, 1/0; default: false)

Example:
    ```python
    from valchain.settings import configure, get_settings

    configure(repr_limit=20)
    get_settings().repr_limit
    # 20
    ```
"""

from __future__ import annotations

import dataclasses
import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from valchain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "yes", "1", "on")
_FALSE_VALUES = ("false", "no", "0", "off")


@dataclass(frozen=True)
class ValidationSettings:
    """Formatting and logging settings.

    Attributes:
        repr_limit: Maximum number of characters of a value's repr that is
            embedded in an error message; longer reprs are cut and end in
            ``"..."``
        log_failures: Whether every raised ValidationError is logged at DEBUG
    """

    ENV_PREFIX: ClassVar[str] = "VALCHAIN_"

    repr_limit: int = 80
    log_failures: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.repr_limit, int) or isinstance(self.repr_limit, bool):
            raise ConfigurationError(
                "repr_limit must be an integer",
                context={"repr_limit": self.repr_limit},
            )
        if self.repr_limit < 4:
            raise ConfigurationError(
                f"repr_limit must be at least 4, got {self.repr_limit}",
                context={"repr_limit": self.repr_limit},
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ValidationSettings:
        """Build settings from environment variables.

        Unparsable values are ignored with a warning and the default is kept.

        Args:
            environ: Mapping to read from (default: ``os.environ``)
        """
        environ = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        raw_limit = environ.get(f"{cls.ENV_PREFIX}REPR_LIMIT")
        if raw_limit is not None:
            try:
                limit = int(raw_limit)
                if limit < 4:
                    raise ValueError(raw_limit)
                overrides["repr_limit"] = limit
            except ValueError:
                logger.warning(
                    "Ignoring %sREPR_LIMIT=%r: expected an integer >= 4",
                    cls.ENV_PREFIX,
                    raw_limit,
                )

        raw_log = environ.get(f"{cls.ENV_PREFIX}LOG_FAILURES")
        if raw_log is not None:
            lowered = raw_log.strip().lower()
            if lowered in _TRUE_VALUES:
                overrides["log_failures"] = True
            elif lowered in _FALSE_VALUES:
                overrides["log_failures"] = False
            else:
                logger.warning(
                    "Ignoring %sLOG_FAILURES=%r: expected a boolean",
                    cls.ENV_PREFIX,
                    raw_log,
                )

        return cls(**overrides)


_settings: ValidationSettings | None = None
_lock = threading.Lock()


def get_settings() -> ValidationSettings:
    """Return the active settings, loading them from the environment once."""
    global _settings
    settings = _settings
    if settings is None:
        with _lock:
            if _settings is None:
                _settings = ValidationSettings.from_env()
            settings = _settings
    return settings


def configure(**overrides: Any) -> ValidationSettings:
    """Replace the active settings with ``overrides`` applied on top.

    Raises:
        ConfigurationError: If an override names an unknown setting or has an
            invalid value
    """
    global _settings
    known = {f.name for f in dataclasses.fields(ValidationSettings)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown setting(s): {', '.join(unknown)}",
            context={"unknown": unknown, "available": sorted(known)},
        )
    with _lock:
        base = _settings if _settings is not None else ValidationSettings.from_env()
        _settings = dataclasses.replace(base, **overrides)
        return _settings


def reset_settings() -> None:
    """Forget the active settings; the next lookup re-reads the environment."""
    global _settings
    with _lock:
        _settings = None


__all__ = [
    "ValidationSettings",
    "configure",
    "get_settings",
    "reset_settings",
]
