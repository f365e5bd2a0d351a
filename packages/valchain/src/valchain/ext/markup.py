"""Markup element validation, gated on beautifulsoup4 being installed.

``MarkupSchema`` is a root wrapper with one extra predicate, ``element()``,
which passes only for a parsed markup element (a ``bs4.element.Tag`` that is
not the ``BeautifulSoup`` document itself).

Example:
    ```python
    from bs4 import BeautifulSoup
    from valchain.ext.markup import validate_markup

    soup = BeautifulSoup("<p>hi</p>", "html.parser")
    validate_markup(soup.p).element()
    validate_markup("<p>hi</p>").element()
    # raises ValidationError(kind='element')
    ```
"""

from __future__ import annotations

from typing import Any

from valchain.exceptions import ConfigurationError
from valchain.ext import is_package_available
from valchain.predicates import predicate
from valchain.rawtype import UNDEFINED
from valchain.schema.base import format_value
from valchain.schema.root import RootSchema

REQUIRED_PACKAGE = "bs4"


class MarkupSchema(RootSchema):
    """Root wrapper extended with the ``element`` predicate."""

    __slots__ = ()

    @predicate("element")
    def element(self) -> MarkupSchema:
        if not is_package_available(REQUIRED_PACKAGE):
            raise ConfigurationError(
                "element() requires beautifulsoup4, which is not installed",
                context={"package": "beautifulsoup4"},
            )
        from bs4 import BeautifulSoup
        from bs4.element import Tag

        value_type = type(self.value)
        is_element = issubclass(value_type, Tag) and not issubclass(value_type, BeautifulSoup)
        if not is_element:
            self._fail("element", f"Value {format_value(self.value)} is not a markup element")
        return self


def validate_markup(value: Any = UNDEFINED) -> MarkupSchema:
    """Start a validation chain that also offers ``element()``."""
    return MarkupSchema(value)


__all__ = ["MarkupSchema", "validate_markup"]
