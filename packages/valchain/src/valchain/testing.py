"""Test utilities for valchain.

The availability checks work without pytest; the skip markers are only
defined when pytest is installed.

Example:
    ```python
    from valchain.testing import requires_markup

    @requires_markup
    def test_element():
        ...
    ```
"""

from typing import Any

from valchain.ext import is_package_available


def is_markup_available() -> bool:
    """Check if beautifulsoup4 is available for the markup extension."""
    return is_package_available("bs4")


# Pytest Markers


try:
    import pytest

    requires_markup = pytest.mark.skipif(
        not is_markup_available(),
        reason="beautifulsoup4 not installed",
    )

    def requires_package(package_name: str) -> Any:
        """Create a skip marker for a required package.

        Args:
            package_name: Import name of the required package

        Returns:
            pytest.mark.skipif marker
        """
        return pytest.mark.skipif(
            not is_package_available(package_name),
            reason=f"{package_name} not installed",
        )

except ImportError:
    # pytest not installed - provide placeholder markers
    requires_markup = None  # type: ignore

    def requires_package(package_name: str) -> Any:  # type: ignore
        return None


__all__ = [
    "is_markup_available",
    "is_package_available",
    "requires_markup",
    "requires_package",
]
