"""Optional extensions that depend on packages outside the portable core.

Extensions check for their package at call time with ``is_package_available``
and raise ``ConfigurationError`` when it is missing.
"""

import importlib.util


def is_package_available(package_name: str) -> bool:
    """Check if a Python package is available.

    Args:
        package_name: Import name of the package to check

    Returns:
        True if package can be imported, False otherwise
    """
    return importlib.util.find_spec(package_name) is not None


__all__ = ["is_package_available"]
