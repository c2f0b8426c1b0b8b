"""PyPI registry package.

``safe_get`` is re-exported here so tests can patch
``registry.pypi.client.pypi_pkg.safe_get`` in one place.
"""
from common.http_client import safe_get  # noqa: F401

from .client import PyPIClient  # noqa: E402

__all__ = ["PyPIClient", "safe_get"]
