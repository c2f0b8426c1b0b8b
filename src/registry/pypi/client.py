"""PyPI registry client: look up the declared license of a package."""
from __future__ import annotations

import json
import logging
from typing import Optional
from urllib.parse import quote

from constants import Constants
from common.http_client import TransportError, default_headers
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from errors import MetadataLookupFailure

from .discovery import license_from_metadata
import registry.pypi as pypi_pkg

logger = logging.getLogger(__name__)


class PyPIClient:
    """Package-metadata collaborator backed by the PyPI JSON API."""

    def __init__(self, registry_url: Optional[str] = None, timeout: Optional[float] = None):
        self.registry_url = registry_url or Constants.REGISTRY_URL_PYPI
        if not self.registry_url.endswith("/"):
            self.registry_url += "/"
        self.timeout = timeout if timeout is not None else Constants.METADATA_REQUEST_TIMEOUT

    def fetch_license(self, package_name: str) -> Optional[str]:
        """Return the normalized license string for ``package_name``.

        Returns:
            The license, or None when the package is unknown to the index or
            declares no license.

        Raises:
            MetadataLookupFailure: On transport errors, unexpected statuses and
                undecodable bodies.
        """
        fullurl = f"{self.registry_url}{quote(package_name, safe='')}/json"
        with Timer() as timer:
            try:
                res = pypi_pkg.safe_get(
                    fullurl,
                    context="pypi",
                    timeout=self.timeout,
                    headers=default_headers("application/json"),
                )
            except TransportError as exc:
                raise MetadataLookupFailure(str(exc), package_name=package_name) from exc

        if res.status_code == 404:
            logger.warning("Package %s not found on PyPI", package_name)
            return None
        if res.status_code != 200:
            logger.warning(
                "HTTP non-2xx handled",
                extra=extra_context(
                    event="http_response",
                    outcome="handled_non_2xx",
                    status_code=res.status_code,
                    duration_ms=timer.duration_ms(),
                    target=safe_url(fullurl),
                    package_manager="pypi",
                ),
            )
            raise MetadataLookupFailure(
                f"PyPI returned HTTP {res.status_code} for {package_name}",
                package_name=package_name,
            )

        try:
            data = json.loads(res.text)
        except json.JSONDecodeError as exc:
            raise MetadataLookupFailure(
                f"Couldn't decode PyPI response for {package_name}", package_name=package_name
            ) from exc

        license_str = license_from_metadata(data)
        if is_debug_enabled(logger):
            logger.debug(
                "License resolved",
                extra=extra_context(
                    event="license_lookup",
                    component="client",
                    outcome="found" if license_str else "absent",
                    duration_ms=timer.duration_ms(),
                    package_manager="pypi",
                ),
            )
        return license_str
