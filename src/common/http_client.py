"""Shared HTTP helpers used by the registry and repository clients.

Encapsulates request/timeout error handling so the clients avoid
duplicating try/except blocks. Unlike a CLI-only tool we never exit the
process here: the MCP server must survive a failed request, so transport
problems surface as ``TransportError``.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_headers, safe_url, Timer

logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    """Raised when a request could not be completed (timeout, DNS, reset...)."""


def default_headers(accept: str) -> Dict[str, str]:
    return {"Accept": accept, "User-Agent": Constants.USER_AGENT}


def safe_get(url: str, *, context: str, timeout: float, **kwargs: Any) -> requests.Response:
    """Perform a GET request with consistent error handling and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "github", "pypi").
        timeout: Per-call timeout in seconds.
        **kwargs: Passed through to requests.get.

    Raises:
        TransportError: On timeouts and connection-level failures.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context,
                    headers=safe_headers(kwargs.get("headers")),
                ),
            )
        try:
            res = requests.get(url, timeout=timeout, **kwargs)
        except requests.Timeout as exc:
            logger.warning("%s request timed out after %s seconds", context, timeout)
            raise TransportError(f"{context} request timed out after {timeout} seconds") from exc
        except requests.RequestException as exc:  # includes ConnectionError
            logger.warning("%s connection error: %s", context, exc)
            raise TransportError(f"{context} connection error: {exc}") from exc
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context,
                ),
            )
        return res
