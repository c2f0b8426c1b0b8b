"""Configuration overrides for runtime tunables.

YAML values are applied first and CLI flags last, so the CLI has the highest
precedence. Neither step raises: a malformed value is logged and skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from constants import Constants

logger = logging.getLogger(__name__)


def _set(attr: str, value: Any, convert: Callable[[Any], Any] = str) -> None:
    if value is None:
        return
    try:
        setattr(Constants, attr, convert(value))
    except (TypeError, ValueError) as exc:
        logger.warning("Ignoring invalid value for %s: %r (%s)", attr, value, exc)


def _string_map(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        raise TypeError("expected a mapping of license name to note")
    return {str(k): str(v) for k, v in value.items()}


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = cfg.get(name)
    return section if isinstance(section, dict) else {}


def apply_config_overrides(cfg: Dict[str, Any]) -> None:
    """Map a loaded YAML config onto Constants.

    Recognized layout::

        http: {user_agent, manifest_timeout, metadata_timeout}
        github: {raw_base_url, primary_branch, fallback_branch}
        pypi: {base_url}
        lookup: {batch_size, batch_delay_sec}
        licenses: {max_length, extra_free: {...}, extra_paid: {...}}
    """
    if not isinstance(cfg, dict) or not cfg:
        return

    http = _section(cfg, "http")
    _set("USER_AGENT", http.get("user_agent"))
    _set("MANIFEST_REQUEST_TIMEOUT", http.get("manifest_timeout"), float)
    _set("METADATA_REQUEST_TIMEOUT", http.get("metadata_timeout"), float)

    github = _section(cfg, "github")
    _set("GITHUB_RAW_BASE", github.get("raw_base_url"))
    _set("PRIMARY_BRANCH", github.get("primary_branch"))
    _set("FALLBACK_BRANCH", github.get("fallback_branch"))

    pypi = _section(cfg, "pypi")
    _set("REGISTRY_URL_PYPI", pypi.get("base_url"))

    lookup = _section(cfg, "lookup")
    _set("LICENSE_BATCH_SIZE", lookup.get("batch_size"), int)
    _set("LICENSE_BATCH_DELAY_SEC", lookup.get("batch_delay_sec"), float)

    licenses = _section(cfg, "licenses")
    _set("LICENSE_MAX_LENGTH", licenses.get("max_length"), int)
    _set("EXTRA_FREE_LICENSES", licenses.get("extra_free"), _string_map)
    _set("EXTRA_PAID_LICENSES", licenses.get("extra_paid"), _string_map)


def apply_cli_overrides(args) -> None:
    """Apply CLI flags on top of whatever config has already set."""
    _set("PRIMARY_BRANCH", getattr(args, "BRANCH", None))
    _set("FALLBACK_BRANCH", getattr(args, "FALLBACK_BRANCH", None))
    _set("LICENSE_BATCH_SIZE", getattr(args, "BATCH_SIZE", None), int)
    timeout = getattr(args, "TIMEOUT", None)
    _set("MANIFEST_REQUEST_TIMEOUT", timeout, float)
    _set("METADATA_REQUEST_TIMEOUT", timeout, float)
