"""PyPI discovery helpers: pick and tidy the license string from project metadata."""
from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from constants import Constants

_PREFIX_RES = (
    re.compile(r"^License :: "),
    re.compile(r"^License: "),
    re.compile(r"^License"),
)

# Applied in order; a later family wins when several appear.
_FAMILY_SHORT_NAMES = (
    ("MIT License", "MIT"),
    ("Apache License", "Apache 2.0"),
    ("BSD License", "BSD"),
    ("GNU General Public License", "GPL"),
    ("Mozilla Public License", "MPL"),
)


def _license_from_classifiers(classifiers: Any) -> Optional[str]:
    """Most specific segment of the first ``License ::`` trove classifier."""
    if not isinstance(classifiers, list):
        return None
    for c in classifiers:
        if isinstance(c, str) and c.startswith("License :: "):
            segment = c.split(" :: ")[-1].strip()
            return segment or None
    return None


def _extract_license_from_info(info: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
    """Pick the raw license value from a PyPI ``info`` block.

    Returns:
        Tuple of (raw_license, source_field)
    """
    for field in ("license_expression", "license", "license_text"):
        value = info.get(field)
        if isinstance(value, str) and value.strip():
            return value, field
    from_classifier = _license_from_classifiers(info.get("classifiers"))
    if from_classifier:
        return from_classifier, "classifiers"
    return None, None


def normalize_license(raw: Optional[str], max_length: Optional[int] = None) -> Optional[str]:
    """Tidy a raw license value into a short display string.

    Strips "License" prefixes, shortens well-known family names and truncates
    long values (often a full license text) to ``max_length`` characters.
    """
    if not raw:
        return None
    license_str = raw.strip()
    for prefix_re in _PREFIX_RES:
        license_str = prefix_re.sub("", license_str)
    license_str = license_str.strip()

    for family, short in _FAMILY_SHORT_NAMES:
        if family in license_str:
            license_str = short

    limit = max_length if max_length is not None else Constants.LICENSE_MAX_LENGTH
    if len(license_str) > limit:
        license_str = license_str[: limit - 3] + "..."
    return license_str or None


def license_from_metadata(data: Dict[str, Any]) -> Optional[str]:
    """Normalized license for a PyPI JSON API document, or None."""
    info = data.get("info") if isinstance(data, dict) else None
    if not isinstance(info, dict):
        return None
    raw, _ = _extract_license_from_info(info)
    return normalize_license(raw)
