"""Pipenv manifests: Pipfile (INI-like TOML subset) and Pipfile.lock (JSON)."""

from __future__ import annotations

import json
import logging
from typing import List

from errors import ManifestParseError
from manifests.common import INTERPRETER_NAME, extract_package_name, unique

logger = logging.getLogger(__name__)

PACKAGES_HEADER = "[packages]"


def parse_pipfile(content: str) -> List[str]:
    """Names declared under ``[packages]``; ``[dev-packages]`` is ignored."""
    try:
        names = []
        in_packages = False
        for line in content.split("\n"):
            trimmed = line.strip()
            if trimmed == PACKAGES_HEADER:
                in_packages = True
                continue
            if not in_packages:
                continue
            if trimmed.startswith("["):
                in_packages = False
                continue
            if not trimmed or trimmed.startswith("#") or "=" not in trimmed:
                continue
            key = trimmed.split("=", 1)[0].strip().replace('"', "").replace("'", "")
            name = extract_package_name(key)
            if name:
                names.append(name)
        return unique(names)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Unexpected error parsing Pipfile: %s (type: %s)", e, type(e).__name__)
        return []


def parse_pipfile_lock(content: str) -> List[str]:
    """Keys of the lockfile's ``default`` group. Malformed JSON yields []."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Failed to parse Pipfile.lock (invalid JSON): %s", e)
        return []
    try:
        if not isinstance(data, dict):
            raise ManifestParseError("Pipfile.lock top level is not an object")
        default = data.get("default")
        if not isinstance(default, dict):
            return []
        names = []
        for key in default:
            name = extract_package_name(key)
            if name:
                names.append(name)
        return unique(names, exclude={INTERPRETER_NAME})
    except ManifestParseError as e:
        logger.warning("Failed to parse Pipfile.lock: %s", e)
        return []
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Unexpected error parsing Pipfile.lock: %s (type: %s)", e, type(e).__name__)
        return []
