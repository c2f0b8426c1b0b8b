"""Parser for conda environment files (environment.yml)."""

from __future__ import annotations

import logging
from typing import List

import yaml

from errors import ManifestParseError
from manifests.common import INTERPRETER_NAME, extract_package_name, unique

logger = logging.getLogger(__name__)


def parse_environment_yml(content: str) -> List[str]:
    """Conda package names from the ``dependencies`` sequence.

    Nested mappings (the ``pip:`` sub-list) are skipped, as are channel
    prefixes (``conda-forge::numpy``) and conda ``=`` pins.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        logger.warning("Failed to parse environment.yml (invalid YAML): %s", e)
        return []
    try:
        if not isinstance(data, dict):
            raise ManifestParseError("environment.yml top level is not a mapping")
        deps = data.get("dependencies") or []
        if not isinstance(deps, list):
            return []
        names = []
        for dep in deps:
            if not isinstance(dep, str):
                continue
            spec = dep.split("::", 1)[-1]
            name = extract_package_name(spec)
            if name:
                names.append(name)
        return unique(names, exclude={INTERPRETER_NAME})
    except ManifestParseError as e:
        logger.warning("Failed to parse environment.yml: %s", e)
        return []
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Unexpected error parsing environment.yml: %s (type: %s)", e, type(e).__name__)
        return []
