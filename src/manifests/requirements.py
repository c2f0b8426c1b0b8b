"""Parser for pip requirements files (requirements.txt)."""

from __future__ import annotations

import logging
from typing import List

from manifests.common import extract_package_name, unique

logger = logging.getLogger(__name__)


def parse_requirements_txt(content: str) -> List[str]:
    """Extract package names from a requirements.txt body.

    Blank lines, ``#`` comments and ``-`` directives (``-r``, ``-e``,
    ``--index-url``...) never contribute a name.
    """
    try:
        names = []
        for line in content.split("\n"):
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or stripped.startswith("-"):
                continue
            name = extract_package_name(stripped)
            if name:
                names.append(name)
        return unique(names)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Unexpected error parsing requirements.txt: %s (type: %s)", e, type(e).__name__)
        return []
