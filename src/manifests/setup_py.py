"""Best-effort extraction from legacy setup.py scripts.

The script is never executed or imported; only the literal
``install_requires = [...]`` list is read.
"""

from __future__ import annotations

import logging
import re
from typing import List

from manifests.common import extract_package_name, unique

logger = logging.getLogger(__name__)

# The list ends at the first "]" outside a quoted string, so extras like
# "uvicorn[standard]" stay inside it.
_INSTALL_REQUIRES_RE = re.compile(r"""install_requires\s*=\s*\[((?:"[^"]*"|'[^']*'|[^\]"'])*)\]""")
_DOUBLE_QUOTED_RE = re.compile(r'"([^"]+)"')


def parse_setup_py(content: str) -> List[str]:
    try:
        match = _INSTALL_REQUIRES_RE.search(content)
        if not match:
            return []
        names = []
        for token in _DOUBLE_QUOTED_RE.findall(match.group(1)):
            name = extract_package_name(token)
            if name:
                names.append(name)
        return unique(names)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Unexpected error parsing setup.py: %s (type: %s)", e, type(e).__name__)
        return []
