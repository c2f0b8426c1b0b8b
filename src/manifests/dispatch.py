"""Select the parser for a manifest file name and run it."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from manifests.environment import parse_environment_yml
from manifests.lockfile_parser import parse_poetry_lock, parse_uv_lock
from manifests.models import FileKind
from manifests.pipfile import parse_pipfile, parse_pipfile_lock
from manifests.pyproject import parse_pyproject_toml
from manifests.requirements import parse_requirements_txt
from manifests.setup_py import parse_setup_py

logger = logging.getLogger(__name__)

Parser = Callable[[str], List[str]]

PARSERS: Dict[FileKind, Parser] = {
    FileKind.REQUIREMENTS_TXT: parse_requirements_txt,
    FileKind.PYPROJECT_TOML: parse_pyproject_toml,
    FileKind.UV_LOCK: parse_uv_lock,
    FileKind.POETRY_LOCK: parse_poetry_lock,
    FileKind.PIPFILE_LOCK: parse_pipfile_lock,
    FileKind.SETUP_PY: parse_setup_py,
    FileKind.ENVIRONMENT_YML: parse_environment_yml,
    FileKind.PIPFILE: parse_pipfile,
}


def parse_manifest(content: str, file_name: str) -> List[str]:
    """Extract package names from ``content`` using the parser for ``file_name``.

    Unrecognized names and parser failures both yield an empty list.
    """
    kind = FileKind.from_filename(file_name)
    if kind is None:
        logger.debug("No parser registered for %s", file_name)
        return []
    try:
        return list(PARSERS[kind](content))
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Error parsing %s: %s", file_name, e)
        return []
