"""Lockfile parsers for the TOML lockfiles (uv.lock, poetry.lock).

Both formats store one ``[[package]]`` table per resolved distribution,
so every package the lockfile pins (direct and transitive) is reported.
"""

from __future__ import annotations

import logging
import tomllib
from typing import Iterable, List

from manifests.common import INTERPRETER_NAME, TOOLCHAIN_NAMES, extract_package_name, unique

logger = logging.getLogger(__name__)

UV_EXCLUDED = frozenset({INTERPRETER_NAME}) | TOOLCHAIN_NAMES
POETRY_EXCLUDED = frozenset({INTERPRETER_NAME, "pip"})


def _package_names(content: str, lockfile_name: str, excluded: Iterable[str]) -> List[str]:
    try:
        data = tomllib.loads(content) or {}

        names: List[str] = []
        package_list = data.get("package", [])
        if isinstance(package_list, list):
            for pkg in package_list:
                if isinstance(pkg, dict) and isinstance(pkg.get("name"), str):
                    name = extract_package_name(pkg["name"])
                    if name:
                        names.append(name)

        return unique(names, exclude=excluded)

    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse %s (invalid TOML): %s", lockfile_name, e)
        return []
    except (KeyError, ValueError, TypeError) as e:
        logger.warning("Failed to parse %s (invalid format): %s", lockfile_name, e)
        return []
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Unexpected error parsing %s: %s (type: %s)", lockfile_name, e, type(e).__name__)
        return []


def parse_uv_lock(content: str) -> List[str]:
    """Extract all locked package names from a uv.lock body.

    The interpreter and the installer/build toolchain (pip, setuptools,
    wheel, build) are excluded.
    """
    return _package_names(content, "uv.lock", UV_EXCLUDED)


def parse_poetry_lock(content: str) -> List[str]:
    """Extract all locked package names from a poetry.lock body.

    Only the interpreter and pip are excluded; poetry projects may depend on
    setuptools or wheel at runtime.
    """
    return _package_names(content, "poetry.lock", POETRY_EXCLUDED)
