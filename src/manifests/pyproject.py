"""Line-oriented dependency extraction for pyproject.toml.

pyproject.toml is shared by several tools (PEP 621 ``[project]``, Poetry,
setuptools, PEP 735 dependency groups), each declaring dependencies in its
own table or array. Rather than loading the whole document we walk it line
by line, switching into "scanning" mode when a known dependency section or
array starts, and collect names until it ends. This keeps working on files
that a strict TOML parser would reject.
"""

from __future__ import annotations

import logging
import re
from typing import List

from manifests.common import INTERPRETER_NAME, TOOLCHAIN_NAMES, extract_package_name, unique

logger = logging.getLogger(__name__)

SECTION_HEADERS = frozenset({
    "[project.dependencies]",
    "[tool.poetry.dependencies]",
    "[build-system.requires]",
    "[tool.setuptools.dependencies]",
    "[dependency-groups]",
})
OPTIONAL_SECTION_PREFIXES = (
    "[project.optional-dependencies.",
    "[tool.poetry.group.",
    "[tool.poetry.extras.",
)
PROJECT_HEADER = "[project]"

# Keys of [project] that sit next to the dependencies array.
METADATA_KEYS = frozenset({"name", "version", "description", "authors", "readme", "license"})

_DEPENDENCIES_ARRAY_RE = re.compile(r"^dependencies\s*=\s*\[")
_DEV_ARRAY_RE = re.compile(r"^dev\s*=\s*\[")
_FIRST_QUOTED_RE = re.compile(r"""["']([^"']+)["']""")
_QUOTED_STRING_RE = re.compile(r'"[^"]*"|\'[^\']*\'')
_QUOTED_OR_COMMENT_RE = re.compile(r'"[^"]*"|\'[^\']*\'|#.*$')
_KEY_RE = re.compile(r"^([^=\s]+)\s*=")
_BARE_IDENTIFIER_RE = re.compile(r"^[a-zA-Z0-9_-]+")


def _strip_comment(text: str) -> str:
    """Drop a trailing ``#`` comment that is not inside a quoted string."""
    return _QUOTED_OR_COMMENT_RE.sub(lambda m: "" if m.group(0).startswith("#") else m.group(0), text)


def _closes_array(text: str) -> bool:
    """True if ``]`` appears outside quoted strings (extras like ``pkg[x]`` don't count)."""
    return "]" in _QUOTED_STRING_RE.sub("", text)


def _quoted_items(text: str) -> List[str]:
    """Contents of each quoted string, pairing a quote only with its own kind."""
    return [s[1:-1] for s in _QUOTED_STRING_RE.findall(text) if len(s) > 2]


class _PyprojectScanner:
    """State machine over the lines of one pyproject.toml."""

    def __init__(self) -> None:
        self.names: List[str] = []
        self.in_dependencies = False
        self.current_section = ""

    def feed(self, line: str) -> None:
        trimmed = line.strip()
        if self._maybe_enter(trimmed):
            return
        if self.in_dependencies:
            self._scan(trimmed)

    def _maybe_enter(self, trimmed: str) -> bool:
        if trimmed in SECTION_HEADERS:
            self.in_dependencies = True
            self.current_section = trimmed
            return True
        if trimmed == PROJECT_HEADER:
            # Remember the table, but only its dependencies array is scanned.
            self.in_dependencies = False
            self.current_section = trimmed
            return True
        if trimmed.startswith(OPTIONAL_SECTION_PREFIXES):
            self.in_dependencies = True
            self.current_section = trimmed
            return True
        if _DEPENDENCIES_ARRAY_RE.match(trimmed) or _DEV_ARRAY_RE.match(trimmed):
            self._open_array(trimmed)
            return True
        # Subsumed by the rule above; kept as its own rule.
        if self.current_section == PROJECT_HEADER and _DEPENDENCIES_ARRAY_RE.match(trimmed):
            self._open_array(trimmed)
            return True
        return False

    def _open_array(self, trimmed: str) -> None:
        remainder = _strip_comment(trimmed.split("[", 1)[1])
        for item in _quoted_items(remainder):
            self._add(item)
        self.in_dependencies = not _closes_array(remainder)

    def _scan(self, trimmed: str) -> None:
        if trimmed.startswith("[") and trimmed != self.current_section:
            self.in_dependencies = False
            return
        if not trimmed or trimmed.startswith("#") or trimmed.startswith(";"):
            return
        if trimmed.startswith('"') or trimmed.startswith("'"):
            code = _strip_comment(trimmed)
            items = _quoted_items(code)
            if items:
                self._add(items[0])
            if _closes_array(code):
                self.in_dependencies = False
            return
        if trimmed == "]":
            # More dependency sections may follow; keep walking the file.
            self.in_dependencies = False
            return

        dep = ""
        if "=" in trimmed and "==" not in trimmed:
            # requests = "^2.28" / requests = {version = "^2.28", extras = [...]}
            match = _KEY_RE.match(trimmed)
            value = trimmed[match.end():].strip() if match else ""
            if value.startswith("["):
                # group = ["pkg>=1", ...] inside a table of arrays
                for item in _quoted_items(_strip_comment(value)):
                    self._add(item)
            elif match:
                dep = match.group(1)
        elif '"' in trimmed or "'" in trimmed:
            match = _FIRST_QUOTED_RE.search(trimmed)
            if match:
                dep = match.group(1)
        elif _BARE_IDENTIFIER_RE.match(trimmed):
            dep = trimmed
        if dep:
            self._add(dep)

    def _add(self, raw: str) -> None:
        name = extract_package_name(raw)
        if name:
            self.names.append(name)


def parse_pyproject_toml(content: str) -> List[str]:
    """Extract dependency names from every recognized section of a pyproject.toml.

    The interpreter (``python``), packaging toolchain entries (setuptools,
    wheel, build, pip) and ``[project]`` metadata keys are dropped from the
    result regardless of which section they appeared in.
    """
    try:
        scanner = _PyprojectScanner()
        for line in content.split("\n"):
            scanner.feed(line)
        excluded = {INTERPRETER_NAME} | TOOLCHAIN_NAMES | METADATA_KEYS
        return unique(scanner.names, exclude=excluded)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.warning("Unexpected error parsing pyproject.toml: %s (type: %s)", e, type(e).__name__)
        return []
