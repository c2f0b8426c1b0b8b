"""Name extraction shared by every manifest parser.

A raw dependency token ("requests>=2.28,<3", "'numpy'", "{name = pandas}",
"uvicorn[standard]; python_version>'3.8'") is reduced to the bare
distribution name, or rejected.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

INTERPRETER_NAME = "python"
TOOLCHAIN_NAMES = frozenset({"setuptools", "wheel", "build", "pip"})

# Operators first; the remaining characters end a name in PEP 508 strings
# (markers, extras, direct references, inline comments, legacy "(>=1.0)").
_VERSION_OPERATORS = ("==", ">=", "<=", "~=", "!=", ">", "<", "~", "^", "*", "!", "=")
_NAME_TERMINATOR_RE = re.compile(r"[;\[@#(,\s]")
_VALID_NAME_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?$")


def strip_version_operators(token: str) -> str:
    """Cut the token at the earliest version operator."""
    cut = len(token)
    for op in _VERSION_OPERATORS:
        idx = token.find(op)
        if idx != -1 and idx < cut:
            cut = idx
    return token[:cut]


def extract_package_name(raw: str) -> Optional[str]:
    """Reduce a raw dependency specifier to a package name.

    Returns None when nothing that looks like a distribution name is left.
    """
    token = raw.strip().replace("{", "").replace("}", "")
    token = token.strip().strip("\"'").strip()
    token = strip_version_operators(token)
    token = _NAME_TERMINATOR_RE.split(token, maxsplit=1)[0]
    token = token.strip().strip("\"'")
    if not token or not _VALID_NAME_RE.match(token):
        return None
    return token


def unique(names: Iterable[str], exclude: Iterable[str] = ()) -> List[str]:
    """Deduplicate preserving first-seen order, dropping excluded names."""
    skip = set(exclude)
    seen = set()
    out: List[str] = []
    for name in names:
        if not name or name in skip or name in seen:
            continue
        seen.add(name)
        out.append(name)
    return out
