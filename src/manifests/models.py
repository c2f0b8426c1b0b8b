"""Data models for manifest discovery."""

from enum import Enum
from typing import Optional


class FileKind(Enum):
    """Recognized dependency manifests, declared in search priority order."""
    REQUIREMENTS_TXT = "requirements.txt"
    PYPROJECT_TOML = "pyproject.toml"
    UV_LOCK = "uv.lock"
    POETRY_LOCK = "poetry.lock"
    PIPFILE_LOCK = "Pipfile.lock"
    SETUP_PY = "setup.py"
    ENVIRONMENT_YML = "environment.yml"
    PIPFILE = "Pipfile"

    @classmethod
    def from_filename(cls, file_name: str) -> Optional["FileKind"]:
        """Exact (case-sensitive) file name lookup; None when unrecognized."""
        try:
            return cls(file_name)
        except ValueError:
            return None


CANDIDATE_FILES = tuple(kind.value for kind in FileKind)
