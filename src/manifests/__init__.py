"""Dependency manifest parsers."""

from manifests.dispatch import PARSERS, parse_manifest
from manifests.models import CANDIDATE_FILES, FileKind

__all__ = ["CANDIDATE_FILES", "FileKind", "PARSERS", "parse_manifest"]
