"""Data models for one dependency-license resolution request."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from analysis.license_classifier import CATEGORY_ORDER, Classification, CommercialCategory
from manifests.models import CANDIDATE_FILES, FileKind
from repository.url_normalize import RepoLocator


class LicenseStatus(Enum):
    """Where a record's license value came from."""
    DECLARED = "declared"
    ABSENT = "absent"  # index answered, no license declared / package not found
    UNAVAILABLE = "unavailable"  # lookup failed


class ResolutionOutcome(Enum):
    FOUND = "found"
    NO_MANIFEST = "no_manifest"
    EMPTY_MANIFEST = "empty_manifest"


@dataclass(frozen=True)
class DependencyRecord:
    name: str
    license: Optional[str]
    status: LicenseStatus
    classification: Classification
    error: Optional[str] = None

    @property
    def category(self) -> CommercialCategory:
        return self.classification.category


@dataclass
class ResolutionResult:
    """Aggregate handed to the report formatter."""
    locator: RepoLocator
    outcome: ResolutionOutcome
    file_kind: Optional[FileKind] = None
    branch: Optional[str] = None
    searched_files: Tuple[str, ...] = CANDIDATE_FILES
    records: List[DependencyRecord] = field(default_factory=list)

    def by_category(self, category: CommercialCategory) -> List[DependencyRecord]:
        return [r for r in self.records if r.category == category]


def order_by_category(records: List[DependencyRecord]) -> List[DependencyRecord]:
    """Stable sort into report order (free, warning, paid, unknown)."""
    rank = {category: i for i, category in enumerate(CATEGORY_ORDER)}
    return sorted(records, key=lambda r: rank[r.category])
