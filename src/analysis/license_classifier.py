"""Commercial-use classification of declared license strings.

Rules are evaluated in a fixed order:

1. no license                      -> unknown
2. exact match in the free table   -> free
3. exact match in the paid table   -> paid
4. substring match, free table keys first, then paid table keys
5. generic copyleft markers        -> warning
6. "commercial" / "proprietary"    -> paid (generic note)
7. anything else                   -> unknown

Step 4 breaks ties free-before-paid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class CommercialCategory(Enum):
    FREE = "free"
    PAID = "paid"
    WARNING = "warning"
    UNKNOWN = "unknown"


# Display and sort order used by reports.
CATEGORY_ORDER: Tuple[CommercialCategory, ...] = (
    CommercialCategory.FREE,
    CommercialCategory.WARNING,
    CommercialCategory.PAID,
    CommercialCategory.UNKNOWN,
)


@dataclass(frozen=True)
class Classification:
    category: CommercialCategory
    note: str


FREE_NOTE = "✅ Free for commercial use"
UNAVAILABLE = Classification(CommercialCategory.UNKNOWN, "License information unavailable.")
UNRECOGNIZED = Classification(CommercialCategory.UNKNOWN, "❓ Unknown license - Verify commercial use terms")
GENERIC_PAID = Classification(CommercialCategory.PAID, "💰 Commercial/Proprietary license - Payment likely required")

_FREE_ENTRIES = (
    ("mit", FREE_NOTE),
    ("apache", FREE_NOTE),
    ("apache 2.0", FREE_NOTE),
    ("apache-2.0", FREE_NOTE),
    ("bsd", FREE_NOTE),
    ("bsd-3-clause", FREE_NOTE),
    ("bsd-2-clause", FREE_NOTE),
    ("isc", FREE_NOTE),
    ("mpl", FREE_NOTE),
    ("mozilla public license", FREE_NOTE),
    ("unlicense", FREE_NOTE),
    ("cc0", FREE_NOTE),
    ("zlib", FREE_NOTE),
    ("osi approved", "✅ Free for commercial use (OSI Approved)"),
)

_PAID_ENTRIES = (
    ("gpl", "⚠️ GPL - May require payment for commercial use"),
    ("gplv2", "⚠️ GPL v2 - May require payment for commercial use"),
    ("gplv3", "⚠️ GPL v3 - May require payment for commercial use"),
    ("gpl-2.0", "⚠️ GPL v2 - May require payment for commercial use"),
    ("gpl-3.0", "⚠️ GPL v3 - May require payment for commercial use"),
    ("agpl", "⚠️ AGPL - May require payment for commercial use"),
    ("agplv3", "⚠️ AGPL v3 - May require payment for commercial use"),
    ("copyleft", "⚠️ Copyleft license - May require payment for commercial use"),
    ("commercial", "💰 Commercial license - Payment required"),
    ("proprietary", "💰 Proprietary license - Payment required"),
    ("trial", "💰 Trial license - Payment required for production"),
    ("evaluation", "💰 Evaluation license - Payment required for production"),
)

_WARNING_MARKERS = (
    ("gnu", "⚠️ GNU license - Check commercial use restrictions"),
    ("copyleft", "⚠️ Copyleft license - Check commercial use restrictions"),
)
_PAID_MARKERS = ("commercial", "proprietary")

LicenseTable = Mapping[str, Classification]


@dataclass(frozen=True)
class LicenseTables:
    """The two lookup tables, read-only once built."""
    free: LicenseTable
    paid: LicenseTable


def _table(entries, category: CommercialCategory, extra: Optional[Mapping[str, str]]) -> LicenseTable:
    table = {key: Classification(category, note) for key, note in entries}
    for key, note in (extra or {}).items():
        key = str(key).strip().lower()
        if key and key not in table:
            table[key] = Classification(category, str(note))
    return MappingProxyType(table)


def build_license_tables(
    extra_free: Optional[Mapping[str, str]] = None,
    extra_paid: Optional[Mapping[str, str]] = None,
) -> LicenseTables:
    """Build the immutable lookup tables.

    Extra entries (from configuration) map a lower-cased license key to its
    note. They are appended after the built-in keys and never replace them,
    so built-in precedence is unchanged.
    """
    return LicenseTables(
        free=_table(_FREE_ENTRIES, CommercialCategory.FREE, extra_free),
        paid=_table(_PAID_ENTRIES, CommercialCategory.PAID, extra_paid),
    )


DEFAULT_TABLES = build_license_tables()


class LicenseClassifier:
    """Pure function of the license string, parameterised by the tables."""

    def __init__(self, tables: LicenseTables = DEFAULT_TABLES):
        self.tables = tables

    def classify(self, license_str: Optional[str]) -> Classification:
        if not license_str:
            return UNAVAILABLE

        lowered = license_str.lower()

        exact = self.tables.free.get(lowered) or self.tables.paid.get(lowered)
        if exact is not None:
            return exact

        for table in (self.tables.free, self.tables.paid):
            for key, value in table.items():
                if key in lowered:
                    return value

        for marker, note in _WARNING_MARKERS:
            if marker in lowered:
                return Classification(CommercialCategory.WARNING, note)

        if any(marker in lowered for marker in _PAID_MARKERS):
            return GENERIC_PAID

        logger.debug("Unrecognized license string: %s", license_str)
        return UNRECOGNIZED


_DEFAULT_CLASSIFIER = LicenseClassifier()


def classify_license(license_str: Optional[str]) -> Classification:
    """Classify with the built-in tables."""
    return _DEFAULT_CLASSIFIER.classify(license_str)
