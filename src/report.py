"""Render a ResolutionResult as a markdown report or a JSON-ready dict."""

from __future__ import annotations

from typing import Any, Dict, List

from analysis.license_classifier import CommercialCategory
from analysis.models import DependencyRecord, ResolutionOutcome, ResolutionResult

_SECTION_TITLES = (
    (CommercialCategory.FREE, "## ✅ FREE for Commercial Use"),
    (CommercialCategory.WARNING, "## ⚠️ WARNING - Check Commercial Use"),
    (CommercialCategory.PAID, "## 💰 PAYMENT REQUIRED for Commercial Use"),
    (CommercialCategory.UNKNOWN, "## ❓ UNKNOWN Commercial Use Status"),
)

_SUMMARY_LINES = (
    (CommercialCategory.FREE, "- ✅ Free for commercial use: **{}** packages"),
    (CommercialCategory.WARNING, "- ⚠️ Check commercial restrictions: **{}** packages"),
    (CommercialCategory.PAID, "- 💰 Payment required: **{}** packages"),
    (CommercialCategory.UNKNOWN, "- ❓ Unknown status: **{}** packages"),
)


def _record_line(index: int, record: DependencyRecord) -> str:
    license_label = record.license or "License unknown"
    return f"{index}. **{record.name}** ({license_label}) - {record.classification.note}"


def format_report(result: ResolutionResult) -> str:
    slug = result.locator.slug
    if result.outcome is ResolutionOutcome.NO_MANIFEST:
        return (
            f"❌ No dependency files found in repository {slug}.\n\n"
            f"Searched for: {', '.join(result.searched_files)}"
        )

    file_name = result.file_kind.value if result.file_kind else "manifest"
    if result.outcome is ResolutionOutcome.EMPTY_MANIFEST:
        return f"📦 Found {file_name} in {slug} but no dependencies were parsed."

    lines: List[str] = [f"📦 **Dependencies for {slug}** (from {file_name}):", ""]
    for category, title in _SECTION_TITLES:
        records = result.by_category(category)
        if not records:
            continue
        lines.append(f"{title} ({len(records)})")
        lines.append("")
        lines.extend(_record_line(i, r) for i, r in enumerate(records, start=1))
        lines.append("")

    lines.append("## 📊 Commercial Use Summary")
    for category, template in _SUMMARY_LINES:
        lines.append(template.format(len(result.by_category(category))))

    paid = len(result.by_category(CommercialCategory.PAID))
    if paid:
        lines.append("")
        lines.append(
            f"⚠️ **IMPORTANT**: {paid} package(s) may require payment for commercial use. "
            "Review licensing terms carefully!"
        )
    return "\n".join(lines) + "\n"


def result_to_dict(result: ResolutionResult) -> Dict[str, Any]:
    """JSON-serializable view of a result (used by ``scan --format json``)."""
    return {
        "repository": result.locator.slug,
        "outcome": result.outcome.value,
        "manifest": result.file_kind.value if result.file_kind else None,
        "branch": result.branch,
        "searched_files": list(result.searched_files),
        "dependencies": [
            {
                "name": r.name,
                "license": r.license,
                "license_status": r.status.value,
                "category": r.category.value,
                "note": r.classification.note,
                "error": r.error,
            }
            for r in result.records
        ],
        "summary": {
            category.value: len(result.by_category(category))
            for category, _ in _SECTION_TITLES
        },
    }
