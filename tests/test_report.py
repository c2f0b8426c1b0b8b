"""Tests for report rendering."""

import json

from analysis.license_classifier import classify_license
from analysis.models import (
    DependencyRecord,
    LicenseStatus,
    ResolutionOutcome,
    ResolutionResult,
    order_by_category,
)
from manifests import FileKind
from report import format_report, result_to_dict
from repository.url_normalize import RepoLocator

LOCATOR = RepoLocator(owner="octo", repo="demo")


def _record(name, license_str, status=LicenseStatus.DECLARED, error=None):
    return DependencyRecord(
        name=name,
        license=license_str,
        status=status,
        classification=classify_license(license_str),
        error=error,
    )


def _found(records):
    return ResolutionResult(
        locator=LOCATOR,
        outcome=ResolutionOutcome.FOUND,
        file_kind=FileKind.REQUIREMENTS_TXT,
        branch="main",
        records=order_by_category(records),
    )


class TestFormatReport:
    """Markdown output."""

    def test_no_manifest(self):
        result = ResolutionResult(locator=LOCATOR, outcome=ResolutionOutcome.NO_MANIFEST)
        text = format_report(result)

        assert text.startswith("❌ No dependency files found in repository octo/demo.")
        for name in ("requirements.txt", "pyproject.toml", "uv.lock", "poetry.lock",
                     "Pipfile.lock", "setup.py", "environment.yml", "Pipfile"):
            assert name in text

    def test_empty_manifest(self):
        result = ResolutionResult(
            locator=LOCATOR,
            outcome=ResolutionOutcome.EMPTY_MANIFEST,
            file_kind=FileKind.SETUP_PY,
        )
        assert format_report(result) == "📦 Found setup.py in octo/demo but no dependencies were parsed."

    def test_sections_and_summary(self):
        text = format_report(_found([
            _record("requests", "MIT"),
            _record("gpl-package", "GPL"),
            _record("mystery", None, status=LicenseStatus.ABSENT),
        ]))

        assert "📦 **Dependencies for octo/demo** (from requirements.txt):" in text
        assert "## ✅ FREE for Commercial Use (1)" in text
        assert "1. **requests** (MIT) - ✅ Free for commercial use" in text
        assert "## 💰 PAYMENT REQUIRED for Commercial Use (1)" in text
        assert "## ❓ UNKNOWN Commercial Use Status (1)" in text
        assert "1. **mystery** (License unknown) - License information unavailable." in text
        assert "WARNING - Check Commercial Use" not in text
        assert "- ✅ Free for commercial use: **1** packages" in text
        assert "- ⚠️ Check commercial restrictions: **0** packages" in text
        assert "⚠️ **IMPORTANT**: 1 package(s) may require payment for commercial use." in text

    def test_section_order(self):
        text = format_report(_found([
            _record("gpl-package", "GPL"),
            _record("gnu-doc", "GNU Free Documentation License"),
            _record("requests", "MIT"),
        ]))
        free = text.index("FREE for Commercial Use")
        warning = text.index("WARNING - Check Commercial Use")
        paid = text.index("PAYMENT REQUIRED")
        assert free < warning < paid

    def test_no_paid_warning_without_paid_packages(self):
        text = format_report(_found([_record("requests", "MIT")]))
        assert "IMPORTANT" not in text


class TestResultToDict:
    """JSON view."""

    def test_serializable(self):
        failed = _record("broken", None, status=LicenseStatus.UNAVAILABLE, error="timeout")
        data = result_to_dict(_found([_record("requests", "MIT"), failed]))

        assert json.loads(json.dumps(data)) == data
        assert data["repository"] == "octo/demo"
        assert data["outcome"] == "found"
        assert data["manifest"] == "requirements.txt"
        assert data["summary"] == {"free": 1, "warning": 0, "paid": 0, "unknown": 1}
        broken = data["dependencies"][1]
        assert broken["license_status"] == "unavailable"
        assert broken["error"] == "timeout"

    def test_no_manifest(self):
        data = result_to_dict(ResolutionResult(locator=LOCATOR, outcome=ResolutionOutcome.NO_MANIFEST))
        assert data["manifest"] is None
        assert data["dependencies"] == []
        assert len(data["searched_files"]) == 8
