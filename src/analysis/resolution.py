"""Resolve a repository's dependencies and classify their licenses.

The resolver coordinates three collaborators:

* a file fetcher (``fetch(owner, repo, file_name, branch) -> Optional[str]``)
* a license lookup (``fetch_license(package_name) -> Optional[str]``)
* a LicenseClassifier

Candidate manifests are tried in FileKind order, each on the primary branch
and then once on the fallback branch. License lookups run concurrently in
fixed-size batches with a pause between batches to rate-limit calls to the
package index.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, Timer
from analysis.license_classifier import LicenseClassifier
from analysis.models import (
    DependencyRecord,
    LicenseStatus,
    ResolutionOutcome,
    ResolutionResult,
    order_by_category,
)
from manifests import CANDIDATE_FILES, FileKind, parse_manifest
from repository.url_normalize import RepoLocator, parse_github_url

logger = logging.getLogger(__name__)


class ManifestFetcher(Protocol):
    def fetch(self, owner: str, repo: str, file_name: str, branch: str) -> Optional[str]:
        ...


class LicenseLookup(Protocol):
    def fetch_license(self, package_name: str) -> Optional[str]:
        ...


class DependencyResolver:
    """One instance may serve many requests; no state is kept between them."""

    def __init__(
        self,
        fetcher: ManifestFetcher,
        license_lookup: LicenseLookup,
        classifier: Optional[LicenseClassifier] = None,
        *,
        candidate_files: Sequence[str] = CANDIDATE_FILES,
        branches: Optional[Tuple[str, str]] = None,
        batch_size: Optional[int] = None,
        batch_delay: Optional[float] = None,
    ):
        self.fetcher = fetcher
        self.license_lookup = license_lookup
        self.classifier = classifier or LicenseClassifier()
        self.candidate_files = tuple(candidate_files)
        self.branches = branches or (Constants.PRIMARY_BRANCH, Constants.FALLBACK_BRANCH)
        self.batch_size = max(1, int(batch_size or Constants.LICENSE_BATCH_SIZE))
        self.batch_delay = Constants.LICENSE_BATCH_DELAY_SEC if batch_delay is None else batch_delay

    async def resolve_url(self, github_url: str) -> ResolutionResult:
        """Parse the locator, then resolve. InvalidLocator is raised before any I/O."""
        locator = parse_github_url(github_url)
        return await self.resolve(locator)

    async def resolve(self, locator: RepoLocator) -> ResolutionResult:
        logger.info("Fetching dependencies for %s", locator.slug)

        found = await self.find_manifest(locator)
        if found is None:
            logger.info("No dependency files found in %s", locator.slug)
            return ResolutionResult(
                locator=locator,
                outcome=ResolutionOutcome.NO_MANIFEST,
                searched_files=self.candidate_files,
            )

        file_name, branch, content = found
        names = parse_manifest(content, file_name)
        result = ResolutionResult(
            locator=locator,
            outcome=ResolutionOutcome.FOUND,
            file_kind=FileKind.from_filename(file_name),
            branch=branch,
            searched_files=self.candidate_files,
        )
        if not names:
            logger.info("Found %s in %s but no dependencies were parsed", file_name, locator.slug)
            result.outcome = ResolutionOutcome.EMPTY_MANIFEST
            return result

        logger.info("Fetching license information for %d dependencies...", len(names))
        records = await self.lookup_licenses(names)
        result.records = order_by_category(records)
        return result

    async def find_manifest(self, locator: RepoLocator) -> Optional[Tuple[str, str, str]]:
        """First candidate manifest present in the repository.

        Returns:
            (file_name, branch, content), or None when no candidate exists.

        Raises:
            ManifestFetchTransportFailure: Propagated from the fetcher.
        """
        for file_name in self.candidate_files:
            for branch in self.branches:
                logger.debug("Trying %s on %s...", file_name, branch)
                content = await asyncio.to_thread(
                    self.fetcher.fetch, locator.owner, locator.repo, file_name, branch
                )
                if content:
                    logger.info("Using %s from branch %s", file_name, branch)
                    return file_name, branch, content
        return None

    async def lookup_licenses(self, names: List[str]) -> List[DependencyRecord]:
        """License records for ``names``, in input order.

        Each batch is awaited as a whole; a failed lookup only degrades its
        own record.
        """
        records: List[DependencyRecord] = []
        for start in range(0, len(names), self.batch_size):
            batch = names[start:start + self.batch_size]
            with Timer() as t:
                outcomes = await asyncio.gather(
                    *(asyncio.to_thread(self.license_lookup.fetch_license, name) for name in batch),
                    return_exceptions=True,
                )
            if is_debug_enabled(logger):
                logger.debug(
                    "License batch complete",
                    extra=extra_context(
                        event="batch_complete",
                        component="resolver",
                        batch_start=start,
                        batch_size=len(batch),
                        duration_ms=t.duration_ms(),
                    ),
                )
            for name, outcome in zip(batch, outcomes):
                records.append(self._record(name, outcome))

            if start + self.batch_size < len(names) and self.batch_delay > 0:
                await asyncio.sleep(self.batch_delay)
        return records

    def _record(self, name: str, outcome: object) -> DependencyRecord:
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.warning("Failed to fetch license for %s: %s", name, outcome)
            return DependencyRecord(
                name=name,
                license=None,
                status=LicenseStatus.UNAVAILABLE,
                classification=self.classifier.classify(None),
                error=str(outcome) or type(outcome).__name__,
            )
        license_str = outcome if isinstance(outcome, str) and outcome else None
        return DependencyRecord(
            name=name,
            license=license_str,
            status=LicenseStatus.DECLARED if license_str else LicenseStatus.ABSENT,
            classification=self.classifier.classify(license_str),
        )
