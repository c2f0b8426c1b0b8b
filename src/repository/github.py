"""Raw file access for GitHub repositories.

Fetches file bodies from raw.githubusercontent.com. Supports optional
authentication via the GITHUB_TOKEN environment variable so private
repositories can be inspected.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional
from urllib.parse import quote

from constants import Constants
from common.http_client import TransportError, default_headers, safe_get
from common.logging_utils import extra_context, is_debug_enabled
from errors import ManifestFetchTransportFailure

logger = logging.getLogger(__name__)


class GitHubRawClient:
    """File-fetch collaborator: one GET per (file, branch)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Raw content host (defaults to Constants.GITHUB_RAW_BASE)
            token: GitHub token (defaults to GITHUB_TOKEN env var)
            timeout: Per-call timeout (defaults to Constants.MANIFEST_REQUEST_TIMEOUT)
        """
        self.base_url = (base_url or Constants.GITHUB_RAW_BASE).rstrip("/")
        self.token = token or os.environ.get(Constants.ENV_GITHUB_TOKEN)
        self.timeout = timeout if timeout is not None else Constants.MANIFEST_REQUEST_TIMEOUT

    def _get_headers(self) -> Dict[str, str]:
        headers = default_headers("application/vnd.github.v3.raw")
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def file_url(self, owner: str, repo: str, file_name: str, branch: str) -> str:
        return f"{self.base_url}/{quote(owner)}/{quote(repo)}/{quote(branch)}/{quote(file_name)}"

    def fetch(self, owner: str, repo: str, file_name: str, branch: str) -> Optional[str]:
        """Fetch one file.

        Returns:
            The file body, or None when the file does not exist on the branch.

        Raises:
            ManifestFetchTransportFailure: On transport errors and on any
                status other than 200 and 404.
        """
        url = self.file_url(owner, repo, file_name, branch)
        try:
            res = safe_get(url, context="github", timeout=self.timeout, headers=self._get_headers())
        except TransportError as exc:
            raise ManifestFetchTransportFailure(str(exc), file_name=file_name, branch=branch) from exc

        if res.status_code == 404:
            if is_debug_enabled(logger):
                logger.debug(
                    "Manifest not found",
                    extra=extra_context(
                        event="http_response",
                        component="github",
                        outcome="not_found",
                        target=f"{owner}/{repo}@{branch}:{file_name}",
                    ),
                )
            return None
        if res.status_code != 200:
            raise ManifestFetchTransportFailure(
                f"GitHub returned HTTP {res.status_code} for {file_name} on {branch}",
                file_name=file_name,
                branch=branch,
            )
        return res.text
