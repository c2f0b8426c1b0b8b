"""Turn a user-supplied GitHub URL into an owner/repo locator."""
from __future__ import annotations

import re
from dataclasses import dataclass

from errors import InvalidLocator

_GITHUB_URL_RE = re.compile(r"github\.com[/:]([^/]+)/([^/#?]+)")


@dataclass(frozen=True)
class RepoLocator:
    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_github_url(url: str) -> RepoLocator:
    """Parse https, scp-style and bare ``github.com/owner/repo`` locators.

    Raises:
        InvalidLocator: When no owner/repo pair can be found.
    """
    if not isinstance(url, str):
        raise InvalidLocator("Invalid GitHub URL format")
    match = _GITHUB_URL_RE.search(url.strip())
    if not match:
        raise InvalidLocator("Invalid GitHub URL format")
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not owner or not repo:
        raise InvalidLocator("Invalid GitHub URL format")
    return RepoLocator(owner=owner, repo=repo)
