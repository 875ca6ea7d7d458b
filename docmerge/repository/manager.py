"""Repository fetching with branch and transport fallbacks."""

import shutil
from pathlib import Path
from typing import List, Optional, Tuple
import logging

import git

from docmerge.config import DEFAULT_BRANCH, FALLBACK_BRANCH, TEMP_DIR_NAME
from docmerge.exceptions import RepositoryFetchError

logger = logging.getLogger(__name__)

HTTPS_GITHUB_PREFIX = "https://github.com/"
SSH_GITHUB_PREFIX = "git@github.com:"


def to_ssh_url(repo_url: str) -> str:
    """Rewrite a GitHub https URL to its ssh form (other URLs are unchanged)."""
    return repo_url.replace(HTTPS_GITHUB_PREFIX, SSH_GITHUB_PREFIX)


def clone_attempts(repo_url: str, branch: str = DEFAULT_BRANCH) -> List[Tuple[str, str]]:
    """
    List the (url, branch) pairs to try, in order.

    The default branch also falls back to ``main``; every branch falls back
    to the ssh transport.

    Args:
        repo_url: Repository URL
        branch: Requested branch

    Returns:
        Ordered list of (url, branch) attempts
    """
    ssh_url = to_ssh_url(repo_url)

    if branch == DEFAULT_BRANCH:
        attempts = [
            (repo_url, branch),
            (repo_url, FALLBACK_BRANCH),
            (ssh_url, branch),
            (ssh_url, FALLBACK_BRANCH),
        ]
    else:
        attempts = [(repo_url, branch), (ssh_url, branch)]

    # ssh rewrite is a no-op for non-GitHub URLs
    deduped = []
    for attempt in attempts:
        if attempt not in deduped:
            deduped.append(attempt)
    return deduped


class RepositoryFetcher:
    """Clone a repository into a temporary working directory."""

    def __init__(self, temp_dir: Optional[Path] = None):
        """
        Initialize repository fetcher.

        Args:
            temp_dir: Clone destination (default: ./.docmerge-temp)
        """
        self.temp_dir = Path(temp_dir) if temp_dir else Path.cwd() / TEMP_DIR_NAME

    def _reset_temp_dir(self) -> None:
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)
        self.temp_dir.mkdir(parents=True, exist_ok=True)

    def fetch(self, repo_url: str, branch: str = DEFAULT_BRANCH) -> Path:
        """
        Shallow-clone the repository, trying fallbacks until one succeeds.

        Args:
            repo_url: Git repository URL
            branch: Git branch to clone

        Returns:
            Path to the cloned repository

        Raises:
            RepositoryFetchError: If every attempt fails
        """
        errors = []

        for url, attempt_branch in clone_attempts(repo_url, branch):
            self._reset_temp_dir()
            logger.info(f"Cloning {attempt_branch} branch from {url}...")

            try:
                git.Repo.clone_from(url, self.temp_dir, branch=attempt_branch, depth=1)
            except git.GitCommandError as e:
                logger.warning(f"Clone of {url}@{attempt_branch} failed: {e}")
                errors.append(f"{url}@{attempt_branch}: {e}")
                continue

            logger.info(f"Repository downloaded to {self.temp_dir}")
            return self.temp_dir

        self.cleanup()
        raise RepositoryFetchError(
            f"Failed to clone repository {repo_url} after {len(errors)} attempt(s):\n  "
            + "\n  ".join(errors)
        )

    def cleanup(self) -> None:
        """Remove the temporary clone directory."""
        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)
            logger.info(f"Removed temporary directory {self.temp_dir}")
