"""Repository fetching for documentation merge runs."""

from .manager import RepositoryFetcher, clone_attempts, to_ssh_url

__all__ = ["RepositoryFetcher", "clone_attempts", "to_ssh_url"]
