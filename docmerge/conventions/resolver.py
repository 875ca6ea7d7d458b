"""
Repository convention resolution.

Known component libraries keep their per-component documentation in
different places. Each layout is described by a RepositoryConvention and
selected by matching the repository identifier. Unknown repositories get an
ordered list of candidate layouts plus last-resort glob patterns.
"""

import re
from typing import List, Optional, Tuple
import logging

from docmerge.schemas import ConventionMatch, RepositoryConvention

logger = logging.getLogger(__name__)


# (identifier substring, convention) in priority order. More specific
# identifiers come first because "/ant-design/ant-design" is a prefix of the
# mini, mobile and web3 repositories.
NAMED_CONVENTIONS: List[Tuple[str, RepositoryConvention]] = [
    (
        "/ant-design/ant-design-mini",
        RepositoryConvention(
            name="ant-design-mini",
            search_dir="src",
            filename_pattern="index.md",
            name_marker="src",
        ),
    ),
    (
        "/ant-design/ant-design-mobile",
        RepositoryConvention(
            name="ant-design-mobile",
            search_dir="src/components",
            filename_pattern="index.zh.md",
        ),
    ),
    (
        "/ant-design/ant-design-web3",
        RepositoryConvention(
            name="ant-design-web3",
            search_dir="packages/web3/src",
            filename_pattern="index.zh-CN.md",
            name_marker="src",
        ),
    ),
    (
        "/ant-design/x",
        RepositoryConvention(
            name="ant-design-x",
            search_dir="components",
            filename_pattern="index.zh-CN.md",
        ),
    ),
    (
        "/ant-design/ant-design",
        RepositoryConvention(
            name="ant-design",
            search_dir="components",
            filename_pattern="index.zh-CN.md",
        ),
    ),
]

_DOC_FILENAMES = ("index.zh-CN.md", "index.zh.md", "index.md")

FALLBACK_CANDIDATES: List[RepositoryConvention] = [
    *(
        RepositoryConvention(name="fallback", search_dir="components", filename_pattern=filename)
        for filename in _DOC_FILENAMES
    ),
    *(
        RepositoryConvention(name="fallback", search_dir="src/components", filename_pattern=filename)
        for filename in _DOC_FILENAMES
    ),
    RepositoryConvention(name="fallback", search_dir="src", filename_pattern="index.md", name_marker="src"),
]

FALLBACK_GLOB_PATTERNS: List[str] = [
    f"{root}/*/{filename}"
    for root in ("components", "src/components")
    for filename in _DOC_FILENAMES
]


def normalize_repo_url(repo_url: str) -> str:
    """Strip a trailing ``.git`` from a repository identifier."""
    return re.sub(r"\.git$", "", repo_url or "")


def match_named_convention(repo_url: str) -> Optional[RepositoryConvention]:
    """
    Return the first named convention whose identifier occurs in ``repo_url``.

    Args:
        repo_url: Repository URL or identifier (``.git`` suffix optional)

    Returns:
        Matching convention, or None for unknown repositories
    """
    normalized = normalize_repo_url(repo_url)
    for identifier, convention in NAMED_CONVENTIONS:
        if identifier in normalized:
            return convention
    return None


def resolve_convention(repo_url: str) -> ConventionMatch:
    """
    Decide how documentation files should be located for a repository.

    Args:
        repo_url: Repository URL or identifier

    Returns:
        ConventionMatch carrying either the named convention or the
        fallback candidates and glob patterns
    """
    convention = match_named_convention(repo_url)

    if convention is not None:
        logger.info(f"Using {convention.name} layout to find documentation")
        return ConventionMatch(convention=convention)

    logger.info("Unknown repository layout, trying common documentation paths")
    return ConventionMatch(
        candidates=list(FALLBACK_CANDIDATES),
        glob_patterns=list(FALLBACK_GLOB_PATTERNS),
    )
