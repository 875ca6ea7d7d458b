"""
Document scanner for component documentation.

Finds one documentation file per component directory according to a
RepositoryConvention. Unknown layouts are searched by trying candidate
conventions in order and, as a last resort, by glob patterns.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional
import logging

from docmerge.config import DEFAULT_EXCLUDED_DIRS
from docmerge.conventions import resolve_convention
from docmerge.schemas import ConventionMatch, RepositoryConvention

logger = logging.getLogger(__name__)

ExcludeFn = Callable[[str], bool]

# Path segments after which a component directory name appears
COMPONENT_MARKERS = ("components", "src")


def default_exclude(dir_name: str) -> bool:
    """Reject the shared ``overview`` and ``_util`` directories."""
    return dir_name in DEFAULT_EXCLUDED_DIRS


class DocumentScanner:
    """
    Locate component documentation files under a project root.

    Paths returned by the scanner are relative to ``base_path`` and use
    forward slashes so they can be split into segments uniformly.
    """

    def __init__(self, base_path: Path, exclude: Optional[ExcludeFn] = None):
        """
        Initialize the document scanner.

        Args:
            base_path: Project root to scan
            exclude: Predicate rejecting component directory names
                (default: the convention's excluded names, or ``overview``
                and ``_util``)
        """
        self.base_path = Path(base_path)
        self._custom_exclude = exclude
        self.exclude = exclude or default_exclude

    def find_docs(
        self,
        search_dir: str,
        filename_pattern: str,
        exclude: Optional[ExcludeFn] = None
    ) -> List[str]:
        """
        Find ``<search_dir>/<component>/<filename_pattern>`` files.

        Args:
            search_dir: Directory holding one sub-directory per component
            filename_pattern: Documentation filename inside each component directory
            exclude: Predicate overriding the scanner's exclusion for this call

        Returns:
            Relative paths of existing documentation files, ordered by
            component directory name. Empty if ``search_dir`` does not exist.
        """
        exclude = exclude or self.exclude
        full_search_dir = self.base_path / search_dir

        if not full_search_dir.is_dir():
            logger.info(f"Component directory does not exist: {full_search_dir}")
            return []

        docs = []
        for item in sorted(full_search_dir.iterdir(), key=lambda p: p.name):
            if not item.is_dir() or exclude(item.name):
                continue

            if (item / filename_pattern).is_file():
                docs.append(f"{search_dir}/{item.name}/{filename_pattern}")

        logger.info(f"Found {len(docs)} documentation files in {search_dir}")
        if docs:
            logger.debug(f"Sample files: {', '.join(docs[:5])}")

        return docs

    def find_docs_for(self, convention: RepositoryConvention) -> List[str]:
        """Find documentation files for a single convention."""
        exclude = self._custom_exclude or (lambda name: name in convention.excluded_dir_names)
        return self.find_docs(convention.search_dir, convention.filename_pattern, exclude)

    def find_docs_by_glob(self, patterns: Iterable[str]) -> List[str]:
        """
        Find documentation files matching glob patterns.

        Matches are deduplicated preserving first-seen order across patterns,
        then filtered by the exclusion predicate applied to every segment
        that directly follows a ``components`` or ``src`` marker.

        Args:
            patterns: Glob patterns relative to the project root

        Returns:
            Relative paths of matching documentation files
        """
        all_docs: List[str] = []
        seen = set()

        for pattern in patterns:
            matches = sorted(
                path.relative_to(self.base_path).as_posix()
                for path in self.base_path.glob(pattern)
                if path.is_file()
            )
            for doc in matches:
                if doc not in seen:
                    seen.add(doc)
                    all_docs.append(doc)

        logger.info(f"Found {len(all_docs)} documentation files by glob")
        if all_docs:
            logger.debug(f"Sample files: {', '.join(all_docs[:5])}")

        return [doc for doc in all_docs if not self._is_excluded_path(doc)]

    def _is_excluded_path(self, doc_path: str) -> bool:
        parts = doc_path.split("/")
        for index, part in enumerate(parts[:-1]):
            if part in COMPONENT_MARKERS and index + 1 < len(parts) - 1:
                if self.exclude(parts[index + 1]):
                    return True
        return False

    def find_component_docs(self, match: ConventionMatch) -> List[str]:
        """
        Find documentation files for a resolved convention match.

        A named convention is scanned once. A fallback match tries each
        candidate in order until one yields documents, then falls back to
        the glob patterns.

        Args:
            match: Result of convention resolution

        Returns:
            Relative documentation paths (possibly empty)
        """
        if match.convention is not None:
            return self.find_docs_for(match.convention)

        for candidate in match.candidates:
            docs = self.find_docs_for(candidate)
            if docs:
                return docs

        logger.info("No documentation found in common paths, falling back to glob search")
        return self.find_docs_by_glob(match.glob_patterns)


def find_component_docs(
    base_path: Path,
    repo_url: str = "",
    exclude: Optional[ExcludeFn] = None
) -> List[str]:
    """
    Convenience function to locate component documentation for a repository.

    Args:
        base_path: Project root
        repo_url: Repository URL used to pick the layout convention
        exclude: Optional component-directory exclusion predicate

    Returns:
        Relative documentation paths

    Example:
        >>> docs = find_component_docs(Path(".docmerge-temp"), "https://github.com/ant-design/ant-design")
        >>> docs[:1]
        ['components/affix/index.zh-CN.md']
    """
    scanner = DocumentScanner(base_path, exclude=exclude)
    return scanner.find_component_docs(resolve_convention(repo_url))
