"""
Demo resolver for documentation demo references.

Reads the demo source file a DemoReference points at, trying ``.tsx`` then
``.ts`` when the reference has no extension, together with an optional
sibling ``.md`` file holding notes about the demo.
"""

from pathlib import Path, PurePosixPath
from typing import Dict, List, Optional
import logging

from docmerge.schemas import DemoReference, ResolvedDemo

logger = logging.getLogger(__name__)

# Extensions tried, in order, for references written without one
DEMO_EXTENSIONS = (".tsx", ".ts")


def candidate_paths(demo_path: str) -> List[str]:
    """
    List the paths to try for a demo reference.

    Args:
        demo_path: ``src`` attribute as written in the documentation

    Returns:
        ``[demo_path]`` if it already has an extension, otherwise one path
        per entry of DEMO_EXTENSIONS
    """
    if PurePosixPath(demo_path).suffix:
        return [demo_path]
    return [f"{demo_path}{ext}" for ext in DEMO_EXTENSIONS]


def detect_fence_language(file_path: str) -> str:
    """
    Pick the code fence language for a demo file.

    Args:
        file_path: Demo file path

    Returns:
        Fence tag such as ``tsx``; falls back to the bare extension
    """
    ext_to_fence = {
        '.tsx': 'tsx',
        '.ts': 'ts',
        '.jsx': 'jsx',
        '.js': 'js',
        '.vue': 'vue',
        '.md': 'md',
    }

    suffix = PurePosixPath(file_path).suffix.lower()
    return ext_to_fence.get(suffix, suffix.lstrip('.'))


def _read_text(path: Path) -> Optional[str]:
    if not path.is_file():
        return None
    try:
        # newline='' keeps line endings exactly as they are on disk
        with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
            return f.read()
    except OSError as e:
        logger.error(f"Error reading file {path}: {e}")
        return None


class DemoResolver:
    """
    Resolve DemoReferences to demo source and notes.

    Reference paths are interpreted relative to the directory of the
    documentation file that contains them.
    """

    def __init__(self, base_path: Path):
        """
        Initialize demo resolver.

        Args:
            base_path: Project root the documentation paths are relative to
        """
        self.base_path = Path(base_path)
        self._cache: Dict[Path, Optional[str]] = {}

    def resolve(self, reference: DemoReference, doc_dir: str) -> Optional[ResolvedDemo]:
        """
        Resolve a single demo reference.

        Args:
            reference: Parsed demo reference
            doc_dir: Directory of the documentation file, relative to base_path

        Returns:
            ResolvedDemo, or None if no candidate file exists
        """
        containing_dir = self.base_path / doc_dir

        for candidate in candidate_paths(reference.demo_path):
            demo_file = containing_dir / candidate
            source_code = self._read(demo_file)
            if source_code is None:
                logger.debug(f"Demo candidate not found: {demo_file}")
                continue

            return ResolvedDemo(
                source_code=source_code,
                sibling_notes=self._read_notes(demo_file),
                resolved_path=str(demo_file),
                language=detect_fence_language(candidate),
            )

        tried = " or ".join(candidate_paths(reference.demo_path))
        logger.warning(f"Could not read file for demo: {reference.demo_path} (tried {tried})")
        return None

    def _read_notes(self, demo_file: Path) -> Optional[str]:
        notes_file = demo_file.with_suffix('.md')
        if notes_file == demo_file:
            return None

        # Empty notes are treated the same as missing ones
        return self._read(notes_file) or None

    def _read(self, path: Path) -> Optional[str]:
        if path not in self._cache:
            self._cache[path] = _read_text(path)
        return self._cache[path]
