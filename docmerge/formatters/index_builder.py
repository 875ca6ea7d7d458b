"""
Index builder for merged component documentation.

The index is built from the files actually present in
``<output_dir>/components`` rather than from the documents processed in
memory, so it only ever links to files that were written.
"""

from pathlib import Path
from typing import List, Optional
import logging

from docmerge.config import INDEX_TITLE
from docmerge.exceptions import OutputDirectoryError
from docmerge.schemas import IndexEntry

logger = logging.getLogger(__name__)


def _sort_key(entry: IndexEntry):
    # Case-insensitive first, then lowercase before uppercase, like a locale collation
    return (entry.name.casefold(), entry.name.swapcase())


class IndexBuilder:
    """Build ``index.md`` linking every merged component document."""

    def __init__(self, output_dir: Path, title: str = INDEX_TITLE):
        """
        Initialize index builder.

        Args:
            output_dir: Output root containing the ``components`` directory
            title: Heading written at the top of the index
        """
        self.output_dir = Path(output_dir)
        self.components_dir = self.output_dir / "components"
        self.index_path = self.output_dir / "index.md"
        self.title = title

    def collect_entries(self) -> List[IndexEntry]:
        """
        List index entries for the Markdown files in the components directory.

        Returns:
            Entries sorted by component name (empty if the directory is missing)
        """
        if not self.components_dir.is_dir():
            return []

        entries = [
            IndexEntry(name=path.stem, relative_path=f"./components/{path.name}")
            for path in self.components_dir.iterdir()
            if path.is_file() and path.suffix == ".md"
        ]
        entries.sort(key=_sort_key)
        return entries

    def format(self, entries: List[IndexEntry]) -> str:
        lines = [f"# {self.title}", ""]
        lines.extend(f"- [{entry.name}]({entry.relative_path})" for entry in entries)
        return "\n".join(lines) + "\n"

    def build(self) -> Optional[Path]:
        """
        Write the index file.

        Returns:
            Path to the index, or None if there was nothing to index

        Raises:
            OutputDirectoryError: If the index file cannot be written
        """
        if not self.components_dir.is_dir():
            logger.warning(f"Components directory does not exist: {self.components_dir}")
            return None

        entries = self.collect_entries()
        if not entries:
            logger.warning(f"No Markdown files found in {self.components_dir}")
            return None

        try:
            with open(self.index_path, 'w', encoding='utf-8', newline='') as f:
                f.write(self.format(entries))
        except OSError as e:
            raise OutputDirectoryError(f"Cannot write index file {self.index_path}: {e}") from e

        logger.info(f"Generated index file at {self.index_path}")
        return self.index_path


def build_index(output_dir: Path) -> Optional[Path]:
    """
    Convenience function to build the component index.

    Args:
        output_dir: Output root

    Returns:
        Path to ``index.md``, or None if no component documents exist

    Example:
        >>> index = build_index(Path("merged-docs"))
        >>> index.read_text().splitlines()[2]
        '- [Affix](./components/Affix.md)'
    """
    return IndexBuilder(output_dir).build()
