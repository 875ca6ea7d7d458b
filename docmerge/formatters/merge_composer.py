"""
Merge composer for component documentation.

Replaces every resolvable demo reference in a documentation file with a
Markdown section holding the demo description, optional notes and the
fenced demo source, then writes the result to
``<output_dir>/components/<ComponentName>.md``.

Edits are computed once from the parsed references and applied in a single
left-to-right pass over the original text, so text inserted for one demo is
never matched against another reference.
"""

from pathlib import Path, PurePosixPath
from typing import List, Optional, Sequence, Tuple
import logging

from docmerge.extractors import DemoResolver, parse_demo_references
from docmerge.schemas import (
    DemoReference,
    DocumentReference,
    MergedDocument,
    RepositoryConvention,
    ResolvedDemo,
)

logger = logging.getLogger(__name__)

Edit = Tuple[DemoReference, Optional[str]]


def format_component_name(name: str) -> str:
    """
    Convert a hyphenated directory name to PascalCase.

    Example:
        >>> format_component_name("auto-complete")
        'AutoComplete'
    """
    return "".join(part[:1].upper() + part[1:] for part in name.split("-"))


def derive_component_name(
    doc_path: str,
    convention: Optional[RepositoryConvention] = None
) -> Optional[str]:
    """
    Derive the component name for a documentation path.

    Conventions whose marker is ``src`` take the directory right after
    ``src``. Everything else takes the directory after ``components``, or
    the documentation file's parent directory when there is no
    ``components`` segment.

    Args:
        doc_path: Documentation path relative to the project root
        convention: Named convention in use, if any

    Returns:
        PascalCase component name, or None if none can be derived
    """
    parts = PurePosixPath(doc_path.replace("\\", "/")).parts
    directories = parts[:-1]

    if convention is not None and convention.name_marker == "src":
        if "src" not in directories:
            return None
        index = directories.index("src")
        if index + 1 >= len(directories):
            return None
        return format_component_name(directories[index + 1]) or None

    if "components" in directories:
        index = directories.index("components")
        if index + 1 < len(directories):
            return format_component_name(directories[index + 1]) or None

    if not directories:
        return None
    return format_component_name(directories[-1]) or None


def compose_demo_section(description: str, demo: ResolvedDemo) -> str:
    """
    Build the Markdown that replaces a demo reference.

    Args:
        description: Inner text of the demo tag
        demo: Resolved demo source and notes

    Returns:
        Heading, optional notes and fenced demo source
    """
    section = f"## {description}\n\n"

    if demo.sibling_notes:
        section += f"{demo.sibling_notes}\n\n"

    section += f"```{demo.language}\n"
    section += demo.source_code
    section += "\n```\n"
    return section


def apply_replacements(content: str, edits: Sequence[Edit]) -> str:
    """
    Rebuild ``content`` with each reference span swapped for its replacement.

    Args:
        content: Original documentation text
        edits: (reference, replacement) pairs in document order; a None
            replacement keeps the original span

    Returns:
        Merged text; identical to ``content`` when there are no edits
    """
    pieces: List[str] = []
    cursor = 0

    for reference, replacement in edits:
        pieces.append(content[cursor:reference.start])
        pieces.append(reference.raw_markup_span if replacement is None else replacement)
        cursor = reference.end

    pieces.append(content[cursor:])
    return "".join(pieces)


class MergeComposer:
    """Merge documentation files with their demos and write the results."""

    def __init__(
        self,
        base_path: Path,
        output_dir: Path,
        convention: Optional[RepositoryConvention] = None,
        resolver: Optional[DemoResolver] = None
    ):
        """
        Initialize merge composer.

        Args:
            base_path: Project root the documentation paths are relative to
            output_dir: Output root; files go to ``output_dir/components``
            convention: Named convention used for component naming
            resolver: Demo resolver (default: one rooted at base_path)
        """
        self.base_path = Path(base_path)
        self.output_dir = Path(output_dir)
        self.convention = convention
        self.resolver = resolver or DemoResolver(self.base_path)

    def compose(self, content: str, doc_dir: str) -> Tuple[str, int, int]:
        """
        Merge demo sources into documentation text.

        Args:
            content: Documentation text
            doc_dir: Directory of the documentation file, relative to base_path

        Returns:
            Tuple of (merged_text, resolved_count, unresolved_count)
        """
        references = parse_demo_references(content)
        if not references:
            return content, 0, 0

        edits: List[Edit] = []
        for reference in references:
            demo = self.resolver.resolve(reference, doc_dir)
            if demo is None:
                edits.append((reference, None))
            else:
                edits.append((reference, compose_demo_section(reference.description, demo)))

        resolved = sum(1 for _, replacement in edits if replacement is not None)
        return apply_replacements(content, edits), resolved, len(edits) - resolved

    def reference_for(self, doc_path: str) -> DocumentReference:
        return DocumentReference(
            source_doc_path=doc_path,
            component_name=derive_component_name(doc_path, self.convention),
        )

    def output_path_for(self, component_name: str) -> Path:
        return self.output_dir / "components" / f"{component_name}.md"

    def merge(self, doc_path: str) -> Optional[MergedDocument]:
        """
        Merge one documentation file and write it to the output root.

        Args:
            doc_path: Documentation path relative to base_path

        Returns:
            MergedDocument, or None if the document was skipped
        """
        source_file = self.base_path / doc_path

        try:
            with open(source_file, 'r', encoding='utf-8', errors='replace', newline='') as f:
                content = f.read()
        except OSError as e:
            logger.error(f"Error reading file {source_file}: {e}")
            return None

        reference = self.reference_for(doc_path)
        component_name = reference.component_name
        if not component_name:
            logger.warning(f"Could not determine component name for {doc_path}")
            return None

        doc_dir = PurePosixPath(doc_path.replace("\\", "/")).parent.as_posix()
        merged_content, resolved, unresolved = self.compose(content, doc_dir)

        output_file = self.output_path_for(component_name)
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, 'w', encoding='utf-8', newline='') as f:
                f.write(merged_content)
        except OSError as e:
            logger.error(f"Error writing to {output_file}: {e}")
            return None

        logger.info(f"Successfully generated {output_file}")

        return MergedDocument(
            component_name=component_name,
            source_doc_path=doc_path,
            output_path=str(output_file),
            content=merged_content,
            resolved_count=resolved,
            unresolved_count=unresolved,
        )
