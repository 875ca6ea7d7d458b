"""
Pipeline runner that orchestrates a documentation merge run.

This module coordinates:
1. Output root preparation (with overwrite confirmation)
2. Documentation discovery
3. Per-document demo merging
4. Index generation
"""

import os
from pathlib import Path
from typing import List, Optional, Sequence
import logging

from docmerge.config import DEFAULT_REPO_URL
from docmerge.conventions import match_named_convention
from docmerge.formatters import IndexBuilder, MergeComposer
from docmerge.pipeline.output import OverwritePrompter, prepare_output_dir
from docmerge.scanners import find_component_docs
from docmerge.schemas import MergeReport

logger = logging.getLogger(__name__)


def has_components_dir(project_path: Path) -> bool:
    """Check whether a project has a ``components`` or ``src/components`` directory."""
    project_path = Path(project_path)
    return (project_path / "components").is_dir() or (project_path / "src" / "components").is_dir()


class DocumentMergePipeline:
    """Merge every component document of a project into the output root."""

    def __init__(
        self,
        project_path: Path,
        output_dir: Path,
        repo_url: str = DEFAULT_REPO_URL,
        doc_paths: Optional[Sequence[str]] = None,
        auto_confirm: bool = False,
        prompter: Optional[OverwritePrompter] = None,
    ):
        """
        Initialize the merge pipeline.

        Args:
            project_path: Project root containing the documentation
            output_dir: Output root for merged documents and the index
            repo_url: Repository URL used to pick the layout convention
            doc_paths: Explicit documentation paths (default: scan the project)
            auto_confirm: Overwrite an existing output root without asking
            prompter: Asked before overwriting when auto_confirm is off
        """
        self.project_path = Path(project_path)
        self.output_dir = Path(output_dir)
        self.repo_url = repo_url
        self.doc_paths = list(doc_paths) if doc_paths else None
        self.auto_confirm = auto_confirm
        self.prompter = prompter

    def _relative_doc_paths(self, doc_paths: Sequence[str]) -> List[str]:
        relative = []
        for doc_path in doc_paths:
            path = Path(doc_path)
            if path.is_absolute():
                path = Path(os.path.relpath(path.resolve(), self.project_path.resolve()))
            relative.append(path.as_posix())
        return relative

    def discover_documents(self) -> List[str]:
        """
        Return the documentation paths to merge, relative to the project root.

        Explicit paths win over scanning; absolute explicit paths are made
        relative to the project root.
        """
        if self.doc_paths:
            return self._relative_doc_paths(self.doc_paths)
        return find_component_docs(self.project_path, self.repo_url)

    def run(self) -> MergeReport:
        """
        Run the merge.

        Returns:
            MergeReport describing what was written, skipped and indexed

        Raises:
            OutputDirectoryError: If the output root cannot be prepared
        """
        report = MergeReport(project_path=str(self.project_path), output_dir=str(self.output_dir))

        if not prepare_output_dir(self.output_dir, self.auto_confirm, self.prompter):
            report.cancelled = True
            return report

        doc_paths = self.discover_documents()
        report.documents_found = len(doc_paths)

        if not doc_paths:
            logger.warning("No component documentation found, check the project path or the documentation paths")
            return report

        logger.info(f"Found {len(doc_paths)} component documentation files")

        composer = MergeComposer(
            base_path=self.project_path,
            output_dir=self.output_dir,
            convention=match_named_convention(self.repo_url),
        )

        written_by_name = {}
        for doc_path in doc_paths:
            logger.info(f"Processing {doc_path}...")
            try:
                merged = composer.merge(doc_path)
            except OSError as e:
                logger.error(f"Error processing {doc_path}: {e}")
                merged = None

            if merged is None:
                report.skipped.append(doc_path)
                continue

            previous = written_by_name.get(merged.component_name)
            if previous is not None:
                logger.warning(
                    f"{doc_path} overwrites {merged.component_name}.md previously generated from {previous}"
                )
                report.collisions.append(merged.component_name)
                report.written = [doc for doc in report.written if doc.component_name != merged.component_name]

            written_by_name[merged.component_name] = doc_path
            report.written.append(merged)
            report.unresolved_demos += merged.unresolved_count

        index_path = IndexBuilder(self.output_dir).build()
        report.index_path = str(index_path) if index_path else None

        logger.info(f"Finished processing all files. Merged docs are in {self.output_dir}")
        return report
