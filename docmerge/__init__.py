"""
docmerge - merge component documentation with its demo sources.

Main Components:
- Conventions: pick where a repository keeps its component docs
- Scanners: find one documentation file per component
- Extractors: parse <code src="..."> demo references and read demo files
- Formatters: write merged component documents and the index
- Pipeline: orchestrate a run end to end

Usage:
    from pathlib import Path
    from docmerge import DocumentMergePipeline

    pipeline = DocumentMergePipeline(
        project_path=Path("ant-design"),
        output_dir=Path("merged-docs"),
        repo_url="https://github.com/ant-design/ant-design",
        auto_confirm=True,
    )
    report = pipeline.run()
"""

__version__ = "0.1.0"

from .schemas import (
    RepositoryConvention,
    ConventionMatch,
    DocumentReference,
    DemoReference,
    ResolvedDemo,
    MergedDocument,
    IndexEntry,
    MergeReport,
)
from .pipeline import DocumentMergePipeline

__all__ = [
    "DocumentMergePipeline",
    "RepositoryConvention",
    "ConventionMatch",
    "DocumentReference",
    "DemoReference",
    "ResolvedDemo",
    "MergedDocument",
    "IndexEntry",
    "MergeReport",
]
