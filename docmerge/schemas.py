"""
Pydantic schemas for docmerge.

Single source of truth for the data passed between the resolver, scanner,
parser, demo resolver, composer and index builder.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import FrozenSet, List, Optional

from docmerge.config import DEFAULT_EXCLUDED_DIRS


# ============================================================================
# CONVENTION SCHEMAS
# ============================================================================

class RepositoryConvention(BaseModel):
    """Layout rule describing where a repository keeps component docs."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Convention identifier, e.g. 'ant-design-mobile'")
    search_dir: str = Field(description="Directory holding one sub-directory per component")
    filename_pattern: str = Field(description="Documentation filename inside each component directory")
    excluded_dir_names: FrozenSet[str] = Field(
        default=DEFAULT_EXCLUDED_DIRS,
        description="Component directory names to skip"
    )
    name_marker: str = Field(
        default="components",
        description="Path segment after which the component directory name appears"
    )


class ConventionMatch(BaseModel):
    """
    Outcome of convention selection.

    Either ``convention`` is set (a named layout matched the repository), or
    ``candidates`` and ``glob_patterns`` describe the fallback search.
    """
    model_config = ConfigDict(frozen=True)

    convention: Optional[RepositoryConvention] = Field(None, description="Matched named convention")
    candidates: List[RepositoryConvention] = Field(
        default_factory=list,
        description="Fallback conventions to try in order"
    )
    glob_patterns: List[str] = Field(
        default_factory=list,
        description="Last-resort glob patterns relative to the project root"
    )

    @property
    def is_fallback(self) -> bool:
        return self.convention is None


# ============================================================================
# DOCUMENT SCHEMAS
# ============================================================================

class DocumentReference(BaseModel):
    """One documentation file found in the project."""
    source_doc_path: str = Field(description="Path relative to the project root")
    component_name: Optional[str] = Field(None, description="PascalCase component name, if derivable")


class DemoReference(BaseModel):
    """An embedded ``<code src=...>`` tag inside a documentation file."""
    raw_markup_span: str = Field(description="Full matched tag, replaced verbatim")
    demo_path: str = Field(description="src attribute as written, may lack an extension")
    description: str = Field(description="Inner text of the tag")
    start: int = Field(description="Offset of the span in the documentation text")
    end: int = Field(description="Offset just past the span")


class ResolvedDemo(BaseModel):
    """Demo source located on disk for a DemoReference."""
    source_code: str = Field(description="Demo file contents")
    sibling_notes: Optional[str] = Field(None, description="Contents of the sibling .md file")
    resolved_path: str = Field(description="Path the demo was read from")
    language: str = Field(description="Fence language tag for the demo source")


class MergedDocument(BaseModel):
    """Final per-component document written to the output root."""
    component_name: str
    source_doc_path: str
    output_path: str
    content: str
    resolved_count: int = 0
    unresolved_count: int = 0


class IndexEntry(BaseModel):
    """One navigation link in the index file."""
    name: str
    relative_path: str


# ============================================================================
# RUN SCHEMAS
# ============================================================================

class MergeReport(BaseModel):
    """Summary of a merge run."""
    project_path: str
    output_dir: str
    documents_found: int = 0
    written: List[MergedDocument] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list, description="Documents that produced no output")
    unresolved_demos: int = 0
    collisions: List[str] = Field(
        default_factory=list,
        description="Component names written more than once (last write wins)"
    )
    index_path: Optional[str] = None
    cancelled: bool = False
