"""Output generation: merged component documents and the index."""

from .merge_composer import (
    MergeComposer,
    apply_replacements,
    compose_demo_section,
    derive_component_name,
    format_component_name,
)
from .index_builder import IndexBuilder, build_index

__all__ = [
    "MergeComposer",
    "apply_replacements",
    "compose_demo_section",
    "derive_component_name",
    "format_component_name",
    "IndexBuilder",
    "build_index",
]
