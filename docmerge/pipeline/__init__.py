"""Merge run orchestration."""

from .output import DeclinePrompter, OverwritePrompter, prepare_output_dir
from .runner import DocumentMergePipeline, has_components_dir

__all__ = [
    "DeclinePrompter",
    "OverwritePrompter",
    "prepare_output_dir",
    "DocumentMergePipeline",
    "has_components_dir",
]
