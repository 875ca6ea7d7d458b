"""Demo reference extraction and resolution."""

from .reference_parser import DEMO_TAG_PATTERN, parse_demo_references
from .demo_resolver import DemoResolver, candidate_paths, detect_fence_language

__all__ = [
    "DEMO_TAG_PATTERN",
    "parse_demo_references",
    "DemoResolver",
    "candidate_paths",
    "detect_fence_language",
]
