"""Repository layout conventions."""

from .resolver import (
    FALLBACK_CANDIDATES,
    FALLBACK_GLOB_PATTERNS,
    NAMED_CONVENTIONS,
    match_named_convention,
    normalize_repo_url,
    resolve_convention,
)

__all__ = [
    "FALLBACK_CANDIDATES",
    "FALLBACK_GLOB_PATTERNS",
    "NAMED_CONVENTIONS",
    "match_named_convention",
    "normalize_repo_url",
    "resolve_convention",
]
